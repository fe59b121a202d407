# -*- coding: utf-8 -*-
"""
controller

Controller base class rendering Jinja2 templates for live or synthetic requests.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

import inspect
import logging
import re
from typing import Any, Awaitable, Callable, ClassVar, Mapping, Sequence

from fastapi import APIRouter, Request
from fastapi.responses import HTMLResponse, Response
from fastapi.templating import Jinja2Templates
from markupsafe import Markup

from .configuration.conf import current_settings
from .environment import CONTROLLER_KEY, ENV_SCOPE_KEY, default_environment
from .exceptions import RenderKitError
from .options import RenderOptions
from .renderer import Renderer
from .request import RequestFactory, request_factory
from .templates.lookup import TemplateLookup
from .templates.service import get_template_service


logger = logging.getLogger(__name__)

_CAMEL_BOUNDARY = re.compile(r"(?<=[a-z0-9])(?=[A-Z])")


class Controller:
    """Base class for request handlers that render templates.

    Subclasses get their own ``APIRouter`` and a template prefix derived from
    the class name (``UserProfilesController`` renders from
    ``user_profiles/``) unless they declare ``router`` or
    ``controller_path`` themselves.
    """

    templates: ClassVar[Jinja2Templates | None] = None
    router: ClassVar[APIRouter | None] = None
    controller_path: ClassVar[str] = ""
    layout: ClassVar[str | None] = None
    request_factory: ClassVar[RequestFactory] = request_factory

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        if not cls.__dict__.get("controller_path"):
            cls.controller_path = cls._derive_controller_path()
        if cls.__dict__.get("router") is None:
            cls.router = APIRouter()

    def __init__(self) -> None:
        """Create an unbound controller instance."""

        self.request: Request | None = None
        self.response: Response | None = None
        self.env: dict[str, Any] = {}
        self.action_name: str | None = None

    # Host-descriptor capabilities -------------------------------------------------

    @classmethod
    def defaults(cls) -> Mapping[str, Any]:
        """Return the baseline synthetic environment for this controller."""

        return default_environment(current_settings())

    @classmethod
    def routes(cls) -> APIRouter | None:
        """Return the router attached to synthetic requests for ``url_for``."""

        return cls.router

    @classmethod
    def build_with_env(cls, env: Mapping[str, Any] | None = None) -> "Controller":
        """Return a new instance bound to a request built from ``env``."""

        instance = cls()
        instance.set_request(cls.request_factory.build_request(env or {}))
        return instance

    build_instance = build_with_env

    @classmethod
    def renderer(cls) -> Renderer:
        """Return the memoised out-of-band renderer for this controller."""

        return Renderer.for_controller(cls)

    @classmethod
    def render(cls, *args: Any, **kwargs: Any) -> str:
        """Render a template out of band through :meth:`renderer`."""

        return cls.renderer().render(*args, **kwargs)

    # Request binding ----------------------------------------------------------------

    def set_request(self, request: Request) -> None:
        """Bind ``request`` and a fresh response to this instance."""

        self.request = request
        self.env = request.scope.setdefault(ENV_SCOPE_KEY, {})
        self.env[CONTROLLER_KEY] = self
        request.scope[CONTROLLER_KEY] = self
        self.response = Response()

    async def dispatch(self, action: str, request: Request) -> Response:
        """Run ``action`` for a live ``request`` and return its response."""

        self.set_request(request)
        self.action_name = action
        logger.debug("Dispatching %s.%s for %s", type(self).__name__, action, request.url.path)
        handler = getattr(self, action, None)
        if handler is None or not callable(handler):
            raise AttributeError(
                f"{type(self).__name__} does not define action '{action}'"
            )
        result = handler()
        if inspect.isawaitable(result):
            result = await result
        if isinstance(result, Response):
            return result
        if isinstance(result, str):
            body = result
        else:
            body = self.render_to_string(action=action, assigns=result or {})
        status_code = self.response.status_code if self.response else 200
        return HTMLResponse(content=body, status_code=status_code)

    @classmethod
    def as_endpoint(cls, action: str) -> Callable[[Request], Awaitable[Response]]:
        """Return a FastAPI endpoint dispatching ``action`` on a new instance."""

        async def endpoint(request: Request) -> Response:
            return await cls().dispatch(action, request)

        endpoint.__name__ = f"{cls.__name__}_{action}"
        endpoint.__qualname__ = endpoint.__name__
        return endpoint

    @classmethod
    def route(
        cls,
        path: str,
        action: str,
        *,
        methods: Sequence[str] | None = None,
        name: str | None = None,
    ) -> None:
        """Register ``action`` on the controller router under ``path``."""

        if cls.router is None:
            raise RenderKitError(
                f"{cls.__name__} has no router; declare routes on a Controller subclass"
            )
        cls.router.add_api_route(
            path,
            cls.as_endpoint(action),
            methods=list(methods or ["GET"]),
            name=name or action,
            response_class=HTMLResponse,
            include_in_schema=False,
        )

    # Rendering ----------------------------------------------------------------------

    def get_templates(self) -> Jinja2Templates:
        """Return the templates configured on the class or the shared service."""

        return type(self).templates or get_template_service().get_templates()

    def render_to_string(self, *args: Any, **kwargs: Any) -> str:
        """Render a template with ``RenderOptions`` built from the arguments."""

        options = RenderOptions.coerce(*args, **kwargs)
        if options.status is not None and self.response is not None:
            self.response.status_code = options.status
        if options.plain is not None:
            return options.plain

        settings = current_settings()
        templates = self.get_templates()
        context = self.view_context(templates, options)
        fmt = options.format or settings.default_format

        if options.inline is not None:
            body = templates.env.from_string(options.inline).render(context)
        else:
            lookup = TemplateLookup(
                prefixes=(self.controller_path,), format=fmt, variant=options.variant
            )
            template = lookup.select(templates.env, self._template_name(options))
            body = template.render(context)

        layout = self._layout_name(options)
        if not layout:
            return body
        layout_lookup = TemplateLookup(
            prefixes=(settings.layouts_dir,), format=fmt, variant=options.variant
        )
        layout_template = layout_lookup.select(templates.env, layout)
        return layout_template.render({**context, "content": Markup(body)})

    def view_context(
        self, templates: Jinja2Templates, options: RenderOptions
    ) -> dict[str, Any]:
        """Return the template context for ``options``."""

        context: dict[str, Any] = {"request": self.request, "controller": self}
        for processor in getattr(templates, "context_processors", None) or ():
            context.update(processor(self.request))
        context.update(options.context())
        return context

    def _template_name(self, options: RenderOptions) -> str:
        name = options.template or options.action or self.action_name
        if not name:
            raise ValueError(
                "render_to_string needs a template, an action, inline or plain content"
            )
        return name

    def _layout_name(self, options: RenderOptions) -> str | None:
        if options.layout is False:
            return None
        if options.layout is None or options.layout is True:
            return type(self).layout
        return str(options.layout)

    @classmethod
    def _derive_controller_path(cls) -> str:
        name = cls.__name__
        if name.endswith("Controller") and name != "Controller":
            name = name[: -len("Controller")]
        return _CAMEL_BOUNDARY.sub("_", name).lower()


__all__ = ["Controller"]


# The End
