# -*- coding: utf-8 -*-
"""
renderer

Render controller templates without a live HTTP request.

A renderer is bound to a controller class and owns a fixed synthetic
environment. Every ``render`` call builds a fresh request from that
environment, instantiates the controller around it and returns the output
of ``render_to_string``::

    PagesController.renderer().render("greeting", locals={"name": "Ada"})
    PagesController.render("greeting", locals={"name": "Ada"})
    PagesController.renderer().new({"method": "post", "https": True}).render(...)

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Any, Mapping

from .configuration.conf import register_settings_observer
from .environment import ROUTES_KEY, EnvironmentBuilder
from .exceptions import MissingControllerError
from .interfaces import HostDescriptor
from .registry import RendererRegistry


logger = logging.getLogger(__name__)


class Renderer:
    """Per-controller facade exposing out-of-band ``render``."""

    def __init__(
        self,
        controller: HostDescriptor | None = None,
        env: Mapping[Any, Any] | None = None,
        *,
        defaults: Mapping[str, Any] | None = None,
    ) -> None:
        """Merge ``env`` over the controller defaults and attach its routes."""

        self._controller = controller
        if defaults is None:
            defaults = controller.defaults() if controller is not None else {}
        self._defaults: Mapping[str, Any] = MappingProxyType(dict(defaults))
        merged = EnvironmentBuilder.normalize(env, self._defaults)
        if controller is not None:
            merged[ROUTES_KEY] = controller.routes()
        self._env: Mapping[str, Any] = MappingProxyType(merged)

    @classmethod
    def for_controller(cls, controller: HostDescriptor) -> "Renderer":
        """Return the memoised renderer for ``controller``."""

        return renderer_registry.get(controller)

    @property
    def controller(self) -> HostDescriptor | None:
        """Return the bound controller class."""

        return self._controller

    @property
    def defaults(self) -> Mapping[str, Any]:
        """Return the baseline environment this renderer was built from."""

        return self._defaults

    @property
    def env(self) -> Mapping[str, Any]:
        """Return the read-only environment used to build requests."""

        return self._env

    def new(self, env: Mapping[Any, Any] | None = None) -> "Renderer":
        """Return a renderer for the same controller with extra ``env`` overrides."""

        return type(self)(self._controller, env, defaults=self._defaults)

    def render(self, *args: Any, **kwargs: Any) -> str:
        """Render with ``render_to_string`` options on a fresh controller instance."""

        if self._controller is None:
            raise MissingControllerError()
        logger.debug(
            "Rendering out of band with %r (args=%r, options=%s)",
            self._controller,
            args,
            sorted(kwargs),
        )
        instance = self._controller.build_with_env(self._env)
        return instance.render_to_string(*args, **kwargs)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(controller={self._controller!r})"


renderer_registry: RendererRegistry[Renderer] = RendererRegistry(Renderer)
register_settings_observer(renderer_registry.handle_settings_change)


__all__ = ["Renderer", "renderer_registry"]


# The End
