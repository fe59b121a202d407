# -*- coding: utf-8 -*-
"""
options

Typed rendering options accepted by ``Controller.render_to_string``.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any, Mapping


@dataclass(frozen=True)
class RenderOptions:
    """Options describing what to render and with which context.

    ``layout`` is ``None`` to use the controller default, ``False`` to render
    without a layout, or the name of a layout template.
    """

    template: str | None = None
    action: str | None = None
    layout: str | bool | None = None
    locals: Mapping[str, Any] = field(default_factory=dict)
    assigns: Mapping[str, Any] = field(default_factory=dict)
    format: str | None = None
    variant: str | None = None
    status: int | None = None
    inline: str | None = None
    plain: str | None = None

    @classmethod
    def coerce(cls, *args: Any, **kwargs: Any) -> "RenderOptions":
        """Build options from ``render``-style positional and keyword arguments.

        A single positional string names the template; a positional
        ``RenderOptions`` is extended with the keyword arguments.
        """

        if len(args) > 1:
            raise TypeError(
                f"render expects at most one positional argument, got {len(args)}"
            )
        if args:
            first = args[0]
            if isinstance(first, RenderOptions):
                return replace(first, **kwargs) if kwargs else first
            if isinstance(first, Mapping):
                return cls(**{**dict(first), **kwargs})
            if "template" in kwargs:
                raise TypeError("template given both positionally and by keyword")
            return cls(template=str(first), **kwargs)
        return cls(**kwargs)

    def context(self) -> dict[str, Any]:
        """Return assigns overlaid with locals as the template context."""

        context = dict(self.assigns)
        context.update(self.locals)
        return context


__all__ = ["RenderOptions"]


# The End
