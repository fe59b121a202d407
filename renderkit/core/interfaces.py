# -*- coding: utf-8 -*-
"""
interfaces

Capability protocols a controller class must satisfy to be rendered out of band.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

from typing import Any, Mapping, Protocol, runtime_checkable


@runtime_checkable
class RenderTarget(Protocol):
    """Controller instance bound to a synthetic request."""

    def render_to_string(self, *args: Any, **kwargs: Any) -> str:
        """Render a template using the bound request and return the text."""


@runtime_checkable
class HostDescriptor(Protocol):
    """Controller class able to produce request-bound instances."""

    def defaults(self) -> Mapping[str, Any]:
        """Return the baseline environment for this controller."""

    def routes(self) -> Any:
        """Return the routing table attached to synthetic requests."""

    def build_with_env(self, env: Mapping[str, Any]) -> RenderTarget:
        """Return a new instance bound to a request built from ``env``."""


__all__ = ["HostDescriptor", "RenderTarget"]


# The End
