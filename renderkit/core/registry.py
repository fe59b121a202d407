# -*- coding: utf-8 -*-
"""
registry

Process-wide registry memoising one renderer per controller class.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

import logging
from threading import Lock
from typing import Any, Callable, Generic, TypeVar

from .configuration.conf import RenderKitSettings


logger = logging.getLogger(__name__)

R = TypeVar("R")


class RendererRegistry(Generic[R]):
    """Create-if-absent storage for per-controller renderers.

    Entries are keyed by controller identity. A cached renderer keeps its
    controller alive until the entry is discarded or the registry cleared.
    """

    def __init__(self, factory: Callable[[Any], R]) -> None:
        """Store the ``factory`` used to build a renderer for a controller."""

        self._factory = factory
        self._lock = Lock()
        self._entries: dict[Any, R] = {}

    def get(self, controller: Any) -> R:
        """Return the renderer for ``controller``, building it at most once."""

        entry = self._entries.get(controller)
        if entry is not None:
            return entry
        with self._lock:
            entry = self._entries.get(controller)
            if entry is None:
                logger.debug("Creating renderer for %r", controller)
                entry = self._factory(controller)
                self._entries[controller] = entry
            return entry

    def discard(self, controller: Any) -> None:
        """Forget the renderer cached for ``controller`` if any."""

        with self._lock:
            self._entries.pop(controller, None)

    def clear(self) -> None:
        """Forget every cached renderer."""

        with self._lock:
            self._entries.clear()

    def handle_settings_change(self, settings: RenderKitSettings) -> None:
        """Drop cached renderers so new defaults apply on next access."""

        logger.debug("Settings changed to %r; clearing renderer registry", settings)
        self.clear()

    def __contains__(self, controller: object) -> bool:
        return controller in self._entries

    def __len__(self) -> int:
        return len(self._entries)


__all__ = ["RendererRegistry"]


# The End
