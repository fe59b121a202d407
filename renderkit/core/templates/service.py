# -*- coding: utf-8 -*-
"""
core.templates.service

Shared template service owning the ``Jinja2Templates`` environment.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

import logging
from pathlib import Path
from threading import RLock
from typing import Iterable

from fastapi.templating import Jinja2Templates

from ..configuration.conf import (
    RenderKitSettings,
    current_settings,
    register_settings_observer,
    unregister_settings_observer,
)


logger = logging.getLogger(__name__)


class TemplateService:
    """Manage template search paths and the cached Jinja environment."""

    def __init__(
        self,
        *,
        templates_dir: str | Path | Iterable[str | Path] | None = None,
        settings: RenderKitSettings | None = None,
    ) -> None:
        """Configure the service with template locations and settings."""

        self._settings = settings or current_settings()
        self._template_dirs = self._coerce_template_dirs(
            templates_dir or self._settings.templates_dir
        )
        self._templates: Jinja2Templates | None = None
        self._lock = RLock()
        self._observing = settings is None
        if self._observing:
            register_settings_observer(self._apply_settings)

    @property
    def template_directories(self) -> tuple[str, ...]:
        """Return template directories searched by the service."""

        return tuple(self._template_dirs)

    def get_templates(self) -> Jinja2Templates:
        """Return the cached ``Jinja2Templates`` environment."""

        with self._lock:
            if self._templates is None:
                logger.debug(
                    "Creating Jinja2 templates for directories %s", self._template_dirs
                )
                templates = Jinja2Templates(directory=list(self._template_dirs))
                templates.env.globals["settings"] = self._settings
                self._templates = templates
            return self._templates

    def _apply_settings(self, settings: RenderKitSettings) -> None:
        """Update cached configuration when global settings change."""

        with self._lock:
            self._settings = settings
            if self._templates is not None:
                self._templates.env.globals["settings"] = settings

    def close(self) -> None:
        """Stop following global settings changes."""

        if self._observing:
            unregister_settings_observer(self._apply_settings)
            self._observing = False

    def add_template_directory(self, directory: str | Path) -> None:
        """Ensure ``directory`` is part of the template search path."""

        normalized = str(directory)
        with self._lock:
            if normalized in self._template_dirs:
                return
            self._template_dirs.append(normalized)
            if self._templates is not None:
                loader = self._templates.env.loader
                if hasattr(loader, "searchpath"):
                    search_paths = list(getattr(loader, "searchpath", []))
                    if normalized not in search_paths:
                        search_paths.append(normalized)
                        loader.searchpath = search_paths  # type: ignore[attr-defined]

    @staticmethod
    def _coerce_template_dirs(
        templates_dir: str | Path | Iterable[str | Path]
    ) -> list[str]:
        """Normalise ``templates_dir`` into a mutable list of search paths."""

        if isinstance(templates_dir, (str, Path)):
            return [str(templates_dir)]
        return [str(path) for path in templates_dir]


DEFAULT_TEMPLATE_SERVICE: TemplateService | None = None


def get_template_service() -> TemplateService:
    """Return the process-wide template service, creating it on first use."""

    global DEFAULT_TEMPLATE_SERVICE
    if DEFAULT_TEMPLATE_SERVICE is None:
        DEFAULT_TEMPLATE_SERVICE = TemplateService()
    return DEFAULT_TEMPLATE_SERVICE


def set_template_service(service: TemplateService | None) -> None:
    """Replace the process-wide template service, closing the previous one."""

    global DEFAULT_TEMPLATE_SERVICE
    previous = DEFAULT_TEMPLATE_SERVICE
    DEFAULT_TEMPLATE_SERVICE = service
    if previous is not None and previous is not service:
        previous.close()


# The End
