# -*- coding: utf-8 -*-
"""
conf

Runtime configuration utilities for the renderkit package.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from threading import RLock
from typing import Callable, Mapping


logger = logging.getLogger(__name__)


@dataclass
class RenderKitSettings:
    """Container for rendering defaults derived from environment variables."""

    http_host: str = "example.org"
    https: bool = False
    method: str = "get"
    script_name: str = ""
    default_format: str = "html"
    templates_dir: Path = field(default_factory=lambda: Path.cwd() / "templates")
    layouts_dir: str = "layouts"

    def __post_init__(self) -> None:
        """Normalise values that may arrive as loosely typed input."""
        self.http_host = self.http_host.strip() or "example.org"
        self.method = self.method.strip() or "get"
        self.script_name = self._normalize_script_name(self.script_name)
        self.default_format = self.default_format.strip().lstrip(".") or "html"
        if not isinstance(self.templates_dir, Path):
            self.templates_dir = Path(str(self.templates_dir))
        self.layouts_dir = self.layouts_dir.strip("/") or "layouts"

    @classmethod
    def from_env(
        cls,
        env: Mapping[str, str] | None = None,
        *,
        prefix: str = "RENDERKIT_",
    ) -> "RenderKitSettings":
        """Build a settings instance from environment variables."""
        source = env if env is not None else os.environ
        data = {key[len(prefix) :]: value for key, value in source.items() if key.startswith(prefix)}
        templates_dir = data.get("TEMPLATES_DIR") or (Path.cwd() / "templates")
        return cls(
            http_host=data.get("HTTP_HOST") or "example.org",
            https=cls._to_bool(data.get("HTTPS"), default=False),
            method=data.get("METHOD") or "get",
            script_name=data.get("SCRIPT_NAME") or "",
            default_format=data.get("DEFAULT_FORMAT") or "html",
            templates_dir=Path(templates_dir),
            layouts_dir=data.get("LAYOUTS_DIR") or "layouts",
        )

    @staticmethod
    def _to_bool(value: str | None, *, default: bool = False) -> bool:
        """Return a boolean parsed from ``value`` with a ``default`` fallback."""

        if value is None:
            return default
        normalized = value.strip().lower()
        if normalized in {"1", "true", "yes", "on"}:
            return True
        if normalized in {"0", "false", "no", "off"}:
            return False
        logger.warning("Ignoring unrecognised boolean setting value '%s'.", value)
        return default

    @staticmethod
    def _normalize_script_name(value: str) -> str:
        """Return ``value`` with a single leading slash and no trailing one."""
        stripped = value.strip().strip("/")
        if not stripped:
            return ""
        return "/" + stripped


class SettingsManager:
    """Central storage for the active ``RenderKitSettings`` instance."""

    def __init__(self, initial: RenderKitSettings | None = None) -> None:
        """Prepare storage with an optional preconfigured ``initial`` settings."""

        self._lock = RLock()
        self._settings = initial
        self._callbacks: list[Callable[[RenderKitSettings], None]] = []

    def configure(self, settings: RenderKitSettings) -> None:
        """Install a new settings instance and notify observers."""
        with self._lock:
            self._settings = settings
            for callback in list(self._callbacks):
                callback(settings)

    def current(self) -> RenderKitSettings:
        """Return the active settings, lazily initializing from the environment."""
        with self._lock:
            if self._settings is None:
                self._settings = RenderKitSettings.from_env()
            return self._settings

    def reset(self) -> None:
        """Forget the active settings so the next lookup re-reads the environment."""
        with self._lock:
            self._settings = None

    def register(self, callback: Callable[[RenderKitSettings], None]) -> None:
        """Register a callback invoked whenever settings change."""
        with self._lock:
            self._callbacks.append(callback)

    def unregister(self, callback: Callable[[RenderKitSettings], None]) -> None:
        """Remove a previously registered settings change callback if present."""
        with self._lock:
            if callback in self._callbacks:
                self._callbacks.remove(callback)


_settings_manager = SettingsManager()


def configure(settings: RenderKitSettings) -> None:
    """Public entry point to install application specific settings."""
    _settings_manager.configure(settings)


def current_settings() -> RenderKitSettings:
    """Return the active settings instance used by renderkit components."""
    return _settings_manager.current()


def reset_settings() -> None:
    """Drop the active settings instance."""
    _settings_manager.reset()


def register_settings_observer(callback: Callable[[RenderKitSettings], None]) -> None:
    """Subscribe to configuration changes for global singletons."""
    _settings_manager.register(callback)


def unregister_settings_observer(callback: Callable[[RenderKitSettings], None]) -> None:
    """Unsubscribe from configuration changes previously registered."""
    _settings_manager.unregister(callback)


__all__ = [
    "RenderKitSettings",
    "SettingsManager",
    "configure",
    "current_settings",
    "register_settings_observer",
    "reset_settings",
    "unregister_settings_observer",
]


# The End
