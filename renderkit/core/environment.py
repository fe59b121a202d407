# -*- coding: utf-8 -*-
"""
environment

Construction of the synthetic request environment used for out-of-band rendering.

The environment is a CGI-style mapping (``REQUEST_METHOD``, ``HTTP_HOST``,
``SCRIPT_NAME`` ...) plus a few namespaced structural keys such as
``wsgi.input``. Callers may use friendlier spellings: keys are upper-cased
unless they carry a namespace separator, ``method`` becomes
``REQUEST_METHOD`` and a boolean ``https`` becomes ``"on"``/``"off"``.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

from enum import Enum
from types import MappingProxyType
from typing import Any, Hashable, Mapping

from .configuration.conf import RenderKitSettings, current_settings


ROUTES_KEY = "renderkit.routes"
INPUT_KEY = "wsgi.input"
CONTROLLER_KEY = "renderkit.controller"
ENV_SCOPE_KEY = "renderkit.env"

METHOD_ALIAS = "METHOD"
HTTPS_KEY = "HTTPS"

STRUCTURAL_SEPARATOR = "."


class EnvironmentBuilder:
    """Merge environment overrides over defaults with key normalisation."""

    @classmethod
    def normalize(
        cls,
        overrides: Mapping[Hashable, Any] | None,
        base: Mapping[Hashable, Any] | None,
    ) -> dict[str, Any]:
        """Return ``base`` merged with ``overrides`` after key normalisation.

        Neither input mapping is modified. Values are stored verbatim apart
        from the ``METHOD`` and ``HTTPS`` aliases.
        """

        env = cls.normalize_keys(base or {})
        env.update(cls.normalize_keys(overrides or {}))
        return env

    @classmethod
    def normalize_keys(cls, env: Mapping[Hashable, Any]) -> dict[str, Any]:
        """Return a folded copy of ``env`` with its aliases resolved."""

        normalized = cls.http_header_format(env)
        cls.handle_method_key(normalized)
        cls.handle_https_key(normalized)
        return normalized

    @classmethod
    def http_header_format(cls, env: Mapping[Hashable, Any]) -> dict[str, Any]:
        """Return a copy of ``env`` with every key folded to its canonical form."""

        return {cls.fold_key(key): value for key, value in env.items()}

    @staticmethod
    def fold_key(key: Hashable) -> str:
        """Upper-case symbolic keys and keep namespaced structural keys as is."""

        if isinstance(key, Enum):
            key = key.name
        text = str(key)
        if STRUCTURAL_SEPARATOR in text:
            return text
        return text.upper()

    @staticmethod
    def handle_method_key(env: dict[str, Any]) -> None:
        """Rewrite the ``METHOD`` alias into ``REQUEST_METHOD``."""

        if METHOD_ALIAS in env:
            method = env.pop(METHOD_ALIAS)
            env["REQUEST_METHOD"] = str(method).upper()

    @staticmethod
    def handle_https_key(env: dict[str, Any]) -> None:
        """Coerce the ``HTTPS`` flag into the ``on``/``off`` convention."""

        if HTTPS_KEY in env:
            env[HTTPS_KEY] = "on" if env[HTTPS_KEY] else "off"


def default_environment(settings: RenderKitSettings | None = None) -> Mapping[str, Any]:
    """Return the immutable baseline environment for ``settings``."""

    active = settings or current_settings()
    return MappingProxyType(
        {
            "http_host": active.http_host,
            "https": active.https,
            "method": active.method,
            "script_name": active.script_name,
            INPUT_KEY: "",
        }
    )


__all__ = [
    "CONTROLLER_KEY",
    "ENV_SCOPE_KEY",
    "EnvironmentBuilder",
    "INPUT_KEY",
    "ROUTES_KEY",
    "default_environment",
]


# The End
