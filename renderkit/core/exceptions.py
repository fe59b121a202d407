# -*- coding: utf-8 -*-
"""
exceptions

Custom domain exceptions for out-of-band rendering.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations


class RenderKitError(Exception):
    """Base class for renderkit-specific exceptions."""


class MissingControllerError(RenderKitError):
    """Raised when a renderer is asked to render without a bound controller."""

    def __init__(self, detail: str | None = None) -> None:
        super().__init__(detail or "missing controller")
        self.detail = detail or "missing controller"


# Name used by the host-descriptor vocabulary.
MissingHostError = MissingControllerError


class ControllerImportError(RenderKitError):
    """Raised when a ``module:attribute`` controller reference cannot be loaded."""

    def __init__(self, reference: str, reason: str) -> None:
        super().__init__(f"Cannot import controller '{reference}': {reason}")
        self.reference = reference
        self.reason = reason


__all__ = [
    "ControllerImportError",
    "MissingControllerError",
    "MissingHostError",
    "RenderKitError",
]


# The End
