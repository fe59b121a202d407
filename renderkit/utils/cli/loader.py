# -*- coding: utf-8 -*-
"""
loader

Resolve ``module:attribute`` controller references for the CLI.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

from importlib import import_module
from typing import Any

from ...core.exceptions import ControllerImportError


class ControllerLoader:
    """Import controller classes referenced as ``package.module:ClassName``."""

    def load(self, reference: str) -> Any:
        """Return the object named by ``reference``."""

        module_name, sep, attr_path = reference.partition(":")
        if not sep or not module_name or not attr_path:
            raise ControllerImportError(reference, "expected 'module:attribute'")
        try:
            target: Any = import_module(module_name)
        except ImportError as error:
            raise ControllerImportError(reference, str(error)) from error
        for attr in attr_path.split("."):
            try:
                target = getattr(target, attr)
            except AttributeError as error:
                raise ControllerImportError(
                    reference, f"module has no attribute '{attr}'"
                ) from error
        return target


# The End
