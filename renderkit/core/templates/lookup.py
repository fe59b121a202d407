# -*- coding: utf-8 -*-
"""
core.templates.lookup

Resolve template names from a logical name, a format and a variant.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable

from jinja2 import Environment, Template


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TemplateLookup:
    """Produce and select candidate template names.

    For ``greeting`` under prefix ``pages`` with format ``html`` and variant
    ``phone`` the candidates are, in order::

        pages/greeting+phone.html
        pages/greeting.html
        greeting+phone.html
        greeting.html
        greeting
    """

    prefixes: tuple[str, ...] = ()
    format: str = "html"
    variant: str | None = None

    def candidates(self, name: str) -> list[str]:
        """Return the ordered, de-duplicated candidate names for ``name``."""

        bases = [name] if "/" in name else [
            f"{prefix.strip('/')}/{name}" for prefix in self.prefixes if prefix
        ] + [name]
        names: list[str] = []
        for base in bases:
            names.extend(self._expand(base))
        names.append(name)
        return list(dict.fromkeys(names))

    def select(self, env: Environment, name: str) -> Template:
        """Return the first candidate template ``env`` can load.

        Raises ``jinja2.TemplatesNotFound`` when no candidate exists.
        """

        names = self.candidates(name)
        logger.debug("Resolving template '%s' via candidates %s", name, names)
        return env.select_template(names)

    def _expand(self, base: str) -> Iterable[str]:
        suffix = f".{self.format}"
        if base.endswith(suffix):
            stem = base[: -len(suffix)]
        else:
            stem = base
        if self.variant:
            yield f"{stem}+{self.variant}{suffix}"
        yield f"{stem}{suffix}"


__all__ = ["TemplateLookup"]


# The End
