# -*- coding: utf-8 -*-
"""
example.mailer

Build e-mail bodies from controller templates without an HTTP request.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

import logging

from .controllers import PagesController


logger = logging.getLogger(__name__)


class WelcomeMailer:
    """Render the greeting page as a secure, phone-friendly e-mail body."""

    def __init__(self, host: str = "shop.example.com") -> None:
        """Prepare a renderer whose links point at ``host`` over HTTPS."""

        self._renderer = PagesController.renderer().new(
            {"http_host": host, "https": True}
        )

    def body_for(self, name: str) -> str:
        """Return the rendered greeting for ``name``."""

        logger.info("Rendering welcome mail for %s", name)
        return self._renderer.render(
            "greeting", variant="phone", locals={"name": name}
        )


__all__ = ["WelcomeMailer"]

# The End
