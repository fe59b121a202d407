# -*- coding: utf-8 -*-
"""
example.controllers

Example controllers rendering pages for HTTP requests and out of band.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

from pathlib import Path

from fastapi.templating import Jinja2Templates

from renderkit import Controller

EXAMPLE_TEMPLATES_DIR = Path(__file__).resolve().parent / "templates"


class PagesController(Controller):
    """Serve the example greeting and receipt pages."""

    templates = Jinja2Templates(directory=str(EXAMPLE_TEMPLATES_DIR))
    layout = "application"

    async def greeting(self) -> dict[str, object]:
        """Greet the visitor named in the query string."""

        name = self.request.query_params.get("name", "stranger")
        return {"name": name}

    def receipt(self) -> str:
        """Return a plain text receipt without a layout."""

        return self.render_to_string(
            "receipt", format="txt", layout=False, locals={"items": ["tea", "cake"]}
        )


PagesController.route("/", "greeting", name="greeting")
PagesController.route("/receipt", "receipt", name="receipt")


__all__ = ["EXAMPLE_TEMPLATES_DIR", "PagesController"]

# The End
