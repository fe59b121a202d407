# -*- coding: utf-8 -*-
"""
example.app

Example FastAPI application serving ``PagesController``.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

from fastapi import FastAPI

from .controllers import PagesController


def create_app() -> FastAPI:
    """Return a FastAPI application with the example routes mounted."""

    app = FastAPI(title="renderkit example")
    app.include_router(PagesController.router)
    return app


app = create_app()

__all__ = ["app", "create_app"]

# The End
