# -*- coding: utf-8 -*-
"""conftest

Shared testing utilities for renderkit test-suite fixtures.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

import asyncio
import inspect
from pathlib import Path
from typing import Iterator

import pytest

from renderkit.core.configuration.conf import reset_settings
from renderkit.core.renderer import renderer_registry
from renderkit.core.templates import service as template_service_module


class RenderKitState:
    """Manage global renderkit singletons during tests."""

    def __init__(self) -> None:
        """Capture references to mutable singletons used by renderkit."""

        self._registry = renderer_registry
        self._template_module = template_service_module

    def reset(self) -> None:
        """Restore registry, settings, and template service to defaults."""

        self._registry.clear()
        reset_settings()
        self._template_module.set_template_service(None)


class AsyncioTestPlugin:
    """Minimal asyncio runner enabling ``async def`` tests without extras."""

    def __init__(self) -> None:
        """Configure the event-loop factory used for async test execution."""

        self._loop_factory = asyncio.new_event_loop

    def pytest_pyfunc_call(self, pyfuncitem: pytest.Function) -> bool | None:
        """Execute coroutine test functions inside a dedicated event loop."""

        if not inspect.iscoroutinefunction(pyfuncitem.obj):
            return None
        signature = inspect.signature(pyfuncitem.obj)
        kwargs = {
            name: pyfuncitem.funcargs[name]
            for name in signature.parameters
            if name in pyfuncitem.funcargs
        }
        loop = self._loop_factory()
        try:
            loop.run_until_complete(pyfuncitem.obj(**kwargs))
            loop.run_until_complete(loop.shutdown_asyncgens())
        finally:
            loop.close()
        return True


class PytestPluginRegistrar:
    """Register custom pytest plugins following project conventions."""

    def __init__(self) -> None:
        """Instantiate and expose plugin objects for registration."""

        self.asyncio_plugin = AsyncioTestPlugin()

    def configure(self, config: pytest.Config) -> None:
        """Register required plugins with the pytest plugin manager."""

        config.addinivalue_line(
            "markers", "asyncio: execute test using the built-in asyncio loop"
        )
        config.pluginmanager.register(self.asyncio_plugin, "renderkit-asyncio-plugin")


renderkit_state = RenderKitState()
_plugin_registrar = PytestPluginRegistrar()


def pytest_configure(config: pytest.Config) -> None:
    """Integrate custom plugins with pytest's plugin manager."""

    _plugin_registrar.configure(config)


@pytest.fixture(autouse=True)
def _isolated_state() -> Iterator[None]:
    """Reset renderkit singletons around every test."""

    renderkit_state.reset()
    yield
    renderkit_state.reset()


@pytest.fixture
def template_root(tmp_path: Path) -> Path:
    """Return a template directory populated with small test templates."""

    files = {
        "cards/greeting.html": "Hello, {{ name }}",
        "cards/greeting+phone.html": "Hi {{ name }}",
        "cards/badge.html": "{{ title }} / {{ name }}",
        "cards/link.html": "{{ url_for('card_detail', card_id=7) }}",
        "cards/env.html": "{{ request.method }} {{ request.url.scheme }} {{ request.url.hostname }}",
        "cards/note.txt": "note for {{ name }}",
        "shared.html": "shared {{ name }}",
        "layouts/main.html": "<main>{{ content }}</main>",
        "layouts/compact.html": "[{{ content }}]",
    }
    for name, body in files.items():
        path = tmp_path / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(body, encoding="utf-8")
    return tmp_path


__all__ = ["renderkit_state"]


# The End
