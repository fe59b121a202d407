# -*- coding: utf-8 -*-
"""
test_cli

Tests for the renderkit command line interface.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

import pytest
from click.testing import CliRunner

from renderkit.core.exceptions import ControllerImportError
from renderkit.utils.cli import cli
from renderkit.utils.cli.loader import ControllerLoader


class TestRenderCommand:
    """Render example templates from the command line."""

    def test_render_with_locals_and_layout(self) -> None:
        """Locals reach the template and the controller layout is applied."""

        runner = CliRunner()

        result = runner.invoke(
            cli,
            ["render", "example.controllers:PagesController", "greeting", "--local", "name=Ada"],
        )

        assert result.exit_code == 0, result.output
        assert "Hello, Ada" in result.output
        assert "<!DOCTYPE html>" in result.output
        assert "http://example.org/receipt" in result.output

    def test_render_with_environment_overrides(self) -> None:
        """Host and HTTPS flags change the synthetic request."""

        runner = CliRunner()

        result = runner.invoke(
            cli,
            [
                "render",
                "example.controllers:PagesController",
                "greeting",
                "--local",
                "name=Ada",
                "--variant",
                "phone",
                "--no-layout",
                "--https",
                "--host",
                "shop.test",
            ],
        )

        assert result.exit_code == 0, result.output
        assert result.output.startswith("<p>Hello, Ada!")
        assert "https://shop.test/receipt" in result.output

    def test_missing_template_exits_with_error(self) -> None:
        """Rendering failures are reported with status 1."""

        runner = CliRunner()

        result = runner.invoke(
            cli, ["render", "example.controllers:PagesController", "nope"]
        )

        assert result.exit_code == 1
        assert "Rendering failed" in result.output

    def test_unknown_controller_exits_with_error(self) -> None:
        """Import failures are reported with status 1."""

        runner = CliRunner()

        result = runner.invoke(cli, ["render", "example.controllers:Missing", "greeting"])

        assert result.exit_code == 1
        assert "Cannot import controller" in result.output

    def test_malformed_local_is_rejected(self) -> None:
        """``--local`` values must be ``KEY=VALUE`` pairs."""

        runner = CliRunner()

        result = runner.invoke(
            cli,
            ["render", "example.controllers:PagesController", "greeting", "--local", "oops"],
        )

        assert result.exit_code == 2
        assert "KEY=VALUE" in result.output


class TestControllerLoader:
    """Validate ``module:attribute`` resolution."""

    def test_load_nested_attribute(self) -> None:
        """Dotted attribute paths are followed."""

        loaded = ControllerLoader().load("renderkit.core.renderer:Renderer.for_controller")

        assert callable(loaded)

    @pytest.mark.parametrize(
        "reference", ["renderkit", "renderkit.nope:Thing", "renderkit:Nope", ":Renderer"]
    )
    def test_invalid_references(self, reference: str) -> None:
        """Malformed or unknown references raise ``ControllerImportError``."""

        with pytest.raises(ControllerImportError):
            ControllerLoader().load(reference)


# The End
