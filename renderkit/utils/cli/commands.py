# -*- coding: utf-8 -*-
"""
commands

Click command factories for the renderkit CLI.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

from typing import Any, Optional, Sequence

import click
from jinja2 import TemplateNotFound

from ...core.exceptions import ControllerImportError, RenderKitError
from ...core.renderer import Renderer
from ...core.templates.service import get_template_service
from .loader import ControllerLoader


class RenderCommand:
    """Produce the `render` command printing a template rendered out of band."""

    def __init__(self, loader: ControllerLoader) -> None:
        """Store the loader used to resolve controller references."""
        self._loader = loader

    def execute(
        self,
        controller: str,
        template: Optional[str],
        local: Sequence[str],
        assign: Sequence[str],
        layout: Optional[str],
        no_layout: bool,
        fmt: Optional[str],
        variant: Optional[str],
        method: Optional[str],
        https: Optional[bool],
        host: Optional[str],
        templates_dir: Sequence[str],
    ) -> None:
        """Render ``template`` for ``controller`` and echo the result."""
        try:
            controller_cls = self._loader.load(controller)
        except ControllerImportError as error:
            click.secho(str(error), fg="red", err=True)
            raise click.exceptions.Exit(1)

        service = get_template_service()
        for directory in templates_dir:
            service.add_template_directory(directory)

        renderer = Renderer.for_controller(controller_cls)
        overrides = self._build_env(method=method, https=https, host=host)
        if overrides:
            renderer = renderer.new(overrides)

        options: dict[str, Any] = {
            "locals": self._parse_pairs(local, "--local"),
            "assigns": self._parse_pairs(assign, "--assign"),
            "format": fmt,
            "variant": variant,
        }
        if no_layout:
            options["layout"] = False
        elif layout:
            options["layout"] = layout
        try:
            if template is None:
                output = renderer.render(**options)
            else:
                output = renderer.render(template, **options)
        except (TemplateNotFound, RenderKitError, ValueError) as error:
            click.secho(f"Rendering failed: {error}", fg="red", err=True)
            raise click.exceptions.Exit(1)
        click.echo(output)

    def to_click_command(self) -> click.Command:
        """Return a Click command configured for out-of-band rendering."""
        return click.Command(
            name="render",
            callback=self.execute,
            params=[
                click.Argument(["controller"], required=True),
                click.Argument(["template"], required=False),
                click.Option(["--local", "local"], multiple=True, help="Template local as KEY=VALUE"),
                click.Option(["--assign", "assign"], multiple=True, help="Template assign as KEY=VALUE"),
                click.Option(["--layout"], help="Layout template name"),
                click.Option(["--no-layout"], is_flag=True, help="Render without any layout"),
                click.Option(["--format", "fmt"], help="Template format, e.g. html or txt"),
                click.Option(["--variant"], help="Template variant, e.g. phone"),
                click.Option(["--method"], help="HTTP method of the synthetic request"),
                click.Option(
                    ["--https/--no-https"],
                    default=None,
                    help="Mark the synthetic request as secure",
                ),
                click.Option(["--host"], help="Host name of the synthetic request"),
                click.Option(
                    ["--templates-dir", "templates_dir"],
                    multiple=True,
                    type=click.Path(file_okay=False),
                    help="Extra template directory to search",
                ),
            ],
            help="Render a controller template without an HTTP request.",
        )

    @staticmethod
    def _build_env(
        *, method: Optional[str], https: Optional[bool], host: Optional[str]
    ) -> dict[str, Any]:
        env: dict[str, Any] = {}
        if method:
            env["method"] = method
        if https is not None:
            env["https"] = https
        if host:
            env["http_host"] = host
        return env

    @staticmethod
    def _parse_pairs(pairs: Sequence[str], option: str) -> dict[str, str]:
        parsed: dict[str, str] = {}
        for pair in pairs:
            key, sep, value = pair.partition("=")
            if not sep or not key:
                raise click.BadParameter(f"expected KEY=VALUE, got '{pair}'", param_hint=option)
            parsed[key] = value
        return parsed


# The End
