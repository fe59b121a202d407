# -*- coding: utf-8 -*-
"""
test_template_lookup

Unit tests for template candidate resolution.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

import pytest
from jinja2 import DictLoader, Environment, TemplatesNotFound

from renderkit.core.templates.lookup import TemplateLookup


class TestTemplateLookup:
    """Validate candidate ordering and selection."""

    def test_candidates_with_prefix_and_variant(self) -> None:
        """Prefixed variant names come first and the bare name last."""

        lookup = TemplateLookup(prefixes=("pages",), format="html", variant="phone")

        assert lookup.candidates("greeting") == [
            "pages/greeting+phone.html",
            "pages/greeting.html",
            "greeting+phone.html",
            "greeting.html",
            "greeting",
        ]

    def test_explicit_path_skips_prefixes(self) -> None:
        """Names with a directory are not prefixed again."""

        lookup = TemplateLookup(prefixes=("pages",), format="txt")

        assert lookup.candidates("mail/receipt.txt") == ["mail/receipt.txt"]

    def test_select_returns_first_existing_candidate(self) -> None:
        """Selection falls back through the candidate list."""

        env = Environment(
            loader=DictLoader({"pages/greeting.html": "page", "greeting+phone.html": "phone"})
        )
        lookup = TemplateLookup(prefixes=("pages",), variant="phone")

        assert lookup.select(env, "greeting").render() == "page"

    def test_select_raises_when_nothing_matches(self) -> None:
        """Jinja's lookup error is raised unchanged."""

        env = Environment(loader=DictLoader({}))

        with pytest.raises(TemplatesNotFound):
            TemplateLookup().select(env, "missing")


# The End
