# -*- coding: utf-8 -*-
"""
test_request

Unit tests for building Starlette requests from synthetic environments.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

import pytest
from fastapi import APIRouter

from renderkit.core.environment import ENV_SCOPE_KEY, ROUTES_KEY, EnvironmentBuilder
from renderkit.core.request import RequestFactory, build_request


def _env(**overrides: object) -> dict[str, object]:
    defaults = {"http_host": "example.org", "https": False, "method": "get", "script_name": ""}
    return EnvironmentBuilder.normalize(overrides, defaults)


class TestRequestFactory:
    """Validate the scope derived from an environment."""

    def test_default_environment_builds_plain_get(self) -> None:
        """Defaults describe an insecure GET to ``example.org``."""

        request = build_request(_env())

        assert request.method == "GET"
        assert request.url.scheme == "http"
        assert request.url.hostname == "example.org"
        assert request.url.path == "/"
        assert request.scope["server"] == ("example.org", 80)

    def test_secure_post_with_port(self) -> None:
        """Aliases and explicit ports flow into the scope."""

        request = build_request(_env(method="post", https=True, http_host="shop.test:8443"))

        assert request.method == "POST"
        assert request.url.scheme == "https"
        assert request.scope["server"] == ("shop.test", 8443)
        assert str(request.base_url) == "https://shop.test:8443/"

    def test_secure_default_port(self) -> None:
        """HTTPS without an explicit port uses 443."""

        scope = RequestFactory().build_scope(_env(https=True))

        assert scope["server"] == ("example.org", 443)

    def test_path_query_and_root_path(self) -> None:
        """CGI path variables populate the matching scope entries."""

        request = build_request(
            _env(script_name="/app", path_info="/cards/7", query_string="page=2")
        )

        assert request.scope["root_path"] == "/app"
        assert request.scope["path"] == "/cards/7"
        assert request.query_params["page"] == "2"

    def test_http_keys_become_headers(self) -> None:
        """``HTTP_*`` and content keys are exposed as request headers."""

        request = build_request(
            _env(
                http_accept_language="de",
                content_type="application/json",
                content_length="2",
            )
        )

        assert request.headers["accept-language"] == "de"
        assert request.headers["content-type"] == "application/json"
        assert request.headers["content-length"] == "2"
        assert request.headers["host"] == "example.org"

    def test_router_is_attached(self) -> None:
        """The routing table in the environment becomes the scope router."""

        router = APIRouter()
        env = _env()
        env[ROUTES_KEY] = router

        request = build_request(env)

        assert request.scope["router"] is router

    def test_request_env_is_a_private_copy(self) -> None:
        """The request never shares the caller's environment mapping."""

        env = _env()
        request = build_request(env)
        request.scope[ENV_SCOPE_KEY]["EXTRA"] = "value"

        assert "EXTRA" not in env
        assert request.scope[ENV_SCOPE_KEY]["HTTP_HOST"] == "example.org"

    def test_internationalised_host_is_encoded_as_punycode(self) -> None:
        """A non Latin-1 host name reaches the request in its ASCII form."""

        request = build_request(_env(http_host="пример.рф:8080"))

        assert request.headers["host"] == "xn--e1afmkfd.xn--p1ai:8080"
        assert request.url.hostname == "xn--e1afmkfd.xn--p1ai"
        assert request.scope["server"] == ("пример.рф", 8080)

    def test_non_latin_header_values_fall_back_to_utf8(self) -> None:
        """Other header values outside Latin-1 are sent as UTF-8 bytes."""

        scope = RequestFactory().build_scope(_env(http_x_greeting="привет"))

        assert (b"x-greeting", "привет".encode("utf-8")) in scope["headers"]

    def test_non_numeric_host_suffix_is_kept(self) -> None:
        """Only a numeric suffix is split off the host as a port."""

        scope = RequestFactory().build_scope(_env(http_host="host:abc"))

        assert scope["server"] == ("host:abc", 80)

    def test_invalid_server_port_uses_scheme_default(self) -> None:
        """A non-numeric ``SERVER_PORT`` falls back to the scheme port."""

        scope = RequestFactory().build_scope(
            _env(http_host=None, server_name="fallback.test", server_port="abc", https=True)
        )

        assert scope["server"] == ("fallback.test", 443)

    def test_numeric_server_port_is_used(self) -> None:
        """``SERVER_PORT`` applies when the host carries no port."""

        scope = RequestFactory().build_scope(
            _env(http_host=None, server_name="fallback.test", server_port="8081")
        )

        assert scope["server"] == ("fallback.test", 8081)

    @pytest.mark.asyncio
    async def test_input_is_served_as_body(self) -> None:
        """The ``wsgi.input`` entry is returned as the request body."""

        request = build_request(_env(**{"wsgi.input": "payload"}))

        assert await request.body() == b"payload"

    @pytest.mark.asyncio
    async def test_bytes_input_is_served_verbatim(self) -> None:
        """Binary input is not re-encoded."""

        request = build_request(_env(**{"wsgi.input": b"\x00\x01"}))

        assert await request.body() == b"\x00\x01"


# The End
