# -*- coding: utf-8 -*-
"""
request

Build Starlette requests from a synthetic CGI-style environment.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

from typing import Any, Mapping

from starlette.requests import Request
from starlette.types import Message, Receive

from .environment import ENV_SCOPE_KEY, INPUT_KEY, ROUTES_KEY


DEFAULT_PORTS = {"http": 80, "https": 443}
CONTENT_KEYS = {"CONTENT_TYPE": b"content-type", "CONTENT_LENGTH": b"content-length"}


class RequestFactory:
    """Translate an environment mapping into an ASGI scope and request."""

    def build_request(self, env: Mapping[str, Any]) -> Request:
        """Return a Starlette ``Request`` backed by a private copy of ``env``."""

        scope = self.build_scope(env)
        return Request(scope, receive=self.build_receive(env.get(INPUT_KEY)))

    def build_scope(self, env: Mapping[str, Any]) -> dict[str, Any]:
        """Return the ASGI HTTP scope described by ``env``."""

        scheme = "https" if env.get("HTTPS") == "on" else "http"
        path = str(env.get("PATH_INFO") or "/")
        scope: dict[str, Any] = {
            "type": "http",
            "asgi": {"version": "3.0"},
            "http_version": "1.1",
            "method": str(env.get("REQUEST_METHOD") or "GET").upper(),
            "scheme": scheme,
            "root_path": str(env.get("SCRIPT_NAME") or ""),
            "path": path,
            "raw_path": path.encode("utf-8"),
            "query_string": str(env.get("QUERY_STRING") or "").encode("latin-1"),
            "headers": self._build_headers(env),
            "server": self._resolve_server(env, scheme),
            "client": None,
            "state": {},
            ENV_SCOPE_KEY: dict(env),
        }
        router = env.get(ROUTES_KEY)
        if router is not None:
            scope["router"] = router
        return scope

    @staticmethod
    def build_receive(body: Any) -> Receive:
        """Return an ASGI ``receive`` callable serving ``body`` once."""

        if body is None:
            payload = b""
        elif isinstance(body, bytes):
            payload = body
        else:
            payload = str(body).encode("utf-8")

        async def _receive() -> Message:
            return {"type": "http.request", "body": payload, "more_body": False}

        return _receive

    @classmethod
    def _build_headers(cls, env: Mapping[str, Any]) -> list[tuple[bytes, bytes]]:
        headers: list[tuple[bytes, bytes]] = []
        for key, value in env.items():
            if value is None:
                continue
            if key in CONTENT_KEYS:
                headers.append((CONTENT_KEYS[key], cls._encode_header_value(value)))
            elif key == "HTTP_HOST":
                headers.append((b"host", cls._encode_host(str(value))))
            elif key.startswith("HTTP_"):
                name = key[len("HTTP_") :].lower().replace("_", "-")
                headers.append((name.encode("latin-1"), cls._encode_header_value(value)))
        return headers

    @staticmethod
    def _encode_header_value(value: Any) -> bytes:
        """Encode a header value as Latin-1, or UTF-8 when it does not fit."""

        text = str(value)
        try:
            return text.encode("latin-1")
        except UnicodeEncodeError:
            return text.encode("utf-8")

    @classmethod
    def _encode_host(cls, host: str) -> bytes:
        """Encode an internationalised host name in its ASCII (punycode) form."""

        name, port = cls._split_port(host)
        try:
            encoded = name.encode("idna")
        except UnicodeError:
            return cls._encode_header_value(host)
        if port is not None:
            encoded += b":%d" % port
        return encoded

    @classmethod
    def _resolve_server(cls, env: Mapping[str, Any], scheme: str) -> tuple[str, int]:
        host, port = cls._split_port(
            str(env.get("HTTP_HOST") or env.get("SERVER_NAME") or "localhost")
        )
        if port is None and env.get("SERVER_PORT"):
            try:
                port = int(env["SERVER_PORT"])
            except (TypeError, ValueError):
                port = None
        return host, port if port is not None else DEFAULT_PORTS[scheme]

    @staticmethod
    def _split_port(host: str) -> tuple[str, int | None]:
        """Split a numeric ``:port`` suffix off ``host``; other suffixes stay."""

        if ":" in host and not host.endswith("]"):
            name, _, raw_port = host.rpartition(":")
            if raw_port.isdigit():
                return name, int(raw_port)
        return host, None


request_factory = RequestFactory()


def build_request(env: Mapping[str, Any]) -> Request:
    """Return a Starlette request for ``env`` using the shared factory."""

    return request_factory.build_request(env)


__all__ = ["RequestFactory", "build_request", "request_factory"]


# The End
