"""The WSGI application: routing, CORS headers and reply writing."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from http import HTTPStatus
from typing import Optional
from urllib.parse import parse_qs

from .middleware import apply_middleware
from .response import RespondError, respond
from .route import Route
from .router import Router

_CORS = {
    "Access-Control-Allow-Methods": "POST, PATCH, GET, OPTIONS, PUT, DELETE",
    "Access-Control-Allow-Headers": (
        "Accept, Content-Type, Content-Length, Accept-Encoding, X-CSRF-Token, Authorization"
    ),
    "Access-Control-Max-Age": "86400",
}
_TEXT = ("Content-Type", "text/plain; charset=utf-8")
_WILDCARD = re.compile(r"\{([^}]*)\}")


@dataclass
class Request:
    """An incoming request as seen by handlers."""

    method: str
    path: str
    headers: dict[str, str] = field(default_factory=dict)
    query: dict[str, list[str]] = field(default_factory=dict)
    body: bytes = b""
    path_params: dict[str, str] = field(default_factory=dict)

    def header(self, name: str, default: str = "") -> str:
        return self.headers.get(name.lower(), default)

    @classmethod
    def from_environ(cls, environ: dict) -> "Request":
        headers = {
            key.removeprefix("HTTP_").replace("_", "-").lower(): value
            for key, value in environ.items()
            if key.startswith("HTTP_") or key in ("CONTENT_TYPE", "CONTENT_LENGTH")
        }
        length = int(environ.get("CONTENT_LENGTH") or 0)
        stream = environ.get("wsgi.input")
        return cls(
            method=environ.get("REQUEST_METHOD", "GET").upper(),
            path=environ.get("PATH_INFO") or "/",
            headers=headers,
            query=parse_qs(environ.get("QUERY_STRING", "")),
            body=stream.read(length) if stream is not None and length > 0 else b"",
        )


def _compile(path: str) -> tuple[re.Pattern, int]:
    """Turn "/a/{id}/{rest...}" into a regex and a specificity score."""
    regex, pos = "", 0
    for m in _WILDCARD.finditer(path):
        regex += re.escape(path[pos:m.start()])
        name = m.group(1)
        if name.endswith("..."):
            regex += f"(?P<{name[:-3]}>.*)"
        elif name != "$":
            regex += f"(?P<{name}>[^/]+)"
        pos = m.end()
    regex += re.escape(path[pos:]) + (".*" if path.endswith("/") else "")
    return re.compile(regex + "$"), len(_WILDCARD.sub("", path))


class App:
    """A WSGI application that dispatches requests to registered handlers."""

    def __init__(self, log=None, *middlewares):
        self.log = log or (lambda *args: None)
        self.middlewares = list(middlewares)
        self.origins: Optional[list[str]] = None
        self._routes: list[Route] = []
        self._table: dict[tuple[str, str], tuple[re.Pattern, int, object]] = {}

    def enable_cors(self, origins) -> None:
        self.origins = list(origins)

    def use(self, *args) -> None:
        self.middlewares.extend(args)

    def routes(self) -> list[Route]:
        return list(self._routes)

    def router(self, prefix: str) -> Router:
        return Router(self, prefix)

    def handle_func(self, method: str, path: str, handler, *args) -> Route:
        key = (method.upper(), path)
        if key in self._table:
            raise ValueError(f"pattern {method} {path} conflicts with an existing registration")
        route = Route(method, path, handler, tuple(args))
        self._routes.append(route)
        wrapped = apply_middleware(self.middlewares, apply_middleware(args, handler))
        self._table[key] = (*_compile(path), wrapped)
        return route

    def _dispatch(self, request: Request):
        matches = [
            (method, score, handler, m.groupdict())
            for (method, _), (regex, score, handler) in self._table.items()
            if (m := regex.match(request.path))
        ]
        if not matches:
            return HTTPStatus.NOT_FOUND, [_TEXT], b"404 page not found\n"
        accepted = {request.method, "GET" if request.method == "HEAD" else request.method}
        allowed = [m for m in matches if m[0] in accepted]
        if not allowed:
            methods = {m[0] for m in matches}
            if "GET" in methods:
                methods.add("HEAD")
            headers = [("Allow", ", ".join(sorted(methods))), _TEXT]
            return HTTPStatus.METHOD_NOT_ALLOWED, headers, b"Method Not Allowed\n"
        _, _, handler, request.path_params = max(allowed, key=lambda m: m[1])
        try:
            reply = respond(handler(request))
        except RespondError as err:
            self.log("web-respond", "ERROR", err)
            reply = err.reply
        if reply is None:
            return HTTPStatus.OK, [], b""
        return reply.status, reply.headers, reply.body

    def __call__(self, environ, start_response):
        request = Request.from_environ(environ)
        headers: dict[str, str] = {}
        status, body = HTTPStatus.OK, b""
        if self.origins is not None:
            origin = request.header("Origin")
            match = next((o for o in self.origins if o in ("*", origin)), None)
            if match is not None:
                headers["Access-Control-Allow-Origin"] = match
            headers.update(_CORS)
        if self.origins is None or request.method != "OPTIONS":
            headers["Strict-Transport-Security"] = "max-age=63072000; includeSubDomains; preload"
            status, extra, body = self._dispatch(request)
            headers.update(extra)
        code = int(status)
        phrase = HTTPStatus(code).phrase if code in HTTPStatus._value2member_map_ else "Unknown"
        start_response(f"{code} {phrase}", list(headers.items()))
        return [b"" if request.method == "HEAD" else body]