"""Prefix-based route groups."""

from __future__ import annotations

from typing import Any


def join_path(route: str, path: str) -> str:
    """Join a prefix and a path into one absolute path."""
    route = route.strip("/")
    path = path.lstrip("/")
    if not route and not path:
        return "/"
    if not route:
        return "/" + path
    if not path:
        return "/" + route
    return "/" + route + "/" + path


class Router:
    """Registers routes on an app under a common prefix."""

    def __init__(self, app: Any, prefix: str = ""):
        self.app = app
        self.prefix = prefix

    def _add(self, method: str, path: str, handler, middlewares):
        return self.app.handle_func(method, join_path(self.prefix, path), handler, *middlewares)

    def get(self, path, handler, *args):
        return self._add("GET", path, handler, args)

    def post(self, path, handler, *args):
        return self._add("POST", path, handler, args)

    def put(self, path, handler, *args):
        return self._add("PUT", path, handler, args)

    def patch(self, path, handler, *args):
        return self._add("PATCH", path, handler, args)

    def delete(self, path, handler, *args):
        return self._add("DELETE", path, handler, args)

    def subrouter(self, prefix: str) -> "Router":
        if not prefix:
            return self
        return Router(self.app, join_path(self.prefix, prefix))