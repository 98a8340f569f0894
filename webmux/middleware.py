"""Composition of handler middleware."""

from __future__ import annotations


def apply_middleware(middlewares, handler):
    """Wrap handler so the first middleware runs outermost; None entries are skipped."""
    for middleware in reversed(list(middlewares)):
        if middleware is not None:
            handler = middleware(handler)
    return handler