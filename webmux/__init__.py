"""A small WSGI web framework with routers, middleware, CORS headers and route documentation."""

__version__ = "0.1.0"