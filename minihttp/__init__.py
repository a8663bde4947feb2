"""A tiny threaded HTTP server with a path-parameter router."""

__version__ = "0.1.0"

__all__ = ["context", "example", "headers", "http", "payload", "router", "server"]