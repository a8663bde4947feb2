"""Request, response and the context handed to route handlers."""

from __future__ import annotations

from dataclasses import dataclass, field

from .headers import Headers


@dataclass
class Request:
    """An incoming request as seen by a handler."""

    body: str
    headers: Headers
    remote_addr: str
    params: dict[str, str] = field(default_factory=dict)

    def get_param(self, key: str) -> str:
        """Return the path parameter ``key``; raise KeyError if absent."""
        return self.params[key]


@dataclass
class Response:
    """The response a handler fills in."""

    body: str | None = None
    status_code: int = 200
    headers: Headers = field(default_factory=Headers)


@dataclass
class Context:
    """The request and response of one exchange."""

    req: Request
    res: Response