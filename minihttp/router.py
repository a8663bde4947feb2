"""Routing of method and path to handlers, with ``:name`` path parameters."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from typing import Any

from .http import HttpMethod

MAX_ROUTES = 1000

Handler = Callable[[Any], None]


def _split_path(path: str) -> list[str]:
    return [part for part in path.split("/") if part]


@dataclass
class Route:
    """A registered route; segments starting with ':' are parameters."""

    method: HttpMethod
    path: str
    handler: Handler
    parts: tuple[str, ...] = field(init=False)
    is_param: tuple[bool, ...] = field(init=False)

    def __post_init__(self) -> None:
        self.parts = tuple(_split_path(self.path))
        self.is_param = tuple(part.startswith(":") for part in self.parts)

    def matches(self, method: HttpMethod, parts: Sequence[str]) -> bool:
        """Whether this route serves ``method`` on the given path segments."""
        return (
            method == self.method
            and len(parts) == len(self.parts)
            and all(
                param or given == own
                for given, own, param in zip(parts, self.parts, self.is_param)
            )
        )

    def params(self, parts: Sequence[str]) -> dict[str, str]:
        """Map parameter names to the matching segments of ``parts``."""
        return {
            own[1:]: given
            for given, own, param in zip(parts, self.parts, self.is_param)
            if param
        }


class Router:
    """Routes in registration order; the first match wins."""

    def __init__(self) -> None:
        self.routes: list[Route] = []

    def set_route(self, method: HttpMethod, path: str, handler: Handler) -> Route:
        """Register ``handler`` for ``method`` on ``path``."""
        if len(self.routes) >= MAX_ROUTES:
            raise OverflowError(f"router is full ({MAX_ROUTES} routes)")
        route = Route(method, path, handler)
        self.routes.append(route)
        return route

    def _find(self, method: HttpMethod, parts: Sequence[str]) -> Route | None:
        return next((r for r in self.routes if r.matches(method, parts)), None)

    def get_route(self, method: HttpMethod, path: str) -> Handler | None:
        """Return the handler for ``method`` on ``path``, or None."""
        route = self._find(method, _split_path(path))
        return route.handler if route else None

    def get_path_params(self, method: HttpMethod, path: str) -> dict[str, str] | None:
        """Return the path parameters of the matching route, or None."""
        parts = _split_path(path)
        route = self._find(method, parts)
        return route.params(parts) if route else None