"""A small demonstration application: a greeting and a counter."""

from __future__ import annotations

import argparse
import threading
from collections.abc import Sequence

from .context import Context
from .http import HttpMethod
from .router import Router
from .server import DEFAULT_PORT, Server, run_server


def ping(ctx: Context) -> None:
    """Greet the person named by the ``firstname`` and ``lastname`` parameters."""
    firstname = ctx.req.get_param("firstname")
    lastname = ctx.req.get_param("lastname")
    ctx.res.status_code = 200
    ctx.res.body = f"Hello, {firstname} {lastname}"


class Counter:
    """A handler answering with a JSON count that grows on every call."""

    def __init__(self, start: int = 0) -> None:
        self._value = start
        self._lock = threading.Lock()

    def __call__(self, ctx: Context) -> None:
        with self._lock:
            value = self._value
            self._value += 1
        ctx.res.headers.set("Content-Type", "application/json")
        ctx.res.status_code = 200
        ctx.res.body = f'{{"count":{value}}}'


def setup_routes(router: Router) -> None:
    """Register the demonstration routes on ``router``."""
    router.set_route(HttpMethod.GET, "/ping/:firstname/:lastname", ping)
    router.set_route(HttpMethod.POST, "/count", Counter())


def main(argv: Sequence[str] | None = None) -> int:
    """Run the demonstration server."""
    parser = argparse.ArgumentParser(description="Run the demonstration server.")
    parser.add_argument("--port", type=int, default=DEFAULT_PORT)
    parser.add_argument("--host", default="")
    args = parser.parse_args(argv)

    server = Server(port=args.port, host=args.host)
    setup_routes(server.router)
    try:
        run_server(server)
    except KeyboardInterrupt:
        pass
    return 0