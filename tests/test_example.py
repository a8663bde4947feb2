import json

import pytest

from minihttp.context import Context, Request, Response
from minihttp.example import Counter, main, ping, setup_routes
from minihttp.headers import Headers
from minihttp.http import HttpMethod
from minihttp.router import Router
from minihttp.server import Server


def _context(params=None):
    return Context(Request("", Headers(), "localhost", params or {}), Response())


def test_ping_greets_by_name():
    ctx = _context({"firstname": "Ada", "lastname": "Lovelace"})
    ping(ctx)
    assert ctx.res.status_code == 200
    assert ctx.res.body == "Hello, Ada Lovelace"


def test_ping_without_params_raises():
    with pytest.raises(KeyError):
        ping(_context())


def test_counter_counts_from_zero():
    counter = Counter()
    bodies = []
    for _ in range(3):
        ctx = _context()
        counter(ctx)
        assert ctx.res.headers.get("Content-Type") == "application/json"
        assert ctx.res.status_code == 200
        bodies.append(ctx.res.body)
    assert bodies[0] == '{"count":0}'
    assert [json.loads(b)["count"] for b in bodies] == [0, 1, 2]


def test_counter_start_value():
    counter = Counter(start=7)
    ctx = _context()
    counter(ctx)
    assert json.loads(ctx.res.body) == {"count": 7}


def test_setup_routes_registers_handlers():
    router = Router()
    setup_routes(router)
    assert router.get_route(HttpMethod.GET, "/ping/a/b") is ping
    assert isinstance(router.get_route(HttpMethod.POST, "/count"), Counter)
    assert router.get_route(HttpMethod.GET, "/count") is None
    assert router.get_path_params(HttpMethod.GET, "/ping/a/b") == {
        "firstname": "a",
        "lastname": "b",
    }


def test_routes_through_server():
    server = Server()
    setup_routes(server.router)
    greeting = server.handle("GET /ping/Grace/Hopper HTTP/1.1\r\n\r\n")
    first = server.handle("POST /count HTTP/1.1\r\n\r\n")
    second = server.handle("POST /count HTTP/1.1\r\n\r\n")
    assert greeting.endswith("\r\n\r\nHello, Grace Hopper")
    assert "Content-Type: application/json\r\n" in first
    assert json.loads(first.partition("\r\n\r\n")[2]) == {"count": 0}
    assert json.loads(second.partition("\r\n\r\n")[2]) == {"count": 1}


def test_main_rejects_bad_port():
    with pytest.raises(SystemExit):
        main(["--port", "not-a-number"])