# minihttp

A small threaded HTTP server with a router that understands path
parameters such as `/ping/:firstname/:lastname`.

Each connection is read once, parsed into a method, path, version, headers
and body, matched against the registered routes and answered by a handler
on its own thread. Requests that match no route get a `404` with the body
`not found`.

## Installing

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Writing a server

```python
from minihttp.http import HttpMethod
from minihttp.server import Server, run_server


def hello(ctx):
    name = ctx.req.get_param("name")
    ctx.res.status_code = 200
    ctx.res.body = f"Hello, {name}"


server = Server(8192)
server.router.set_route(HttpMethod.GET, "/hello/:name", hello)
run_server(server)
```

`run_server` binds the server and serves until `Server.close()` is called.
The same can be done by hand with `Server.bind()` and
`Server.serve_forever()`; passing port `0` to `Server` picks a free port,
which `server.port` holds after `bind()`. `Server.wait_until_listening()`
blocks until connections are being accepted, and a `Server` used as a
context manager closes itself on exit.

A handler receives a `Context` that holds:

- `ctx.req`, a `Request` with the parsed `body`, `headers`, the path
  parameters in `params` (also returned by `get_param`, which raises
  `KeyError` for a missing name) and `remote_addr`;
- `ctx.res`, a `Response` whose `status_code` (200 by default), `body` and
  `headers` the handler sets.

Response headers are set with
`ctx.res.headers.set("Content-Type", "application/json")` and are sent in
the order they were set.

Routes are tried in the order they were registered and the first match
wins. A segment starting with `:` matches any single path segment;
`Router.get_path_params` returns the matched segments by name.

`Server.handle(data)` takes one raw request, as `str` or `bytes`, and
returns the response text. It can be used to test routes without opening
a socket:

```python
print(server.handle(b"GET /hello/Ada HTTP/1.1\r\nHost: x\r\n\r\n"))
```

The lower-level pieces are usable on their own: `minihttp.payload.parse_payload`
turns a raw request into a `ParsedPayload` (raising `PayloadError` when it
is malformed), and `minihttp.payload.build_payload` builds a raw response.

## Example application

The bundled example serves two routes, by default on port 8192:

- `GET /ping/:firstname/:lastname` answers `Hello, <firstname> <lastname>`;
- `POST /count` answers `{"count":N}` with a `Content-Type: application/json`
  header, `N` counting up from 0.

Start it with:

```
minihttp-example
```

It accepts `--port` and `--host`. Then try
`curl localhost:8192/ping/Ada/Lovelace` or `curl -X POST localhost:8192/count`.

## What it does not do

- Only the first 1023 bytes of a request are read; `Content-Length` is not
  honoured, so longer bodies are cut short.
- One request is answered per connection and the connection is then
  closed; there is no keep-alive or chunked encoding.
- The status line carries the code only, with no reason phrase, and no
  `Content-Length` header is added to responses.
- Requests that cannot be parsed are logged and the connection is dropped
  without a response.
- There is no TLS, static file serving or query-string parsing.