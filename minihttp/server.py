"""A threaded HTTP server that dispatches requests through a router."""

from __future__ import annotations

import logging
import socket
import threading

from .context import Context, Request, Response
from .payload import PayloadError, build_payload, parse_payload
from .router import Router

DEFAULT_PORT = 8192
BUFFER_SIZE = 1024
BACKLOG = 100
REMOTE_ADDR = "localhost"
_POLL_INTERVAL = 0.2
_HEAD_END = b"\r\n\r\n"

log = logging.getLogger(__name__)


class Server:
    """Accepts connections and answers each one on its own thread."""

    def __init__(
        self, port: int = DEFAULT_PORT, host: str = "", router: Router | None = None
    ) -> None:
        self.port = port
        self.host = host
        self.router = router if router is not None else Router()
        self._sock: socket.socket | None = None
        self._closed = threading.Event()
        self._listening = threading.Event()

    def handle(self, data: str | bytes) -> str:
        """Turn one raw request into the raw response the server sends back."""
        payload = parse_payload(data)
        params = self.router.get_path_params(payload.method, payload.path) or {}
        req = Request(payload.body, payload.headers, REMOTE_ADDR, params)
        res = Response()

        handler = self.router.get_route(payload.method, payload.path)
        if handler is None:
            res.status_code = 404
            res.body = "not found"
        else:
            handler(Context(req, res))

        if not res.status_code:
            res.status_code = 200
        return build_payload(res.status_code, payload.version, res.body, res.headers)

    def bind(self) -> None:
        """Open the listening socket; the bound port is stored in ``port``."""
        if self._sock is not None:
            raise RuntimeError("server is already bound")
        sock = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
        try:
            sock.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
            if hasattr(socket, "SO_REUSEPORT"):
                sock.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEPORT, 1)
            sock.bind((self.host, self.port))
            sock.listen(BACKLOG)
            sock.settimeout(_POLL_INTERVAL)
        except OSError:
            sock.close()
            raise
        self.port = sock.getsockname()[1]
        self._closed.clear()
        self._sock = sock

    def serve_forever(self) -> None:
        """Accept connections until ``close`` is called."""
        sock = self._sock
        if sock is None:
            raise RuntimeError("server is not bound")
        self._listening.set()
        try:
            while not self._closed.is_set():
                try:
                    conn, _ = sock.accept()
                except TimeoutError:
                    continue
                except OSError as exc:
                    if self._closed.is_set():
                        break
                    log.warning("failed accepting connection, continuing: %s", exc)
                    continue
                threading.Thread(
                    target=self._serve_connection, args=(conn,), daemon=True
                ).start()
        finally:
            self._listening.clear()

    def wait_until_listening(self, timeout: float | None = None) -> bool:
        """Block until the server accepts connections; False on timeout."""
        return self._listening.wait(timeout)

    def close(self) -> None:
        """Stop serving and release the listening socket."""
        self._closed.set()
        if self._sock is not None:
            self._sock.close()
            self._sock = None

    def __enter__(self) -> Server:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def _serve_connection(self, conn: socket.socket) -> None:
        with conn:
            conn.settimeout(5.0)
            try:
                data = _receive(conn)
                if not data:
                    return
                payload = self.handle(data)
                conn.sendall(payload.encode("utf-8"))
            except PayloadError as exc:
                log.warning("dropping malformed request: %s", exc)
            except OSError as exc:
                log.warning("connection error: %s", exc)
            except Exception:
                log.exception("handler failed")


def _receive(conn: socket.socket) -> bytes:
    limit = BUFFER_SIZE - 1
    buffer = b""
    while len(buffer) < limit and _HEAD_END not in buffer:
        chunk = conn.recv(limit - len(buffer))
        if not chunk:
            break
        buffer += chunk
    return buffer


def run_server(server: Server) -> None:
    """Bind ``server`` and serve until it is closed."""
    server.bind()
    try:
        server.serve_forever()
    finally:
        server.close()