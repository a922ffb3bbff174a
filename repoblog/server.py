"""HTTP server exposing :class:`~repoblog.service.BlogService`."""

from __future__ import annotations

import contextlib
import logging
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer
from typing import Any, Iterator

from .service import BlogService

logger = logging.getLogger(__name__)


class _ThreadingHTTPServer(ThreadingHTTPServer):
    daemon_threads = True
    allow_reuse_address = True


def make_request_handler(service: BlogService) -> type[BaseHTTPRequestHandler]:
    """Create a request handler class that answers every GET through ``service``."""

    class BlogRequestHandler(BaseHTTPRequestHandler):
        server_version = "repoblog"

        def _respond(self, *, include_body: bool) -> None:
            response = service.handle(self.path)
            payload = response.encoded()
            self.send_response(response.status)
            for name, value in response.headers.items():
                self.send_header(name, value)
            self.send_header("Content-Length", str(len(payload)))
            self.end_headers()
            if include_body:
                self.wfile.write(payload)

        def do_GET(self) -> None:  # noqa: N802 - http.server naming
            self._respond(include_body=True)

        def do_HEAD(self) -> None:  # noqa: N802 - http.server naming
            self._respond(include_body=False)

        def log_message(self, format: str, *args: Any) -> None:  # noqa: A002
            logger.info("%s - %s", self.address_string(), format % args)

    return BlogRequestHandler


@contextlib.contextmanager
def serve(
    host: str,
    port: int,
    handler: type[BaseHTTPRequestHandler],
) -> Iterator[ThreadingHTTPServer]:
    """Context manager that creates and cleans up the HTTP server."""
    server = _ThreadingHTTPServer((host, port), handler)
    try:
        yield server
    finally:
        server.server_close()


def bound_url(server: ThreadingHTTPServer) -> str:
    """Return a browsable URL for the address the server actually bound."""
    raw_host = server.server_address[0]
    bound_host = raw_host.decode("utf-8", "ignore") if isinstance(raw_host, bytes) else str(raw_host)
    bound_port = int(server.server_address[1])
    url_host = "127.0.0.1" if bound_host in {"0.0.0.0", ""} else bound_host
    return f"http://{url_host}:{bound_port}/"
