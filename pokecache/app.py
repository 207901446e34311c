"""Command that serves the Pokemon cache over HTTP."""

from __future__ import annotations

import argparse
import logging
from socketserver import ThreadingMixIn
from wsgiref.simple_server import WSGIRequestHandler, WSGIServer, make_server

from .server import Server

logger = logging.getLogger(__name__)

SERVER_READ_HEADER_TIMEOUT = 5.0
SERVER_READ_TIMEOUT = 5.0
DEFAULT_MAX_ENTRIES = 4
DEFAULT_PORT = 8080


class _ThreadingWSGIServer(ThreadingMixIn, WSGIServer):
    daemon_threads = True


class _RequestHandler(WSGIRequestHandler):
    timeout = max(SERVER_READ_HEADER_TIMEOUT, SERVER_READ_TIMEOUT)

    def log_message(self, format, *args):  # noqa: A002 - signature fixed by the base class
        logger.info("%s - %s", self.address_string(), format % args)


def build_http_server(host: str = "", port: int = DEFAULT_PORT, max_entries: int = DEFAULT_MAX_ENTRIES) -> WSGIServer:
    """Bind a threaded HTTP server running a fresh cache application."""
    return make_server(
        host,
        port,
        Server(max_entries),
        server_class=_ThreadingWSGIServer,
        handler_class=_RequestHandler,
    )


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="pokecache", description="Serve the Pokemon cache over HTTP.")
    parser.add_argument("--host", default="", help="address to bind (default: all interfaces)")
    parser.add_argument("--port", type=int, default=DEFAULT_PORT, help="port to listen on")
    parser.add_argument("--max-entries", type=int, default=DEFAULT_MAX_ENTRIES, help="cache capacity")
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO)
    logger.info("starting application")
    logger.info("starting server on port %d", args.port)
    try:
        httpd = build_http_server(args.host, args.port, args.max_entries)
    except OSError as exc:
        logger.error("error from server: %s", exc)
        return 0

    with httpd:
        try:
            httpd.serve_forever()
        except KeyboardInterrupt:
            logger.info("shutting down")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())