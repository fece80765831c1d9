"""A small HTTP API for taxons, served over WSGI."""

from __future__ import annotations

import argparse
import logging
import threading
import time
from dataclasses import dataclass
from wsgiref.simple_server import WSGIServer, make_server

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class Lang:
    """An application language."""

    code: str = ""


@dataclass
class Config:
    """Settings for the API server."""

    listen_address: str = ""
    language: Lang | None = None


def lang_by_code(code: str) -> Lang:
    """Return the language for a language code."""
    return Lang(code)


def logger(app):
    """Wrap an app so that each request is logged with its duration."""

    def wrapped(environ, start_response):
        started = time.perf_counter()
        result = app(environ, start_response)
        log.info("%s %s %.6fs", environ.get("REQUEST_METHOD", ""),
                 environ.get("PATH_INFO", ""), time.perf_counter() - started)
        return result

    return wrapped


def json_content(app):
    """Wrap an app so that responses default to a JSON content type."""

    def wrapped(environ, start_response):
        def start(status, headers, exc_info=None):
            if not any(name.lower() == "content-type" for name, _ in headers):
                headers = [*headers, ("Content-Type", "application/json")]
            return start_response(status, headers, exc_info)

        return app(environ, start)

    return wrapped


def make_app():
    """Return the API's routes as a WSGI app."""

    def app(environ, start_response):
        if environ.get("PATH_INFO") == "/api/v1":
            status, body = "200 OK", b"api/v1"
        else:
            status, body = "404 Not Found", b"404 page not found\n"
        start_response(status, [("Content-Type", "text/plain; charset=utf-8"),
                                ("Content-Length", str(len(body)))])
        return [body]

    return app


def serve(listen_address: str, app_lang: str) -> WSGIServer:
    """Serve the API until interrupted; return the still-open server."""
    config = Config(listen_address, lang_by_code(app_lang))
    host, sep, port = config.listen_address.rpartition(":")
    if not sep or not port.isdigit():
        raise ValueError(f"invalid listen address: {listen_address!r}")
    server = make_server(host, int(port), make_app())
    threading.Thread(target=server.serve_forever, daemon=True).start()
    try:
        threading.Event().wait()
    except KeyboardInterrupt:
        pass
    print("API gracefully stopped")
    return server


def main(argv: list[str] | None = None) -> int:
    """Run the API server from the command line."""
    parser = argparse.ArgumentParser(description="Taxon API server")
    parser.add_argument("-listenaddr", default="localhost:8080", help="Taxon API listen address")
    parser.add_argument("-lang", default="en", help="taxon app language")
    args = parser.parse_args(argv)
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(message)s")
    server = serve(args.listenaddr, args.lang)
    server.shutdown()
    server.server_close()
    log.info("API server stopped!")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())