import logging
from wsgiref.util import setup_testing_defaults

from minibench.taxon_api import (
    Config,
    Lang,
    json_content,
    lang_by_code,
    logger,
    make_app,
)


def _call(app, path, method="GET"):
    environ = {}
    setup_testing_defaults(environ)
    environ["PATH_INFO"] = path
    environ["REQUEST_METHOD"] = method
    captured = {}

    def start_response(status, headers, exc_info=None):
        captured["status"] = status
        captured["headers"] = dict(headers)

    body = b"".join(app(environ, start_response))
    return captured["status"], captured["headers"], body


def test_api_route_answers():
    status, _, body = _call(make_app(), "/api/v1")
    assert status.startswith("200")
    assert body == b"api/v1"


def test_unknown_route_is_not_found():
    status, _, body = _call(make_app(), "/nothing")
    assert status.startswith("404")
    assert body == b"404 page not found\n"


def test_json_content_sets_default_type():
    def bare(environ, start_response):
        start_response("200 OK", [])
        return [b"{}"]

    _, headers, body = _call(json_content(bare), "/")
    assert headers["Content-Type"] == "application/json"
    assert body == b"{}"


def test_json_content_keeps_handler_type():
    _, headers, _ = _call(json_content(make_app()), "/api/v1")
    assert headers["Content-Type"].startswith("text/plain")


def test_logger_logs_method_and_path(caplog):
    with caplog.at_level(logging.INFO, logger="minibench.taxon_api"):
        status, _, body = _call(logger(make_app()), "/api/v1", method="POST")
    assert body == b"api/v1"
    assert any("POST /api/v1" in record.getMessage() for record in caplog.records)


def test_lang_by_code_keeps_code():
    assert lang_by_code("en") == Lang("en")


def test_config_fields_are_assignable():
    config = Config()
    assert config.language is None
    config.listen_address = "localhost:8080"
    config.language = lang_by_code("pt")
    assert config.listen_address == "localhost:8080"
    assert config.language.code == "pt"