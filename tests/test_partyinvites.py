import io
from urllib.parse import urlencode
from wsgiref.util import setup_testing_defaults

import pytest

from minibench.partyinvites import PartyApp, Rsvp, validate_rsvp

GUEST = {"name": "Ann", "email": "ann@example.com", "phone": "12", "willattend": "true"}


def _call(app, method="GET", path="/", form=None):
    body = urlencode(form).encode() if form is not None else b""
    environ = {}
    setup_testing_defaults(environ)
    environ.update(
        REQUEST_METHOD=method,
        PATH_INFO=path,
        CONTENT_TYPE="application/x-www-form-urlencoded",
        CONTENT_LENGTH=str(len(body)),
    )
    environ["wsgi.input"] = io.BytesIO(body)
    captured = {}

    def start_response(status, headers, exc_info=None):
        captured["status"] = status

    text = b"".join(app(environ, start_response)).decode("utf-8")
    return captured["status"], text


def test_validate_empty_rsvp_lists_all_messages():
    assert validate_rsvp(Rsvp()) == [
        "enter your name",
        "enter your email",
        "enter your phone number",
    ]


def test_validate_complete_rsvp():
    assert validate_rsvp(Rsvp("Ann", "ann@example.com", "12", False)) == []


def test_submit_stores_complete_rsvp():
    app = PartyApp()
    rsvp, errors = app.submit(GUEST)
    assert errors == []
    assert rsvp == Rsvp("Ann", "ann@example.com", "12", True)
    assert app.responses == [rsvp]


def test_submit_accepts_lists_and_only_exact_true():
    app = PartyApp()
    form = {k: [v] for k, v in GUEST.items()}
    form["willattend"] = ["True"]
    rsvp, _ = app.submit(form)
    assert rsvp.will_attend is False


def test_submit_with_missing_field_raises():
    app = PartyApp()
    form = dict(GUEST)
    del form["phone"]
    with pytest.raises(ValueError):
        app.submit(form)
    assert app.responses == []


def test_submit_incomplete_is_not_stored():
    app = PartyApp()
    _, errors = app.submit({**GUEST, "email": ""})
    assert errors == ["enter your email"]
    assert app.responses == []


def test_wsgi_post_attending_thanks_guest():
    app = PartyApp()
    status, body = _call(app, "POST", "/form", GUEST)
    assert status == "200 OK"
    assert "Thank you, Ann" in body
    assert len(app.responses) == 1


def test_wsgi_post_not_attending():
    app = PartyApp()
    _, body = _call(app, "POST", "/form", {**GUEST, "willattend": "false"})
    assert "Sorry" in body
    assert app.responses[0].will_attend is False


def test_wsgi_post_with_errors_redisplays_form():
    app = PartyApp()
    status, body = _call(app, "POST", "/form", {**GUEST, "name": ""})
    assert status == "200 OK"
    assert "enter your name" in body
    assert 'value="ann@example.com"' in body
    assert app.responses == []


def test_wsgi_post_missing_field_is_bad_request():
    app = PartyApp()
    status, _ = _call(app, "POST", "/form", {"name": "Ann"})
    assert status == "400 Bad Request"


def test_wsgi_list_shows_escaped_guests():
    app = PartyApp()
    _call(app, "POST", "/form", {**GUEST, "name": "<Ann>"})
    _, body = _call(app, "GET", "/list")
    assert "&lt;Ann&gt;" in body
    assert "<Ann>" not in body


def test_wsgi_other_method_on_form_is_empty():
    status, body = _call(PartyApp(), "PUT", "/form")
    assert status == "200 OK"
    assert body == ""


def test_wsgi_home_links_to_form():
    _, body = _call(PartyApp(), "GET", "/whatever")
    assert 'href="/form"' in body