"""A party RSVP web site."""

from __future__ import annotations

import argparse
from dataclasses import dataclass
from html import escape
from typing import Mapping, Sequence
from urllib.parse import parse_qs
from wsgiref.simple_server import make_server


@dataclass
class Rsvp:
    """A guest's reply."""

    name: str = ""
    email: str = ""
    phone: str = ""
    will_attend: bool = False


def validate_rsvp(rsvp: Rsvp) -> list[str]:
    """Return the messages for the fields left empty."""
    checks = ((rsvp.name, "enter your name"), (rsvp.email, "enter your email"),
              (rsvp.phone, "enter your phone number"))
    return [message for value, message in checks if not value]


def _first(form: Mapping[str, str | Sequence[str]], key: str) -> str:
    value = form.get(key)
    if isinstance(value, str):
        return value
    if not value:
        raise ValueError(f"missing form field: {key}")
    return value[0]


def _page(title: str, content: str) -> str:
    return (f'<!DOCTYPE html>\n<html>\n<head>\n<meta charset="utf-8">\n'
            f"<title>{escape(title)}</title>\n</head>\n<body>\n{content}\n</body>\n</html>\n")


def _form_page(errors: list[str], session: Rsvp) -> str:
    items = "".join(f"<li>{escape(e)}</li>" for e in errors)
    error_block = f'<ul class="errors">{items}</ul>\n' if errors else ""
    yes, no = (" selected", "") if session.will_attend else ("", " selected")
    inputs = "".join(f'<input name="{field}" value="{escape(getattr(session, field))}">\n'
                     for field in ("name", "email", "phone"))
    return _page(
        "RSVP",
        f'<h1>RSVP</h1>\n{error_block}<form method="POST" action="/form">\n{inputs}'
        f'<select name="willattend"><option value="true"{yes}>Yes, I will attend</option>'
        f'<option value="false"{no}>No, I cannot attend</option></select>\n'
        '<button type="submit">Send</button>\n</form>',
    )


def _list_page(responses: list[Rsvp]) -> str:
    rows = "".join(
        f"<tr><td>{escape(r.name)}</td><td>{escape(r.email)}</td>"
        f"<td>{escape(r.phone)}</td><td>{'yes' if r.will_attend else 'no'}</td></tr>\n"
        for r in responses
    )
    return _page("Guests", "<h1>Guests</h1>\n<table>\n<tr><th>Name</th><th>Email</th>"
                           f"<th>Phone</th><th>Attending</th></tr>\n{rows}</table>")


_HOME = _page("Party", '<h1>You\'re invited!</h1>\n<p><a href="/form">RSVP now</a> '
                       'or <a href="/list">see who is coming</a>.</p>')


def _read_form(environ: dict) -> dict[str, list[str]]:
    body: dict[str, list[str]] = {}
    content_type = environ.get("CONTENT_TYPE", "").split(";")[0].strip().lower()
    if content_type == "application/x-www-form-urlencoded":
        length = int(environ.get("CONTENT_LENGTH") or 0) if str(environ.get("CONTENT_LENGTH") or "0").isdigit() else 0
        raw = environ["wsgi.input"].read(length) if length > 0 else b""
        body = parse_qs(raw.decode("utf-8", "replace"), keep_blank_values=True)
    query = parse_qs(environ.get("QUERY_STRING", ""), keep_blank_values=True)
    return {key: body.get(key, []) + query.get(key, []) for key in body.keys() | query.keys()}


class PartyApp:
    """WSGI app collecting RSVPs in memory."""

    def __init__(self) -> None:
        self.responses: list[Rsvp] = []

    def submit(self, form: Mapping[str, str | Sequence[str]]) -> tuple[Rsvp, list[str]]:
        """Read an RSVP from form fields and store it if it is complete."""
        rsvp = Rsvp(_first(form, "name"), _first(form, "email"), _first(form, "phone"),
                    _first(form, "willattend") == "true")
        errors = validate_rsvp(rsvp)
        if not errors:
            self.responses.append(rsvp)
        return rsvp, errors

    def _handle_form(self, environ: dict) -> tuple[str, str]:
        method = environ.get("REQUEST_METHOD", "GET")
        if method == "GET":
            return "200 OK", _form_page([], Rsvp())
        if method != "POST":
            return "200 OK", ""
        try:
            rsvp, errors = self.submit(_read_form(environ))
        except ValueError as exc:
            return "400 Bad Request", _page("Bad Request", f"<p>{escape(str(exc))}</p>")
        if errors:
            return "200 OK", _form_page(errors, rsvp)
        if rsvp.will_attend:
            return "200 OK", _page("Thanks", f"<h1>Thank you, {escape(rsvp.name)}!</h1>\n"
                                             "<p>See you at the party.</p>")
        return "200 OK", _page("Sorry", f"<h1>Sorry you can't make it, {escape(rsvp.name)}.</h1>")

    def __call__(self, environ, start_response):
        path = environ.get("PATH_INFO", "/")
        if path == "/form":
            status, page = self._handle_form(environ)
        elif path == "/list":
            status, page = "200 OK", _list_page(self.responses)
        else:
            status, page = "200 OK", _HOME
        body = page.encode("utf-8")
        start_response(status, [("Content-Type", "text/html; charset=utf-8"),
                                ("Content-Length", str(len(body)))])
        return [body]


def main(argv: list[str] | None = None) -> int:
    """Serve the RSVP site."""
    parser = argparse.ArgumentParser(description="Party RSVP site")
    parser.add_argument("--port", type=int, default=3000)
    args = parser.parse_args(argv)
    with make_server("", args.port, PartyApp()) as server:
        try:
            server.serve_forever()
        except KeyboardInterrupt:
            pass
    return 0


if __name__ == "__main__":
    raise SystemExit(main())