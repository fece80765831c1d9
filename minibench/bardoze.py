"""A small restaurant menu web site."""

from __future__ import annotations

import argparse
import json
from dataclasses import dataclass
from html import escape
from pathlib import Path
from typing import Any, Mapping
from wsgiref.simple_server import make_server


@dataclass(frozen=True)
class Dish:
    """A dish on the menu."""

    code: str = ""
    name: str = ""
    description: str = ""
    price: float = 0.0
    special: bool = False


class Menu(dict):
    """Dishes keyed by their code."""

    def dishes(self) -> list[Dish]:
        """Return every dish on the menu."""
        return list(self.values())


_DISH_FIELDS = {"code": str, "name": str, "description": str, "price": float, "special": bool}


def _get(obj: Mapping[str, Any], key: str) -> Any:
    if key in obj:
        return obj[key]
    return next((v for k, v in obj.items() if k.lower() == key.lower()), None)


def _dish(obj: Any) -> Dish:
    if not isinstance(obj, Mapping):
        raise ValueError("dish must be a JSON object")
    values = {}
    for key, kind in _DISH_FIELDS.items():
        value = _get(obj, key)
        if value is None:
            continue
        if kind is float and isinstance(value, (int, float)) and not isinstance(value, bool):
            value = float(value)
        elif kind is float or not isinstance(value, kind):
            raise ValueError(f"dish field {key!r} must be of type {kind.__name__}")
        values[key] = value
    return Dish(**values)


def load_menu(path: str | Path) -> Menu:
    """Read the menu from a JSON file holding a list of dishes."""
    data = json.loads(Path(path).read_text(encoding="utf-8"))
    if data is None:
        return Menu()
    if not isinstance(data, Mapping):
        raise ValueError("menu file must hold a JSON object")
    dishes = _get(data, "Dishes") or []
    if not isinstance(dishes, list):
        raise ValueError("dishes must be a JSON list")
    return Menu((dish.code, dish) for dish in map(_dish, dishes))


def _page(title: str, content: str) -> str:
    return (
        f'<!DOCTYPE html>\n<html>\n<head>\n<meta charset="utf-8">\n'
        f"<title>{escape(title)}</title>\n</head>\n<body>\n"
        '<nav><a href="/">Home</a> | <a href="/dishes">Dishes</a></nav>\n'
        f"{content}\n</body>\n</html>\n"
    )


def render_welcome(menu: Menu) -> str:
    """Render the welcome page with the number of dishes."""
    return _page("Welcome", f"<h1>Welcome</h1>\n<p>{len(menu)} dishes on the menu.</p>")


def render_dishes(menu: Menu) -> str:
    """Render the list of dishes."""
    rows = "".join(
        f"<li><strong>{escape(d.name)}</strong> ({escape(d.code)}) {d.price:.2f}"
        f"{' <em>special</em>' if d.special else ''}<p>{escape(d.description)}</p></li>\n"
        for d in menu.dishes()
    )
    return _page("Dishes", f"<h1>Dishes</h1>\n<ul>\n{rows}</ul>")


def make_app(menu: Menu):
    """Return a WSGI app serving the welcome page and the dish list."""

    def app(environ, start_response):
        render = render_dishes if environ.get("PATH_INFO") == "/dishes" else render_welcome
        body = render(menu).encode("utf-8")
        start_response("200 OK", [("Content-Type", "text/html; charset=utf-8"),
                                  ("Content-Length", str(len(body)))])
        return [body]

    return app


def main(argv: list[str] | None = None) -> int:
    """Serve the menu site."""
    parser = argparse.ArgumentParser(description="Restaurant menu site")
    parser.add_argument("--menu", default="dishes.json", help="menu JSON file")
    parser.add_argument("--port", type=int, default=3000)
    args = parser.parse_args(argv)
    with make_server("", args.port, make_app(load_menu(args.menu))) as server:
        try:
            server.serve_forever()
        except KeyboardInterrupt:
            pass
    return 0


if __name__ == "__main__":
    raise SystemExit(main())