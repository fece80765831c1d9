"""A lazily created, process-wide server instance."""

from __future__ import annotations

import threading

MSG_CREATING_SERVER = "Creating server.."
MSG_SERVER_ALREADY_CREATED = "Server already created"


class Server:
    """The single server instance."""


_lock = threading.Lock()
_server: Server | None = None


def new_server() -> Server:
    """Return the shared server, creating it on first use."""
    global _server
    with _lock:
        if _server is None:
            print(MSG_CREATING_SERVER)
            _server = Server()
        else:
            print(MSG_SERVER_ALREADY_CREATED)
    return _server


def main(argv: list[str] | None = None) -> int:
    """Ask for the server from ten threads, then wait for a line of input."""
    for _ in range(10):
        threading.Thread(target=new_server).start()
    try:
        input()
    except EOFError:
        pass
    return 0


if __name__ == "__main__":
    raise SystemExit(main())