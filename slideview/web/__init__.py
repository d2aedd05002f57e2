"""Web front end for the slideshow.

Usage:
    from slideview.web import start_server

    start_server(library, store, host="127.0.0.1", port=8080)
"""

from __future__ import annotations

import ipaddress
import socket
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from slideview.library import ImageLibrary
    from slideview.order import ShuffleStore

DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 8080


def parse_address(address: str) -> tuple[str, int]:
    """Split "HOST:PORT" (or "[v6]:PORT") into parts. Raises ValueError."""
    host, sep, port = address.rpartition(":")
    if not sep or not host:
        raise ValueError(f"Invalid address: {address!r}")
    host = host.strip("[]")
    ipaddress.ip_address(host)
    if not port.isdigit() or not 0 < int(port) < 65536:
        raise ValueError(f"Invalid port in address: {address!r}")
    return host, int(port)


def get_local_ip() -> str:
    """Get this machine's LAN address."""
    try:
        s = socket.socket(socket.AF_INET, socket.SOCK_DGRAM)
        s.connect(("8.8.8.8", 80))
        ip = s.getsockname()[0]
        s.close()
        return ip
    except OSError:
        return "127.0.0.1"


def get_web_url(host: str = DEFAULT_HOST, port: int = DEFAULT_PORT) -> str:
    """URL a browser should open. Wildcard binds report the LAN address."""
    if host in ("0.0.0.0", "::"):
        host = get_local_ip()
    elif ":" in host:
        host = f"[{host}]"
    return f"http://{host}:{port}"


def start_server(library: ImageLibrary, store: ShuffleStore,
                 host: str = DEFAULT_HOST, port: int = DEFAULT_PORT,
                 log_level: str = "info") -> None:
    """Serve the viewer with uvicorn. Blocks until interrupted."""
    import uvicorn

    from slideview.web.server import create_app

    app = create_app(library, store)
    print(f"  Serving {len(library)} images at {get_web_url(host, port)}")
    uvicorn.run(app, host=host, port=port, log_level=log_level)
