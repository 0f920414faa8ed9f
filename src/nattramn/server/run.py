"""Server startup.

Starts a pounce ASGI server with the live Nattramn app object. A single
worker runs the request loop; each request is its own coroutine.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from nattramn.app import Nattramn


def run_server(
    app: Nattramn,
    host: str = "127.0.0.1",
    port: int = 5000,
    *,
    log_level: str = "info",
) -> None:
    """Start a pounce server for *app* and block until it stops.

    Pounce's ``run()`` takes an import string, but nattramn has a live
    app object, so ``pounce.Server`` is used directly with the ASGI
    callable.

    Args:
        app: The Nattramn app (ASGI callable).
        host: Bind host address.
        port: Bind port number.
        log_level: Log level (debug, info, warning, error, critical).
    """
    from pounce.config import ServerConfig
    from pounce.server import Server

    config = ServerConfig(
        host=host,
        port=port,
        workers=1,
        log_level=log_level,
    )
    server = Server(config, app)
    server.run()
