"""Nattramn application class.

Holds the frozen Config, compiles the page router on first use and
serves as the ASGI callable handed to the server.
"""

import logging
import threading

import httpx

from nattramn._internal.asgi import Receive, Scope, Send
from nattramn.config import Config
from nattramn.routing.router import Router
from nattramn.server.handler import handle_request
from nattramn.server.static import compile_static_pattern

logger = logging.getLogger("nattramn.app")


class Nattramn:
    """The nattramn page server.

    Usage::

        app = Nattramn(Config(
            server=ServerConfig(compression=CompressionMethod.GZIP, serve_static="public"),
            router=RouterConfig(pages=(Page("/users/:id", template, user_page),)),
        ))
        app.start_server(port=5000)

    Thread safety:
        The config is immutable. The router is compiled exactly once,
        under a Lock with a double check, even if several server threads
        deliver their first request concurrently.
    """

    __slots__ = (
        "_freeze_lock",
        "_frozen",
        "_http_client",
        "_owns_http_client",
        "_router",
        "config",
    )

    def __init__(self, config: Config, *, http_client: httpx.AsyncClient | None = None) -> None:
        self.config: Config = config

        # Fail at construction, not on the first request, for bad patterns
        compile_static_pattern(config.server.serve_static)
        self._router: Router = Router(config.router.pages)

        # The client bundle fetch uses this client; one we create is ours to close.
        self._owns_http_client: bool = http_client is None
        self._http_client: httpx.AsyncClient = http_client or httpx.AsyncClient(timeout=None)

        self._frozen: bool = False
        self._freeze_lock: threading.Lock = threading.Lock()

    @property
    def router(self) -> Router:
        """The page router, in configuration order."""
        return self._router

    # -- Server --

    def start_server(self, port: int = 5000) -> None:
        """Bind *port* and serve requests until interrupted."""
        from nattramn.server.run import run_server

        logger.info("Nattramn is running at: http://localhost:%d", port)
        run_server(self, host=self.config.server.host, port=port, log_level=self.config.server.log_level)

    # -- ASGI interface --

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        """ASGI 3.0 entry point."""
        if scope["type"] == "lifespan":
            await self._handle_lifespan(receive, send)
            return

        self._ensure_frozen()

        await handle_request(
            scope,
            receive,
            send,
            config=self.config,
            router=self._router,
            http_client=self._http_client,
        )

    async def _handle_lifespan(self, receive: Receive, send: Send) -> None:
        """Run the ASGI lifespan protocol.

        Freezes the app at startup and closes the owned HTTP client at
        shutdown.
        """
        while True:
            message = await receive()
            msg_type = message["type"]

            if msg_type == "lifespan.startup":
                self._ensure_frozen()
                await send({"type": "lifespan.startup.complete"})

            elif msg_type == "lifespan.shutdown":
                await self.aclose()
                await send({"type": "lifespan.shutdown.complete"})
                return

    async def aclose(self) -> None:
        """Release the HTTP client if this app created it."""
        if self._owns_http_client:
            await self._http_client.aclose()

    # -- Internal --

    def _ensure_frozen(self) -> None:
        """Thread-safe freeze with double-check locking."""
        if self._frozen:
            return
        with self._freeze_lock:
            if self._frozen:
                return
            self._router.compile()
            self._frozen = True
