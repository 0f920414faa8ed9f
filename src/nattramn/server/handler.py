"""ASGI handler — the per-request pipeline.

The only component that touches raw ASGI directly. Builds a typed
Request from the scope, dispatches it, finalizes the response and sends
it through ASGI ``send()``. Every failure answers 404.
"""

import logging

import httpx

from nattramn._internal.asgi import Receive, Scope, Send
from nattramn._internal.invoke import invoke
from nattramn.config import Config, PageData
from nattramn.errors import AssetNotFound, DispatchError, HandlerFailure
from nattramn.http.request import Request
from nattramn.http.response import PartialResponse, not_found
from nattramn.routing.router import Router
from nattramn.server.client_bundle import fetch_client_bundle
from nattramn.server.finalize import finalize
from nattramn.server.sender import send_response
from nattramn.server.static import resolve_static_path, serve_static
from nattramn.templating.assembler import assemble

logger = logging.getLogger("nattramn.server")


async def handle_request(
    scope: Scope,
    receive: Receive,  # noqa: ARG001 — page requests never read the body
    send: Send,
    *,
    config: Config,
    router: Router,
    http_client: httpx.AsyncClient,
) -> None:
    """Process a single HTTP request through the full pipeline."""
    if scope["type"] != "http":
        return

    request = Request.from_asgi(scope)

    try:
        response = await dispatch(request, config=config, router=router, http_client=http_client)
        response = finalize(
            response,
            request.accept_encoding,
            config.server.compression,
            default_cache_control=config.server.default_cache_control,
        )
    except DispatchError as exc:
        _log_missing(request, exc)
        response = not_found()
    except Exception:
        logger.exception("Failed to answer %s %s", request.method, request.url.geturl())
        response = not_found()

    await send_response(response, send, head_only=request.method == "HEAD")


async def dispatch(
    request: Request,
    *,
    config: Config,
    router: Router,
    http_client: httpx.AsyncClient,
) -> PartialResponse:
    """Route one request to the client bundle, a static file or a page.

    Raises a ``DispatchError`` variant when nothing can answer it.
    """
    path = request.path
    server = config.server

    if request.has_extension:
        if path == server.client_bundle_path:
            return await fetch_client_bundle(http_client, server.client_bundle_url, path)

        file_path = resolve_static_path(path, server)
        if file_path is None:
            raise AssetNotFound(path, "no static directory configured")
        return await serve_static(file_path, server.static_root)

    match = router.match(path)
    request = request.with_path_params(match.path_params)

    try:
        result = await invoke(match.page.handler, request, match.path_params)
    except Exception as exc:
        raise HandlerFailure(path, f"page handler raised {exc!r}") from exc

    if result is None:
        raise HandlerFailure(path, "Could not create PageData from handler.")

    try:
        return assemble(
            match.page,
            PageData.coerce(result),
            request.is_partial,
            minify=server.minify_html,
        )
    except ValueError as exc:
        raise HandlerFailure(path, f"invalid page data: {exc}") from exc


def _log_missing(request: Request, exc: DispatchError) -> None:
    """Log why a request is answered with 404."""
    logger.debug(
        "Nattramn was asked to answer for %s but did not find a suitable way to handle it.",
        request.url.geturl(),
    )
    if exc.kind == "file":
        logger.debug("The file is missing.")
    else:
        logger.debug("The route is missing.")
    logger.debug("%s: %s", type(exc).__name__, exc)
