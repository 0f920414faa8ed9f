"""Static asset resolution and serving.

Extensioned request paths are assets. The resolver decides which file
path answers the request; ``serve_static`` reads it with anyio, closing
the handle even when the read fails.

Resolution order for a request path such as ``/app.js``:

1. ``serve_static`` is configured and its pattern is found in the path
   (``/public/app.js`` with ``serve_static="public"``): serve the path as is.
2. ``serve_static`` is configured: serve ``/<serve_static><path>``
   (``/public/app.js``).
3. Otherwise there is nothing to serve.
"""

import posixpath
import re
from pathlib import Path

import anyio

from nattramn.config import ServerConfig
from nattramn.errors import AssetNotFound, ConfigurationError
from nattramn.http.response import PartialResponse

MEDIA_TYPES: dict[str, str] = {
    ".md": "text/markdown",
    ".css": "text/css",
    ".html": "text/html",
    ".htm": "text/html",
    ".json": "application/json",
    ".map": "application/json",
    ".txt": "text/plain",
    ".ts": "text/typescript",
    ".tsx": "text/tsx",
    ".js": "application/javascript",
    ".jsx": "text/jsx",
    ".gz": "application/gzip",
    ".webp": "image/webp",
    ".jpg": "image/jpeg",
    ".png": "image/png",
    ".svg": "image/svg+xml",
}


def content_type_for(path: str) -> str | None:
    """Media type for *path* from ``MEDIA_TYPES``, or ``None`` if unknown."""
    return MEDIA_TYPES.get(posixpath.splitext(path)[1])


def compile_static_pattern(serve_static: str | None) -> re.Pattern[str] | None:
    """Validate the configured static prefix as a regular expression.

    Raises ``ConfigurationError`` if it does not compile.
    """
    if not serve_static:
        return None
    try:
        return re.compile(serve_static)
    except re.error as exc:
        msg = f"serve_static={serve_static!r} is not a valid pattern: {exc}"
        raise ConfigurationError(msg) from exc


def resolve_static_path(url_path: str, config: ServerConfig) -> str | None:
    """Map an asset request path to the file path that answers it."""
    pattern = compile_static_pattern(config.serve_static)
    if pattern is None:
        return None
    if pattern.search(url_path):
        return url_path
    return f"/{config.serve_static}{url_path}"


async def serve_static(file_path: str, root: str | Path = ".") -> PartialResponse:
    """Read *file_path* (relative to *root*) into a response.

    Raises ``AssetNotFound`` when the path escapes *root* or the file
    cannot be read.
    """
    base = Path(root).resolve()
    target = (base / file_path.lstrip("/")).resolve()
    if not target.is_relative_to(base):
        raise AssetNotFound(file_path, "path escapes the static root")

    try:
        async with await anyio.open_file(target, "rb") as handle:
            body = await handle.read()
    except OSError as exc:
        raise AssetNotFound(file_path, exc.strerror or str(exc)) from exc

    response = PartialResponse(body=body)
    content_type = content_type_for(file_path)
    if content_type:
        response = response.with_header("Content-Type", content_type)
    return response
