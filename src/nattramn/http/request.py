"""Immutable HTTP request.

Frozen metadata parsed from the ASGI scope. Page requests never carry a
body that the pipeline reads, so only metadata is exposed.
"""

from __future__ import annotations

import posixpath
from dataclasses import dataclass, replace
from typing import Any
from urllib.parse import SplitResult, urlsplit

from nattramn.http.headers import Headers
from nattramn.http.query import QueryParams

PARTIAL_CONTENT_HEADER = "x-partial-content"
PARTIAL_CONTENT_QUERY = "partialContent"


@dataclass(frozen=True, slots=True)
class Request:
    """An immutable HTTP request.

    ``path_params`` is empty until the router has matched a page; the
    dispatcher then hands the handler a copy carrying the params.
    """

    method: str
    path: str
    headers: Headers
    query: QueryParams
    server: tuple[str, int] | None
    path_params: dict[str, str]

    # -- Computed properties --

    @property
    def host(self) -> str:
        """Host the request arrived on; ``localhost`` when the server is unknown."""
        if self.server is not None:
            return self.server[0]
        return "localhost"

    @property
    def url(self) -> SplitResult:
        """Absolute URL built from the raw path and the inferred host."""
        target = self.path
        if self.query.raw:
            target = f"{target}?{self.query.raw.decode('latin-1')}"
        return urlsplit(f"http://{self.host}{target}")

    @property
    def extension(self) -> str:
        """Extension of the final path component (``".js"``), or ``""``."""
        return posixpath.splitext(self.path)[1]

    @property
    def has_extension(self) -> bool:
        """True for asset-style paths such as ``/app.js``."""
        return self.extension not in ("", ".")

    @property
    def is_partial(self) -> bool:
        """True when the client asked for the body fragment only.

        Triggered by a non-empty ``X-Partial-Content`` header or a
        non-empty ``partialContent`` query parameter.
        """
        return bool(self.headers.get(PARTIAL_CONTENT_HEADER) or self.query.get(PARTIAL_CONTENT_QUERY))

    @property
    def accept_encoding(self) -> str:
        """The Accept-Encoding header value (empty when absent)."""
        return self.headers.get("accept-encoding") or ""

    def with_path_params(self, params: dict[str, str]) -> Request:
        """Return a copy of the request carrying matched route params."""
        return replace(self, path_params=params)

    # -- Factory --

    @classmethod
    def from_asgi(cls, scope: dict[str, Any]) -> Request:
        """Create a Request from an ASGI scope.

        The path is the undecoded ``raw_path`` when the server provides it,
        so ``%2F`` stays inside its segment and params keep their encoding.
        """
        raw_path = scope.get("raw_path")
        server = scope.get("server")
        return cls(
            method=scope["method"],
            path=raw_path.decode("latin-1") if raw_path else scope["path"],
            headers=Headers(scope.get("headers", ())),
            query=QueryParams(scope.get("query_string", b"")),
            server=tuple(server) if server else None,
            path_params={},
        )
