"""Server configuration.

Config is a tree of frozen dataclasses: immutable after creation,
IDE-autocompletable, no string-key dict lookups. It is built once at
startup and passed by reference into every component that reads it.
"""

from collections.abc import Awaitable, Callable, Mapping
from dataclasses import dataclass, field
from enum import StrEnum
from pathlib import Path
from typing import TYPE_CHECKING, Any, TypeAlias

from nattramn.errors import ConfigurationError

if TYPE_CHECKING:
    from nattramn.http.request import Request


class CompressionMethod(StrEnum):
    """Response compression applied when the client accepts it."""

    GZIP = "gzip"
    BROTLI = "br"
    NONE = "none"


@dataclass(frozen=True, slots=True)
class PageData:
    """Dynamic fragments produced by a page handler for one request."""

    head: str = ""
    body: str = ""
    headers: Mapping[str, str] | tuple[tuple[str, str], ...] | None = None

    @classmethod
    def coerce(cls, value: "PageData | Mapping[str, Any]") -> "PageData":
        """Accept either a PageData or a plain mapping with the same keys."""
        if isinstance(value, PageData):
            return value
        return cls(
            head=value.get("head") or "",
            body=value.get("body") or "",
            headers=value.get("headers"),
        )


# Page handler: (request, params) -> PageData, sync or async
PageHandler: TypeAlias = Callable[
    ["Request", dict[str, str]],
    "PageData | Mapping[str, Any] | None | Awaitable[PageData | Mapping[str, Any] | None]",
]


@dataclass(frozen=True, slots=True)
class Page:
    """A routed page: URL pattern, static HTML template and data handler.

    The template is spliced around the handler's output at the
    ``<nattramn-router>`` markers::

        Page(
            route="/users/:id",
            template="<html><head></head><body><nattramn-router></nattramn-router></body></html>",
            handler=user_page,
        )
    """

    route: str
    template: str
    handler: PageHandler


@dataclass(frozen=True, slots=True)
class RouterConfig:
    """Ordered page table. First matching page wins."""

    pages: tuple[Page, ...] = ()


@dataclass(frozen=True, slots=True)
class ServerConfig:
    """Server configuration. Immutable after creation.

    All fields have sensible defaults. Override what you need::

        ServerConfig(compression=CompressionMethod.GZIP, serve_static="public")
    """

    # Compression
    compression: CompressionMethod = CompressionMethod.BROTLI

    # Static files
    serve_static: str | None = None  # Prefix pattern, e.g. "public"
    static_root: str | Path = "."  # Directory static paths are resolved against

    # Server
    host: str = "127.0.0.1"
    port: int = 5000
    log_level: str = "info"

    # Client bundle
    client_bundle_path: str = "/nattramn-client.js"
    client_bundle_url: str = "https://unpkg.com/nattramn@latest/dist-web/index.bundled.js"

    # Caching
    default_cache_control: str = "public, max-age=3600"

    # Head/body minification hook (no-op)
    minify_html: bool = False

    def __post_init__(self) -> None:
        # Plain strings and None are accepted for compression
        value = CompressionMethod.BROTLI if self.compression is None else self.compression
        try:
            object.__setattr__(self, "compression", CompressionMethod(value))
        except ValueError as exc:
            msg = f"Unknown compression method {value!r}; expected one of: gzip, br, none"
            raise ConfigurationError(msg) from exc


@dataclass(frozen=True, slots=True)
class Config:
    """Top-level configuration: server settings plus the page router."""

    server: ServerConfig = field(default_factory=ServerConfig)
    router: RouterConfig = field(default_factory=RouterConfig)
