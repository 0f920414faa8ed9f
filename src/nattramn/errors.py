"""Nattramn exception hierarchy.

Shared across Router, Dispatcher and the ASGI handler so every module
raises and catches the same types.
"""

from dataclasses import dataclass
from typing import ClassVar


class NattramnError(Exception):
    """Base for all nattramn-specific errors."""


class ConfigurationError(NattramnError):
    """Raised when server configuration is invalid.

    Typically raised while building the app, before the first request.
    """


@dataclass(frozen=True, slots=True)
class DispatchError(NattramnError):
    """A request the pipeline could not answer.

    Raised by the dispatcher; the ASGI handler logs it and answers 404.
    """

    path: str
    detail: str = ""

    kind: ClassVar[str] = "route"

    def __str__(self) -> str:
        if self.detail:
            return f"{self.path}: {self.detail}"
        return self.path


class RouteNotFound(DispatchError):  # noqa: N818 — conventional name in web frameworks
    """No configured page matches the request path."""


class HandlerFailure(DispatchError):  # noqa: N818
    """A page handler raised or returned no data."""


class AssetNotFound(DispatchError):  # noqa: N818 — conventional name in web frameworks
    """Static file or client bundle is missing or unreadable."""

    kind: ClassVar[str] = "file"
