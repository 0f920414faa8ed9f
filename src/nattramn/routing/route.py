"""PathSegment, RoutePattern and PageMatch frozen dataclasses."""

from dataclasses import dataclass

from nattramn.config import Page


@dataclass(frozen=True, slots=True)
class PathSegment:
    """A parsed segment of a route pattern.

    Literal:      ``users``     (is_param=False)
    Placeholder:  ``:id``       (is_param=True, param_name="id")
    """

    value: str
    is_param: bool = False
    param_name: str | None = None


@dataclass(frozen=True, slots=True)
class RoutePattern:
    """A ``/``-delimited route pattern, parsed once at registration."""

    path: str
    segments: tuple[PathSegment, ...]


@dataclass(frozen=True, slots=True)
class CompiledPage:
    """A configured page paired with its parsed route pattern."""

    page: Page
    pattern: RoutePattern


@dataclass(frozen=True, slots=True)
class PageMatch:
    """Result of a successful route match."""

    page: Page
    path_params: dict[str, str]
