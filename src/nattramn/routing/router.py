"""Page router with positional 1:1 segment matching.

Pattern and request path are both split on ``/`` without stripping, so
leading and trailing empty segments take part in the comparison
(``/users/`` does not match ``/users``). A pattern segment containing a
colon matches any single request segment and captures it.
"""

from collections.abc import Iterable

from nattramn.config import Page
from nattramn.errors import ConfigurationError, RouteNotFound
from nattramn.routing.route import CompiledPage, PageMatch, PathSegment, RoutePattern


def parse_pattern(path: str) -> RoutePattern:
    """Parse a route pattern string into segments.

    Examples::

        "/users"       -> ["", "users"]
        "/users/:id"   -> ["", "users", ":id" (param "id")]

    Raises ``ConfigurationError`` for a placeholder without a name or a
    placeholder name declared twice.
    """
    segments: list[PathSegment] = []
    seen: set[str] = set()
    for part in path.split("/"):
        if ":" not in part:
            segments.append(PathSegment(value=part))
            continue
        name = part.split(":")[1]
        if not name:
            msg = f"Route {path!r}: placeholder segment {part!r} has no name."
            raise ConfigurationError(msg)
        if name in seen:
            msg = f"Route {path!r}: placeholder {name!r} is declared more than once."
            raise ConfigurationError(msg)
        seen.add(name)
        segments.append(PathSegment(value=part, is_param=True, param_name=name))
    return RoutePattern(path=path, segments=tuple(segments))


def _as_pattern(pattern: RoutePattern | str) -> RoutePattern:
    return pattern if isinstance(pattern, RoutePattern) else parse_pattern(pattern)


def matches(request_path: str, pattern: RoutePattern | str) -> bool:
    """True if *request_path* matches *pattern* segment for segment.

    Every pattern segment that passes (placeholder, or literal equal to
    the request segment at the same index) is counted; the count must
    equal both the pattern length and the request length.
    """
    pattern = _as_pattern(pattern)
    parts = request_path.split("/")
    passed = 0
    for index, seg in enumerate(pattern.segments):
        if seg.is_param or (index < len(parts) and parts[index] == seg.value):
            passed += 1
    return passed == len(pattern.segments) and passed == len(parts)


def extract_params(request_path: str, pattern: RoutePattern | str) -> dict[str, str]:
    """Map each placeholder name to the request segment at its index."""
    pattern = _as_pattern(pattern)
    parts = request_path.split("/")
    return {
        seg.param_name: parts[index]
        for index, seg in enumerate(pattern.segments)
        if seg.param_name and index < len(parts)
    }


class Router:
    """Ordered page table.

    Usage::

        router = Router()
        router.add(Page("/users/:id", template, handler))
        router.compile()
        match = router.match("/users/42")
        match.path_params  # {"id": "42"}
    """

    __slots__ = ("_compiled", "_pages")

    def __init__(self, pages: Iterable[Page] = ()) -> None:
        self._pages: list[CompiledPage] = []
        self._compiled = False
        for page in pages:
            self.add(page)

    def add(self, page: Page) -> None:
        """Register a page. Its route pattern is validated here."""
        if self._compiled:
            msg = "Cannot add pages after compilation."
            raise RuntimeError(msg)
        self._pages.append(CompiledPage(page=page, pattern=parse_pattern(page.route)))

    def compile(self) -> None:
        """Freeze the router. No more pages can be added."""
        self._compiled = True

    def match(self, path: str) -> PageMatch:
        """Return the first page whose pattern matches *path*.

        Raises ``RouteNotFound`` if no page matches.
        """
        for compiled in self._pages:
            if matches(path, compiled.pattern):
                return PageMatch(
                    page=compiled.page,
                    path_params=extract_params(path, compiled.pattern),
                )
        raise RouteNotFound(path, "no page route matches")
