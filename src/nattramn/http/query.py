"""Query string lookup for the request pipeline."""

from urllib.parse import parse_qsl


class QueryParams:
    """Parsed query string, first value per name.

    Blank values are kept so ``?partialContent=`` is present but empty.
    The undecoded bytes stay available for rebuilding the request URL.
    """

    __slots__ = ("_first", "_raw")

    def __init__(self, query_string: bytes = b"") -> None:
        self._raw = query_string
        self._first: dict[str, str] = {}
        for name, value in parse_qsl(query_string.decode("latin-1"), keep_blank_values=True):
            self._first.setdefault(name, value)

    def __contains__(self, key: object) -> bool:
        return key in self._first

    def get(self, key: str, default: str | None = None) -> str | None:
        """Return the first value for *key*, or *default* if missing."""
        return self._first.get(key, default)

    @property
    def raw(self) -> bytes:
        """The undecoded query string."""
        return self._raw
