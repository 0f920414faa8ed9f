"""Case-insensitive HTTP header sets.

``Headers`` is the immutable view of request headers taken from the ASGI
scope. ``HeaderList`` is the tuple-of-pairs form responses carry, with
helpers that give it *set* semantics (one value per name).
"""

from collections.abc import Iterable, Iterator, Mapping
from typing import TypeAlias

# Response headers: ordered (name, value) pairs, names compared case-insensitively
HeaderList: TypeAlias = tuple[tuple[str, str], ...]


class Headers(Mapping[str, str]):
    """Immutable, case-insensitive request headers.

    Names are lowercased and values decoded once, when the ASGI scope
    is parsed. ``__getitem__`` returns the first matching value.
    """

    __slots__ = ("_pairs",)

    def __init__(self, raw: Iterable[tuple[bytes, bytes]] = ()) -> None:
        pairs = tuple(
            (name.decode("latin-1").lower(), value.decode("latin-1")) for name, value in raw
        )
        object.__setattr__(self, "_pairs", pairs)

    def __setattr__(self, name: str, value: object) -> None:
        msg = "Headers are immutable"
        raise AttributeError(msg)

    def __getitem__(self, key: str) -> str:
        key = key.lower()
        for name, value in self._pairs:
            if name == key:
                return value
        raise KeyError(key)

    def __contains__(self, key: object) -> bool:
        if not isinstance(key, str):
            return False
        key = key.lower()
        return any(name == key for name, _ in self._pairs)

    def __iter__(self) -> Iterator[str]:
        return iter(dict.fromkeys(name for name, _ in self._pairs))

    def __len__(self) -> int:
        return len(dict.fromkeys(name for name, _ in self._pairs))

    def __repr__(self) -> str:
        items = ", ".join(f"{k!r}: {self[k]!r}" for k in self)
        return f"Headers({{{items}}})"

    def get(self, key: str, default: str | None = None) -> str | None:  # type: ignore[override]
        """Return the first value for *key*, or *default* if missing."""
        try:
            return self[key]
        except KeyError:
            return default


def header_list(source: Mapping[str, str] | Iterable[tuple[str, str]] | None) -> HeaderList:
    """Normalize a mapping or iterable of pairs into a ``HeaderList``.

    Later entries replace earlier ones with the same (case-insensitive) name.
    Raises ``ValueError`` for a name or value that cannot go on the wire:
    not latin-1 encodable, or containing a line break.
    """
    if source is None:
        return ()
    items = source.items() if isinstance(source, Mapping) else source
    result: HeaderList = ()
    for name, value in items:
        name, value = str(name), str(value)
        _check_wire_safe(name, value)
        result = set_header(result, name, value)
    return result


def _check_wire_safe(name: str, value: str) -> None:
    for text in (name, value):
        try:
            text.encode("latin-1")
        except UnicodeEncodeError as exc:
            msg = f"Header {name!r} is not latin-1 encodable: {text!r}"
            raise ValueError(msg) from exc
        if "\r" in text or "\n" in text:
            msg = f"Header {name!r} contains a line break"
            raise ValueError(msg)


def get_header(headers: HeaderList, name: str) -> str | None:
    """Return the value for *name*, or ``None`` when absent."""
    key = name.lower()
    for existing, value in headers:
        if existing.lower() == key:
            return value
    return None


def set_header(headers: HeaderList, name: str, value: str) -> HeaderList:
    """Return *headers* with *name* set to *value*, replacing any previous value.

    A replaced header keeps its position; a new one is appended.
    """
    key = name.lower()
    replaced = False
    result: list[tuple[str, str]] = []
    for existing, old in headers:
        if existing.lower() != key:
            result.append((existing, old))
        elif not replaced:
            result.append((name, value))
            replaced = True
    if not replaced:
        result.append((name, value))
    return tuple(result)
