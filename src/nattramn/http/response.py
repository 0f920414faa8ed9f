"""The pipeline's internal response value.

Every dispatch path produces a ``PartialResponse``; the finalizer then
derives the response actually sent. Each transformation returns a new
value, so a response is never mutated after it is built.
"""

from dataclasses import dataclass, replace

from nattramn.http.headers import HeaderList, get_header, set_header


@dataclass(frozen=True, slots=True)
class PartialResponse:
    """Status, headers and body bytes, built through immutable transformations.

    Unlike a multi-value header list, ``with_header`` *sets* the header:
    an existing value with the same case-insensitive name is replaced.
    """

    body: bytes = b""
    status: int = 200
    headers: HeaderList = ()

    # -- Chainable transformations --

    def with_header(self, name: str, value: str) -> "PartialResponse":
        """Return a new response with *name* set to *value*."""
        return replace(self, headers=set_header(self.headers, name, value))

    def with_body(self, body: bytes) -> "PartialResponse":
        """Return a new response with a different body."""
        return replace(self, body=body)

    # -- Accessors --

    def get_header(self, name: str) -> str | None:
        """Return the value of *name*, or ``None`` if it is not set."""
        return get_header(self.headers, name)

    @property
    def content_type(self) -> str | None:
        """The Content-Type header value."""
        return self.get_header("Content-Type")

    @property
    def text(self) -> str:
        """Body decoded as UTF-8."""
        return self.body.decode("utf-8")


def not_found() -> PartialResponse:
    """The uniform answer for every request the pipeline cannot serve."""
    return PartialResponse(
        body=b"Not Found",
        status=404,
        headers=(("Content-Type", "text/plain; charset=utf-8"),),
    )
