"""ASGI response sending — translates a PartialResponse to ASGI messages."""

from nattramn._internal.asgi import Send
from nattramn.http.response import PartialResponse


def _body_allowed(status: int) -> bool:
    """Whether an HTTP status code permits a response body."""
    # RFC: 1xx, 204, and 304 responses do not include a message body.
    return not (100 <= status < 200 or status in {204, 304})


async def send_response(response: PartialResponse, send: Send, *, head_only: bool = False) -> None:
    """Send *response* as one ``http.response.start`` and one body message.

    Content-Length is taken from the response when already set (the
    finalizer sets it) and computed from the body otherwise. For ``HEAD``
    requests the headers are sent unchanged and the body is dropped.
    """
    body = response.body if _body_allowed(response.status) else b""

    if response.get_header("Content-Length") is None or not _body_allowed(response.status):
        response = response.with_header("Content-Length", str(len(body)))

    raw_headers = [
        (name.lower().encode("latin-1"), value.encode("latin-1"))
        for name, value in response.headers
    ]

    await send(
        {
            "type": "http.response.start",
            "status": response.status,
            "headers": raw_headers,
        }
    )
    await send(
        {
            "type": "http.response.body",
            "body": b"" if head_only else body,
        }
    )
