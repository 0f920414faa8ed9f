"""Response finalization: ETag, Cache-Control, compression, Content-Length.

Applied to every successful response right before it is sent.
"""

import gzip
import hashlib

import brotli

from nattramn.config import CompressionMethod
from nattramn.http.response import PartialResponse

DEFAULT_CACHE_CONTROL = "public, max-age=3600"


def checksum(body: bytes) -> str:
    """Content token used as the ETag: SHA-1 hex digest of *body*."""
    return hashlib.sha1(body, usedforsecurity=False).hexdigest()


def negotiate_encoding(compression: CompressionMethod, accept_encoding: str) -> str | None:
    """Pick the Content-Encoding to apply, or ``None`` to send the body as is.

    Only the configured method is ever considered; it applies when the
    client's Accept-Encoding mentions it.
    """
    if compression == CompressionMethod.GZIP and "gzip" in accept_encoding:
        return "gzip"
    if compression == CompressionMethod.BROTLI and "br" in accept_encoding:
        return "br"
    return None


def compress(body: bytes, encoding: str) -> bytes:
    """Compress *body* with the negotiated *encoding*."""
    if encoding == "gzip":
        return gzip.compress(body)
    if encoding == "br":
        return brotli.compress(body)
    msg = f"Unsupported content encoding: {encoding!r}"
    raise ValueError(msg)


def finalize(
    response: PartialResponse,
    accept_encoding: str,
    compression: CompressionMethod,
    *,
    default_cache_control: str = DEFAULT_CACHE_CONTROL,
) -> PartialResponse:
    """Return the response as it goes on the wire.

    The ETag is computed over the uncompressed body. Content-Length is
    set last so it reflects the compressed size.
    """
    response = response.with_header("ETag", checksum(response.body))

    if response.get_header("Cache-Control") is None:
        response = response.with_header("Cache-Control", default_cache_control)

    encoding = negotiate_encoding(compression, accept_encoding)
    if encoding is not None:
        response = response.with_header("Content-Encoding", encoding).with_body(
            compress(response.body, encoding)
        )

    return response.with_header("Content-Length", str(len(response.body)))
