"""Client bundle proxy.

The browser side of nattramn (the ``<nattramn-router>`` element) is
published as a single JavaScript bundle. Requests for the configured
bundle path are answered by fetching it from the remote URL.
"""

import logging

import httpx

from nattramn.errors import AssetNotFound
from nattramn.http.response import PartialResponse

logger = logging.getLogger("nattramn.server")


async def fetch_client_bundle(client: httpx.AsyncClient, url: str, path: str) -> PartialResponse:
    """Fetch the client bundle from *url* and serve it as JavaScript.

    Raises ``AssetNotFound`` on transport errors and non-2xx statuses.
    """
    try:
        upstream = await client.get(url, follow_redirects=True)
        upstream.raise_for_status()
    except httpx.HTTPError as exc:
        raise AssetNotFound(path, f"client bundle fetch from {url} failed: {exc}") from exc

    logger.debug("Fetched client bundle from %s (%d bytes)", url, len(upstream.content))
    return PartialResponse(
        body=upstream.content,
        headers=(("Content-Type", "application/javascript"),),
    )
