"""Response assembly — splice page data into its template.

Full page loads get the template around the rendered body, with the
page's head markup injected after ``<head>``. Partial loads (client-side
navigation) get the body alone; the page title then travels out of band
in the ``X-Header-Updates`` header so the client can still update
``document.title``.
"""

import base64
import json
import logging
import re

from nattramn.config import Page, PageData
from nattramn.http.headers import header_list, set_header
from nattramn.http.response import PartialResponse
from nattramn.templating.splitter import HEAD_OPEN, split_head, split_template, wrap_in_router

logger = logging.getLogger("nattramn.templating")

HEADER_UPDATES = "X-Header-Updates"

_TITLE_RE = re.compile(r"<title>(.+)</title>", re.IGNORECASE)


def minify_html(markup: str) -> str:
    """Minification hook for head and body markup. Currently a no-op."""
    return markup


def title_update(head: str) -> str | None:
    """Encode the ``<title>`` of *head* for the ``X-Header-Updates`` header.

    Returns base64 of the UTF-8 JSON ``{"title": ...}``, or ``None`` when
    the head has no title.
    """
    match = _TITLE_RE.search(head)
    if match is None:
        return None
    payload = json.dumps({"title": match.group(1)}, separators=(",", ":"), ensure_ascii=False)
    return base64.b64encode(payload.encode("utf-8")).decode("ascii")


def assemble(
    page: Page,
    page_data: PageData,
    partial: bool,
    *,
    minify: bool = False,
) -> PartialResponse:
    """Build the 200 response for a routed page.

    Fragments are joined with newlines:

    1. the template before ``<head>``, then ``<head>`` plus the page head,
       then the rest of the pre fragment (full loads only);
    2. the body, wrapped in router markers on full loads;
    3. the template after the router slot (full loads only).

    A full load whose page data has no head answers with the pre fragment
    alone. A pre fragment without a ``<head>`` tag is emitted unchanged
    and the head markup is dropped.
    """
    fragments = split_template(page.template, partial)
    head = minify_html(page_data.head) if minify else page_data.head
    body = minify_html(page_data.body) if minify else page_data.body

    headers = set_header(header_list(page_data.headers), "Content-Type", "text/html")

    if not fragments.pre and head:
        encoded = title_update(head)
        if encoded is not None:
            headers = set_header(headers, HEADER_UPDATES, encoded)

    parts: list[str] = []

    if fragments.pre:
        if not head:
            return PartialResponse(body=fragments.pre.encode("utf-8"), headers=headers)

        split = split_head(fragments.pre)
        if split is None:
            logger.debug("Template for %r has no <head> tag; page head not injected.", page.route)
            parts.append(fragments.pre)
        else:
            before, after = split
            parts.extend((before, HEAD_OPEN + head, after))

    parts.append(body if partial else wrap_in_router(body))

    # Without a router slot pre and post are both the whole template
    if fragments.post and fragments.has_slot:
        parts.append(fragments.post)

    return PartialResponse(body="\n".join(parts).encode("utf-8"), headers=headers)
