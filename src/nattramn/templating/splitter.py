"""Marker-based template splitting.

A page template is plain HTML with a router slot::

    <html><head></head><body><nattramn-router></nattramn-router></body></html>

The text before ``<nattramn-router>`` is the *pre* fragment, the text
after ``</nattramn-router>`` the *post* fragment. Splitting is a plain
text operation; the two edge cases (marker absent, ``<head>`` absent)
are explicit branches below.
"""

from dataclasses import dataclass

ROUTER_OPEN = "<nattramn-router>"
ROUTER_CLOSE = "</nattramn-router>"
HEAD_OPEN = "<head>"


@dataclass(frozen=True, slots=True)
class TemplateFragments:
    """The surrounding markup a response is spliced into.

    ``None`` means "omit this side" (partial responses). ``has_slot`` is
    False unless the template carries both router markers; a
    missing marker leaves the whole template on that side.
    """

    pre: str | None
    post: str | None
    has_slot: bool = True


def pre_content(template: str, partial: bool) -> str | None:
    """Markup before the router slot, or the whole template if there is none.

    Returns ``None`` for partial responses.
    """
    if partial:
        return None
    if ROUTER_OPEN not in template:
        return template
    return template.partition(ROUTER_OPEN)[0]


def post_content(template: str, partial: bool) -> str | None:
    """Markup after the router slot, or the whole template if there is none.

    Returns ``None`` for partial responses.
    """
    if partial:
        return None
    if ROUTER_CLOSE not in template:
        return template
    # A second close tag ends the post fragment
    return template.split(ROUTER_CLOSE)[1]


def split_template(template: str, partial: bool) -> TemplateFragments:
    """Split *template* into the fragments around its router slot."""
    return TemplateFragments(
        pre=pre_content(template, partial),
        post=post_content(template, partial),
        has_slot=ROUTER_OPEN in template and ROUTER_CLOSE in template,
    )


def split_head(pre: str) -> tuple[str, str] | None:
    """Split a pre fragment at its first ``<head>`` tag.

    Returns ``(before, after)`` with the tag itself removed, or ``None``
    when the fragment has no ``<head>`` tag.
    """
    if HEAD_OPEN not in pre:
        return None
    before, _, after = pre.partition(HEAD_OPEN)
    return before, after


def wrap_in_router(body: str) -> str:
    """Wrap rendered body markup in the router slot markers."""
    return f"{ROUTER_OPEN}{body}{ROUTER_CLOSE}"
