"""Invoke helper — call sync or async page handlers uniformly.

Page handlers can be ``def`` or ``async def``. The sync/async check
lives in exactly one place::

    from nattramn._internal.invoke import invoke

    data = await invoke(page.handler, request, params)
"""

import inspect
from typing import Any


async def invoke(handler: Any, *args: Any, **kwargs: Any) -> Any:
    """Call a handler and await the result if it's awaitable."""
    result = handler(*args, **kwargs)
    if inspect.isawaitable(result):
        result = await result
    return result
