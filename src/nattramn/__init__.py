"""Nattramn — an HTML page server with partial-content navigation.

Splices per-route static templates with dynamically produced head and
body fragments, serves static assets for extensioned paths, and answers
client-side navigations with the body fragment alone.

Basic usage::

    from nattramn import Config, Nattramn, Page, PageData, RouterConfig

    async def user(request, params):
        return PageData(head="<title>User</title>", body=f"<p>{params['id']}</p>")

    app = Nattramn(Config(router=RouterConfig(pages=(
        Page("/users/:id", open("templates/layout.html").read(), user),
    ))))
    app.start_server(port=5000)
"""

__version__ = "0.1.0"
__all__ = [
    "AssetNotFound",
    "CompressionMethod",
    "Config",
    "ConfigurationError",
    "DispatchError",
    "HandlerFailure",
    "Nattramn",
    "NattramnError",
    "Page",
    "PageData",
    "PartialResponse",
    "Request",
    "RouteNotFound",
    "RouterConfig",
    "ServerConfig",
]


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import nattramn`` fast while providing a clean top-level API.
    """
    if name == "Nattramn":
        from nattramn.app import Nattramn

        return Nattramn

    if name in ("CompressionMethod", "Config", "Page", "PageData", "RouterConfig", "ServerConfig"):
        from nattramn import config as _config

        return getattr(_config, name)

    if name == "Request":
        from nattramn.http.request import Request

        return Request

    if name == "PartialResponse":
        from nattramn.http.response import PartialResponse

        return PartialResponse

    if name in (
        "AssetNotFound",
        "ConfigurationError",
        "DispatchError",
        "HandlerFailure",
        "NattramnError",
        "RouteNotFound",
    ):
        from nattramn import errors as _errors

        return getattr(_errors, name)

    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)
