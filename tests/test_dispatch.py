"""Tests for nattramn.server.handler.dispatch — request to PartialResponse."""

from pathlib import Path

import httpx
import pytest

from nattramn.config import Config, Page, PageData, RouterConfig, ServerConfig
from nattramn.errors import AssetNotFound, HandlerFailure, RouteNotFound
from nattramn.http.request import Request
from nattramn.routing.router import Router
from nattramn.server.handler import dispatch

TEMPLATE = "<html><head></head><body><nattramn-router></nattramn-router></body></html>"


def _request(path: str, query: bytes = b"") -> Request:
    return Request.from_asgi(
        {"type": "http", "method": "GET", "path": path, "query_string": query, "headers": []}
    )


async def _dispatch(request: Request, config: Config) -> object:
    router = Router(config.router.pages)
    router.compile()
    async with httpx.AsyncClient(transport=httpx.MockTransport(lambda r: httpx.Response(500))) as client:
        return await dispatch(request, config=config, router=router, http_client=client)


def _pages(*pages: Page) -> Config:
    return Config(router=RouterConfig(pages=pages))


class TestPageDispatch:
    async def test_full_page(self) -> None:
        config = _pages(Page("/", TEMPLATE, lambda request, params: PageData(body="hi")))
        response = await _dispatch(_request("/"), config)
        assert response.text.startswith("<html>")
        assert "<nattramn-router>hi</nattramn-router>" in response.text

    async def test_partial_page(self) -> None:
        config = _pages(Page("/", TEMPLATE, lambda request, params: PageData(body="hi")))
        response = await _dispatch(_request("/", b"partialContent=true"), config)
        assert response.text == "hi"

    async def test_no_route(self) -> None:
        with pytest.raises(RouteNotFound):
            await _dispatch(_request("/nope"), _pages())

    async def test_handler_none(self) -> None:
        config = _pages(Page("/", TEMPLATE, lambda request, params: None))
        with pytest.raises(HandlerFailure, match="Could not create PageData"):
            await _dispatch(_request("/"), config)

    async def test_handler_raises(self) -> None:
        def broken(request: Request, params: dict[str, str]) -> PageData:
            raise ValueError("boom")

        config = _pages(Page("/", TEMPLATE, broken))
        with pytest.raises(HandlerFailure) as exc_info:
            await _dispatch(_request("/"), config)
        assert isinstance(exc_info.value.__cause__, ValueError)


    async def test_unsendable_header(self) -> None:
        config = _pages(
            Page("/", TEMPLATE, lambda request, params: PageData(body="x", headers={"X-Who": "☃"}))
        )
        with pytest.raises(HandlerFailure, match="invalid page data"):
            await _dispatch(_request("/"), config)


class TestAssetDispatch:
    async def test_unconfigured_static(self) -> None:
        with pytest.raises(AssetNotFound):
            await _dispatch(_request("/app.js"), Config())

    async def test_static_file(self, tmp_path: Path) -> None:
        (tmp_path / "public").mkdir()
        (tmp_path / "public" / "style.css").write_text("body{}")
        config = Config(server=ServerConfig(serve_static="public", static_root=tmp_path))
        response = await _dispatch(_request("/style.css"), config)
        assert response.body == b"body{}"
        assert response.content_type == "text/css"

    async def test_extension_path_never_routes(self) -> None:
        config = _pages(Page("/:file", TEMPLATE, lambda request, params: PageData(body="page")))
        with pytest.raises(AssetNotFound):
            await _dispatch(_request("/app.js"), config)

    async def test_bundle_failure(self) -> None:
        with pytest.raises(AssetNotFound):
            await _dispatch(_request("/nattramn-client.js"), Config())
