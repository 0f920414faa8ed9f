"""Tests for nattramn.http.response — immutable PartialResponse."""

from nattramn.http.response import PartialResponse, not_found


class TestPartialResponse:
    def test_defaults(self) -> None:
        r = PartialResponse()
        assert r.status == 200
        assert r.body == b""
        assert r.headers == ()

    def test_with_header_sets(self) -> None:
        r = PartialResponse().with_header("ETag", "a").with_header("etag", "b")
        assert r.headers == (("etag", "b"),)
        assert r.get_header("ETag") == "b"

    def test_transformations_do_not_mutate(self) -> None:
        original = PartialResponse(body=b"x")
        changed = original.with_body(b"y").with_header("A", "1")
        assert original.body == b"x"
        assert original.headers == ()
        assert changed.text == "y"
        assert changed.get_header("A") == "1"

    def test_content_type(self) -> None:
        assert PartialResponse(headers=(("content-type", "text/css"),)).content_type == "text/css"
        assert PartialResponse().content_type is None


class TestNotFound:
    def test_body_and_status(self) -> None:
        r = not_found()
        assert r.status == 404
        assert r.text == "Not Found"
        assert r.content_type == "text/plain; charset=utf-8"
