"""Tests for nattramn.templating.splitter — marker-based template splitting."""

import pytest

from nattramn.templating.splitter import (
    ROUTER_CLOSE,
    ROUTER_OPEN,
    post_content,
    pre_content,
    split_head,
    split_template,
    wrap_in_router,
)

TEMPLATE = (
    "<html><head><meta charset='utf-8'></head><body><nav></nav>"
    "<nattramn-router></nattramn-router><footer></footer></body></html>"
)


class TestPartialMode:
    @pytest.mark.parametrize("template", [TEMPLATE, "", "no markers at all"])
    def test_partial_suppresses_both_sides(self, template: str) -> None:
        assert pre_content(template, True) is None
        assert post_content(template, True) is None

    def test_split_template_partial(self) -> None:
        fragments = split_template(TEMPLATE, True)
        assert fragments.pre is None
        assert fragments.post is None


class TestFullMode:
    def test_pre_is_text_before_open_marker(self) -> None:
        assert pre_content(TEMPLATE, False) == (
            "<html><head><meta charset='utf-8'></head><body><nav></nav>"
        )

    def test_post_is_text_after_close_marker(self) -> None:
        assert post_content(TEMPLATE, False) == "<footer></footer></body></html>"

    def test_reconstructs_original(self) -> None:
        fragments = split_template(TEMPLATE, False)
        assert fragments.pre + ROUTER_OPEN + ROUTER_CLOSE + fragments.post == TEMPLATE

    def test_reconstructs_around_existing_slot_content(self) -> None:
        template = "<p>a</p><nattramn-router><i>loading</i></nattramn-router><p>b</p>"
        fragments = split_template(template, False)
        assert fragments.pre + ROUTER_OPEN + "<i>loading</i>" + ROUTER_CLOSE + fragments.post == (
            template
        )

    def test_missing_markers_return_whole_template(self) -> None:
        template = "<html><body>static</body></html>"
        assert pre_content(template, False) == template
        assert post_content(template, False) == template

    def test_has_slot(self) -> None:
        assert split_template(TEMPLATE, False).has_slot is True
        assert split_template("<html></html>", False).has_slot is False

    def test_open_marker_only_has_no_slot(self) -> None:
        fragments = split_template("<body><nattramn-router>", False)
        assert fragments.has_slot is False
        assert fragments.pre == "<body>"


class TestSplitHead:
    def test_splits_at_head_tag(self) -> None:
        assert split_head("<html><head><meta></head><body>") == ("<html>", "<meta></head><body>")

    def test_missing_head_tag(self) -> None:
        assert split_head("<html><body>") is None

    def test_only_first_head_tag_splits(self) -> None:
        before, after = split_head("<head>a<head>b")
        assert before == ""
        assert after == "a<head>b"


class TestWrapInRouter:
    def test_wraps(self) -> None:
        assert wrap_in_router("<p>x</p>") == "<nattramn-router><p>x</p></nattramn-router>"


class TestRepeatedMarkers:
    def test_post_stops_at_second_close_tag(self) -> None:
        template = "a<nattramn-router></nattramn-router>b</nattramn-router>c"
        assert post_content(template, False) == "b"

    def test_pre_stops_at_first_open_tag(self) -> None:
        template = "a<nattramn-router>b<nattramn-router>c"
        assert pre_content(template, False) == "a"
