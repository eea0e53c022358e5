"""Tests for border sanitization."""

from blockborder.borders import sanitize_border


def test_style_alone_is_dropped() -> None:
    assert sanitize_border({"width": None, "color": None, "style": "dashed"}) is None


def test_empty_width_counts_as_missing() -> None:
    assert sanitize_border({"width": "", "style": "solid"}) is None


def test_width_keeps_border() -> None:
    assert sanitize_border({"width": "2px"}) == {"width": "2px"}


def test_color_keeps_border_and_style() -> None:
    border = {"color": "#fff", "style": "dotted"}
    assert sanitize_border(border) == {"color": "#fff", "style": "dotted"}


def test_none_and_empty() -> None:
    assert sanitize_border(None) is None
    assert sanitize_border({}) is None
