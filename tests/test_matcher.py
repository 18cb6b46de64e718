"""Tests for tolerance-based marker matching."""

from chartmanager.markers import MarkerIndex, MarkerMatcher

from conftest import add_marker, add_reference_line


def test_match_example_only_close_marker(chart, context):
    add_marker(chart, "near", 1.2345)
    add_marker(chart, "far", 1.2500)
    line = add_reference_line(chart, "ref", 1.2346)

    matches = MarkerMatcher(context).match(line, MarkerIndex(context).rebuild())

    assert [m.name for m in matches] == ["marker_near"]


def test_match_absent_index_is_empty(chart, context):
    line = add_reference_line(chart, "ref", 1.2346)

    assert MarkerMatcher(context).match(line, None) == []


def test_match_returns_every_marker_within_tolerance(chart, context):
    add_marker(chart, "a", 1.2345, start=0, end=2)
    add_marker(chart, "b", 1.2345, start=6, end=8)
    add_marker(chart, "c", 1.2390, start=10, end=12)
    line = add_reference_line(chart, "ref", 1.2345)

    matches = MarkerMatcher(context).match(line, MarkerIndex(context).rebuild())

    assert [m.name for m in matches] == ["marker_a", "marker_b", "marker_c"]


def test_match_no_marker_within_tolerance(chart, context):
    add_marker(chart, "a", 1.3000)
    line = add_reference_line(chart, "ref", 1.2345)

    assert MarkerMatcher(context).match(line, MarkerIndex(context).rebuild()) == []


def test_line_position_rounded_before_compare(chart, context):
    add_marker(chart, "a", 1.2000)
    # 1.21004 rounds to 1.2100, exactly 0.0100 away
    line = add_reference_line(chart, "ref", 1.21004)
    index = MarkerIndex(context).rebuild()

    assert MarkerMatcher(context).match(line, index) == []
    assert len(MarkerMatcher(context, tolerance=0.02).match(line, index)) == 1
