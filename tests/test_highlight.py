"""Tests for drawing, hiding and reverting marker highlights."""

from chartmanager.chart import ChartVerticalLine, LineStyle
from chartmanager.markers import (
    BASE_LINE_STYLE,
    HIGHLIGHTED_LINE_STYLE,
    HighlightRenderer,
    MarkerIndex,
    MarkerMatcher,
)

from conftest import add_marker, add_reference_line, bar


def _matches(context, line):
    return MarkerMatcher(context).match(line, MarkerIndex(context).rebuild())


class TestDrawFor:
    def test_no_matches_draws_nothing(self, chart, context, sleeps):
        line = add_reference_line(chart, "ref", 1.2345)
        renderer = HighlightRenderer(context, sleep=sleeps.append)

        assert renderer.draw_for(line, []) == []
        assert line.line_style is BASE_LINE_STYLE
        assert chart.find_all_objects(ChartVerticalLine) == []
        assert sleeps == []

    def test_draws_one_line_per_match(self, chart, context, sleeps):
        add_marker(chart, "a", 1.2345, start=0, end=4)
        add_marker(chart, "b", 1.2346, start=8, end=12)
        line = add_reference_line(chart, "ref", 1.2345)

        drawn = HighlightRenderer(context, sleep=sleeps.append).draw_for(line, _matches(context, line))

        assert [v.name for v in drawn] == ["marker_a", "marker_b"]
        assert [v.time for v in drawn] == [bar(2), bar(10)]
        for vertical in drawn:
            assert vertical.color == "hotpink"
            assert vertical.thickness == 2
            assert vertical.line_style is LineStyle.DOTS_VERY_RARE
            assert vertical.is_interactive
            assert not vertical.is_hidden
            assert vertical.artist.get_visible()

    def test_highlights_line_then_settles(self, chart, context):
        add_marker(chart, "a", 1.2345)
        line = add_reference_line(chart, "ref", 1.2345)
        seen = []
        renderer = HighlightRenderer(context, sleep=lambda delay: seen.append((delay, line.line_style)))

        renderer.draw_for(line, _matches(context, line))

        assert seen == [(0.3, HIGHLIGHTED_LINE_STYLE)]

    def test_unhides_hidden_marker(self, chart, context, sleeps):
        ellipse = add_marker(chart, "a", 1.2345)
        ellipse.is_hidden = True
        line = add_reference_line(chart, "ref", 1.2345)

        HighlightRenderer(context, sleep=sleeps.append).draw_for(line, _matches(context, line))

        assert not ellipse.is_hidden

    def test_redraw_reuses_existing_highlight_line(self, chart, context, sleeps):
        add_marker(chart, "a", 1.2345)
        line = add_reference_line(chart, "ref", 1.2345)
        renderer = HighlightRenderer(context, sleep=sleeps.append)

        (first,) = renderer.draw_for(line, _matches(context, line))
        renderer.hide_all()
        (second,) = renderer.draw_for(line, _matches(context, line))

        assert second is first
        assert not second.is_hidden
        assert len(chart.find_all_objects(ChartVerticalLine)) == 1


class TestHideAll:
    def test_hides_every_prefixed_line(self, chart, context, sleeps):
        add_marker(chart, "a", 1.2345)
        add_marker(chart, "b", 1.2345, start=6, end=8)
        line = add_reference_line(chart, "ref", 1.2345)
        renderer = HighlightRenderer(context, sleep=sleeps.append)
        renderer.draw_for(line, _matches(context, line))

        assert renderer.hide_all() == 2
        assert all(v.is_hidden for v in chart.find_all_objects(ChartVerticalLine))

    def test_leaves_other_vertical_lines_alone(self, chart, context):
        session = chart.draw_vertical_line("session open", bar(0))

        assert HighlightRenderer(context).hide_all() == 0
        assert not session.is_hidden

    def test_is_idempotent(self, chart, context, sleeps):
        add_marker(chart, "a", 1.2345)
        line = add_reference_line(chart, "ref", 1.2345)
        renderer = HighlightRenderer(context, sleep=sleeps.append)
        renderer.draw_for(line, _matches(context, line))

        renderer.hide_all()
        once = [(v.name, v.is_hidden) for v in chart.find_all_objects(ChartVerticalLine)]
        renderer.hide_all()
        twice = [(v.name, v.is_hidden) for v in chart.find_all_objects(ChartVerticalLine)]

        assert once == twice


class TestRevertStyle:
    def test_reverts_highlighted_line(self, chart, context):
        line = add_reference_line(chart, "ref", 1.2345)
        line.line_style = HIGHLIGHTED_LINE_STYLE

        assert HighlightRenderer(context).revert_style(line)
        assert line.line_style is BASE_LINE_STYLE

    def test_other_styles_untouched(self, chart, context):
        line = chart.draw_horizontal_line("ref", 1.2345, line_style=LineStyle.LINES)

        assert not HighlightRenderer(context).revert_style(line)
        assert line.line_style is LineStyle.LINES
