"""Tests for default styling of added and updated chart objects."""

from chartmanager.chart import ChartHorizontalLine, LineStyle
from chartmanager.context import ChartContext, ManagerOptions
from chartmanager.manager import ChartManager
from chartmanager.styling import ChartObjectsDefaultSetting, DefaultStyleApplier

from conftest import bar


def test_applier_without_context_is_noop(chart):
    line = ChartHorizontalLine("ref", 1.25, color=chart.default_color)
    applier = DefaultStyleApplier()

    applier.on_added(line)
    applier.on_updated(line)

    assert line.color == chart.default_color


def test_applier_before_initialize_is_noop(chart, symbol):
    context = ChartContext(chart=chart, symbol=symbol, options=ManagerOptions())
    applier = DefaultStyleApplier(context)
    line = chart.draw_horizontal_line("ref", 1.25)

    applier.on_added(line)

    assert line.color == chart.default_color


def test_hand_drawn_line_gets_default_style(chart, manager):
    line = chart.draw_horizontal_line("ref", 1.25)

    assert line.color == "aqua"
    assert line.line_style is LineStyle.DOTS_RARE
    assert line.is_interactive


def test_updated_object_normalized(chart, manager):
    ref = chart.draw_horizontal_line("ref", 1.25, color="red")

    ref.color = chart.default_color

    assert ref.color == "aqua"
    assert ref.line_style is LineStyle.DOTS_RARE


def test_explicitly_colored_objects_untouched(chart, manager):
    line = chart.draw_horizontal_line("ref", 1.25, color="red", line_style=LineStyle.LINES)

    assert line.color == "red"
    assert line.line_style is LineStyle.LINES


def test_highlight_lines_untouched(chart, manager):
    vertical = chart.draw_vertical_line("marker_a", bar(0))

    assert vertical.color == chart.default_color


def test_observation_mode_only_reports(chart, symbol):
    manager = ChartManager(chart, symbol, ManagerOptions(observation_mode=True, settle_delay=0))
    manager.initialize()

    line = chart.draw_horizontal_line("ref", 1.25)

    assert manager.context.default_setting.observation_mode
    assert line.color == chart.default_color
    assert manager.context.default_setting.pending_changes(line) == {
        "color": "aqua",
        "line_style": LineStyle.DOTS_RARE,
        "is_interactive": True,
    }


def test_normalize_reports_whether_changes_were_needed(chart):
    setting = ChartObjectsDefaultSetting(chart)
    line = chart.draw_horizontal_line("ref", 1.25)

    assert setting.normalize(line)
    assert not setting.normalize(line)


def test_highlighted_reference_line_keeps_its_style(chart):
    setting = ChartObjectsDefaultSetting(chart)
    line = chart.draw_horizontal_line("ref", 1.25, line_style=LineStyle.LINES_DOTS)

    assert setting.pending_changes(line) == {"color": "aqua", "is_interactive": True}
    setting.normalize(line)

    assert line.line_style is LineStyle.LINES_DOTS
