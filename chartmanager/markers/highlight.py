"""Highlight lines connecting a selected reference line to its markers.

Highlight lines are vertical lines named ``<HIGHLIGHT_LINE_PREFIX>_<ellipse>``.
They are only ever hidden and shown again, never removed from the chart.
"""

from __future__ import annotations

import time
from typing import TYPE_CHECKING, Callable, List, Sequence

from ..chart import ChartVerticalLine, LineStyle
from ..config import (
    BASE_LINE_STYLE_NAME,
    HIGHLIGHT_COLOR,
    HIGHLIGHT_LINE_PREFIX,
    HIGHLIGHT_THICKNESS,
    HIGHLIGHT_VERTICAL_STYLE_NAME,
    HIGHLIGHTED_LINE_STYLE_NAME,
)

if TYPE_CHECKING:
    from ..chart import ChartHorizontalLine
    from ..context import ChartContext
    from .marker_index import MarkerRecord

BASE_LINE_STYLE = LineStyle[BASE_LINE_STYLE_NAME]
HIGHLIGHTED_LINE_STYLE = LineStyle[HIGHLIGHTED_LINE_STYLE_NAME]
HIGHLIGHT_VERTICAL_STYLE = LineStyle[HIGHLIGHT_VERTICAL_STYLE_NAME]


class HighlightRenderer:
    """Draws, hides and un-styles marker highlights on the chart."""

    def __init__(self, context: ChartContext, sleep: Callable[[float], None] = time.sleep):
        """Initialize the highlight renderer.

        Args:
            context: Shared chart context
            sleep: Blocking pause used for the post-draw settle step
        """
        self.context = context
        self.sleep = sleep

    def draw_for(self, line: ChartHorizontalLine, matches: Sequence[MarkerRecord]) -> List[ChartVerticalLine]:
        """Draw one highlight line per matched marker and highlight ``line``.

        The reference line is restyled only after every highlight is drawn,
        and the call returns only after the settle pause.

        Args:
            line: Selected reference line
            matches: Markers found on the line

        Returns:
            The highlight lines drawn (empty when nothing matched)
        """
        if not matches:
            print("[Highlight] There is no marker.")
            return []

        chart = self.context.chart
        drawn = []
        for marker in matches:
            ellipse = marker.ellipse
            if ellipse is not None and ellipse.is_hidden:
                ellipse.is_hidden = False

            vertical_line = chart.draw_vertical_line(
                name=marker.name,
                time=marker.mid_time,
                color=HIGHLIGHT_COLOR,
                thickness=HIGHLIGHT_THICKNESS,
                line_style=HIGHLIGHT_VERTICAL_STYLE,
            )
            vertical_line.is_interactive = True
            vertical_line.is_hidden = False
            drawn.append(vertical_line)

        line.line_style = HIGHLIGHTED_LINE_STYLE
        print(f"[Highlight] Drew {len(drawn)} highlight line(s) for '{line.name}'")

        self._settle()
        return drawn

    def _settle(self) -> None:
        delay = self.context.options.settle_delay
        if delay > 0:
            self.sleep(delay)

    def highlight_lines(self) -> List[ChartVerticalLine]:
        """All vertical lines carrying the reserved highlight prefix."""
        return [
            vertical_line
            for vertical_line in self.context.chart.find_all_objects(ChartVerticalLine)
            if vertical_line.name.startswith(HIGHLIGHT_LINE_PREFIX)
        ]

    def hide_all(self) -> int:
        """Hide every highlight line on the chart.

        Returns:
            Number of highlight lines found
        """
        marker_lines = self.highlight_lines()
        if not marker_lines:
            return 0

        print(f"[Highlight] Hiding {len(marker_lines)} highlight line(s)")
        for vertical_line in marker_lines:
            vertical_line.is_hidden = True
        return len(marker_lines)

    def revert_style(self, line: ChartHorizontalLine) -> bool:
        """Put a highlighted reference line back to the base style."""
        if line.line_style is not HIGHLIGHTED_LINE_STYLE:
            return False
        line.line_style = BASE_LINE_STYLE
        return True
