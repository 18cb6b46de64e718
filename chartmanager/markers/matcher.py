"""Find the markers lying on a reference line."""

from __future__ import annotations

from typing import TYPE_CHECKING, List, Optional, Sequence

from ..config import MATCH_TOLERANCE

if TYPE_CHECKING:
    from ..chart import ChartHorizontalLine
    from ..context import ChartContext
    from .marker_index import MarkerRecord


class MarkerMatcher:
    """Matches reference lines to markers by price within a fixed tolerance."""

    def __init__(self, context: ChartContext, tolerance: float = MATCH_TOLERANCE):
        self.context = context
        self.tolerance = tolerance

    def match(
        self,
        line: ChartHorizontalLine,
        index: Optional[Sequence[MarkerRecord]],
    ) -> List[MarkerRecord]:
        """Return every marker whose midpoint is within tolerance of the line.

        Args:
            line: Selected reference line
            index: Current marker records; None is treated as empty

        Returns:
            Matching records in index order (possibly empty)
        """
        if not index:
            return []

        y = self.context.symbol.round_price(line.y)
        print(f"[Marker Matcher] name: {line.name}, y: {y}")

        return [marker for marker in index if abs(marker.mid_y - y) < self.tolerance]
