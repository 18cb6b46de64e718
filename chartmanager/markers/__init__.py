"""Marker bookkeeping for reference-line selection.

- marker_index: marker records derived from the chart's ellipses
- matcher: tolerance-based lookup of markers on a reference line
- highlight: highlight line drawing, hiding and reference-line restyling
"""

from .highlight import BASE_LINE_STYLE, HIGHLIGHTED_LINE_STYLE, HighlightRenderer
from .marker_index import MarkerIndex, MarkerRecord
from .matcher import MarkerMatcher

__all__ = [
    "BASE_LINE_STYLE",
    "HIGHLIGHTED_LINE_STYLE",
    "HighlightRenderer",
    "MarkerIndex",
    "MarkerRecord",
    "MarkerMatcher",
]
