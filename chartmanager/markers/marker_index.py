"""Marker index derived from the ellipses on the chart.

Each ellipse becomes a :class:`MarkerRecord` holding its vertical midpoint,
its time midpoint and the name its highlight line will carry. The index is
rebuilt from scratch on request and never patched incrementally.
"""

from __future__ import annotations

import weakref
from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional, Tuple

import pandas as pd

from ..chart import ChartEllipse
from ..config import HIGHLIGHT_LINE_PREFIX

if TYPE_CHECKING:
    from ..context import ChartContext


@dataclass(frozen=True)
class MarkerRecord:
    """Snapshot of one ellipse taken when the index was built."""

    source: weakref.ref
    mid_y: float
    mid_time: pd.Timestamp
    name: str

    @property
    def ellipse(self) -> Optional[ChartEllipse]:
        """The originating ellipse, or None if the chart no longer holds it."""
        return self.source()

    @classmethod
    def from_ellipse(cls, ellipse: ChartEllipse, digits: int) -> MarkerRecord:
        return cls(
            source=weakref.ref(ellipse),
            mid_y=round(ellipse.mid_y, digits),
            mid_time=ellipse.mid_time,
            name=f"{HIGHLIGHT_LINE_PREFIX}_{ellipse.name}",
        )


class MarkerIndex:
    """Holds the current marker records for one chart."""

    def __init__(self, context: ChartContext):
        self.context = context
        self.records: Optional[Tuple[MarkerRecord, ...]] = None

    def rebuild(self) -> Optional[Tuple[MarkerRecord, ...]]:
        """Replace the index with one record per ellipse on the chart.

        Returns:
            The new records, or None when the chart has no ellipses
        """
        ellipses = self.context.chart.find_all_objects(ChartEllipse)
        if not ellipses:
            self.records = None
            return None

        digits = self.context.symbol.digits
        self.records = tuple(MarkerRecord.from_ellipse(ellipse, digits) for ellipse in ellipses)
        print(f"[Marker Index] Rebuilt with {len(self.records)} marker(s)")
        return self.records
