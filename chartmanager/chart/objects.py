"""Chart object model backed by matplotlib artists.

Every object on the chart is a named :class:`ChartObject`. The chart surface
creates the matplotlib artist for it; the object keeps that artist in sync
whenever one of its display properties changes and tells the chart so that
``objects_updated`` subscribers are notified.
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Any, Dict, Optional

import pandas as pd
from matplotlib.dates import date2num

if TYPE_CHECKING:
    from .surface import ChartSurface


class ChartObjectType(Enum):
    """Kinds of objects the chart can hold."""

    HORIZONTAL_LINE = "horizontal_line"
    VERTICAL_LINE = "vertical_line"
    ELLIPSE = "ellipse"
    STATIC_TEXT = "static_text"


class LineStyle(Enum):
    """Stroke patterns available for lines and shape outlines."""

    SOLID = "solid"
    DOTS = "dots"
    DOTS_RARE = "dots_rare"
    DOTS_VERY_RARE = "dots_very_rare"
    LINES = "lines"
    LINES_DOTS = "lines_dots"

    @property
    def mpl_linestyle(self) -> Any:
        """Matplotlib linestyle (name or dash tuple) for this pattern."""
        return _MPL_LINESTYLES[self]


_MPL_LINESTYLES: Dict[LineStyle, Any] = {
    LineStyle.SOLID: "-",
    LineStyle.DOTS: (0, (1, 2)),
    LineStyle.DOTS_RARE: (0, (1, 4)),
    LineStyle.DOTS_VERY_RARE: (0, (1, 8)),
    LineStyle.LINES: (0, (5, 3)),
    LineStyle.LINES_DOTS: (0, (5, 3, 1, 3)),
}


class HorizontalAlignment(Enum):
    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"


class VerticalAlignment(Enum):
    TOP = "top"
    CENTER = "center"
    BOTTOM = "bottom"


# Axes-fraction anchor for text placed by alignment
_H_ANCHOR = {
    HorizontalAlignment.LEFT: 0.01,
    HorizontalAlignment.CENTER: 0.5,
    HorizontalAlignment.RIGHT: 0.99,
}
_V_ANCHOR = {
    VerticalAlignment.TOP: 0.99,
    VerticalAlignment.CENTER: 0.5,
    VerticalAlignment.BOTTOM: 0.01,
}


def alignment_anchor(horizontal: HorizontalAlignment, vertical: VerticalAlignment) -> tuple:
    """Return the (x, y) axes-fraction position for an alignment pair."""
    return _H_ANCHOR[horizontal], _V_ANCHOR[vertical]


class ChartObject:
    """Base class for named chart objects."""

    object_type: ChartObjectType

    def __init__(
        self,
        name: str,
        *,
        color: str,
        thickness: float = 1,
        line_style: LineStyle = LineStyle.SOLID,
    ):
        self.name = name
        self._color = color
        self._thickness = thickness
        self._line_style = line_style
        self._is_hidden = False
        self._is_interactive = False

        self.chart: Optional[ChartSurface] = None
        self.artist: Optional[Any] = None

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r})"

    # -- display properties -------------------------------------------------

    @property
    def color(self) -> str:
        return self._color

    @color.setter
    def color(self, value: str) -> None:
        self._color = value
        self._changed()

    @property
    def thickness(self) -> float:
        return self._thickness

    @thickness.setter
    def thickness(self, value: float) -> None:
        self._thickness = value
        self._changed()

    @property
    def line_style(self) -> LineStyle:
        return self._line_style

    @line_style.setter
    def line_style(self, value: LineStyle) -> None:
        self._line_style = value
        self._changed()

    @property
    def is_hidden(self) -> bool:
        return self._is_hidden

    @is_hidden.setter
    def is_hidden(self, value: bool) -> None:
        self._is_hidden = bool(value)
        self._changed()

    @property
    def is_interactive(self) -> bool:
        return self._is_interactive

    @is_interactive.setter
    def is_interactive(self, value: bool) -> None:
        self._is_interactive = bool(value)
        self._changed()

    # -- chart plumbing -----------------------------------------------------

    def configure(self, **properties: Any) -> None:
        """Set several properties at once without raising update events.

        Used by the chart when an object is (re)drawn under an existing name.
        """
        for key, value in properties.items():
            if not hasattr(self, f"_{key}"):
                raise AttributeError(f"{type(self).__name__} has no property '{key}'")
            setattr(self, f"_{key}", value)
        self.sync_artist()

    def sync_artist(self) -> None:
        """Push the current display properties to the matplotlib artist."""
        if self.artist is None:
            return
        self.artist.set_visible(not self._is_hidden)
        self.artist.set_linewidth(self._thickness)
        self.artist.set_linestyle(self._line_style.mpl_linestyle)
        self.artist.set_color(self._color)
        self.artist.set_picker(5 if self._is_interactive else False)

    def _changed(self) -> None:
        self.sync_artist()
        if self.chart is not None:
            self.chart.notify_updated(self)


class ChartHorizontalLine(ChartObject):
    """Horizontal line at a price level."""

    object_type = ChartObjectType.HORIZONTAL_LINE

    def __init__(self, name: str, y: float, **kwargs: Any):
        super().__init__(name, **kwargs)
        self._y = float(y)

    @property
    def y(self) -> float:
        return self._y

    @y.setter
    def y(self, value: float) -> None:
        self._y = float(value)
        self._changed()

    def sync_artist(self) -> None:
        super().sync_artist()
        if self.artist is not None:
            self.artist.set_ydata([self._y, self._y])


class ChartVerticalLine(ChartObject):
    """Vertical line at a bar time."""

    object_type = ChartObjectType.VERTICAL_LINE

    def __init__(self, name: str, time: pd.Timestamp, **kwargs: Any):
        super().__init__(name, **kwargs)
        self._time = pd.Timestamp(time)

    @property
    def time(self) -> pd.Timestamp:
        return self._time

    @time.setter
    def time(self, value: pd.Timestamp) -> None:
        self._time = pd.Timestamp(value)
        self._changed()

    def sync_artist(self) -> None:
        super().sync_artist()
        if self.artist is not None:
            x = date2num(self._time)
            self.artist.set_xdata([x, x])


class ChartEllipse(ChartObject):
    """Ellipse inscribed in the box spanned by two (time, price) corners."""

    object_type = ChartObjectType.ELLIPSE

    def __init__(
        self,
        name: str,
        time1: pd.Timestamp,
        y1: float,
        time2: pd.Timestamp,
        y2: float,
        **kwargs: Any,
    ):
        super().__init__(name, **kwargs)
        self._time1 = pd.Timestamp(time1)
        self._y1 = float(y1)
        self._time2 = pd.Timestamp(time2)
        self._y2 = float(y2)

    @property
    def time1(self) -> pd.Timestamp:
        return self._time1

    @property
    def time2(self) -> pd.Timestamp:
        return self._time2

    @property
    def y1(self) -> float:
        return self._y1

    @property
    def y2(self) -> float:
        return self._y2

    def set_corners(self, time1: pd.Timestamp, y1: float, time2: pd.Timestamp, y2: float) -> None:
        """Move the ellipse to a new bounding box."""
        self._time1 = pd.Timestamp(time1)
        self._y1 = float(y1)
        self._time2 = pd.Timestamp(time2)
        self._y2 = float(y2)
        self._changed()

    @property
    def mid_time(self) -> pd.Timestamp:
        return self._time1 + (self._time2 - self._time1) / 2

    @property
    def mid_y(self) -> float:
        return (self._y1 + self._y2) / 2

    def sync_artist(self) -> None:
        if self.artist is None:
            return
        self.artist.set_visible(not self._is_hidden)
        self.artist.set_linewidth(self._thickness)
        self.artist.set_linestyle(self._line_style.mpl_linestyle)
        self.artist.set_edgecolor(self._color)
        self.artist.set_facecolor("none")
        self.artist.set_picker(5 if self._is_interactive else False)

        x1, x2 = date2num(self._time1), date2num(self._time2)
        self.artist.set_center(((x1 + x2) / 2, self.mid_y))
        self.artist.set_width(abs(x2 - x1))
        self.artist.set_height(abs(self._y2 - self._y1))


class ChartStaticText(ChartObject):
    """Text pinned to a corner or edge of the plot area."""

    object_type = ChartObjectType.STATIC_TEXT

    def __init__(
        self,
        name: str,
        text: str,
        *,
        vertical_alignment: VerticalAlignment = VerticalAlignment.TOP,
        horizontal_alignment: HorizontalAlignment = HorizontalAlignment.LEFT,
        **kwargs: Any,
    ):
        super().__init__(name, **kwargs)
        self._text = text
        self._vertical_alignment = vertical_alignment
        self._horizontal_alignment = horizontal_alignment

    @property
    def text(self) -> str:
        return self._text

    @text.setter
    def text(self, value: str) -> None:
        self._text = value
        self._changed()

    @property
    def vertical_alignment(self) -> VerticalAlignment:
        return self._vertical_alignment

    @property
    def horizontal_alignment(self) -> HorizontalAlignment:
        return self._horizontal_alignment

    def sync_artist(self) -> None:
        if self.artist is None:
            return
        self.artist.set_visible(not self._is_hidden)
        self.artist.set_text(self._text)
        self.artist.set_color(self._color)
        self.artist.set_position(alignment_anchor(self._horizontal_alignment, self._vertical_alignment))
        self.artist.set_horizontalalignment(self._horizontal_alignment.value)
        self.artist.set_verticalalignment(self._vertical_alignment.value)
