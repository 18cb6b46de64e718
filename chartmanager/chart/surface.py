"""Matplotlib-backed chart surface.

Holds the named objects drawn on one price axes, turns clicks on interactive
artists into selection changes, and delivers ``objects_added``,
``objects_updated``, ``objects_removed`` and ``selection_changed`` events to
subscribers synchronously, in the order they are raised.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Callable, Dict, List, Optional, Type, TypeVar

import pandas as pd
from dateutil import tz
from matplotlib.dates import date2num
from matplotlib.patches import Ellipse

from ..config import CHART_COLORS, CHART_DEFAULT_OBJECT_COLOR, DISPLAY_TZ_NAME
from ..market import SymbolInfo, TimeFrame
from .display import Button, ChartDisplaySettings
from .events import (
    ChartObjectsAddedEvent,
    ChartObjectsRemovedEvent,
    ChartObjectsSelectionChangedEvent,
    ChartObjectsUpdatedEvent,
)
from .objects import (
    ChartEllipse,
    ChartHorizontalLine,
    ChartObject,
    ChartStaticText,
    ChartVerticalLine,
    HorizontalAlignment,
    LineStyle,
    VerticalAlignment,
    alignment_anchor,
)

if TYPE_CHECKING:
    import matplotlib.axes

T = TypeVar("T", bound=ChartObject)

EVENT_NAMES = ("objects_added", "objects_updated", "objects_removed", "selection_changed")


class ChartError(Exception):
    """Raised when the chart is asked to do something it cannot."""


class ChartSurface:
    """Named chart objects on a matplotlib axes, with selection and events."""

    def __init__(
        self,
        ax: matplotlib.axes.Axes,
        *,
        time_frame: TimeFrame = TimeFrame.HOUR,
        display_tz: Any = None,
        default_color: str = CHART_DEFAULT_OBJECT_COLOR,
    ):
        """Initialize the chart surface.

        Args:
            ax: Price axes the objects are drawn on
            time_frame: Bar period shown on the chart
            display_tz: Timezone for naive timestamps (defaults to DISPLAY_TZ_NAME)
            default_color: Color given to objects drawn without one
        """
        self.ax = ax
        self.canvas = ax.figure.canvas
        self.time_frame = time_frame
        self.display_tz = display_tz if display_tz is not None else tz.gettz(DISPLAY_TZ_NAME)
        self.default_color = default_color
        self.display_settings = ChartDisplaySettings()
        self.colors: Dict[str, str] = dict(CHART_COLORS)
        self.controls: List[Button] = []

        self._objects: Dict[str, ChartObject] = {}
        self._artist_owner: Dict[int, ChartObject] = {}
        self._selection: List[ChartObject] = []
        self._callbacks: Dict[str, Dict[int, Callable[[Any], None]]] = {name: {} for name in EVENT_NAMES}
        self._next_cid = 0
        self._price_lines: List[Any] = []
        self._control_artists: List[Any] = []

        self.canvas.mpl_connect('pick_event', self.on_pick)

    # -- events -------------------------------------------------------------

    def connect(self, event_name: str, callback: Callable[[Any], None]) -> int:
        """Subscribe to a chart event and return a connection id."""
        if event_name not in self._callbacks:
            raise ChartError(f"Unknown chart event '{event_name}'")
        self._next_cid += 1
        self._callbacks[event_name][self._next_cid] = callback
        return self._next_cid

    def disconnect(self, cid: int) -> None:
        for callbacks in self._callbacks.values():
            callbacks.pop(cid, None)

    def _raise(self, event_name: str, event: Any) -> None:
        for callback in list(self._callbacks[event_name].values()):
            callback(event)

    def notify_updated(self, obj: ChartObject) -> None:
        """Called by objects after one of their properties changed."""
        self.refresh()
        self._raise("objects_updated", ChartObjectsUpdatedEvent(self, [obj]))

    def refresh(self) -> None:
        self.canvas.draw_idle()

    # -- queries ------------------------------------------------------------

    @property
    def objects(self) -> List[ChartObject]:
        return list(self._objects.values())

    def find_object(self, name: str) -> Optional[ChartObject]:
        return self._objects.get(name)

    def find_all_objects(self, kind: Type[T]) -> List[T]:
        """Return every object of the given class, in drawing order."""
        return [obj for obj in self._objects.values() if isinstance(obj, kind)]

    # -- drawing ------------------------------------------------------------

    def _to_timestamp(self, value: Any) -> pd.Timestamp:
        timestamp = pd.Timestamp(value)
        if timestamp.tzinfo is None:
            return timestamp.tz_localize(self.display_tz)
        return timestamp.tz_convert(self.display_tz)

    def _existing(self, name: str, kind: Type[T]) -> Optional[T]:
        if not name:
            raise ChartError("Chart objects need a non-empty name")
        existing = self._objects.get(name)
        if existing is None:
            return None
        if not isinstance(existing, kind):
            raise ChartError(
                f"'{name}' is already a {type(existing).__name__}, cannot redraw it as {kind.__name__}"
            )
        return existing

    def _register(self, obj: ChartObject, artist: Any) -> ChartObject:
        obj.artist = artist
        obj.chart = self
        obj.sync_artist()
        self._objects[obj.name] = obj
        self._artist_owner[id(artist)] = obj
        self.refresh()
        self._raise("objects_added", ChartObjectsAddedEvent(self, [obj]))
        return obj

    def _redraw(self, obj: ChartObject, **properties: Any) -> ChartObject:
        obj.configure(**properties)
        self.notify_updated(obj)
        return obj

    def draw_vertical_line(
        self,
        name: str,
        time: Any,
        color: Optional[str] = None,
        thickness: float = 1,
        line_style: LineStyle = LineStyle.SOLID,
    ) -> ChartVerticalLine:
        """Draw a vertical line, or move/restyle the one already called ``name``."""
        timestamp = self._to_timestamp(time)
        color = color or self.default_color
        existing = self._existing(name, ChartVerticalLine)
        if existing is not None:
            return self._redraw(existing, time=timestamp, color=color, thickness=thickness, line_style=line_style)

        obj = ChartVerticalLine(name, timestamp, color=color, thickness=thickness, line_style=line_style)
        artist = self.ax.axvline(date2num(timestamp))
        return self._register(obj, artist)

    def draw_horizontal_line(
        self,
        name: str,
        y: float,
        color: Optional[str] = None,
        thickness: float = 1,
        line_style: LineStyle = LineStyle.SOLID,
    ) -> ChartHorizontalLine:
        """Draw a horizontal line, or move/restyle the one already called ``name``."""
        color = color or self.default_color
        existing = self._existing(name, ChartHorizontalLine)
        if existing is not None:
            return self._redraw(existing, y=float(y), color=color, thickness=thickness, line_style=line_style)

        obj = ChartHorizontalLine(name, y, color=color, thickness=thickness, line_style=line_style)
        artist = self.ax.axhline(float(y))
        return self._register(obj, artist)

    def draw_ellipse(
        self,
        name: str,
        time1: Any,
        y1: float,
        time2: Any,
        y2: float,
        color: Optional[str] = None,
        thickness: float = 1,
        line_style: LineStyle = LineStyle.SOLID,
    ) -> ChartEllipse:
        t1, t2 = self._to_timestamp(time1), self._to_timestamp(time2)
        color = color or self.default_color
        existing = self._existing(name, ChartEllipse)
        if existing is not None:
            return self._redraw(
                existing, time1=t1, y1=float(y1), time2=t2, y2=float(y2),
                color=color, thickness=thickness, line_style=line_style,
            )

        obj = ChartEllipse(name, t1, y1, t2, y2, color=color, thickness=thickness, line_style=line_style)
        artist = Ellipse((0, 0), 0, 0, fill=False)
        self.ax.add_patch(artist)
        return self._register(obj, artist)

    def draw_static_text(
        self,
        name: str,
        text: str,
        vertical_alignment: VerticalAlignment = VerticalAlignment.TOP,
        horizontal_alignment: HorizontalAlignment = HorizontalAlignment.LEFT,
        color: Optional[str] = None,
    ) -> ChartStaticText:
        color = color or self.default_color
        existing = self._existing(name, ChartStaticText)
        if existing is not None:
            return self._redraw(
                existing, text=text, color=color,
                vertical_alignment=vertical_alignment, horizontal_alignment=horizontal_alignment,
            )

        obj = ChartStaticText(
            name, text, color=color,
            vertical_alignment=vertical_alignment, horizontal_alignment=horizontal_alignment,
        )
        x, y = alignment_anchor(horizontal_alignment, vertical_alignment)
        artist = self.ax.text(x, y, text, transform=self.ax.transAxes)
        return self._register(obj, artist)

    def remove_object(self, name: str) -> None:
        """Remove an object and its artist; unknown names are ignored."""
        obj = self._objects.pop(name, None)
        if obj is None:
            return
        if obj in self._selection:
            self._selection.remove(obj)
            self._raise("selection_changed", ChartObjectsSelectionChangedEvent(self, [], [obj]))
        if obj.artist is not None:
            self._artist_owner.pop(id(obj.artist), None)
            obj.artist.remove()
            obj.artist = None
        obj.chart = None
        self.refresh()
        self._raise("objects_removed", ChartObjectsRemovedEvent(self, [obj]))

    def add_control(self, button: Button) -> Any:
        """Overlay a button-like text box on the plot area."""
        x, y = alignment_anchor(button.horizontal_alignment, button.vertical_alignment)
        boxstyle = f"round,pad={0.2 + button.padding / 10}"
        if button.corner_radius:
            boxstyle += f",rounding_size={button.corner_radius / 10}"
        bbox = dict(
            boxstyle=boxstyle,
            facecolor=button.background_color,
            edgecolor='none',
        )
        artist = self.ax.text(
            x, y, button.text,
            transform=self.ax.transAxes,
            fontsize=button.font_size,
            color=button.foreground_color,
            ha=button.horizontal_alignment.value,
            va=button.vertical_alignment.value,
            bbox=bbox,
            zorder=5,
        )
        self.controls.append(button)
        self._control_artists.append(artist)
        self.refresh()
        return artist

    # -- selection ----------------------------------------------------------

    @property
    def selected_objects(self) -> List[ChartObject]:
        return list(self._selection)

    def select(self, obj: ChartObject, *, exclusive: bool = False) -> None:
        """Add ``obj`` to the selection; with ``exclusive`` drop everything else."""
        removed = [other for other in self._selection if other is not obj] if exclusive else []
        added = [] if obj in self._selection else [obj]
        if not added and not removed:
            return
        for other in removed:
            self._selection.remove(other)
        self._selection.extend(added)
        self._raise("selection_changed", ChartObjectsSelectionChangedEvent(self, added, removed))

    def deselect(self, obj: ChartObject) -> None:
        if obj not in self._selection:
            return
        self._selection.remove(obj)
        self._raise("selection_changed", ChartObjectsSelectionChangedEvent(self, [], [obj]))

    def clear_selection(self) -> None:
        if not self._selection:
            return
        removed = list(self._selection)
        self._selection.clear()
        self._raise("selection_changed", ChartObjectsSelectionChangedEvent(self, [], removed))

    def on_pick(self, event: Any) -> None:
        """Handle a click on an artist: toggle its object's selection.

        Args:
            event: Matplotlib pick event
        """
        obj = self._artist_owner.get(id(event.artist))
        if obj is None or not obj.is_interactive:
            return
        if obj in self._selection:
            self.deselect(obj)
        else:
            self.select(obj, exclusive=True)

    # -- chart-wide appearance ----------------------------------------------

    def hide_chart_objects(self) -> None:
        """Hide every object's artist without touching its ``is_hidden`` flag."""
        for obj in self._objects.values():
            if obj.artist is not None:
                obj.artist.set_visible(False)
        self.refresh()

    def show_chart_objects(self) -> None:
        """Restore artist visibility from each object's ``is_hidden`` flag."""
        for obj in self._objects.values():
            obj.sync_artist()
        self.refresh()

    def set_color(self, colors: Optional[Dict[str, str]] = None) -> None:
        """Apply a color scheme to the figure, axes, ticks and spines."""
        if colors:
            self.colors.update(colors)
        background = self.colors["background"]
        foreground = self.colors["foreground"]

        self.ax.figure.set_facecolor(background)
        self.ax.set_facecolor(background)
        self.ax.tick_params(colors=foreground)
        for spine in self.ax.spines.values():
            spine.set_color(foreground)
        self.ax.title.set_color(foreground)
        self.ax.xaxis.label.set_color(foreground)
        self.ax.yaxis.label.set_color(foreground)
        self.refresh()

    def apply_display_settings(self, symbol: Optional[SymbolInfo] = None) -> None:
        """Reflect ``display_settings`` on the axes.

        Args:
            symbol: Quote source for the bid/ask price lines (omitted lines if None)
        """
        settings = self.display_settings
        if settings.grid:
            self.ax.grid(True, color=self.colors["grid"], linewidth=0.5)
        else:
            self.ax.grid(False)

        self.ax.yaxis.set_visible(settings.chart_scale)

        for line in self._price_lines:
            line.remove()
        self._price_lines.clear()
        if symbol is not None:
            if settings.bid_price_line and symbol.bid:
                self._price_lines.append(
                    self.ax.axhline(symbol.bid, color=self.colors["bid_line"], linewidth=0.8, zorder=1)
                )
            if settings.ask_price_line and symbol.ask:
                self._price_lines.append(
                    self.ax.axhline(symbol.ask, color=self.colors["ask_line"], linewidth=0.8, zorder=1)
                )
        self.refresh()
