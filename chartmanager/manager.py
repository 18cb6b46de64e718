"""Chart manager: wires marker highlighting and chart set-up to a chart.

``initialize`` runs once when the chart is ready; ``calculate`` runs once per
bar and refreshes the spread readout.
"""

from __future__ import annotations

import time
from typing import Callable, List, Optional

from .chart import (
    Button,
    ChartObjectsAddedEvent,
    ChartObjectsUpdatedEvent,
    ChartSurface,
    HorizontalAlignment,
    VerticalAlignment,
)
from .config import SPREAD_LABEL_COLOR, SPREAD_LABEL_NAME, TIME_FRAME_BUTTON_STYLE
from .context import ChartContext, ManagerOptions
from .market import SymbolInfo, TimeFrame
from .markers import HighlightRenderer, MarkerIndex, MarkerMatcher
from .selection import SelectionRouter
from .styling import ChartObjectsDefaultSetting, DefaultStyleApplier


class ChartManager:
    """Owns the marker components for one chart and subscribes them to its events."""

    def __init__(
        self,
        chart: ChartSurface,
        symbol: SymbolInfo,
        options: Optional[ManagerOptions] = None,
        *,
        sleep: Callable[[float], None] = time.sleep,
    ):
        """Initialize the chart manager.

        Args:
            chart: Chart to manage
            symbol: Instrument shown on the chart
            options: Manager options (defaults if None)
            sleep: Blocking pause used after drawing highlights
        """
        self.context = ChartContext(chart=chart, symbol=symbol, options=options or ManagerOptions())
        self.marker_index = MarkerIndex(self.context)
        self.matcher = MarkerMatcher(self.context)
        self.renderer = HighlightRenderer(self.context, sleep=sleep)
        self.router = SelectionRouter(self.marker_index, self.matcher, self.renderer)
        self.style_applier = DefaultStyleApplier(self.context)

        self.time_frame_button: Optional[Button] = None
        self._connections: List[int] = []

    @property
    def chart(self) -> ChartSurface:
        return self.context.chart

    @property
    def symbol(self) -> SymbolInfo:
        return self.context.symbol

    def initialize(self) -> None:
        """Set the chart up and start reacting to its object events."""
        chart = self.chart
        self.context.default_setting = ChartObjectsDefaultSetting(
            chart, observation_mode=self.context.options.observation_mode
        )

        chart.set_color()

        settings = chart.display_settings
        settings.positions = True
        settings.orders = True
        settings.bid_price_line = True
        settings.ask_price_line = True
        settings.grid = chart.time_frame <= TimeFrame.MINUTE15
        settings.period_separators = True
        settings.tick_volume = False
        settings.deal_map = False
        settings.chart_scale = True
        settings.price_axis_overlay_buttons = True
        settings.price_alerts = True
        settings.quick_trade_buttons = True
        settings.market_sentiment = False
        chart.apply_display_settings(self.symbol)

        # Objects drawn before start-up never went through objects_added
        for obj in chart.objects:
            self.style_applier.on_added(obj)

        self.marker_index.rebuild()

        self._connections = [
            chart.connect("objects_added", self.on_objects_added),
            chart.connect("objects_updated", self.on_objects_updated),
            chart.connect("selection_changed", self.router.on_selection_changed),
        ]

        chart.hide_chart_objects()
        chart.show_chart_objects()

        self.time_frame_button = Button(
            text=chart.time_frame.shorthand,
            horizontal_alignment=HorizontalAlignment.RIGHT,
            vertical_alignment=VerticalAlignment.TOP,
            **TIME_FRAME_BUTTON_STYLE,
        )
        chart.add_control(self.time_frame_button)
        print(f"[Chart Manager] Initialized for {self.symbol.name} {chart.time_frame.shorthand}")

    def shutdown(self) -> None:
        """Stop listening to chart events."""
        for cid in self._connections:
            self.chart.disconnect(cid)
        self._connections.clear()

    def on_objects_added(self, event: ChartObjectsAddedEvent) -> None:
        for obj in event.chart_objects:
            self.style_applier.on_added(obj)

    def on_objects_updated(self, event: ChartObjectsUpdatedEvent) -> None:
        for obj in event.chart_objects:
            self.style_applier.on_updated(obj)

    def calculate(self, index: int) -> str:
        """Per-bar refresh of the spread readout.

        Args:
            index: Bar index being calculated

        Returns:
            The spread text drawn on the chart
        """
        spread_text = f"{self.symbol.spread_in_pips():.1f}"
        self.chart.draw_static_text(
            name=SPREAD_LABEL_NAME,
            text=spread_text,
            vertical_alignment=VerticalAlignment.CENTER,
            horizontal_alignment=HorizontalAlignment.RIGHT,
            color=SPREAD_LABEL_COLOR,
        )
        return spread_text
