"""Chart-level display settings and UI controls."""

from __future__ import annotations

from dataclasses import dataclass

from .objects import HorizontalAlignment, VerticalAlignment


@dataclass
class ChartDisplaySettings:
    """Toggles for the chart furniture drawn around the price series.

    Only ``grid``, ``bid_price_line``, ``ask_price_line`` and ``chart_scale``
    change what the matplotlib axes show; the remaining flags describe
    trading-platform overlays and are carried so callers can record them.
    """

    positions: bool = True
    orders: bool = True
    bid_price_line: bool = True
    ask_price_line: bool = True
    grid: bool = True
    period_separators: bool = True
    tick_volume: bool = False
    deal_map: bool = False
    chart_scale: bool = True
    price_axis_overlay_buttons: bool = True
    price_alerts: bool = True
    quick_trade_buttons: bool = True
    market_sentiment: bool = False


@dataclass
class Button:
    """A text button overlaid on the plot area."""

    text: str
    height: int = 24
    width: int = 80
    corner_radius: int = 0
    font_size: int = 12
    background_color: str = "none"
    foreground_color: str = "black"
    margin: int = 0
    padding: int = 0
    horizontal_alignment: HorizontalAlignment = HorizontalAlignment.LEFT
    vertical_alignment: VerticalAlignment = VerticalAlignment.TOP
