"""Shared constants for the chart manager."""

from __future__ import annotations

from typing import Dict

# Chart timezone (indicator runs on UTC bars)
DISPLAY_TZ_NAME = "UTC"

# Marker matching
MATCH_TOLERANCE = 0.01
HIGHLIGHT_LINE_PREFIX = "marker"

# Highlight line appearance
HIGHLIGHT_COLOR = "hotpink"
HIGHLIGHT_THICKNESS = 2

# Reference line styles (see chart.objects.LineStyle)
BASE_LINE_STYLE_NAME = "DOTS_RARE"
HIGHLIGHTED_LINE_STYLE_NAME = "LINES_DOTS"
HIGHLIGHT_VERTICAL_STYLE_NAME = "DOTS_VERY_RARE"

# Pause after drawing highlights so the canvas can catch up
SETTLE_DELAY_SECONDS = 0.3

# Color the chart gives to objects drawn by hand
CHART_DEFAULT_OBJECT_COLOR = "#808080"

# Per-kind style applied to objects still carrying the chart default color
DEFAULT_OBJECT_STYLES: Dict[str, Dict[str, object]] = {
    "HORIZONTAL_LINE": {"color": "aqua", "thickness": 1, "line_style": "DOTS_RARE", "is_interactive": True},
    "VERTICAL_LINE": {"color": "lightgray", "thickness": 1, "line_style": "DOTS"},
    "ELLIPSE": {"color": "gold", "thickness": 1, "line_style": "SOLID", "is_interactive": True},
    "STATIC_TEXT": {"color": "lightgray"},
}

# Chart color scheme applied at start-up
CHART_COLORS: Dict[str, str] = {
    "background": "#101418",
    "foreground": "#9aa4ad",
    "grid": "#2a3038",
    "price_line": "#d0d0d0",
    "bid_line": "#e06c75",
    "ask_line": "#61afef",
}

# Spread readout
SPREAD_LABEL_NAME = "spread"
SPREAD_LABEL_COLOR = "slategray"

# Time frame button
TIME_FRAME_BUTTON_STYLE: Dict[str, object] = {
    "height": 48,
    "width": 100,
    "corner_radius": 5,
    "font_size": 36,
    "background_color": "none",
    "foreground_color": "lightgray",
    "margin": 2,
    "padding": 0,
}

# Demo reference lines sit this many pips away from the ask
DEMO_REFERENCE_LINE_PIPS = 10
