"""Chart surface the manager works against.

This package contains the matplotlib-backed host chart:
- objects: named chart objects (lines, ellipses, text) and their styles
- surface: object registry, drawing primitives, selection and events
- events: payloads delivered to event subscribers
- display: chart-wide display settings and button controls
"""

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
    ChartObjectType,
    ChartStaticText,
    ChartVerticalLine,
    HorizontalAlignment,
    LineStyle,
    VerticalAlignment,
)
from .surface import ChartError, ChartSurface

__all__ = [
    "Button",
    "ChartDisplaySettings",
    "ChartObjectsAddedEvent",
    "ChartObjectsRemovedEvent",
    "ChartObjectsSelectionChangedEvent",
    "ChartObjectsUpdatedEvent",
    "ChartEllipse",
    "ChartHorizontalLine",
    "ChartObject",
    "ChartObjectType",
    "ChartStaticText",
    "ChartVerticalLine",
    "HorizontalAlignment",
    "LineStyle",
    "VerticalAlignment",
    "ChartError",
    "ChartSurface",
]
