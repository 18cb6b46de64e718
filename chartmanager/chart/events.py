"""Event payloads raised by the chart surface."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, List

if TYPE_CHECKING:
    from .objects import ChartObject
    from .surface import ChartSurface


@dataclass
class ChartObjectsAddedEvent:
    chart: ChartSurface
    chart_objects: List[ChartObject] = field(default_factory=list)


@dataclass
class ChartObjectsUpdatedEvent:
    chart: ChartSurface
    chart_objects: List[ChartObject] = field(default_factory=list)


@dataclass
class ChartObjectsRemovedEvent:
    chart: ChartSurface
    chart_objects: List[ChartObject] = field(default_factory=list)


@dataclass
class ChartObjectsSelectionChangedEvent:
    """Objects that joined and left the selection in one user action."""

    chart: ChartSurface
    objects_added_to_selection: List[ChartObject] = field(default_factory=list)
    objects_removed_from_selection: List[ChartObject] = field(default_factory=list)
