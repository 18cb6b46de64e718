"""Default styling for objects drawn on the chart.

Objects that still carry the chart's default color (hand-drawn ones, or ones
drawn without an explicit color) are restyled to the per-kind defaults in
``DEFAULT_OBJECT_STYLES`` so manual and scripted drawings look alike.
Highlight lines are left alone.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Dict, Optional

from ..chart import ChartObject, ChartObjectType, LineStyle
from ..config import DEFAULT_OBJECT_STYLES, HIGHLIGHT_LINE_PREFIX, HIGHLIGHTED_LINE_STYLE_NAME

if TYPE_CHECKING:
    from ..chart import ChartSurface
    from ..context import ChartContext

HIGHLIGHTED_LINE_STYLE = LineStyle[HIGHLIGHTED_LINE_STYLE_NAME]


class ChartObjectsDefaultSetting:
    """Normalizes newly added or updated objects to the default style."""

    def __init__(self, chart: ChartSurface, observation_mode: bool = False):
        """Initialize the default setting.

        Args:
            chart: Chart whose objects are normalized
            observation_mode: Report the changes that would be made without applying them
        """
        self.chart = chart
        self.observation_mode = observation_mode

    def on_added(self, obj: ChartObject) -> bool:
        return self.normalize(obj)

    def on_updated(self, obj: ChartObject) -> bool:
        return self.normalize(obj)

    def pending_changes(self, obj: ChartObject) -> Dict[str, Any]:
        """Properties that differ from the default style for this object's kind."""
        if obj.name.startswith(HIGHLIGHT_LINE_PREFIX):
            return {}
        if obj.color.lower() != self.chart.default_color.lower():
            return {}

        style = DEFAULT_OBJECT_STYLES.get(obj.object_type.name)
        if not style:
            return {}

        wanted = dict(style)
        if "line_style" in wanted:
            wanted["line_style"] = LineStyle[wanted["line_style"]]
        # A highlighted reference line keeps its style until deselection reverts it
        if obj.object_type is ChartObjectType.HORIZONTAL_LINE and obj.line_style is HIGHLIGHTED_LINE_STYLE:
            wanted.pop("line_style", None)
        return {key: value for key, value in wanted.items() if getattr(obj, key) != value}

    def normalize(self, obj: ChartObject) -> bool:
        """Apply the default style to ``obj`` if it is still unstyled.

        Returns:
            True when the object needed changes (applied or only reported)
        """
        changes = self.pending_changes(obj)
        if not changes:
            return False

        if self.observation_mode:
            print(f"[Default Style] (observation) '{obj.name}' would get {changes}")
            return True

        obj.configure(**changes)
        print(f"[Default Style] Applied {sorted(changes)} to '{obj.name}'")
        if obj.chart is not None:
            obj.chart.notify_updated(obj)
        return True


class DefaultStyleApplier:
    """Forwards chart add/update notifications to the default setting."""

    def __init__(self, context: Optional[ChartContext] = None):
        self.context = context

    @property
    def setting(self) -> Optional[ChartObjectsDefaultSetting]:
        if self.context is None:
            return None
        return self.context.default_setting

    def on_added(self, obj: ChartObject) -> None:
        setting = self.setting
        if setting is None:
            return
        setting.on_added(obj)

    def on_updated(self, obj: ChartObject) -> None:
        setting = self.setting
        if setting is None:
            return
        setting.on_updated(obj)
