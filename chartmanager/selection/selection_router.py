"""Selection-change routing for chart objects.

Fans a selection-changed event out per object and dispatches on the
object's kind. Only horizontal (reference) lines have handlers today;
other kinds pass through untouched.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable, Dict

from ..chart import ChartHorizontalLine, ChartObject, ChartObjectType

if TYPE_CHECKING:
    from ..chart import ChartObjectsSelectionChangedEvent
    from ..markers import HighlightRenderer, MarkerIndex, MarkerMatcher


class SelectionRouter:
    """Turns selection changes into marker highlight updates."""

    def __init__(self, marker_index: MarkerIndex, matcher: MarkerMatcher, renderer: HighlightRenderer):
        self.marker_index = marker_index
        self.matcher = matcher
        self.renderer = renderer

        self._added_handlers: Dict[ChartObjectType, Callable[[ChartObject], None]] = {
            ChartObjectType.HORIZONTAL_LINE: self._on_reference_line_selected,
        }
        self._removed_handlers: Dict[ChartObjectType, Callable[[ChartObject], None]] = {
            ChartObjectType.HORIZONTAL_LINE: self._on_reference_line_deselected,
        }

    def on_selection_changed(self, event: ChartObjectsSelectionChangedEvent) -> None:
        """Handle every object added to, then removed from, the selection."""
        for obj in event.objects_added_to_selection:
            self.on_added_to_selection(obj)

        for obj in event.objects_removed_from_selection:
            self.on_removed_from_selection(obj)

    def on_added_to_selection(self, obj: ChartObject) -> None:
        """Run the selection handler for this object's kind, if any."""
        handler = self._added_handlers.get(obj.object_type)
        if handler is not None:
            handler(obj)

    def on_removed_from_selection(self, obj: ChartObject) -> None:
        """Run the deselection handler for this object's kind, if any."""
        handler = self._removed_handlers.get(obj.object_type)
        if handler is not None:
            handler(obj)

    def _on_reference_line_selected(self, obj: ChartObject) -> None:
        if not isinstance(obj, ChartHorizontalLine):
            return

        index = self.marker_index.rebuild()
        matches = self.matcher.match(obj, index)
        self.renderer.draw_for(obj, matches)

    def _on_reference_line_deselected(self, obj: ChartObject) -> None:
        # Highlights go regardless of which line drew them
        self.renderer.hide_all()

        if not isinstance(obj, ChartHorizontalLine):
            return

        self.renderer.revert_style(obj)
