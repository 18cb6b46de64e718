"""Selection handling for chart objects.

This package routes chart selection changes to the marker highlight logic.
"""

from .selection_router import SelectionRouter

__all__ = ["SelectionRouter"]
