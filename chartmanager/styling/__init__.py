"""Default styling of chart objects."""

from .default_style import ChartObjectsDefaultSetting, DefaultStyleApplier

__all__ = ["ChartObjectsDefaultSetting", "DefaultStyleApplier"]
