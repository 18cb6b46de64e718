"""Shared context handed to every chart manager component."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional

from .config import SETTLE_DELAY_SECONDS

if TYPE_CHECKING:
    from .chart import ChartSurface
    from .market import SymbolInfo
    from .styling.default_style import ChartObjectsDefaultSetting


class ManagerOptions:
    """User-facing options for the chart manager."""

    def __init__(
        self,
        *,
        observation_mode: bool = False,
        settle_delay: float = SETTLE_DELAY_SECONDS,
    ):
        """Initialize manager options.

        Args:
            observation_mode: Only report default-style changes instead of applying them
            settle_delay: Seconds to pause after drawing highlight lines
        """
        self.observation_mode = observation_mode
        self.settle_delay = settle_delay


@dataclass
class ChartContext:
    """Created once at start-up and read by every handler afterwards."""

    chart: ChartSurface
    symbol: SymbolInfo
    options: ManagerOptions
    default_setting: Optional[ChartObjectsDefaultSetting] = None
