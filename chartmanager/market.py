"""Symbol and time frame descriptions for the charted instrument."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal
from enum import Enum
from functools import total_ordering


@total_ordering
class TimeFrame(Enum):
    """Bar period, valued in minutes so frames compare by duration."""

    MINUTE = 1
    MINUTE5 = 5
    MINUTE15 = 15
    MINUTE30 = 30
    HOUR = 60
    HOUR4 = 240
    DAILY = 1440
    WEEKLY = 10080

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, TimeFrame):
            return NotImplemented
        return self.value < other.value

    @property
    def shorthand(self) -> str:
        """Short label such as ``m15``, ``h4`` or ``D1``."""
        minutes = self.value
        if minutes < 60:
            return f"m{minutes}"
        if minutes < 1440:
            return f"h{minutes // 60}"
        if minutes < 10080:
            return f"D{minutes // 1440}"
        return f"W{minutes // 10080}"


@dataclass
class SymbolInfo:
    """Quote and precision data for one symbol."""

    name: str
    digits: int
    pip_size: float
    bid: float = 0.0
    ask: float = 0.0

    def __post_init__(self) -> None:
        if self.digits < 0:
            raise ValueError(f"digits must be non-negative, got {self.digits}")
        if self.pip_size <= 0:
            raise ValueError(f"pip_size must be positive, got {self.pip_size}")

    @property
    def spread(self) -> float:
        return self.ask - self.bid

    def round_price(self, value: float) -> float:
        """Round a price to the symbol's decimal precision."""
        return round(value, self.digits)

    def spread_in_pips(self) -> float:
        """Spread in pips, rounded half away from zero to 5 places."""
        pips = Decimal(repr(self.spread / self.pip_size))
        return float(pips.quantize(Decimal("0.00001"), rounding=ROUND_HALF_UP))
