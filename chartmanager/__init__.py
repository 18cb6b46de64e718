"""Marker highlighting and chart housekeeping for matplotlib price charts."""

from .context import ChartContext, ManagerOptions
from .manager import ChartManager
from .market import SymbolInfo, TimeFrame

__all__ = ["ChartContext", "ChartManager", "ManagerOptions", "SymbolInfo", "TimeFrame"]
