"""Shared fixtures: an off-screen chart, a 4-digit symbol and a manager."""

import matplotlib

matplotlib.use("Agg")

import pandas as pd
import pytest
from matplotlib.figure import Figure

from chartmanager.chart import ChartSurface, LineStyle
from chartmanager.context import ChartContext, ManagerOptions
from chartmanager.manager import ChartManager
from chartmanager.market import SymbolInfo, TimeFrame

T0 = pd.Timestamp("2024-01-02 10:00", tz="UTC")


def bar(n: int) -> pd.Timestamp:
    """Timestamp of the n-th 15-minute bar after T0."""
    return T0 + pd.Timedelta(minutes=15 * n)


@pytest.fixture
def ax():
    fig = Figure(figsize=(6, 4))
    return fig.add_subplot(111)


@pytest.fixture
def chart(ax):
    return ChartSurface(ax, time_frame=TimeFrame.MINUTE15)


@pytest.fixture
def symbol():
    return SymbolInfo(name="EURUSD", digits=4, pip_size=0.0001, bid=1.2340, ask=1.2342)


@pytest.fixture
def sleeps():
    return []


@pytest.fixture
def context(chart, symbol):
    return ChartContext(chart=chart, symbol=symbol, options=ManagerOptions(settle_delay=0.3))


@pytest.fixture
def manager(chart, symbol, sleeps):
    mgr = ChartManager(chart, symbol, ManagerOptions(settle_delay=0.3), sleep=sleeps.append)
    mgr.initialize()
    return mgr


def add_marker(chart, name, mid_y, start=0, end=4, half_height=0.0005):
    """Draw an ellipse centred on ``mid_y`` between two bars."""
    return chart.draw_ellipse(name, bar(start), mid_y - half_height, bar(end), mid_y + half_height, color="gold")


def add_reference_line(chart, name, y):
    line = chart.draw_horizontal_line(name, y, color="aqua", line_style=LineStyle.DOTS_RARE)
    line.is_interactive = True
    return line
