from __future__ import annotations

import argparse
from typing import Optional

import numpy as np
import pandas as pd
import matplotlib

matplotlib.use("TkAgg")
import matplotlib.dates as mdates
from matplotlib.backends.backend_tkagg import FigureCanvasTkAgg
from matplotlib.figure import Figure
import tkinter as tk
from tkinter import ttk

from .chart import ChartSurface
from .config import CHART_COLORS, DEMO_REFERENCE_LINE_PIPS
from .context import ManagerOptions
from .manager import ChartManager
from .market import SymbolInfo, TimeFrame


def make_price_series(bars: int = 200, start: str = "2024-01-02", time_frame: TimeFrame = TimeFrame.MINUTE15, seed: int = 7) -> pd.Series:
    """Random-walk close prices for the demo chart."""
    rng = np.random.default_rng(seed)
    index = pd.date_range(start, periods=bars, freq=f"{time_frame.value}min", tz="UTC")
    steps = rng.normal(0.0, 0.0004, size=bars)
    return pd.Series(1.2300 + np.cumsum(steps), index=index, name="close")


class ChartManagerApp(tk.Tk):
    def __init__(self, *, observation_mode: bool = False, time_frame: TimeFrame = TimeFrame.MINUTE15):
        super().__init__()
        self.title("Chart Manager")
        self.geometry("1200x720")
        self.rowconfigure(1, weight=1)
        self.columnconfigure(0, weight=1)

        self.prices = make_price_series(time_frame=time_frame)
        last = float(self.prices.iloc[-1])
        self.symbol = SymbolInfo(name="EURUSD", digits=5, pip_size=0.0001, bid=round(last, 5), ask=round(last + 0.00012, 5))

        # === Top controls ===
        top = ttk.Frame(self)
        top.grid(row=0, column=0, sticky="ew", padx=6, pady=4)
        ttk.Button(top, text="Clear selection", command=self._clear_selection).pack(side=tk.LEFT)
        self.status_var = tk.StringVar(value="Click a horizontal line to find its markers")
        ttk.Label(top, textvariable=self.status_var).pack(side=tk.LEFT, padx=8)

        # === Graph ===
        self.fig = Figure(figsize=(12, 6.5), dpi=100)
        self.ax = self.fig.add_subplot(111)
        self.ax.plot(self.prices.index, self.prices.values, color=CHART_COLORS["price_line"], linewidth=1)
        self.ax.xaxis.set_major_formatter(mdates.DateFormatter("%m-%d %H:%M"))

        self.canvas = FigureCanvasTkAgg(self.fig, master=self)
        self.canvas.get_tk_widget().grid(row=1, column=0, sticky="nsew")

        self.chart = ChartSurface(self.ax, time_frame=time_frame)
        self.manager = ChartManager(self.chart, self.symbol, ManagerOptions(observation_mode=observation_mode))

        self._draw_demo_objects()
        self.manager.initialize()
        self.chart.connect("selection_changed", self._on_selection_changed)

        # Spread readout refreshes once per bar of the (demo) feed
        self._bar_index = len(self.prices) - 1
        self._on_bar()

    def _draw_demo_objects(self) -> None:
        """Two markers on the price path and two reference lines near the ask."""
        idx = self.prices.index
        for name, (i, j) in {"high": (40, 60), "low": (120, 140)}.items():
            window = self.prices.iloc[i:j]
            level = float(window.max() if name == "high" else window.min())
            ellipse = self.chart.draw_ellipse(f"ellipse {name}", idx[i], level - 0.0008, idx[j], level + 0.0008, color="gold")
            ellipse.is_interactive = True
            line = self.chart.draw_horizontal_line(f"level {name}", level, color="aqua")
            line.is_interactive = True

        offset = self.symbol.pip_size * DEMO_REFERENCE_LINE_PIPS
        self.chart.draw_horizontal_line("line name", self.symbol.ask + offset, color="aqua").is_interactive = True
        self.chart.draw_horizontal_line("line name2", self.symbol.ask - offset, color="aqua").is_interactive = True

    def _on_selection_changed(self, event) -> None:
        selected = ", ".join(obj.name for obj in self.chart.selected_objects) or "nothing"
        self.status_var.set(f"Selected: {selected}")

    def _clear_selection(self) -> None:
        self.chart.clear_selection()

    def _on_bar(self) -> None:
        self.manager.calculate(self._bar_index)
        self.after(60_000, self._on_bar)


def main(argv: Optional[list] = None) -> None:
    parser = argparse.ArgumentParser(description="Chart manager demo")
    parser.add_argument("--observation-mode", action="store_true", help="only report default-style changes")
    parser.add_argument("--time-frame", default="MINUTE15", choices=[frame.name for frame in TimeFrame])
    args = parser.parse_args(argv)

    app = ChartManagerApp(observation_mode=args.observation_mode, time_frame=TimeFrame[args.time_frame])
    app.mainloop()


if __name__ == "__main__":
    main()
