"""Simple plots of data points, theory curves and error bands."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Optional, Sequence

import numpy as np
from matplotlib.figure import Figure

from .colors import JpacColor
from .data_set import DataSet

_RGB = {
    JpacColor.BLUE: "#1f77b4",
    JpacColor.RED: "#d62728",
    JpacColor.GREEN: "#2ca02c",
    JpacColor.ORANGE: "#ff7f0e",
    JpacColor.PURPLE: "#9467bd",
    JpacColor.BROWN: "#8c564b",
    JpacColor.PINK: "#e377c2",
    JpacColor.GOLD: "#bcbd22",
    JpacColor.AQUA: "#17becf",
    JpacColor.GREY: "#7f7f7f",
    JpacColor.DARK_GREY: "#3f3f3f",
}

_LINESTYLES = {"solid": "-", "dashed": "--", "dotted": ":"}


@dataclass
class Curve:
    """A sampled curve with its line style, colour and optional legend label."""

    x: np.ndarray
    y: np.ndarray
    style: str
    color: JpacColor
    label: Optional[str] = None


@dataclass
class Band:
    """A shaded region between a lower and an upper curve."""

    x: np.ndarray
    lower: np.ndarray
    upper: np.ndarray
    color: JpacColor


class Plot:
    """A single panel collecting data sets, curves and bands before drawing."""

    def __init__(self) -> None:
        self.data: list[DataSet] = []
        self.curves: list[Curve] = []
        self.bands: list[Band] = []
        self.xlabel = ""
        self.ylabel = ""
        self.logscale: tuple[bool, bool] = (False, False)
        self.xrange: Optional[tuple[float, float]] = None
        self.yrange: Optional[tuple[float, float]] = None
        self.legend_position: tuple[float, float] = (0.3, 0.7)
        self.show_legend = True
        self.header: Optional[str] = None
        self.curve_points = 100
        self._solid_count = 0

    # ------------------------------------------------------------------
    # Content

    def _next_color(self) -> JpacColor:
        color = JpacColor.nth(self._solid_count)
        self._solid_count += 1
        return color

    def _current_color(self) -> JpacColor:
        return self.curves[-1].color if self.curves else JpacColor.nth(0)

    def _sample(self, bounds: Sequence[float], func: Callable[[float], float]):
        lo, hi = bounds
        x = np.linspace(float(lo), float(hi), self.curve_points)
        y = np.array([float(func(float(v))) for v in x])
        return x, y

    def add_data(self, data: DataSet) -> None:
        """Add a data set to be drawn as points with error bars."""
        self.data.append(data)

    def add_curve(
        self, bounds: Sequence[float], func: Callable[[float], float], label: Optional[str] = None
    ) -> None:
        """Sample ``func`` between ``bounds`` now and draw it as a solid line in a new colour."""
        x, y = self._sample(bounds, func)
        self.curves.append(Curve(x, y, "solid", self._next_color(), label))

    def _add_styled(self, bounds, func, style: str) -> None:
        x, y = self._sample(bounds, func)
        self.curves.append(Curve(x, y, style, self._current_color()))

    def add_dashed(self, bounds: Sequence[float], func: Callable[[float], float]) -> None:
        """Dashed curve in the colour of the preceding curve."""
        self._add_styled(bounds, func, "dashed")

    def add_dotted(self, bounds: Sequence[float], func: Callable[[float], float]) -> None:
        """Dotted curve in the colour of the preceding curve."""
        self._add_styled(bounds, func, "dotted")

    def add_points_curve(
        self, x: Sequence[float], y: Sequence[float], label: Optional[str] = None
    ) -> None:
        """Solid curve through given points."""
        xs = np.asarray(x, dtype=float)
        ys = np.asarray(y, dtype=float)
        if xs.shape != ys.shape:
            raise ValueError("x and y of a curve must have the same length!")
        self.curves.append(Curve(xs, ys, "solid", self._next_color(), label))

    def add_band(self, x: Sequence[float], bounds) -> None:
        """Shade between ``bounds = (lower, upper)`` in the colour of the preceding curve."""
        lower, upper = bounds
        xs = np.asarray(x, dtype=float)
        lo = np.asarray(lower, dtype=float)
        hi = np.asarray(upper, dtype=float)
        if not (xs.shape == lo.shape == hi.shape):
            raise ValueError("Band coordinates and bounds must have the same length!")
        self.bands.append(Band(xs, lo, hi, self._current_color()))

    # ------------------------------------------------------------------
    # Settings

    def set_labels(self, x: str, y: str) -> None:
        """Axis titles."""
        self.xlabel, self.ylabel = x, y

    def set_logscale(self, x: bool, y: bool) -> None:
        """Choose logarithmic axes."""
        self.logscale = (bool(x), bool(y))

    def set_ranges(self, x: Sequence[float], y: Sequence[float]) -> None:
        """Axis ranges as (low, high) pairs."""
        self.xrange = (float(x[0]), float(x[1]))
        self.yrange = (float(y[0]), float(y[1]))

    def set_legend(self, x, y: Optional[float] = None) -> None:
        """Place the legend at axes coordinates (x, y), or switch it on or off with a bool."""
        if isinstance(x, bool):
            self.show_legend = x
            return
        if y is None:
            raise ValueError("A legend position needs both x and y!")
        self.legend_position = (float(x), float(y))
        self.show_legend = True

    def add_header(self, text: str) -> None:
        """Title shown at the top of the legend."""
        self.header = text

    def set_curve_points(self, n: int) -> None:
        """Number of points at which later curves are sampled."""
        if n < 2:
            raise ValueError("A curve needs at least two points!")
        self.curve_points = int(n)

    # ------------------------------------------------------------------
    # Output

    def _draw_data(self, ax, data: DataSet) -> None:
        n = data.n
        x, z = data.x[:n], data.z[:n]
        if x.size == 0:
            return

        def errors(pair):
            lower, upper = pair
            if lower.size >= n and upper.size >= n:
                return np.vstack([np.abs(lower[:n]), np.abs(upper[:n])])
            return None

        ax.errorbar(
            x,
            z,
            xerr=errors(data.xerr),
            yerr=errors(data.zerr),
            fmt="o",
            color="black",
            markersize=3,
            label=data.name if data.add_to_legend else None,
        )

    def draw(self, ax) -> None:
        """Render the plot into a matplotlib axes."""
        for band in self.bands:
            ax.fill_between(band.x, band.lower, band.upper, color=_RGB[band.color], alpha=0.3)
        for curve in self.curves:
            ax.plot(
                curve.x,
                curve.y,
                linestyle=_LINESTYLES[curve.style],
                color=_RGB[curve.color],
                label=curve.label,
            )
        for data in self.data:
            self._draw_data(ax, data)

        if self.logscale[0]:
            ax.set_xscale("log")
        if self.logscale[1]:
            ax.set_yscale("log")
        if self.xrange is not None:
            ax.set_xlim(*self.xrange)
        if self.yrange is not None:
            ax.set_ylim(*self.yrange)
        ax.set_xlabel(self.xlabel)
        ax.set_ylabel(self.ylabel)

        handles, _ = ax.get_legend_handles_labels()
        if self.show_legend and handles:
            ax.legend(loc=self.legend_position, title=self.header, frameon=False)
        elif self.header:
            ax.set_title(self.header)

    def save(self, filename: str) -> None:
        """Write the plot to ``filename``; the format follows the extension."""
        fig = Figure(figsize=(6.0, 4.5))
        self.draw(fig.add_subplot(1, 1, 1))
        fig.tight_layout()
        fig.savefig(filename)


def combine(shape: Sequence[int], plots: Sequence[Plot], filename: str) -> None:
    """Draw several plots on a grid of ``shape = (columns, rows)`` and save it."""
    cols, rows = (int(v) for v in shape)
    if cols < 1 or rows < 1:
        raise ValueError("Grid shape must be positive!")
    if len(plots) > cols * rows:
        raise ValueError("More plots than grid cells!")
    fig = Figure(figsize=(6.0 * cols, 4.5 * rows))
    axes = fig.subplots(rows, cols, squeeze=False)
    cells = list(axes.flat)
    for ax, p in zip(cells, plots):
        p.draw(ax)
    for ax in cells[len(plots):]:
        ax.set_axis_off()
    fig.tight_layout()
    fig.savefig(filename)