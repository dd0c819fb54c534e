"""Structure functions built from leading-order parton distributions on a grid."""

from __future__ import annotations

import math
import warnings
from enum import IntEnum
from typing import Optional, Sequence

import numpy as np
from scipy.interpolate import CubicSpline

from .constants import M2_PROTON
from .data_set import import_data, import_transposed


class PdfInterpolator:
    """Two-dimensional interpolation of a function tabulated on an (x, y) grid.

    Cubic splines in x are taken at every grid value of y; the results are
    then interpolated in y with a further cubic spline.
    """

    def __init__(self) -> None:
        self._ys = np.empty(0, dtype=float)
        self._slices: Optional[CubicSpline] = None

    def set_data(self, x: Sequence[float], y: Sequence[float], f: Sequence[float]) -> None:
        """Load grid values ``f`` with ``f[i + len(y) * j] = f(x[j], y[i])``."""
        xs = np.asarray(x, dtype=float)
        ys = np.asarray(y, dtype=float)
        fs = np.asarray(f, dtype=float)
        needed = xs.size * ys.size
        if fs.size != needed:
            warnings.warn("Data dimensions don't match!", stacklevel=2)
        if fs.size < needed:
            raise ValueError(f"Grid needs {needed} values but only {fs.size} were given!")
        grid = fs[:needed].reshape(xs.size, ys.size)
        self._ys = ys
        self._slices = CubicSpline(xs, grid, axis=0, bc_type="natural", extrapolate=False)

    def evaluate(self, x: float, y: float) -> float:
        """Interpolated value at the point (x, y); NaN outside the grid."""
        if self._slices is None:
            raise ValueError("No data has been set for interpolation!")
        values = np.asarray(self._slices(x), dtype=float)
        if not np.all(np.isfinite(values)):
            return math.nan
        across = CubicSpline(self._ys, values, bc_type="natural", extrapolate=False)
        return float(across(y))


class Flavor(IntEnum):
    """Parton flavours in the column order of the grid file."""

    BBAR = 0
    CBAR = 1
    SBAR = 2
    UBAR = 3
    DBAR = 4
    D = 5
    U = 6
    S = 7
    C = 8
    B = 9
    G = 10


class XPdf:
    """Momentum-weighted parton distributions x f(x, Q) read from the data directory."""

    def __init__(self, path: str = "/data/CTEQ/") -> None:
        xs = import_transposed(path + "xs.dat", 1)[0]
        qs = import_transposed(path + "qs.dat", 1)[0]
        fs = import_data(path + "CT18LO.dat", len(Flavor))
        self._pdfs: list[PdfInterpolator] = []
        for column in fs:
            interpolator = PdfInterpolator()
            interpolator.set_data(xs, qs, column)
            self._pdfs.append(interpolator)

    def __call__(self, flavor: int, x: float, q: float) -> float:
        """Value of x f(x, Q) for the given flavour."""
        try:
            index = Flavor(int(flavor))
        except ValueError:
            raise ValueError("Invalid flavor index!") from None
        return self._pdfs[index].evaluate(x, q)


_CHARGES = {
    Flavor.BBAR: 1 / 3,
    Flavor.CBAR: -2 / 3,
    Flavor.SBAR: 1 / 3,
    Flavor.UBAR: -2 / 3,
    Flavor.DBAR: 1 / 3,
    Flavor.D: -1 / 3,
    Flavor.U: 2 / 3,
    Flavor.S: -1 / 3,
    Flavor.C: 2 / 3,
    Flavor.B: -1 / 3,
    Flavor.G: 0.0,
}


class PdfF:
    """Structure function F_1 or F_2 from the charge-weighted sum of parton distributions."""

    def __init__(self, mode: int, xpdf: Optional[XPdf] = None) -> None:
        if mode not in (1, 2):
            warnings.warn("Invalid mode received!", stacklevel=2)
        self.mode = mode
        self._xpdf = xpdf if xpdf is not None else XPdf()

    @staticmethod
    def _bjorken_x(m2: float, t: float) -> float:
        return -t / (m2 - M2_PROTON - t)

    def evaluate(self, m2: float, t: float) -> float:
        """Structure function at missing mass squared ``m2`` and momentum transfer ``t`` (< 0)."""
        return self.evaluate_xq(self._bjorken_x(m2, t), math.sqrt(-t))

    def evaluate_xq(self, x: float, q: float) -> float:
        """Structure function at Bjorken x and scale ``q``; zero outside the grid."""
        if x < 1e-9 or x > 1:
            return 0.0
        if q < 1.295 or q > 1e5:
            return 0.0
        total = sum(charge ** 2 * self._xpdf(flavor, x, q) for flavor, charge in _CHARGES.items())
        return total if self.mode == 2 else total / 2 / x