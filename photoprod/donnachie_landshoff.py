"""Unpolarised proton structure functions at high energies from Regge poles."""

from __future__ import annotations

import numpy as np
from scipy.interpolate import CubicSpline

from .constants import M2_PROTON

# Digitised R = sigma_L / sigma_T as a function of Q^2
_INTERP_QS = (
    0.0,
    0.01699641458,
    0.08440235397,
    0.1363918851,
    0.2574187985,
    0.4021573047,
    0.5311381068,
    0.6737513805,
    0.7905496135,
    0.943401764,
    1.149486392,
    1.276574333,
    1.453479372,
    1.525638039,
)
_INTERP_RS = (
    0.0,
    0.005070422535,
    0.06422535211,
    0.1312676056,
    0.243943662,
    0.3025352113,
    0.316056338,
    0.3115492958,
    0.3014084507,
    0.2856338028,
    0.2630985915,
    0.2495774648,
    0.2326760563,
    0.2292957746,
)

_R_SPLINE = CubicSpline(np.array(_INTERP_QS), np.array(_INTERP_RS), bc_type="natural")

_A = (0.00151, 0.658, 1.01)
_EPS = (0.452, 0.0667, -0.476)
_Q20 = (7.85, 0.6, 0.214)
_R0 = 0.23


class DonnachieLandshoffF:
    """Structure function F_1 or F_2 as a sum of three Regge exchanges."""

    def __init__(self, mode: int):
        if mode not in (1, 2):
            raise ValueError("Integer argument must be 1 or 2 for F_1 and F_2 respectively!")
        self.mode = mode

    def r(self, q2: float) -> float:
        """Ratio sigma_L / sigma_T at virtuality ``q2``."""
        return float(_R_SPLINE(q2)) if q2 < 1.5 else _R0

    def evaluate(self, s: float, q2: float) -> float:
        """Structure function at invariant mass squared ``s`` and photon virtuality ``q2`` (< 0)."""
        big_q2 = -q2
        x = big_q2 / (s + big_q2 - M2_PROTON)

        total = 0.0
        for i, (a, eps, q20) in enumerate(zip(_A, _EPS, _Q20)):
            residue = a * (big_q2 / (1.0 + big_q2 / q20)) ** (1.0 + eps)
            if i == 0:
                residue *= (1.0 + big_q2 / q20) ** (eps / 2.0)
            power = 1 if i == 2 else 5
            exponent = -eps if self.mode == 2 else -(1.0 + eps)
            total += residue * x ** exponent * (1.0 - x) ** power

        if self.mode == 1:
            total /= 2.0 * (1.0 + self.r(big_q2))
        return total