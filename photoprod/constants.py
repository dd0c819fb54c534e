"""Physical constants and basic photoproduction kinematics."""

from __future__ import annotations

import math

PI = math.pi
ALPHA = 1.0 / 137.035999084
EPS = 1.0e-6

M_PROTON = 0.938272
M2_PROTON = M_PROTON * M_PROTON
M_PION = 0.13957
M2_PION = M_PION * M_PION
M_ETA = 0.547862


def kallen(x: float, y: float, z: float) -> float:
    """Källén triangle function lambda(x, y, z)."""
    return x * x + y * y + z * z - 2.0 * (x * y + x * z + y * z)


def s_cm(e_beam: float) -> float:
    """Invariant mass squared for a photon of lab energy ``e_beam`` on a proton at rest."""
    return M2_PROTON + 2.0 * e_beam * M_PROTON


def w_cm(e_beam: float) -> float:
    """Centre-of-mass energy for a photon of lab energy ``e_beam``."""
    return math.sqrt(s_cm(e_beam))


def e_beam(w: float) -> float:
    """Lab-frame photon energy corresponding to centre-of-mass energy ``w``."""
    return (w * w - M2_PROTON) / (2.0 * M_PROTON)