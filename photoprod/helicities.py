"""Enumeration and indexing of helicity amplitudes."""

from __future__ import annotations

from enum import Enum
from itertools import product
from typing import Sequence


class HelicityFrame(Enum):
    """Frame in which an amplitude's helicities are defined."""

    HELICITY_ERROR = 0
    HELICITY_INDEPENDENT = 1
    S_CHANNEL = 2
    T_CHANNEL = 3
    U_CHANNEL = 4


Helicities = tuple[int, int, int, int]


def print_helicities(lam: Sequence[int]) -> str:
    """Format a helicity set as e.g. ``[ +1, -1, +2, -1]``."""
    parts = [("+" if h > 0 else "-") + str(abs(h)) for h in lam]
    return "[ " + ", ".join(parts) + "]"


def get_helicities(meson_j: int, baryon_j: int, is_massless: bool = True) -> list[Helicities]:
    """All helicity combinations (photon, target, meson, baryon).

    ``baryon_j`` is twice the baryon spin; baryon helicities step by two.
    """
    photon = (1, -1) if is_massless else (1, 0, -1)
    target = (1, -1)
    meson = range(meson_j, -meson_j - 1, -1)
    baryon = range(baryon_j, -baryon_j - 1, -2)
    return [tuple(combo) for combo in product(photon, target, meson, baryon)]


def find_helicity(
    helicities: Sequence[int], meson_j: int, baryon_j: int, is_massless: bool = True
) -> int:
    """Index of a helicity set in the list produced by :func:`get_helicities`."""
    key = tuple(helicities)
    try:
        return get_helicities(meson_j, baryon_j, is_massless).index(key)
    except ValueError:
        raise ValueError(f"Cannot find helicities: {print_helicities(key)}!") from None