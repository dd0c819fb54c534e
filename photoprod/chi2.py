"""Chi-squared of cross-section models against J/psi photoproduction data."""

from __future__ import annotations

import math
from typing import Iterable, Protocol

from .constants import s_cm
from .data_set import DataSet


class CrossSectionModel(Protocol):
    """What a model must provide to be compared with cross-section data."""

    def integrated_xsection(self, s: float) -> float:
        """Integrated cross section at invariant mass squared ``s``."""

    def differential_xsection(self, s: float, t: float) -> float:
        """Differential cross section dsigma/dt."""

    def t_min(self, s: float) -> float:
        """Momentum transfer at forward scattering."""


_DATA_TYPES = {
    0: "integrated (Eg)",
    1: "differential (Eg vs -t)",
    2: "differential (Eg vs -t')",
}


def data_type(kind: int) -> str:
    """Description of a data-set kind understood by :func:`fcn`."""
    return _DATA_TYPES.get(kind, "ERROR")


def _points(data: DataSet, *arrays):
    return zip(*(a[: data.n] for a in arrays))


def chi2_integrated(data: DataSet, model: CrossSectionModel) -> float:
    """Chi-squared against integrated cross sections at photon energies ``data.x``."""
    return sum(
        ((model.integrated_xsection(s_cm(e)) - z) / err) ** 2
        for e, z, err in _points(data, data.x, data.z, data.zerr[0])
    )


def chi2_differential(data: DataSet, model: CrossSectionModel) -> float:
    """Chi-squared against dsigma/dt at ``-t = data.x`` and photon energies ``data.y``."""
    return sum(
        ((model.differential_xsection(s_cm(e), -mt) - z) / err) ** 2
        for mt, e, z, err in _points(data, data.x, data.y, data.z, data.zerr[0])
    )


def chi2_differential_tprime(data: DataSet, model: CrossSectionModel) -> float:
    """Chi-squared against dsigma/dt at ``|t - t_min| = data.x`` and photon energies ``data.y``."""
    total = 0.0
    for tp, e, z, err in _points(data, data.x, data.y, data.z, data.zerr[0]):
        s = s_cm(e)
        t = -tp + model.t_min(s)
        total += ((model.differential_xsection(s, t) - z) / err) ** 2
    return total


_DISPATCH = {
    0: chi2_integrated,
    1: chi2_differential,
    2: chi2_differential_tprime,
}


def fcn(data_sets: Iterable[DataSet], model: CrossSectionModel) -> float:
    """Total chi-squared over all data sets; NaN if a set has an unknown kind."""
    total = 0.0
    for data in data_sets:
        func = _DISPATCH.get(data.kind)
        total += func(data, model) if func is not None else math.nan
    return total