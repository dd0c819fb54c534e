"""J/psi-007 J/psi photoproduction data split into energy bins."""

from __future__ import annotations

import math

import numpy as np

from ..data_set import DataSet, check, import_data


def _var_def(name: str, value: float, unit: str) -> str:
    return f"{name} = {value:.2f} {unit}"


def energy_slice(e_index: int) -> DataSet:
    """Differential cross section vs |t - t_min| in the energy bin ``e_index``."""
    raw = import_data("data/jpsip/jpsi007/jpsi007_electron.tsv", 15)
    total = check(raw, "J/psi-007 all")
    columns = [column[:total] for column in raw]
    mask = columns[2] == e_index
    n = int(np.count_nonzero(mask))

    energy = columns[8][mask]
    t = columns[9][mask]
    e_avg = float(energy.mean()) if n else math.nan

    return DataSet(
        n=n,
        name="Jpsi-007 (" + _var_def("E", e_avg, "GeV") + ")",
        kind=2,
        x=t,
        xerr=(t - columns[6][mask], columns[7][mask] - t),
        y=energy,
        z=columns[11][mask],
        zerr=(columns[14][mask], columns[14][mask]),
        extras=[e_avg],
    )


def all_data() -> list[DataSet]:
    """All twelve energy bins in order."""
    return [energy_slice(i) for i in range(1, 13)]