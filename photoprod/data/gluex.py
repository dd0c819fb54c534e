"""GlueX J/psi photoproduction data (integrated and differential cross sections)."""

from __future__ import annotations

from ..data_set import DataSet, check, import_data

_SLICES = {
    0: ("GlueX (E = 8.93 GeV)", "/data/jpsip/gluex/gluex2022_diff_E0893.tsv", 8.92877),
    1: ("GlueX (E = 9.85 GeV)", "/data/jpsip/gluex/gluex2022_diff_E0985.tsv", 9.8583),
    2: ("GlueX (E = 10.82 GeV)", "/data/jpsip/gluex/gluex2022_diff_E1082.tsv", 10.8205),
}


def integrated() -> DataSet:
    """Integrated cross section as a function of the lab photon energy."""
    name = "GlueX (2023)"
    raw = import_data("/data/jpsip/gluex/gluex2022_int.tsv", 6)
    n = check(raw, name)
    return DataSet(
        n=n,
        name=name,
        kind=0,
        add_to_legend=True,
        x=raw[1],
        xerr=(raw[1] - raw[4], raw[5] - raw[1]),
        z=raw[2],
        zerr=(raw[3], raw[3]),
    )


def energy_slice(slice_id: int) -> DataSet:
    """Differential cross section in one of the three energy bins (0, 1 or 2).

    An unknown bin gives an empty data set.
    """
    if slice_id not in _SLICES:
        return DataSet()
    name, filename, e_avg = _SLICES[slice_id]
    raw = import_data(filename, 7)
    n = check(raw, name)
    return DataSet(
        n=n,
        name=name,
        kind=1,
        add_to_legend=True,
        x=raw[1],
        xerr=(raw[1] - raw[4], raw[5] - raw[1]),
        y=raw[6],
        z=raw[2],
        zerr=(raw[3], raw[3]),
        extras=[e_avg],
    )


def differential() -> list[DataSet]:
    """The three differential slices in order of energy."""
    return [energy_slice(i) for i in range(3)]


def all_data() -> list[DataSet]:
    """The three differential slices followed by the integrated cross section."""
    return differential() + [integrated()]