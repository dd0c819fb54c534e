"""SLAC (1968) charged-pion photoproduction differential cross sections."""

from __future__ import annotations

from ..data_set import DataSet, check, import_data


def differential(table: int) -> DataSet:
    """Differential cross section from table ``table`` (x = -t, z = dsigma/dt)."""
    name = "SLAC (1968)"
    raw = import_data(f"/data/piN/slac/Boyarski_PRL20_table{table}.txt", 6)
    n = check(raw, name)
    return DataSet(
        n=n,
        name=name,
        x=-raw[0],
        z=raw[3],
        zerr=(raw[4], -raw[5]),
    )


def differential_tables() -> list[DataSet]:
    """All four tables in order."""
    return [differential(i) for i in range(1, 5)]