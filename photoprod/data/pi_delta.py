"""Pi-Delta photoproduction data: SLAC differential cross section and GlueX SDMEs."""

from __future__ import annotations

from ..data_set import DataSet, check, import_data

_SLAC = "SLAC (1968)"
_GLUEX = "GlueX (2024)"

_SDME_TABLE = {
    1: (0, 1, 1),
    2: (0, 3, 1),
    3: (0, 3, -1),
    4: (1, 1, 1),
    5: (1, 3, 3),
    6: (1, 3, 1),
    7: (1, 3, -1),
    8: (2, 3, 1),
    9: (2, 3, -1),
}
_SDME_LOOKUP = {indices: i for i, indices in _SDME_TABLE.items()}


def differential() -> DataSet:
    """Differential cross section at E_gamma = 8 GeV (x = -t, z = dsigma/dt)."""
    raw = import_data("/data/piDelta/dcs_pimDelta_Boyarski.txt", 3)
    n = check(raw, _SLAC)
    return DataSet(
        n=n,
        name=_SLAC,
        kind=0,
        add_to_legend=True,
        x=raw[0],
        z=raw[1],
        zerr=(raw[2], raw[2]),
        extras=[8.0],
    )


def sdme_index(a: int, m: int, mp: int) -> int:
    """Position (1-9) of the SDME rho^a_{m mp} in the data file."""
    try:
        return _SDME_LOOKUP[(a, m, mp)]
    except KeyError:
        raise ValueError("Invalid SDME indices passed!") from None


def sdme_indices(i: int) -> tuple[int, int, int]:
    """Indices (a, m, mp) of the SDME at position ``i`` in the data file."""
    try:
        return _SDME_TABLE[i]
    except KeyError:
        raise ValueError(f"Invalid SDME position {i}!") from None


def sdme(a: int, m: int, mp: int) -> DataSet:
    """The measured spin-density matrix element rho^a_{m mp} as a function of -t."""
    index = sdme_index(a, m, mp)
    raw = import_data("/data/piDelta/data_sdmes_helicityframe.txt", 1 + 2 * 9)
    n = check(raw, _GLUEX)
    value, error = raw[1 + 2 * (index - 1)], raw[2 + 2 * (index - 1)]
    return DataSet(
        n=n,
        name=_GLUEX,
        kind=index,
        add_to_legend=True,
        x=raw[0],
        z=value,
        zerr=(error, error),
        extras=[8.5],
    )


def sdmes() -> list[DataSet]:
    """All nine measured SDMEs in file order."""
    return [sdme(*sdme_indices(i)) for i in range(1, 10)]


def beam_asymmetry() -> DataSet:
    """Beam asymmetry Sigma_4pi as a function of -t."""
    raw = import_data("/data/piDelta/data_BSA.txt", 4)
    n = check(raw, _GLUEX)
    return DataSet(
        n=n,
        name=_GLUEX,
        kind=10,
        add_to_legend=True,
        x=raw[0],
        xerr=(raw[1], raw[1]),
        z=raw[2],
        zerr=(raw[3], raw[3]),
        extras=[8.5],
    )