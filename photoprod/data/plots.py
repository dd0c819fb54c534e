"""Ready-made plots of the experimental data sets."""

from __future__ import annotations

from dataclasses import replace

import numpy as np

from ..plot import Plot
from . import gluex, jpsi007, pi_delta

_GLUEX_ENERGIES = {0: 8.93, 1: 9.85, 2: 10.82}
_T_LABEL = "#minus #it{t}  [GeV^{2}]"


def plot_pi_delta_differential() -> Plot:
    """SLAC pi-Delta differential cross section at 8 GeV."""
    p = Plot()
    p.add_data(pi_delta.differential())
    p.set_labels("#minus#it{t} [GeV]", "d#sigma/d#it{t}  [#mub]")
    p.set_logscale(False, True)
    p.add_header("#it{E}_{#gamma} = 8 GeV")
    p.set_legend(0.6, 0.5)
    p.set_ranges((1e-3, 1.08), (5e-2, 7))
    return p


def plot_sdme(a: int, m: int, mp: int) -> Plot:
    """One GlueX spin-density matrix element at 8.5 GeV."""
    p = Plot()
    p.add_data(pi_delta.sdme(a, m, mp))
    p.add_header("#it{E}_{#gamma} = 8.5 GeV")
    p.set_legend(0.7, 0.2)
    p.set_ranges((0, 1), (-0.5, 0.5))
    label = f"#rho^{{{a}}}_{{ {m}{mp}}}"
    if a == 2:
        label = "Im " + label
    p.set_labels(_T_LABEL, label)
    return p


def plot_sdmes() -> list[Plot]:
    """Plots of all nine SDMEs in file order."""
    return [plot_sdme(*pi_delta.sdme_indices(i)) for i in range(1, 10)]


def plot_beam_asymmetry() -> Plot:
    """GlueX beam asymmetry at 8.5 GeV."""
    p = Plot()
    p.add_data(pi_delta.beam_asymmetry())
    p.add_header("#it{E}_{#gamma} = 8.5 GeV")
    p.set_legend(0.7, 0.2)
    p.set_ranges((0, 1.2), (-1, 1))
    p.set_labels(_T_LABEL, "#Sigma_{4#pi}")
    return p


def plot_gluex_integrated() -> Plot:
    """GlueX integrated J/psi cross section."""
    p = Plot()
    p.add_data(gluex.integrated())
    p.set_logscale(False, True)
    p.set_legend(0.2, 0.65)
    p.set_ranges((8, 12), (1e-2, 10))
    p.set_labels(
        "#it{E}_{#gamma}  [GeV]",
        "#sigma(#gamma #it{p} #rightarrow #it{J}/#psi #it{p})  [nb]",
    )
    return p


def plot_gluex_slice(i: int) -> Plot:
    """GlueX differential J/psi cross section in energy bin ``i`` (0, 1 or 2)."""
    if i not in _GLUEX_ENERGIES:
        raise ValueError(f"Invalid GlueX slice {i}!")
    data = replace(gluex.energy_slice(i), name="GlueX (2023)")

    p = Plot()
    p.add_data(data)
    p.set_logscale(False, True)
    p.set_legend(0.6, 0.4 + (i != 0) * 0.23)
    p.set_ranges((0, 10), (3e-4, 6))
    if i == 0:
        p.set_ranges((0, 10), (7e-3, 1))
    if i == 1:
        p.set_ranges((0, 10), (2e-3, 3))
    p.add_header(f"#it{{E}}_{{#gamma}} = {_GLUEX_ENERGIES[i]:g} GeV")
    p.set_labels("#minus#it{t}  [GeV^{2}]", "#it{d}#sigma/#it{dt}  [nb / GeV^{2}]")
    return p


def plot_jpsi007_slice(i: int) -> Plot:
    """J/psi-007 differential cross section in energy bin ``i``."""
    data = jpsi007.energy_slice(i)
    if data.n == 0:
        raise ValueError(f"No J/psi-007 data in energy bin {i}!")
    header = data.name
    data = replace(data, name="#it{J}/#psi-007")

    max_i = int(np.argmax(data.x[: data.n]))
    tmax = float(data.x[max_i] + data.xerr[1][max_i])

    p = Plot()
    p.add_data(data)
    p.set_logscale(False, True)
    p.set_legend(0.5, 0.65)
    p.set_ranges((0, tmax + 0.2), (1e-3, 6))
    p.add_header(header)
    p.set_labels(
        "|#it{t} - #it{t}_{min}|  [GeV^{2}]", "#it{d}#sigma/#it{dt}  [nb / GeV^{2}]"
    )
    return p