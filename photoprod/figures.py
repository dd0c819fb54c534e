"""Figures of structure-function models and of the J/psi-proton total cross section."""

from __future__ import annotations

import argparse
import os
from typing import Optional, Sequence

import numpy as np

from .christy_bosted import ChristyBostedF
from .constants import EPS, M2_PROTON, M_PION, M_PROTON, w_cm
from .data_set import import_transposed
from .donnachie_landshoff import DonnachieLandshoffF
from .pdf_structure import PdfF
from .plot import Plot, combine

_M_JPSI = 3.0969

DEFAULT_BOOTSTRAP = "scripts/jpsi_photoproduction/bootstrap/"

_BOOTSTRAP_MODELS = (
    ("1C", "One channel (1C)"),
    ("2C", "Two channels (2C)"),
    ("3C-NR", "Non-resonant (3C-NR)"),
    ("3C-R", "Resonant (3C-R)"),
)

_F2_LABEL = "#it{F}_{2}(#it{x}_{B}, #it{t})"
_MX_LABEL = "#it{M}_{#it{X}} [GeV]"


def _bjorken_x(w: float, t: float) -> float:
    return -t / (w * w - M2_PROTON - t)


def structure_functions(filename: str = "Fs_compare.pdf") -> list[Plot]:
    """Compare the resonance-region, Regge and parton-model structure functions.

    The resonance-region F_2 against 2 x_B F_1 is saved as ``CB_Fs.pdf`` next
    to ``filename``; the comparison of all three models is saved to
    ``filename``. Returns the three plots in that order followed by the
    high-energy panel.
    """
    f1_cb, f2_cb = ChristyBostedF(1), ChristyBostedF(2)
    f2_dl = DonnachieLandshoffF(2)
    f2_pdf = PdfF(2)

    wth = M_PROTON + M_PION + EPS
    t_values = (
        (-0.1, "#it{t} = #minus 0.1 GeV^{2}"),
        (-2.0, "#it{t} = #minus 2.0 GeV^{2}"),
        (-10.0, "#it{t} = #minus 10 GeV^{2}"),
    )

    # Resonance region: F_2 against 2 x_B F_1
    p1 = Plot()
    p1.set_curve_points(100)
    p1.set_ranges((1, 3.0), (0, 0.5))
    p1.set_labels(_MX_LABEL, _F2_LABEL)
    p1.set_legend(0.35, 0.75)
    for t, label in t_values:
        p1.add_curve((wth, 3), lambda w, t=t: f2_cb.evaluate(w * w, t), label)
        p1.add_dashed(
            (wth, 3), lambda w, t=t: 2 * _bjorken_x(w, t) * f1_cb.evaluate(w * w, t)
        )
    p1.save(os.path.join(os.path.dirname(filename), "CB_Fs.pdf"))

    # High-energy comparison of Regge and parton-model F_2
    p2 = Plot()
    p2.set_curve_points(100)
    p2.set_ranges((1, 30), (0, 0.8))
    p2.set_labels(_MX_LABEL, _F2_LABEL)
    p2.set_legend(0.25, 0.75)
    p2.add_curve((wth, 30), lambda w: f2_dl.evaluate(w * w, -0.1), "#it{t} = #minus 0.1 GeV^{2}")
    p2.add_curve((wth, 30), lambda w: f2_pdf.evaluate(w * w, -2), "#it{t} = #minus 2 GeV^{2}")
    p2.add_dashed((wth, 30), lambda w: f2_dl.evaluate(w * w, -2))
    p2.add_curve((wth, 30), lambda w: f2_pdf.evaluate(w * w, -10), "#it{t} = #minus 10 GeV^{2}")
    p2.add_dashed((wth, 30), lambda w: f2_dl.evaluate(w * w, -10))

    # Low-mass comparison of all three models, distinguished by line style
    p3 = Plot()
    p3.set_labels(_MX_LABEL, _F2_LABEL)
    p3.add_header("D&L (solid), CTEQ-TEA (dashed), B&C (dotted)")
    p3.set_legend(0.25, 0.75)
    p3.set_curve_points(100)
    p3.set_ranges((1, 3), (0, 0.45))
    p3.add_curve((1, 3), lambda m: f2_dl.evaluate(m * m, -0.1))
    p3.add_dotted((1, 3), lambda m: f2_cb.evaluate(m * m, -0.1))
    for t in (-2.0, -10.0):
        p3.add_curve((1, 3), lambda m, t=t: f2_dl.evaluate(m * m, t))
        p3.add_dashed((1, 3), lambda m, t=t: f2_pdf.evaluate(m * m, t))
        p3.add_dotted((1, 3), lambda m, t=t: f2_cb.evaluate(m * m, t))

    combine((2, 1), [p3, p2], filename)
    return [p1, p2, p3]


def sigma_tot(path: str = DEFAULT_BOOTSTRAP, filename: str = "sigma_tot.pdf") -> Plot:
    """Plot the bootstrapped J/psi-proton total cross section of each fit model.

    ``path`` is relative to the data directory and holds one sub-directory
    per model, each with a ``plot_total.txt`` whose first row is the photon
    energy and whose fifth and sixth rows are the lower and upper bounds.
    """
    base = path.rstrip("/") + "/"
    bootstraps = [
        (import_transposed(base + model + "/plot_total.txt", 8), label)
        for model, label in _BOOTSTRAP_MODELS
    ]
    ws = np.array([w_cm(e) for e in bootstraps[0][0][0]])

    wth = _M_JPSI + M_PROTON + EPS
    p = Plot()
    p.set_logscale(False, True)
    p.set_legend(0.5, 0.3)
    p.set_ranges((wth, 5), (4e-2, 4e2))
    p.set_labels("#sqrt{#it{s}}  [GeV]", "#sigma^{#it{J}/#psi#it{p}}_{tot}  [mb]")
    for bs, label in bootstraps:
        lower, upper = bs[4], bs[5]
        p.add_points_curve(ws, (lower + upper) / 2, label)
        p.add_band(ws, (lower, upper))
    p.save(filename)
    return p


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Command-line entry point: draw one of the figures."""
    parser = argparse.ArgumentParser(description="Draw photoproduction figures.")
    parser.add_argument("figure", choices=("structure-functions", "sigma-tot"))
    parser.add_argument("-o", "--output", help="output file")
    parser.add_argument(
        "--path", default=DEFAULT_BOOTSTRAP, help="bootstrap directory for sigma-tot"
    )
    args = parser.parse_args(argv)

    if args.figure == "structure-functions":
        structure_functions(args.output or "Fs_compare.pdf")
    else:
        sigma_tot(args.path, args.output or "sigma_tot.pdf")
    return 0