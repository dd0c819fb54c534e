"""Unpolarised nucleon structure functions in the resonance region.

Breit-Wigner resonances plus a smooth nonresonant background, following
the Christy-Bosted parameterisation.
"""

from __future__ import annotations

import math
from enum import IntEnum
from typing import Sequence

from .constants import ALPHA, M2_PION, M2_PROTON, M_ETA, M_PION, M_PROTON, PI, kallen

_THRESHOLD = M_PROTON + M_PION


class Nucleon(IntEnum):
    """Target selection for the cross sections."""

    PROTON = 0
    NEUTRON = 1
    AVG_NUCLEON = 2


class Resonance:
    """A single nucleon resonance with energy-dependent widths and photocouplings.

    ``bw_pars`` are (mass, width, beta_pi, beta_pipi, beta_eta, X0) and
    ``a_pars`` are (A_T(0), a, b, c, A_L(0), d, e).
    """

    _DECAY_M2 = (M2_PION, 4.0 * M2_PION, M_ETA * M_ETA)

    def __init__(self, ell: int, bw_pars: Sequence[float], a_pars: Sequence[float]):
        self.ell = ell
        self.mass, self.width, b_pi, b_pipi, b_eta, self.damping = bw_pars
        self.beta = (b_pi, b_pipi, b_eta)
        self.at0, self.a, self.b, self.c, self.al0, self.d, self.e = a_pars

        m2 = self.mass * self.mass
        self._k_r = (m2 - M2_PROTON) / (2.0 * M_PROTON)
        self._khat_r = (m2 - M2_PROTON) / (2.0 * self.mass)
        self._p_r = tuple(
            math.sqrt(kallen(m2, M2_PROTON, dm2)) / (2.0 * self.mass)
            if self.mass > M_PROTON + math.sqrt(dm2)
            else 0.0
            for dm2 in self._DECAY_M2
        )

    def _total_width(self, w: float) -> float:
        x2 = self.damping * self.damping
        total = 0.0
        for i, (beta, p_r, dm2) in enumerate(zip(self.beta, self._p_r, self._DECAY_M2)):
            if w <= math.sqrt(dm2) + M_PROTON or abs(beta) < 1e-10:
                continue
            p = math.sqrt(kallen(w * w, dm2, M2_PROTON)) / (2.0 * w)
            two_pion = i == 1
            betahat = beta * (p / p_r) ** (2 * self.ell + 1 + 3 * two_pion)
            betahat *= ((p_r * p_r + x2) / (p * p + x2)) ** (self.ell + 2 * two_pion)
            if two_pion:
                betahat *= w / self.mass
            total += betahat * self.width
        return total

    def breit_wigner(self, w: float) -> float:
        """Squared Breit-Wigner amplitude at centre-of-mass energy ``w``."""
        k = (w * w - M2_PROTON) / (2.0 * M_PROTON)
        khat = (w * w - M2_PROTON) / (2.0 * w)
        x2 = self.damping * self.damping
        gamma_photon = (
            self.width
            * (khat / self._khat_r) ** 2
            * (self._khat_r ** 2 + x2)
            / (khat * khat + x2)
        )
        gamma_tot = self._total_width(w)
        m2 = self.mass * self.mass
        bw = gamma_tot * gamma_photon / self.width / ((w * w - m2) ** 2 + m2 * gamma_tot ** 2)
        return self._k_r * self._khat_r / (k * khat) * bw

    def a_t(self, q2: float) -> float:
        """Transverse photocoupling at virtuality ``q2``."""
        return self.at0 / (1.0 + q2 / 0.91) ** self.c * (1.0 + self.a * q2 / (1.0 + self.b * q2))

    def a_l(self, q2: float) -> float:
        """Longitudinal photocoupling at virtuality ``q2``."""
        return self.al0 * q2 / (1.0 + self.d * q2) * math.exp(-self.e * q2)


# Breit-Wigner parameters: mass, width, beta_pi, beta_pipi, beta_eta, X0
_P33_BW = (1.230, 0.136, 1.00, 0.00, 0.00, 0.1446)
_S11_BW = (1.530, 0.220, 0.45, 0.10, 0.45, 0.215)
_D13_BW = (1.506, 0.083, 0.65, 0.35, 0.00, 0.215)
_F15_BW = (1.698, 0.096, 0.65, 0.35, 0.00, 0.215)
_S15_BW = (1.665, 0.109, 0.40, 0.50, 0.10, 0.215)
_P11_BW = (1.433, 0.379, 0.65, 0.35, 0.00, 0.215)
_FXX_BW = (1.934, 0.380, 0.50, 0.50, 0.00, 0.215)

# Photocouplings: A_T(0), a, b, cT, A_L(0), d, e
_PROTON_A = (
    (7.780, 4.229, 1.260, 2.124, 29.4140, 19.910, 0.226),
    (6.335, 6823.2, 33521.0, 2.569, 0.0, 0.0, 0.0),
    (0.603, 21.240, 0.056, 2.489, 157.92, 97.046, 0.310),
    (2.330, -0.288, 0.186, 0.064, 4.216, 0.038, 1.218),
    (1.979, -0.562, 0.390, 0.549, 13.764, 0.314, 3.0),
    (0.0225, 462.13, 0.192, 1.914, 5.5124, 0.054, 1.309),
    (3.419, 0.0, 0.0, 1.0, 11.0, 1.895, 0.514),
)
_NEUTRON_A = (
    (8.122, 5.19, 3.29, 1.870, 0, 0, 0),
    (6.110, -34.64, 900.0, 1.717, 0, 0, 0),
    (0.043, 191.50, 0.22, 2.119, 0, 0, 0),
    (2.088, -0.30, 0.20, 0.001, 0, 0, 0),
    (0.023, -0.46, 0.24, 1.204, 0, 0, 0),
    (0.023, 541.90, 0.22, 2.168, 0, 0, 0),
    (3.319, 0, 0, 2.0, 0, 0, 0),
)
_SPECTRUM = (
    (1, _P33_BW),
    (0, _S11_BW),
    (2, _D13_BW),
    (3, _F15_BW),
    (0, _S15_BW),
    (1, _P11_BW),
    (3, _FXX_BW),
)

_PROTON_RESONANCES = tuple(Resonance(l, bw, a) for (l, bw), a in zip(_SPECTRUM, _PROTON_A))
_NEUTRON_RESONANCES = tuple(Resonance(l, bw, a) for (l, bw), a in zip(_SPECTRUM, _NEUTRON_A))

# Nonresonant transverse background: sigma0, a, b, c, d (two terms each)
_NR_T_PROTON = (
    (246.1, -89.4),
    (0.0675, 0.2098),
    (1.3501, 1.5715),
    (0.1205, 0.0907),
    (-0.0038, 0.0104),
)
_NR_T_OTHER = (
    (226.6, -75.3),
    (0.0764, 0.1776),
    (1.4570, 1.6360),
    (0.1318, 0.1350),
    (-0.005596, 0.005883),
)


def _resonances(iso: int) -> tuple[Resonance, ...]:
    return _PROTON_RESONANCES if iso == Nucleon.PROTON else _NEUTRON_RESONANCES


def _bjorken_x(w: float, q2: float) -> float:
    return q2 / (w * w + q2 - M2_PROTON)


class ChristyBostedF:
    """Structure function F_1 or F_2 in the resonance region."""

    def __init__(self, mode: int, nucleon: int = Nucleon.PROTON):
        if mode not in (1, 2):
            raise ValueError("Integer argument must be 1 or 2 for F_1 and F_2 respectively!")
        try:
            self.nucleon = Nucleon(nucleon)
        except ValueError:
            raise ValueError(
                "Particle selection must be PROTON (0), NEUTRON (1), or AVG_NUCLEON (2)!"
            ) from None
        self.mode = mode

    @staticmethod
    def _prefactor(s: float) -> float:
        k = (s - M2_PROTON) / (2.0 * M_PROTON)
        return M_PROTON * k / (4.0 * PI * PI * ALPHA) / 389.39

    def evaluate(self, s: float, q2: float) -> float:
        """Structure function at invariant mass squared ``s`` and photon virtuality ``q2`` (< 0)."""
        w = math.sqrt(s)
        big_q2 = -q2
        x = _bjorken_x(w, big_q2)
        sigma_t = self.sigma_t(self.nucleon, w, big_q2)
        if self.mode == 1:
            return self._prefactor(s) * sigma_t
        sigma_l = self.sigma_l(self.nucleon, w, big_q2)
        return (
            self._prefactor(s)
            * (2.0 * x)
            / (1.0 + 4.0 * M2_PROTON * x * x / big_q2)
            * (sigma_t + sigma_l)
        )

    def sigma_t(self, iso: int, w: float, q2: float) -> float:
        """Total transverse virtual-photon cross section."""
        proton = self.sigma_t_nr(Nucleon.PROTON, w, q2) + self.sigma_t_r(Nucleon.PROTON, w, q2)
        if iso == Nucleon.PROTON:
            return proton
        average = self.sigma_t_nr(Nucleon.AVG_NUCLEON, w, q2) + self.sigma_t_r(
            Nucleon.AVG_NUCLEON, w, q2
        )
        if iso == Nucleon.AVG_NUCLEON:
            return average
        return 2.0 * average - proton

    def sigma_l(self, iso: int, w: float, q2: float) -> float:
        """Total longitudinal virtual-photon cross section."""
        if w <= _THRESHOLD:
            return 0.0
        if iso == Nucleon.PROTON:
            return self.sigma_l_nr(Nucleon.PROTON, w, q2) + self.sigma_l_r(Nucleon.PROTON, w, q2)
        ratio = self.sigma_l(Nucleon.PROTON, w, q2) / self.sigma_t(Nucleon.PROTON, w, q2)
        return ratio * self.sigma_t(Nucleon.NEUTRON, w, q2)

    def sigma_t_nr(self, iso: int, w: float, q2: float) -> float:
        """Nonresonant transverse background."""
        if w <= _THRESHOLD:
            return 0.0
        q20 = 0.05
        params = _NR_T_PROTON if iso == Nucleon.PROTON else _NR_T_OTHER
        xp = 1.0 / (1.0 + (w * w - _THRESHOLD ** 2) / (q2 + q20))
        return sum(
            sigma0 * xp * (w - _THRESHOLD) ** (i + 1.5) / (q2 + a) ** (b + c * q2 + d * q2 * q2)
            for i, (sigma0, a, b, c, d) in enumerate(zip(*params))
        )

    def sigma_l_nr(self, iso: int, w: float, q2: float) -> float:
        """Nonresonant longitudinal background (zero for the neutron)."""
        if w <= _THRESHOLD or iso == Nucleon.NEUTRON:
            return 0.0
        sigma0 = 86.7
        a, b, c, d, e = 0.0, 4.0294, 3.1285, 0.3340, 4.9623
        q20, m0, mu = 0.125, 4.2802, 0.33

        xp = 1.0 / (1.0 + (w * w - _THRESHOLD ** 2) / (q2 + q20))
        tau = math.log(math.log((q2 + m0) / mu / mu) / math.log(m0 / mu / mu))

        sigma = sigma0 * xp ** (d + e * tau)
        sigma *= (1.0 - xp) ** (a * tau + b) / (1.0 - _bjorken_x(w, q2))
        sigma *= q2 ** c / (q2 + q20) ** (1.0 + c)
        return sigma

    def sigma_t_r(self, iso: int, w: float, q2: float) -> float:
        """Resonant transverse contribution."""
        return sum(w * res.breit_wigner(w) * res.a_t(q2) ** 2 for res in _resonances(iso))

    def sigma_l_r(self, iso: int, w: float, q2: float) -> float:
        """Resonant longitudinal contribution."""
        return sum(w * res.breit_wigner(w) * res.a_l(q2) ** 2 for res in _resonances(iso))