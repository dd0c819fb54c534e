"""Lorentz indices and elementary Lorentz tensors."""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import IntEnum
from typing import Any, Sequence


class LorentzIndex(IntEnum):
    """Space-time index of a Lorentz tensor."""

    t = 0
    x = 1
    y = 2
    z = 3


LORENTZ_INDICES: tuple[LorentzIndex, ...] = tuple(LorentzIndex)


class TensorObject(ABC):
    """A Lorentz tensor evaluated component-wise by calling it with indices."""

    _RANK: int = 0

    def rank(self) -> int:
        """Number of Lorentz indices the tensor carries."""
        return self._RANK

    def _indices(self, args: Sequence[Any]) -> tuple[LorentzIndex, ...]:
        if len(args) != self.rank():
            raise ValueError("Incorrect number of indices passed!")
        return tuple(LorentzIndex(int(a)) for a in args)

    @abstractmethod
    def __call__(self, *args):
        """Component for the given Lorentz indices."""


class LorentzVector(TensorObject):
    """Rank-1 tensor stored as its four components."""

    _RANK = 1

    def __init__(self, entries: Sequence[Any]):
        entries = tuple(entries)
        if len(entries) != 4:
            raise ValueError("A Lorentz vector needs exactly four entries!")
        self.entries = entries

    def __call__(self, *args):
        (mu,) = self._indices(args)
        return self.entries[mu]


class MetricTensor(TensorObject):
    """Minkowski metric with signature (+, -, -, -)."""

    _RANK = 2

    def __init__(self, identity: Any = 1.0 + 0j):
        self.identity = identity
        self.zero = identity * 0

    def __call__(self, *args):
        mu, nu = self._indices(args)
        if mu != nu:
            return self.zero
        return self.identity if mu == LorentzIndex.t else -self.identity


class LeviCivitaTensor(TensorObject):
    """Totally antisymmetric rank-4 tensor with epsilon_{txyz} = +1."""

    _RANK = 4

    def __init__(self, identity: Any = 1.0 + 0j):
        self.identity = identity

    def __call__(self, *args):
        a, b, c, d = (int(i) for i in self._indices(args))
        eps = (d - c) * (d - b) * (d - a) * (c - b) * (c - a) * (b - a)
        sign = (eps > 0) - (eps < 0)
        return sign * self.identity