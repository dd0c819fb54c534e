from itertools import permutations, product

import numpy as np
import pytest

from photoprod.tensors import (
    LORENTZ_INDICES,
    LeviCivitaTensor,
    LorentzIndex,
    LorentzVector,
    MetricTensor,
)


def test_ranks():
    assert LorentzVector([0, 0, 0, 0]).rank() == 1
    assert MetricTensor().rank() == 2
    assert LeviCivitaTensor().rank() == 4


def test_vector_components():
    v = LorentzVector([10, 11, 12, 13])
    assert [v(mu) for mu in LORENTZ_INDICES] == [10, 11, 12, 13]
    assert v(LorentzIndex.z) == 13


def test_vector_needs_four_entries():
    with pytest.raises(ValueError):
        LorentzVector([1, 2, 3])


def test_wrong_number_of_indices():
    with pytest.raises(ValueError):
        LorentzVector([1, 2, 3, 4])(0, 1)
    with pytest.raises(ValueError):
        MetricTensor()(LorentzIndex.t)


def test_invalid_index_value():
    with pytest.raises(ValueError):
        LorentzVector([1, 2, 3, 4])(4)


def test_metric_signature():
    g = MetricTensor()
    assert g(LorentzIndex.t, LorentzIndex.t) == 1
    for mu in (LorentzIndex.x, LorentzIndex.y, LorentzIndex.z):
        assert g(mu, mu) == -1


def test_metric_symmetric_and_diagonal():
    g = MetricTensor()
    for mu, nu in product(LORENTZ_INDICES, repeat=2):
        assert g(mu, nu) == g(nu, mu)
        if mu != nu:
            assert g(mu, nu) == 0


def test_metric_with_matrix_identity():
    g = MetricTensor(np.eye(2))
    assert np.array_equal(g(1, 1), -np.eye(2))
    assert np.array_equal(g(0, 2), np.zeros((2, 2)))


def test_levi_civita_reference_component():
    assert LeviCivitaTensor()(0, 1, 2, 3) == 1


def test_levi_civita_antisymmetric():
    eps = LeviCivitaTensor()
    for perm in permutations(range(4)):
        swapped = (perm[1], perm[0], perm[2], perm[3])
        assert eps(*swapped) == -eps(*perm)
        assert abs(eps(*perm)) == 1


def test_levi_civita_repeated_index_vanishes():
    eps = LeviCivitaTensor()
    assert eps(0, 0, 1, 2) == 0
    assert eps(3, 1, 2, 3) == 0