import math

import numpy as np
import pytest

from photoprod.data import jpsi007


def _row(r, e_index):
    values = [r * 100.0 + k for k in range(15)]
    values[2] = float(e_index)
    return values


@pytest.fixture
def rows(tmp_path, monkeypatch):
    monkeypatch.setenv("JPACPHOTO", str(tmp_path))
    table = [_row(0, 1), _row(1, 3), _row(2, 1), _row(3, 12)]
    path = tmp_path / "data" / "jpsip" / "jpsi007" / "jpsi007_electron.tsv"
    path.parent.mkdir(parents=True)
    path.write_text("# header\n" + "\n".join(" ".join(str(v) for v in r) for r in table) + "\n")
    return np.array(table)


def test_slice_filters_bin(rows):
    d = jpsi007.energy_slice(1)
    sel = rows[rows[:, 2] == 1]
    assert d.n == 2
    assert d.kind == 2
    np.testing.assert_allclose(d.x, sel[:, 9])
    np.testing.assert_allclose(d.y, sel[:, 8])
    np.testing.assert_allclose(d.z, sel[:, 11])
    np.testing.assert_allclose(d.zerr[0], sel[:, 14])
    np.testing.assert_allclose(d.xerr[0], sel[:, 9] - sel[:, 6])
    np.testing.assert_allclose(d.xerr[1], sel[:, 7] - sel[:, 9])


def test_slice_average_energy(rows):
    d = jpsi007.energy_slice(1)
    sel = rows[rows[:, 2] == 1]
    assert d.extras[0] == pytest.approx(sel[:, 8].mean())
    assert d.name.startswith("Jpsi-007 (E = ")
    assert d.name.endswith(" GeV)")


def test_empty_bin(rows):
    d = jpsi007.energy_slice(7)
    assert d.n == 0
    assert math.isnan(d.extras[0])


def test_all_data(rows):
    sets = jpsi007.all_data()
    assert len(sets) == 12
    assert sum(d.n for d in sets) == len(rows)
    assert sets[11].n == 1