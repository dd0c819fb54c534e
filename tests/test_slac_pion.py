import numpy as np
import pytest

from photoprod.data import slac_pion
from photoprod.data_set import DataSetError


def _write_table(root, i, rows):
    path = root / "data" / "piN" / "slac" / f"Boyarski_PRL20_table{i}.txt"
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text("\n".join(" ".join(str(v) for v in r) for r in rows) + "\n")


@pytest.fixture
def tables(tmp_path, monkeypatch):
    monkeypatch.setenv("JPACPHOTO", str(tmp_path))
    out = []
    for i in range(1, 5):
        rows = [[-0.01 * i, 0, 0, 2.0 + i, 0.1, -0.2], [-0.05 * i, 0, 0, 1.0 + i, 0.05, -0.1]]
        _write_table(tmp_path, i, rows)
        out.append(np.array(rows))
    return out


def test_differential_columns(tables):
    d = slac_pion.differential(2)
    rows = tables[1]
    assert d.name == "SLAC (1968)"
    assert d.n == 2
    np.testing.assert_allclose(d.x, -rows[:, 0])
    np.testing.assert_allclose(d.z, rows[:, 3])
    np.testing.assert_allclose(d.zerr[0], rows[:, 4])
    np.testing.assert_allclose(d.zerr[1], -rows[:, 5])


def test_errors_are_positive(tables):
    d = slac_pion.differential(1)
    assert list(d.zerr[1]) == pytest.approx([0.2, 0.1])
    assert list(d.x) == pytest.approx([0.01, 0.05])


def test_all_tables(tables):
    sets = slac_pion.differential_tables()
    assert len(sets) == 4
    for d, rows in zip(sets, tables):
        np.testing.assert_allclose(d.z, rows[:, 3])


def test_missing_table(tables):
    with pytest.raises(FileNotFoundError):
        slac_pion.differential(9)


def test_missing_environment(monkeypatch):
    monkeypatch.delenv("JPACPHOTO", raising=False)
    with pytest.raises(DataSetError):
        slac_pion.differential(1)