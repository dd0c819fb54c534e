import numpy as np
import pytest

from photoprod.data import pi_delta


def _write(root, rel, rows, header="# comment\n\n"):
    path = root / rel
    path.parent.mkdir(parents=True, exist_ok=True)
    body = "\n".join(" ".join(str(v) for v in row) for row in rows)
    path.write_text(header + body + "\n")


@pytest.fixture
def data_dir(tmp_path, monkeypatch):
    monkeypatch.setenv("JPACPHOTO", str(tmp_path))
    return tmp_path


def test_differential(data_dir):
    rows = [[0.1, 5.0, 0.5], [0.2, 3.0, 0.3]]
    _write(data_dir, "data/piDelta/dcs_pimDelta_Boyarski.txt", rows)
    d = pi_delta.differential()
    assert d.n == 2
    assert d.name == "SLAC (1968)"
    assert d.kind == 0
    assert d.add_to_legend
    np.testing.assert_allclose(d.x, [0.1, 0.2])
    np.testing.assert_allclose(d.z, [5.0, 3.0])
    np.testing.assert_allclose(d.zerr[0], [0.5, 0.3])
    np.testing.assert_allclose(d.zerr[1], [0.5, 0.3])
    assert d.extras == [8.0]


def test_sdme_index_fixed_positions():
    assert pi_delta.sdme_index(0, 1, 1) == 1
    assert pi_delta.sdme_index(0, 3, -1) == 3
    assert pi_delta.sdme_index(2, 3, -1) == 9


@pytest.mark.parametrize("i", range(1, 10))
def test_sdme_index_round_trip(i):
    assert pi_delta.sdme_index(*pi_delta.sdme_indices(i)) == i


def test_sdme_invalid():
    with pytest.raises(ValueError):
        pi_delta.sdme_index(3, 1, 1)
    with pytest.raises(ValueError):
        pi_delta.sdme_indices(0)


@pytest.fixture
def sdme_rows(data_dir):
    rows = np.arange(2 * 19, dtype=float).reshape(2, 19) + 0.5
    _write(data_dir, "data/piDelta/data_sdmes_helicityframe.txt", rows.tolist())
    return rows


def test_sdme_columns(sdme_rows):
    d = pi_delta.sdme(1, 3, 3)
    assert d.kind == 5
    assert d.n == 2
    np.testing.assert_allclose(d.x, sdme_rows[:, 0])
    np.testing.assert_allclose(d.z, sdme_rows[:, 9])
    np.testing.assert_allclose(d.zerr[0], sdme_rows[:, 10])
    np.testing.assert_allclose(d.zerr[1], sdme_rows[:, 10])
    assert d.extras == [8.5]
    assert d.name == "GlueX (2024)"


def test_sdme_invalid_raises_even_with_data(sdme_rows):
    with pytest.raises(ValueError):
        pi_delta.sdme(0, 0, 0)


def test_sdmes(sdme_rows):
    sets = pi_delta.sdmes()
    assert [d.kind for d in sets] == list(range(1, 10))
    np.testing.assert_allclose(sets[0].z, sdme_rows[:, 1])
    np.testing.assert_allclose(sets[8].zerr[0], sdme_rows[:, 18])


def test_beam_asymmetry(data_dir):
    rows = [[0.1, 0.05, 0.4, 0.02], [0.3, 0.05, 0.6, 0.03], [0.5, 0.1, 0.7, 0.04]]
    _write(data_dir, "data/piDelta/data_BSA.txt", rows)
    d = pi_delta.beam_asymmetry()
    assert d.kind == 10
    assert d.n == 3
    np.testing.assert_allclose(d.x, [0.1, 0.3, 0.5])
    np.testing.assert_allclose(d.xerr[0], [0.05, 0.05, 0.1])
    np.testing.assert_allclose(d.z, [0.4, 0.6, 0.7])
    np.testing.assert_allclose(d.zerr[1], [0.02, 0.03, 0.04])
    assert d.extras == [8.5]