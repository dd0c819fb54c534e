import numpy as np
import pytest

from photoprod.colors import JpacColor
from photoprod.data_set import DataSet
from photoprod.plot import Plot, combine


def test_add_curve_samples_between_bounds():
    p = Plot()
    p.set_curve_points(11)
    p.add_curve((0.0, 2.0), lambda x: x * x, "square")
    curve = p.curves[0]
    assert len(curve.x) == 11
    assert curve.x[0] == 0.0
    assert curve.x[-1] == 2.0
    assert np.allclose(curve.y, curve.x ** 2)
    assert curve.label == "square"
    assert curve.style == "solid"


def test_curve_is_evaluated_when_added():
    p = Plot()
    state = {"scale": 1.0}
    p.add_curve((0.0, 1.0), lambda x: state["scale"] * x)
    state["scale"] = 5.0
    assert np.allclose(p.curves[0].y, p.curves[0].x)


def test_dashed_and_dotted_share_colour_of_previous_curve():
    p = Plot()
    p.add_curve((0, 1), lambda x: x, "a")
    p.add_dashed((0, 1), lambda x: 2 * x)
    p.add_dotted((0, 1), lambda x: 3 * x)
    p.add_curve((0, 1), lambda x: 4 * x, "b")
    styles = [c.style for c in p.curves]
    assert styles == ["solid", "dashed", "dotted", "solid"]
    assert p.curves[0].color == p.curves[1].color == p.curves[2].color
    assert p.curves[3].color != p.curves[0].color
    assert p.curves[0].color == JpacColor.BLUE


def test_band_takes_last_curve_colour():
    p = Plot()
    p.add_curve((0, 1), lambda x: x)
    p.add_curve((0, 1), lambda x: x)
    p.add_band([0, 1], ([0, 0], [1, 1]))
    assert p.bands[0].color == p.curves[-1].color


def test_band_length_mismatch_raises():
    p = Plot()
    with pytest.raises(ValueError):
        p.add_band([0, 1, 2], ([0, 0], [1, 1]))


def test_points_curve_length_mismatch_raises():
    p = Plot()
    with pytest.raises(ValueError):
        p.add_points_curve([0, 1], [1, 2, 3])


def test_points_curve_stored():
    p = Plot()
    p.add_points_curve([1, 2, 3], [4, 5, 6], "pts")
    assert np.array_equal(p.curves[0].y, [4, 5, 6])
    assert p.curves[0].label == "pts"


def test_curve_points_too_small_raises():
    with pytest.raises(ValueError):
        Plot().set_curve_points(1)


def test_settings_are_stored():
    p = Plot()
    p.set_labels("x", "y")
    p.set_logscale(False, True)
    p.set_ranges((1, 2), (3, 4))
    p.set_legend(0.2, 0.4)
    p.add_header("head")
    assert (p.xlabel, p.ylabel) == ("x", "y")
    assert p.logscale == (False, True)
    assert p.xrange == (1.0, 2.0)
    assert p.yrange == (3.0, 4.0)
    assert p.legend_position == (0.2, 0.4)
    assert p.header == "head"


def test_legend_can_be_switched_off():
    p = Plot()
    p.set_legend(False)
    assert p.show_legend is False
    p.set_legend(0.5, 0.5)
    assert p.show_legend is True


def test_legend_position_needs_y():
    with pytest.raises(ValueError):
        Plot().set_legend(0.5)


def test_save_png(tmp_path):
    p = Plot()
    p.add_curve((0.1, 1.0), lambda x: x, "line")
    p.add_header("header")
    out = tmp_path / "plot.png"
    p.save(str(out))
    assert out.read_bytes()[:4] == b"\x89PNG"


def test_save_pdf_with_data_and_log(tmp_path):
    data = DataSet(
        n=3,
        name="points",
        x=[1.0, 2.0, 3.0],
        z=[1.0, 2.0, 3.0],
        xerr=([0.1] * 3, [0.1] * 3),
        zerr=([0.2] * 3, [0.2] * 3),
        add_to_legend=True,
    )
    p = Plot()
    p.add_data(data)
    p.add_curve((1, 3), lambda x: x)
    p.add_band([1, 2, 3], ([0.5, 1.5, 2.5], [1.5, 2.5, 3.5]))
    p.set_logscale(False, True)
    p.set_ranges((0, 4), (0.1, 10))
    out = tmp_path / "plot.pdf"
    p.save(str(out))
    assert out.read_bytes()[:4] == b"%PDF"


def test_combine_writes_file(tmp_path):
    plots = [Plot(), Plot(), Plot()]
    for p in plots:
        p.add_curve((0, 1), lambda x: x, "c")
    out = tmp_path / "grid.png"
    combine((2, 2), plots, str(out))
    assert out.read_bytes()[:4] == b"\x89PNG"


def test_combine_too_many_plots_raises(tmp_path):
    with pytest.raises(ValueError):
        combine((1, 1), [Plot(), Plot()], str(tmp_path / "x.png"))


def test_combine_bad_shape_raises(tmp_path):
    with pytest.raises(ValueError):
        combine((0, 1), [], str(tmp_path / "x.png"))