from chromix.conversions.to_rgb import hsb_to_unit_rgb, np_hsb_to_unit_rgb
import numpy as np
from samples import samples_rgb_hsb


def test_hsb_to_unit_rgb():
    for (r_exp, g_exp, b_exp), (h, s, v) in samples_rgb_hsb.items():
        r, g, b = hsb_to_unit_rgb(h, s, v)

        assert abs(r - r_exp) < 1e-9
        assert abs(g - g_exp) < 1e-9
        assert abs(b - b_exp) < 1e-9


def test_zero_saturation_gives_gray():
    for hue in (0.0, 0.2, 0.5, 0.9):
        assert hsb_to_unit_rgb(hue, 0.0, 0.7) == (0.7, 0.7, 0.7)


def test_full_turn_wraps_to_red():
    r, g, b = hsb_to_unit_rgb(1.0, 1.0, 1.0)
    assert abs(r - 1.0) < 1e-9
    assert abs(g) < 1e-9
    assert abs(b) < 1e-9


def test_brightness_above_one_propagates():
    r, g, b = hsb_to_unit_rgb(0.0, 0.0, 1.5)
    assert (r, g, b) == (1.5, 1.5, 1.5)


def test_every_sector():
    # Sector midpoints of a fully saturated, full brightness hue wheel
    expected = [
        (1.0, 0.5, 0.0),
        (0.5, 1.0, 0.0),
        (0.0, 1.0, 0.5),
        (0.0, 0.5, 1.0),
        (0.5, 0.0, 1.0),
        (1.0, 0.0, 0.5),
    ]
    for sector, rgb in enumerate(expected):
        out = hsb_to_unit_rgb((sector + 0.5) / 6, 1.0, 1.0)
        assert np.allclose(out, rgb, atol=1e-9)


def test_hsb_to_unit_rgb_numpy():
    the_matrix = np.array(list(samples_rgb_hsb.values()))
    expected = np.array(list(samples_rgb_hsb.keys()))
    rgb = np_hsb_to_unit_rgb(the_matrix[..., 0], the_matrix[..., 1], the_matrix[..., 2])

    assert rgb.shape == expected.shape
    assert np.allclose(rgb, expected, atol=1e-9)


def test_numpy_matches_scalar():
    rng = np.random.default_rng(11)
    hsb = rng.random((50, 3))
    rgb = np_hsb_to_unit_rgb(hsb[:, 0], hsb[:, 1], hsb[:, 2])
    for row, out in zip(hsb, rgb):
        assert np.allclose(hsb_to_unit_rgb(*row), out, atol=1e-12)
