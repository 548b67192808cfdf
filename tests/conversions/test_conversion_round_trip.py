from chromix.conversions import unit_rgb_to_hsb, hsb_to_unit_rgb, np_unit_rgb_to_hsb, np_hsb_to_unit_rgb
import numpy as np
from samples import samples_rgb_hsb, samples_gray_hsb


def test_round_trip_rgb_to_hsb_to_rgb():
    for r, g, b in samples_rgb_hsb:
        r_out, g_out, b_out = hsb_to_unit_rgb(*unit_rgb_to_hsb(r, g, b))

        assert abs(r - r_out) < 1e-6
        assert abs(g - g_out) < 1e-6
        assert abs(b - b_out) < 1e-6


def test_round_trip_gray_keeps_brightness():
    for r, g, b in samples_gray_hsb:
        h, s, v = unit_rgb_to_hsb(r, g, b)
        assert s == 0.0
        assert hsb_to_unit_rgb(h, s, v) == (v, v, v)


def test_round_trip_random_numpy():
    rng = np.random.default_rng(3)
    rgb = rng.random((200, 3))
    hsb = np_unit_rgb_to_hsb(rgb[:, 0], rgb[:, 1], rgb[:, 2])
    back = np_hsb_to_unit_rgb(hsb[:, 0], hsb[:, 1], hsb[:, 2])
    assert np.allclose(back, rgb, atol=1e-6)
