from chromix.colors import Color, StrictColor, mix
import numpy as np
import pytest

RED = Color((1.0, 0.0, 0.0, 1.0))
BLUE = Color((0.0, 0.0, 1.0, 1.0))


def test_mix_halfway():
    out = mix(RED, BLUE)
    assert np.allclose(out.value, (0.5, 0.0, 0.5, 1.0))
    assert out.hex_string() == "0xff800080"


def test_mix_with_itself_is_identity():
    samples = [
        Color((0.2, 0.4, 0.6, 1.0)),
        Color((1.0, 0.0, 0.004, 0.3)),
        Color((0.0, 0.0, 0.0, 0.0)),
    ]
    for color in samples:
        for weight in (0, 11, 16, 23, 50, 77, 100):
            assert np.allclose(mix(color, color, weight).value, color.value, atol=1e-12)


def test_mix_weight_is_share_of_first_color():
    out = mix(RED, BLUE, 25)
    assert np.allclose(out.value, (0.25, 0.0, 0.75, 1.0))
    assert mix(RED, BLUE, 100) == RED
    assert mix(RED, BLUE, 0) == BLUE


def test_mix_equal_alpha_symmetric_at_fifty():
    a = Color((0.9, 0.3, 0.1, 0.6))
    b = Color((0.1, 0.5, 0.8, 0.6))
    assert np.allclose(mix(a, b, 50).value, mix(b, a, 50).value, atol=1e-12)


def test_mix_equal_alpha_swapping_mirrors_weight():
    a = Color((0.9, 0.3, 0.1, 0.6))
    b = Color((0.1, 0.5, 0.8, 0.6))
    assert not np.allclose(mix(a, b, 25).value, mix(b, a, 25).value)
    assert np.allclose(mix(a, b, 25).value, mix(b, a, 75).value, atol=1e-12)


def test_mix_unequal_alpha_favours_opaque_color():
    faint_red = Color((1.0, 0.0, 0.0, 0.5))
    out = mix(faint_red, BLUE)
    # interim weight -0.5 -> colour1 weight 0.25; alpha blended with the same weights
    assert np.allclose(out.value, (0.25, 0.0, 0.75, 0.875))
    assert np.allclose(mix(BLUE, faint_red).value, out.value, atol=1e-12)


def test_mix_unequal_alpha_swapping_changes_result_off_centre():
    faint_red = Color((1.0, 0.0, 0.0, 0.5))
    assert not np.allclose(mix(faint_red, BLUE, 30).value, mix(BLUE, faint_red, 30).value)


def test_mix_opaque_over_transparent():
    clear_blue = Color((0.0, 0.0, 1.0, 0.0))
    assert mix(RED, clear_blue) == RED
    assert mix(clear_blue, RED) == RED


def test_mix_division_guard():
    clear_blue = Color((0.0, 0.0, 1.0, 0.0))
    # normalised weight -1 times alpha difference 1 is exactly -1
    assert mix(RED, clear_blue, 0) == clear_blue
    # normalised weight 1 times alpha difference -1 is exactly -1
    assert mix(clear_blue, RED, 100) == clear_blue


def test_mix_does_not_clamp_weight():
    out = mix(RED, BLUE, 150)
    assert np.allclose(out.value, (1.5, 0.0, -0.5, 1.0))


def test_mix_strict_weight():
    with pytest.raises(ValueError):
        mix(RED, BLUE, 150, strict=True)
    with pytest.raises(ValueError):
        mix(RED, BLUE, -1, strict=True)
    assert mix(RED, BLUE, 100, strict=True) == RED


def test_mix_rejects_non_colors():
    with pytest.raises(TypeError):
        mix((1.0, 0.0, 0.0, 1.0), BLUE)
    with pytest.raises(TypeError):
        mix(RED, "blue")


def test_mix_keeps_first_class():
    strict_red = StrictColor(RED)
    out = mix(strict_red, BLUE, 40)
    assert isinstance(out, StrictColor)
    assert type(mix(BLUE, strict_red)) is Color
