from chromix.utils.num_utils import round_half_away, is_unit
import math


def test_round_half_away():
    assert round_half_away(2.5) == 3
    assert round_half_away(-2.5) == -3
    assert round_half_away(0.5) == 1
    assert round_half_away(1.02) == 1
    assert round_half_away(1.49) == 1
    assert round_half_away(254.6) == 255
    assert round_half_away(0.0) == 0


def test_is_unit():
    assert is_unit(0.0)
    assert is_unit(1.0)
    assert not is_unit(1.0000001)
    assert not is_unit(-0.1)
    assert not is_unit(math.nan)
    assert not is_unit(math.inf)
