"""
Hue classification and Sass-style weighted mixing.

Weights follow "Practical Color Theory for People Who Code" (N. Shelburne):
a neutral is the mix color blended into its base by a small, fixed weight
chosen from whether the mix is cool and whether the base is high key.
"""
from __future__ import annotations
from typing import Dict, Tuple
from ..types.color_types import HueRange, Scalar
from .rgba import Color

COOL_HUE_RANGE: HueRange = (0.3333, 0.8333)
# A hue band, not a brightness test.
HIGH_KEY_HUE_RANGE: HueRange = (0.0833, 0.3888)

# (mix is cool, base is high key) -> weight of the mix color in percent
HARMONIOUS_WEIGHTS: Dict[Tuple[bool, bool], int] = {
    (True, True): 11,
    (True, False): 16,
    (False, True): 13,
    (False, False): 23,
}

DEFAULT_WEIGHT = 50


def _hue_within(color: Color, hue_range: HueRange) -> bool:
    low, high = hue_range
    return low < color.hue < high


def is_cool_color(color: Color) -> bool:
    """True for hues strictly between 120° and 300°."""
    return _hue_within(color, COOL_HUE_RANGE)


def is_high_key_value(color: Color) -> bool:
    """True for hues strictly between ~30° and ~140°."""
    return _hue_within(color, HIGH_KEY_HUE_RANGE)


is_cool_colour = is_cool_color


def mix(colour1: Color, colour2: Color, weight: Scalar = DEFAULT_WEIGHT, *, strict: bool = False) -> Color:
    """
    Mix two colors the way Sass ``mix()`` does.

    The weight is the share of ``colour1`` in percent, adjusted by the alpha
    difference so the more opaque color contributes more. Alpha is blended
    with the same weights as the color channels.

    Args:
        colour1: First color; the result has its class.
        colour2: Second color.
        weight: Percentage of ``colour1``, nominally 0-100.
        strict: Raise ValueError for a weight outside [0, 100].

    Returns:
        New color built directly from the blended RGBA channels.
    """
    for colour in (colour1, colour2):
        if not isinstance(colour, Color):
            raise TypeError(f"mix expects colors, got {type(colour).__name__}")
    if strict and not 0 <= weight <= 100:
        raise ValueError(f"mix weight must be within [0, 100], got {weight!r}")

    colour1_weight_percent = weight / 100
    normalised_weight = colour1_weight_percent * 2 - 1
    alpha_difference = colour1.alpha - colour2.alpha

    # Exact comparison: the general formula divides by zero only at exactly -1.
    if normalised_weight * alpha_difference == -1.0:
        interim_weight = normalised_weight
    else:
        top = normalised_weight + alpha_difference
        bottom = normalised_weight * alpha_difference + 1
        interim_weight = top / bottom

    weight1 = (interim_weight + 1) / 2
    weight2 = 1 - weight1

    channels = tuple(
        c1 * weight1 + c2 * weight2
        for c1, c2 in zip(colour1.value, colour2.value)
    )
    return colour1.__class__(channels)


def harmonious_weight(mix_colour: Color, base_colour: Color) -> int:
    return HARMONIOUS_WEIGHTS[(is_cool_color(mix_colour), is_high_key_value(base_colour))]


def harmonious_mix(mix_colour: Color, base_colour: Color) -> Color:
    """Blend ``mix_colour`` into ``base_colour`` by the weight its hues call for."""
    return mix(mix_colour, base_colour, harmonious_weight(mix_colour, base_colour))


Color.is_cool_color = is_cool_color
Color.is_cool_colour = is_cool_colour
Color.is_high_key_value = is_high_key_value
