from __future__ import annotations
from typing import Optional
from boundednumbers import clamp
from ..types.color_types import BoundFunction
from .rgba import Color

DEFAULT_PERCENT = 0.4


def complement(self: Color) -> Color:
    """
    Rotate the hue by half a turn, keeping saturation, brightness and alpha.

    Returns:
        New color of the same class, built from HSB.
    """
    hue, saturation, brightness, alpha = self.to_hsb()
    if hue >= 0.5:
        hue = hue - 0.5
    else:
        hue = hue + 0.5
    return self.__class__.from_hsb(hue, saturation, brightness, alpha)


def _scale_brightness(self: Color, factor: float, overflow_function: Optional[BoundFunction]) -> Color:
    hue, saturation, brightness, alpha = self.to_hsb()
    brightness = brightness * factor
    if overflow_function is not None:
        brightness = float(overflow_function(brightness, 0.0, 1.0))
    return self.__class__.from_hsb(hue, saturation, brightness, alpha)


def lighten(self: Color, percent: float = DEFAULT_PERCENT, overflow_function: Optional[BoundFunction] = clamp) -> Color:
    """
    Scale brightness by ``1 + percent``.

    Args:
        percent: Fraction to add, e.g. 0.4 for 40% brighter.
        overflow_function: ``(value, lo, hi)`` bound applied to the new
            brightness. Defaults to ``clamp``; ``None`` lets brightness
            above 1.0 through, which yields RGB channels above 1.0.
    """
    return _scale_brightness(self, 1 + percent, overflow_function)


def darken(self: Color, percent: float = DEFAULT_PERCENT, overflow_function: Optional[BoundFunction] = clamp) -> Color:
    """
    Scale brightness by ``1 - percent``.

    Same bounding rules as :func:`lighten`; with ``None`` a percent above 1.0
    gives negative brightness.
    """
    return _scale_brightness(self, 1 - percent, overflow_function)


Color.complement = complement
Color.lighten = lighten
Color.darken = darken
