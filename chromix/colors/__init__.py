"""
Chromix Color Classes
=====================

Immutable unit RGBA colors with HSB accessors, hex packing, hue transforms
and Sass-style mixing.

Features
--------
- Immutable color instances (frozen after initialization)
- Value semantics: equality and hashing by channels
- RGBA and HSB constructors, packed hex round trip
- complement / lighten / darken transforms
- Hue classification (cool, high key) and harmonious mixing
- StrictColor variant that rejects out-of-range channels

Usage
-----
>>> from chromix.colors import Color, mix, harmonious_mix
>>>
>>> red = Color.from_rgba(1.0, 0.0, 0.004)
>>> red.hex_string()
'0xffff0001'
>>> cyan = red.complement()
>>> neutral = harmonious_mix(cyan, red)
>>> highlight = neutral.lighten(0.4)
>>> half = mix(red, cyan, 50)

Notes
-----
- Default colors do not clamp; values outside [0, 1] propagate.
- lighten/darken clamp brightness unless ``overflow_function=None``.
- Hex packing clamps out-of-range bytes with a RuntimeWarning.
"""

from .color_base import ColorBase, WithAlpha
from .rgba import Color, StrictColor
from .color import complement, lighten, darken, DEFAULT_PERCENT
from .harmony import (
    mix,
    harmonious_mix,
    harmonious_weight,
    is_cool_color,
    is_cool_colour,
    is_high_key_value,
    COOL_HUE_RANGE,
    HIGH_KEY_HUE_RANGE,
    HARMONIOUS_WEIGHTS,
)


__all__ = [
    'ColorBase',
    'WithAlpha',
    'Color',
    'StrictColor',
    'complement',
    'lighten',
    'darken',
    'DEFAULT_PERCENT',
    'mix',
    'harmonious_mix',
    'harmonious_weight',
    'is_cool_color',
    'is_cool_colour',
    'is_high_key_value',
    'COOL_HUE_RANGE',
    'HIGH_KEY_HUE_RANGE',
    'HARMONIOUS_WEIGHTS',
]
