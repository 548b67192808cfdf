"""
Chromix Color Space Conversions
===============================

Plain-function conversions between unit RGB and HSB, in scalar and
vectorized (numpy) flavors, plus the packed hex codec.

Conventions
-----------
- RGB channels are unit floats (0.0-1.0).
- Hue is expressed in turns, [0, 1) (degrees / 360), not degrees.
- Saturation and brightness are unit floats.
- Out-of-range inputs are not rejected; they propagate through the math.

Conversion Functions
-------------------

RGB → HSB:
    unit_rgb_to_hsb(r, g, b)
        Scalar RGB to HSB conversion
    np_unit_rgb_to_hsb(r, g, b)
        Vectorized RGB to HSB conversion

HSB → RGB:
    hsb_to_unit_rgb(h, s, b)
        Scalar six-sector HSB to RGB conversion
    np_hsb_to_unit_rgb(h, s, b)
        Vectorized HSB to RGB conversion

Hex:
    to_hex(rgba) / to_hex_string(rgba)
        Pack unit RGBA as 0xAARRGGBB
    from_hex(value) / from_hex_string(text)
        Unpack 0xAARRGGBB to unit RGBA

Examples
--------
>>> from chromix.conversions import unit_rgb_to_hsb, hsb_to_unit_rgb, to_hex_string
>>> h, s, b = unit_rgb_to_hsb(1.0, 0.5, 0.0)
>>> r, g, b = hsb_to_unit_rgb(h, s, b)
>>> to_hex_string((1.0, 0.0, 0.004, 1.0))
'0xffff0001'
"""

# RGB → HSB conversions
from .to_hsb import unit_rgb_to_hsb, np_unit_rgb_to_hsb

# HSB → RGB conversions
from .to_rgb import hsb_to_unit_rgb, np_hsb_to_unit_rgb

# Packed hex
from .hex import to_hex, to_hex_string, from_hex, from_hex_string, quantize_channel

# Types and enums
from ..types.format_type import FormatType

__all__ = [
    # RGB → HSB
    'unit_rgb_to_hsb',
    'np_unit_rgb_to_hsb',

    # HSB → RGB
    'hsb_to_unit_rgb',
    'np_hsb_to_unit_rgb',

    # Hex
    'to_hex',
    'to_hex_string',
    'from_hex',
    'from_hex_string',
    'quantize_channel',

    # Types
    'FormatType',
]
