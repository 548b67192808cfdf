"""
Chromix - Harmonious Palette Engine
===================================

Derives a small, deterministic color palette from one seed color using hue
heuristics to pick blend weights, on top of RGB <-> HSB conversions and
alpha-aware Sass-style mixing.

Key Features
------------
- Immutable unit RGBA colors with HSB accessors
- Packed 0xAARRGGBB hex encoding and decoding
- complement / lighten / darken transforms
- Cool and high-key hue classification
- Weighted alpha-aware mix and the harmonious mix heuristic
- Eight-swatch palette with numpy array / image strip export

Quick Start
-----------
>>> from chromix import Color, build_palette
>>>
>>> seed = Color.from_rgba(1.0, 0.0, 0.004, 1.0)
>>> seed.hex_string().upper()
'0XFFFF0001'
>>> palette = build_palette(seed)
>>> len(palette)
8
>>> strip = palette.to_strip(swatch_size=60)   # (60, 480, 4) float32

Modules
-------
- colors: Color classes, transforms, classification and mixing
- conversions: RGB <-> HSB and hex conversion functions
- palette: Palette derivation and export
"""

from .colors.color_base import ColorBase
from .colors.rgba import Color, StrictColor
from .colors.color import complement, lighten, darken
from .colors.harmony import (
    mix,
    harmonious_mix,
    is_cool_color,
    is_cool_colour,
    is_high_key_value,
    HARMONIOUS_WEIGHTS,
)
from .conversions import (
    unit_rgb_to_hsb,
    hsb_to_unit_rgb,
    np_unit_rgb_to_hsb,
    np_hsb_to_unit_rgb,
    to_hex,
    to_hex_string,
    from_hex,
    from_hex_string,
)
from .palette import Palette, build_palette, PALETTE_ORDER
from .types.format_type import FormatType

from boundednumbers import clamp, bounce

__version__ = "1.0.0"

__all__ = [
    # Color classes
    "ColorBase",
    "Color",
    "StrictColor",

    # Transforms
    "complement",
    "lighten",
    "darken",

    # Mixing and classification
    "mix",
    "harmonious_mix",
    "is_cool_color",
    "is_cool_colour",
    "is_high_key_value",
    "HARMONIOUS_WEIGHTS",

    # Conversions
    "unit_rgb_to_hsb",
    "hsb_to_unit_rgb",
    "np_unit_rgb_to_hsb",
    "np_hsb_to_unit_rgb",
    "to_hex",
    "to_hex_string",
    "from_hex",
    "from_hex_string",

    # Palette
    "Palette",
    "build_palette",
    "PALETTE_ORDER",

    # Types
    "FormatType",

    # Overflow functions for lighten/darken
    "clamp",
    "bounce",

    # Version
    "__version__",
]
