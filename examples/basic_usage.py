"""Basic Chromix usage examples.

Run directly with:
    python examples/basic_usage.py
"""
from chromix import (
    Color,
    FormatType,
    complement,
    harmonious_mix,
    is_cool_color,
    is_high_key_value,
    mix,
)


def demonstrate_colors() -> None:
    # Construct colors from RGBA and HSB and inspect both views.
    accent = Color.from_rgba(1.0, 0.5, 0.25)
    print("RGBA:", accent.rgba)
    print("HSB(A):", accent.to_hsb())
    print("As bytes:", accent.channels(FormatType.INT))
    print("Hex:", accent.hex_string())

    teal = Color.from_hsb(0.5, 0.6, 0.8)
    print("Teal from HSB -> RGBA:", teal.rgba)
    print("Round trip through hex:", Color.from_hex(teal.hex()).hex_string())


def demonstrate_mixing() -> None:
    # Sass-style mix honours alpha: the more opaque color pulls harder.
    solid = Color.from_rgba(1.0, 0.0, 0.0, 1.0)
    faint = Color.from_rgba(0.0, 0.0, 1.0, 0.25)
    print("50/50 mix, solid vs faint:", mix(solid, faint).rgba)

    other = complement(solid)
    print("Complement of red:", other.hex_string())
    print("cool?", is_cool_color(other), "high key?", is_high_key_value(solid))
    print("Harmonious neutral:", harmonious_mix(other, solid).hex_string())


if __name__ == "__main__":
    demonstrate_colors()
    demonstrate_mixing()
