"""
Eight-swatch palette derived from a single seed color.

The seed is paired with its complement; each of the two is blended into the
other with :func:`harmonious_mix` to get a neutral, and every neutral gets a
highlight and a shadow.
"""
from __future__ import annotations
from typing import List, NamedTuple, Optional
import numpy as np
from boundednumbers import clamp
from .colors import Color, DEFAULT_PERCENT, complement, darken, harmonious_mix, lighten
from .types.color_types import BoundFunction

SWATCH_SIZE = 60

PALETTE_ORDER = (
    "seed",
    "complement",
    "neutral_shadow",
    "neutral",
    "neutral_highlight",
    "complement_neutral_shadow",
    "complement_neutral",
    "complement_neutral_highlight",
)


class Palette(NamedTuple):
    seed: Color
    complement: Color
    neutral_shadow: Color
    neutral: Color
    neutral_highlight: Color
    complement_neutral_shadow: Color
    complement_neutral: Color
    complement_neutral_highlight: Color

    def hex_strings(self, uppercase: bool = False) -> List[str]:
        strings = [color.hex_string() for color in self]
        if uppercase:
            # keep the lowercase "0x" prefix
            return ["0x" + s[2:].upper() for s in strings]
        return strings

    def to_array(self) -> np.ndarray:
        """Palette as a (8, 4) float array of RGBA rows, in palette order."""
        return np.array([color.value for color in self], dtype=float)

    def to_strip(self, swatch_size: int = SWATCH_SIZE) -> np.ndarray:
        """
        Render the palette as a horizontal strip of square swatches.

        Args:
            swatch_size: Edge length of each swatch in pixels.

        Returns:
            float32 array of shape (swatch_size, swatch_size * 8, 4), channels
            clamped to [0, 1].
        """
        if swatch_size < 1:
            raise ValueError(f"swatch_size must be at least 1, got {swatch_size}")
        row = np.repeat(self.to_array(), swatch_size, axis=0)
        strip = np.broadcast_to(row, (swatch_size,) + row.shape)
        return np.clip(strip, 0.0, 1.0).astype(np.float32)


def build_palette(
    seed: Color,
    percent: float = DEFAULT_PERCENT,
    overflow_function: Optional[BoundFunction] = clamp,
) -> Palette:
    """
    Derive the eight-color palette for ``seed``.

    Args:
        seed: Starting color.
        percent: Lighten/darken amount for highlights and shadows.
        overflow_function: Brightness bound passed to lighten/darken;
            ``None`` keeps unclamped brightness.

    Returns:
        Palette in PALETTE_ORDER.
    """
    if not isinstance(seed, Color):
        raise TypeError(f"build_palette expects a color, got {type(seed).__name__}")

    seed_complement = complement(seed)
    neutral = harmonious_mix(seed_complement, seed)
    complement_neutral = harmonious_mix(seed, seed_complement)

    return Palette(
        seed=seed,
        complement=seed_complement,
        neutral_shadow=darken(neutral, percent, overflow_function),
        neutral=neutral,
        neutral_highlight=lighten(neutral, percent, overflow_function),
        complement_neutral_shadow=darken(complement_neutral, percent, overflow_function),
        complement_neutral=complement_neutral,
        complement_neutral_highlight=lighten(complement_neutral, percent, overflow_function),
    )
