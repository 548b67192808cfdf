"""Packed ``0xAARRGGBB`` encoding of unit RGBA channels."""
import string
import warnings
from boundednumbers import clamp
from ..types.color_types import RGBATuple, ScalarVector
from ..types.format_type import BYTE_MAX, HEX_MAX
from ..utils.num_utils import round_half_away


def quantize_channel(channel: float, stacklevel: int = 2) -> int:
    """
    Quantize a unit channel to a byte, clamping (with a warning) if it does not fit.

    ``stacklevel`` is forwarded to ``warnings.warn`` so the warning points at
    the code that asked for the byte.
    """
    byte = round_half_away(channel * BYTE_MAX)
    if not 0 <= byte <= BYTE_MAX:
        warnings.warn(
            f"Channel value {channel!r} is outside [0, 1]; clamped to fit a byte",
            RuntimeWarning,
            stacklevel=stacklevel,
        )
        byte = int(clamp(byte, 0, BYTE_MAX))
    return byte


def to_hex(rgba: ScalarVector, stacklevel: int = 2) -> int:
    """Pack unit (r, g, b, a) channels as a 32-bit ``0xAARRGGBB`` integer."""
    if len(rgba) != 4:
        raise ValueError(f"to_hex expects 4 channels, got {len(rgba)}")
    quantized = []
    for channel in rgba:
        quantized.append(quantize_channel(channel, stacklevel + 1))
    red, green, blue, alpha = quantized
    return (alpha << 24) | (red << 16) | (green << 8) | blue


def to_hex_string(rgba: ScalarVector, stacklevel: int = 2) -> str:
    return "0x%08x" % to_hex(rgba, stacklevel + 1)


def from_hex(value: int) -> RGBATuple:
    """Unpack a ``0xAARRGGBB`` integer into unit (r, g, b, a) channels."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"from_hex expects an int, got {type(value).__name__}")
    if not 0 <= value <= HEX_MAX:
        raise ValueError(f"Packed color {value!r} does not fit in 32 bits")
    alpha = (value >> 24) & 0xFF
    red = (value >> 16) & 0xFF
    green = (value >> 8) & 0xFF
    blue = value & 0xFF
    return red / BYTE_MAX, green / BYTE_MAX, blue / BYTE_MAX, alpha / BYTE_MAX


def from_hex_string(text: str) -> RGBATuple:
    """
    Parse ``0xAARRGGBB`` (also ``#AARRGGBB`` or bare digits, any case).

    Raises TypeError for non-strings and ValueError for anything that is
    not exactly eight hex digits.
    """
    if not isinstance(text, str):
        raise TypeError(f"from_hex_string expects a str, got {type(text).__name__}")
    digits = text.strip()
    if digits[:2].lower() == "0x":
        digits = digits[2:]
    elif digits.startswith("#"):
        digits = digits[1:]
    if len(digits) != 8 or any(ch not in string.hexdigits for ch in digits):
        raise ValueError(f"invalid packed color string: {text!r}")
    return from_hex(int(digits, 16))
