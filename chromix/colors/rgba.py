from __future__ import annotations
from typing import Callable, ClassVar, Optional, Tuple
from ..conversions import hsb_to_unit_rgb, unit_rgb_to_hsb
from ..conversions.hex import to_hex, to_hex_string, from_hex, from_hex_string, quantize_channel
from ..types.color_types import BoundFunction, ColorSpace, HSBATuple, RGBATuple, Scalar
from ..types.format_type import FormatType, max_non_hue
from .color_base import ColorBase, WithAlpha


class Color(ColorBase, WithAlpha):
    """
    Immutable unit RGBA color.

    Channels are stored as given. Out-of-range values are carried through
    every operation unchanged; use :class:`StrictColor` to reject them.
    HSB accessors recompute from RGBA on every call.
    """
    __slots__ = ()

    num_channels: ClassVar[int] = 4
    mode: ClassVar[ColorSpace] = "rgba"
    format_type: ClassVar[FormatType] = FormatType.FLOAT

    # Attached in color.py and harmony.py
    complement: Callable[[Color], Color]
    lighten: Callable[[Color, float, Optional[BoundFunction]], Color]
    darken: Callable[[Color, float, Optional[BoundFunction]], Color]
    is_cool_color: Callable[[Color], bool]
    is_cool_colour: Callable[[Color], bool]
    is_high_key_value: Callable[[Color], bool]

    # ------------------ CONSTRUCTORS ------------------
    @classmethod
    def from_rgba(cls, red: Scalar, green: Scalar, blue: Scalar, alpha: Scalar = 1.0) -> Color:
        return cls((red, green, blue, alpha))

    @classmethod
    def from_hsb(cls, hue: Scalar, saturation: Scalar, brightness: Scalar, alpha: Scalar = 1.0) -> Color:
        """Build a color from HSB(A), hue in turns."""
        red, green, blue = hsb_to_unit_rgb(hue, saturation, brightness)
        return cls((red, green, blue, alpha))

    @classmethod
    def from_hex(cls, value: int) -> Color:
        return cls(from_hex(value))

    @classmethod
    def from_hex_string(cls, text: str) -> Color:
        return cls(from_hex_string(text))

    # ------------------ RGBA CHANNELS ------------------
    @property
    def red(self) -> float:
        return self.value[0]

    @property
    def green(self) -> float:
        return self.value[1]

    @property
    def blue(self) -> float:
        return self.value[2]

    @property
    def rgba(self) -> RGBATuple:
        return self.value  # type: ignore[return-value]

    # ------------------ HSB CHANNELS ------------------
    def to_hsb(self) -> HSBATuple:
        """Return (hue, saturation, brightness, alpha); hue in [0, 1)."""
        red, green, blue, alpha = self.value
        hue, saturation, brightness = unit_rgb_to_hsb(red, green, blue)
        return hue, saturation, brightness, alpha

    @property
    def hue(self) -> float:
        return self.to_hsb()[0]

    @property
    def saturation(self) -> float:
        return self.to_hsb()[1]

    @property
    def brightness(self) -> float:
        return self.to_hsb()[2]

    # ------------------ ENCODINGS ------------------
    def hex(self) -> int:
        """Packed ``0xAARRGGBB`` value."""
        return to_hex(self.value, stacklevel=3)

    def hex_string(self) -> str:
        """Packed value formatted as ``0xaarrggbb`` (lowercase)."""
        return to_hex_string(self.value, stacklevel=3)

    def channels(self, format_type: FormatType = FormatType.FLOAT) -> Tuple[Scalar, ...]:
        """RGBA channels scaled to ``format_type``; INT matches hex quantization."""
        format_type = FormatType(format_type)
        if format_type == FormatType.INT:
            quantized = []
            for channel in self.value:
                quantized.append(quantize_channel(channel, stacklevel=3))
            return tuple(quantized)
        scale = max_non_hue[format_type]
        return tuple(c * scale for c in self.value)


class StrictColor(Color):
    """Color that refuses non-finite channels or channels outside [0, 1]."""
    __slots__ = ()

    strict: ClassVar[bool] = True
