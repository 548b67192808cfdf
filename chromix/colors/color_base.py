from __future__ import annotations
from typing import Any, ClassVar, Iterator, Tuple, Self
from abc import ABC
from numpy import ndarray
import numpy as np
from ..types.color_types import ColorSpace, ColorValue, Scalar, ScalarVector
from ..types.format_type import FormatType, format_classes
from ..utils.num_utils import is_unit


class ColorBase:
    __slots__ = ('_value', '_is_frozen')  # prevents adding new attributes → immutability

    num_channels: ClassVar[int] = 4
    mode:        ClassVar[ColorSpace] = "rgba"
    format_type: ClassVar[FormatType] = FormatType.FLOAT
    # Strict colors reject non-finite or out-of-range channels instead of carrying them.
    strict:      ClassVar[bool] = False

    def __setattr__(self, name, value):
        """Block attribute changes after __init__ finishes."""
        if getattr(self, '_is_frozen', False):
            raise AttributeError(f"{self.__class__.__name__} is immutable; cannot assign to {name}")
        super().__setattr__(name, value)

    def __init__(self, value: ColorValue | ColorBase) -> None:
        # ---- Handle ColorBase input ----
        if isinstance(value, ColorBase):
            value = value.value

        # ---- Handle array input ----
        if isinstance(value, ndarray):
            if value.shape != (self.num_channels,):
                raise ValueError(
                    f"{self.mode} expects an array of shape ({self.num_channels},), "
                    f"got shape {value.shape}"
                )
            value = tuple(value.tolist())

        # ---- Handle scalar/tuple input ----
        try:
            channels = tuple(cast_channel(v, self.format_type) for v in value)
        except TypeError as e:
            raise TypeError(f"{self.mode} expects a sequence of numbers, got {value!r}") from e
        if len(channels) != self.num_channels:
            raise ValueError(f"{self.mode} expects {self.num_channels} channels, got {len(channels)}")

        if self.strict:
            self._validate(channels)

        # safe assignment; __setattr__ still allows it during init
        self._value = channels

        # freeze instance — no more writes allowed
        super().__setattr__('_is_frozen', True)

    @classmethod
    def _validate(cls, channels: ScalarVector) -> None:
        for index, channel in enumerate(channels):
            if not is_unit(channel):
                raise ValueError(
                    f"{cls.__name__} channel {index} must be a finite value in [0, 1], got {channel!r}"
                )

    # ------------------ READ-ONLY PROPERTIES ------------------
    @property
    def value(self) -> Tuple[float, ...]:
        return self._value

    def to_array(self) -> ndarray:
        """Channels as a 1-D float array."""
        return np.array(self._value, dtype=float)

    # ------------------ VALUE SEMANTICS ------------------
    def __iter__(self) -> Iterator[float]:
        return iter(self._value)

    def __len__(self) -> int:
        return self.num_channels

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, ColorBase):
            return NotImplemented
        return self.mode == other.mode and self._value == other._value

    def __hash__(self) -> int:
        return hash((self.mode, self._value))

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self._value!r})"


def cast_channel(value: Scalar, format_type: FormatType) -> Scalar:
    if isinstance(value, (str, bytes)):
        raise TypeError(f"channel must be numeric, got {type(value).__name__}")
    return format_classes[format_type](value)


class WithAlpha(ABC):
    """
    Mixin for a ColorBase subclass that includes an alpha channel.
    Assumes alpha is the *last* channel.
    """

    # Tell static checkers these come from the real subclass (ColorBase)
    num_channels: ClassVar[int]
    mode: ClassVar[ColorSpace]
    value: Tuple[float, ...]

    __slots__ = ()

    alpha_index: ClassVar[int] = -1

    @property
    def alpha(self) -> float:
        return self.value[self.alpha_index]

    def with_alpha(self, alpha: Scalar) -> Self:
        """
        Return a new instance with modified alpha channel.

        Args:
            alpha: New alpha value. Not clamped; strict classes validate it.

        Returns:
            New color instance with updated alpha.
        """
        return self.__class__(self.value[:-1] + (alpha,))  # type: ignore
