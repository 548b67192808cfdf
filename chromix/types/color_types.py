from __future__ import annotations
from typing import Callable, Literal, Tuple, Union
from numpy import ndarray

Scalar = int | float
ScalarVector = Tuple[Scalar, ...]
RGBTuple = Tuple[float, float, float]
RGBATuple = Tuple[float, float, float, float]
HSBTuple = Tuple[float, float, float]
HSBATuple = Tuple[float, float, float, float]
ColorValue = Union[RGBATuple, ndarray]
ColorSpace = Literal["rgba", "hsba"]
HueRange = Tuple[float, float]
# (value, lower, upper) -> bounded value, e.g. boundednumbers.clamp / bounce
BoundFunction = Callable[[float, float, float], float]
