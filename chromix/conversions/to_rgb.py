import numpy as np
from numpy import ndarray as NDArray
from boundednumbers.functions import cyclic_wrap_float
from ..types.color_types import RGBTuple


def hsb_to_unit_rgb(h: float, s: float, v: float) -> RGBTuple:
    """
    Standard six-sector HSB to unit RGB.

    Hue is wrapped into [0, 1) first. Saturation and brightness are used
    as given; out-of-range values propagate into the RGB result.
    """
    h = float(cyclic_wrap_float(h, 0.0, 1.0))
    h6 = h * 6.0
    sector = int(h6)
    f = h6 - sector
    sector %= 6

    p = v * (1.0 - s)
    q = v * (1.0 - f * s)
    t = v * (1.0 - (1.0 - f) * s)

    if sector == 0:
        return v, t, p
    if sector == 1:
        return q, v, p
    if sector == 2:
        return p, v, t
    if sector == 3:
        return p, q, v
    if sector == 4:
        return t, p, v
    return v, p, q


def np_hsb_to_unit_rgb(h: NDArray, s: NDArray, v: NDArray) -> NDArray:
    """
    Vectorized six-sector HSB to unit RGB.

    Args:
        h: hue in turns, any real value (wrapped into [0, 1))
        s, v: saturation and brightness, broadcastable against h

    Returns:
        rgb: array of shape (..., 3)
    """
    h = np.asarray(h, dtype=float)
    s = np.asarray(s, dtype=float)
    v = np.asarray(v, dtype=float)

    out_shape = np.broadcast(h, s, v).shape
    h = np.broadcast_to(cyclic_wrap_float(h, 0.0, 1.0), out_shape)
    s = np.broadcast_to(s, out_shape)
    v = np.broadcast_to(v, out_shape)

    h6 = h * 6.0
    base = np.floor(h6)
    f = h6 - base
    sector = base.astype(int) % 6

    p = v * (1.0 - s)
    q = v * (1.0 - f * s)
    t = v * (1.0 - (1.0 - f) * s)

    r = np.choose(sector, [v, q, p, p, t, v])
    g = np.choose(sector, [t, v, v, q, p, p])
    b = np.choose(sector, [p, p, t, v, v, q])

    return np.stack([r, g, b], axis=-1)
