import numpy as np
from numpy import ndarray as NDArray
from ..types.color_types import HSBTuple
# No dependencies


def unit_rgb_to_hsb(r: float, g: float, b: float) -> HSBTuple:
    """
    Platform HSB from unit RGB.

    Input:
        r, g, b ∈ [0, 1]

    Output:
        h ∈ [0, 1)   (degrees / 360)
        s ∈ [0, 1]
        b ∈ [0, 1]   (max channel)

    Grayscale input has no defined hue; it is reported as 0.
    """
    v = max(r, g, b)
    m = min(r, g, b)
    delta = v - m

    s = 0.0 if v == 0 else delta / v

    if delta == 0:
        h = 0.0
    elif v == r:
        h = ((g - b) / delta) % 6
    elif v == g:
        h = (b - r) / delta + 2
    else:
        h = (r - g) / delta + 4

    h /= 6.0
    # (-tiny % 6) can round up to exactly 6
    if h >= 1.0:
        h -= 1.0
    return h, s, v


def np_unit_rgb_to_hsb(r: NDArray, g: NDArray, b: NDArray) -> NDArray:
    """
    Vectorized platform HSB from unit RGB.

    Args:
        r, g, b: array-like or scalar, broadcastable against each other

    Returns:
        hsb: array of shape (..., 3): (hue [0,1), saturation, brightness)
    """
    r = np.asarray(r, dtype=float)
    g = np.asarray(g, dtype=float)
    b = np.asarray(b, dtype=float)

    out_shape = np.broadcast(r, g, b).shape
    r = np.broadcast_to(r, out_shape)
    g = np.broadcast_to(g, out_shape)
    b = np.broadcast_to(b, out_shape)

    V = np.maximum.reduce([r, g, b])
    m = np.minimum.reduce([r, g, b])
    delta = V - m

    S = np.zeros_like(V)
    mask = V != 0
    S[mask] = delta[mask] / V[mask]

    safe_delta = np.where(delta == 0, 1.0, delta)
    h = np.where(
        V == r,
        ((g - b) / safe_delta) % 6,
        np.where(V == g, (b - r) / safe_delta + 2, (r - g) / safe_delta + 4),
    )
    h = np.where(delta == 0, 0.0, h) / 6.0
    h = np.where(h >= 1.0, h - 1.0, h)

    return np.stack([h, S, V], axis=-1)
