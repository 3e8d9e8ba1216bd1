import numpy as np
from numpy import ndarray as NDArray
from .to_hsv import np_rgb_hue


def np_unit_rgb_to_hsl(r: NDArray, g: NDArray, b: NDArray) -> NDArray:
    """
    Vectorized RGB (0..1) to HSL conversion.

    Returns:
        Array of shape (..., 3) holding h in degrees, s and l in [0, 1].
    """
    r = np.asarray(r, dtype=float)
    g = np.asarray(g, dtype=float)
    b = np.asarray(b, dtype=float)

    mx = np.maximum(np.maximum(r, g), b)
    mn = np.minimum(np.minimum(r, g), b)
    delta = mx - mn
    l = (mx + mn) / 2.0
    denom = 1.0 - np.abs(2.0 * l - 1.0)
    s = np.where(denom <= 0, 0.0, delta / np.where(denom <= 0, 1.0, denom))
    return np.stack([np_rgb_hue(r, g, b), np.clip(s, 0.0, 1.0), l], axis=-1)


def np_hsv_to_hsl(h: NDArray, s: NDArray, v: NDArray) -> NDArray:
    """Vectorized HSV to HSL conversion. Hue passes through unchanged."""
    h = np.asarray(h, dtype=float)
    s = np.asarray(s, dtype=float)
    v = np.asarray(v, dtype=float)

    l = v * (1.0 - s / 2.0)
    m = np.minimum(l, 1.0 - l)
    s_l = np.where(m <= 0, 0.0, (v - l) / np.where(m <= 0, 1.0, m))
    return np.stack([h, s_l, l], axis=-1)
