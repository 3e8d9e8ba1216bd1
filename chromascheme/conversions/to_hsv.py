import numpy as np
from numpy import ndarray as NDArray


def np_rgb_hue(r: NDArray, g: NDArray, b: NDArray) -> NDArray:
    """Hue angle in degrees [0, 360) shared by HSV and HSL. Achromatic pixels get 0."""
    mx = np.maximum(np.maximum(r, g), b)
    mn = np.minimum(np.minimum(r, g), b)
    delta = mx - mn
    safe = np.where(delta == 0, 1.0, delta)

    h = np.where(
        mx == r,
        ((g - b) / safe) % 6.0,
        np.where(mx == g, (b - r) / safe + 2.0, (r - g) / safe + 4.0),
    )
    h = np.where(delta == 0, 0.0, h * 60.0)
    return h % 360.0


def np_unit_rgb_to_hsv(r: NDArray, g: NDArray, b: NDArray) -> NDArray:
    """
    Vectorized RGB (0..1) to HSV conversion.

    Returns:
        Array of shape (..., 3) holding h in degrees, s and v in [0, 1].
    """
    r = np.asarray(r, dtype=float)
    g = np.asarray(g, dtype=float)
    b = np.asarray(b, dtype=float)

    v = np.maximum(np.maximum(r, g), b)
    mn = np.minimum(np.minimum(r, g), b)
    delta = v - mn
    s = np.where(v == 0, 0.0, delta / np.where(v == 0, 1.0, v))
    return np.stack([np_rgb_hue(r, g, b), s, v], axis=-1)


def np_hsl_to_hsv(h: NDArray, s: NDArray, l: NDArray) -> NDArray:
    """Vectorized HSL to HSV conversion. Hue passes through unchanged."""
    h = np.asarray(h, dtype=float)
    s = np.asarray(s, dtype=float)
    l = np.asarray(l, dtype=float)

    v = l + s * np.minimum(l, 1.0 - l)
    s_v = np.where(v == 0, 0.0, 2.0 * (1.0 - l / np.where(v == 0, 1.0, v)))
    return np.stack([h, s_v, v], axis=-1)
