import numpy as np
from numpy import ndarray as NDArray


def _hue_chroma_to_rgb(h: NDArray, c: NDArray, m: NDArray) -> NDArray:
    hp = (h % 360.0) / 60.0
    x = c * (1.0 - np.abs(hp % 2.0 - 1.0))
    sector = np.floor(hp).astype(int) % 6
    zero = np.zeros_like(c)

    r = np.choose(sector, [c, x, zero, zero, x, c])
    g = np.choose(sector, [x, c, c, x, zero, zero])
    b = np.choose(sector, [zero, zero, x, c, c, x])
    return np.stack([r + m, g + m, b + m], axis=-1)


def np_hsv_to_unit_rgb(h: NDArray, s: NDArray, v: NDArray) -> NDArray:
    """Vectorized HSV to RGB (0..1) conversion."""
    h, s, v = np.broadcast_arrays(
        np.asarray(h, dtype=float), np.asarray(s, dtype=float), np.asarray(v, dtype=float)
    )
    c = v * s
    return _hue_chroma_to_rgb(h, c, v - c)


def np_hsl_to_unit_rgb(h: NDArray, s: NDArray, l: NDArray) -> NDArray:
    """Vectorized HSL to RGB (0..1) conversion."""
    h, s, l = np.broadcast_arrays(
        np.asarray(h, dtype=float), np.asarray(s, dtype=float), np.asarray(l, dtype=float)
    )
    c = (1.0 - np.abs(2.0 * l - 1.0)) * s
    return _hue_chroma_to_rgb(h, c, l - c / 2.0)


def np_gray_to_unit_rgb(y: NDArray) -> NDArray:
    """Replicate a gray intensity (0..1) into three equal RGB channels."""
    y = np.asarray(y, dtype=float)
    return np.stack([y, y, y], axis=-1)
