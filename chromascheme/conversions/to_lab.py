"""
sRGB ↔ CIE XYZ ↔ CIELAB conversions (IEC 61966-2-1, D65 reference white).
"""
import numpy as np
from numpy import ndarray as NDArray
from ..types.color_types import D65_WHITE

# Linear sRGB → XYZ (D65)
SRGB_TO_XYZ = np.array([
    [0.4124564, 0.3575761, 0.1804375],
    [0.2126729, 0.7151522, 0.0721750],
    [0.0193339, 0.1191920, 0.9503041],
])
XYZ_TO_SRGB = np.linalg.inv(SRGB_TO_XYZ)

LAB_EPSILON = 216.0 / 24389.0
LAB_KAPPA = 24389.0 / 27.0


def np_srgb_to_linear(c: NDArray) -> NDArray:
    """Vectorized: Convert nonlinear sRGB (0..1) to linear-light RGB."""
    c = np.asarray(c, dtype=float)
    return np.where(
        c <= 0.04045,
        c / 12.92,
        ((c + 0.055) / 1.055) ** 2.4
    )

def np_linear_to_srgb(c: NDArray) -> NDArray:
    """Vectorized: Convert linear-light RGB (0..1) to nonlinear sRGB."""
    c = np.clip(np.asarray(c, dtype=float), 0.0, 1.0)
    return np.where(
        c <= 0.0031308,
        12.92 * c,
        1.055 * (c ** (1 / 2.4)) - 0.055
    )


def _lab_f(t: NDArray) -> NDArray:
    # cube root with a linear segment near zero
    return np.where(t > LAB_EPSILON, np.cbrt(t), (LAB_KAPPA * t + 16.0) / 116.0)

def _lab_f_inv(f: NDArray) -> NDArray:
    f3 = f ** 3
    return np.where(f3 > LAB_EPSILON, f3, (116.0 * f - 16.0) / LAB_KAPPA)


def np_unit_rgb_to_lab(r: NDArray, g: NDArray, b: NDArray) -> NDArray:
    """
    Vectorized sRGB (0..1) to CIELAB conversion.

    Returns:
        Array of shape (..., 3) with L in [0, 100] and unbounded a, b.
    """
    rgb = np.stack(np.broadcast_arrays(
        np.asarray(r, dtype=float), np.asarray(g, dtype=float), np.asarray(b, dtype=float)
    ), axis=-1)
    xyz = np_srgb_to_linear(rgb) @ SRGB_TO_XYZ.T
    f = _lab_f(xyz / np.asarray(D65_WHITE))
    fx, fy, fz = f[..., 0], f[..., 1], f[..., 2]
    return np.stack([116.0 * fy - 16.0, 500.0 * (fx - fy), 200.0 * (fy - fz)], axis=-1)


def np_lab_to_unit_rgb(L: NDArray, a: NDArray, b: NDArray) -> NDArray:
    """Vectorized CIELAB to sRGB (0..1). Out-of-gamut results are clipped."""
    L, a, b = np.broadcast_arrays(
        np.asarray(L, dtype=float), np.asarray(a, dtype=float), np.asarray(b, dtype=float)
    )
    fy = (L + 16.0) / 116.0
    f = np.stack([fy + a / 500.0, fy, fy - b / 200.0], axis=-1)
    xyz = _lab_f_inv(f) * np.asarray(D65_WHITE)
    return np_linear_to_srgb(xyz @ XYZ_TO_SRGB.T)
