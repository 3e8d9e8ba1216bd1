"""
Perceptual color difference (CIEDE2000).

References
----------
- Sharma, G., Wu, W., & Dalal, E. N. (2005). "The CIEDE2000 color-difference
  formula: Implementation notes, supplementary test data, and mathematical
  observations".
"""
from __future__ import annotations
from typing import Tuple, Union
import numpy as np
from numpy import ndarray as NDArray
from .colors.color_base import ColorBase
from .colors.lab import ColorLab
from .colors.rgb import ColorUnitRGB

C25_7 = 25.0 ** 7
DEG2RAD = np.pi / 180.0


def delta_e_2000(
    lab1: NDArray,
    lab2: NDArray,
    k_L: float = 1.0,
    k_C: float = 1.0,
    k_H: float = 1.0,
) -> NDArray:
    """
    Vectorized CIEDE2000 between two Lab arrays (channels on the last axis).

    The inputs broadcast against each other, so one reference color can be
    compared with a whole palette in a single call.
    """
    lab1 = np.asarray(lab1, dtype=np.float64)
    lab2 = np.asarray(lab2, dtype=np.float64)
    L1, a1, b1 = lab1[..., 0], lab1[..., 1], lab1[..., 2]
    L2, a2, b2 = lab2[..., 0], lab2[..., 1], lab2[..., 2]

    C1 = np.hypot(a1, b1)
    C2 = np.hypot(a2, b2)
    C_bar_7 = ((C1 + C2) * 0.5) ** 7
    G = 0.5 * (1.0 - np.sqrt(C_bar_7 / (C_bar_7 + C25_7)))
    a1_p = (1.0 + G) * a1
    a2_p = (1.0 + G) * a2
    C1_p = np.hypot(a1_p, b1)
    C2_p = np.hypot(a2_p, b2)
    h1_p = np.degrees(np.arctan2(b1, a1_p)) % 360.0
    h2_p = np.degrees(np.arctan2(b2, a2_p)) % 360.0

    chromatic = C1_p * C2_p != 0.0
    diff = h2_p - h1_p
    dh_p = np.where(diff > 180.0, diff - 360.0, np.where(diff < -180.0, diff + 360.0, diff))
    dh_p = np.where(chromatic, dh_p, 0.0)

    dL_p = L2 - L1
    dC_p = C2_p - C1_p
    dH_p = 2.0 * np.sqrt(C1_p * C2_p) * np.sin(dh_p * DEG2RAD * 0.5)

    L_bar_p = (L1 + L2) * 0.5
    C_bar_p = (C1_p + C2_p) * 0.5
    h_sum = h1_p + h2_p
    h_bar_p = np.where(
        np.abs(h1_p - h2_p) <= 180.0,
        h_sum * 0.5,
        np.where(h_sum < 360.0, (h_sum + 360.0) * 0.5, (h_sum - 360.0) * 0.5),
    )
    # a neutral color has no hue, so the mean hue is just the sum
    h_bar_p = np.where(chromatic, h_bar_p, h_sum)

    T = (
        1.0
        - 0.17 * np.cos((h_bar_p - 30.0) * DEG2RAD)
        + 0.24 * np.cos((2.0 * h_bar_p) * DEG2RAD)
        + 0.32 * np.cos((3.0 * h_bar_p + 6.0) * DEG2RAD)
        - 0.20 * np.cos((4.0 * h_bar_p - 63.0) * DEG2RAD)
    )
    d_theta = 30.0 * np.exp(-(((h_bar_p - 275.0) / 25.0) ** 2))
    C_bar_p_7 = C_bar_p ** 7
    R_C = 2.0 * np.sqrt(C_bar_p_7 / (C_bar_p_7 + C25_7))
    R_T = -np.sin((2.0 * d_theta) * DEG2RAD) * R_C

    L_term = (L_bar_p - 50.0) ** 2
    S_L = 1.0 + (0.015 * L_term) / np.sqrt(20.0 + L_term)
    S_C = 1.0 + 0.045 * C_bar_p
    S_H = 1.0 + 0.015 * C_bar_p * T

    tL = dL_p / (k_L * S_L)
    tC = dC_p / (k_C * S_C)
    tH = dH_p / (k_H * S_H)
    return np.sqrt(tL ** 2 + tC ** 2 + tH ** 2 + R_T * tC * tH)


def to_lab_array(color: Union[ColorBase, Tuple[float, ...], NDArray]) -> NDArray:
    """
    Lab channels of a color. Raw tuples and arrays are read as unit RGB.
    """
    if not isinstance(color, ColorBase):
        color = ColorUnitRGB(np.asarray(color, dtype=np.float64) if isinstance(color, NDArray) else tuple(color))
    if not isinstance(color, ColorLab):
        color = color.convert("lab")
    return color.as_array()


def colordiff(c1: Union[ColorBase, Tuple[float, ...]], c2: Union[ColorBase, Tuple[float, ...]], **weights: float) -> Union[float, NDArray]:
    """
    CIEDE2000 difference between two colors (scalar or array colors, broadcast).

    Returns a Python float when both inputs are single colors.
    """
    result = delta_e_2000(to_lab_array(c1), to_lab_array(c2), **weights)
    return float(result) if np.ndim(result) == 0 else result


def difference(self: ColorBase, other: ColorBase, **weights: float) -> Union[float, NDArray]:
    """CIEDE2000 difference between this color and ``other``."""
    return colordiff(self, other, **weights)

ColorBase.difference = difference
