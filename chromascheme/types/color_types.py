from __future__ import annotations
from enum import Enum
from typing import Tuple, Union
import numpy as np
from numpy import ndarray

Scalar = int | float
IntVector = Tuple[int, ...]
ScalarVector = Tuple[Scalar, ...]
IntElement = Union[int, IntVector]
FloatElement = Union[float, Tuple[float, ...]]
ColorElement = Union[IntElement, FloatElement]
ColorValue = Union[ColorElement, ndarray]  # Includes array support


class ColorSpace(str, Enum):
    RGB = "rgb"
    HSV = "hsv"
    HSL = "hsl"
    LAB = "lab"
    GRAY = "gray"


HUE_SPACES = {ColorSpace.HSV, ColorSpace.HSL}

# CIE 1931 2° D65 reference white, Y normalized to 1
D65_WHITE = (0.95047, 1.0, 1.08883)


def element_to_array(element: Union[ColorElement, ndarray]) -> np.ndarray:
    """
    Convert a color element to a float numpy array.

    Args:
        element: Scalar, tuple, or already an ndarray

    Returns:
        numpy array representation
    """
    if isinstance(element, ndarray):
        return element.astype(np.float64, copy=False)
    if isinstance(element, (int, float)):
        return np.array([element], dtype=np.float64)
    return np.array(element, dtype=np.float64)

def to_color_space(color_space: ColorSpace | str) -> ColorSpace:
    """Coerce a color space name (any case) or enum member to ``ColorSpace``."""
    if isinstance(color_space, ColorSpace):
        return color_space
    return ColorSpace(color_space.lower())

def is_hue_space(color_space: ColorSpace | str) -> bool:
    """
    Check if the given color space is a hue-based space (HSV or HSL).

    Args:
        color_space: Color space enum member or string
    Returns:
        True if hue-based, False otherwise
    """
    return to_color_space(color_space) in HUE_SPACES
