"""
Chromascheme Color Space Conversions
====================================

Vectorized numpy conversions between the color spaces palettes are built
from. Unit RGB is the hub: HSV, HSL, CIELAB and gray all pass through it,
except HSV ↔ HSL which convert directly.

Conversion Functions
--------------------
RGB → HSV / HSL / Lab:
    np_unit_rgb_to_hsv(r, g, b)
    np_unit_rgb_to_hsl(r, g, b)
    np_unit_rgb_to_lab(r, g, b)

HSV / HSL / Lab / gray → RGB:
    np_hsv_to_unit_rgb(h, s, v)
    np_hsl_to_unit_rgb(h, s, l)
    np_lab_to_unit_rgb(L, a, b)
    np_gray_to_unit_rgb(y)

HSV ↔ HSL:
    np_hsv_to_hsl(h, s, v)
    np_hsl_to_hsv(h, s, l)

High-Level API
--------------
    convert(color, from_space, to_space, input_type, output_type)
        Scalar converter, tuples in and out
    np_convert(color, from_space, to_space, input_type, output_type)
        Array converter, channels on the last axis

Examples
--------
>>> import numpy as np
>>> from chromascheme.conversions import np_convert
>>> rgb_array = np.array([[1.0, 0.5, 0.0], [0.0, 1.0, 0.5]])
>>> lab = np_convert(rgb_array, "rgb", "lab", "float", "float")
"""

from .to_hsv import np_unit_rgb_to_hsv, np_hsl_to_hsv
from .to_hsl import np_unit_rgb_to_hsl, np_hsv_to_hsl
from .to_rgb import np_hsv_to_unit_rgb, np_hsl_to_unit_rgb, np_gray_to_unit_rgb
from .to_lab import np_unit_rgb_to_lab, np_lab_to_unit_rgb, np_srgb_to_linear, np_linear_to_srgb

# High-level API
from .wrapper import convert, np_convert

# Types and enums
from ..types.format_type import FormatType
from ..types.color_types import ColorSpace

__all__ = [
    'np_unit_rgb_to_hsv',
    'np_unit_rgb_to_hsl',
    'np_unit_rgb_to_lab',
    'np_hsv_to_unit_rgb',
    'np_hsl_to_unit_rgb',
    'np_lab_to_unit_rgb',
    'np_gray_to_unit_rgb',
    'np_hsv_to_hsl',
    'np_hsl_to_hsv',
    'np_srgb_to_linear',
    'np_linear_to_srgb',
    'convert',
    'np_convert',
    'ColorSpace',
    'FormatType',
]
