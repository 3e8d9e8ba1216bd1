"""
Chromascheme Color Classes
==========================

Immutable color values for the RGB, HSV, HSL, CIELAB and gray spaces, each
holding either one color (a tuple, or a bare number for gray) or an array of
colors (channels on the last axis).

Every color can:

- ``convert`` to another space/format
- ``blend`` with another color (weighted mean in its own space)
- measure its ``difference`` from another color (CIEDE2000, see
  ``chromascheme.difference``)

Scalar Usage
------------
>>> from chromascheme.colors.rgb import ColorUnitRGB
>>> red = ColorUnitRGB((1.0, 0.0, 0.0))
>>> red.convert("hsv").value
(0.0, 1.0, 1.0)
>>> red.blend(ColorUnitRGB((0.0, 0.0, 1.0)), 0.5).value
(0.5, 0.0, 0.5)

Array Usage
-----------
>>> import numpy as np
>>> colors = ColorUnitRGB(np.array([[1.0, 0.5, 0.0], [0.0, 0.0, 1.0]]))
>>> colors.shape
(2, 3)
>>> colors[1].value
(0.0, 0.0, 1.0)

Color Classes
-------------
RGB:  ColorRGBINT (0-255), ColorUnitRGB (0.0-1.0)
HSV:  ColorHSVINT, UnitHSV
HSL:  ColorHSLINT, UnitHSL
Lab:  ColorLab (float only)
Gray: ColorGrayINT (0-255), ColorUnitGray (0.0-1.0)

Notes
-----
- Array dtypes are validated against format_valid_dtypes
- Arrays must have last dimension equal to num_channels (1 for gray)
- All values are clamped to [minima, maxima] during initialization
"""

from .color_base import ColorBase
from .rgb import ColorRGBINT, ColorUnitRGB
from .hsv import ColorHSVINT, UnitHSV
from .hsl import ColorHSLINT, UnitHSL
from .lab import ColorLab
from .gray import ColorGrayINT, ColorUnitGray
from .color import color_convert, unified_tuple_to_class, get_color_class, convert_color
from .blend import weighted_color_mean, np_weighted_mean


__all__ = [
    'ColorBase',
    'ColorRGBINT',
    'ColorUnitRGB',
    'ColorHSVINT',
    'UnitHSV',
    'ColorHSLINT',
    'UnitHSL',
    'ColorLab',
    'ColorGrayINT',
    'ColorUnitGray',
    'color_convert',
    'get_color_class',
    'convert_color',
    'unified_tuple_to_class',
    'weighted_color_mean',
    'np_weighted_mean',
]
