"""
Chromascheme - Color Schemes with Continuous Interpolation
==========================================================

Ordered palettes of colors that can be read at any position in between.

Key Features
------------
- Immutable palettes of RGB, HSV, HSL, CIELAB or gray colors
- Forward mapping: value(s) → blended color(s), with clamp, extrema or
  explicit range normalization
- Inverse mapping: color → position, by CIEDE2000 nearest neighbour with
  linear refinement
- Boolean masks and gray colors as sampling inputs
- Named palette registries with case-insensitive search

Quick Start
-----------
>>> from chromascheme import ColorUnitRGB, Palette, sample, locate
>>>
>>> fire = Palette([ColorUnitRGB((0, 0, 0)), ColorUnitRGB((1, 0, 0)), ColorUnitRGB((1, 1, 0))],
...                "custom", "black to red to yellow")
>>> sample(fire, 0.75).value
(1.0, 0.5, 0.0)
>>> locate(fire, ColorUnitRGB((1, 0, 0)))
0.5

Modules
-------
- colors: color classes, conversion and blending
- conversions: vectorized color space conversions
- difference: CIEDE2000 color difference
- palette: the Palette container
- sampling: forward mapping
- locate: inverse mapping
- registry: named palettes
"""

from .colors import (
    ColorBase,
    ColorRGBINT,
    ColorUnitRGB,
    ColorHSVINT,
    UnitHSV,
    ColorHSLINT,
    UnitHSL,
    ColorLab,
    ColorGrayINT,
    ColorUnitGray,
    color_convert,
    weighted_color_mean,
)
from .difference import colordiff, delta_e_2000
from .palette import Palette, ColorScheme, reverse
from .sampling import sample, sample_values, sample_mask, sample_gray, InputKind, classify_input
from .locate import locate
from .registry import SchemeRegistry, SchemeMatch, load_scheme, find_schemes
from .errors import (
    ChromaSchemeError,
    UnsupportedRangeMode,
    InsufficientPaletteLength,
    EmptyPaletteError,
    UnsupportedConversion,
    SchemeOverwriteWarning,
)
from .types import ColorSpace, FormatType, RangeMode

# Friendly aliases for common integer variants
ColorRGB = ColorRGBINT
ColorHSV = ColorHSVINT
ColorHSL = ColorHSLINT

__version__ = "1.0.0"

__all__ = [
    # core color types
    "ColorBase",
    "ColorRGBINT",
    "ColorUnitRGB",
    "ColorHSVINT",
    "UnitHSV",
    "ColorHSLINT",
    "UnitHSL",
    "ColorLab",
    "ColorGrayINT",
    "ColorUnitGray",
    "ColorRGB",
    "ColorHSV",
    "ColorHSL",
    "color_convert",
    "weighted_color_mean",
    "colordiff",
    "delta_e_2000",
    # palettes
    "Palette",
    "ColorScheme",
    "reverse",
    "sample",
    "sample_values",
    "sample_mask",
    "sample_gray",
    "InputKind",
    "classify_input",
    "locate",
    # registry
    "SchemeRegistry",
    "SchemeMatch",
    "load_scheme",
    "find_schemes",
    # errors
    "ChromaSchemeError",
    "UnsupportedRangeMode",
    "InsufficientPaletteLength",
    "EmptyPaletteError",
    "UnsupportedConversion",
    "SchemeOverwriteWarning",
    # enums
    "ColorSpace",
    "FormatType",
    "RangeMode",
    "__version__",
]
