"""
Forward mapping: values → colors.

``sample(palette, x, rangescale)`` places ``x`` inside the palette after
normalizing it by ``rangescale`` and blends the two neighbouring colors.

Inputs are sorted into one of four kinds before any work is done:

- ``SCALAR``: a real number
- ``ARRAY``: an array (or list) of real numbers; the result has the input's
  shape plus a trailing channel axis
- ``BOOLEAN``: a bool or boolean array; ``False`` is the first color and
  ``True`` the last, with no blending
- ``GRAY``: a gray color; its intensity is sampled with the default range

Range specifications
--------------------
``RangeMode.CLAMP`` / ``"clamp"``
    Values between 0 and 1 cover the palette; values outside are clamped.
``RangeMode.EXTREMA`` / ``"extrema"``
    The palette spans ``min(x)..max(x)`` of the input itself.
``(lo, hi)``
    Explicit bounds. ``lo == hi`` falls back to ``(0, 1)``.

Examples
--------
>>> from chromascheme import Palette, ColorUnitRGB, sample
>>> bw = Palette([ColorUnitRGB((0, 0, 0)), ColorUnitRGB((1, 1, 1))])
>>> sample(bw, 0.5).value
(0.5, 0.5, 0.5)
>>> sample(bw, np.array([0.0, 1.0, 2.0]), "extrema").shape
(3, 3)
"""
from __future__ import annotations

import numbers
from enum import Enum
from typing import Any, Callable, Dict, Tuple

import numpy as np
from numpy import ndarray as NDArray
from boundednumbers import BoundType, bound_type_to_np_function

from .colors.blend import np_weighted_mean
from .colors.color_base import ColorBase
from .errors import UnsupportedRangeMode
from .palette import Palette
from .types.color_types import ColorSpace
from .types.range_types import DEFAULT_RANGE, RangeMode, RangeSpec
from .utils import default_range, is_bounds_pair, remap


np_clamp = bound_type_to_np_function[BoundType.CLAMP]


class InputKind(str, Enum):
    SCALAR = "scalar"
    ARRAY = "array"
    BOOLEAN = "boolean"
    GRAY = "gray"


def classify_input(x: Any) -> InputKind:
    """Decide which sampling path handles ``x``; raises ``TypeError`` for anything else."""
    if isinstance(x, ColorBase):
        if x.mode == ColorSpace.GRAY:
            return InputKind.GRAY
        raise TypeError(f"only gray colors can be sampled, got {type(x).__name__}")
    if isinstance(x, (bool, np.bool_)):
        return InputKind.BOOLEAN
    if isinstance(x, numbers.Real):
        return InputKind.SCALAR
    if isinstance(x, (NDArray, list, tuple, range)):
        kind = np.asarray(x).dtype.kind
        if kind == "b":
            return InputKind.BOOLEAN
        if kind in "iuf":
            return InputKind.ARRAY
    raise TypeError(f"cannot sample a palette with {type(x).__name__} input")


def resolve_range(x: Any, range_spec: RangeSpec) -> Tuple[Any, Any]:
    """
    Turn a range specification into explicit ``(lo, hi)`` bounds for input ``x``.

    Raises:
        UnsupportedRangeMode: ``range_spec`` is neither a known mode nor a numeric pair.
    """
    if isinstance(range_spec, str):
        try:
            mode = RangeMode(range_spec)
        except ValueError:
            raise UnsupportedRangeMode(range_spec) from None
        if mode == RangeMode.CLAMP:
            lo, hi = default_range(x)
        else:
            values = np.asarray(x)
            if values.size == 0:
                lo, hi = default_range(x)
            else:
                lo, hi = values.min(), values.max()
                if not (np.isfinite(lo) and np.isfinite(hi)):
                    raise ValueError("cannot span a palette over non-finite values")
    elif is_bounds_pair(range_spec):
        lo, hi = range_spec
    else:
        raise UnsupportedRangeMode(range_spec)

    # check for empty range
    if lo == hi:
        lo, hi = default_range(lo)
    return lo, hi


def sample_values(palette: Palette, x: Any, range_spec: RangeSpec = RangeMode.CLAMP) -> ColorBase:
    """
    Blend the palette colors around the normalized position of ``x``.

    Args:
        palette: Palette to sample
        x: Real number or array of real numbers
        range_spec: ``RangeMode``, its string name, or an explicit ``(lo, hi)``

    Returns:
        A scalar color for a scalar ``x``, otherwise an array color of shape
        ``x.shape + (channels,)``, in the palette's color class.
    """
    lo, hi = (float(v) for v in resolve_range(x, range_spec))
    values = np.asarray(x, dtype=np.float64)
    if np.isnan(values).any():
        raise ValueError("cannot sample a palette at NaN")

    n = len(palette)
    x_clamped = np_clamp(values, min(lo, hi), max(lo, hi))
    position = np.clip(remap(x_clamped, lo, hi, 0, n - 1), 0, n - 1)
    before = np.floor(position).astype(np.intp)
    after = np.minimum(before + 1, n - 1)
    # blend between the two colors adjacent to the point
    frac = position - before

    table = palette.to_array()
    blended = np_weighted_mean(1.0 - frac, table[before], table[after], palette.colors.has_hue)
    return palette.color_class.from_channels(blended)


def sample_mask(palette: Palette, mask: Any, range_spec: RangeSpec = RangeMode.CLAMP) -> ColorBase:
    """
    Map ``False`` to the first palette color and ``True`` to the last.

    The range specification is validated but has no effect on the result.
    """
    resolve_range(mask, range_spec)
    index = np.asarray(mask, dtype=bool).astype(np.intp) * (len(palette) - 1)
    return palette.color_class.from_channels(palette.to_array()[index])


def sample_gray(palette: Palette, gray: ColorBase, range_spec: RangeSpec = RangeMode.CLAMP) -> ColorBase:
    """
    Sample the palette at the intensity of a gray color (fraction in [0, 1]).

    Intensities always use the default range; ``range_spec`` is validated only.
    """
    if gray.mode != ColorSpace.GRAY:
        raise TypeError(f"sample_gray expects a gray color, got {type(gray).__name__}")
    intensity = gray.gray_value()
    resolve_range(intensity, range_spec)
    return sample_values(palette, intensity, DEFAULT_RANGE)


_SAMPLERS: Dict[InputKind, Callable[[Palette, Any, RangeSpec], ColorBase]] = {
    InputKind.SCALAR: sample_values,
    InputKind.ARRAY: sample_values,
    InputKind.BOOLEAN: sample_mask,
    InputKind.GRAY: sample_gray,
}


def sample(palette: Palette, x: Any, range_spec: RangeSpec = RangeMode.CLAMP) -> ColorBase:
    """
    Color(s) of ``palette`` at ``x``: scalar, array, boolean mask or gray color.

    See the module docstring for the range specifications.
    """
    return _SAMPLERS[classify_input(x)](palette, x, range_spec)
