"""
Inverse mapping: color → position.

``locate(palette, c)`` is the inverse of ``sample``: it returns the value
``x`` for which ``sample(palette, x)`` most closely matches ``c``. The
nearest palette entry under CIEDE2000 is refined towards its closer
neighbour by assuming the difference grows linearly between them.

Examples
--------
Where in a black-to-white palette does mid gray sit?

>>> bw = Palette([ColorUnitRGB((0, 0, 0)), ColorUnitRGB((1, 1, 1))])
>>> round(locate(bw, ColorUnitRGB((0.5, 0.5, 0.5))), 4)
0.5433

Exact entries map back onto their own position:

>>> grays = Palette.linspace(ColorUnitRGB((0, 0, 0)), ColorUnitRGB((1, 1, 1)), 5)
>>> locate(grays, grays[2])
0.5
"""
from __future__ import annotations

from typing import Tuple, Union

import numpy as np

from .colors.color_base import ColorBase
from .difference import colordiff
from .errors import InsufficientPaletteLength, UnsupportedRangeMode
from .palette import Palette
from .types.range_types import Bounds, DEFAULT_RANGE
from .utils import is_bounds_pair, remap


def _neighbour_pair(diffs: np.ndarray, closest: int) -> Tuple[int, int]:
    last = len(diffs) - 1
    if closest == 0:
        return 0, 1
    if closest == last:
        return last - 1, last
    # on equal differences closest - 1 wins (<=), so ties go to the lower index
    other = closest - 1 if diffs[closest - 1] <= diffs[closest + 1] else closest + 1
    return min(closest, other), max(closest, other)


def locate(
    palette: Palette,
    color: Union[ColorBase, Tuple[float, float, float]],
    range_spec: Bounds = DEFAULT_RANGE,
) -> float:
    """
    Compute where ``color`` would fit in ``palette``.

    Args:
        palette: Palette with at least two colors
        color: Query color; a bare 3-tuple is read as unit RGB
        range_spec: ``(lo, hi)`` bounds the result is expressed in

    Returns:
        Position of ``color`` within ``range_spec``.

    Raises:
        InsufficientPaletteLength: the palette has fewer than two colors.
        UnsupportedRangeMode: ``range_spec`` is not a numeric pair.
    """
    n = len(palette)
    if n <= 1:
        raise InsufficientPaletteLength(n)
    if not is_bounds_pair(range_spec):
        raise UnsupportedRangeMode(range_spec)
    if isinstance(color, ColorBase) and color.is_array:
        raise TypeError("locate expects a single color, not an array color")

    diffs = np.asarray(colordiff(color, palette.colors), dtype=np.float64)
    closest = int(np.argmin(diffs))
    left, right = _neighbour_pair(diffs, closest)

    v = float(left)
    if diffs[left] != diffs[right]:  # prevents divide by zero
        v += diffs[left] / (diffs[left] + diffs[right])

    lo, hi = range_spec
    return float(remap(v, 0, n - 1, lo, hi))
