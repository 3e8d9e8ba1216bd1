"""
Weighted blending of colors in their own space.

RGB, Lab and gray channels mix linearly. For HSV/HSL the hue channel
travels the shorter arc and wraps back into [0, 360).
"""
from __future__ import annotations
from typing import Union
import numpy as np
from numpy import ndarray as NDArray
from .color_base import ColorBase

Weight = Union[float, NDArray]


def np_weighted_mean(w1: Weight, a: NDArray, b: NDArray, has_hue: bool = False) -> NDArray:
    """
    ``w1 * a + (1 - w1) * b`` over float channel arrays (channels on the last axis).

    Args:
        w1: Weight of ``a``; a scalar or an array broadcastable to ``a.shape[:-1]``
        a, b: Channel arrays of matching channel count
        has_hue: Treat channel 0 as a hue angle in degrees
    """
    w = np.asarray(w1, dtype=np.float64)[..., np.newaxis]
    if not has_hue:
        return w * a + (1.0 - w) * b

    h0 = a[..., :1]
    delta = (b[..., :1] - h0 + 180.0) % 360.0 - 180.0
    hues = (h0 + (1.0 - w) * delta) % 360.0
    rest = w * a[..., 1:] + (1.0 - w) * b[..., 1:]
    return np.concatenate([hues, rest], axis=-1)


def weighted_color_mean(w1: Weight, c1: ColorBase, c2: ColorBase) -> ColorBase:
    """
    Blend two colors: ``w1`` of ``c1`` and ``1 - w1`` of ``c2``.

    ``c2`` is converted into ``c1``'s class first; the result is an instance
    of ``c1``'s class. Scalar colors with a scalar weight give a scalar color,
    otherwise the result is an array color.
    """
    if type(c2) is not type(c1):
        c2 = c1.__class__(c2)
    out = np_weighted_mean(w1, c1.as_array(), c2.as_array(), c1.has_hue)
    return c1.from_channels(out)


def blend(self: ColorBase, other: ColorBase, weight: Weight = 0.5) -> ColorBase:
    """Return ``weight`` of this color mixed with ``1 - weight`` of ``other``."""
    return weighted_color_mean(weight, self, other)

ColorBase.blend = blend
