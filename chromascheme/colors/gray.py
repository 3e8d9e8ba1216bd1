from __future__ import annotations
from typing import ClassVar, Union
import numpy as np
from numpy import ndarray
from ..types.format_type import FormatType, max_non_hue
from ..types.color_types import ColorSpace
from .color_base import ColorBase, build_registry


class _GrayBase(ColorBase):
    """Single-channel luminance. Arrays keep a trailing channel axis of length 1."""
    num_channels: ClassVar[int] = 1
    mode: ClassVar[ColorSpace] = ColorSpace.GRAY

    def gray_value(self) -> Union[float, ndarray]:
        """Intensity as a fraction in [0, 1] (a float, or an array without the channel axis)."""
        maxval = max_non_hue[self.format_type]
        if isinstance(self.value, ndarray):
            return self.value[..., 0].astype(np.float64) / maxval
        return float(self.value) / maxval


class ColorGrayINT(_GrayBase):
    """8-bit fixed-point gray, 0..255."""
    _type: ClassVar[type] = int
    maxima: ClassVar[int] = 255
    null_value: ClassVar[int] = 0
    format_type: ClassVar[FormatType] = FormatType.INT


class ColorUnitGray(_GrayBase):
    _type: ClassVar[type] = float
    maxima: ClassVar[float] = 1.0
    null_value: ClassVar[float] = 0.0
    format_type: ClassVar[FormatType] = FormatType.FLOAT


Gray = ColorUnitGray


gray_tuple_to_class = build_registry(
    ColorGrayINT,
    ColorUnitGray,
)
