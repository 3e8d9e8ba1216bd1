from typing import ClassVar, Tuple
from ..types.format_type import FormatType
from ..types.color_types import ColorSpace
from .color_base import ColorBase, build_registry


class ColorLab(ColorBase):
    """CIELAB (D65). L in [0, 100]; a and b bounded to [-128, 128]."""
    num_channels: ClassVar[int] = 3
    mode:       ClassVar[ColorSpace] = ColorSpace.LAB
    _type:      ClassVar[type] = float
    maxima:     ClassVar[Tuple[float, float, float]] = (100.0, 128.0, 128.0)
    minima:     ClassVar[Tuple[float, float, float]] = (0.0, -128.0, -128.0)
    null_value: ClassVar[Tuple[float, float, float]] = (0.0, 0.0, 0.0)
    format_type: ClassVar[FormatType] = FormatType.FLOAT


lab_tuple_to_class = build_registry(ColorLab)
