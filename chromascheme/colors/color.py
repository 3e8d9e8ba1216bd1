from __future__ import annotations
from .color_base import ColorBase
from .rgb import rgb_tuple_to_class
from .hsv import hsv_tuple_to_class
from .hsl import hsl_tuple_to_class
from .lab import lab_tuple_to_class
from .gray import gray_tuple_to_class
from ..errors import UnsupportedConversion
from ..types.format_type import FormatType
from ..types.color_types import ColorSpace, to_color_space
from ..conversions import convert, np_convert
from numpy import ndarray
unified_tuple_to_class: dict[tuple[ColorSpace, FormatType], type[ColorBase]] = {
    **rgb_tuple_to_class,
    **hsv_tuple_to_class,
    **hsl_tuple_to_class,
    **lab_tuple_to_class,
    **gray_tuple_to_class,
}

def color_convert(self: ColorBase, to_space: ColorSpace | str | None = None, to_format: FormatType | None = None) -> ColorBase:
    """
    Convert this color to a different color space and/or format.

    Automatically detects whether the value is a scalar or array and uses
    the appropriate conversion function (convert for scalars, np_convert for arrays).

    Args:
        to_space: Target color space (e.g., "rgb", "hsv", "lab")
        to_format: Target format type (INT, FLOAT). Defaults to the current
            format, or FLOAT when the target space has no such format.

    Returns:
        New ColorBase instance in the target space/format
    """
    to_space = to_color_space(to_space or self.mode)
    if to_format is None:
        to_format = self.format_type if (to_space, self.format_type) in unified_tuple_to_class else FormatType.FLOAT
    cls = get_color_class(to_space, to_format)

    if isinstance(self.value, ndarray):
        result = np_convert(self.value, self.mode, to_space, self.format_type, to_format)
    else:
        result = convert(self.value, self.mode, to_space, self.format_type, to_format)
    return cls(result)

ColorBase.convert = color_convert


def get_color_class(color_space: ColorSpace | str, format_type: FormatType) -> type[ColorBase]:
    color_class = unified_tuple_to_class.get((to_color_space(color_space), FormatType(format_type)))
    if color_class is None:
        raise UnsupportedConversion(
            f"Unsupported color space/format combination: {color_space}/{format_type}"
        )
    return color_class


def convert_color(value, color_space: ColorSpace | str, format_type: FormatType) -> ColorBase:
    """Coerce a ColorBase (converting it) or a raw tuple/array into the given class."""
    color_class = get_color_class(color_space, format_type)
    if isinstance(value, ColorBase):
        return value.convert(color_space, format_type)
    return color_class(value)
