from .format_type import FormatType, max_non_hue, format_classes, default_format_dtypes, format_valid_dtypes
from .color_types import ColorSpace, HUE_SPACES, D65_WHITE, is_hue_space, to_color_space
from .range_types import RangeMode, DEFAULT_RANGE
