import numpy as np
from typing import Callable, Dict, Tuple, cast

from ..errors import UnsupportedConversion
from ..types.format_type import FormatType, max_non_hue
from ..types.color_types import ColorElement, ColorSpace, element_to_array, to_color_space

from .to_rgb import np_hsv_to_unit_rgb, np_hsl_to_unit_rgb, np_gray_to_unit_rgb
from .to_hsv import np_unit_rgb_to_hsv, np_hsl_to_hsv
from .to_hsl import np_unit_rgb_to_hsl, np_hsv_to_hsl
from .to_lab import np_unit_rgb_to_lab, np_lab_to_unit_rgb

ChannelFn = Callable[[np.ndarray, np.ndarray, np.ndarray], np.ndarray]

# Every space converts through unit RGB except the direct HSV <-> HSL pair
TO_RGB: Dict[ColorSpace, ChannelFn] = {
    ColorSpace.HSV: np_hsv_to_unit_rgb,
    ColorSpace.HSL: np_hsl_to_unit_rgb,
    ColorSpace.LAB: np_lab_to_unit_rgb,
}

FROM_RGB: Dict[ColorSpace, ChannelFn] = {
    ColorSpace.HSV: np_unit_rgb_to_hsv,
    ColorSpace.HSL: np_unit_rgb_to_hsl,
    ColorSpace.LAB: np_unit_rgb_to_lab,
}

CONVERT_NUMPY_DIRECT: Dict[Tuple[ColorSpace, ColorSpace], ChannelFn] = {
    (ColorSpace.HSV, ColorSpace.HSL): np_hsv_to_hsl,
    (ColorSpace.HSL, ColorSpace.HSV): np_hsl_to_hsv,
}

def normalize(color: np.ndarray, space: ColorSpace, fmt: FormatType) -> np.ndarray:
    maxval = max_non_hue[fmt]

    if space in (ColorSpace.RGB, ColorSpace.GRAY):
        return color / maxval

    if space in (ColorSpace.HSV, ColorSpace.HSL):
        h = color[..., 0]
        a = color[..., 1] / maxval
        b = color[..., 2] / maxval
        return np.stack([h, a, b], axis=-1)

    if space == ColorSpace.LAB:
        return color

    raise UnsupportedConversion(f"Unknown space: {space}")

def scale(color: np.ndarray, space: ColorSpace, fmt: FormatType) -> np.ndarray:
    maxval = max_non_hue[fmt]

    if space in (ColorSpace.RGB, ColorSpace.GRAY):
        scaled = color * maxval
        return np.round(scaled).astype(int) if fmt == FormatType.INT else scaled

    if space in (ColorSpace.HSV, ColorSpace.HSL):
        h = color[..., 0]
        a = color[..., 1] * maxval
        b = color[..., 2] * maxval

        if fmt == FormatType.INT:
            return np.stack([np.round(h), np.round(a), np.round(b)], axis=-1).astype(int)

        return np.stack([h, a, b], axis=-1)

    if space == ColorSpace.LAB:
        if fmt != FormatType.FLOAT:
            raise UnsupportedConversion("lab colors only exist in float format")
        return color

    raise UnsupportedConversion(f"Unknown space: {space}")

def _to_unit_rgb(color: np.ndarray, space: ColorSpace) -> np.ndarray:
    if space == ColorSpace.RGB:
        return color
    if space == ColorSpace.GRAY:
        return np_gray_to_unit_rgb(color[..., 0])
    return TO_RGB[space](color[..., 0], color[..., 1], color[..., 2])

def _convert_core(
    color: np.ndarray,
    from_space: ColorSpace,
    to_space: ColorSpace,
    input_fmt: FormatType,
    output_fmt: FormatType,
) -> np.ndarray:
    if to_space == ColorSpace.GRAY and from_space != ColorSpace.GRAY:
        raise UnsupportedConversion(f"cannot convert {from_space.value} colors to gray")

    # normalize → convert → scale
    base_norm = normalize(color, from_space, input_fmt)

    if from_space == to_space:
        converted = base_norm
    elif (from_space, to_space) in CONVERT_NUMPY_DIRECT:
        converted = CONVERT_NUMPY_DIRECT[(from_space, to_space)](
            base_norm[..., 0],
            base_norm[..., 1],
            base_norm[..., 2],
        )
    else:
        rgb = _to_unit_rgb(base_norm, from_space)
        if to_space == ColorSpace.RGB:
            converted = rgb
        else:
            converted = FROM_RGB[to_space](rgb[..., 0], rgb[..., 1], rgb[..., 2])

    return scale(converted, to_space, output_fmt)


def convert(
    color: ColorElement,
    from_space: ColorSpace | str,
    to_space: ColorSpace | str,
    input_type: FormatType = FormatType.INT,
    output_type: FormatType = FormatType.INT,
) -> ColorElement:
    from_space, to_space = to_color_space(from_space), to_color_space(to_space)
    if from_space == to_space and input_type == output_type:
        return color  # No conversion needed
    color_array = element_to_array(color)
    result = _convert_core(
        color_array,
        from_space,
        to_space,
        FormatType(input_type),
        FormatType(output_type),
    )
    # Convert back to a tuple (or a bare number for one channel) for scalar output
    values = tuple(v.item() for v in result.reshape(-1))
    return values[0] if len(values) == 1 else cast(ColorElement, values)

def np_convert(
    color: np.ndarray,
    from_space: ColorSpace | str,
    to_space: ColorSpace | str,
    input_type: FormatType = FormatType.INT,
    output_type: FormatType = FormatType.INT,
) -> np.ndarray:
    from_space, to_space = to_color_space(from_space), to_color_space(to_space)
    if from_space == to_space and input_type == output_type:
        return color  # No conversion needed
    return _convert_core(
        np.asarray(color, dtype=float),
        from_space,
        to_space,
        FormatType(input_type),
        FormatType(output_type),
    )
