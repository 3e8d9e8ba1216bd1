from __future__ import annotations
from typing import Any, ClassVar, Tuple, cast, Callable
from ..conversions import convert, np_convert
from ..types.format_type import FormatType, format_classes, format_valid_dtypes, default_format_dtypes
from ..types.color_types import ColorElement, ColorValue, ColorSpace, Scalar, HUE_SPACES
from ..utils import get_dimension
from numpy import ndarray
import numpy as np
class ColorBase:
    __slots__ = ('_value',)  # prevents adding new attributes → immutability

    num_channels: ClassVar[int] = 1
    mode:       ClassVar[ColorSpace]
    _type:      ClassVar[type]
    maxima:     ClassVar[ColorElement]
    minima:     ClassVar[ColorElement | None] = None  # None means 0 for every channel
    null_value: ClassVar[ColorElement]
    format_type: ClassVar[FormatType]
    _is_frozen: bool = False   # class-level default (instance gets its own slot)
    # Attached by colors.color, colors.blend and difference to avoid import cycles
    convert: Callable[..., ColorBase]
    blend: Callable[..., ColorBase]
    difference: Callable[..., Any]

    def __setattr__(self, name, value):
        """Block attribute changes after __init__ finishes."""
        if getattr(self, '_is_frozen', False):
            raise AttributeError(f"{self.__class__.__name__} is immutable; cannot assign to {name}")
        super().__setattr__(name, value)

    @classmethod
    def lower_bounds(cls) -> ColorElement:
        if cls.minima is not None:
            return cls.minima
        if isinstance(cls.maxima, tuple):
            return tuple(0 for _ in cls.maxima)
        return 0

    def __init__(self, value: ColorValue | ColorBase) -> None:
        maxima_dim = get_dimension(self.maxima)

        if self.num_channels != maxima_dim:
            raise ValueError(f"{self.mode} expects {self.maxima!r}-shaped maxima")

        # ---- Handle ColorBase input ----
        if isinstance(value, ColorBase):
            if value.mode != self.mode or value.format_type != self.format_type:
                converter = np_convert if value.is_array else convert
                value = converter(
                    value.value,
                    value.mode,
                    self.mode,
                    value.format_type,
                    self.format_type,
                )
            else:
                value = value.value

        if isinstance(value, ndarray):
            value = self._init_array(value)
        else:
            value = self._init_scalar(value)

        # safe assignment; __setattr__ still allows it during init
        self._value = value

        # freeze instance, no more writes allowed
        super().__setattr__('_is_frozen', True)

    def _init_array(self, arr: ndarray) -> ndarray:
        # Validate dtype
        valid_types = format_valid_dtypes[self.format_type]
        if not isinstance(arr.dtype.type(0), valid_types):
            raise TypeError(
                f"{self.mode} with format {self.format_type} expects dtype compatible with {valid_types}, "
                f"got {arr.dtype}"
            )

        # Validate shape: last dimension should match num_channels
        if arr.ndim == 0 or arr.shape[-1] != self.num_channels:
            raise ValueError(
                f"{self.mode} expects last dimension to be {self.num_channels}, "
                f"got shape {arr.shape}"
            )

        arr = np.clip(arr, np.array(self.lower_bounds()), np.array(self.maxima))

        # Ensure proper dtype
        target_dtype = default_format_dtypes[self.format_type]
        if arr.dtype != target_dtype:
            arr = arr.astype(target_dtype)
        arr.flags.writeable = False
        return arr

    def _init_scalar(self, value: ColorElement) -> ColorElement:
        value_dim = get_dimension(value)
        if get_dimension(self.maxima) != value_dim:
            raise ValueError(f"{self.mode} expects {self.maxima!r}-shaped value")

        # type enforcement
        cast_fn = format_classes[self.format_type]
        if self.format_type == FormatType.INT:
            cast_fn = lambda v: int(round(v))  # noqa: E731
        lower = self.lower_bounds()

        if isinstance(self.maxima, tuple):
            values = tuple(cast_fn(v) for v in cast(Tuple[Any, ...], value))
            return tuple(
                max(lo, min(v, hi))
                for v, lo, hi in zip(values, cast(Tuple[Scalar, ...], lower), self.maxima)
            )
        if isinstance(value, (tuple, list)):
            value = value[0]
        return max(lower, min(cast_fn(value), self.maxima))

    @classmethod
    def from_channels(cls, channels: ndarray) -> ColorBase:
        """
        Build an instance from float channel data, channels on the last axis.

        A 1-D input gives a scalar color; anything larger gives an array color.
        INT formats are rounded.
        """
        channels = np.asarray(channels, dtype=np.float64)
        if cls.format_type == FormatType.INT:
            channels = np.round(channels).astype(np.int64)
        if channels.ndim == 1:
            values = tuple(v.item() for v in channels)
            return cls(values if isinstance(cls.maxima, tuple) else values[0])
        return cls(channels)

    # ------------------ READ-ONLY PROPERTIES ------------------
    @property
    def value(self) -> ColorValue:
        return self._value

    @property
    def is_array(self) -> bool:
        """Check if this color contains an array of colors."""
        return isinstance(self._value, ndarray)

    @property
    def shape(self) -> Tuple[int, ...] | None:
        """Return shape of the array, or None if scalar."""
        if isinstance(self._value, ndarray):
            return self._value.shape
        return None

    @property
    def has_hue(self) -> bool:
        """Check if this color space includes a hue channel."""
        return self.mode in HUE_SPACES

    def as_array(self) -> ndarray:
        """Channel values as float64, channels on the last axis."""
        return np.asarray(self._value, dtype=np.float64).reshape(
            self.shape if self.is_array else (self.num_channels,)
        )

    def __getitem__(self, index) -> ColorBase:
        """Index into an array color; returns a color of the same class."""
        if not isinstance(self._value, ndarray):
            raise TypeError(f"scalar {self.__class__.__name__} is not indexable")
        picked = self._value[index]
        if picked.ndim == 1:
            return self.__class__(self._from_row(picked))
        return self.__class__(picked)

    def __len__(self) -> int:
        if not isinstance(self._value, ndarray):
            raise TypeError(f"scalar {self.__class__.__name__} has no len()")
        return self._value.shape[0]

    def _from_row(self, row: ndarray) -> ColorElement:
        values = tuple(v.item() for v in row)
        return values if isinstance(self.maxima, tuple) else values[0]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ColorBase):
            return NotImplemented
        if type(self) is not type(other):
            return False
        return bool(np.array_equal(np.asarray(self._value), np.asarray(other._value)))

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self._value!r})"


def build_registry(*classes: type[ColorBase]):
    return {
        (cls.mode, cls.format_type): cls
        for cls in classes
    }
