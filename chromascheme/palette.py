"""
Palette: an immutable, ordered sequence of colors with descriptive metadata.

Index 0 sits at position 0 of the palette and the last index at position 1;
``chromascheme.sampling`` interpolates between them and
``chromascheme.locate`` goes the other way.
"""
from __future__ import annotations

from typing import Iterator, Optional, Sequence, Union, overload

import numpy as np
from numpy import ndarray as NDArray

from .colors.color_base import ColorBase
from .colors.color import get_color_class
from .colors.blend import np_weighted_mean
from .errors import EmptyPaletteError
from .types.color_types import ColorSpace
from .types.format_type import FormatType

PaletteColors = Union[ColorBase, Sequence[ColorBase], Sequence[Sequence[float]], NDArray]


def _coerce_colors(colors: PaletteColors, space: Optional[ColorSpace | str]) -> ColorBase:
    """Collect ``colors`` into one read-only (N, channels) float color array."""
    if isinstance(colors, ColorBase):
        target = get_color_class(space or colors.mode, FormatType.FLOAT)
        if not colors.is_array:
            return _stack([colors], target)
        table = target(colors).as_array().reshape(-1, target.num_channels)
        if table.shape[0] == 0:
            raise EmptyPaletteError()
        return target(table)

    if not isinstance(colors, NDArray):
        colors = list(colors)
        if colors and isinstance(colors[0], ColorBase):
            return _stack(colors, get_color_class(space or colors[0].mode, FormatType.FLOAT))

    target = get_color_class(space or ColorSpace.RGB, FormatType.FLOAT)
    table = np.asarray(colors, dtype=np.float64)
    if table.size == 0:
        raise EmptyPaletteError()
    if table.ndim == 1:
        # a flat array is N grays for one-channel spaces, otherwise a single color
        table = table[:, np.newaxis] if target.num_channels == 1 else table[np.newaxis, :]
    return target(table)


def _stack(items: Sequence[ColorBase], target: type[ColorBase]) -> ColorBase:
    rows = []
    for item in items:
        if not isinstance(item, ColorBase):
            raise TypeError(
                f"Palette colors must all be colors, got {type(item).__name__} among {target.__name__} values"
            )
        rows.append(target(item).as_array().reshape(-1, target.num_channels))
    return target(np.concatenate(rows, axis=0))


class Palette:
    """
    An ordered, immutable sequence of colors plus a category and free-text notes.

    Colors may be given as color instances (converted to the space of the
    first one, or to ``space``), as one array color, or as rows of float
    channels in ``space`` (unit RGB by default). They are stored as a single
    float-format array color.

    >>> bw = Palette([ColorUnitRGB((0.0, 0.0, 0.0)), ColorUnitRGB((1.0, 1.0, 1.0))],
    ...              "custom", "twotone, black and white")
    >>> len(bw), bw[0].value
    (2, (0.0, 0.0, 0.0))
    """

    def __setattr__(self, name, value):
        if getattr(self, '_is_frozen', False):
            raise AttributeError(f"{self.__class__.__name__} is immutable; cannot assign to {name}")
        super().__setattr__(name, value)

    def __init__(
        self,
        colors: PaletteColors,
        category: str = "",
        notes: str = "",
        space: Optional[ColorSpace | str] = None,
    ) -> None:
        self._colors = _coerce_colors(colors, space)
        self._category = str(category)
        self._notes = str(notes)
        super().__setattr__('_is_frozen', True)

    @classmethod
    def linspace(
        cls,
        start: ColorBase,
        stop: ColorBase,
        length: int,
        space: ColorSpace | str = ColorSpace.RGB,
        category: str = "",
        notes: str = "",
    ) -> Palette:
        """
        Palette of ``length`` evenly spaced blends from ``start`` to ``stop`` in ``space``.
        """
        if length < 1:
            raise EmptyPaletteError()
        target = get_color_class(space, FormatType.FLOAT)
        first = target(start)
        u = np.linspace(0.0, 1.0, length)
        table = np_weighted_mean(1.0 - u, first.as_array(), target(stop).as_array(), first.has_hue)
        return cls(target(table), category, notes)

    # ------------------ READ-ONLY PROPERTIES ------------------
    @property
    def colors(self) -> ColorBase:
        """All colors as one (N, channels) array color."""
        return self._colors

    @property
    def category(self) -> str:
        return self._category

    @property
    def notes(self) -> str:
        return self._notes

    @property
    def space(self) -> ColorSpace:
        return self._colors.mode

    @property
    def color_class(self) -> type[ColorBase]:
        return type(self._colors)

    def to_array(self) -> NDArray:
        """Read-only float64 channel table of shape (N, channels)."""
        return self._colors.value

    # ------------------ SEQUENCE PROTOCOL ------------------
    def __len__(self) -> int:
        return self._colors.value.shape[0]

    def __iter__(self) -> Iterator[ColorBase]:
        for i in range(len(self)):
            yield self._colors[i]

    def __reversed__(self) -> Iterator[ColorBase]:
        for i in range(len(self) - 1, -1, -1):
            yield self._colors[i]

    @overload
    def __getitem__(self, index: int) -> ColorBase: ...
    @overload
    def __getitem__(self, index: slice) -> Palette: ...
    @overload
    def __getitem__(self, index: Union[float, NDArray]) -> ColorBase: ...

    def __getitem__(self, index):
        """
        ``p[i]`` is the i-th color, ``p[a:b]`` a sub-palette, and ``p[x]`` for
        a float (or a list or array of floats) samples the palette at position ``x``.
        """
        if isinstance(index, slice):
            return Palette(self._colors[index], self._category, self._notes)
        if isinstance(index, (int, np.integer)) and not isinstance(index, (bool, np.bool_)):
            n = len(self)
            if not -n <= index < n:
                raise IndexError(f"palette index {index} out of range for length {n}")
            return self._colors[int(index)]
        if isinstance(index, (list, tuple)) and index and np.asarray(index).dtype.kind == "f":
            index = np.asarray(index, dtype=np.float64)
        if isinstance(index, (float, np.floating)) or (
            isinstance(index, NDArray) and index.dtype.kind == "f"
        ):
            from .sampling import sample_values  # local import to avoid cycles
            return sample_values(self, index)
        raise TypeError(f"palette indices must be integers, slices or floats, not {type(index).__name__}")

    def reversed(self) -> Palette:
        """New palette with the colors in reverse order and the same metadata."""
        return Palette(self._colors[::-1], self._category, self._notes)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Palette):
            return NotImplemented
        return (
            self.color_class is other.color_class
            and self._colors == other._colors
            and self._category == other._category
            and self._notes == other._notes
        )

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return (
            f"Palette(space={self.space.value!r}, length={len(self)}, "
            f"category={self._category!r})"
        )


def reverse(palette: Palette) -> Palette:
    """Make a new palette with the same colors as ``palette`` in reverse order."""
    return palette.reversed()


ColorScheme = Palette
