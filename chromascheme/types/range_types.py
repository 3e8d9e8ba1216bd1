from __future__ import annotations
from enum import Enum
from typing import Tuple, Union

Bounds = Tuple[float, float]


class RangeMode(str, Enum):
    """How raw input values are mapped onto a palette's ``[0, 1]`` span."""
    CLAMP = "clamp"
    EXTREMA = "extrema"


RangeSpec = Union[RangeMode, str, Bounds]

DEFAULT_RANGE: Bounds = (0.0, 1.0)
