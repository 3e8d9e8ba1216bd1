import numbers
from typing import Any, Tuple
import numpy as np


def remap(value: Any, old_min: float, old_max: float, new_min: float, new_max: float) -> Any:
    """Linearly map ``value`` (scalar or array) from [old_min, old_max] onto [new_min, new_max]."""
    return (np.subtract(value, old_min) / (old_max - old_min)) * (new_max - new_min) + new_min


def default_range(x: Any) -> Tuple[Any, Any]:
    """Zero and one in the element type of ``x`` (the natural range of a unit value)."""
    dtype = np.asarray(x).dtype
    if dtype.kind not in "iuf":
        dtype = np.dtype(np.float64)
    return dtype.type(0), dtype.type(1)


def is_bounds_pair(value: Any) -> bool:
    """True for a two-element tuple or list of finite real numbers."""
    return (
        isinstance(value, (tuple, list))
        and len(value) == 2
        and all(isinstance(v, numbers.Real) and np.isfinite(v) for v in value)
    )
