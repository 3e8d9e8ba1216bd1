from chromascheme.utils import get_dimension, remap, default_range, is_bounds_pair
import numpy as np

def test_none_dimension():
    assert get_dimension(None) == 0

def test_sized_dimension():
    assert get_dimension([1, 2, 3]) == 3
    assert get_dimension((1, 2)) == 2
    assert get_dimension("hello") == 5

def test_non_sized_dimension():
    assert get_dimension(42) == 1
    assert get_dimension(3.14) == 1

def test_remap_scalars_and_arrays():
    assert remap(5, 0, 10, 0, 1) == 0.5
    assert remap(0.25, 0, 1, 10, 20) == 12.5
    assert np.allclose(remap(np.array([0.0, 0.5, 1.0]), 0, 1, 0, 4), [0, 2, 4])

def test_remap_reversed_target():
    assert remap(0.25, 0, 1, 1, 0) == 0.75

def test_default_range_matches_dtype():
    lo, hi = default_range(np.float32(3.0))
    assert lo.dtype == np.float32 and (lo, hi) == (0, 1)
    lo, hi = default_range(np.array([1, 2], dtype=np.int64))
    assert lo.dtype == np.int64
    lo, hi = default_range(True)
    assert lo.dtype == np.float64

def test_is_bounds_pair():
    assert is_bounds_pair((0, 1))
    assert is_bounds_pair([0.5, np.float64(2.0)])
    assert not is_bounds_pair((0, 1, 2))
    assert not is_bounds_pair("ab")
    assert not is_bounds_pair(("a", "b"))
    assert not is_bounds_pair(np.array([0, 1]))

def test_non_finite_bounds_are_not_pairs():
    assert not is_bounds_pair((0.0, float("inf")))
    assert not is_bounds_pair((float("nan"), 1.0))
