from chromascheme.colors.rgb import ColorUnitRGB
from chromascheme.colors.hsv import UnitHSV
from chromascheme.colors.gray import ColorGrayINT, ColorUnitGray
from chromascheme.palette import Palette, reverse
from chromascheme.sampling import sample, classify_input, resolve_range, InputKind
from chromascheme.errors import UnsupportedRangeMode, ChromaSchemeError
from chromascheme.types import RangeMode
import numpy as np
import pytest

black = ColorUnitRGB((0.0, 0.0, 0.0))
red = ColorUnitRGB((1.0, 0.0, 0.0))
yellow = ColorUnitRGB((1.0, 1.0, 0.0))
white = ColorUnitRGB((1.0, 1.0, 1.0))

fire = Palette([black, red, yellow], "custom", "black to red to yellow")
bw = Palette([black, white])

def gray(v):
    return ColorUnitRGB((v, v, v))

def test_endpoints_and_entries():
    assert sample(fire, 0.0) == black
    assert sample(fire, 0.5) == red
    assert sample(fire, 1.0) == yellow

def test_blends_between_neighbours():
    assert sample(fire, 0.75).value == (1.0, 0.5, 0.0)
    assert np.allclose(sample(fire, 0.25).value, (0.5, 0.0, 0.0))

def test_clamp_mode_clamps_out_of_range_values():
    assert sample(fire, -3) == black
    assert sample(fire, 7.5) == yellow
    assert sample(fire, 2.0, RangeMode.CLAMP) == sample(fire, 2.0, "clamp")

def test_array_input_keeps_shape():
    out = sample(fire, np.array([0.0, 0.25, 1.0]))
    assert isinstance(out, ColorUnitRGB)
    assert out.shape == (3, 3)
    assert np.allclose(out.value[1], (0.5, 0.0, 0.0))
    grid = sample(bw, np.array([[0.0, 0.5], [0.75, 1.0]]))
    assert grid.shape == (2, 2, 3)
    assert np.allclose(grid.value[1, 0], (0.75, 0.75, 0.75))

def test_list_input():
    out = sample(bw, [0.0, 1.0])
    assert out.shape == (2, 3)

def test_extrema_spans_the_input():
    out = sample(bw, [0, 1, 2], "extrema")
    assert np.allclose(out.value, [[0, 0, 0], [0.5, 0.5, 0.5], [1, 1, 1]])
    assert out[2] == white

def test_extrema_of_constant_input_uses_default_range():
    out = sample(bw, np.array([0.25, 0.25]), RangeMode.EXTREMA)
    assert np.allclose(out.value, [[0.25] * 3, [0.25] * 3])

def test_explicit_range():
    assert np.allclose(sample(bw, 15, (10, 20)).value, (0.5, 0.5, 0.5))
    assert sample(bw, 5, (10, 20)) == black
    assert sample(bw, 25.0, (10.0, 20.0)) == white

def test_degenerate_range_falls_back_to_unit():
    assert np.allclose(sample(bw, 0.25, (3, 3)).value, (0.25, 0.25, 0.25))
    assert sample(bw, 3, (3, 3)) == white

def test_reversed_range_runs_backwards():
    assert np.allclose(sample(bw, 0.25, (1.0, 0.0)).value, (0.75, 0.75, 0.75))
    assert sample(bw, 2.0, (1.0, 0.0)) == black

@pytest.mark.parametrize("bad", ["log", "EXTREMA", (1, 2, 3), None, ("a", "b"), 0.5])
def test_unsupported_range_modes(bad):
    with pytest.raises(UnsupportedRangeMode) as info:
        sample(fire, 0.5, bad)
    assert info.value.mode == bad
    assert isinstance(info.value, ValueError)
    assert isinstance(info.value, ChromaSchemeError)

def test_nan_is_rejected():
    with pytest.raises(ValueError):
        sample(fire, float("nan"))

def test_boolean_inputs_pick_end_colors():
    assert sample(fire, True) == yellow
    assert sample(fire, False) == black
    mask = sample(fire, np.array([[True, False], [False, False]]))
    assert mask.shape == (2, 2, 3)
    assert np.allclose(mask.value[0, 0], (1.0, 1.0, 0.0))
    assert np.allclose(mask.value[0, 1], (0.0, 0.0, 0.0))

def test_boolean_inputs_ignore_valid_ranges_but_check_them():
    assert sample(fire, True, (5, 10)) == yellow
    with pytest.raises(UnsupportedRangeMode):
        sample(fire, True, "log")

def test_gray_inputs():
    assert np.allclose(sample(bw, ColorUnitGray(0.25)).value, (0.25, 0.25, 0.25))
    assert sample(bw, ColorGrayINT(255)) == white
    grays = ColorUnitGray(np.array([[0.0], [0.5], [1.0]]))
    out = sample(fire, grays)
    assert out.shape == (3, 3)
    assert np.allclose(out.value[1], (1.0, 0.0, 0.0))

def test_unsupported_inputs():
    with pytest.raises(TypeError):
        sample(fire, red)
    with pytest.raises(TypeError):
        sample(fire, "0.5")
    with pytest.raises(TypeError):
        sample(fire, np.array(["a", "b"]))

def test_single_color_palette():
    lone = Palette([red])
    assert sample(lone, 0.3) == red
    assert sample(lone, np.array([0.0, 1.0])).shape == (2, 3)

def test_hue_palettes_blend_across_zero():
    wrap = Palette([UnitHSV((350.0, 1.0, 1.0)), UnitHSV((10.0, 1.0, 1.0))])
    mid = sample(wrap, 0.5)
    assert isinstance(mid, UnitHSV)
    assert mid.value[0] == pytest.approx(0.0, abs=1e-9)

def test_classify_input():
    assert classify_input(0.5) == InputKind.SCALAR
    assert classify_input(np.float32(0.5)) == InputKind.SCALAR
    assert classify_input(3) == InputKind.SCALAR
    assert classify_input(True) == InputKind.BOOLEAN
    assert classify_input(np.array([True])) == InputKind.BOOLEAN
    assert classify_input(range(3)) == InputKind.ARRAY
    assert classify_input(ColorUnitGray(0.5)) == InputKind.GRAY

def test_resolve_range():
    assert resolve_range(0.5, "clamp") == (0.0, 1.0)
    assert resolve_range(np.array([2.0, -1.0, 4.0]), "extrema") == (-1.0, 4.0)
    assert resolve_range(1.0, (2, 2)) == (0, 1)
    assert resolve_range(1.0, [0, 10]) == (0, 10)

def test_reversed_palette_samples_mirror_positions():
    xs = np.linspace(0.0, 1.0, 21)
    assert np.allclose(sample(reverse(fire), xs).value, sample(fire, 1.0 - xs).value)

def test_clamping_is_idempotent():
    for x in (-5.0, -0.1, 1.1, 42.0):
        assert sample(fire, x, (0.0, 1.0)) == sample(fire, min(max(x, 0.0), 1.0), (0.0, 1.0))

def test_small_steps_give_small_changes():
    xs = np.linspace(0.0, 1.0, 1001)
    steps = np.abs(np.diff(sample(fire, xs).value, axis=0))
    assert steps.max() < 0.01

def test_gray_inputs_ignore_the_caller_range():
    assert np.allclose(sample(bw, ColorUnitGray(0.5), (0.0, 0.5)).value, (0.5, 0.5, 0.5))
    grays = ColorUnitGray(np.array([[0.4], [0.6]]))
    out = sample(bw, grays, "extrema")
    assert np.allclose(out.value, [[0.4] * 3, [0.6] * 3])
    with pytest.raises(UnsupportedRangeMode):
        sample(bw, ColorUnitGray(0.5), "log")

@pytest.mark.parametrize("bounds", [(0.0, float("inf")), (float("-inf"), 1.0), (0.0, float("nan"))])
def test_non_finite_bounds_are_rejected(bounds):
    with pytest.raises(UnsupportedRangeMode):
        sample(bw, float("inf"), bounds)

def test_extrema_over_non_finite_values():
    with pytest.raises(ValueError):
        sample(bw, np.array([0.0, np.inf]), "extrema")
    with pytest.raises(ValueError):
        sample(bw, np.array([0.0, np.nan]), "extrema")

def test_infinite_values_clamp_to_end_colors():
    assert sample(bw, float("inf")) == white
    assert sample(bw, float("-inf"), (0, 10)) == black
