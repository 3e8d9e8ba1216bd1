from chromascheme.colors.rgb import ColorUnitRGB, ColorRGBINT
from chromascheme.colors.lab import ColorLab
from chromascheme.difference import colordiff, delta_e_2000
from .samples import samples_ciede2000
import numpy as np
import pytest

def test_sharma_reference_pairs():
    for (lab1, lab2), expected in samples_ciede2000.items():
        assert colordiff(ColorLab(lab1), ColorLab(lab2)) == pytest.approx(expected, abs=1e-4)

def test_vectorized_matches_pairwise():
    pairs = list(samples_ciede2000.items())
    first = np.array([p[0][0] for p in pairs])
    second = np.array([p[0][1] for p in pairs])
    expected = np.array([p[1] for p in pairs])
    assert np.allclose(delta_e_2000(first, second), expected, atol=1e-4)

def test_symmetric():
    for (lab1, lab2), _ in samples_ciede2000.items():
        assert float(delta_e_2000(lab1, lab2)) == pytest.approx(float(delta_e_2000(lab2, lab1)), abs=1e-9)

def test_identical_colors_have_zero_difference():
    teal = ColorUnitRGB((0.0, 0.5, 0.5))
    assert colordiff(teal, teal) == 0.0
    assert colordiff(ColorUnitRGB((1.0, 1.0, 1.0)), ColorRGBINT((255, 255, 255))) == pytest.approx(0.0, abs=1e-6)

def test_raw_tuples_are_unit_rgb():
    assert colordiff((0.0, 0.0, 0.0), ColorUnitRGB((0.0, 0.0, 0.0))) == 0.0
    assert colordiff((0.0, 0.0, 0.0), (1.0, 1.0, 1.0)) == pytest.approx(100.0, abs=1e-2)

def test_one_against_many_broadcasts():
    table = ColorUnitRGB(np.array([[0.0, 0.0, 0.0], [0.5, 0.5, 0.5], [1.0, 1.0, 1.0]]))
    diffs = colordiff(ColorUnitRGB((0.5, 0.5, 0.5)), table)
    assert diffs.shape == (3,)
    assert diffs[1] == pytest.approx(0.0, abs=1e-9)
    assert diffs[0] == pytest.approx(39.745, abs=1e-2)
    assert diffs[2] == pytest.approx(33.415, abs=1e-2)

def test_difference_method():
    red = ColorUnitRGB((1.0, 0.0, 0.0))
    assert red.difference(ColorUnitRGB((1.0, 0.0, 0.0))) == 0.0
    assert isinstance(red.difference(ColorUnitRGB((0.9, 0.0, 0.0))), float)

def test_weights_scale_lightness_term():
    black = ColorLab((0.0, 0.0, 0.0))
    gray = ColorLab((50.0, 0.0, 0.0))
    assert colordiff(black, gray, k_L=2.0) == pytest.approx(colordiff(black, gray) / 2.0)
