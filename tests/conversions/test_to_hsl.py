from chromascheme.conversions.to_hsl import np_unit_rgb_to_hsl, np_hsv_to_hsl
from ..samples import samples_rgb_hsv, samples_rgb_hsl
import numpy as np

def test_unit_rgb_to_hsl_numpy():
    the_matrix = np.array(list(samples_rgb_hsl.keys()))
    expected = np.array(list(samples_rgb_hsl.values()))
    hsl = np_unit_rgb_to_hsl(the_matrix[..., 0], the_matrix[..., 1], the_matrix[..., 2])
    assert np.allclose(hsl, expected, atol=1e-9)

def test_hsv_to_hsl_numpy():
    hsv = np.array([samples_rgb_hsv[k] for k in samples_rgb_hsl])
    expected = np.array(list(samples_rgb_hsl.values()))
    result = np_hsv_to_hsl(hsv[..., 0], hsv[..., 1], hsv[..., 2])
    assert np.allclose(result, expected, atol=1e-9)

def test_saturation_stays_in_unit_range():
    rgb = np.random.default_rng(11).random((200, 3))
    hsl = np_unit_rgb_to_hsl(rgb[..., 0], rgb[..., 1], rgb[..., 2])
    assert np.all((hsl[..., 1] >= 0.0) & (hsl[..., 1] <= 1.0))
