import numpy as np
import pytest

from asciify.errors import ValidationError
from asciify.tone import apply_tone_curve, contrast_factor

ALL_LEVELS = np.arange(256, dtype=np.uint8)


def test_contrast_factor_zero_is_one():
    assert contrast_factor(0.0) == pytest.approx(1.0)


def test_contrast_factor_grows_with_contrast():
    assert contrast_factor(-0.5) < contrast_factor(0.0) < contrast_factor(0.2) < contrast_factor(0.9)


def test_contrast_factor_minus_one_flattens():
    assert contrast_factor(-1.0) == pytest.approx(0.0)


@pytest.mark.parametrize("contrast", [1.1, 2.0, 10.0])
def test_contrast_factor_rejects_degenerate_denominator(contrast):
    with pytest.raises(ValidationError, match="contrast"):
        contrast_factor(contrast)


def test_neutral_curve_is_identity():
    result = apply_tone_curve(ALL_LEVELS, contrast=0.0, gamma=1.0, brightness=0.0)
    np.testing.assert_allclose(result, ALL_LEVELS, atol=1e-9)


def test_preserves_shape_and_keeps_fractional_levels():
    luma = np.full((3, 5), 100, dtype=np.uint8)
    result = apply_tone_curve(luma, contrast=0.2, gamma=1.1, brightness=0.05)
    assert result.shape == (3, 5)
    assert result.dtype == np.float64
    assert result[0, 0] != np.round(result[0, 0])


@pytest.mark.parametrize("contrast", [-0.5, 0.2, 0.8])
def test_contrast_pivots_on_midpoint(contrast):
    result = apply_tone_curve(np.array([128], dtype=np.uint8), contrast=contrast, gamma=1.0, brightness=0.0)
    assert result[0] == pytest.approx(128.0)


def test_contrast_spreads_levels_apart():
    luma = np.array([64, 192], dtype=np.uint8)
    result = apply_tone_curve(luma, contrast=0.5, gamma=1.0, brightness=0.0)
    assert result[0] < 64
    assert result[1] > 192


def test_full_negative_contrast_flattens_to_grey():
    result = apply_tone_curve(ALL_LEVELS, contrast=-1.0, gamma=1.0, brightness=0.0)
    np.testing.assert_allclose(result, 128.0)


def test_gamma_above_one_lifts_midtones():
    luma = np.array([64], dtype=np.uint8)
    lifted = apply_tone_curve(luma, contrast=0.0, gamma=2.0, brightness=0.0)
    lowered = apply_tone_curve(luma, contrast=0.0, gamma=0.5, brightness=0.0)
    assert lowered[0] < 64 < lifted[0]


def test_brightness_applied_after_gamma():
    # gamma first: 255 * (128/255) ** 0.5 = 180.67, + 25.5 = 206.17
    # brightness first would give 255 * (153.5/255) ** 0.5 = 197.8
    result = apply_tone_curve(np.array([128], dtype=np.uint8), contrast=0.0, gamma=2.0, brightness=0.1)
    assert result[0] == pytest.approx(206.1654, abs=1e-3)


def test_brightness_clamps_at_both_ends():
    up = apply_tone_curve(ALL_LEVELS, contrast=0.0, gamma=1.0, brightness=2.0)
    down = apply_tone_curve(ALL_LEVELS, contrast=0.0, gamma=1.0, brightness=-2.0)
    np.testing.assert_array_equal(up, 255)
    np.testing.assert_array_equal(down, 0)


def test_strong_contrast_does_not_produce_nan_for_dark_pixels():
    with np.errstate(all="raise"):
        result = apply_tone_curve(np.array([0, 10, 250, 255], dtype=np.uint8), contrast=0.9, gamma=1.1, brightness=0.0)
    assert result.tolist() == [0, 0, 255, 255]


def test_curve_is_monotonic_for_positive_contrast():
    result = apply_tone_curve(ALL_LEVELS, contrast=0.2, gamma=1.1, brightness=0.05)
    assert np.all(np.diff(result) >= 0)


@pytest.mark.parametrize("gamma", [0.0, -1.0])
def test_non_positive_gamma_rejected(gamma):
    with pytest.raises(ValidationError, match="gamma"):
        apply_tone_curve(ALL_LEVELS, contrast=0.0, gamma=gamma, brightness=0.0)
