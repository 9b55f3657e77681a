import numpy as np

from asciify.errors import ValidationError

MIDPOINT = 128.0


def contrast_factor(contrast: float) -> float:
    """Scale factor for the classic ``259`` contrast curve, with ``contrast`` in roughly -1..1."""
    denominator = 255 * (259 - contrast * 255)
    if denominator <= 0:
        raise ValidationError("contrast", f"{contrast} makes the contrast curve degenerate")
    return (259 * (contrast * 255 + 255)) / denominator


def apply_tone_curve(luma: np.ndarray, contrast: float, gamma: float, brightness: float) -> np.ndarray:
    """Apply contrast, then gamma, then brightness to a luminance array.

    Returns a float64 array of the same shape, clamped to 0-255 but not
    quantized. Contrast pivots on the midpoint before gamma reshapes the
    curve; brightness is an additive trim in 0-1 units applied last.
    """
    if gamma <= 0:
        raise ValidationError("gamma", f"must be greater than 0, got {gamma}")
    factor = contrast_factor(contrast)

    v = np.asarray(luma, dtype=np.float64)
    v = factor * (v - MIDPOINT) + MIDPOINT
    # Negative levels have no real fractional power; treat them as black
    v = np.maximum(v, 0.0)
    v = 255.0 * (v / 255.0) ** (1.0 / gamma)
    v = v + brightness * 255.0
    return np.clip(v, 0.0, 255.0)
