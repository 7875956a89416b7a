"""sRGB <-> linear light conversion."""

import numpy as np


def srgb_to_linear(value):
    """Linear-light value of an 8-bit sRGB channel (scalar or array)."""
    v = np.asarray(value, dtype=np.float64) / 255.0
    linear = np.where(v <= 0.04045, v / 12.92, ((v + 0.055) / 1.055) ** 2.4)
    return float(linear) if linear.ndim == 0 else linear


# Lookup table indexed by the 8-bit channel value
SRGB_TO_LINEAR_LUT = srgb_to_linear(np.arange(256))


def linear_to_srgb(value):
    """8-bit sRGB channel for a linear value, clamped to [0, 1], rounded half up."""
    v = np.clip(np.asarray(value, dtype=np.float64), 0.0, 1.0)
    srgb = np.where(
        v <= 0.0031308,
        v * 12.92,
        1.055 * np.power(v, 1.0 / 2.4) - 0.055,
    )
    result = np.floor(srgb * 255.0 + 0.5).astype(np.int64)
    return int(result) if result.ndim == 0 else result


def image_to_linear(image: np.ndarray) -> np.ndarray:
    """uint8 (H, W, 3) image to float64 linear light via the LUT."""
    return SRGB_TO_LINEAR_LUT[image]


def sign_pow(value, exponent: float):
    """|value|**exponent carrying the sign of value."""
    v = np.asarray(value, dtype=np.float64)
    result = np.copysign(np.power(np.abs(v), exponent), v)
    return float(result) if result.ndim == 0 else result
