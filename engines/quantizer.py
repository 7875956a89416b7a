"""Quantization of BlurHash components."""

import math
from typing import Tuple

import numpy as np

from engines.color_space import linear_to_srgb, sign_pow, srgb_to_linear
from models.errors import EncodingInvariantError
from models.quantized_payload import QuantizedPayload
from utils.constants import AC_LEVELS, AC_ZERO_LEVEL, MAX_AC_LEVELS, MAX_AC_SCALE


def encode_dc(value) -> int:
    """Linear DC triple to a packed 24-bit sRGB integer."""
    r, g, b = (int(c) for c in linear_to_srgb(value))
    return (r << 16) + (g << 8) + b


def decode_dc(value: int) -> np.ndarray:
    """Packed 24-bit sRGB integer to a linear triple."""
    channels = np.array([value >> 16, (value >> 8) & 255, value & 255])
    return srgb_to_linear(channels)


def quantize_max_ac(ac: np.ndarray) -> Tuple[int, float]:
    """Quantized maximum AC magnitude and the real maximum it stands for."""
    if ac.size == 0:
        return 0, 1.0
    actual = float(np.max(np.abs(ac)))
    quantized = int(max(0, min(MAX_AC_LEVELS, math.floor(actual * MAX_AC_SCALE - 0.5))))
    return quantized, (quantized + 1) / MAX_AC_SCALE


def encode_ac(value, maximum_value: float):
    """Quantize AC triples to base-19 packed integers.
    
    Accepts one (3,) triple or an (N, 3) array; each channel maps to 0..18
    with 9 standing for zero.
    """
    scaled = sign_pow(np.asarray(value, dtype=np.float64) / maximum_value, 0.5)
    quant = np.clip(np.floor(scaled * 9.0 + 9.5), 0, AC_LEVELS - 1).astype(np.int64)
    packed = quant[..., 0] * AC_LEVELS * AC_LEVELS + quant[..., 1] * AC_LEVELS + quant[..., 2]
    return int(packed) if packed.ndim == 0 else packed


def decode_ac(value, maximum_value: float) -> np.ndarray:
    """Base-19 packed integer(s) to linear AC triple(s)."""
    v = np.asarray(value, dtype=np.int64)
    quant = np.stack([v // (AC_LEVELS * AC_LEVELS), (v // AC_LEVELS) % AC_LEVELS, v % AC_LEVELS], axis=-1)
    return sign_pow((quant - AC_ZERO_LEVEL) / float(AC_ZERO_LEVEL), 2.0) * maximum_value


def quantize(coeffs: np.ndarray) -> QuantizedPayload:
    """Component matrix (cy, cx, 3) to the integer payload of a hash."""
    if coeffs.ndim != 3 or coeffs.shape[2] != 3:
        raise EncodingInvariantError(f"Expected (cy, cx, 3) components, got shape {coeffs.shape}")
    components_y, components_x = coeffs.shape[:2]
    
    # Row-major (j, i) order without the DC cell
    flat = coeffs.reshape(-1, 3)
    dc, ac = flat[0], flat[1:]
    if len(ac) != components_x * components_y - 1:
        raise EncodingInvariantError(
            f"{len(ac)} AC terms for {components_x}x{components_y} components"
        )
    
    max_ac, maximum_value = quantize_max_ac(ac)
    ac_codes = encode_ac(ac, maximum_value) if len(ac) else np.zeros(0, dtype=np.int64)
    
    return QuantizedPayload(
        size_flag=(components_x - 1) + (components_y - 1) * 9,
        max_ac=max_ac,
        dc=encode_dc(dc),
        ac=tuple(int(code) for code in ac_codes),
    )


def dequantize(payload: QuantizedPayload, punch: float = 1.0) -> np.ndarray:
    """Integer payload back to a (cy, cx, 3) linear component matrix."""
    components_x, components_y = payload.components
    if len(payload.ac) != components_x * components_y - 1:
        raise EncodingInvariantError(
            f"{len(payload.ac)} AC codes for {components_x}x{components_y} components"
        )
    maximum_value = (payload.max_ac + 1) / MAX_AC_SCALE
    
    coeffs = np.zeros((components_x * components_y, 3))
    coeffs[0] = decode_dc(payload.dc)
    if payload.ac:
        coeffs[1:] = decode_ac(np.array(payload.ac), maximum_value * punch)
    return coeffs.reshape(components_y, components_x, 3)
