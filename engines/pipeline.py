"""Single-image BlurHash encode and decode."""

from typing import Tuple

import numpy as np

from engines import base83
from engines.color_space import image_to_linear, linear_to_srgb
from engines.dct_engine import compute_components, synthesize
from engines.quantizer import dequantize, quantize
from models.encode_params import check_components
from models.errors import EncodingInvariantError, HashDecodeError
from models.quantized_payload import QuantizedPayload


def encode(image_rgb: np.ndarray, components_x: int = 4, components_y: int = 3) -> str:
    """BlurHash of an (H, W, 3) or (H, W, 4) uint8 RGB(A) image. Alpha is ignored."""
    check_components(components_x, components_y)
    
    if image_rgb.ndim != 3 or image_rgb.shape[2] not in (3, 4):
        raise EncodingInvariantError(f"Expected (H, W, 3|4) pixel array, got shape {image_rgb.shape}")
    if image_rgb.dtype != np.uint8:
        raise EncodingInvariantError(f"Expected uint8 pixels, got {image_rgb.dtype}")
    if image_rgb.shape[0] < 1 or image_rgb.shape[1] < 1:
        raise EncodingInvariantError(f"Empty image: {image_rgb.shape[1]}x{image_rgb.shape[0]}")
    
    linear = image_to_linear(image_rgb[:, :, :3])
    coeffs = compute_components(linear, components_x, components_y)
    return encode_payload(quantize(coeffs))


def encode_payload(payload: QuantizedPayload) -> str:
    """Serialize: size flag, max AC, 4 DC digits, 2 digits per AC term."""
    parts = [
        base83.encode(payload.size_flag, 1),
        base83.encode(payload.max_ac, 1),
        base83.encode(payload.dc, 4),
    ]
    parts.extend(base83.encode(code, 2) for code in payload.ac)
    return ''.join(parts)


def components(blurhash: str) -> Tuple[int, int]:
    """(components_x, components_y) from the size flag of a hash."""
    if len(blurhash) < 6:
        raise HashDecodeError("BlurHash must be at least 6 characters", blurhash)
    size_flag = base83.decode(blurhash[0], 1)
    return size_flag % 9 + 1, size_flag // 9 + 1


def decode_payload(blurhash: str) -> QuantizedPayload:
    """Parse a hash string into its integer fields."""
    components_x, components_y = components(blurhash)
    expected = 4 + 2 * components_x * components_y
    if len(blurhash) != expected:
        raise HashDecodeError(
            f"BlurHash length {len(blurhash)} does not match "
            f"{components_x}x{components_y} components (expected {expected})",
            blurhash,
        )
    
    ac = tuple(
        base83.decode(blurhash[pos:pos + 2], 2)
        for pos in range(6, expected, 2)
    )
    return QuantizedPayload(
        size_flag=base83.decode(blurhash[0], 1),
        max_ac=base83.decode(blurhash[1], 1),
        dc=base83.decode(blurhash[2:6], 4),
        ac=ac,
    )


def decode(blurhash: str, width: int, height: int, punch: float = 1.0) -> np.ndarray:
    """Render a hash as a (height, width, 3) uint8 placeholder image.
    
    `punch` scales the AC terms; values above 1 exaggerate contrast.
    """
    if width < 1 or height < 1:
        raise ValueError(f"Output size must be positive, got {width}x{height}")
    
    coeffs = dequantize(decode_payload(blurhash), punch)
    linear = synthesize(coeffs, width, height)
    return linear_to_srgb(linear).astype(np.uint8)
