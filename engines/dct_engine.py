"""Cosine basis projection and synthesis for BlurHash components."""

import numpy as np

from models.errors import EncodingInvariantError


def cosine_table(components: int, size: int) -> np.ndarray:
    """(components, size) table of cos(pi * k * n / size)."""
    k = np.arange(components, dtype=np.float64)[:, None]
    n = np.arange(size, dtype=np.float64)[None, :]
    return np.cos(np.pi * k * n / size)


def normalization(components_x: int, components_y: int, width: int, height: int) -> np.ndarray:
    """Per-component scale: 1/(W*H) for DC, 2/(W*H) for every AC term."""
    scale = np.full((components_y, components_x), 2.0 / (width * height))
    scale[0, 0] = 1.0 / (width * height)
    return scale


def compute_components(linear: np.ndarray, components_x: int, components_y: int) -> np.ndarray:
    """Project a linear (H, W, 3) image onto the cosine basis.
    
    Returns a (components_y, components_x, 3) matrix; [0, 0] is the DC term.
    The basis is separable, so rows are reduced first against the y table and
    the result against the x table.
    """
    if linear.ndim != 3 or linear.shape[2] != 3:
        raise EncodingInvariantError(f"Expected (H, W, 3) linear image, got shape {linear.shape}")
    height, width = linear.shape[:2]
    if width < 1 or height < 1:
        raise EncodingInvariantError(f"Empty image: {width}x{height}")
    
    cos_y = cosine_table(components_y, height)
    cos_x = cosine_table(components_x, width)
    
    rows = np.tensordot(cos_y, linear, axes=(1, 0))       # (cy, W, 3)
    coeffs = np.einsum('ix,jxc->jic', cos_x, rows)       # (cy, cx, 3)
    coeffs *= normalization(components_x, components_y, width, height)[:, :, None]
    
    if coeffs.shape != (components_y, components_x, 3):
        raise EncodingInvariantError(
            f"Coefficient matrix has shape {coeffs.shape}, "
            f"expected {(components_y, components_x, 3)}"
        )
    return coeffs


def compute_components_direct(linear: np.ndarray, components_x: int, components_y: int) -> np.ndarray:
    """Unfactored reference: one full basis image per (i, j)."""
    height, width = linear.shape[:2]
    ys = np.arange(height, dtype=np.float64)[:, None]
    xs = np.arange(width, dtype=np.float64)[None, :]
    coeffs = np.zeros((components_y, components_x, 3))
    for j in range(components_y):
        for i in range(components_x):
            norm = 1.0 if i == 0 and j == 0 else 2.0
            basis = norm * np.cos(np.pi * i * xs / width) * np.cos(np.pi * j * ys / height)
            coeffs[j, i] = (basis[:, :, None] * linear).sum(axis=(0, 1)) / (width * height)
    return coeffs


def synthesize(coeffs: np.ndarray, width: int, height: int) -> np.ndarray:
    """Inverse of the projection: (height, width, 3) linear image from a component matrix."""
    components_y, components_x = coeffs.shape[:2]
    cos_y = cosine_table(components_y, height)
    cos_x = cosine_table(components_x, width)
    return np.einsum('jy,ix,jic->yxc', cos_y, cos_x, coeffs, optimize=True)
