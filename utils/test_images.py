"""Synthetic images for exercising the encoder."""

import numpy as np


def generate_solid(width: int = 64, height: int = 48, color=(200, 120, 40)) -> np.ndarray:
    """Uniform image - only the DC term carries information."""
    img = np.zeros((height, width, 3), dtype=np.uint8)
    img[:, :] = color
    return img


def generate_colored_checkerboard(size: int = 128, block_size: int = 16) -> np.ndarray:
    """High-contrast checkerboard - energy far above the sampled frequencies."""
    img = np.zeros((size, size, 3), dtype=np.uint8)
    
    for i in range(0, size, block_size):
        for j in range(0, size, block_size):
            block_idx = (i // block_size + j // block_size) % 2
            if block_idx == 0:
                img[i:i+block_size, j:j+block_size] = [30, 30, 30]
            else:
                img[i:i+block_size, j:j+block_size] = [220, 220, 220]
    
    return img


def generate_horizontal_split(width: int = 64, height: int = 48,
                              left=(220, 40, 40), right=(40, 40, 220)) -> np.ndarray:
    """Two flat halves - strong first horizontal component."""
    img = np.zeros((height, width, 3), dtype=np.uint8)
    img[:, :width // 2] = left
    img[:, width // 2:] = right
    return img


def generate_gradient(width: int = 96, height: int = 64) -> np.ndarray:
    """Smooth diagonal gradient - low-frequency variation on both axes."""
    ys, xs = np.mgrid[0:height, 0:width]
    t = (xs + ys) / float(width + height - 2)
    img = np.stack([
        40 + t * 180,
        60 + t * 140,
        120 + t * 100,
    ], axis=-1)
    return np.clip(img, 0, 255).astype(np.uint8)


def generate_noise(width: int = 64, height: int = 64, seed: int = 123) -> np.ndarray:
    """Uniform random pixels."""
    rng = np.random.default_rng(seed)
    return rng.integers(0, 256, (height, width, 3), dtype=np.uint8)
