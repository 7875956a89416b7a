"""Shared utilities."""

from .constants import BASE83_ALPHABET, IMAGE_EXTENSIONS, SIDECAR_SUFFIX
from .metrics import Timer
from .test_images import (
    generate_solid,
    generate_colored_checkerboard,
    generate_horizontal_split,
    generate_gradient,
    generate_noise,
)
from .image_io import load_image, save_image
from .file_discovery import collect_images, sidecar_path, has_sidecar, write_sidecar

__all__ = [
    'BASE83_ALPHABET',
    'IMAGE_EXTENSIONS',
    'SIDECAR_SUFFIX',
    'Timer',
    'generate_solid',
    'generate_colored_checkerboard',
    'generate_horizontal_split',
    'generate_gradient',
    'generate_noise',
    'load_image',
    'save_image',
    'collect_images',
    'sidecar_path',
    'has_sidecar',
    'write_sidecar',
]
