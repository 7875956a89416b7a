"""Image I/O using OpenCV."""

import logging
from pathlib import Path
from typing import Union

import cv2
import numpy as np

from models.errors import ImageDecodeError

logger = logging.getLogger(__name__)


def load_image(path: Union[str, Path]) -> np.ndarray:
    """Load image as RGB uint8. Raises ImageDecodeError on any failure."""
    path = Path(path)
    try:
        data = path.read_bytes()
    except OSError as e:
        raise ImageDecodeError(path, e) from e
    if not data:
        raise ImageDecodeError(path, "file is empty")
    
    try:
        img = cv2.imdecode(np.frombuffer(data, dtype=np.uint8), cv2.IMREAD_COLOR)
    except cv2.error as e:
        raise ImageDecodeError(path, e) from e
    if img is None:
        raise ImageDecodeError(path, "unsupported or corrupt image data")
    
    logger.debug("Decoded %s (%dx%d)", path, img.shape[1], img.shape[0])
    return cv2.cvtColor(img, cv2.COLOR_BGR2RGB)


def save_image(image: np.ndarray, path: Union[str, Path]) -> None:
    """Save RGB image."""
    if not cv2.imwrite(str(path), cv2.cvtColor(image, cv2.COLOR_RGB2BGR)):
        raise OSError(f"Could not write image to {path}")
