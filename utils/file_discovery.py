"""Resolve CLI inputs into image paths and manage .bh sidecar files."""

import logging
from pathlib import Path
from typing import Iterable, List, Union

from utils.constants import IMAGE_EXTENSIONS, SIDECAR_SUFFIX

logger = logging.getLogger(__name__)


def is_image_file(path: Union[str, Path]) -> bool:
    return Path(path).suffix.lower() in IMAGE_EXTENSIONS


def walk_images(directory: Path) -> List[Path]:
    """All image files below directory, sorted for a stable order."""
    return sorted(p for p in directory.rglob('*') if p.is_file() and is_image_file(p))


def collect_images(inputs: Iterable[Union[str, Path]]) -> List[Path]:
    """Expand files and directories into an ordered, de-duplicated path list.
    
    An empty input means the current directory. Paths that do not exist are
    logged and skipped; files without an image extension are ignored.
    """
    paths: List[Path] = []
    seen = set()
    
    def add(path: Path):
        key = path.resolve()
        if key not in seen:
            seen.add(key)
            paths.append(path)
    
    for raw in inputs:
        entry = Path(raw) if str(raw) else Path('.')
        if entry.is_dir():
            for path in walk_images(entry):
                add(path)
        elif entry.is_file():
            if is_image_file(entry):
                add(entry)
            else:
                logger.info("Skipping %s: not an image file", entry)
        else:
            logger.warning("Skipping %s: no such file or directory", entry)
    return paths


def sidecar_path(path: Union[str, Path]) -> Path:
    """photo.png -> photo.png.bh"""
    path = Path(path)
    return path.with_name(path.name + SIDECAR_SUFFIX)


def has_sidecar(path: Union[str, Path]) -> bool:
    return sidecar_path(path).exists()


def write_sidecar(path: Union[str, Path], blurhash: str) -> Path:
    """Write the hash next to its image and return the sidecar path."""
    target = sidecar_path(path)
    target.write_text(blurhash, encoding='ascii')
    return target
