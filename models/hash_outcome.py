"""Per-image result of a batch run."""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from models.errors import ImageDecodeError


@dataclass
class HashOutcome:
    """Hash or decode failure for one input path."""
    
    index: int
    path: Path
    blurhash: Optional[str] = None
    error: Optional[ImageDecodeError] = None
    
    # Runtime
    load_time_ms: float = 0.0
    encode_time_ms: float = 0.0
    
    @property
    def ok(self) -> bool:
        return self.blurhash is not None and self.error is None
    
    def describe(self) -> str:
        if self.ok:
            return f"{self.path}: {self.blurhash}"
        reason = self.error.reason if self.error is not None else "no result"
        return f"{self.path}: error: {reason}"
