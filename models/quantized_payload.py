"""Quantized BlurHash payload."""

from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class QuantizedPayload:
    """Integer fields of one hash, in serialization order."""
    
    size_flag: int
    max_ac: int
    dc: int
    ac: Tuple[int, ...] = ()
    
    @property
    def components(self) -> Tuple[int, int]:
        """(components_x, components_y) encoded by the size flag."""
        return self.size_flag % 9 + 1, self.size_flag // 9 + 1
