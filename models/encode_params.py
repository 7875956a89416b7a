"""Encoding parameters."""

import numbers
import os
from dataclasses import dataclass
from typing import Optional

from models.errors import ConfigurationError
from utils.constants import MIN_COMPONENTS, MAX_COMPONENTS


def check_components(components_x: int, components_y: int) -> None:
    """Reject component counts outside [1, 9]."""
    for name, value in (('components_x', components_x), ('components_y', components_y)):
        if isinstance(value, bool) or not isinstance(value, numbers.Integral):
            raise ConfigurationError(f"{name} must be an integer, got {value!r}")
        if not (MIN_COMPONENTS <= value <= MAX_COMPONENTS):
            raise ConfigurationError(
                f"{name} must be {MIN_COMPONENTS}-{MAX_COMPONENTS}, got {value}"
            )


@dataclass(frozen=True)
class EncodeParams:
    """BlurHash encoding parameters shared by every image in a batch."""
    
    components_x: int = 4
    components_y: int = 3
    max_workers: Optional[int] = None
    
    def __post_init__(self):
        check_components(self.components_x, self.components_y)
        if self.max_workers is not None and self.max_workers < 1:
            raise ConfigurationError(f"max_workers must be >= 1, got {self.max_workers}")
    
    @property
    def size_flag(self) -> int:
        return (self.components_x - 1) + (self.components_y - 1) * 9
    
    @property
    def hash_length(self) -> int:
        return 4 + 2 * self.components_x * self.components_y


def resolve_worker_count(params: EncodeParams, job_count: Optional[int] = None) -> int:
    """CPU count, capped by params.max_workers and by the number of jobs."""
    workers = os.cpu_count() or 1
    if params.max_workers is not None:
        workers = min(workers, params.max_workers)
    if job_count is not None:
        workers = min(workers, max(job_count, 1))
    return workers
