"""Data models for encoding parameters, payloads and results."""

from .encode_params import EncodeParams, check_components, resolve_worker_count
from .errors import (
    BlurHashError,
    ConfigurationError,
    EncodingInvariantError,
    HashDecodeError,
    ImageDecodeError,
)
from .hash_outcome import HashOutcome
from .quantized_payload import QuantizedPayload

__all__ = [
    'EncodeParams',
    'check_components',
    'resolve_worker_count',
    'BlurHashError',
    'ConfigurationError',
    'EncodingInvariantError',
    'HashDecodeError',
    'ImageDecodeError',
    'HashOutcome',
    'QuantizedPayload',
]
