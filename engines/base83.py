"""Base83 fixed-width integer codec."""

from typing import Optional

from models.errors import EncodingInvariantError, HashDecodeError
from utils.constants import BASE83_ALPHABET, BASE83_INDEX


def encode(value: int, length: int) -> str:
    """Most-significant digit first, zero-padded to `length` digits."""
    if value < 0 or value >= 83 ** length:
        raise EncodingInvariantError(f"{value} does not fit in {length} base83 digits")
    digits = []
    for _ in range(length):
        value, digit = divmod(value, 83)
        digits.append(BASE83_ALPHABET[digit])
    return ''.join(reversed(digits))


def decode(text: str, length: Optional[int] = None) -> int:
    """Inverse of encode. Fails on foreign characters or a width mismatch."""
    if length is not None and len(text) != length:
        raise HashDecodeError(f"Expected {length} base83 digits, got {len(text)}", text)
    value = 0
    for char in text:
        try:
            digit = BASE83_INDEX[char]
        except KeyError:
            raise HashDecodeError(f"Invalid base83 character {char!r}", text) from None
        value = value * 83 + digit
    return value
