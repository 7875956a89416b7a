"""Error hierarchy for the BlurHash codec and batch runner."""

from pathlib import Path
from typing import Optional, Union


class BlurHashError(Exception):
    """Base class for every error raised by this package."""


class ConfigurationError(BlurHashError, ValueError):
    """Component counts or worker settings out of range."""


class ImageDecodeError(BlurHashError):
    """An image file could not be read or parsed."""

    def __init__(self, path: Union[str, Path], cause: Union[BaseException, str, None] = None):
        self.path = Path(path)
        self.cause = cause
        super().__init__(f"{self.path}: {self.reason}")

    @property
    def reason(self) -> str:
        if self.cause is None:
            return "could not decode image"
        if isinstance(self.cause, BaseException):
            return str(self.cause) or type(self.cause).__name__
        return self.cause


class EncodingInvariantError(BlurHashError, RuntimeError):
    """Internal arithmetic invariant broken. Indicates a bug."""


class HashDecodeError(BlurHashError, ValueError):
    """A hash string (or base83 field) is malformed."""

    def __init__(self, message: str, text: Optional[str] = None):
        self.text = text
        super().__init__(message if text is None else f"{message}: {text!r}")
