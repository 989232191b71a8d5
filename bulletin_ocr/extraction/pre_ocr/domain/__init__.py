"""Pre-OCR Domain."""

from .exceptions import PreOCRError, ImageDecodingError, ResizeError, EncodingError

__all__ = [
    "PreOCRError",
    "ImageDecodingError",
    "ResizeError",
    "EncodingError",
]
