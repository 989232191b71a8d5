"""Элементы pre-OCR: каждый делает ровно одно преобразование."""

from .image_resizer import ImageResizer, ResizeResult
from .grayscale import GrayscaleConverter, GrayscaleResult
from .binarizer import Binarizer, BinarizeResult

__all__ = [
    "ImageResizer",
    "ResizeResult",
    "GrayscaleConverter",
    "GrayscaleResult",
    "Binarizer",
    "BinarizeResult",
]
