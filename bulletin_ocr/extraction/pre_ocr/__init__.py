"""
Pre-OCR: подготовка фото бюллетеня к распознаванию.
"""

from .pipeline import BulletinPreprocessor
from .image_decoder import ImageDecoder
from .image_encoder import ImageEncoder

__all__ = [
    "BulletinPreprocessor",
    "ImageDecoder",
    "ImageEncoder",
]
