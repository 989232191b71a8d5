"""
Image Decoder для pre-OCR пайплайна.

Декодирование загруженных байтов в numpy array.
Операция отвечает только за проверку формата и декодирование.
"""

import io
from typing import Tuple

import cv2
import numpy as np
from loguru import logger
from PIL import Image as PILImage, UnidentifiedImageError

from .domain.exceptions import ImageDecodingError

# Форматы, которые реально принимаем (по содержимому, не по заявленному MIME)
SUPPORTED_FORMATS = ("PNG", "JPEG")


class ImageDecoder:
    """
    Декодирует байты файла в numpy array (BGR).

    ЦКП: декодированное изображение и формат, определённый по содержимому.
    """

    @staticmethod
    def probe(content: bytes) -> Tuple[str, Tuple[int, int]]:
        """
        Определяет формат и размер БЕЗ полного декодирования.

        Returns:
            (format, (width, height))

        Raises:
            ImageDecodingError: если формат не распознан или не поддерживается
        """
        if not content:
            raise ImageDecodingError("Empty image content")

        try:
            with PILImage.open(io.BytesIO(content)) as pil_img:
                image_format = pil_img.format
                size = pil_img.size
        except (UnidentifiedImageError, OSError) as e:
            raise ImageDecodingError(f"Failed to identify image: {e}") from e

        if image_format not in SUPPORTED_FORMATS:
            raise ImageDecodingError(f"Unsupported image format: {image_format}")

        return image_format, size

    @staticmethod
    def decode(content: bytes) -> np.ndarray:
        """
        Декодирует байты изображения в numpy array.

        Args:
            content: Байты PNG или JPEG файла

        Returns:
            numpy.ndarray (BGR формат, uint8)

        Raises:
            ImageDecodingError: Если не удалось декодировать изображение
        """
        image_format, (w, h) = ImageDecoder.probe(content)

        nparr = np.frombuffer(content, np.uint8)
        image = cv2.imdecode(nparr, cv2.IMREAD_COLOR)

        if image is None:
            raise ImageDecodingError(f"Failed to decode image ({image_format}, {w}x{h})")

        logger.debug(f"[ImageDecoder] Изображение декодировано: {image_format}, размер: {image.shape}")

        return image
