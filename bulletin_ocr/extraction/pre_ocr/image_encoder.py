"""
Image Encoder для pre-OCR пайплайна.

Кодирование numpy array изображений в PNG bytes.
PNG без потерь: бинаризованное изображение остаётся строго 0/255.
"""

import cv2
import numpy as np
from loguru import logger

from .domain.exceptions import EncodingError


class ImageEncoder:
    """
    Кодирует numpy array изображение в PNG bytes.

    ЦКП: PNG байты изображения.
    """

    @staticmethod
    def encode(image: np.ndarray, compression: int = 3) -> bytes:
        """
        Кодирует numpy array в PNG bytes.

        Args:
            image: Изображение в формате numpy.ndarray (BGR или Grayscale)
            compression: Уровень сжатия PNG (0-9), на содержимое не влияет

        Returns:
            PNG байты изображения

        Raises:
            EncodingError: Если не удалось закодировать изображение
        """
        success, buffer = cv2.imencode(
            ".png",
            image,
            [cv2.IMWRITE_PNG_COMPRESSION, compression]
        )

        if not success:
            raise EncodingError("Failed to encode processed image to PNG")

        encoded_bytes = buffer.tobytes()

        logger.debug(
            f"[ImageEncoder] Изображение закодировано: "
            f"размер {len(encoded_bytes)} байт, сжатие {compression}"
        )

        return encoded_bytes
