"""
Binarizer для pre-OCR пайплайна.

Жёсткий глобальный порог: L > threshold -> 255 (белый), иначе 0 (чёрный).
Не адаптивный: бюллетени - печатные таблицы с сильным контрастом.
"""

from dataclasses import dataclass

import cv2
import numpy as np
from loguru import logger

from config.settings import BINARIZATION_THRESHOLD


@dataclass
class BinarizeResult:
    """Результат бинаризации."""

    image: np.ndarray       # uint8, только 0 и 255
    threshold: int
    white_ratio: float      # Доля белых пикселей (для логов)


class Binarizer:
    """
    Бинаризует карту яркости фиксированным порогом.
    """

    def __init__(self, threshold: int = BINARIZATION_THRESHOLD):
        self.threshold = threshold

    def process(self, luminance: np.ndarray) -> BinarizeResult:
        """
        Args:
            luminance: Карта яркости (float32 или uint8, 1 канал)

        Returns:
            BinarizeResult с uint8 изображением 0/255
        """
        # THRESH_BINARY: dst = maxval если src > thresh, иначе 0
        _, binary = cv2.threshold(
            luminance.astype(np.float32), float(self.threshold), 255.0, cv2.THRESH_BINARY
        )
        binary = binary.astype(np.uint8)

        white_ratio = float(np.count_nonzero(binary)) / binary.size if binary.size else 0.0
        logger.debug(f"[Binarizer] Порог {self.threshold}: белых пикселей {white_ratio:.1%}")

        return BinarizeResult(image=binary, threshold=self.threshold, white_ratio=white_ratio)
