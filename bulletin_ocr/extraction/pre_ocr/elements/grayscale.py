"""
Grayscale Converter для pre-OCR пайплайна.

Конвертация цветного изображения в яркость по весам ITU-R BT.601:
    L = 0.299·R + 0.587·G + 0.114·B

Результат float32 без округления: порог бинаризации применяется
к точному значению яркости.
"""

from dataclasses import dataclass

import numpy as np
from loguru import logger

from config.settings import LUMA_WEIGHTS


@dataclass
class GrayscaleResult:
    """Результат конвертации в grayscale."""

    image: np.ndarray               # float32, значения 0.0 - 255.0
    original_channels: int          # 1, 3 или 4
    was_converted: bool
    original_size: tuple[int, int]  # (width, height)


class GrayscaleConverter:
    """
    Конвертирует изображение (BGR, BGRA или grayscale) в карту яркости.
    """

    def __init__(self, weights: tuple[float, float, float] = LUMA_WEIGHTS):
        self.weights = weights

    def process(self, image: np.ndarray) -> GrayscaleResult:
        """
        Конвертирует изображение в яркость.

        Args:
            image: Входное изображение (BGR, BGRA или уже grayscale)

        Returns:
            GrayscaleResult с float32 картой яркости
        """
        h, w = image.shape[:2]
        original_size = (w, h)

        if len(image.shape) == 2:
            logger.debug(f"[Grayscale] Изображение уже в grayscale ({w}x{h})")
            return GrayscaleResult(
                image=image.astype(np.float32),
                original_channels=1,
                was_converted=False,
                original_size=original_size,
            )

        original_channels = image.shape[2]
        w_r, w_g, w_b = self.weights

        # OpenCV хранит каналы как BGR(A)
        pixels = image.astype(np.float32)
        luminance = w_r * pixels[:, :, 2] + w_g * pixels[:, :, 1] + w_b * pixels[:, :, 0]

        logger.debug(f"[Grayscale] Конвертировано: {original_channels} каналов -> 1 ({w}x{h})")

        return GrayscaleResult(
            image=luminance,
            original_channels=original_channels,
            was_converted=True,
            original_size=original_size,
        )
