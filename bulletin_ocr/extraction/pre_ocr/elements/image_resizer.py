"""
Image Resizer для pre-OCR пайплайна.

Ограничение размера по большей стороне:
- Большие фото с телефона уменьшаются до MAX_IMAGE_SIZE
- Маленькие изображения НЕ увеличиваются (потолок, а не цель)
- Пропорции сохраняются, дробные размеры округляются (не отбрасываются)
"""

from dataclasses import dataclass

import cv2
import numpy as np
from loguru import logger

from config.settings import MAX_IMAGE_SIZE
from ..domain.exceptions import ResizeError


@dataclass
class ResizeResult:
    """Результат изменения размера."""
    image: np.ndarray
    original_size: tuple[int, int]  # (width, height)
    resized_size: tuple[int, int]   # (width, height)
    scale_factor: float
    was_resized: bool


class ImageResizer:
    """
    Уменьшает изображение так, чтобы большая сторона была <= max_size.
    """

    def __init__(self, max_size: int = MAX_IMAGE_SIZE):
        self.max_size = max_size

    def compute_target_size(self, width: int, height: int) -> tuple[int, int]:
        """
        Целевой размер (width, height) без загрузки изображения.

        Большая сторона становится ровно max_size, меньшая округляется.
        """
        longest = max(width, height)
        if longest <= self.max_size:
            return (width, height)

        scale = self.max_size / longest

        if width >= height:
            new_w = self.max_size
            new_h = max(1, int(round(height * scale)))
        else:
            new_h = self.max_size
            new_w = max(1, int(round(width * scale)))

        return (new_w, new_h)

    def process(self, image: np.ndarray) -> ResizeResult:
        """
        Уменьшает изображение при необходимости.

        Args:
            image: Входное изображение (BGR или grayscale)

        Returns:
            ResizeResult
        """
        h, w = image.shape[:2]
        original_size = (w, h)
        target_size = self.compute_target_size(w, h)

        if target_size == original_size:
            logger.debug(f"[ImageResizer] Размер в пределах {self.max_size}px: {w}x{h}")
            return ResizeResult(
                image=image,
                original_size=original_size,
                resized_size=original_size,
                scale_factor=1.0,
                was_resized=False,
            )

        try:
            resized = cv2.resize(image, target_size, interpolation=cv2.INTER_AREA)
        except cv2.error as e:
            raise ResizeError(f"Failed to resize {w}x{h} -> {target_size}: {e}") from e

        scale_factor = self.max_size / max(w, h)

        logger.debug(
            f"[ImageResizer] {w}x{h} → {target_size[0]}x{target_size[1]} (x{scale_factor:.3f})"
        )

        return ResizeResult(
            image=resized,
            original_size=original_size,
            resized_size=target_size,
            scale_factor=scale_factor,
            was_resized=True,
        )
