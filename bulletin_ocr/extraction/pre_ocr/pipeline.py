"""
Pre-OCR Pipeline для домена Extraction.

Нормализует фото бюллетеня для OCR:
0. Decode: проверка формата (Pillow) + декодирование (OpenCV)
1. Resize: большая сторона <= MAX_IMAGE_SIZE
2. Grayscale: яркость по BT.601
3. Binarize: глобальный порог 128
4. Encode: PNG bytes

Операция чистая и детерминированная: нет общего состояния,
можно запускать параллельно в пуле без синхронизации.
"""

from typing import Optional

from loguru import logger

from contracts.d1_extraction_dto import RawImage, PreprocessedImage
from ..domain.interfaces import IImagePreprocessor
from .image_decoder import ImageDecoder
from .image_encoder import ImageEncoder
from .elements.image_resizer import ImageResizer
from .elements.grayscale import GrayscaleConverter
from .elements.binarizer import Binarizer


class BulletinPreprocessor(IImagePreprocessor):
    """
    Препроцессор фото бюллетеня (resize -> grayscale -> binarize).

    При enabled=False только декодирует и перекодирует в PNG,
    содержимое изображения не меняется.
    """

    def __init__(
        self,
        resizer: Optional[ImageResizer] = None,
        grayscale: Optional[GrayscaleConverter] = None,
        binarizer: Optional[Binarizer] = None,
    ) -> None:
        self.resizer = resizer or ImageResizer()
        self.grayscale = grayscale or GrayscaleConverter()
        self.binarizer = binarizer or Binarizer()

    def prepare(self, image: RawImage, enabled: bool = True) -> PreprocessedImage:
        """
        Готовит изображение к OCR.

        Args:
            image: Загруженный файл
            enabled: Применять ли resize/grayscale/binarize

        Returns:
            PreprocessedImage (PNG)

        Raises:
            ImageDecodingError: если файл не декодируется
        """
        logger.debug(f"[PreOCR] Обработка: {image.source_name} (enabled={enabled})")

        decoded = ImageDecoder.decode(image.content)
        h, w = decoded.shape[:2]
        original_size = (w, h)

        if not enabled:
            content = ImageEncoder.encode(decoded)
            logger.debug(f"[PreOCR] Препроцессинг отключён, только PNG: {w}x{h}")
            return PreprocessedImage(
                content=content,
                width=w,
                height=h,
                original_size=original_size,
                applied=[],
            )

        applied = []

        # 1. Resize
        resize_result = self.resizer.process(decoded)
        if resize_result.was_resized:
            applied.append("resize")

        # 2. Grayscale
        gray_result = self.grayscale.process(resize_result.image)
        applied.append("grayscale")

        # 3. Binarize
        binary_result = self.binarizer.process(gray_result.image)
        applied.append("binarize")

        # 4. Encode
        content = ImageEncoder.encode(binary_result.image)
        out_w, out_h = resize_result.resized_size

        logger.info(
            f"[PreOCR] Готово: {image.source_name} "
            f"({w}x{h} → {out_w}x{out_h}, шаги={applied})"
        )

        return PreprocessedImage(
            content=content,
            width=out_w,
            height=out_h,
            original_size=original_size,
            applied=applied,
        )
