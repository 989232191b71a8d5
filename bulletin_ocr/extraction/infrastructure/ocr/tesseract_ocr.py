"""
OCR: Tesseract интеграция (через pytesseract).

Движок по умолчанию:
- Ограниченный набор символов (tessedit_char_whitelist)
- Сохранение пробелов между словами (preserve_interword_spaces)
- Подсказка языка: fra, eng или fra+eng
- Таймаут на вызов

Текст собирается из image_to_data построчно, уверенность = средняя
уверенность слов / 100. Один вызов движка на прогон.
"""

import io
import shlex
import time
from typing import Any, Dict, List, Tuple

import pytesseract
from loguru import logger
from PIL import Image as PILImage

from config.settings import TESSERACT_CMD
from contracts.d1_extraction_dto import PreprocessedImage, RecognizedText
from ....domain.contracts import OcrLanguage, OCRSettings
from ...domain.interfaces import IOCRProvider
from ...domain.exceptions import OCRProviderError


class TesseractOCR(IOCRProvider):
    """
    Обёртка над Tesseract.

    Реализует интерфейс IOCRProvider. Экземпляр живёт один прогон.
    """

    ENGINE_NAME = "tesseract"

    def __init__(self, settings: OCRSettings, psm: int = 6, oem: int = 1):
        """
        Args:
            settings: Настройки OCR на прогон
            psm: Page Segmentation Mode (6 = единый блок текста, подходит для таблиц)
            oem: OCR Engine Mode (1 = LSTM)
        """
        self.settings = settings
        self.psm = psm
        self.oem = oem
        self._closed = False

        if TESSERACT_CMD:
            pytesseract.pytesseract.tesseract_cmd = TESSERACT_CMD

        logger.debug(
            f"[TesseractOCR] Инициализирован (lang={settings.language.value}, "
            f"psm={psm}, timeout={settings.timeout_seconds}s)"
        )

    def build_config(self) -> str:
        """Строка конфигурации tesseract для текущих настроек."""
        parts = [
            f"--oem {self.oem}",
            f"--psm {self.psm}",
            "-c " + shlex.quote(f"tessedit_char_whitelist={self.settings.char_whitelist}"),
        ]
        if self.settings.preserve_interword_spaces:
            parts.append("-c preserve_interword_spaces=1")
        return " ".join(parts)

    def recognize(self, image: PreprocessedImage, language: OcrLanguage) -> RecognizedText:
        """
        Распознаёт текст на изображении.

        Args:
            image: Подготовленное изображение (PNG)
            language: Подсказка языка

        Returns:
            RecognizedText

        Raises:
            OCRProviderError: сбой или таймаут tesseract
        """
        if self._closed:
            raise OCRProviderError(
                message="Движок уже освобождён",
                component="TesseractOCR"
            )

        logger.debug(f"[TesseractOCR] Распознавание: {image.width}x{image.height}, lang={language.value}")
        started = time.monotonic()

        try:
            with PILImage.open(io.BytesIO(image.content)) as pil_img:
                data = pytesseract.image_to_data(
                    pil_img,
                    lang=language.value,
                    config=self.build_config(),
                    output_type=pytesseract.Output.DICT,
                    timeout=self.settings.timeout_seconds,
                )
        except (pytesseract.TesseractError, pytesseract.TesseractNotFoundError, OSError) as e:
            raise OCRProviderError(
                message="Ошибка tesseract",
                component="TesseractOCR",
                original_error=e
            )
        except RuntimeError as e:
            # TesseractError уже обработан выше, здесь остаётся только таймаут
            raise OCRProviderError(
                message=f"Таймаут tesseract ({self.settings.timeout_seconds}s)",
                component="TesseractOCR",
                original_error=e
            )

        text, confidence = self._parse_data(data)
        elapsed = time.monotonic() - started

        logger.info(
            f"[TesseractOCR] Готово за {elapsed:.2f}s: "
            f"{len(text)} символов, confidence={confidence:.2f}"
        )

        return RecognizedText(text=text, confidence=confidence, engine=self.ENGINE_NAME)

    @staticmethod
    def _parse_data(data: Dict[str, List[Any]]) -> Tuple[str, float]:
        """
        Собирает текст построчно из image_to_data.

        Слова одной строки (block_num, par_num, line_num) объединяются пробелом.
        Уверенность -1 у не-слов в среднем не учитывается.
        """
        lines: Dict[Tuple[int, int, int], List[str]] = {}
        confidences: List[float] = []

        for i, word in enumerate(data.get("text", [])):
            word = (word or "").strip()
            if not word:
                continue

            key = (data["block_num"][i], data["par_num"][i], data["line_num"][i])
            lines.setdefault(key, []).append(word)

            conf = float(data["conf"][i])
            if conf >= 0:
                confidences.append(conf)

        text = "\n".join(" ".join(words) for words in lines.values())
        confidence = sum(confidences) / len(confidences) / 100 if confidences else 0.0

        return text, max(0.0, min(1.0, confidence))

    def close(self) -> None:
        """Tesseract запускается отдельным процессом на вызов, держать нечего."""
        self._closed = True
        logger.debug("[TesseractOCR] Освобождён")
