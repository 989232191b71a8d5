"""
OCR: Google Vision API интеграция.

Альтернативный движок:
- Отправка PNG в Google Vision (DOCUMENT_TEXT_DETECTION)
- Подсказка языка через image_context.language_hints
- Уверенность = средняя уверенность страниц

Whitelist символов Google Vision не поддерживает: настройка игнорируется.
"""

import os
from pathlib import Path
from typing import Any, Optional

from google.api_core import exceptions as google_exceptions
from google.cloud import vision
from loguru import logger

from config.settings import GOOGLE_APPLICATION_CREDENTIALS
from contracts.d1_extraction_dto import PreprocessedImage, RecognizedText
from ....domain.contracts import OcrLanguage, OCRSettings
from ...domain.interfaces import IOCRProvider
from ...domain.exceptions import OCRProviderError


class GoogleVisionOCR(IOCRProvider):
    """
    Обёртка над Google Cloud Vision API.

    Реализует интерфейс IOCRProvider. Клиент создаётся на прогон
    и закрывается в close().
    """

    ENGINE_NAME = "google_vision"

    def __init__(self, settings: OCRSettings, credentials_path: Optional[str] = None):
        """
        Инициализация OCR клиента.

        Args:
            settings: Настройки OCR на прогон
            credentials_path: Путь к JSON-файлу credentials.
                            Если не указан, берётся из settings.
        """
        creds_path = credentials_path or GOOGLE_APPLICATION_CREDENTIALS

        if not creds_path:
            raise OCRProviderError(
                message="Google credentials не указаны",
                component="GoogleVisionOCR"
            )

        if not Path(creds_path).exists():
            raise OCRProviderError(
                message=f"Credentials файл не найден: {creds_path}",
                component="GoogleVisionOCR"
            )

        # Устанавливаем credentials через переменную окружения
        os.environ["GOOGLE_APPLICATION_CREDENTIALS"] = str(creds_path)

        self.settings = settings
        self.client = vision.ImageAnnotatorClient()

        logger.debug("[GoogleVisionOCR] Клиент инициализирован")

    def recognize(self, image: PreprocessedImage, language: OcrLanguage) -> RecognizedText:
        """
        Распознаёт текст на изображении.

        Args:
            image: Подготовленное изображение (PNG)
            language: Подсказка языка

        Returns:
            RecognizedText

        Raises:
            OCRProviderError: ошибка API или таймаут
        """
        logger.debug(
            f"[GoogleVisionOCR] Распознавание: {image.width}x{image.height}, "
            f"hints={language.codes} (whitelist не поддерживается, пропущен)"
        )

        request_image = vision.Image(content=image.content)
        image_context = vision.ImageContext(language_hints=language.codes)

        try:
            response = self.client.document_text_detection(
                image=request_image,
                image_context=image_context,
                timeout=self.settings.timeout_seconds,
            )
        except google_exceptions.GoogleAPIError as e:
            raise OCRProviderError(
                message="Ошибка вызова Google Vision",
                component="GoogleVisionOCR",
                original_error=e
            )

        if response.error.message:
            raise OCRProviderError(
                message=f"Google Vision API error: {response.error.message}",
                component="GoogleVisionOCR"
            )

        return self._parse_response(response)

    def _parse_response(self, response: Any) -> RecognizedText:
        """Извлекает полный текст и среднюю уверенность страниц."""
        annotation = response.full_text_annotation
        if not annotation or not annotation.text:
            logger.debug("[GoogleVisionOCR] Текст не найден")
            return RecognizedText(text="", confidence=0.0, engine=self.ENGINE_NAME)

        confidences = [page.confidence for page in annotation.pages]
        confidence = sum(confidences) / len(confidences) if confidences else 0.0

        logger.info(
            f"[GoogleVisionOCR] Готово: {len(annotation.text)} символов, "
            f"confidence={confidence:.2f}"
        )

        return RecognizedText(
            text=annotation.text,
            confidence=max(0.0, min(1.0, confidence)),  # Гарантируем [0, 1]
            engine=self.ENGINE_NAME,
        )

    def close(self) -> None:
        """Закрывает gRPC транспорт клиента."""
        self.client.transport.close()
        logger.debug("[GoogleVisionOCR] Клиент закрыт")
