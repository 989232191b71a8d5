"""
Пайплайн для домена Extraction.

Обрабатывает загруженное фото бюллетеня через:
0. Проверку входа (тип файла, размер) - ДО любой дорогой работы
1. Preprocessing изображения (опционально)
2. OCR распознавание текста
3. Парсинг оценок

ЦКП: ExtractionResult - оценки в порядке обнаружения или типизированная ошибка.

Ноль оценок - НЕ ошибка: возвращается пустой результат, чтобы форма
могла предложить переснять фото.
"""

import asyncio
from typing import Any, Dict, Optional, Union

from loguru import logger
from pydantic import ValidationError

from config.settings import ACCEPTED_MIME_TYPES, MAX_UPLOAD_BYTES
from contracts.d1_extraction_dto import RawImage, PreprocessedImage, RecognizedText
from contracts.d2_scores_dto import ExtractionResult
from ...domain.contracts import ExtractionConfig, OCRSettings, ContractValidationError
from ...parsing.domain.interfaces import IScoreParser
from ...parsing.application.score_parser import ScoreParser
from ..domain.interfaces import IExtractionPipeline, IImagePreprocessor, OCRProviderFactory
from ..domain.exceptions import (
    InvalidInputError,
    PayloadTooLargeError,
    UnreadableImageError,
    RecognitionFailedError,
)
from ..pre_ocr.pipeline import BulletinPreprocessor


class ExtractionPipeline(IExtractionPipeline):
    """
    Пайплайн домена Extraction.

    Координирует:
    1. Проверку входа
    2. Preprocessing изображения
    3. OCR распознавание (новый движок на каждый прогон)
    4. Парсинг оценок

    Не хранит состояния между прогонами: параллельные вызовы независимы.
    """

    def __init__(
        self,
        ocr_provider_factory: OCRProviderFactory,
        image_preprocessor: Optional[IImagePreprocessor] = None,
        score_parser: Optional[IScoreParser] = None,
        use_ocr_confidence: bool = False
    ):
        """
        Инициализация пайплайна extraction.

        Args:
            ocr_provider_factory: Фабрика движков OCR (OCRSettings -> IOCRProvider)
            image_preprocessor: Препроцессор изображений (по умолчанию BulletinPreprocessor)
            score_parser: Парсер оценок (по умолчанию ScoreParser)
            use_ocr_confidence: Учитывать уверенность движка в уверенности оценок
        """
        self.ocr_provider_factory = ocr_provider_factory
        self.image_preprocessor = image_preprocessor or BulletinPreprocessor()
        self.score_parser = score_parser or ScoreParser()
        self.use_ocr_confidence = use_ocr_confidence

        logger.debug("[Extraction] Pipeline инициализирован")

    def extract(
        self,
        raw_image: RawImage,
        config: Optional[Union[ExtractionConfig, Dict[str, Any]]] = None
    ) -> ExtractionResult:
        """
        Извлекает оценки из загруженного изображения.

        Args:
            raw_image: Загруженный файл
            config: Конфигурация прогона (модель или dict)

        Returns:
            ExtractionResult (возможно с пустым списком оценок)

        Raises:
            InvalidInputError: недопустимый тип файла
            PayloadTooLargeError: файл больше MAX_UPLOAD_BYTES
            UnreadableImageError: изображение не декодируется
            RecognitionFailedError: сбой или таймаут OCR
            ContractValidationError: невалидная конфигурация
        """
        config = self._resolve_config(config)
        logger.info(
            f"[Extraction] Обработка: {raw_image.source_name} "
            f"(preprocessing={config.preprocessing_enabled}, lang={config.ocr_language.value})"
        )

        # 0. Проверка входа (без декодирования)
        self._validate_input(raw_image)

        # 1. Preprocessing
        logger.debug("[Extraction] Этап 1: Preprocessing")
        prepared = self._preprocess_image(raw_image, config.preprocessing_enabled)

        # 2. OCR
        logger.debug("[Extraction] Этап 2: OCR")
        recognized = self._perform_ocr(prepared, config)

        # 3. Парсинг оценок
        logger.debug("[Extraction] Этап 3: Parsing")
        ocr_confidence = recognized.confidence if self.use_ocr_confidence else None
        scores = self.score_parser.parse(recognized.text, ocr_confidence=ocr_confidence)

        if not recognized.has_content():
            logger.warning(f"[Extraction] OCR не вернул текста: {raw_image.source_name}")
        elif not scores:
            logger.warning(f"[Extraction] Оценки не найдены: {raw_image.source_name}")

        result = ExtractionResult(
            scores=scores,
            raw_text=recognized.text,
            ocr_confidence=recognized.confidence,
            preprocessing_applied=prepared.applied,
            image_width=prepared.width,
            image_height=prepared.height,
            preview=prepared.content,
            source_name=raw_image.source_name,
        )

        logger.info(
            f"[Extraction] Готово: {raw_image.source_name} "
            f"({len(scores)} оценок, {len(recognized.text)} символов, "
            f"ocr_confidence={recognized.confidence:.2f})"
        )

        return result

    async def extract_async(
        self,
        raw_image: RawImage,
        config: Optional[Union[ExtractionConfig, Dict[str, Any]]] = None
    ) -> ExtractionResult:
        """
        То же, что extract(), в рабочем потоке.

        Не блокирует event loop. Отмена задачи сразу освобождает вызывающего;
        движок прерванного прогона закрывается в extract() при его завершении.
        """
        return await asyncio.to_thread(self.extract, raw_image, config)

    def _resolve_config(
        self, config: Optional[Union[ExtractionConfig, Dict[str, Any]]]
    ) -> ExtractionConfig:
        if config is None:
            return ExtractionConfig()
        if isinstance(config, ExtractionConfig):
            return config
        try:
            return ExtractionConfig.model_validate(config)
        except ValidationError as e:
            raise ContractValidationError("Extraction", "ExtractionConfig", e.errors())

    def _validate_input(self, raw_image: RawImage) -> None:
        """Тип и размер файла. Выполняется до любой обработки."""
        mime_type = (raw_image.mime_type or "").lower()
        if mime_type not in ACCEPTED_MIME_TYPES:
            logger.warning(f"[Extraction] Недопустимый тип файла: {raw_image.mime_type}")
            raise InvalidInputError(
                message=f"Недопустимый тип файла: {raw_image.mime_type}",
                component="ExtractionPipeline"
            )

        if raw_image.size_bytes > MAX_UPLOAD_BYTES:
            logger.warning(f"[Extraction] Файл слишком большой: {raw_image.size_bytes} байт")
            raise PayloadTooLargeError(
                message=f"Файл {raw_image.size_bytes} байт превышает лимит {MAX_UPLOAD_BYTES} байт",
                component="ExtractionPipeline"
            )

    def _preprocess_image(self, raw_image: RawImage, enabled: bool) -> PreprocessedImage:
        """Выполняет preprocessing изображения."""
        try:
            return self.image_preprocessor.prepare(raw_image, enabled=enabled)
        except Exception as e:
            logger.error(f"[Extraction] Ошибка preprocessing: {e}")
            raise UnreadableImageError(
                message=f"Не удалось прочитать изображение: {raw_image.source_name}",
                component="ExtractionPipeline",
                original_error=e
            )

    def _perform_ocr(self, image: PreprocessedImage, config: ExtractionConfig) -> RecognizedText:
        """
        Выполняет OCR распознавание.

        Движок создаётся под настройки прогона и закрывается на любом пути выхода.
        """
        settings = OCRSettings.from_config(config)

        try:
            with self.ocr_provider_factory(settings) as provider:
                return provider.recognize(image, settings.language)
        except RecognitionFailedError:
            raise
        except Exception as e:
            logger.error(f"[Extraction] Ошибка OCR: {e}")
            raise RecognitionFailedError(
                message="Ошибка OCR",
                component="ExtractionPipeline",
                original_error=e
            )
