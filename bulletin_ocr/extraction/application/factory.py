"""
Фабрика для создания компонентов домена Extraction.

Предоставляет удобные методы для создания и конфигурации
всех компонентов домена Extraction через единый интерфейс.
"""

from typing import Optional

from loguru import logger

from config.settings import OCR_ENGINE
from ...domain.contracts import OCRSettings
from ...parsing.application.score_parser import ScoreParser
from ..domain.interfaces import IOCRProvider, IImagePreprocessor, OCRProviderFactory
from ..domain.exceptions import ExtractionConfigurationError
from ..infrastructure.ocr.tesseract_ocr import TesseractOCR
from ..pre_ocr.pipeline import BulletinPreprocessor
from .extraction_pipeline import ExtractionPipeline

SUPPORTED_ENGINES = ("tesseract", "google_vision")


class ExtractionComponentFactory:
    """
    Фабрика для создания компонентов домена Extraction.

    Домен Extraction отвечает за:
    - Проверку загруженного файла
    - Preprocessing изображений
    - OCR распознавание текста
    - Передачу текста в парсер оценок
    """

    @staticmethod
    def create_ocr_provider_factory(
        engine: str = OCR_ENGINE,
        credentials_path: Optional[str] = None
    ) -> OCRProviderFactory:
        """
        Создает фабрику OCR движков: новый движок на каждый прогон.

        Args:
            engine: "tesseract" или "google_vision"
            credentials_path: Путь к credentials файлу Google Cloud (только google_vision)

        Returns:
            Callable[[OCRSettings], IOCRProvider]
        """
        logger.debug(f"[Extraction] Создание фабрики OCR движков: {engine}")

        if engine == "tesseract":
            def create_tesseract(settings: OCRSettings) -> IOCRProvider:
                return TesseractOCR(settings)
            return create_tesseract

        if engine == "google_vision":
            # google-cloud-vision грузится только если движок выбран
            from ..infrastructure.ocr.google_vision_ocr import GoogleVisionOCR

            def create_google_vision(settings: OCRSettings) -> IOCRProvider:
                return GoogleVisionOCR(settings, credentials_path)
            return create_google_vision

        raise ExtractionConfigurationError(
            message=f"Неизвестный OCR движок: {engine} (доступны: {', '.join(SUPPORTED_ENGINES)})",
            component="ExtractionComponentFactory"
        )

    @staticmethod
    def create_image_preprocessor() -> IImagePreprocessor:
        """
        Создает препроцессор изображений для домена Extraction.

        Returns:
            Препроцессор изображений, реализующий интерфейс IImagePreprocessor
        """
        logger.debug("[Extraction] Создание препроцессора изображений")
        return BulletinPreprocessor()

    @staticmethod
    def create_extraction_pipeline(
        ocr_provider_factory: Optional[OCRProviderFactory] = None,
        image_preprocessor: Optional[IImagePreprocessor] = None,
        engine: str = OCR_ENGINE,
        use_ocr_confidence: bool = False
    ) -> ExtractionPipeline:
        """
        Создает пайплайн extraction для домена Extraction.

        Args:
            ocr_provider_factory: Фабрика движков OCR (опционально)
            image_preprocessor: Препроцессор изображений (опционально)
            engine: Движок, если фабрика не передана
            use_ocr_confidence: Учитывать уверенность движка

        Returns:
            Пайплайн extraction, реализующий интерфейс IExtractionPipeline
        """
        logger.debug("[Extraction] Создание пайплайна extraction")

        if ocr_provider_factory is None:
            ocr_provider_factory = ExtractionComponentFactory.create_ocr_provider_factory(engine)

        if image_preprocessor is None:
            image_preprocessor = ExtractionComponentFactory.create_image_preprocessor()

        return ExtractionPipeline(
            ocr_provider_factory=ocr_provider_factory,
            image_preprocessor=image_preprocessor,
            score_parser=ScoreParser(),
            use_ocr_confidence=use_ocr_confidence
        )
