"""
Интерфейсы (абстрактные классы) для домена Extraction.

Домен Extraction отвечает за:
1. Preprocessing изображений (pre-ocr)
2. OCR распознавание текста
3. Оркестрацию прогона: файл -> оценки
"""

from abc import ABC, abstractmethod
from typing import Callable, Optional

from contracts.d1_extraction_dto import RawImage, PreprocessedImage, RecognizedText
from contracts.d2_scores_dto import ExtractionResult
from ...domain.contracts import ExtractionConfig, OcrLanguage, OCRSettings


class IOCRProvider(ABC):
    """
    Интерфейс для провайдеров OCR (домен Extraction).

    Один экземпляр = один прогон. Движок создаётся с OCRSettings
    и освобождается через close() на любом пути выхода.
    """

    @abstractmethod
    def recognize(self, image: PreprocessedImage, language: OcrLanguage) -> RecognizedText:
        """
        Распознаёт текст на изображении.

        Args:
            image: Подготовленное изображение (PNG)
            language: Подсказка языка

        Returns:
            RecognizedText с полным текстом и общей уверенностью

        Raises:
            OCRProviderError: сбой движка или таймаут
        """
        pass

    def close(self) -> None:
        """Освобождает ресурсы движка. По умолчанию ничего не делает."""
        pass

    def __enter__(self) -> "IOCRProvider":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()


# Фабрика движков: новый экземпляр на каждый прогон
OCRProviderFactory = Callable[[OCRSettings], IOCRProvider]


class IImagePreprocessor(ABC):
    """Интерфейс для препроцессоров изображений (домен Extraction)."""

    @abstractmethod
    def prepare(self, image: RawImage, enabled: bool = True) -> PreprocessedImage:
        """
        Обрабатывает изображение перед OCR.

        Args:
            image: Загруженный файл
            enabled: False - только декодирование и перекодирование в PNG

        Returns:
            PreprocessedImage

        Raises:
            ImageDecodingError: если файл не декодируется
        """
        pass


class IExtractionPipeline(ABC):
    """Интерфейс для пайплайна extraction (домен Extraction)."""

    @abstractmethod
    def extract(self, raw_image: RawImage, config: Optional[ExtractionConfig] = None) -> ExtractionResult:
        """
        Извлекает оценки из загруженного изображения.

        Args:
            raw_image: Загруженный файл
            config: Конфигурация прогона

        Returns:
            ExtractionResult (возможно с пустым списком оценок)
        """
        pass

    @abstractmethod
    async def extract_async(
        self, raw_image: RawImage, config: Optional[ExtractionConfig] = None
    ) -> ExtractionResult:
        """То же, что extract(), но не блокирует event loop и может быть отменено."""
        pass
