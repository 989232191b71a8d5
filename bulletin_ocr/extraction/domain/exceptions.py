"""
Исключения для домена Extraction.

Специфичные для проверки входа, обработки изображений и OCR ошибки.
Каждое исключение несёт user_hint - текст для пользователя формы.
"""

from typing import Optional


class ExtractionError(Exception):
    """Базовое исключение для ошибок домена Extraction."""

    user_hint = "Impossible de lire l'image. Essayez une photo plus nette."

    def __init__(
        self,
        message: str,
        component: Optional[str] = None,
        original_error: Optional[Exception] = None
    ):
        self.message = message
        self.component = component
        self.original_error = original_error
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        msg = f"Extraction Error: {self.message}"
        if self.component:
            msg += f" (Component: {self.component})"
        if self.original_error:
            msg += f" [Original: {type(self.original_error).__name__}: {str(self.original_error)}]"
        return msg


class ExtractionValidationError(ExtractionError):
    """Ошибка валидации входных данных (исправляется пользователем)."""
    pass


class InvalidInputError(ExtractionValidationError):
    """Недопустимый тип файла."""

    user_hint = "Seules les images sont acceptées"


class PayloadTooLargeError(ExtractionValidationError):
    """Файл больше допустимого размера."""

    user_hint = "Fichier trop lourd. Maximum 10 MB"


class ImageProcessingError(ExtractionError):
    """Ошибка обработки изображения."""
    pass


class UnreadableImageError(ImageProcessingError):
    """Повреждённое или не декодируемое изображение."""
    pass


class OCRProcessingError(ExtractionError):
    """Ошибка обработки OCR."""
    pass


class OCRProviderError(OCRProcessingError):
    """Ошибка провайдера OCR (сбой движка, таймаут, недоступность)."""
    pass


class RecognitionFailedError(OCRProcessingError):
    """Распознавание не удалось. Вызывающая сторона может повторить с другим фото."""
    pass


class ExtractionConfigurationError(ExtractionError):
    """Ошибка конфигурации домена Extraction."""
    pass
