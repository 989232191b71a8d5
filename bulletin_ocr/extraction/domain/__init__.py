"""
Domain слой домена Extraction.

Содержит интерфейсы (абстрактные классы) и исключения для Extraction домена.
"""

from .interfaces import (
    IOCRProvider,
    IImagePreprocessor,
    IExtractionPipeline,
    OCRProviderFactory,
)

from .exceptions import (
    ExtractionError,
    ExtractionValidationError,
    InvalidInputError,
    PayloadTooLargeError,
    ImageProcessingError,
    UnreadableImageError,
    OCRProcessingError,
    OCRProviderError,
    RecognitionFailedError,
    ExtractionConfigurationError,
)

__all__ = [
    # Интерфейсы
    "IOCRProvider",
    "IImagePreprocessor",
    "IExtractionPipeline",
    "OCRProviderFactory",

    # Исключения
    "ExtractionError",
    "ExtractionValidationError",
    "InvalidInputError",
    "PayloadTooLargeError",
    "ImageProcessingError",
    "UnreadableImageError",
    "OCRProcessingError",
    "OCRProviderError",
    "RecognitionFailedError",
    "ExtractionConfigurationError",
]
