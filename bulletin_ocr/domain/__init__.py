"""Общие валидационные контракты проекта."""

from .contracts import (
    OcrLanguage,
    ExtractionConfig,
    OCRSettings,
    ContractValidationError,
)

__all__ = [
    "OcrLanguage",
    "ExtractionConfig",
    "OCRSettings",
    "ContractValidationError",
]
