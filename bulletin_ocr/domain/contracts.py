"""
Валидационные контракты (contracts) для прогона извлечения оценок.

Каждый контракт гарантирует:
  1. Правильный тип данных (type safety)
  2. Значения в допустимых диапазонах (data integrity)
  3. Значения по умолчанию для необязательных полей

Все модели используют Pydantic v2 с Field validators.
"""

from enum import Enum
from typing import Any, Dict, List, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

from config.settings import (
    OCR_CHAR_WHITELIST,
    OCR_PRESERVE_INTERWORD_SPACES,
    OCR_TIMEOUT_SECONDS,
)


class OcrLanguage(str, Enum):
    """Подсказка языка для OCR. Значение = код языка движка."""
    PRIMARY = "fra"           # Французский (основной)
    SECONDARY = "eng"         # Английский
    BOTH = "fra+eng"          # Оба одновременно

    @property
    def codes(self) -> List[str]:
        """Список отдельных кодов: ["fra"], ["eng"] или ["fra", "eng"]."""
        return self.value.split("+")


class ExtractionConfig(BaseModel):
    """
    Конфигурация одного прогона, передаётся вызывающей стороной.

    Не имеет идентичности и не сохраняется.
    """

    model_config = ConfigDict(frozen=True)

    preprocessing_enabled: bool = Field(True, description="Resize + grayscale + binarize перед OCR")
    ocr_language: OcrLanguage = Field(OcrLanguage.PRIMARY, description="Язык бюллетеня")


class OCRSettings(BaseModel):
    """
    Конфигурация OCR движка на один прогон.

    Набор символов - это настройка движка, а не фильтр при парсинге.
    """

    model_config = ConfigDict(frozen=True)

    language: OcrLanguage = Field(OcrLanguage.PRIMARY, description="Язык распознавания")
    char_whitelist: str = Field(OCR_CHAR_WHITELIST, description="Разрешённые символы")
    preserve_interword_spaces: bool = Field(
        OCR_PRESERVE_INTERWORD_SPACES, description="Сохранять пробелы между словами"
    )
    timeout_seconds: float = Field(OCR_TIMEOUT_SECONDS, gt=0, description="Таймаут вызова OCR")

    @field_validator("char_whitelist")
    @classmethod
    def whitelist_not_empty(cls, v: str) -> str:
        """Пустой whitelist заблокирует всё распознавание."""
        if not v:
            raise ValueError("char_whitelist не может быть пустым")
        return v

    @classmethod
    def from_config(cls, config: ExtractionConfig) -> "OCRSettings":
        """Настройки движка для конфигурации прогона."""
        return cls(language=config.ocr_language)


class ContractValidationError(Exception):
    """Exception для нарушения контрактов (используется вместо Pydantic ValidationError)."""

    def __init__(self, stage_name: str, contract_name: str, errors: Union[List[Dict[str, Any]], List[Any]]) -> None:
        self.stage_name = stage_name
        self.contract_name = contract_name
        self.errors = errors

        error_messages = []
        for err in errors:
            if isinstance(err, dict):
                loc = err.get('loc', [])[0] if err.get('loc') else 'unknown'
                err_type = err.get('type', 'unknown')
                msg = err.get('msg', 'unknown error')
                error_messages.append(f"  {loc} ({err_type}): {msg}")
            else:
                error_messages.append(f"  {str(err)}")

        message = (
            f"Contract violation in {stage_name} ({contract_name}):\n"
            + "\n".join(error_messages)
        )
        super().__init__(message)
