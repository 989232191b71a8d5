"""
DTO контракт: D2 (Parsing) -> форма ввода оценок

Результат извлечения оценок из бюллетеня.
Это предложение для формы, а не авторитетная запись: пользователь
всегда может исправить любое значение вручную.

ВАЛИДАЦИЯ: Pydantic гарантирует шкалу 0-20 и уверенность 0-1.
"""

from enum import Enum
from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class Subject(str, Enum):
    """Закрытый список предметов. Новый предмет = новый член + набор паттернов."""
    MATH = "math"
    FRENCH = "french"
    ENGLISH = "english"
    SCIENCE = "science"


class ExtractedScore(BaseModel):
    """
    Одна найденная оценка по предмету.
    """

    subject: Subject = Field(..., description="Предмет")
    score: float = Field(..., ge=0, le=20, description="Оценка по шкале 0-20")
    confidence: float = Field(..., ge=0, le=1, description="Эвристическая уверенность")

    model_config = ConfigDict(frozen=True)


class ExtractionResult(BaseModel):
    """
    Результат одного прогона извлечения.

    scores в порядке обнаружения в тексте (не в порядке предметов).
    Пустой список - валидный результат ("переснимите фото"), не ошибка.
    """

    scores: List[ExtractedScore] = Field(default_factory=list, description="Оценки в порядке обнаружения")
    raw_text: str = Field("", description="Сырой OCR текст для проверки пользователем")
    ocr_confidence: float = Field(0.0, ge=0, le=1, description="Общая уверенность OCR движка")
    preprocessing_applied: List[str] = Field(default_factory=list, description="Применённые шаги pre-OCR")
    image_width: int = Field(0, ge=0, description="Ширина изображения, отправленного в OCR")
    image_height: int = Field(0, ge=0, description="Высота изображения, отправленного в OCR")
    preview: Optional[bytes] = Field(None, description="PNG превью подготовленного изображения", repr=False)
    source_name: str = Field("upload", description="Имя исходного файла")

    model_config = ConfigDict(frozen=True)

    @property
    def is_empty(self) -> bool:
        return not self.scores

    def get(self, subject: Subject) -> Optional[ExtractedScore]:
        """Оценка по предмету или None."""
        for item in self.scores:
            if item.subject == subject:
                return item
        return None

    def summary(self) -> Dict[str, str]:
        """Уведомление для пользователя (заголовок + сообщение)."""
        if self.is_empty:
            return {
                "title": "Aucune note détectée",
                "message": "Vérifiez que le bulletin est bien visible et net",
            }
        return {
            "title": f"{len(self.scores)} note(s) extraite(s)",
            "message": "Vérifiez les valeurs avant de valider",
        }

    def to_form_values(self) -> Dict[str, float]:
        """
        Значения для предзаполнения полей формы.

        Ключи: math_score, french_score, english_score, science_score
        (только найденные) и average_score (если есть хоть одна оценка).
        """
        values = {f"{item.subject.value}_score": item.score for item in self.scores}
        if self.scores:
            average = sum(item.score for item in self.scores) / len(self.scores)
            values["average_score"] = round(average, 2)
        return values

    def to_dict(self) -> dict:
        """Сериализация без превью (для JSON)."""
        return self.model_dump(mode="json", exclude={"preview"})
