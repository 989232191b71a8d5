"""
Интерфейсы (абстрактные классы) для домена Parsing.

Домен Parsing отвечает за:
1. Разбиение сырого текста OCR на строки
2. Поиск предметов и оценок рядом с ними
3. Валидацию, дедупликацию и оценку уверенности
"""

from abc import ABC, abstractmethod
from typing import List, Optional

from contracts.d2_scores_dto import ExtractedScore


class IScoreParser(ABC):
    """Интерфейс для парсеров оценок (домен Parsing)."""

    @abstractmethod
    def parse(self, text: str, ocr_confidence: Optional[float] = None) -> List[ExtractedScore]:
        """
        Парсит сырой текст OCR в список оценок.

        Args:
            text: Сырой текст OCR
            ocr_confidence: Уверенность движка (если нужно учитывать)

        Returns:
            Оценки в порядке обнаружения, не более одной на предмет
        """
        pass
