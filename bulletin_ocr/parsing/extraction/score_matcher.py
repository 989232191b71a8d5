import re
from typing import List, Optional, Pattern, Tuple

from loguru import logger

from config.settings import SCORE_MIN, SCORE_MAX

# Не продолжение другого числа: 123 не даёт 23, 123.45 не даёт 45
_NOT_GLUED = r"(?<!\d)(?<!\d[.,])"
# Минус после буквы - дефис (Maths-15), иначе знак отрицательного числа (-1)
_NOT_NEGATIVE = r"(?:(?<=[^\W\d_]-)|(?<!-))"
_NUM = _NOT_GLUED + _NOT_NEGATIVE + r"(\d{1,2})"


class ScoreMatcher:
    """
    Элемент-функция: Извлекает оценку по шкале 0-20 из строки.

    Паттерны в строгом порядке приоритета (первый валидный выигрывает):
    1. Десятичная с /20:   15.5/20, 15,5 / 20
    2. Десятичная в конце:  15.5, 15,5
    3. Целая с /20:         15/20
    4. Голое число 1-2 цифры (последний вариант: может быть датой или номером)
    """

    SCORE_PATTERNS: List[Tuple[str, str]] = [
        ("decimal_over_20", _NUM + r"[.,](\d{1,2})\s*/\s*20(?!\d)"),
        ("decimal_end", _NUM + r"[.,](\d{1,2})\s*$"),
        ("integer_over_20", _NUM + r"\s*/\s*20(?!\d)"),
        # Знаменатель после "/" никогда не считается оценкой
        ("bare_integer", r"\b(?<!/)(?<!/\s)" + _NUM + r"\b"),
    ]

    def __init__(self, min_score: float = SCORE_MIN, max_score: float = SCORE_MAX):
        self.min_score = min_score
        self.max_score = max_score
        self._compiled: List[Tuple[str, Pattern[str]]] = [
            (name, re.compile(pattern)) for name, pattern in self.SCORE_PATTERNS
        ]

    def match(self, line: str) -> Optional[float]:
        """
        ЦКП: Валидная оценка (float) или None.

        Значение вне [min_score, max_score] молча отбрасывается,
        проверка продолжается следующим паттерном.
        """
        if not line:
            return None

        for name, pattern in self._compiled:
            found = pattern.search(line)
            if not found:
                continue

            value = self._to_value(found)
            if self.is_valid(value):
                logger.trace(f"[ScoreMatcher] '{line}' -> {value} ({name})")
                return value

            logger.trace(f"[ScoreMatcher] Отброшено {value} вне шкалы ({name}): '{line}'")

        return None

    def is_valid(self, value: float) -> bool:
        return self.min_score <= value <= self.max_score

    @staticmethod
    def _to_value(found: re.Match) -> float:
        """Десятичная запятая -> точка: "14,5" -> 14.5."""
        groups = [g for g in found.groups() if g is not None]
        if len(groups) == 2:
            return float(f"{groups[0]}.{groups[1]}")
        return float(groups[0])
