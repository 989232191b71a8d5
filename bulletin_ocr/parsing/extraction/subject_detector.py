import re
from typing import Dict, List, Pattern

from loguru import logger

from contracts.d2_scores_dto import Subject


class SubjectDetector:
    """
    Элемент-функция: Определяет, какие предметы упомянуты в строке.

    Написание предмета после OCR ненадёжно, поэтому на каждый предмет
    несколько вариантов: полное слово, сокращение, связанные дисциплины.
    """

    # Порядок ключей = порядок обработки предметов в одной строке
    SUBJECT_PATTERNS: Dict[Subject, List[str]] = {
        Subject.MATH: [
            r"math[eé]matiques?",
            r"\bmaths?\b",
            r"calcul",
            r"mathematics",
        ],
        Subject.FRENCH: [
            r"fran[cç]ais",
            r"lettres",
            r"\bfr\b",
            r"\bfrench\b",
        ],
        Subject.ENGLISH: [
            r"anglais",
            r"\bang\b",
            r"english",
        ],
        Subject.SCIENCE: [
            r"sciences?",
            r"physique",
            r"chimie",
            r"biologie",
            r"\bsvt\b",
            r"\bpc\b",
            r"physics",
            r"chemistry",
            r"biology",
        ],
    }

    def __init__(self) -> None:
        self._compiled: Dict[Subject, List[Pattern[str]]] = {
            subject: [re.compile(p, re.IGNORECASE) for p in patterns]
            for subject, patterns in self.SUBJECT_PATTERNS.items()
        }

    def detect(self, line: str) -> List[Subject]:
        """
        ЦКП: Предметы, найденные в строке (в порядке таблицы, без повторов).
        """
        if not line:
            return []

        lower_line = line.lower()
        found = [
            subject
            for subject, patterns in self._compiled.items()
            if any(p.search(lower_line) for p in patterns)
        ]

        if found:
            logger.trace(f"[SubjectDetector] '{line}' -> {[s.value for s in found]}")
        return found
