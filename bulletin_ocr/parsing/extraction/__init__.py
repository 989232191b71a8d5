"""Элементы-функции извлечения: предметы и оценки."""

from .subject_detector import SubjectDetector
from .score_matcher import ScoreMatcher

__all__ = ["SubjectDetector", "ScoreMatcher"]
