"""
Домен Parsing: сырой текст OCR -> оценки по предметам.

Граница домена: contracts.ExtractedScore
"""

from .application.score_parser import ScoreParser
from .extraction.subject_detector import SubjectDetector
from .extraction.score_matcher import ScoreMatcher

__all__ = [
    "ScoreParser",
    "SubjectDetector",
    "ScoreMatcher",
]
