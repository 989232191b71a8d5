"""
Парсер оценок домена Parsing.

Превращает сырой текст OCR в список ExtractedScore:
1. Разбиение на непустые строки
2. Поиск предметов в каждой строке
3. Поиск оценки в этой и двух следующих строках (OCR переносит строки таблицы)
4. Валидация шкалы 0-20 и дедупликация: первая валидная оценка на предмет выигрывает

Порядок результата = порядок обнаружения в тексте.
"""

from typing import Dict, List, Optional

from loguru import logger

from config.settings import DEFAULT_SCORE_CONFIDENCE, SCORE_LOOKAHEAD_LINES
from contracts.d2_scores_dto import ExtractedScore, Subject
from ..domain.interfaces import IScoreParser
from ..extraction.subject_detector import SubjectDetector
from ..extraction.score_matcher import ScoreMatcher


class ScoreParser(IScoreParser):
    """
    Эвристический парсер оценок из бюллетеня.

    Уверенность фиксированная (DEFAULT_SCORE_CONFIDENCE). Если передана
    уверенность движка, берётся минимум из двух.
    """

    def __init__(
        self,
        subject_detector: Optional[SubjectDetector] = None,
        score_matcher: Optional[ScoreMatcher] = None,
        confidence: float = DEFAULT_SCORE_CONFIDENCE,
        lookahead: int = SCORE_LOOKAHEAD_LINES,
    ):
        self.subject_detector = subject_detector or SubjectDetector()
        self.score_matcher = score_matcher or ScoreMatcher()
        self.confidence = confidence
        self.lookahead = lookahead

    @staticmethod
    def split_lines(text: str) -> List[str]:
        """Строки без пробелов по краям, пустые отброшены."""
        if not text:
            return []
        return [line.strip() for line in text.splitlines() if line.strip()]

    def parse(self, text: str, ocr_confidence: Optional[float] = None) -> List[ExtractedScore]:
        """
        ЦКП: Оценки в порядке обнаружения, не более одной на предмет.

        Args:
            text: Сырой текст OCR
            ocr_confidence: Уверенность движка (None = фиксированная эвристика)

        Returns:
            Список ExtractedScore (пустой, если предметы не найдены)
        """
        lines = self.split_lines(text)
        confidence = self._resolve_confidence(ocr_confidence)
        found: Dict[Subject, ExtractedScore] = {}

        for index, line in enumerate(lines):
            for subject in self.subject_detector.detect(line):
                if subject in found:
                    continue

                score = self._find_score(lines, index)
                if score is None:
                    logger.debug(f"[ScoreParser] {subject.value}: оценка не найдена (строка {index})")
                    continue

                found[subject] = ExtractedScore(subject=subject, score=score, confidence=confidence)
                logger.debug(f"[ScoreParser] {subject.value} = {score} (строка {index})")

        scores = list(found.values())
        logger.info(f"[ScoreParser] Найдено оценок: {len(scores)} из {len(lines)} строк")
        return scores

    def _find_score(self, lines: List[str], index: int) -> Optional[float]:
        """Первая валидная оценка в строках index .. index + lookahead."""
        window = lines[index:index + self.lookahead + 1]
        for candidate in window:
            score = self.score_matcher.match(candidate)
            if score is not None:
                return score
        return None

    def _resolve_confidence(self, ocr_confidence: Optional[float]) -> float:
        if ocr_confidence is None:
            return self.confidence
        return max(0.0, min(self.confidence, ocr_confidence))
