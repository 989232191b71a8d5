"""
Контракты DTO между доменами проекта Bulletin OCR.

Контракты:
- D1 -> D2: RawImage, PreprocessedImage, RecognizedText (d1_extraction_dto.py)
- D2 -> форма: ExtractedScore, ExtractionResult (d2_scores_dto.py, Pydantic v2)
"""

# D1 -> D2 (Extraction -> Parsing)
from .d1_extraction_dto import RawImage, PreprocessedImage, RecognizedText

# D2 -> форма ввода
from .d2_scores_dto import Subject, ExtractedScore, ExtractionResult

__all__ = [
    # D1 -> D2
    "RawImage",
    "PreprocessedImage",
    "RecognizedText",
    # D2 -> форма
    "Subject",
    "ExtractedScore",
    "ExtractionResult",
]
