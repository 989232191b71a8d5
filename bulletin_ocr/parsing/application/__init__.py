"""Application слой домена Parsing."""

from .score_parser import ScoreParser

__all__ = ["ScoreParser"]
