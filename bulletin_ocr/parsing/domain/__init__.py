"""Domain слой домена Parsing."""

from .interfaces import IScoreParser

__all__ = ["IScoreParser"]
