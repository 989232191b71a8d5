"""Application слой домена Extraction."""

from .extraction_pipeline import ExtractionPipeline
from .factory import ExtractionComponentFactory

__all__ = [
    "ExtractionPipeline",
    "ExtractionComponentFactory",
]
