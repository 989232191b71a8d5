"""OCR движки домена Extraction."""

from .tesseract_ocr import TesseractOCR

__all__ = ["TesseractOCR"]
