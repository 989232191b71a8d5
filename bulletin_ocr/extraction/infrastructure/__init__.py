"""
Инфраструктура домена Extraction.

OCR движки, реализующие IOCRProvider. GoogleVisionOCR импортируется
напрямую из .ocr.google_vision_ocr: google-cloud-vision нужен только ему.
"""

from .ocr import TesseractOCR

__all__ = ["TesseractOCR"]
