"""
Домен Extraction: проверка входа + Pre-OCR + OCR + парсинг оценок.

Этот домен отвечает за:
1. Проверку загруженного файла (тип, размер)
2. Pre-OCR обработку изображений (resize, grayscale, binarize)
3. Выполнение OCR через подключаемый движок
4. Оркестрацию прогона до ExtractionResult

Граница домена: contracts.ExtractionResult
"""

# Экспортируем основные классы
from .pre_ocr.pipeline import BulletinPreprocessor
from .infrastructure.ocr.tesseract_ocr import TesseractOCR

# Экспортируем application слой
from .application.factory import ExtractionComponentFactory
from .application.extraction_pipeline import ExtractionPipeline

__all__ = [
    # Основные классы
    "BulletinPreprocessor",
    "TesseractOCR",

    # Application слой
    "ExtractionComponentFactory",
    "ExtractionPipeline",
]
