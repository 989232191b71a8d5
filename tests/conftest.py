"""Общие fixtures: синтетические изображения и OCR движок-заглушка."""

from typing import List

import cv2
import numpy as np
import pytest

from contracts.d1_extraction_dto import PreprocessedImage, RawImage, RecognizedText
from bulletin_ocr.domain.contracts import OcrLanguage, OCRSettings
from bulletin_ocr.extraction.domain.interfaces import IOCRProvider


def _encode_image(image: np.ndarray, ext: str = ".png") -> bytes:
    """Кодирует numpy изображение в байты файла."""
    success, buffer = cv2.imencode(ext, image)
    assert success
    return buffer.tobytes()


class StubOCRProvider(IOCRProvider):
    """Движок-заглушка: возвращает заданный текст и запоминает вызовы."""

    def __init__(self, settings: OCRSettings, text: str = "", confidence: float = 0.9, error: Exception = None):
        self.settings = settings
        self.text = text
        self.confidence = confidence
        self.error = error
        self.calls: List[OcrLanguage] = []
        self.received: List[PreprocessedImage] = []
        self.closed = False

    def recognize(self, image: PreprocessedImage, language: OcrLanguage) -> RecognizedText:
        self.calls.append(language)
        self.received.append(image)
        if self.error is not None:
            raise self.error
        return RecognizedText(text=self.text, confidence=self.confidence, engine="stub")

    def close(self) -> None:
        self.closed = True


class StubProviderFactory:
    """Фабрика заглушек: новый движок на каждый прогон, все созданные сохраняются."""

    def __init__(self, text: str = "", confidence: float = 0.9, error: Exception = None):
        self.text = text
        self.confidence = confidence
        self.error = error
        self.created: List[StubOCRProvider] = []

    def __call__(self, settings: OCRSettings) -> StubOCRProvider:
        provider = StubOCRProvider(settings, self.text, self.confidence, self.error)
        self.created.append(provider)
        return provider


@pytest.fixture
def color_image():
    """Цветное BGR изображение 100x80: тёмная половина и светлая половина."""
    image = np.zeros((80, 100, 3), dtype=np.uint8)
    image[:, :50] = (30, 40, 50)      # тёмная
    image[:, 50:] = (220, 230, 240)   # светлая
    return image


@pytest.fixture
def png_raw_image(color_image):
    """RawImage с PNG содержимым."""
    return RawImage(content=_encode_image(color_image, ".png"), mime_type="image/png", source_name="bulletin.png")


@pytest.fixture
def jpeg_raw_image(color_image):
    """RawImage с JPEG содержимым."""
    return RawImage(content=_encode_image(color_image, ".jpg"), mime_type="image/jpeg", source_name="bulletin.jpg")


@pytest.fixture
def bulletin_text():
    """Типичный текст OCR французского бюллетеня."""
    return "MATHEMATIQUES\n14,5 /20\nFRANCAIS 11\nANGLAIS\n16/20"


@pytest.fixture
def encode_image():
    """Функция кодирования numpy изображения в байты (.png, .jpg, .bmp)."""
    return _encode_image


@pytest.fixture
def stub_factory():
    """Конструктор фабрик заглушек: stub_factory(text=..., error=...)."""
    return StubProviderFactory
