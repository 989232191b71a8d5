"""
Тесты для GoogleVisionOCR с подменённым клиентом (без сети и ключей).
"""

from types import SimpleNamespace

import numpy as np
import pytest
from google.api_core import exceptions as google_exceptions

from contracts.d1_extraction_dto import PreprocessedImage
from bulletin_ocr.domain.contracts import OcrLanguage, OCRSettings
from bulletin_ocr.extraction.domain.exceptions import OCRProviderError
from bulletin_ocr.extraction.infrastructure.ocr import google_vision_ocr
from bulletin_ocr.extraction.infrastructure.ocr.google_vision_ocr import GoogleVisionOCR


def _response(text="", confidences=(), error_message=""):
    return SimpleNamespace(
        error=SimpleNamespace(message=error_message),
        full_text_annotation=SimpleNamespace(
            text=text,
            pages=[SimpleNamespace(confidence=c) for c in confidences],
        ),
    )


class FakeClient:
    """Заменяет vision.ImageAnnotatorClient."""

    response = _response()
    error = None

    def __init__(self):
        self.requests = []
        self.transport = SimpleNamespace(close=self._close)
        self.closed = False

    def _close(self):
        self.closed = True

    def document_text_detection(self, image, image_context, timeout):
        self.requests.append((image, image_context, timeout))
        if self.error is not None:
            raise self.error
        return self.response


@pytest.fixture
def credentials(tmp_path, monkeypatch):
    path = tmp_path / "credentials.json"
    path.write_text("{}")
    # конструктор выставляет переменную окружения, monkeypatch её восстановит
    monkeypatch.setenv("GOOGLE_APPLICATION_CREDENTIALS", str(path))
    return str(path)


@pytest.fixture
def fake_client(monkeypatch):
    monkeypatch.setattr(FakeClient, "response", _response())
    monkeypatch.setattr(FakeClient, "error", None)
    monkeypatch.setattr(google_vision_ocr.vision, "ImageAnnotatorClient", FakeClient)
    return FakeClient


@pytest.fixture
def image(encode_image):
    content = encode_image(np.full((20, 40), 255, dtype=np.uint8))
    return PreprocessedImage(content=content, width=40, height=20)


def test_missing_credentials_file(tmp_path, fake_client):
    with pytest.raises(OCRProviderError, match="не найден"):
        GoogleVisionOCR(OCRSettings(), credentials_path=str(tmp_path / "missing.json"))


def test_recognize_text_and_confidence(credentials, fake_client, image, monkeypatch):
    monkeypatch.setattr(fake_client, "response", _response("Maths\n15/20", confidences=(0.9, 0.7)))
    ocr = GoogleVisionOCR(OCRSettings(timeout_seconds=12), credentials_path=credentials)

    result = ocr.recognize(image, OcrLanguage.BOTH)

    assert result.text == "Maths\n15/20"
    assert result.confidence == pytest.approx(0.8)
    assert result.engine == "google_vision"

    _, image_context, timeout = ocr.client.requests[0]
    assert list(image_context.language_hints) == ["fra", "eng"]
    assert timeout == 12


def test_empty_annotation(credentials, fake_client, image):
    ocr = GoogleVisionOCR(OCRSettings(), credentials_path=credentials)

    result = ocr.recognize(image, OcrLanguage.PRIMARY)

    assert result.text == ""
    assert result.confidence == 0.0


def test_api_error_in_response(credentials, fake_client, image, monkeypatch):
    monkeypatch.setattr(fake_client, "response", _response(error_message="quota exceeded"))
    ocr = GoogleVisionOCR(OCRSettings(), credentials_path=credentials)

    with pytest.raises(OCRProviderError, match="quota exceeded"):
        ocr.recognize(image, OcrLanguage.PRIMARY)


def test_transport_error_wrapped(credentials, fake_client, image, monkeypatch):
    monkeypatch.setattr(fake_client, "error", google_exceptions.ServiceUnavailable("down"))
    ocr = GoogleVisionOCR(OCRSettings(), credentials_path=credentials)

    with pytest.raises(OCRProviderError) as exc_info:
        ocr.recognize(image, OcrLanguage.PRIMARY)

    assert isinstance(exc_info.value.original_error, google_exceptions.ServiceUnavailable)


def test_context_manager_closes_client(credentials, fake_client):
    with GoogleVisionOCR(OCRSettings(), credentials_path=credentials) as ocr:
        assert ocr.client.closed is False

    assert ocr.client.closed is True
