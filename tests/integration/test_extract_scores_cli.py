"""
Тесты CLI scripts/extract_scores.py (движок OCR подменён заглушкой).
"""

import importlib.util
import json
import sys
from pathlib import Path

import pytest
from loguru import logger

from bulletin_ocr.extraction.application.extraction_pipeline import ExtractionPipeline

SCRIPT_PATH = Path(__file__).resolve().parents[2] / "scripts" / "extract_scores.py"


@pytest.fixture
def cli():
    spec = importlib.util.spec_from_file_location("extract_scores", SCRIPT_PATH)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    yield module
    # main() перенастраивает sink на текущий stderr, возвращаем стандартный
    logger.remove()
    logger.add(sys.stderr)


def _run(cli, monkeypatch, *args):
    monkeypatch.setattr(sys, "argv", ["extract_scores.py", *args, "--engine", "tesseract", "--log-level", "ERROR"])
    return cli.main()


def test_prints_scores_as_json(cli, monkeypatch, capsys, tmp_path, png_raw_image, stub_factory, bulletin_text):
    image_path = tmp_path / "bulletin.png"
    image_path.write_bytes(png_raw_image.content)
    pipeline = ExtractionPipeline(ocr_provider_factory=stub_factory(text=bulletin_text))
    monkeypatch.setattr(
        cli.ExtractionComponentFactory, "create_extraction_pipeline", staticmethod(lambda engine: pipeline)
    )

    exit_code = _run(cli, monkeypatch, str(image_path))

    output = json.loads(capsys.readouterr().out)
    assert exit_code == 0
    assert output["form_values"] == {
        "math_score": 14.5,
        "french_score": 11.0,
        "english_score": 16.0,
        "average_score": 13.83,
    }
    assert output["summary"]["title"] == "3 note(s) extraite(s)"
    assert output["source_name"] == "bulletin.png"


def test_unsupported_file_prints_hint(cli, monkeypatch, capsys, tmp_path):
    image_path = tmp_path / "bulletin.gif"
    image_path.write_bytes(b"GIF89a")

    exit_code = _run(cli, monkeypatch, str(image_path))

    output = json.loads(capsys.readouterr().out)
    assert exit_code == 1
    assert output == {"error": "InvalidInputError", "hint": "Seules les images sont acceptées"}


def test_missing_file(cli, monkeypatch, tmp_path):
    assert _run(cli, monkeypatch, str(tmp_path / "nope.png")) == 1
