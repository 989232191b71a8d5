#!/usr/bin/env python3
"""
Точка входа: извлечение оценок из фото бюллетеня.

Использование:
    # Французский бюллетень, с препроцессингом
    python scripts/extract_scores.py path/to/bulletin.jpg

    # Без препроцессинга, французский + английский
    python scripts/extract_scores.py path/to/bulletin.png --no-preprocessing --language fra+eng

    # Через Google Vision
    python scripts/extract_scores.py path/to/bulletin.jpg --engine google_vision

Результат печатается как JSON в stdout, логи идут в stderr.
"""

import sys
import argparse
import json
from pathlib import Path

# Добавляем корень проекта в путь
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from loguru import logger

from config.settings import OCR_ENGINE, LOG_LEVEL, validate_config
from contracts.d1_extraction_dto import RawImage
from bulletin_ocr.domain.contracts import ExtractionConfig, OcrLanguage
from bulletin_ocr.extraction.application.factory import ExtractionComponentFactory, SUPPORTED_ENGINES
from bulletin_ocr.extraction.domain.exceptions import ExtractionError
from bulletin_ocr.logging_setup import configure_logging

MIME_BY_SUFFIX = {
    ".png": "image/png",
    ".jpg": "image/jpeg",
    ".jpeg": "image/jpeg",
}


def main() -> int:
    """Главная функция запуска извлечения."""
    parser = argparse.ArgumentParser(description="Bulletin OCR - извлечение оценок")
    parser.add_argument("path", help="Путь к изображению бюллетеня (PNG/JPEG)")
    parser.add_argument("--no-preprocessing", action="store_true", help="Отключить resize/grayscale/binarize")
    parser.add_argument(
        "--language",
        choices=[lang.value for lang in OcrLanguage],
        default=OcrLanguage.PRIMARY.value,
        help="Язык бюллетеня"
    )
    parser.add_argument("--engine", choices=SUPPORTED_ENGINES, default=OCR_ENGINE, help="OCR движок")
    parser.add_argument("--log-level", default=LOG_LEVEL, help="Уровень логирования")
    args = parser.parse_args()

    configure_logging(args.log_level)

    try:
        validate_config()
    except ValueError as e:
        logger.error(f"[CLI] Конфигурация некорректна:\n{e}")
        return 1

    image_path = Path(args.path)
    if not image_path.exists():
        logger.error(f"[CLI] Файл не найден: {image_path}")
        return 1

    raw_image = RawImage(
        content=image_path.read_bytes(),
        mime_type=MIME_BY_SUFFIX.get(image_path.suffix.lower(), "application/octet-stream"),
        source_name=image_path.name,
    )
    config = ExtractionConfig(
        preprocessing_enabled=not args.no_preprocessing,
        ocr_language=OcrLanguage(args.language),
    )

    pipeline = ExtractionComponentFactory.create_extraction_pipeline(engine=args.engine)

    try:
        result = pipeline.extract(raw_image, config)
    except ExtractionError as e:
        logger.error(f"[CLI] {e}")
        print(json.dumps({"error": type(e).__name__, "hint": e.user_hint}, ensure_ascii=False, indent=2))
        return 1

    output = result.to_dict()
    output["summary"] = result.summary()
    output["form_values"] = result.to_form_values()
    print(json.dumps(output, ensure_ascii=False, indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
