"""
Настройки проекта Bulletin OCR.

Все значения можно переопределить через переменные окружения там,
где это имеет смысл (движок OCR, таймауты, пути к бинарникам).
"""

import os
from pathlib import Path

# =============================================================================
# ПУТИ ПРОЕКТА
# =============================================================================
PROJECT_ROOT = Path(__file__).parent.parent

# =============================================================================
# ЛОГИРОВАНИЕ
# =============================================================================
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

# =============================================================================
# ВХОДНЫЕ ДАННЫЕ
# =============================================================================
# Допустимые MIME типы загружаемых бюллетеней
ACCEPTED_MIME_TYPES = ("image/png", "image/jpeg", "image/jpg")

# Максимальный размер загружаемого файла (10 MiB)
MAX_UPLOAD_BYTES = 10 * 1024 * 1024

# =============================================================================
# НАСТРОЙКИ PRE-OCR
# =============================================================================
# Максимальный размер изображения (по большей стороне). Потолок, не цель.
MAX_IMAGE_SIZE = 2000

# Веса яркости ITU-R BT.601 (R, G, B)
LUMA_WEIGHTS = (0.299, 0.587, 0.114)

# Глобальный порог бинаризации: L > порога -> белый
BINARIZATION_THRESHOLD = 128

# =============================================================================
# НАСТРОЙКИ OCR
# =============================================================================
# Движок по умолчанию: "tesseract" или "google_vision"
OCR_ENGINE = os.getenv("OCR_ENGINE", "tesseract")

# Таймаут одного вызова OCR (секунды)
OCR_TIMEOUT_SECONDS = float(os.getenv("OCR_TIMEOUT_SECONDS", "30"))

# Разрешённые символы: цифры, разделители, латиница с французскими акцентами, пробел
OCR_CHAR_WHITELIST = (
    "0123456789.,/"
    "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz"
    "ÀÂÄÇÉÈÊËÎÏÔÖÙÛÜŸàâäçéèêëîïôöùûüÿ "
)

# Сохранять пробелы между словами (название предмета отделено от оценки)
OCR_PRESERVE_INTERWORD_SPACES = True

# Путь к бинарнику tesseract (если не в PATH)
TESSERACT_CMD = os.getenv("TESSERACT_CMD", "")

# Путь к JSON-файлу с ключом сервисного аккаунта (только для google_vision)
GOOGLE_APPLICATION_CREDENTIALS = os.getenv(
    "GOOGLE_APPLICATION_CREDENTIALS",
    str(PROJECT_ROOT / "config" / "google_credentials.json")
)

# =============================================================================
# НАСТРОЙКИ ПАРСИНГА ОЦЕНОК
# =============================================================================
# Шкала оценок
SCORE_MIN = 0.0
SCORE_MAX = 20.0

# Сколько следующих строк просматривать после строки с предметом
SCORE_LOOKAHEAD_LINES = 2

# Фиксированная эвристическая уверенность для каждой найденной оценки
DEFAULT_SCORE_CONFIDENCE = 0.85


# =============================================================================
# ПРОВЕРКА КОНФИГУРАЦИИ
# =============================================================================
def validate_config():
    """Проверяет корректность конфигурации."""
    errors = []

    if OCR_ENGINE not in ("tesseract", "google_vision"):
        errors.append(f"Неизвестный OCR_ENGINE: {OCR_ENGINE} (tesseract | google_vision)")

    if OCR_TIMEOUT_SECONDS <= 0:
        errors.append(f"OCR_TIMEOUT_SECONDS должен быть > 0, получено: {OCR_TIMEOUT_SECONDS}")

    if OCR_ENGINE == "google_vision" and not Path(GOOGLE_APPLICATION_CREDENTIALS).exists():
        errors.append(
            f"Файл credentials не найден: {GOOGLE_APPLICATION_CREDENTIALS}"
        )

    if TESSERACT_CMD and not Path(TESSERACT_CMD).exists():
        errors.append(f"Бинарник tesseract не найден: {TESSERACT_CMD}")

    if errors:
        raise ValueError("\n".join(errors))

    return True
