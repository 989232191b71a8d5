"""
Настройка логирования (loguru) для скриптов и сервисов.

Библиотечный код пишет в глобальный loguru logger и ничего не настраивает сам.
"""

import sys

from loguru import logger

from config.settings import LOG_LEVEL

LOG_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
    "<level>{level: <8}</level> | "
    "<level>{message}</level>"
)


def configure_logging(level: str = LOG_LEVEL) -> None:
    """Заменяет стандартный sink loguru одним sink в stderr с заданным уровнем."""
    logger.remove()
    logger.add(sys.stderr, format=LOG_FORMAT, level=level.upper())
