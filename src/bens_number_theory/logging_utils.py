"""
Logging helpers

Модули пакета получают логгеры через get_logger без побочных эффектов.
Handler и уровень появляются только после явного вызова configure_logging:
stream handler, общий формат, уровень из LibrarySettings.
"""

import logging
import sys
from typing import Final

from bens_number_theory.config import get_settings

PACKAGE_LOGGER_NAME: Final[str] = "bens_number_theory"

LOG_FORMAT: Final[str] = "[%(asctime)s] [%(levelname)s] [%(name)s] %(message)s"

LOG_DATE_FORMAT: Final[str] = "%Y-%m-%d %H:%M:%S"


def _has_stream_handler(logger: logging.Logger) -> bool:
    return any(not isinstance(h, logging.NullHandler) for h in logger.handlers)


def configure_logging() -> logging.Logger:
    """
    Настройка логгера пакета для приложения.

    Читает LibrarySettings (включая .env), выставляет уровень и добавляет
    stderr handler. Повторный вызов не добавляет второй handler.

    Returns:
        Логгер пакета
    """
    logger = logging.getLogger(PACKAGE_LOGGER_NAME)

    if _has_stream_handler(logger):
        return logger  # уже настроен

    settings = get_settings()
    logger.setLevel(getattr(logging, settings.log_level.upper(), logging.WARNING))

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT))
    logger.addHandler(handler)

    logger.debug("Logger configured with level %s", settings.log_level)
    return logger


def get_logger(name: str = PACKAGE_LOGGER_NAME) -> logging.Logger:
    """
    Логгер для модуля пакета.

    Args:
        name: Имя модуля (обычно __name__)

    Returns:
        Дочерний логгер пакета (не настраивает handlers)
    """
    return logging.getLogger(name)
