"""
Library Settings

Настройки библиотеки, загружаемые из переменных окружения (и .env файла).
Позволяют менять поведение без изменения кода.

Переменные:
- BENS_NUMBER_THEORY_LOG_LEVEL: уровень логирования пакета (default: WARNING)
"""

import os
from dataclasses import dataclass
from typing import Final, Optional

from dotenv import load_dotenv

LOG_LEVEL_ENV_VAR: Final[str] = "BENS_NUMBER_THEORY_LOG_LEVEL"

DEFAULT_LOG_LEVEL: Final[str] = "WARNING"


@dataclass(frozen=True)
class LibrarySettings:
    """Глобальные настройки библиотеки."""

    log_level: str = DEFAULT_LOG_LEVEL

    @classmethod
    def from_env(cls) -> "LibrarySettings":
        """
        Загрузка настроек из окружения.

        Сначала подгружается .env (если есть), уже заданные переменные
        окружения не перезаписываются.
        """
        load_dotenv()
        return cls(log_level=os.getenv(LOG_LEVEL_ENV_VAR, DEFAULT_LOG_LEVEL))


_settings: Optional[LibrarySettings] = None


def get_settings() -> LibrarySettings:
    """Кэшированный экземпляр настроек."""
    global _settings
    if _settings is None:
        _settings = LibrarySettings.from_env()
    return _settings


def reset_settings() -> None:
    """Сброс кэша настроек (следующий get_settings перечитает окружение)."""
    global _settings
    _settings = None
