"""
Загрузчик конфигурации из config.yaml.

Предоставляет доступ к настройкам через точку:
    config.connection.timeout_ops
    config.exporter.alarm_filter
    config.features.bgp
"""

import os
import logging
from typing import Any, Optional

import yaml

from .core.config_schema import AppConfig, validate_config
from .core.exceptions import ConfigError

logger = logging.getLogger(__name__)

# Файлы конфигурации в порядке поиска
SEARCH_PATHS = [
    "config.yaml",
    "config.yml",
    ".junos_metrics.yaml",
]

ENV_ALARM_FILTER = "JUNOS_ALARM_FILTER"


class Config:
    """
    Главный класс конфигурации.

    Дефолты из AppConfig, поверх них YAML, поверх — переменные окружения.
    Итог валидируется pydantic схемой.

    Пример:
        config = load_config("config.yaml")
        config.exporter.alarm_filter  # "fan|PEM"
        config.features.enabled()     # ["alarm", "interfaces", ...]
    """

    def __init__(self, config_file: Optional[str] = None):
        self.config_file: Optional[str] = None
        self._app = AppConfig()
        self.reload(config_file)

    def _load_yaml(self, config_file: Optional[str] = None) -> dict:
        """Читает YAML файл (явный путь или первый найденный)."""
        if config_file and not os.path.exists(config_file):
            raise ConfigError(f"Файл конфигурации не найден: {config_file}", config_file=config_file)

        if not config_file:
            for path in SEARCH_PATHS:
                if os.path.exists(path):
                    config_file = path
                    break

        if not config_file:
            return {}

        try:
            with open(config_file, "r", encoding="utf-8") as f:
                yaml_data = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as e:
            raise ConfigError(f"Ошибка чтения {config_file}: {e}", config_file=config_file) from e

        if not isinstance(yaml_data, dict):
            raise ConfigError("Корень конфигурации должен быть словарём", config_file=config_file)

        # Пустая секция ("exporter:") = значения по умолчанию
        yaml_data = {key: value for key, value in yaml_data.items() if value is not None}

        self.config_file = config_file
        logger.debug(f"Конфигурация загружена из {config_file}")
        return yaml_data

    @staticmethod
    def _apply_env(data: dict) -> None:
        """Переменные окружения перекрывают YAML."""
        alarm_filter = os.getenv(ENV_ALARM_FILTER)
        if alarm_filter:
            data["exporter"] = {**(data.get("exporter") or {}), "alarm_filter": alarm_filter}

    def reload(self, config_file: Optional[str] = None) -> None:
        """Перезагружает конфигурацию."""
        data = self._load_yaml(config_file)
        self._apply_env(data)
        self._app = validate_config(data, config_file=self.config_file or "config.yaml")

    @property
    def app(self) -> AppConfig:
        """Валидированная pydantic модель."""
        return self._app

    def __getattr__(self, name: str) -> Any:
        if name.startswith("_"):
            return super().__getattribute__(name)
        return getattr(self._app, name)


def load_config(config_file: Optional[str] = None) -> Config:
    """
    Загружает конфигурацию из файла.

    Args:
        config_file: Путь к YAML файлу (опционально)

    Returns:
        Config: Объект конфигурации

    Raises:
        ConfigError: Файл не читается или не проходит валидацию
    """
    return Config(config_file)
