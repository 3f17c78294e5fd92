"""
Pydantic схемы для валидации config.yaml.

Валидация происходит при загрузке конфигурации.
Ошибки валидации выбрасывают ConfigError.

Пример использования:
    from junos_metrics.core.config_schema import validate_config

    config_dict = yaml.safe_load(open("config.yaml"))
    validated = validate_config(config_dict)  # raises ConfigError on failure
"""

import re
from typing import List, Optional

from pydantic import BaseModel, Field, ValidationError, field_validator
from pydantic_core import PydanticCustomError

from .exceptions import ConfigError


class ConnectionConfig(BaseModel):
    """Настройки подключения (таймауты Scrapli)."""
    port: int = Field(default=22, ge=1, le=65535)
    timeout_socket: int = Field(default=15, ge=1, le=300)
    timeout_transport: int = Field(default=30, ge=1, le=600)
    timeout_ops: int = Field(default=60, ge=1, le=600)
    transport: str = Field(default="system", pattern="^(system|paramiko|ssh2)$")


class FeaturesConfig(BaseModel):
    """Включённые домены телеметрии."""
    alarm: bool = True
    interfaces: bool = True
    bgp: bool = True
    ospf: bool = True
    isis: bool = False
    routes: bool = True
    routing_engine: bool = True
    environment: bool = True
    interface_diagnostics: bool = False

    def enabled(self) -> List[str]:
        """Имена включённых доменов в порядке объявления."""
        return [name for name, value in self.model_dump().items() if value]


class ExporterConfig(BaseModel):
    """Настройки сбора и вывода метрик."""
    alarm_filter: Optional[str] = None
    debug: bool = False
    output_folder: str = "metrics"
    default_format: str = Field(default="prometheus", pattern="^(prometheus|json)$")

    @field_validator("alarm_filter")
    @classmethod
    def validate_alarm_filter(cls, v: Optional[str]) -> Optional[str]:
        """Проверяет что фильтр аварий — корректный regex."""
        if not v:
            return None
        try:
            re.compile(v)
        except re.error as e:
            raise PydanticCustomError(
                "invalid_regex",
                "Некорректное регулярное выражение: {error}",
                {"error": str(e)},
            )
        return v


class LoggingConfig(BaseModel):
    """Настройки логирования."""
    level: str = Field(default="INFO", pattern="^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$")
    json_format: bool = False
    console: bool = True
    file_path: Optional[str] = None
    max_bytes: int = Field(default=10 * 1024 * 1024, ge=0)
    backup_count: int = Field(default=5, ge=1, le=100)


class DeviceConfig(BaseModel):
    """Устройство из секции devices."""
    host: str = Field(min_length=1)
    port: Optional[int] = Field(default=None, ge=1, le=65535)
    platform: str = "juniper_junos"


class AppConfig(BaseModel):
    """Полная конфигурация приложения."""
    connection: ConnectionConfig = Field(default_factory=ConnectionConfig)
    features: FeaturesConfig = Field(default_factory=FeaturesConfig)
    exporter: ExporterConfig = Field(default_factory=ExporterConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    devices: List[DeviceConfig] = Field(default_factory=list)


def validate_config(config_dict: dict, config_file: str = "config.yaml") -> AppConfig:
    """
    Валидирует словарь конфигурации.

    Args:
        config_dict: Словарь из YAML
        config_file: Имя файла для сообщения об ошибке

    Returns:
        AppConfig: Валидированная конфигурация

    Raises:
        ConfigError: При ошибке валидации
    """
    try:
        return AppConfig(**config_dict)
    except ValidationError as e:
        key = None
        error_msg = str(e)
        errors = e.errors()
        if errors:
            first_error = errors[0]
            key = ".".join(str(x) for x in first_error.get("loc", []))
            msg = first_error.get("msg", "Unknown error")
            error_msg = f"{key}: {msg}"

        raise ConfigError(
            message=f"Ошибка валидации конфигурации: {error_msg}",
            config_file=config_file,
            key=key,
        ) from e


def get_default_config() -> AppConfig:
    """Возвращает конфигурацию по умолчанию."""
    return AppConfig()
