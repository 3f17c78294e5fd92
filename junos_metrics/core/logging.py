"""
Structured Logging для Junos Metrics.

Логи сбора несут контекст: устройство, домен, коллектор, команду.
Формат — JSON (для Loki/ELK) или строка для консоли.

Пример использования:
    from junos_metrics.core.logging import LogConfig, get_logger, setup_logging

    setup_logging(LogConfig(json_format=True))

    log = get_logger(__name__).bind(device="mx1")
    log.info("Выполнение команды", command="show bgp summary | display xml")

Формат вывода (JSON):
    {"timestamp": "2026-03-14T10:30:15.123456", "level": "INFO",
     "logger": "junos_metrics.core.rpc", "message": "Выполнение команды",
     "device": "mx1", "command": "show bgp summary | display xml"}
"""

import json
import logging
import logging.handlers
import sys
from dataclasses import dataclass, fields
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, Optional

# Атрибуты самого LogRecord; всё остальное пришло через extra
_RECORD_ATTRS = frozenset(vars(logging.makeLogRecord({}))) | {"message", "asctime"}


def _extra_fields(record: logging.LogRecord) -> Dict[str, Any]:
    return {
        key: value
        for key, value in vars(record).items()
        if key not in _RECORD_ATTRS and not key.startswith("_")
    }


@dataclass
class LogConfig:
    """
    Настройки логирования (секция logging в config.yaml).

    Attributes:
        level: Уровень логирования
        json_format: JSON вместо строкового формата
        console: Писать в stderr
        file_path: Файл логов (None = без файла)
        max_bytes: Размер файла до ротации (0 = без ротации)
        backup_count: Сколько старых файлов хранить
    """
    level: int = logging.INFO
    json_format: bool = False
    console: bool = True
    file_path: Optional[str] = None
    max_bytes: int = 10 * 1024 * 1024
    backup_count: int = 5

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "LogConfig":
        """Создаёт конфигурацию из словаря; уровень можно задать именем."""
        known = {f.name for f in fields(cls)}
        values = {key: value for key, value in data.items() if key in known and value is not None}

        level = values.get("level", logging.INFO)
        if isinstance(level, str):
            values["level"] = getattr(logging, level.upper(), logging.INFO)
        return cls(**values)


class JSONFormatter(logging.Formatter):
    """Одна запись = один JSON объект; поля extra добавляются как есть."""

    def format(self, record: logging.LogRecord) -> str:
        data = {
            "timestamp": datetime.fromtimestamp(record.created).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        data.update(_extra_fields(record))

        if record.exc_info:
            data["exception"] = self.formatException(record.exc_info)

        return json.dumps(data, ensure_ascii=False, default=str)


class HumanFormatter(logging.Formatter):
    """
    Строковый формат для консоли.

    Формат: TIMESTAMP - LEVEL - MESSAGE (device=mx1, domain=bgp)
    """

    CONTEXT_FIELDS = ("device", "domain", "collector", "command")

    def __init__(self):
        super().__init__(datefmt="%Y-%m-%d %H:%M:%S")

    def format(self, record: logging.LogRecord) -> str:
        context = [
            f"{name}={getattr(record, name)}"
            for name in self.CONTEXT_FIELDS
            if getattr(record, name, None)
        ]
        line = f"{self.formatTime(record, self.datefmt)} - {record.levelname:<8} - {record.getMessage()}"
        if context:
            line += f" ({', '.join(context)})"

        if record.exc_info:
            line += "\n" + self.formatException(record.exc_info)
        return line


class StructuredLogger:
    """
    Обёртка над logging.Logger: именованные поля вместо extra={...}.

        log = get_logger(__name__).bind(device="mx1")
        log.error("Домен bgp: таймаут", collector="bgp")
    """

    def __init__(self, name: str, default_extra: Optional[Dict[str, Any]] = None):
        self._logger = logging.getLogger(name)
        self._default_extra = default_extra or {}

    def _log(self, level: int, message: str, exc_info: bool = False, **kwargs: Any) -> None:
        self._logger.log(level, message, exc_info=exc_info, extra={**self._default_extra, **kwargs})

    def debug(self, message: str, **kwargs: Any) -> None:
        self._log(logging.DEBUG, message, **kwargs)

    def info(self, message: str, **kwargs: Any) -> None:
        self._log(logging.INFO, message, **kwargs)

    def warning(self, message: str, **kwargs: Any) -> None:
        self._log(logging.WARNING, message, **kwargs)

    def error(self, message: str, exc_info: bool = False, **kwargs: Any) -> None:
        self._log(logging.ERROR, message, exc_info=exc_info, **kwargs)

    def bind(self, **kwargs: Any) -> "StructuredLogger":
        """Новый логгер с дополнительными полями по умолчанию."""
        return StructuredLogger(self._logger.name, default_extra={**self._default_extra, **kwargs})

    def isEnabledFor(self, level: int) -> bool:
        return self._logger.isEnabledFor(level)


_loggers: Dict[str, StructuredLogger] = {}


def get_logger(name: str) -> StructuredLogger:
    """StructuredLogger по имени модуля (кэшируется)."""
    if name not in _loggers:
        _loggers[name] = StructuredLogger(name)
    return _loggers[name]


def setup_logging(config: Optional[LogConfig] = None, stream: Any = None) -> None:
    """
    Настраивает root logger: консоль и/или файл с ротацией по размеру.

    Прежние handlers root logger удаляются.

    Args:
        config: Настройки (по умолчанию LogConfig())
        stream: Поток консоли (по умолчанию sys.stderr)
    """
    config = config or LogConfig()
    formatter = JSONFormatter() if config.json_format else HumanFormatter()

    root_logger = logging.getLogger()
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    handlers = []
    if config.console:
        handlers.append(logging.StreamHandler(stream or sys.stderr))
    if config.file_path:
        Path(config.file_path).parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.handlers.RotatingFileHandler(
            config.file_path,
            maxBytes=config.max_bytes,
            backupCount=config.backup_count,
            encoding="utf-8",
        ))

    for handler in handlers:
        handler.setLevel(config.level)
        handler.setFormatter(formatter)
        root_logger.addHandler(handler)
    root_logger.setLevel(config.level)
