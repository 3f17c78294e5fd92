"""
Тесты structured logging.

Проверяет:
- JSON и human-readable форматтеры с полями device/command
- bind() добавляет default поля
- LogConfig.from_dict и файл с ротацией по размеру
"""

import io
import json
import logging
import logging.handlers

import pytest

from junos_metrics.core.logging import (
    HumanFormatter,
    JSONFormatter,
    LogConfig,
    StructuredLogger,
    get_logger,
    setup_logging,
)


@pytest.fixture
def restore_root_logger():
    """Убирает handlers, добавленные тестом, и восстанавливает уровень."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield root
    for handler in root.handlers[:]:
        if handler not in handlers:
            root.removeHandler(handler)
            handler.close()
    root.setLevel(level)


def make_record(message="Команда выполнена", **extra):
    record = logging.LogRecord(
        name="junos_metrics.core.rpc",
        level=logging.INFO,
        pathname=__file__,
        lineno=1,
        msg=message,
        args=(),
        exc_info=None,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


@pytest.mark.unit
class TestFormatters:
    """Тесты форматтеров."""

    def test_json_formatter(self):
        record = make_record(device="mx1", command="show bgp summary | display xml", custom=5)
        data = json.loads(JSONFormatter().format(record))

        assert data["level"] == "INFO"
        assert data["message"] == "Команда выполнена"
        assert data["logger"] == "junos_metrics.core.rpc"
        assert data["device"] == "mx1"
        assert data["command"] == "show bgp summary | display xml"
        assert data["custom"] == 5
        assert "lineno" not in data

    def test_human_formatter(self):
        line = HumanFormatter().format(make_record(device="mx1", domain="bgp"))
        assert "INFO" in line
        assert line.endswith("Команда выполнена (device=mx1, domain=bgp)")

    def test_human_formatter_without_extra(self):
        assert HumanFormatter().format(make_record()).endswith("Команда выполнена")


@pytest.mark.unit
class TestStructuredLogger:
    """Тесты обёртки логгера."""

    def test_bind_adds_fields(self, restore_root_logger):
        stream = io.StringIO()
        setup_logging(LogConfig(level=logging.DEBUG, json_format=True), stream=stream)

        logger = StructuredLogger("junos_metrics.test").bind(device="mx1")
        logger.info("Подключено", collector="bgp")

        data = json.loads(stream.getvalue().strip())
        assert data["device"] == "mx1"
        assert data["collector"] == "bgp"

    def test_bind_returns_new_logger(self):
        base = StructuredLogger("junos_metrics.test")
        bound = base.bind(device="mx1")
        assert bound is not base
        assert base._default_extra == {}

    def test_level_filter(self, restore_root_logger):
        stream = io.StringIO()
        setup_logging(LogConfig(level=logging.WARNING), stream=stream)

        logger = StructuredLogger("junos_metrics.test")
        logger.info("не видно")
        logger.warning("видно")

        output = stream.getvalue()
        assert "не видно" not in output
        assert "видно" in output
        assert not logger.isEnabledFor(logging.DEBUG)


@pytest.mark.unit
class TestLogConfig:
    """Тесты конфигурации логирования."""

    def test_from_dict(self):
        config = LogConfig.from_dict({"level": "debug", "file_path": "x.log", "max_bytes": 0})
        assert config.level == logging.DEBUG
        assert config.file_path == "x.log"
        assert config.max_bytes == 0

    def test_from_dict_defaults(self):
        config = LogConfig.from_dict({})
        assert config.level == logging.INFO
        assert config.console is True
        assert config.backup_count == 5

    def test_from_dict_ignores_unknown_keys(self):
        config = LogConfig.from_dict({"level": "WARNING", "rotation": "time"})
        assert config.level == logging.WARNING

    def test_file_handler_size_rotation(self, tmp_path, restore_root_logger):
        log_file = tmp_path / "logs" / "junos.log"
        setup_logging(LogConfig(
            console=False,
            file_path=str(log_file),
            json_format=True,
        ))

        handlers = restore_root_logger.handlers
        assert len(handlers) == 1
        assert isinstance(handlers[0], logging.handlers.RotatingFileHandler)
        assert isinstance(handlers[0].formatter, JSONFormatter)
        assert log_file.parent.exists()

    def test_console_and_file(self, tmp_path, restore_root_logger):
        setup_logging(LogConfig(file_path=str(tmp_path / "junos.log")))

        kinds = [type(h) for h in restore_root_logger.handlers]
        assert kinds == [logging.StreamHandler, logging.handlers.RotatingFileHandler]
        assert all(isinstance(h.formatter, HumanFormatter) for h in restore_root_logger.handlers)

    def test_get_logger_cached(self):
        assert get_logger("junos_metrics.test") is get_logger("junos_metrics.test")
