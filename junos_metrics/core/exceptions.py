"""
Типизированные исключения для Junos Metrics.

Иерархия:
    JunosMetricsError (базовый)
    ├── CollectorError (сбор данных)
    │   ├── TransportError (канал команд)
    │   │   ├── ConnectionError (SSH подключение)
    │   │   ├── AuthenticationError (авторизация)
    │   │   └── TimeoutError (таймаут)
    │   └── DecodeError (XML ответ не соответствует схеме)
    └── ConfigError (конфигурация)

Пример использования:
    from junos_metrics.core.exceptions import TransportError, DecodeError

    try:
        stats = client.interface_stats()
    except TransportError as e:
        logger.error(f"Канал: {e.device} - {e.message}")
    except DecodeError as e:
        logger.error(f"Разбор: {e.command} - {e.message}")
"""

from typing import Optional


class JunosMetricsError(Exception):
    """
    Базовое исключение для всех ошибок Junos Metrics.

    Attributes:
        message: Описание ошибки
        details: Дополнительные детали (dict)
    """

    def __init__(self, message: str, details: Optional[dict] = None):
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        if self.details:
            details_str = ", ".join(f"{k}={v!r}" for k, v in self.details.items())
            return f"{self.message} ({details_str})"
        return self.message

    def to_dict(self) -> dict:
        """Сериализация для логов/отчётов."""
        return {
            "error_type": self.__class__.__name__,
            "message": self.message,
            "details": self.details,
        }


# === Collector Errors ===

class CollectorError(JunosMetricsError):
    """
    Ошибка при сборе данных с устройства.

    Attributes:
        device: IP или hostname устройства
        message: Описание ошибки
    """

    def __init__(
        self,
        message: str,
        device: Optional[str] = None,
        details: Optional[dict] = None,
    ):
        self.device = device
        details = details or {}
        if device:
            details["device"] = device
        super().__init__(message, details)


class TransportError(CollectorError):
    """
    Канал команд не смог выполнить команду.

    Прерывает весь вызов домена: записи не возвращаются.

    Attributes:
        command: Команда которая не была выполнена

    Пример:
        raise TransportError("Channel closed", device="mx1", command="show bgp summary")
    """

    def __init__(
        self,
        message: str,
        device: Optional[str] = None,
        command: Optional[str] = None,
        details: Optional[dict] = None,
    ):
        self.command = command
        details = details or {}
        if command:
            details["command"] = command
        super().__init__(message, device, details)


class ConnectionError(TransportError):
    """
    Ошибка SSH подключения.

    Пример:
        raise ConnectionError("Connection refused", device="192.168.1.1", port=22)
    """

    def __init__(
        self,
        message: str,
        device: Optional[str] = None,
        port: int = 22,
        command: Optional[str] = None,
        details: Optional[dict] = None,
    ):
        details = details or {}
        details["port"] = port
        super().__init__(message, device, command, details)


class AuthenticationError(TransportError):
    """
    Ошибка аутентификации (неверный логин/пароль).

    Пример:
        raise AuthenticationError("Invalid credentials", device="192.168.1.1")
    """
    pass


class TimeoutError(TransportError):
    """
    Таймаут при подключении или выполнении команды.

    Attributes:
        timeout_seconds: Значение таймаута

    Пример:
        raise TimeoutError("Connection timeout", device="192.168.1.1", timeout_seconds=30)
    """

    def __init__(
        self,
        message: str,
        device: Optional[str] = None,
        timeout_seconds: Optional[float] = None,
        command: Optional[str] = None,
        details: Optional[dict] = None,
    ):
        self.timeout_seconds = timeout_seconds
        details = details or {}
        if timeout_seconds:
            details["timeout_seconds"] = timeout_seconds
        super().__init__(message, device, command, details)


class DecodeError(CollectorError):
    """
    XML ответ не соответствует схеме домена.

    Разбор всё-или-ничего: частичных записей не бывает.

    Attributes:
        command: Команда чей вывод не разобрался
        domain: Домен телеметрии (interfaces, bgp, ...)
        path: Путь к элементу с ошибкой (если известен)

    Пример:
        raise DecodeError("Not a number", command="show bgp summary", path="bgp-peer/flap-count")
    """

    def __init__(
        self,
        message: str,
        device: Optional[str] = None,
        command: Optional[str] = None,
        domain: Optional[str] = None,
        path: Optional[str] = None,
        details: Optional[dict] = None,
    ):
        self.command = command
        self.domain = domain
        self.path = path
        details = details or {}
        if command:
            details["command"] = command
        if domain:
            details["domain"] = domain
        if path:
            details["path"] = path
        super().__init__(message, device, details)


# === Config Errors ===

class ConfigError(JunosMetricsError):
    """
    Ошибка конфигурации.

    Выбрасывается при старте, до любого сбора (например, неверный regex
    фильтра аварий).

    Attributes:
        config_file: Путь к файлу конфигурации
        key: Ключ конфигурации с ошибкой

    Пример:
        raise ConfigError("Invalid pattern", key="exporter.alarm_filter")
    """

    def __init__(
        self,
        message: str,
        config_file: Optional[str] = None,
        key: Optional[str] = None,
        details: Optional[dict] = None,
    ):
        self.config_file = config_file
        self.key = key
        details = details or {}
        if config_file:
            details["config_file"] = config_file
        if key:
            details["key"] = key
        super().__init__(message, details)


# === Utility Functions ===

def format_error_for_log(error: Exception) -> str:
    """
    Форматирует ошибку для вывода в лог.

    Args:
        error: Исключение

    Returns:
        str: Отформатированная строка ошибки
    """
    if isinstance(error, JunosMetricsError):
        return str(error)
    return f"{error.__class__.__name__}: {error}"
