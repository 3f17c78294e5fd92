"""
Канал команд к устройству Junos.

CommandChannel — контракт, которым пользуется RpcClient:
    run_command(command) -> bytes

SshConnection — реализация поверх уже открытого подключения Scrapli.
ConnectionManager — открывает/закрывает подключения Scrapli
и переводит ошибки Scrapli в иерархию TransportError.

Пример использования:
    manager = ConnectionManager(timeout_ops=30)
    with manager.connect(device, credentials) as channel:
        raw = channel.run_command("show bgp summary | display xml")
"""

import logging
import re
import threading
from contextlib import contextmanager
from typing import Any, Dict, Generator, Protocol

from scrapli import Scrapli
from scrapli.exceptions import (
    ScrapliAuthenticationFailed,
    ScrapliException,
    ScrapliTimeout,
)

from .credentials import Credentials
from .device import Device, DeviceStatus
from .exceptions import (
    AuthenticationError,
    ConnectionError as CollectorConnectionError,
    TimeoutError as CollectorTimeoutError,
    TransportError,
)

logger = logging.getLogger(__name__)


# Синонимы платформ → драйвер Scrapli
SCRAPLI_PLATFORM_MAP = {
    "juniper_junos": "juniper_junos",
    "juniper": "juniper_junos",
    "junos": "juniper_junos",
}


def get_scrapli_platform(platform: str) -> str:
    """
    Преобразует платформу устройства в драйвер Scrapli.

    Args:
        platform: Платформа из конфигурации (juniper, junos, juniper_junos)

    Returns:
        str: Драйвер для Scrapli
    """
    if not platform:
        return "juniper_junos"
    return SCRAPLI_PLATFORM_MAP.get(platform.lower(), "juniper_junos")


class CommandChannel(Protocol):
    """Канал, привязанный к одному устройству."""

    def run_command(self, command: str) -> bytes:
        """Выполняет CLI команду и возвращает сырой ответ."""
        ...


class SshConnection:
    """
    CommandChannel поверх открытого подключения Scrapli.

    Одновременно выполняется не более одной команды: вызовы
    run_command сериализуются блокировкой.

    Attributes:
        host: Устройство, к которому привязан канал
    """

    def __init__(self, connection: Any, host: str, timeout_ops: int = 60):
        self._connection = connection
        self._lock = threading.Lock()
        self.host = host
        self.timeout_ops = timeout_ops

    def run_command(self, command: str) -> bytes:
        """
        Выполняет команду на устройстве.

        Args:
            command: CLI команда (с суффиксом | display xml)

        Returns:
            bytes: Вывод команды

        Raises:
            TimeoutError: Команда не завершилась за timeout_ops
            TransportError: Канал закрыт или устройство вернуло ошибку
        """
        with self._lock:
            try:
                response = self._connection.send_command(command)
            except ScrapliTimeout as e:
                raise CollectorTimeoutError(
                    f"Таймаут выполнения команды: {e}",
                    device=self.host,
                    timeout_seconds=self.timeout_ops,
                    command=command,
                ) from e
            except ScrapliException as e:
                raise TransportError(
                    f"Ошибка канала: {e}",
                    device=self.host,
                    command=command,
                ) from e

        if response.failed:
            raise TransportError(
                f"Устройство отклонило команду: {response.result.strip()[:200]}",
                device=self.host,
                command=command,
            )

        return response.result.encode("utf-8")


class ConnectionManager:
    """
    Менеджер SSH подключений через Scrapli.

    Attributes:
        timeout_socket: Таймаут сокета (секунды)
        timeout_transport: Таймаут транспорта (секунды)
        timeout_ops: Таймаут операций (секунды)
        transport: Тип транспорта (system, paramiko, ssh2)

    Example:
        manager = ConnectionManager(timeout_socket=15)
        with manager.connect(device, creds) as channel:
            client = RpcClient(channel)
    """

    def __init__(
        self,
        timeout_socket: int = 15,
        timeout_transport: int = 30,
        timeout_ops: int = 60,
        transport: str = "system",
    ):
        self.timeout_socket = timeout_socket
        self.timeout_transport = timeout_transport
        self.timeout_ops = timeout_ops
        self.transport = transport

    def _build_connection_params(
        self,
        device: Device,
        credentials: Credentials,
    ) -> Dict[str, Any]:
        """
        Формирует параметры подключения для Scrapli.

        Returns:
            Dict: Параметры для Scrapli
        """
        params = {
            "host": device.host,
            "platform": get_scrapli_platform(device.platform),
            "transport": self.transport,
            "auth_strict_key": False,
            "timeout_socket": self.timeout_socket,
            "timeout_transport": self.timeout_transport,
            "timeout_ops": self.timeout_ops,
            **credentials.to_scrapli_params(),
        }

        if device.port and device.port != 22:
            params["port"] = device.port

        return params

    def _open(self, device: Device, credentials: Credentials) -> Scrapli:
        """Открывает подключение и переводит ошибки Scrapli в TransportError."""
        params = self._build_connection_params(device, credentials)

        try:
            logger.info(f"Подключение к {device.host}...")
            connection = Scrapli(**params)
            connection.open()
            return connection

        except ScrapliTimeout as e:
            device.status = DeviceStatus.OFFLINE
            device.last_error = f"Таймаут подключения: {e}"
            logger.error(f"Таймаут при подключении к {device.host}: {e}")
            raise CollectorTimeoutError(
                f"Таймаут подключения: {e}",
                device=device.host,
                timeout_seconds=self.timeout_socket,
            ) from e

        except ScrapliAuthenticationFailed as e:
            device.status = DeviceStatus.ERROR
            device.last_error = f"Ошибка аутентификации: {e}"
            logger.error(f"Ошибка аутентификации на {device.host}: {e}")
            raise AuthenticationError(
                f"Ошибка аутентификации: {e}",
                device=device.host,
            ) from e

        except (ScrapliException, OSError) as e:
            device.status = DeviceStatus.ERROR
            device.last_error = f"Ошибка подключения: {e}"
            logger.error(f"Ошибка подключения к {device.host}: {e}")
            raise CollectorConnectionError(
                f"Ошибка подключения: {e}",
                device=device.host,
                port=device.port or 22,
            ) from e

    @contextmanager
    def connect(
        self,
        device: Device,
        credentials: Credentials,
    ) -> Generator[SshConnection, None, None]:
        """
        Контекстный менеджер для подключения к устройству.

        Закрывает соединение при выходе из контекста и обновляет
        статус устройства.

        Yields:
            SshConnection: Канал команд к устройству

        Raises:
            TimeoutError: Таймаут подключения
            AuthenticationError: Ошибка аутентификации
            ConnectionError: Прочие ошибки подключения
        """
        connection = self._open(device, credentials)
        try:
            device.status = DeviceStatus.ONLINE
            device.hostname = self.get_hostname(connection)
            logger.info(f"Подключено к {device.display_name}")

            yield SshConnection(connection, device.host, timeout_ops=self.timeout_ops)
        finally:
            try:
                connection.close()
                logger.debug(f"Отключено от {device.host}")
            except ScrapliException as e:
                logger.debug(f"Ошибка при закрытии {device.host}: {e}")

    @staticmethod
    def get_hostname(connection: Any) -> str:
        """
        Получает hostname устройства из prompt.

        Junos prompt вида "user@mx1-core>".

        Returns:
            str: Hostname устройства
        """
        try:
            prompt = connection.get_prompt()
        except ScrapliException as e:
            logger.warning(f"Не удалось получить hostname: {e}")
            return "Unknown"

        hostname = re.sub(r"[#>%$\s]+$", "", prompt).strip()
        if "@" in hostname:
            hostname = hostname.split("@", 1)[1]
        return hostname if hostname else "Unknown"
