"""
Модуль представления целевого устройства Junos.

Класс Device описывает цель сбора:
- Параметры подключения (host, порт, платформа)
- Метаданные (hostname из prompt)
- Состояние (online/offline, ошибки)

Пример использования:
    device = Device(host="10.0.0.1")
    device.hostname = "mx1-core"
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Optional


DEFAULT_PLATFORM = "juniper_junos"


class DeviceStatus(Enum):
    """Статус устройства."""
    UNKNOWN = "unknown"
    ONLINE = "online"
    OFFLINE = "offline"
    ERROR = "error"


@dataclass
class Device:
    """
    Цель сбора телеметрии.

    Attributes:
        host: IP-адрес или hostname устройства (значение метки target)
        platform: Драйвер scrapli
        port: SSH порт
        hostname: Имя устройства (определяется после подключения)
        status: Текущий статус
        last_error: Последняя ошибка

    Example:
        device = Device(host="10.0.0.1", port=830)
        print(device.display_name)  # "10.0.0.1"
    """

    host: str
    platform: str = DEFAULT_PLATFORM
    port: int = 22

    hostname: Optional[str] = None

    status: DeviceStatus = DeviceStatus.UNKNOWN
    last_error: Optional[str] = None

    metadata: Dict[str, Any] = field(default_factory=dict)

    @property
    def display_name(self) -> str:
        """Возвращает отображаемое имя устройства."""
        return self.hostname or self.host

    def __str__(self) -> str:
        return f"{self.display_name} ({self.host}:{self.port}, {self.status.value})"

    @classmethod
    def from_dict(cls, data: dict) -> "Device":
        """
        Создаёт Device из словаря (секция devices в config.yaml).

        Args:
            data: Словарь с параметрами устройства

        Returns:
            Device: Экземпляр устройства
        """
        return cls(
            host=data.get("host", data.get("ip", "")),
            platform=data.get("platform", DEFAULT_PLATFORM),
            port=int(data.get("port", 22)),
            hostname=data.get("hostname"),
        )
