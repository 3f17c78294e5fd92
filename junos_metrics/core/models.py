"""
Data Models для Junos Metrics.

Нормализованные записи доменов телеметрии. Не зависят от XML и от
формата метрик: RpcClient создаёт их заново на каждый цикл сбора,
коллекторы превращают их в сэмплы.

Использование:
    from junos_metrics.core.models import InterfaceStats

    stats = client.interface_stats()
    for s in stats:
        print(s.name, s.admin_status, s.receive_bytes)

    # Сериализация в dict
    data = stats[0].to_dict()
"""

from dataclasses import dataclass, field, asdict
from typing import Any, Dict, Tuple


class _RecordMixin:
    """Общая сериализация для записей."""

    def to_dict(self) -> Dict[str, Any]:
        """Конвертирует в словарь."""
        return asdict(self)


@dataclass(frozen=True)
class InterfaceStats(_RecordMixin):
    """
    Счётчики одного физического или логического интерфейса.

    Логический интерфейс (unit) наследует MAC родителя и несёт только
    счётчики байт: статусы, ошибки и дропы для него не определены.

    Attributes:
        name: Имя интерфейса (ge-0/0/0, ge-0/0/0.0)
        description: Описание
        mac: Аппаратный адрес (у логических — адрес родителя)
        is_physical: Физический порт
        admin_status: Административно включён
        oper_status: Линк поднят
        error_status: admin и oper статусы расходятся
    """
    name: str
    description: str = ""
    mac: str = ""
    is_physical: bool = True
    admin_status: bool = False
    oper_status: bool = False
    error_status: bool = False
    receive_bytes: float = 0.0
    transmit_bytes: float = 0.0
    receive_errors: float = 0.0
    transmit_errors: float = 0.0
    receive_drops: float = 0.0
    transmit_drops: float = 0.0


@dataclass(frozen=True)
class AlarmCounter(_RecordMixin):
    """
    Количество активных аварий (system + chassis).

    Attributes:
        red_count: Major аварии
        yellow_count: Minor аварии
    """
    red_count: float = 0.0
    yellow_count: float = 0.0


@dataclass(frozen=True)
class BgpSession(_RecordMixin):
    """
    Состояние одного BGP пира.

    Attributes:
        ip: Адрес пира
        up: Сессия в состоянии Established
        asn: AS пира (строкой, как отдаёт устройство)
    """
    ip: str
    up: bool = False
    asn: str = ""
    flaps: float = 0.0
    input_messages: float = 0.0
    output_messages: float = 0.0
    accepted_prefixes: float = 0.0
    active_prefixes: float = 0.0
    received_prefixes: float = 0.0
    rejected_prefixes: float = 0.0


@dataclass(frozen=True)
class OspfArea(_RecordMixin):
    """Количество OSPFv3 соседей в состоянии up по области."""
    name: str
    neighbors: float = 0.0


@dataclass(frozen=True)
class IsisAdjacencies(_RecordMixin):
    """Агрегат по всем ISIS соседствам."""
    up: float = 0.0
    total: float = 0.0


@dataclass(frozen=True)
class ProtocolRouteCount(_RecordMixin):
    """Маршруты одного протокола внутри таблицы."""
    name: str
    routes: float = 0.0
    active_routes: float = 0.0


@dataclass(frozen=True)
class RoutingTable(_RecordMixin):
    """
    Счётчики одной таблицы маршрутизации.

    Attributes:
        protocols: Счётчики по протоколам в порядке ответа устройства
    """
    name: str
    max_routes: float = 0.0
    active_routes: float = 0.0
    total_routes: float = 0.0
    protocols: Tuple[ProtocolRouteCount, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class RouteEngineStats(_RecordMixin):
    """Снимок состояния routing-engine (control plane)."""
    temperature: float = 0.0
    cpu_temperature: float = 0.0
    memory_utilization: float = 0.0
    cpu_user: float = 0.0
    cpu_background: float = 0.0
    cpu_system: float = 0.0
    cpu_interrupt: float = 0.0
    cpu_idle: float = 0.0
    load_average_one: float = 0.0
    load_average_five: float = 0.0
    load_average_fifteen: float = 0.0


@dataclass(frozen=True)
class EnvironmentItem(_RecordMixin):
    """Датчик температуры шасси (уникален по имени)."""
    name: str
    temperature: float = 0.0


@dataclass(frozen=True)
class InterfaceDiagnostics(_RecordMixin):
    """
    Диагностика оптического трансивера интерфейса.

    Заполняется ровно одна ветка RX мощности:
    - module_voltage > 0: module_voltage, rx_signal_avg_optical_power(_dbm)
    - иначе: laser_rx_optical_power(_dbm)
    """
    name: str
    laser_bias_current: float = 0.0
    laser_output_power: float = 0.0
    laser_output_power_dbm: float = 0.0
    module_temperature: float = 0.0
    module_voltage: float = 0.0
    rx_signal_avg_optical_power: float = 0.0
    rx_signal_avg_optical_power_dbm: float = 0.0
    laser_rx_optical_power: float = 0.0
    laser_rx_optical_power_dbm: float = 0.0
