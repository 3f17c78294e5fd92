"""
Коллектор счётчиков интерфейсов.

Счётчики байт публикуются для всех интерфейсов, статусы, ошибки
и дропы — только для физических.
"""

from typing import List, Protocol, Sequence

from ..core.models import InterfaceStats
from .base import BaseCollector, MetricDesc, Sink, bool_to_float


class InterfaceStatsDatasource(Protocol):
    def interface_stats(self) -> List[InterfaceStats]:
        ...


class InterfaceCollector(BaseCollector):
    """Метрики junos_interface_* с метками name, description, mac."""

    name = "interfaces"
    prefix = "junos_interface_"

    def __init__(self):
        labels = ("name", "description", "mac")
        self.receive_bytes = self.desc("receive_bytes", "Received data in bytes", labels)
        self.receive_errors = self.desc(
            "receive_errors", "Number of errors caused by incoming packets", labels,
        )
        self.receive_drops = self.desc("receive_drops", "Number of dropped incoming packets", labels)
        self.transmit_bytes = self.desc("transmit_bytes", "Transmitted data in bytes", labels)
        self.transmit_errors = self.desc(
            "transmit_errors", "Number of errors caused by outgoing packets", labels,
        )
        self.transmit_drops = self.desc("transmit_drops", "Number of dropped outgoing packets", labels)
        self.admin_status = self.desc("admin_up", "Admin operational status", labels)
        self.oper_status = self.desc("up", "Interface operational status", labels)
        self.error_status = self.desc("error_status", "Admin and operational status differ", labels)

    def describe(self) -> List[MetricDesc]:
        return [
            self.receive_bytes,
            self.receive_errors,
            self.receive_drops,
            self.transmit_bytes,
            self.transmit_drops,
            self.transmit_errors,
            self.admin_status,
            self.oper_status,
            self.error_status,
        ]

    def collect(
        self,
        datasource: InterfaceStatsDatasource,
        sink: Sink,
        label_values: Sequence[str],
    ) -> None:
        for stats in datasource.interface_stats():
            self._collect_for_interface(stats, sink, label_values)

    def _collect_for_interface(
        self,
        s: InterfaceStats,
        sink: Sink,
        label_values: Sequence[str],
    ) -> None:
        labels = tuple(label_values) + (s.name, s.description, s.mac)
        self.emit(sink, self.receive_bytes, s.receive_bytes, labels)
        self.emit(sink, self.transmit_bytes, s.transmit_bytes, labels)

        if not s.is_physical:
            return

        self.emit(sink, self.admin_status, bool_to_float(s.admin_status), labels)
        self.emit(sink, self.oper_status, bool_to_float(s.oper_status), labels)
        self.emit(sink, self.error_status, bool_to_float(s.error_status), labels)
        self.emit(sink, self.transmit_errors, s.transmit_errors, labels)
        self.emit(sink, self.transmit_drops, s.transmit_drops, labels)
        self.emit(sink, self.receive_errors, s.receive_errors, labels)
        self.emit(sink, self.receive_drops, s.receive_drops, labels)
