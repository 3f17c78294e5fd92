"""Коллектор состояния routing-engine."""

from typing import List, Protocol, Sequence

from ..core.models import RouteEngineStats
from .base import BaseCollector, MetricDesc, Sink


class RoutingEngineDatasource(Protocol):
    def route_engine_stats(self) -> RouteEngineStats:
        ...


# (суффикс метрики, help, поле RouteEngineStats)
_METRICS = (
    ("temp", "Temperature of the air flowing past the Routing Engine (in degrees C)", "temperature"),
    ("cpu_temp", "Temperature of the CPU (in degrees C)", "cpu_temperature"),
    ("memory_utilization_percent", "Percentage of Routing Engine memory being used", "memory_utilization"),
    ("cpu_user_percent", "Percentage of CPU time being used by user processes", "cpu_user"),
    ("cpu_background_percent", "Percentage of CPU time being used by background processes", "cpu_background"),
    ("cpu_system_percent", "Percentage of CPU time being used by kernel processes", "cpu_system"),
    ("cpu_interrupt_percent", "Percentage of CPU time being used by interrupts", "cpu_interrupt"),
    ("cpu_idle_percent", "Percentage of CPU time that is idle", "cpu_idle"),
    ("load_average_one", "Routing Engine load averages for the last 1 minute", "load_average_one"),
    ("load_average_five", "Routing Engine load averages for the last 5 minutes", "load_average_five"),
    ("load_average_fifteen", "Routing Engine load averages for the last 15 minutes", "load_average_fifteen"),
)


class RoutingEngineCollector(BaseCollector):
    name = "routing_engine"
    prefix = "junos_route_engine_"

    def __init__(self):
        self._descs = [
            (self.desc(suffix, help_text), field_name)
            for suffix, help_text, field_name in _METRICS
        ]

    def describe(self) -> List[MetricDesc]:
        return [desc for desc, _ in self._descs]

    def collect(
        self,
        datasource: RoutingEngineDatasource,
        sink: Sink,
        label_values: Sequence[str],
    ) -> None:
        stats = datasource.route_engine_stats()
        for desc, field_name in self._descs:
            self.emit(sink, desc, getattr(stats, field_name), label_values)
