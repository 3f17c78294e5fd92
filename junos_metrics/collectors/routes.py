"""
Коллектор таблиц маршрутизации.

Для каждой таблицы: total/active/max, затем по каждому протоколу
в порядке ответа устройства.
"""

from typing import List, Protocol, Sequence

from ..core.models import RoutingTable
from .base import BaseCollector, MetricDesc, Sink


class RoutesDatasource(Protocol):
    def routing_tables(self) -> List[RoutingTable]:
        ...


class RouteCollector(BaseCollector):
    name = "routes"
    prefix = "junos_route_"

    def __init__(self):
        table = ("table",)
        protocol = ("table", "protocol")
        self.total_routes = self.desc("total_count", "Number of routes in table", table)
        self.active_routes = self.desc("active_count", "Number of active routes in table", table)
        self.max_routes = self.desc("max_count", "Max routes (high water mark)", table)
        self.protocol_routes = self.desc(
            "protocol_routes_count", "Number of routes by protocol in table", protocol,
        )
        self.protocol_active_routes = self.desc(
            "protocol_active_routes_count", "Number of active routes by protocol in table", protocol,
        )

    def describe(self) -> List[MetricDesc]:
        return [
            self.total_routes,
            self.active_routes,
            self.max_routes,
            self.protocol_routes,
            self.protocol_active_routes,
        ]

    def collect(
        self,
        datasource: RoutesDatasource,
        sink: Sink,
        label_values: Sequence[str],
    ) -> None:
        for table in datasource.routing_tables():
            labels = tuple(label_values) + (table.name,)
            self.emit(sink, self.total_routes, table.total_routes, labels)
            self.emit(sink, self.active_routes, table.active_routes, labels)
            self.emit(sink, self.max_routes, table.max_routes, labels)

            for proto in table.protocols:
                proto_labels = labels + (proto.name,)
                self.emit(sink, self.protocol_routes, proto.routes, proto_labels)
                self.emit(sink, self.protocol_active_routes, proto.active_routes, proto_labels)
