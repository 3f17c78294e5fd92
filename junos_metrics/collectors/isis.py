"""Коллектор агрегата ISIS соседств."""

from typing import List, Protocol, Sequence

from ..core.models import IsisAdjacencies
from .base import BaseCollector, MetricDesc, Sink


class IsisDatasource(Protocol):
    def isis_adjacencies(self) -> IsisAdjacencies:
        ...


class IsisCollector(BaseCollector):
    name = "isis"
    prefix = "junos_isis_"

    def __init__(self):
        self.up_count = self.desc("up_count", "Number of ISIS Adjacencies in state up")
        self.total_count = self.desc("total_count", "Number of ISIS Adjacencies")

    def describe(self) -> List[MetricDesc]:
        return [self.up_count, self.total_count]

    def collect(
        self,
        datasource: IsisDatasource,
        sink: Sink,
        label_values: Sequence[str],
    ) -> None:
        adjacencies = datasource.isis_adjacencies()
        self.emit(sink, self.up_count, adjacencies.up, label_values)
        self.emit(sink, self.total_count, adjacencies.total, label_values)
