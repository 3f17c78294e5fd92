"""Коллектор соседей OSPFv3 по областям."""

from typing import List, Protocol, Sequence

from ..core.models import OspfArea
from .base import BaseCollector, MetricDesc, Sink


class OspfDatasource(Protocol):
    def ospf_areas(self) -> List[OspfArea]:
        ...


class OspfCollector(BaseCollector):
    name = "ospf"
    prefix = "junos_ospf3_"

    def __init__(self):
        self.neighbors = self.desc("neighbors", "Number of neighbors in state up", ("area",))

    def describe(self) -> List[MetricDesc]:
        return [self.neighbors]

    def collect(
        self,
        datasource: OspfDatasource,
        sink: Sink,
        label_values: Sequence[str],
    ) -> None:
        for area in datasource.ospf_areas():
            self.emit(sink, self.neighbors, area.neighbors, tuple(label_values) + (area.name,))
