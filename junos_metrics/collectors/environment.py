"""Коллектор температур компонентов шасси."""

from typing import List, Protocol, Sequence

from ..core.models import EnvironmentItem
from .base import BaseCollector, MetricDesc, Sink


class EnvironmentDatasource(Protocol):
    def environment_items(self) -> List[EnvironmentItem]:
        ...


class EnvironmentCollector(BaseCollector):
    name = "environment"
    prefix = "junos_environment_"

    def __init__(self):
        self.temperature = self.desc("item_temp", "Temperature of the air flowing past", ("item",))

    def describe(self) -> List[MetricDesc]:
        return [self.temperature]

    def collect(
        self,
        datasource: EnvironmentDatasource,
        sink: Sink,
        label_values: Sequence[str],
    ) -> None:
        for item in datasource.environment_items():
            self.emit(sink, self.temperature, item.temperature, tuple(label_values) + (item.name,))
