"""Коллектор количества аварий."""

from typing import List, Protocol, Sequence

from ..core.models import AlarmCounter
from .base import BaseCollector, MetricDesc, Sink


class AlarmCounterDatasource(Protocol):
    def alarm_counter(self) -> AlarmCounter:
        ...


class AlarmCollector(BaseCollector):
    name = "alarm"
    prefix = "junos_alarms_"

    def __init__(self):
        self.red = self.desc("red_count", "Number of red alarms (not silenced)")
        self.yellow = self.desc("yellow_count", "Number of yellow alarms (not silenced)")

    def describe(self) -> List[MetricDesc]:
        return [self.red, self.yellow]

    def collect(
        self,
        datasource: AlarmCounterDatasource,
        sink: Sink,
        label_values: Sequence[str],
    ) -> None:
        counter = datasource.alarm_counter()
        self.emit(sink, self.red, counter.red_count, label_values)
        self.emit(sink, self.yellow, counter.yellow_count, label_values)
