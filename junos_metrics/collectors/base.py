"""
Базовый класс коллектора метрик.

Определяет общий интерфейс для всех коллекторов доменов.
Все коллекторы наследуются от BaseCollector.

Коллектор не ходит на устройство сам: он получает datasource
(RpcClient или тестовый объект), вызывает его один раз и превращает
записи в сэмплы Metric, которые отдаёт в sink.

Пример создания коллектора:
    class ArpCollector(BaseCollector):
        name = "arp"
        prefix = "junos_arp_"

        def __init__(self):
            self.entries = self.desc("entries", "Number of ARP entries")

        def describe(self):
            return [self.entries]

        def collect(self, datasource, sink, label_values):
            count = datasource.arp_count()
            self.emit(sink, self.entries, count, label_values)
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Sequence, Tuple

# Первая метка каждой метрики: устройство
LABEL_TARGET = "target"

GAUGE = "gauge"


@dataclass(frozen=True)
class MetricDesc:
    """
    Описание метрики.

    Attributes:
        name: Полное имя (префикс домена + суффикс)
        help: Текст для # HELP
        label_names: Имена меток, первая всегда target
        metric_type: Тип метрики (всегда gauge)
    """
    name: str
    help: str
    label_names: Tuple[str, ...] = (LABEL_TARGET,)
    metric_type: str = GAUGE


@dataclass(frozen=True)
class Metric:
    """
    Один сэмпл: описание + значение + значения меток.

    Raises:
        ValueError: Количество значений меток не совпадает с описанием
    """
    desc: MetricDesc
    value: float
    label_values: Tuple[str, ...]

    def __post_init__(self):
        if len(self.label_values) != len(self.desc.label_names):
            raise ValueError(
                f"{self.desc.name}: ожидалось {len(self.desc.label_names)} меток, "
                f"получено {len(self.label_values)}"
            )

    @property
    def name(self) -> str:
        return self.desc.name

    @property
    def labels(self) -> Dict[str, str]:
        """Метки как словарь {имя: значение}."""
        return dict(zip(self.desc.label_names, self.label_values))

    def to_dict(self) -> Dict[str, Any]:
        return {"name": self.name, "labels": self.labels, "value": self.value}


# Приёмник сэмплов: любой callable (list.append, очередь, ...)
Sink = Callable[[Metric], Any]


def bool_to_float(value: bool) -> float:
    """True → 1.0, False → 0.0."""
    return 1.0 if value else 0.0


class BaseCollector(ABC):
    """
    Абстрактный базовый класс для коллекторов доменов.

    Attributes:
        name: Имя домена (ключ в реестре FEATURES)
        prefix: Префикс имён метрик
    """

    name: str = ""
    prefix: str = ""

    def desc(self, suffix: str, help_text: str, labels: Sequence[str] = ()) -> MetricDesc:
        """Создаёт описание метрики домена с меткой target первой."""
        return MetricDesc(
            name=f"{self.prefix}{suffix}",
            help=help_text,
            label_names=(LABEL_TARGET,) + tuple(labels),
        )

    @staticmethod
    def emit(sink: Sink, desc: MetricDesc, value: float, label_values: Sequence[str]) -> None:
        """Отдаёт сэмпл в sink."""
        sink(Metric(desc=desc, value=float(value), label_values=tuple(label_values)))

    @abstractmethod
    def describe(self) -> List[MetricDesc]:
        """Фиксированный набор описаний метрик."""

    @abstractmethod
    def collect(self, datasource: Any, sink: Sink, label_values: Sequence[str]) -> None:
        """
        Вызывает datasource один раз и отдаёт сэмплы в sink.

        Args:
            datasource: Объект с методом домена (RpcClient)
            sink: Приёмник сэмплов
            label_values: Уже связанные значения меток (минимум target)

        Raises:
            JunosMetricsError: Ошибка datasource пробрасывается как есть
        """
