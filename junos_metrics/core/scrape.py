"""
Однократный сбор метрик с устройств.

ScrapeExecutor прогоняет включённые коллекторы против одного RpcClient
последовательно. Ошибка домена (TransportError/DecodeError) логируется
и исключает только его сэмплы, остальные домены продолжают работу.

Служебные метрики:
- junos_up{target}: 1 — сессия открыта, 0 — подключиться не удалось
- junos_collector_duration_seconds{target}: длительность сбора

Пример использования:
    executor = ScrapeExecutor(features=["bgp", "interfaces"], alarm_filter="fan")
    with manager.connect(device, creds) as channel:
        result = executor.scrape(channel, device.host)
    for metric in result.metrics:
        print(metric.name, metric.labels, metric.value)
"""

import time
from concurrent.futures import ThreadPoolExecutor, as_completed
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Optional, Type

from ..collectors import (
    AlarmCollector,
    BaseCollector,
    BgpCollector,
    EnvironmentCollector,
    InterfaceCollector,
    InterfaceDiagnosticsCollector,
    IsisCollector,
    Metric,
    MetricDesc,
    OspfCollector,
    RouteCollector,
    RoutingEngineCollector,
)
from ..collectors.base import LABEL_TARGET
from .connection import ConnectionManager
from .credentials import Credentials
from .device import Device
from .domain import AlarmFilter
from .exceptions import ConfigError, JunosMetricsError, TransportError, format_error_for_log
from .logging import get_logger
from .rpc import RpcClient

logger = get_logger(__name__)


# Реестр доменов: имя → класс коллектора
FEATURES: Dict[str, Type[BaseCollector]] = {
    collector.name: collector
    for collector in (
        AlarmCollector,
        InterfaceCollector,
        BgpCollector,
        OspfCollector,
        IsisCollector,
        RouteCollector,
        RoutingEngineCollector,
        EnvironmentCollector,
        InterfaceDiagnosticsCollector,
    )
}

UP_DESC = MetricDesc(
    name="junos_up",
    help="Scrape of target was successful",
    label_names=(LABEL_TARGET,),
)
DURATION_DESC = MetricDesc(
    name="junos_collector_duration_seconds",
    help="Duration of a scrape by target",
    label_names=(LABEL_TARGET,),
)


def resolve_features(names: Optional[Iterable[str]] = None) -> List[str]:
    """
    Проверяет имена доменов.

    Args:
        names: Имена доменов (None — все)

    Returns:
        List[str]: Имена в порядке реестра FEATURES

    Raises:
        ConfigError: Неизвестный домен
    """
    if names is None:
        return list(FEATURES)

    requested = [n.strip() for n in names if n and n.strip()]
    unknown = [n for n in requested if n not in FEATURES]
    if unknown:
        raise ConfigError(
            f"Неизвестные домены: {', '.join(unknown)}. Доступны: {', '.join(FEATURES)}",
            key="features",
        )
    return [name for name in FEATURES if name in requested]


@dataclass
class ScrapeResult:
    """
    Результат сбора с одного устройства.

    Attributes:
        target: Устройство (значение метки target)
        up: Сессия была открыта
        metrics: Все сэмплы, включая служебные
        errors: Домен → текст ошибки
        duration: Длительность сбора (секунды)
    """
    target: str
    up: bool = True
    metrics: List[Metric] = field(default_factory=list)
    errors: Dict[str, str] = field(default_factory=dict)
    duration: float = 0.0

    @property
    def failed_features(self) -> List[str]:
        return list(self.errors)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "target": self.target,
            "up": self.up,
            "duration": self.duration,
            "errors": dict(self.errors),
            "metrics": [m.to_dict() for m in self.metrics],
        }


class ScrapeExecutor:
    """
    Исполнитель сбора.

    Attributes:
        features: Включённые домены
        alarm_filter: Скомпилированный фильтр аварий (общий для всех устройств)
        debug: Логировать сырые ответы устройства
    """

    def __init__(
        self,
        features: Optional[Iterable[str]] = None,
        alarm_filter: Optional[str] = None,
        debug: bool = False,
    ):
        """
        Raises:
            ConfigError: Неизвестный домен или некорректный фильтр аварий
        """
        self.features = resolve_features(features)
        self.alarm_filter = AlarmFilter(alarm_filter)
        self.debug = debug
        self.collectors: List[BaseCollector] = [FEATURES[name]() for name in self.features]

    def describe(self) -> List[MetricDesc]:
        """Служебные описания и описания всех включённых коллекторов."""
        descs = [UP_DESC, DURATION_DESC]
        for collector in self.collectors:
            descs.extend(collector.describe())
        return descs

    def scrape(self, channel: Any, target: str) -> ScrapeResult:
        """
        Собирает все включённые домены через открытый канал.

        Args:
            channel: CommandChannel устройства
            target: Значение метки target

        Returns:
            ScrapeResult: Сэмплы и ошибки доменов
        """
        started = time.monotonic()
        log = logger.bind(device=target)
        client = RpcClient(channel, alarm_filter=self.alarm_filter, debug=self.debug, target=target)
        result = ScrapeResult(target=target, up=True)
        label_values = (target,)

        for collector in self.collectors:
            buffer: List[Metric] = []
            try:
                collector.collect(client, buffer.append, label_values)
            except JunosMetricsError as e:
                result.errors[collector.name] = format_error_for_log(e)
                log.error(f"Домен {collector.name}: {format_error_for_log(e)}", collector=collector.name)
                continue

            log.debug(f"Домен {collector.name}: {len(buffer)} сэмплов", collector=collector.name)
            result.metrics.extend(buffer)

        result.duration = time.monotonic() - started
        result.metrics.insert(0, Metric(UP_DESC, 1.0, label_values))
        result.metrics.append(Metric(DURATION_DESC, result.duration, label_values))

        log.info(
            f"Сбор завершён: {len(result.metrics)} сэмплов, "
            f"ошибок доменов {len(result.errors)}, {result.duration:.2f}s"
        )
        return result

    def failed(self, target: str, error: Exception, duration: float = 0.0) -> ScrapeResult:
        """Результат для устройства, к которому не удалось подключиться."""
        label_values = (target,)
        return ScrapeResult(
            target=target,
            up=False,
            metrics=[
                Metric(UP_DESC, 0.0, label_values),
                Metric(DURATION_DESC, duration, label_values),
            ],
            errors={"connection": format_error_for_log(error)},
            duration=duration,
        )


def scrape_device(
    device: Device,
    credentials: Credentials,
    executor: ScrapeExecutor,
    connection_manager: Optional[ConnectionManager] = None,
) -> ScrapeResult:
    """
    Подключается к устройству и собирает метрики.

    Ошибка открытия сессии не пробрасывается: результат с junos_up 0.

    Args:
        device: Устройство
        credentials: Учётные данные
        executor: Настроенный ScrapeExecutor
        connection_manager: Менеджер подключений (по умолчанию с дефолтами)

    Returns:
        ScrapeResult: Результат сбора
    """
    manager = connection_manager or ConnectionManager()
    started = time.monotonic()

    try:
        with manager.connect(device, credentials) as channel:
            return executor.scrape(channel, device.host)
    except TransportError as e:
        logger.error(f"Не удалось подключиться: {format_error_for_log(e)}", device=device.host)
        return executor.failed(device.host, e, duration=time.monotonic() - started)


def scrape_devices(
    devices: List[Device],
    credentials: Credentials,
    executor: ScrapeExecutor,
    connection_manager: Optional[ConnectionManager] = None,
    max_workers: int = 5,
) -> List[ScrapeResult]:
    """
    Параллельный сбор со списка устройств.

    Каждое устройство обрабатывается в своём потоке со своей сессией.

    Returns:
        List[ScrapeResult]: Результаты в порядке списка устройств
    """
    manager = connection_manager or ConnectionManager()

    if len(devices) <= 1 or max_workers <= 1:
        return [scrape_device(d, credentials, executor, manager) for d in devices]

    results: Dict[int, ScrapeResult] = {}
    with ThreadPoolExecutor(max_workers=max_workers) as pool:
        futures = {
            pool.submit(scrape_device, device, credentials, executor, manager): index
            for index, device in enumerate(devices)
        }
        for future in as_completed(futures):
            results[futures[future]] = future.result()

    return [results[i] for i in range(len(devices))]
