"""
Junos Metrics - сбор телеметрии с маршрутизаторов Juniper.

Модуль предоставляет:
- Выполнение CLI команд Junos с XML выводом (Scrapli)
- Разбор XML ответов в нормализованные записи (RpcClient)
- Коллекторы метрик по доменам (интерфейсы, BGP, OSPFv3, ISIS, маршруты,
  routing-engine, окружение, оптика, аварии)
- Экспорт в текстовый формат Prometheus и JSON

Примеры использования:
    # CLI
    python -m junos_metrics collect mx1.example.net --features bgp,interfaces

    # Python API
    from junos_metrics import RpcClient, ScrapeExecutor

    with ConnectionManager().connect(device, credentials) as channel:
        client = RpcClient(channel, alarm_filter="fan")
        sessions = client.bgp_sessions()
"""

__version__ = "1.0.0"

from .core.rpc import RpcClient
from .core.scrape import FEATURES, ScrapeExecutor, ScrapeResult, scrape_device, scrape_devices

__all__ = [
    "__version__",
    "RpcClient",
    "FEATURES",
    "ScrapeExecutor",
    "ScrapeResult",
    "scrape_device",
    "scrape_devices",
]
