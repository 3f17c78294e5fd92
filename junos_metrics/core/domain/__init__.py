"""
Domain Layer для Junos Metrics.

Бизнес-логика отделена от транспорта и разбора XML.
RpcClient только выполняет команды и разбирает ответы, Domain маппит
конверты в нормализованные записи.

Normalizers:
- AlarmNormalizer (+ AlarmFilter): подсчёт red/yellow аварий
- InterfaceNormalizer: физические и логические интерфейсы
- DiagnosticsNormalizer: диагностика оптики
- BgpNormalizer, OspfNormalizer, IsisNormalizer, RouteTableNormalizer
- RouteEngineNormalizer, EnvironmentNormalizer

Использование:
    from junos_metrics.core.domain import InterfaceNormalizer

    normalizer = InterfaceNormalizer()
    stats = normalizer.normalize(envelope)  # List[InterfaceStats]
"""

from .alarm import AlarmFilter, AlarmNormalizer
from .interface import DiagnosticsNormalizer, InterfaceNormalizer, parse_dbm
from .routing import BgpNormalizer, IsisNormalizer, OspfNormalizer, RouteTableNormalizer
from .chassis import EnvironmentNormalizer, RouteEngineNormalizer

__all__ = [
    "AlarmFilter",
    "AlarmNormalizer",
    "InterfaceNormalizer",
    "DiagnosticsNormalizer",
    "parse_dbm",
    "BgpNormalizer",
    "OspfNormalizer",
    "IsisNormalizer",
    "RouteTableNormalizer",
    "RouteEngineNormalizer",
    "EnvironmentNormalizer",
]
