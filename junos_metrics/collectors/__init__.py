"""
Коллекторы метрик по доменам телеметрии.

Каждый коллектор:
- describe() — фиксированный набор MetricDesc
- collect(datasource, sink, label_values) — сэмплы Metric в sink

Datasource — любой объект с методом домена (RpcClient).
"""

from .base import LABEL_TARGET, BaseCollector, Metric, MetricDesc, Sink, bool_to_float
from .alarm import AlarmCollector, AlarmCounterDatasource
from .interfaces import InterfaceCollector, InterfaceStatsDatasource
from .bgp import BgpCollector, BgpDatasource
from .ospf import OspfCollector, OspfDatasource
from .isis import IsisCollector, IsisDatasource
from .routes import RouteCollector, RoutesDatasource
from .routing_engine import RoutingEngineCollector, RoutingEngineDatasource
from .environment import EnvironmentCollector, EnvironmentDatasource
from .interface_diagnostics import InterfaceDiagnosticsCollector, InterfaceDiagnosticsDatasource

__all__ = [
    "LABEL_TARGET",
    "BaseCollector",
    "Metric",
    "MetricDesc",
    "Sink",
    "bool_to_float",
    "AlarmCollector",
    "AlarmCounterDatasource",
    "InterfaceCollector",
    "InterfaceStatsDatasource",
    "BgpCollector",
    "BgpDatasource",
    "OspfCollector",
    "OspfDatasource",
    "IsisCollector",
    "IsisDatasource",
    "RouteCollector",
    "RoutesDatasource",
    "RoutingEngineCollector",
    "RoutingEngineDatasource",
    "EnvironmentCollector",
    "EnvironmentDatasource",
    "InterfaceDiagnosticsCollector",
    "InterfaceDiagnosticsDatasource",
]
