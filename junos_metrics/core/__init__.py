"""
Core модули Junos Metrics.

Содержит:
- Device: Цель сбора
- ConnectionManager / SshConnection: Канал команд через Scrapli
- CredentialsManager: Учётные данные
- RpcClient: Команды → XML → записи
- Structured Logging: JSON/Human-readable логирование
- exceptions: Типизированные ошибки
- models: Нормализованные записи доменов
"""

from .device import Device, DeviceStatus
from .credentials import Credentials, CredentialsManager
from .connection import CommandChannel, ConnectionManager, SshConnection
from .logging import (
    HumanFormatter,
    JSONFormatter,
    LogConfig,
    StructuredLogger,
    get_logger,
    setup_logging,
)
from .exceptions import (
    JunosMetricsError,
    CollectorError,
    TransportError,
    ConnectionError,
    AuthenticationError,
    TimeoutError,
    DecodeError,
    ConfigError,
    format_error_for_log,
)
from .models import (
    AlarmCounter,
    BgpSession,
    EnvironmentItem,
    InterfaceDiagnostics,
    InterfaceStats,
    IsisAdjacencies,
    OspfArea,
    ProtocolRouteCount,
    RouteEngineStats,
    RoutingTable,
)
from .rpc import RpcClient

__all__ = [
    "Device",
    "DeviceStatus",
    "Credentials",
    "CredentialsManager",
    "CommandChannel",
    "ConnectionManager",
    "SshConnection",
    "HumanFormatter",
    "JSONFormatter",
    "LogConfig",
    "StructuredLogger",
    "get_logger",
    "setup_logging",
    "JunosMetricsError",
    "CollectorError",
    "TransportError",
    "ConnectionError",
    "AuthenticationError",
    "TimeoutError",
    "DecodeError",
    "ConfigError",
    "format_error_for_log",
    "AlarmCounter",
    "BgpSession",
    "EnvironmentItem",
    "InterfaceDiagnostics",
    "InterfaceStats",
    "IsisAdjacencies",
    "OspfArea",
    "ProtocolRouteCount",
    "RouteEngineStats",
    "RoutingTable",
    "RpcClient",
]
