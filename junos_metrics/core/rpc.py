"""
RpcClient — CLI команды Junos → XML → нормализованные записи.

Для каждого домена:
1. Команда отправляется в канал с суффиксом " | display xml"
2. Ответ разбирается по схеме домена (parsers/junos.py)
3. Конверт маппится в записи (core/domain)

Ошибка канала → TransportError, ответ не по схеме → DecodeError.
Вызов домена всё-или-ничего: частичных записей не возвращается.

Пример использования:
    with manager.connect(device, creds) as channel:
        client = RpcClient(channel, alarm_filter="fan")
        for session in client.bgp_sessions():
            print(session.ip, session.up)
"""

import logging
from typing import Any, List, Optional, Union

from .constants import get_domain_commands, with_xml_output
from .domain import (
    AlarmFilter,
    AlarmNormalizer,
    BgpNormalizer,
    DiagnosticsNormalizer,
    EnvironmentNormalizer,
    InterfaceNormalizer,
    IsisNormalizer,
    OspfNormalizer,
    RouteEngineNormalizer,
    RouteTableNormalizer,
)
from .exceptions import DecodeError, JunosMetricsError, TransportError
from .logging import get_logger
from .models import (
    AlarmCounter,
    BgpSession,
    EnvironmentItem,
    InterfaceDiagnostics,
    InterfaceStats,
    IsisAdjacencies,
    OspfArea,
    RouteEngineStats,
    RoutingTable,
)
from ..parsers.junos import (
    ALARM_SCHEMA,
    BGP_SCHEMA,
    ENVIRONMENT_SCHEMA,
    INTERFACE_DIAGNOSTICS_SCHEMA,
    INTERFACE_SCHEMA,
    ISIS_SCHEMA,
    OSPF3_SCHEMA,
    ROUTE_SCHEMA,
    ROUTING_ENGINE_SCHEMA,
)
from ..parsers.xml_schema import XmlSchema, decode_document

logger = get_logger(__name__)


class RpcClient:
    """
    Клиент телеметрии одного устройства Junos.

    Не хранит состояния между вызовами кроме скомпилированного
    фильтра аварий. Каждый вызов создаёт записи заново.

    Attributes:
        channel: Канал команд (CommandChannel)
        alarm_filter: Скомпилированный фильтр аварий
        debug: Логировать сырые ответы устройства
        target: Имя устройства для логов
    """

    def __init__(
        self,
        channel: Any,
        alarm_filter: Union[AlarmFilter, str, None] = None,
        debug: bool = False,
        target: Optional[str] = None,
    ):
        """
        Args:
            channel: Канал с методом run_command(command) -> bytes
            alarm_filter: Готовый AlarmFilter или regex для исключения аварий
                (по описанию или типу)
            debug: Логировать сырой вывод команд
            target: Имя устройства (по умолчанию channel.host)

        Raises:
            ConfigError: Некорректный regex alarm_filter
        """
        self.channel = channel
        if isinstance(alarm_filter, AlarmFilter):
            self.alarm_filter = alarm_filter
        else:
            self.alarm_filter = AlarmFilter(alarm_filter)
        self.debug = debug
        self.target = target or getattr(channel, "host", "") or ""
        self._log = logger.bind(device=self.target)

    # =========================================================================
    # Транспорт и разбор
    # =========================================================================

    def _run(self, command: str) -> bytes:
        """Отправляет команду в канал, ошибки канала → TransportError."""
        full_command = with_xml_output(command)
        self._log.debug(f"Команда: {full_command}", command=full_command)

        try:
            output = self.channel.run_command(full_command)
        except JunosMetricsError:
            raise
        except Exception as e:
            raise TransportError(
                f"Ошибка выполнения команды: {e}",
                device=self.target,
                command=full_command,
            ) from e

        if self.debug and self._log.isEnabledFor(logging.DEBUG):
            self._log.debug(f"Ответ:\n{output!r}", command=full_command)

        return output

    def _fetch(self, domain: str, command: str, schema: XmlSchema) -> Any:
        """Выполняет команду и разбирает ответ в конверт домена."""
        output = self._run(command)
        try:
            return decode_document(output, schema)
        except DecodeError as e:
            raise DecodeError(
                e.message,
                device=self.target,
                command=with_xml_output(command),
                domain=domain,
                path=e.path,
            ) from e

    def _fetch_domain(self, domain: str, schema: XmlSchema) -> Any:
        """Домен с одной командой."""
        (command,) = get_domain_commands(domain)
        return self._fetch(domain, command, schema)

    # =========================================================================
    # Домены
    # =========================================================================

    def alarm_counter(self) -> AlarmCounter:
        """
        Аварии из show system alarms и show chassis alarms.

        Returns:
            AlarmCounter: Major → red, Minor → yellow (без отфильтрованных)
        """
        envelopes = [
            self._fetch("alarm", command, ALARM_SCHEMA)
            for command in get_domain_commands("alarm")
        ]
        return AlarmNormalizer(self.alarm_filter).count(envelopes)

    def interface_stats(self) -> List[InterfaceStats]:
        """Счётчики физических и логических интерфейсов."""
        envelope = self._fetch_domain("interfaces", INTERFACE_SCHEMA)
        return InterfaceNormalizer().normalize(envelope)

    def bgp_sessions(self) -> List[BgpSession]:
        """BGP пиры."""
        envelope = self._fetch_domain("bgp", BGP_SCHEMA)
        return BgpNormalizer().normalize(envelope)

    def ospf_areas(self) -> List[OspfArea]:
        """Соседи OSPFv3 по областям."""
        envelope = self._fetch_domain("ospf", OSPF3_SCHEMA)
        return OspfNormalizer().normalize(envelope)

    def isis_adjacencies(self) -> IsisAdjacencies:
        """Агрегат ISIS соседств."""
        envelope = self._fetch_domain("isis", ISIS_SCHEMA)
        return IsisNormalizer().normalize(envelope)

    def routing_tables(self) -> List[RoutingTable]:
        """Таблицы маршрутизации с разбивкой по протоколам."""
        envelope = self._fetch_domain("routes", ROUTE_SCHEMA)
        return RouteTableNormalizer().normalize(envelope)

    def route_engine_stats(self) -> RouteEngineStats:
        """Состояние routing-engine."""
        envelope = self._fetch_domain("routing_engine", ROUTING_ENGINE_SCHEMA)
        return RouteEngineNormalizer().normalize(envelope)

    def environment_items(self) -> List[EnvironmentItem]:
        """Температуры компонентов шасси."""
        envelope = self._fetch_domain("environment", ENVIRONMENT_SCHEMA)
        return EnvironmentNormalizer().normalize(envelope)

    def interface_diagnostics(self) -> List[InterfaceDiagnostics]:
        """Диагностика оптики."""
        envelope = self._fetch_domain("interface_diagnostics", INTERFACE_DIAGNOSTICS_SCHEMA)
        return DiagnosticsNormalizer().normalize(envelope)
