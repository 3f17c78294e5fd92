"""
Схемы XML ответов Junos (`<command> | display xml`).

Имена элементов совпадают с ответами устройства один-в-один.
Каждый домен: dataclass конверта + XmlSchema с таблицей полей.
Корень документа — <rpc-reply>, информационный контейнер домена
(<interface-information>, <bgp-information>, ...) обязателен.

Пример:
    from junos_metrics.parsers.junos import BGP_SCHEMA
    from junos_metrics.parsers.xml_schema import decode_document

    envelope = decode_document(raw_bytes, BGP_SCHEMA)
    for peer in envelope.information.peers:
        print(peer.address, peer.state)
"""

from dataclasses import dataclass
from typing import List, Optional

from .xml_schema import XmlField, XmlSchema


@dataclass(frozen=True)
class TemperatureEnvelope:
    """<temperature celsius="..."> и аналоги."""
    celsius: float


TEMPERATURE = XmlSchema(TemperatureEnvelope, (
    XmlField("celsius", "@celsius", float),
))


# =============================================================================
# Alarms: show system alarms / show chassis alarms
# =============================================================================

@dataclass(frozen=True)
class AlarmDetailEnvelope:
    alarm_class: str
    description: str
    alarm_type: str


@dataclass(frozen=True)
class AlarmInformationEnvelope:
    details: List[AlarmDetailEnvelope]


@dataclass(frozen=True)
class AlarmEnvelope:
    information: AlarmInformationEnvelope


ALARM_DETAIL = XmlSchema(AlarmDetailEnvelope, (
    XmlField("alarm_class", "alarm-class"),
    XmlField("description", "alarm-description"),
    XmlField("alarm_type", "alarm-type"),
))

ALARM_SCHEMA = XmlSchema(AlarmEnvelope, (
    XmlField("information", "alarm-information", XmlSchema(AlarmInformationEnvelope, (
        XmlField("details", "alarm-detail", ALARM_DETAIL, many=True),
    )), required=True),
))


# =============================================================================
# Interfaces: show interfaces statistics detail
# =============================================================================

@dataclass(frozen=True)
class TrafficStatisticsEnvelope:
    input_bytes: int
    output_bytes: int


@dataclass(frozen=True)
class ErrorListEnvelope:
    drops: int
    errors: int


@dataclass(frozen=True)
class LogicalInterfaceEnvelope:
    name: str
    description: str
    traffic: TrafficStatisticsEnvelope


@dataclass(frozen=True)
class PhysicalInterfaceEnvelope:
    name: str
    admin_status: str
    oper_status: str
    description: str
    mac_address: str
    traffic: TrafficStatisticsEnvelope
    input_errors: ErrorListEnvelope
    output_errors: ErrorListEnvelope
    logical_interfaces: List[LogicalInterfaceEnvelope]


@dataclass(frozen=True)
class InterfaceInformationEnvelope:
    interfaces: List[PhysicalInterfaceEnvelope]


@dataclass(frozen=True)
class InterfaceEnvelope:
    information: InterfaceInformationEnvelope


TRAFFIC_STATISTICS = XmlSchema(TrafficStatisticsEnvelope, (
    XmlField("input_bytes", "input-bytes", int),
    XmlField("output_bytes", "output-bytes", int),
))

LOGICAL_INTERFACE = XmlSchema(LogicalInterfaceEnvelope, (
    XmlField("name", "name"),
    XmlField("description", "description"),
    XmlField("traffic", "traffic-statistics", TRAFFIC_STATISTICS),
))

PHYSICAL_INTERFACE = XmlSchema(PhysicalInterfaceEnvelope, (
    XmlField("name", "name"),
    XmlField("admin_status", "admin-status"),
    XmlField("oper_status", "oper-status"),
    XmlField("description", "description"),
    XmlField("mac_address", "current-physical-address"),
    XmlField("traffic", "traffic-statistics", TRAFFIC_STATISTICS),
    XmlField("input_errors", "input-error-list", XmlSchema(ErrorListEnvelope, (
        XmlField("drops", "input-drops", int),
        XmlField("errors", "input-errors", int),
    ))),
    XmlField("output_errors", "output-error-list", XmlSchema(ErrorListEnvelope, (
        XmlField("drops", "output-drops", int),
        XmlField("errors", "output-errors", int),
    ))),
    XmlField("logical_interfaces", "logical-interface", LOGICAL_INTERFACE, many=True),
))

INTERFACE_SCHEMA = XmlSchema(InterfaceEnvelope, (
    XmlField("information", "interface-information", XmlSchema(InterfaceInformationEnvelope, (
        XmlField("interfaces", "physical-interface", PHYSICAL_INTERFACE, many=True),
    )), required=True),
))


# =============================================================================
# BGP: show bgp summary
# =============================================================================

@dataclass(frozen=True)
class BgpRibEnvelope:
    name: str
    active_prefixes: int
    received_prefixes: int
    accepted_prefixes: int
    rejected_prefixes: int


@dataclass(frozen=True)
class BgpPeerEnvelope:
    address: str
    asn: str
    state: str
    flaps: int
    input_messages: int
    output_messages: int
    rib: BgpRibEnvelope


@dataclass(frozen=True)
class BgpInformationEnvelope:
    peers: List[BgpPeerEnvelope]


@dataclass(frozen=True)
class BgpEnvelope:
    information: BgpInformationEnvelope


BGP_PEER = XmlSchema(BgpPeerEnvelope, (
    XmlField("address", "peer-address"),
    XmlField("asn", "peer-as"),
    XmlField("state", "peer-state"),
    XmlField("flaps", "flap-count", int),
    XmlField("input_messages", "input-messages", int),
    XmlField("output_messages", "output-messages", int),
    # Несколько <bgp-rib>: берётся последний
    XmlField("rib", "bgp-rib", XmlSchema(BgpRibEnvelope, (
        XmlField("name", "name"),
        XmlField("active_prefixes", "active-prefix-count", int),
        XmlField("received_prefixes", "received-prefix-count", int),
        XmlField("accepted_prefixes", "accepted-prefix-count", int),
        XmlField("rejected_prefixes", "suppressed-prefix-count", int),
    ))),
))

BGP_SCHEMA = XmlSchema(BgpEnvelope, (
    XmlField("information", "bgp-information", XmlSchema(BgpInformationEnvelope, (
        XmlField("peers", "bgp-peer", BGP_PEER, many=True),
    )), required=True),
))


# =============================================================================
# OSPFv3: show ospf3 overview
# =============================================================================

@dataclass(frozen=True)
class OspfAreaEnvelope:
    name: str
    neighbors_up: int


@dataclass(frozen=True)
class OspfOverviewEnvelope:
    areas: List[OspfAreaEnvelope]


@dataclass(frozen=True)
class OspfInformationEnvelope:
    overview: OspfOverviewEnvelope


@dataclass(frozen=True)
class OspfEnvelope:
    information: OspfInformationEnvelope


OSPF_AREA = XmlSchema(OspfAreaEnvelope, (
    XmlField("name", "ospf-area"),
    XmlField("neighbors_up", "ospf-nbr-overview/ospf-nbr-up-count", int),
))

OSPF3_SCHEMA = XmlSchema(OspfEnvelope, (
    XmlField("information", "ospf3-overview-information", XmlSchema(OspfInformationEnvelope, (
        XmlField("overview", "ospf-overview", XmlSchema(OspfOverviewEnvelope, (
            XmlField("areas", "ospf-area-overview", OSPF_AREA, many=True),
        ))),
    )), required=True),
))


# =============================================================================
# ISIS: show isis adjacency
# =============================================================================

@dataclass(frozen=True)
class IsisAdjacencyEnvelope:
    interface_name: str
    system_name: str
    level: int
    state: str


@dataclass(frozen=True)
class IsisInformationEnvelope:
    adjacencies: List[IsisAdjacencyEnvelope]


@dataclass(frozen=True)
class IsisEnvelope:
    information: IsisInformationEnvelope


ISIS_ADJACENCY = XmlSchema(IsisAdjacencyEnvelope, (
    XmlField("interface_name", "interface-name"),
    XmlField("system_name", "system-name"),
    XmlField("level", "level", int),
    XmlField("state", "adjacency-state"),
))

ISIS_SCHEMA = XmlSchema(IsisEnvelope, (
    XmlField("information", "isis-adjacency-information", XmlSchema(IsisInformationEnvelope, (
        XmlField("adjacencies", "isis-adjacency", ISIS_ADJACENCY, many=True),
    )), required=True),
))


# =============================================================================
# Routing tables: show route summary
# =============================================================================

@dataclass(frozen=True)
class RouteProtocolEnvelope:
    name: str
    routes: int
    active_routes: int


@dataclass(frozen=True)
class RouteTableEnvelope:
    name: str
    max_routes: int
    active_routes: int
    total_routes: int
    protocols: List[RouteProtocolEnvelope]


@dataclass(frozen=True)
class RouteInformationEnvelope:
    tables: List[RouteTableEnvelope]


@dataclass(frozen=True)
class RouteEnvelope:
    information: RouteInformationEnvelope


ROUTE_TABLE = XmlSchema(RouteTableEnvelope, (
    XmlField("name", "table-name"),
    XmlField("max_routes", "max-route-count", int),
    XmlField("active_routes", "active-route-count", int),
    XmlField("total_routes", "total-route-count", int),
    XmlField("protocols", "protocols", XmlSchema(RouteProtocolEnvelope, (
        XmlField("name", "protocol-name"),
        XmlField("routes", "protocol-route-count", int),
        XmlField("active_routes", "active-route-count", int),
    )), many=True),
))

ROUTE_SCHEMA = XmlSchema(RouteEnvelope, (
    XmlField("information", "route-summary-information", XmlSchema(RouteInformationEnvelope, (
        XmlField("tables", "route-table", ROUTE_TABLE, many=True),
    )), required=True),
))


# =============================================================================
# Routing engine: show chassis routing-engine
# =============================================================================

@dataclass(frozen=True)
class RouteEngineEnvelope:
    temperature: TemperatureEnvelope
    cpu_temperature: TemperatureEnvelope
    memory_utilization: int
    cpu_user: int
    cpu_background: int
    cpu_system: int
    cpu_interrupt: int
    cpu_idle: int
    load_average_one: float
    load_average_five: float
    load_average_fifteen: float


@dataclass(frozen=True)
class RouteEngineInformationEnvelope:
    route_engine: RouteEngineEnvelope


@dataclass(frozen=True)
class RoutingEngineEnvelope:
    information: RouteEngineInformationEnvelope


ROUTE_ENGINE = XmlSchema(RouteEngineEnvelope, (
    XmlField("temperature", "temperature", TEMPERATURE),
    XmlField("cpu_temperature", "cpu-temperature", TEMPERATURE),
    XmlField("memory_utilization", "memory-buffer-utilization", int),
    XmlField("cpu_user", "cpu-user", int),
    XmlField("cpu_background", "cpu-background", int),
    XmlField("cpu_system", "cpu-system", int),
    XmlField("cpu_interrupt", "cpu-interrupt", int),
    XmlField("cpu_idle", "cpu-idle", int),
    XmlField("load_average_one", "load-average-one", float),
    XmlField("load_average_five", "load-average-five", float),
    XmlField("load_average_fifteen", "load-average-fifteen", float),
))

# На шасси с двумя RE берётся <route-engine> в состоянии master, иначе последний
ROUTING_ENGINE_SCHEMA = XmlSchema(RoutingEngineEnvelope, (
    XmlField("information", "route-engine-information", XmlSchema(RouteEngineInformationEnvelope, (
        XmlField("route_engine", "route-engine", ROUTE_ENGINE, prefer="mastership-state=master"),
    )), required=True),
))


# =============================================================================
# Environment: show chassis environment
# =============================================================================

@dataclass(frozen=True)
class EnvironmentItemEnvelope:
    name: str
    item_class: str
    status: str
    temperature: Optional[TemperatureEnvelope]


@dataclass(frozen=True)
class EnvironmentInformationEnvelope:
    items: List[EnvironmentItemEnvelope]


@dataclass(frozen=True)
class EnvironmentEnvelope:
    information: EnvironmentInformationEnvelope


ENVIRONMENT_ITEM = XmlSchema(EnvironmentItemEnvelope, (
    XmlField("name", "name"),
    XmlField("item_class", "class"),
    XmlField("status", "status"),
    XmlField("temperature", "temperature", TEMPERATURE, optional=True),
))

ENVIRONMENT_SCHEMA = XmlSchema(EnvironmentEnvelope, (
    XmlField("information", "environment-information", XmlSchema(EnvironmentInformationEnvelope, (
        XmlField("items", "environment-item", ENVIRONMENT_ITEM, many=True),
    )), required=True),
))


# =============================================================================
# Optics: show interfaces diagnostics optics
# =============================================================================

@dataclass(frozen=True)
class OpticsDiagnosticsEnvelope:
    not_available: str
    laser_bias_current: float
    laser_output_power: float
    laser_output_power_dbm: str
    module_temperature: TemperatureEnvelope
    module_voltage: float
    rx_signal_avg_optical_power: float
    rx_signal_avg_optical_power_dbm: str
    laser_rx_optical_power: float
    laser_rx_optical_power_dbm: str


@dataclass(frozen=True)
class DiagnosticsInterfaceEnvelope:
    name: str
    diagnostics: OpticsDiagnosticsEnvelope


@dataclass(frozen=True)
class DiagnosticsInformationEnvelope:
    interfaces: List[DiagnosticsInterfaceEnvelope]


@dataclass(frozen=True)
class InterfaceDiagnosticsEnvelope:
    information: DiagnosticsInformationEnvelope


# dBm остаются строками: устройство отдаёт "- Inf" и подобное без оптики
OPTICS_DIAGNOSTICS = XmlSchema(OpticsDiagnosticsEnvelope, (
    XmlField("not_available", "optic-diagnostics-not-available"),
    XmlField("laser_bias_current", "laser-bias-current", float),
    XmlField("laser_output_power", "laser-output-power", float),
    XmlField("laser_output_power_dbm", "laser-output-power-dbm"),
    XmlField("module_temperature", "module-temperature", TEMPERATURE),
    XmlField("module_voltage", "module-voltage", float),
    XmlField("rx_signal_avg_optical_power", "rx-signal-avg-optical-power", float),
    XmlField("rx_signal_avg_optical_power_dbm", "rx-signal-avg-optical-power-dbm"),
    XmlField("laser_rx_optical_power", "laser-rx-optical-power", float),
    XmlField("laser_rx_optical_power_dbm", "laser-rx-optical-power-dbm"),
))

INTERFACE_DIAGNOSTICS_SCHEMA = XmlSchema(InterfaceDiagnosticsEnvelope, (
    XmlField("information", "interface-information", XmlSchema(DiagnosticsInformationEnvelope, (
        XmlField("interfaces", "physical-interface", XmlSchema(DiagnosticsInterfaceEnvelope, (
            XmlField("name", "name"),
            XmlField("diagnostics", "optics-diagnostics", OPTICS_DIAGNOSTICS),
        )), many=True),
    )), required=True),
))
