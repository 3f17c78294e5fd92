"""
Domain logic для протоколов маршрутизации.

BGP сессии, области OSPFv3, агрегат ISIS и таблицы маршрутизации.
"""

from typing import List

from ..models import (
    BgpSession,
    IsisAdjacencies,
    OspfArea,
    ProtocolRouteCount,
    RoutingTable,
)
from ...parsers.junos import BgpEnvelope, IsisEnvelope, OspfEnvelope, RouteEnvelope

BGP_ESTABLISHED = "Established"
ISIS_ADJACENCY_UP = "Up"


class BgpNormalizer:
    """Одна запись на BGP пира; up — состояние Established."""

    def normalize(self, envelope: BgpEnvelope) -> List[BgpSession]:
        result = []
        for peer in envelope.information.peers:
            result.append(BgpSession(
                ip=peer.address,
                up=peer.state == BGP_ESTABLISHED,
                asn=peer.asn,
                flaps=float(peer.flaps),
                input_messages=float(peer.input_messages),
                output_messages=float(peer.output_messages),
                accepted_prefixes=float(peer.rib.accepted_prefixes),
                active_prefixes=float(peer.rib.active_prefixes),
                received_prefixes=float(peer.rib.received_prefixes),
                rejected_prefixes=float(peer.rib.rejected_prefixes),
            ))
        return result


class OspfNormalizer:
    """Количество соседей up по областям OSPFv3."""

    def normalize(self, envelope: OspfEnvelope) -> List[OspfArea]:
        return [
            OspfArea(name=area.name, neighbors=float(area.neighbors_up))
            for area in envelope.information.overview.areas
        ]


class IsisNormalizer:
    """
    Агрегат ISIS соседств.

    Записей по соседствам нет: total считает все, up — в состоянии Up.
    """

    def normalize(self, envelope: IsisEnvelope) -> IsisAdjacencies:
        up = 0
        total = 0
        for adjacency in envelope.information.adjacencies:
            if adjacency.state == ISIS_ADJACENCY_UP:
                up += 1
            total += 1
        return IsisAdjacencies(up=float(up), total=float(total))


class RouteTableNormalizer:
    """
    Таблицы маршрутизации со счётчиками по протоколам.

    Порядок протоколов сохраняется как в ответе устройства.
    """

    def normalize(self, envelope: RouteEnvelope) -> List[RoutingTable]:
        result = []
        for table in envelope.information.tables:
            protocols = tuple(
                ProtocolRouteCount(
                    name=proto.name,
                    routes=float(proto.routes),
                    active_routes=float(proto.active_routes),
                )
                for proto in table.protocols
            )
            result.append(RoutingTable(
                name=table.name,
                max_routes=float(table.max_routes),
                active_routes=float(table.active_routes),
                total_routes=float(table.total_routes),
                protocols=protocols,
            ))
        return result
