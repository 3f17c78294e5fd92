"""
Коллектор BGP сессий.

Одна серия на пира, метки asn и ip.
"""

from typing import List, Protocol, Sequence

from ..core.models import BgpSession
from .base import BaseCollector, MetricDesc, Sink, bool_to_float


class BgpDatasource(Protocol):
    def bgp_sessions(self) -> List[BgpSession]:
        ...


class BgpCollector(BaseCollector):
    name = "bgp"
    prefix = "junos_bgp_session_"

    def __init__(self):
        labels = ("asn", "ip")
        self.up = self.desc("up", "Session is up (1 = Established)", labels)
        self.received_prefixes = self.desc(
            "received_prefixes_count", "Number of received prefixes", labels,
        )
        self.accepted_prefixes = self.desc(
            "accepted_prefixes_count", "Number of accepted prefixes", labels,
        )
        self.rejected_prefixes = self.desc(
            "rejected_prefixes_count", "Number of rejected prefixes", labels,
        )
        self.active_prefixes = self.desc(
            "active_prefixes_count", "Number of active prefixes (best route in RIB)", labels,
        )
        self.input_messages = self.desc("messages_input_count", "Number of received messages", labels)
        self.output_messages = self.desc("messages_output_count", "Number of transmitted messages", labels)
        self.flaps = self.desc("flap_count", "Number of session flaps", labels)

    def describe(self) -> List[MetricDesc]:
        return [
            self.up,
            self.received_prefixes,
            self.accepted_prefixes,
            self.rejected_prefixes,
            self.active_prefixes,
            self.input_messages,
            self.output_messages,
            self.flaps,
        ]

    def collect(
        self,
        datasource: BgpDatasource,
        sink: Sink,
        label_values: Sequence[str],
    ) -> None:
        for session in datasource.bgp_sessions():
            labels = tuple(label_values) + (session.asn, session.ip)
            self.emit(sink, self.up, bool_to_float(session.up), labels)
            self.emit(sink, self.received_prefixes, session.received_prefixes, labels)
            self.emit(sink, self.accepted_prefixes, session.accepted_prefixes, labels)
            self.emit(sink, self.rejected_prefixes, session.rejected_prefixes, labels)
            self.emit(sink, self.active_prefixes, session.active_prefixes, labels)
            self.emit(sink, self.input_messages, session.input_messages, labels)
            self.emit(sink, self.output_messages, session.output_messages, labels)
            self.emit(sink, self.flaps, session.flaps, labels)
