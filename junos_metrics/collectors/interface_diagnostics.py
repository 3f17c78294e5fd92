"""
Коллектор диагностики оптики.

Публикуется только заполненная ветка RX: при module_voltage > 0 —
module_voltage и rx_signal_avg*, иначе laser_rx*.
"""

from typing import List, Protocol, Sequence

from ..core.models import InterfaceDiagnostics
from .base import BaseCollector, MetricDesc, Sink


class InterfaceDiagnosticsDatasource(Protocol):
    def interface_diagnostics(self) -> List[InterfaceDiagnostics]:
        ...


class InterfaceDiagnosticsCollector(BaseCollector):
    name = "interface_diagnostics"
    prefix = "junos_interface_diagnostics_"

    def __init__(self):
        labels = ("name",)
        self.laser_bias = self.desc("laser_bias", "Laser bias current (mA)", labels)
        self.laser_output = self.desc("laser_output", "Laser output power (mW)", labels)
        self.laser_output_dbm = self.desc("laser_output_dbm", "Laser output power (dBm)", labels)
        self.module_temperature = self.desc("temp", "Module temperature in degrees Celsius", labels)
        self.module_voltage = self.desc("module_voltage", "Module voltage (V)", labels)
        self.rx_signal_avg = self.desc(
            "rx_signal_avg", "Receiver signal average optical power (mW)", labels,
        )
        self.rx_signal_avg_dbm = self.desc(
            "rx_signal_avg_dbm", "Receiver signal average optical power (dBm)", labels,
        )
        self.laser_rx = self.desc("laser_rx", "Laser rx power (mW)", labels)
        self.laser_rx_dbm = self.desc("laser_rx_dbm", "Laser rx power (dBm)", labels)

    def describe(self) -> List[MetricDesc]:
        return [
            self.laser_bias,
            self.laser_output,
            self.laser_output_dbm,
            self.module_temperature,
            self.module_voltage,
            self.rx_signal_avg,
            self.rx_signal_avg_dbm,
            self.laser_rx,
            self.laser_rx_dbm,
        ]

    def collect(
        self,
        datasource: InterfaceDiagnosticsDatasource,
        sink: Sink,
        label_values: Sequence[str],
    ) -> None:
        for d in datasource.interface_diagnostics():
            labels = tuple(label_values) + (d.name,)
            self.emit(sink, self.laser_bias, d.laser_bias_current, labels)
            self.emit(sink, self.laser_output, d.laser_output_power, labels)
            self.emit(sink, self.laser_output_dbm, d.laser_output_power_dbm, labels)
            self.emit(sink, self.module_temperature, d.module_temperature, labels)

            if d.module_voltage > 0:
                self.emit(sink, self.module_voltage, d.module_voltage, labels)
                self.emit(sink, self.rx_signal_avg, d.rx_signal_avg_optical_power, labels)
                self.emit(sink, self.rx_signal_avg_dbm, d.rx_signal_avg_optical_power_dbm, labels)
            else:
                self.emit(sink, self.laser_rx, d.laser_rx_optical_power, labels)
                self.emit(sink, self.laser_rx_dbm, d.laser_rx_optical_power_dbm, labels)
