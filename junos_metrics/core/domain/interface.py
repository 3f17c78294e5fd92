"""
Domain logic для интерфейсов и оптики.

Маппинг разобранных конвертов в InterfaceStats и InterfaceDiagnostics.
Не зависит от SSH/collectors — работает с разобранными данными.
"""

import logging
from typing import List, Optional

from ..models import InterfaceDiagnostics, InterfaceStats
from ...parsers.junos import (
    DiagnosticsInterfaceEnvelope,
    InterfaceDiagnosticsEnvelope,
    InterfaceEnvelope,
    PhysicalInterfaceEnvelope,
)

logger = logging.getLogger(__name__)

STATUS_UP = "up"

# Маркер отсутствия оптики в <optic-diagnostics-not-available>
OPTICS_NOT_AVAILABLE = "N/A"


class InterfaceNormalizer:
    """
    Нормализация счётчиков интерфейсов.

    Для каждого физического интерфейса создаётся запись со статусами,
    ошибками и дропами. Следом идут его логические интерфейсы (units):
    только счётчики байт, MAC наследуется от физического.

    Example:
        normalizer = InterfaceNormalizer()
        stats = normalizer.normalize(envelope)
        # stats[0].error_status == (admin != oper)
    """

    def normalize(self, envelope: InterfaceEnvelope) -> List[InterfaceStats]:
        """
        Args:
            envelope: Разобранный ответ show interfaces statistics detail

        Returns:
            List[InterfaceStats]: Физические и логические интерфейсы в порядке ответа
        """
        result = []
        for phy in envelope.information.interfaces:
            result.append(self._normalize_physical(phy))

            for log in phy.logical_interfaces:
                result.append(InterfaceStats(
                    name=log.name,
                    description=log.description,
                    mac=phy.mac_address,
                    is_physical=False,
                    receive_bytes=float(log.traffic.input_bytes),
                    transmit_bytes=float(log.traffic.output_bytes),
                ))

        return result

    @staticmethod
    def _normalize_physical(phy: PhysicalInterfaceEnvelope) -> InterfaceStats:
        return InterfaceStats(
            name=phy.name,
            description=phy.description,
            mac=phy.mac_address,
            is_physical=True,
            admin_status=phy.admin_status == STATUS_UP,
            oper_status=phy.oper_status == STATUS_UP,
            error_status=phy.admin_status != phy.oper_status,
            receive_bytes=float(phy.traffic.input_bytes),
            transmit_bytes=float(phy.traffic.output_bytes),
            receive_errors=float(phy.input_errors.errors),
            transmit_errors=float(phy.output_errors.errors),
            receive_drops=float(phy.input_errors.drops),
            transmit_drops=float(phy.output_errors.drops),
        )


def parse_dbm(value: str) -> Optional[float]:
    """
    Разбирает значение мощности в dBm.

    Args:
        value: Текст из XML ("-2.34", "- Inf", "")

    Returns:
        float или None если значение не число
    """
    try:
        return float(value)
    except ValueError:
        return None


class DiagnosticsNormalizer:
    """
    Нормализация диагностики оптики.

    Интерфейсы без оптики ("N/A") пропускаются. Неразбираемые dBm
    остаются 0.0 без ошибки. Заполняется ровно одна ветка RX:
    module_voltage > 0 — rx_signal_avg_*, иначе — laser_rx_*.
    """

    def normalize(self, envelope: InterfaceDiagnosticsEnvelope) -> List[InterfaceDiagnostics]:
        """
        Args:
            envelope: Разобранный ответ show interfaces diagnostics optics

        Returns:
            List[InterfaceDiagnostics]: Интерфейсы с оптикой
        """
        result = []
        for intf in envelope.information.interfaces:
            if intf.diagnostics.not_available == OPTICS_NOT_AVAILABLE:
                continue
            result.append(self._normalize_row(intf))
        return result

    def _normalize_row(self, intf: DiagnosticsInterfaceEnvelope) -> InterfaceDiagnostics:
        diag = intf.diagnostics
        values = {
            "name": intf.name,
            "laser_bias_current": diag.laser_bias_current,
            "laser_output_power": diag.laser_output_power,
            "laser_output_power_dbm": self._dbm(intf.name, diag.laser_output_power_dbm),
            "module_temperature": diag.module_temperature.celsius,
        }

        if diag.module_voltage > 0:
            values["module_voltage"] = diag.module_voltage
            values["rx_signal_avg_optical_power"] = diag.rx_signal_avg_optical_power
            values["rx_signal_avg_optical_power_dbm"] = self._dbm(
                intf.name, diag.rx_signal_avg_optical_power_dbm,
            )
        else:
            values["laser_rx_optical_power"] = diag.laser_rx_optical_power
            values["laser_rx_optical_power_dbm"] = self._dbm(
                intf.name, diag.laser_rx_optical_power_dbm,
            )

        return InterfaceDiagnostics(**values)

    @staticmethod
    def _dbm(name: str, value: str) -> float:
        parsed = parse_dbm(value)
        if parsed is None:
            logger.debug(f"{name}: dBm {value!r} не число, используем 0")
            return 0.0
        return parsed
