"""
Tests for InterfaceNormalizer / DiagnosticsNormalizer.

Проверяет:
- error_status = admin != oper (по сырым строкам)
- Логические интерфейсы: сразу после родителя, MAC родителя, только байты
- Оптика: пропуск N/A, выбор ветки RX по напряжению, dBm без ошибок
"""

import pytest

from junos_metrics.core.domain import DiagnosticsNormalizer, InterfaceNormalizer, parse_dbm
from junos_metrics.core.models import InterfaceStats
from junos_metrics.parsers.junos import INTERFACE_DIAGNOSTICS_SCHEMA, INTERFACE_SCHEMA
from junos_metrics.parsers.xml_schema import decode_document


def interfaces_xml(body: str) -> str:
    return f"<rpc-reply><interface-information>{body}</interface-information></rpc-reply>"


def physical(name, admin, oper, extra=""):
    return (
        f"<physical-interface><name>{name}</name>"
        f"<admin-status>{admin}</admin-status><oper-status>{oper}</oper-status>"
        f"{extra}</physical-interface>"
    )


@pytest.mark.unit
class TestInterfaceNormalizer:
    """Тесты нормализации интерфейсов."""

    def setup_method(self):
        self.normalizer = InterfaceNormalizer()

    def normalize(self, body):
        return self.normalizer.normalize(decode_document(interfaces_xml(body), INTERFACE_SCHEMA))

    @pytest.mark.parametrize("admin, oper, admin_up, oper_up, error", [
        ("up", "up", True, True, False),
        ("up", "down", True, False, True),
        ("down", "down", False, False, False),
        ("down", "up", False, True, True),
    ])
    def test_status_and_error(self, admin, oper, admin_up, oper_up, error):
        """Статусы и error_status по сырым строкам."""
        stats = self.normalize(physical("ge-0/0/0", admin, oper))[0]
        assert stats.is_physical
        assert stats.admin_status is admin_up
        assert stats.oper_status is oper_up
        assert stats.error_status is error

    def test_error_status_compares_raw_strings(self):
        """Отличие только регистром — тоже расхождение."""
        stats = self.normalize(physical("ge-0/0/0", "up", "Up"))[0]
        assert stats.error_status is True
        assert stats.oper_status is False

    def test_logical_follows_parent(self, load_fixture):
        """Логические интерфейсы идут сразу за физическим и наследуют MAC."""
        envelope = decode_document(
            load_fixture("juniper_junos", "show_interfaces_statistics_detail.xml"), INTERFACE_SCHEMA,
        )
        stats = self.normalizer.normalize(envelope)

        assert [s.name for s in stats] == ["ge-0/0/0", "ge-0/0/0.0", "ge-0/0/0.32767", "ge-0/0/1"]
        assert [s.is_physical for s in stats] == [True, False, False, True]

        unit = stats[1]
        assert unit == InterfaceStats(
            name="ge-0/0/0.0",
            description="transit",
            mac="00:05:86:71:1a:c0",
            is_physical=False,
            receive_bytes=1000.0,
            transmit_bytes=2000.0,
        )

    def test_physical_counters(self, load_fixture):
        envelope = decode_document(
            load_fixture("juniper_junos", "show_interfaces_statistics_detail.xml"), INTERFACE_SCHEMA,
        )
        phy = self.normalizer.normalize(envelope)[0]

        assert phy.receive_bytes == 123456789.0
        assert phy.transmit_bytes == 987654321.0
        assert phy.receive_errors == 3.0
        assert phy.receive_drops == 5.0
        assert phy.transmit_errors == 7.0
        assert phy.transmit_drops == 11.0

    def test_empty(self):
        assert self.normalize("") == []


@pytest.mark.unit
class TestParseDbm:
    """Тесты разбора dBm."""

    @pytest.mark.parametrize("value, expected", [
        ("-2.71", -2.71),
        ("0", 0.0),
        (" -40.00 ", -40.0),
    ])
    def test_numbers(self, value, expected):
        assert parse_dbm(value) == pytest.approx(expected)

    @pytest.mark.parametrize("value", ["- Inf", "", "N/A"])
    def test_not_numbers(self, value):
        assert parse_dbm(value) is None


@pytest.mark.unit
class TestDiagnosticsNormalizer:
    """Тесты нормализации оптики."""

    def setup_method(self):
        self.normalizer = DiagnosticsNormalizer()

    def normalize(self, body):
        envelope = decode_document(interfaces_xml(body), INTERFACE_DIAGNOSTICS_SCHEMA)
        return self.normalizer.normalize(envelope)

    def test_not_available_skipped(self):
        """Интерфейсы без оптики пропускаются."""
        body = (
            "<physical-interface><name>ge-0/0/9</name><optics-diagnostics>"
            "<optic-diagnostics-not-available>N/A</optic-diagnostics-not-available>"
            "</optics-diagnostics></physical-interface>"
        )
        assert self.normalize(body) == []

    def test_voltage_selects_rx_signal_avg(self):
        """module_voltage > 0 — ветка rx_signal_avg."""
        body = (
            "<physical-interface><name>xe-0/1/0</name><optics-diagnostics>"
            "<module-voltage>3.3</module-voltage>"
            "<rx-signal-avg-optical-power>0.5</rx-signal-avg-optical-power>"
            "<rx-signal-avg-optical-power-dbm>-3.01</rx-signal-avg-optical-power-dbm>"
            "<laser-rx-optical-power>0.7</laser-rx-optical-power>"
            "<laser-rx-optical-power-dbm>-1.55</laser-rx-optical-power-dbm>"
            "</optics-diagnostics></physical-interface>"
        )
        diag = self.normalize(body)[0]

        assert diag.module_voltage == pytest.approx(3.3)
        assert diag.rx_signal_avg_optical_power == pytest.approx(0.5)
        assert diag.rx_signal_avg_optical_power_dbm == pytest.approx(-3.01)
        assert diag.laser_rx_optical_power == 0.0
        assert diag.laser_rx_optical_power_dbm == 0.0

    def test_no_voltage_selects_laser_rx(self):
        """Без напряжения — ветка laser_rx."""
        body = (
            "<physical-interface><name>ge-0/0/3</name><optics-diagnostics>"
            "<rx-signal-avg-optical-power>0.5</rx-signal-avg-optical-power>"
            "<laser-rx-optical-power>0.7</laser-rx-optical-power>"
            "<laser-rx-optical-power-dbm>-1.55</laser-rx-optical-power-dbm>"
            "</optics-diagnostics></physical-interface>"
        )
        diag = self.normalize(body)[0]

        assert diag.module_voltage == 0.0
        assert diag.rx_signal_avg_optical_power == 0.0
        assert diag.laser_rx_optical_power == pytest.approx(0.7)
        assert diag.laser_rx_optical_power_dbm == pytest.approx(-1.55)

    @pytest.mark.parametrize("voltage", ["0", "0.000", "-0.2"])
    def test_non_positive_voltage_selects_laser_rx(self, voltage):
        """module_voltage <= 0 — ветка laser_rx, напряжение не выводится."""
        body = (
            "<physical-interface><name>ge-0/0/4</name><optics-diagnostics>"
            f"<module-voltage>{voltage}</module-voltage>"
            "<rx-signal-avg-optical-power>0.5</rx-signal-avg-optical-power>"
            "<rx-signal-avg-optical-power-dbm>-3.01</rx-signal-avg-optical-power-dbm>"
            "<laser-rx-optical-power>0.7</laser-rx-optical-power>"
            "<laser-rx-optical-power-dbm>-1.55</laser-rx-optical-power-dbm>"
            "</optics-diagnostics></physical-interface>"
        )
        diag = self.normalize(body)[0]

        assert diag.module_voltage == 0.0
        assert diag.rx_signal_avg_optical_power == 0.0
        assert diag.rx_signal_avg_optical_power_dbm == 0.0
        assert diag.laser_rx_optical_power == pytest.approx(0.7)
        assert diag.laser_rx_optical_power_dbm == pytest.approx(-1.55)

    def test_unparsable_dbm_is_zero(self, load_fixture):
        """'- Inf' в dBm — 0 без ошибки."""
        envelope = decode_document(
            load_fixture("juniper_junos", "show_interfaces_diagnostics_optics.xml"),
            INTERFACE_DIAGNOSTICS_SCHEMA,
        )
        result = self.normalizer.normalize(envelope)

        assert [d.name for d in result] == ["xe-0/1/0", "ge-0/0/3"]
        ge = result[1]
        assert ge.laser_rx_optical_power_dbm == 0.0
        assert ge.laser_output_power_dbm == pytest.approx(-6.02)
        assert ge.module_temperature == 40.5
        assert ge.laser_bias_current == 12.0
