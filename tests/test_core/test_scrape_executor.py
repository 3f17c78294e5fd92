"""
Тесты ScrapeExecutor и параллельного сбора.

Проверяет:
- junos_up первым, длительность последней
- Ошибка домена исключает только его сэмплы
- Ошибка подключения → junos_up 0
- Порядок результатов по списку устройств
"""

from contextlib import contextmanager

import pytest

from junos_metrics.core.credentials import Credentials
from junos_metrics.core.device import Device
from junos_metrics.core.domain import AlarmFilter
from junos_metrics.core.exceptions import ConfigError, ConnectionError
from junos_metrics.core.rpc import RpcClient
from junos_metrics.core.scrape import (
    FEATURES,
    ScrapeExecutor,
    resolve_features,
    scrape_device,
    scrape_devices,
)


class FakeConnectionManager:
    """ConnectionManager без SSH: отдаёт канал по host или ошибку."""

    def __init__(self, channels, failing=()):
        self.channels = channels
        self.failing = set(failing)

    @contextmanager
    def connect(self, device, credentials):
        if device.host in self.failing:
            raise ConnectionError("Connection refused", device=device.host)
        yield self.channels(device.host)


@pytest.fixture
def credentials():
    return Credentials(username="netops", password="secret")


@pytest.mark.unit
class TestResolveFeatures:

    def test_all_by_default(self):
        assert resolve_features() == list(FEATURES)

    def test_registry_order(self):
        assert resolve_features(["routes", " bgp", "alarm"]) == ["alarm", "bgp", "routes"]

    def test_unknown(self):
        with pytest.raises(ConfigError) as exc_info:
            resolve_features(["bgp", "lldp"])
        assert exc_info.value.key == "features"

    def test_registry_names(self):
        assert list(FEATURES) == [
            "alarm", "interfaces", "bgp", "ospf", "isis",
            "routes", "routing_engine", "environment", "interface_diagnostics",
        ]


@pytest.mark.unit
class TestScrapeExecutor:

    def test_scrape_all_features(self, fixture_channel):
        result = ScrapeExecutor().scrape(fixture_channel, "mx1")

        assert result.up is True
        assert result.errors == {}
        assert result.metrics[0].name == "junos_up"
        assert result.metrics[0].value == 1.0
        assert result.metrics[-1].name == "junos_collector_duration_seconds"
        assert all(m.labels["target"] == "mx1" for m in result.metrics)

        names = {m.name for m in result.metrics}
        assert "junos_bgp_session_up" in names
        assert "junos_isis_up_count" in names
        assert "junos_interface_diagnostics_laser_bias" in names

    def test_domain_error_isolated(self, make_channel, load_fixture):
        """Ошибка BGP не мешает OSPF."""
        channel = make_channel({
            "show bgp summary": OSError("channel closed"),
            "show ospf3 overview": load_fixture("juniper_junos", "show_ospf3_overview.xml"),
        })
        result = ScrapeExecutor(features=["bgp", "ospf"]).scrape(channel, "mx1")

        assert result.up is True
        assert result.failed_features == ["bgp"]
        names = [m.name for m in result.metrics]
        assert names == [
            "junos_up",
            "junos_ospf3_neighbors",
            "junos_ospf3_neighbors",
            "junos_collector_duration_seconds",
        ]

    def test_decode_error_isolated(self, make_channel):
        channel = make_channel({"show isis adjacency": "error: the isis subsystem is not running"})
        result = ScrapeExecutor(features=["isis"]).scrape(channel, "mx1")

        assert "isis" in result.errors
        assert [m.name for m in result.metrics] == ["junos_up", "junos_collector_duration_seconds"]

    def test_alarm_filter_applied(self, fixture_channel):
        result = ScrapeExecutor(features=["alarm"], alarm_filter="Fan|PEM").scrape(fixture_channel, "mx1")
        values = {m.name: m.value for m in result.metrics}
        assert values["junos_alarms_red_count"] == 1.0
        assert values["junos_alarms_yellow_count"] == 1.0

    def test_invalid_alarm_filter(self):
        with pytest.raises(ConfigError):
            ScrapeExecutor(alarm_filter="[")

    def test_alarm_filter_shared_between_targets(self, fixture_channel, monkeypatch):
        """Один скомпилированный фильтр на все устройства."""
        clients = []

        class RecordingClient(RpcClient):
            def __init__(self, *args, **kwargs):
                super().__init__(*args, **kwargs)
                clients.append(self)

        monkeypatch.setattr("junos_metrics.core.scrape.RpcClient", RecordingClient)
        executor = ScrapeExecutor(features=["alarm"], alarm_filter="Fan|PEM")
        executor.scrape(fixture_channel, "mx1")
        executor.scrape(fixture_channel, "mx2")

        assert isinstance(executor.alarm_filter, AlarmFilter)
        assert len(clients) == 2
        assert all(c.alarm_filter is executor.alarm_filter for c in clients)

    def test_describe(self):
        descs = ScrapeExecutor(features=["isis"]).describe()
        assert [d.name for d in descs] == [
            "junos_up",
            "junos_collector_duration_seconds",
            "junos_isis_up_count",
            "junos_isis_total_count",
        ]

    def test_to_dict(self, fixture_channel):
        data = ScrapeExecutor(features=["ospf"]).scrape(fixture_channel, "mx1").to_dict()
        assert data["target"] == "mx1"
        assert data["up"] is True
        assert data["metrics"][1] == {
            "name": "junos_ospf3_neighbors",
            "labels": {"target": "mx1", "area": "0.0.0.0"},
            "value": 3.0,
        }


@pytest.mark.unit
class TestScrapeDevices:

    def test_connection_failure(self, credentials):
        manager = FakeConnectionManager(channels=None, failing={"mx9"})
        result = scrape_device(Device(host="mx9"), credentials, ScrapeExecutor(), manager)

        assert result.up is False
        assert [(m.name, m.value) for m in result.metrics][0] == ("junos_up", 0.0)
        assert result.metrics[1].name == "junos_collector_duration_seconds"
        assert "connection" in result.errors

    def test_order_preserved(self, credentials, fixture_channel, make_channel):
        def channels(host):
            return make_channel({}, host=host) if host == "mx2" else fixture_channel

        manager = FakeConnectionManager(channels=channels, failing={"mx3"})
        devices = [Device(host=h) for h in ("mx1", "mx2", "mx3", "mx4")]
        results = scrape_devices(
            devices, credentials, ScrapeExecutor(features=["isis"]), manager, max_workers=4,
        )

        assert [r.target for r in results] == ["mx1", "mx2", "mx3", "mx4"]
        assert [r.up for r in results] == [True, True, False, True]
        # mx2 отвечает KeyError на любую команду → ошибка домена, не подключения
        assert results[1].failed_features == ["isis"]

    def test_sequential(self, credentials, fixture_channel):
        manager = FakeConnectionManager(channels=lambda host: fixture_channel)
        results = scrape_devices(
            [Device(host="mx1")], credentials, ScrapeExecutor(features=["isis"]), manager,
        )
        assert len(results) == 1
        assert results[0].up is True
