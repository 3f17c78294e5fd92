"""
Tests for AlarmFilter / AlarmNormalizer.

Проверяет:
- Major → red, Minor → yellow, прочие классы игнорируются
- Фильтр по описанию или типу (поиск подстроки regex)
- Некорректный regex → ConfigError
"""

import pytest

from junos_metrics.core.domain import AlarmFilter, AlarmNormalizer
from junos_metrics.core.exceptions import ConfigError
from junos_metrics.core.models import AlarmCounter
from junos_metrics.parsers.junos import (
    AlarmDetailEnvelope,
    AlarmEnvelope,
    AlarmInformationEnvelope,
)


def envelope(*details):
    return AlarmEnvelope(information=AlarmInformationEnvelope(details=[
        AlarmDetailEnvelope(alarm_class=cls, description=desc, alarm_type=typ)
        for cls, desc, typ in details
    ]))


@pytest.mark.unit
class TestAlarmFilter:
    """Тесты фильтра аварий."""

    def test_disabled_by_default(self):
        alarm_filter = AlarmFilter()
        assert not alarm_filter.enabled
        assert not alarm_filter.matches(AlarmDetailEnvelope("Major", "fan failure", "Chassis"))

    def test_empty_pattern_is_disabled(self):
        assert not AlarmFilter("").enabled

    def test_matches_description_substring(self):
        """Совпадение в любом месте описания."""
        alarm_filter = AlarmFilter("fan")
        assert alarm_filter.matches(AlarmDetailEnvelope("Major", "Front fan failure", "Chassis"))

    def test_matches_type(self):
        alarm_filter = AlarmFilter("^License$")
        assert alarm_filter.matches(AlarmDetailEnvelope("Major", "color=RED", "License"))

    def test_case_sensitive(self):
        alarm_filter = AlarmFilter("fan")
        assert not alarm_filter.matches(AlarmDetailEnvelope("Major", "Fan Tray 0", "Chassis"))

    def test_invalid_pattern_raises_config_error(self):
        with pytest.raises(ConfigError) as exc_info:
            AlarmFilter("fan[")
        assert exc_info.value.key == "exporter.alarm_filter"


@pytest.mark.unit
class TestAlarmNormalizer:
    """Тесты подсчёта аварий."""

    def test_counts_by_class(self):
        counter = AlarmNormalizer().count([envelope(
            ("Major", "a", "Chassis"),
            ("Major", "b", "Chassis"),
            ("Minor", "c", "Configuration"),
            ("Warning", "d", "Chassis"),
        )])
        assert counter == AlarmCounter(red_count=2.0, yellow_count=1.0)

    def test_accumulates_over_sources(self):
        """Системные и аварии шасси суммируются."""
        system = envelope(("Minor", "Rescue configuration is not set", "Configuration"))
        chassis = envelope(("Major", "PEM 0 Not OK", "Chassis"), ("Minor", "PEM 1 Absent", "Chassis"))
        counter = AlarmNormalizer().count([system, chassis])
        assert counter == AlarmCounter(red_count=1.0, yellow_count=2.0)

    def test_filtered_alarms_excluded(self):
        """Аварии с совпадением фильтра не считаются."""
        alarms = envelope(
            ("Major", "fan failure", "Chassis"),
            ("Minor", "psu warn", "Chassis"),
            ("Major", "FPC 0 offline", "Chassis"),
        )
        counter = AlarmNormalizer(AlarmFilter("fan")).count([alarms])
        assert counter == AlarmCounter(red_count=1.0, yellow_count=1.0)

    def test_empty(self):
        assert AlarmNormalizer().count([envelope(), envelope()]) == AlarmCounter()
