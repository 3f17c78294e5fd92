"""
Тесты MetricDesc / Metric / BaseCollector.
"""

import pytest

from junos_metrics.collectors.base import (
    BaseCollector,
    Metric,
    MetricDesc,
    bool_to_float,
)


class ArpCollector(BaseCollector):
    name = "arp"
    prefix = "junos_arp_"

    def __init__(self):
        self.entries = self.desc("entries", "Number of ARP entries", ("interface",))

    def describe(self):
        return [self.entries]

    def collect(self, datasource, sink, label_values):
        for interface, count in datasource.items():
            self.emit(sink, self.entries, count, tuple(label_values) + (interface,))


class TestMetric:

    def test_labels(self):
        desc = MetricDesc("junos_x", "help", ("target", "name"))
        metric = Metric(desc, 1.0, ("mx1", "ge-0/0/0"))
        assert metric.name == "junos_x"
        assert metric.labels == {"target": "mx1", "name": "ge-0/0/0"}
        assert metric.to_dict() == {"name": "junos_x", "labels": metric.labels, "value": 1.0}

    def test_label_count_mismatch(self):
        desc = MetricDesc("junos_x", "help", ("target", "name"))
        with pytest.raises(ValueError):
            Metric(desc, 1.0, ("mx1",))

    def test_bool_to_float(self):
        assert bool_to_float(True) == 1.0
        assert bool_to_float(False) == 0.0


class TestBaseCollector:

    def test_desc_prefix_and_target(self):
        desc = ArpCollector().entries
        assert desc.name == "junos_arp_entries"
        assert desc.label_names == ("target", "interface")

    def test_emit_converts_to_float(self):
        samples = []
        ArpCollector().collect({"ge-0/0/0": 3}, samples.append, ("mx1",))
        assert samples[0].value == 3.0
        assert isinstance(samples[0].value, float)
        assert samples[0].label_values == ("mx1", "ge-0/0/0")

    def test_abstract(self):
        with pytest.raises(TypeError):
            BaseCollector()
