"""
Экспортер в текстовый формат Prometheus (exposition format 0.0.4).

Сэмплы группируются по имени метрики в порядке первого появления,
перед группой выводятся # HELP и # TYPE.

Пример вывода:
    # HELP junos_bgp_session_up Session is up (1 = Established)
    # TYPE junos_bgp_session_up gauge
    junos_bgp_session_up{target="mx1",asn="65001",ip="10.0.0.1"} 1
"""

import math
from typing import Dict, List

from ..collectors.base import Metric, MetricDesc
from .base import BaseExporter


def escape_label_value(value: str) -> str:
    """Экранирует \\, " и перевод строки в значении метки."""
    return value.replace("\\", "\\\\").replace("\n", "\\n").replace('"', '\\"')


def escape_help(text: str) -> str:
    """Экранирует \\ и перевод строки в HELP."""
    return text.replace("\\", "\\\\").replace("\n", "\\n")


def format_value(value: float) -> str:
    """Число в формате Prometheus (NaN, +Inf, целые без .0)."""
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "+Inf" if value > 0 else "-Inf"
    if value.is_integer() and abs(value) < 1e15:
        return str(int(value))
    return repr(value)


def format_sample(metric: Metric) -> str:
    """Одна строка сэмпла."""
    if metric.label_values:
        labels = ",".join(
            f'{name}="{escape_label_value(value)}"'
            for name, value in zip(metric.desc.label_names, metric.label_values)
        )
        return f"{metric.name}{{{labels}}} {format_value(metric.value)}"
    return f"{metric.name} {format_value(metric.value)}"


class PrometheusExporter(BaseExporter):
    """
    Экспортер метрик в текстовый формат Prometheus.

    Example:
        exporter = PrometheusExporter(output_folder="/var/lib/node_exporter")
        exporter.export(result.metrics, "junos.prom")
    """

    file_extension = ".prom"

    def render(self, metrics: List[Metric]) -> str:
        groups: Dict[str, List[Metric]] = {}
        descs: Dict[str, MetricDesc] = {}
        for metric in metrics:
            groups.setdefault(metric.name, []).append(metric)
            descs.setdefault(metric.name, metric.desc)

        lines = []
        for name, samples in groups.items():
            desc = descs[name]
            lines.append(f"# HELP {name} {escape_help(desc.help)}")
            lines.append(f"# TYPE {name} {desc.metric_type}")
            lines.extend(format_sample(m) for m in samples)

        return "\n".join(lines) + "\n" if lines else ""
