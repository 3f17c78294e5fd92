"""
Модули экспорта метрик.

Поддерживаемые форматы:
- Prometheus text (.prom) - для textfile collector / pushgateway
- JSON (.json) - структурированные данные

Пример использования:
    from junos_metrics.exporters import PrometheusExporter

    exporter = PrometheusExporter(output_folder="metrics")
    print(exporter.render(result.metrics))
"""

from .base import BaseExporter
from .json_exporter import JSONExporter
from .prometheus import PrometheusExporter

EXPORTERS = {
    "prometheus": PrometheusExporter,
    "json": JSONExporter,
}


def get_exporter(fmt: str, **kwargs) -> BaseExporter:
    """
    Создаёт экспортер по имени формата.

    Raises:
        ValueError: Неизвестный формат
    """
    if fmt not in EXPORTERS:
        raise ValueError(f"Неизвестный формат: {fmt}. Доступны: {', '.join(EXPORTERS)}")
    return EXPORTERS[fmt](**kwargs)


__all__ = ["BaseExporter", "JSONExporter", "PrometheusExporter", "EXPORTERS", "get_exporter"]
