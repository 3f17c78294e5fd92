"""
Domain logic для шасси: routing-engine и датчики температуры.
"""

import logging
from typing import Dict, List

from ..models import EnvironmentItem, RouteEngineStats
from ...parsers.junos import EnvironmentEnvelope, RoutingEngineEnvelope

logger = logging.getLogger(__name__)


class RouteEngineNormalizer:
    """Снимок routing-engine (master <route-engine>, иначе последний в ответе)."""

    def normalize(self, envelope: RoutingEngineEnvelope) -> RouteEngineStats:
        engine = envelope.information.route_engine
        return RouteEngineStats(
            temperature=engine.temperature.celsius,
            cpu_temperature=engine.cpu_temperature.celsius,
            memory_utilization=float(engine.memory_utilization),
            cpu_user=float(engine.cpu_user),
            cpu_background=float(engine.cpu_background),
            cpu_system=float(engine.cpu_system),
            cpu_interrupt=float(engine.cpu_interrupt),
            cpu_idle=float(engine.cpu_idle),
            load_average_one=engine.load_average_one,
            load_average_five=engine.load_average_five,
            load_average_fifteen=engine.load_average_fifteen,
        )


class EnvironmentNormalizer:
    """
    Датчики температуры шасси.

    Элементы без температуры пропускаются. Дубликаты по имени
    схлопываются: побеждает последнее значение.
    """

    def normalize(self, envelope: EnvironmentEnvelope) -> List[EnvironmentItem]:
        temperatures: Dict[str, float] = {}
        for item in envelope.information.items:
            if item.temperature is None:
                continue
            if item.name in temperatures:
                logger.debug(f"Дубликат датчика {item.name}, берём последнее значение")
            temperatures[item.name] = item.temperature.celsius

        return [
            EnvironmentItem(name=name, temperature=value)
            for name, value in temperatures.items()
        ]
