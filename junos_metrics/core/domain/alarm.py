"""
Domain logic для аварий.

Фильтрация по regex и подсчёт Major/Minor аварий.
Не зависит от SSH — работает с разобранными конвертами.
"""

import logging
import re
from typing import Iterable, Optional

from ..exceptions import ConfigError
from ..models import AlarmCounter
from ...parsers.junos import AlarmDetailEnvelope, AlarmEnvelope

logger = logging.getLogger(__name__)

# Класс аварии → корзина
RED_ALARM_CLASS = "Major"
YELLOW_ALARM_CLASS = "Minor"


class AlarmFilter:
    """
    Скомпилированный фильтр аварий.

    Создаётся один раз при старте и дальше только читается,
    поэтому безопасен для одновременного использования из нескольких потоков.

    Авария исключается, если шаблон находится (re.search) в описании
    или в типе аварии.

    Example:
        alarm_filter = AlarmFilter("fan|PEM")
        alarm_filter.matches(detail)  # True если описание содержит "fan"
    """

    def __init__(self, pattern: Optional[str] = None):
        """
        Args:
            pattern: Регулярное выражение (None или "" — фильтр выключен)

        Raises:
            ConfigError: Некорректное регулярное выражение
        """
        self.pattern = pattern or None
        self._regex = None
        if self.pattern:
            try:
                self._regex = re.compile(self.pattern)
            except re.error as e:
                raise ConfigError(
                    f"Некорректный фильтр аварий {self.pattern!r}: {e}",
                    key="exporter.alarm_filter",
                ) from e

    @property
    def enabled(self) -> bool:
        """Фильтр задан."""
        return self._regex is not None

    def matches(self, detail: AlarmDetailEnvelope) -> bool:
        """Авария подпадает под фильтр."""
        if self._regex is None:
            return False
        return bool(
            self._regex.search(detail.description)
            or self._regex.search(detail.alarm_type)
        )

    def __repr__(self) -> str:
        return f"AlarmFilter({self.pattern!r})"


class AlarmNormalizer:
    """
    Подсчёт аварий по нескольким источникам (system + chassis).

    Major → red, Minor → yellow, остальные классы не считаются.

    Example:
        normalizer = AlarmNormalizer(AlarmFilter("fan"))
        counter = normalizer.count([system_envelope, chassis_envelope])
    """

    def __init__(self, alarm_filter: Optional[AlarmFilter] = None):
        self.alarm_filter = alarm_filter or AlarmFilter()

    def count(self, envelopes: Iterable[AlarmEnvelope]) -> AlarmCounter:
        """
        Суммирует аварии по всем конвертам.

        Args:
            envelopes: Разобранные ответы команд аварий

        Returns:
            AlarmCounter: Количество red/yellow аварий
        """
        red = 0
        yellow = 0

        for envelope in envelopes:
            for detail in envelope.information.details:
                if self.alarm_filter.matches(detail):
                    logger.debug(f"Авария отфильтрована: {detail.description}")
                    continue

                if detail.alarm_class == RED_ALARM_CLASS:
                    red += 1
                elif detail.alarm_class == YELLOW_ALARM_CLASS:
                    yellow += 1

        return AlarmCounter(red_count=float(red), yellow_count=float(yellow))
