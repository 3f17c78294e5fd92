"""
JSON экспортер.

Сохраняет сэмплы списком {name, labels, value}.

Пример использования:
    exporter = JSONExporter(indent=2)
    exporter.export(result.metrics, "mx1.json")
"""

import json
from datetime import datetime
from typing import Any, List, Optional

from ..collectors.base import Metric
from .base import BaseExporter


class JSONExporter(BaseExporter):
    """
    Экспортер сэмплов в JSON формат.

    Attributes:
        indent: Отступ для форматирования (None = компактный)
        ensure_ascii: Экранировать не-ASCII символы
        include_metadata: Добавить метаданные (дата, количество сэмплов)
    """

    file_extension = ".json"

    def __init__(
        self,
        output_folder: str = "metrics",
        encoding: str = "utf-8",
        indent: Optional[int] = 2,
        ensure_ascii: bool = False,
        include_metadata: bool = True,
    ):
        super().__init__(output_folder, encoding)
        self.indent = indent
        self.ensure_ascii = ensure_ascii
        self.include_metadata = include_metadata

    def render(self, metrics: List[Metric]) -> str:
        data = [m.to_dict() for m in metrics]

        output: Any = data
        if self.include_metadata:
            output = {
                "metadata": {
                    "generated_at": datetime.now().isoformat(),
                    "total_samples": len(data),
                    "metric_names": sorted({m.name for m in metrics}),
                },
                "data": data,
            }

        return json.dumps(output, indent=self.indent, ensure_ascii=self.ensure_ascii)
