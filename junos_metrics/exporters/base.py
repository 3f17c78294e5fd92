"""
Базовый класс экспортера метрик.

Определяет интерфейс для всех экспортеров и общую логику.
Все экспортеры наследуются от BaseExporter.

Пример создания кастомного экспортера:
    class CSVExporter(BaseExporter):
        file_extension = ".csv"

        def render(self, metrics):
            return "\\n".join(f"{m.name},{m.value}" for m in metrics)
"""

import logging
from abc import ABC, abstractmethod
from datetime import datetime
from pathlib import Path
from typing import List, Optional

from ..collectors.base import Metric

logger = logging.getLogger(__name__)


class BaseExporter(ABC):
    """
    Абстрактный базовый класс для экспортеров.

    Attributes:
        output_folder: Папка для сохранения файлов
        encoding: Кодировка файлов
    """

    # Расширение файла (переопределяется в наследниках)
    file_extension: str = ".txt"

    def __init__(
        self,
        output_folder: str = "metrics",
        encoding: str = "utf-8",
    ):
        self.output_folder = Path(output_folder)
        self.encoding = encoding

    @abstractmethod
    def render(self, metrics: List[Metric]) -> str:
        """
        Преобразует сэмплы в текст формата экспортера.

        Args:
            metrics: Сэмплы

        Returns:
            str: Готовый к записи текст
        """

    def export(
        self,
        metrics: List[Metric],
        filename: Optional[str] = None,
    ) -> Optional[Path]:
        """
        Экспортирует сэмплы в файл.

        Args:
            metrics: Сэмплы
            filename: Имя файла (без пути). Если None — генерируется автоматически

        Returns:
            Path: Путь к созданному файлу или None при ошибке
        """
        if not metrics:
            logger.warning("Нет данных для экспорта")
            return None

        self._ensure_output_folder()

        if not filename:
            filename = self._generate_filename()

        if not filename.endswith(self.file_extension):
            filename += self.file_extension

        file_path = self.output_folder / filename

        try:
            file_path.write_text(self.render(metrics), encoding=self.encoding)
        except OSError as e:
            logger.error(f"Ошибка экспорта в {file_path}: {e}")
            return None

        logger.info(f"Метрики экспортированы: {file_path}")
        return file_path

    def _ensure_output_folder(self) -> None:
        """Создаёт папку если не существует."""
        if not self.output_folder.exists():
            self.output_folder.mkdir(parents=True, exist_ok=True)
            logger.info(f"Создана папка: {self.output_folder}")

    def _generate_filename(self) -> str:
        """Генерирует имя файла с текущей датой."""
        date_str = datetime.now().strftime("%Y-%m-%d_%H%M%S")
        return f"metrics_{date_str}"
