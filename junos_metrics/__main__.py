"""
Точка входа для запуска модуля.

Позволяет запускать утилиту как:
    python -m junos_metrics [команда] [опции]

Примеры:
    python -m junos_metrics collect mx1.example.net
    python -m junos_metrics features
"""

import sys

from .cli import main

if __name__ == "__main__":
    sys.exit(main())
