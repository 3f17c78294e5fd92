"""
Команды доменов телеметрии (централизованные).

Все команды отправляются с суффиксом XML_OUTPUT_SUFFIX.
"""

from typing import Dict, Tuple

# Суффикс для получения структурированного ответа
XML_OUTPUT_SUFFIX = " | display xml"

# =============================================================================
# КОМАНДЫ ДОМЕНОВ
# =============================================================================

DOMAIN_COMMANDS: Dict[str, Tuple[str, ...]] = {
    # Аварии: сначала системные, затем шасси
    "alarm": ("show system alarms", "show chassis alarms"),
    "interfaces": ("show interfaces statistics detail",),
    "bgp": ("show bgp summary",),
    "ospf": ("show ospf3 overview",),
    "isis": ("show isis adjacency",),
    "routes": ("show route summary",),
    "routing_engine": ("show chassis routing-engine",),
    "environment": ("show chassis environment",),
    "interface_diagnostics": ("show interfaces diagnostics optics",),
}


def get_domain_commands(domain: str) -> Tuple[str, ...]:
    """
    Возвращает команды домена.

    Args:
        domain: Имя домена (interfaces, bgp, ...)

    Returns:
        Tuple[str, ...]: Команды в порядке выполнения

    Raises:
        KeyError: Неизвестный домен
    """
    return DOMAIN_COMMANDS[domain]


def with_xml_output(command: str) -> str:
    """Добавляет к команде директиву XML вывода."""
    return f"{command}{XML_OUTPUT_SUFFIX}"
