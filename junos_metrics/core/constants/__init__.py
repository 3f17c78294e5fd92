"""
Константы Junos Metrics.

Модули:
- commands: команды доменов телеметрии
"""

from .commands import (
    DOMAIN_COMMANDS,
    XML_OUTPUT_SUFFIX,
    get_domain_commands,
    with_xml_output,
)

__all__ = [
    "DOMAIN_COMMANDS",
    "XML_OUTPUT_SUFFIX",
    "get_domain_commands",
    "with_xml_output",
]
