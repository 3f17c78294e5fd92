"""
Разбор XML ответов Junos.

Модуль предоставляет:
- XmlField / XmlSchema: декларативные таблицы полей
- parse_xml / decode_document: bytes → ElementTree → конверт домена
- junos: схемы всех доменов телеметрии

Пример использования:
    from junos_metrics.parsers import decode_document
    from junos_metrics.parsers.junos import ISIS_SCHEMA

    envelope = decode_document(raw_output, ISIS_SCHEMA)
"""

from .xml_schema import XmlField, XmlSchema, decode_document, parse_xml

__all__ = ["XmlField", "XmlSchema", "decode_document", "parse_xml"]
