"""
Декларативный разбор XML ответов по схеме.

Каждый домен описывает свой ответ таблицей полей XmlField
(путь к элементу → поле dataclass, тип, обязательность).
XmlSchema разбирает элемент в типизированную структуру за один проход,
без бизнес-логики: маппинг в записи делает core.domain.

Пути:
    "name"                          — дочерний элемент
    "traffic-statistics/input-bytes" — вложенный элемент
    "temperature@celsius"           — атрибут дочернего элемента
    "@celsius"                      — атрибут текущего элемента

Повторяющиеся элементы (без many=True):
    берётся последний, либо первый подходящий под prefer

Отсутствующие элементы:
    required=True  — DecodeError
    optional=True  — None (для вложенных схем и скаляров)
    иначе          — нулевое значение ("" / 0 / 0.0 / пустая структура)

Пример:
    TRAFFIC = XmlSchema(TrafficEnvelope, (
        XmlField("input_bytes", "input-bytes", int),
        XmlField("output_bytes", "output-bytes", int),
    ))
    envelope = TRAFFIC.decode(element)
"""

import logging
from dataclasses import dataclass
from typing import Any, List, Optional, Tuple, Union

from defusedxml import DefusedXmlException
from defusedxml.ElementTree import ParseError, fromstring

from ..core.exceptions import DecodeError

logger = logging.getLogger(__name__)

# Нулевые значения скалярных типов
_ZERO = {str: "", int: 0, float: 0.0}


@dataclass(frozen=True)
class XmlField:
    """
    Описание одного поля схемы.

    Attributes:
        name: Имя атрибута в dataclass конверта
        path: Путь к элементу (и атрибуту через @)
        kind: str, int, float или вложенная XmlSchema
        many: Список всех совпавших элементов
        required: Отсутствие элемента — ошибка разбора
        optional: Отсутствие элемента — None
        prefer: Условие "путь=значение" для выбора среди повторов
            (например "mastership-state=master")
    """
    name: str
    path: str
    kind: Any = str
    many: bool = False
    required: bool = False
    optional: bool = False
    prefer: str = ""


@dataclass(frozen=True)
class XmlSchema:
    """
    Схема разбора элемента в dataclass конверта.

    Attributes:
        model: Класс конверта (dataclass с полями из fields)
        fields: Упорядоченная таблица полей
    """
    model: type
    fields: Tuple[XmlField, ...]

    def decode(self, element: Any, base_path: str = "") -> Any:
        """
        Разбирает элемент по схеме.

        Args:
            element: Элемент ElementTree (без namespace в тегах)
            base_path: Путь элемента в документе (для сообщений об ошибках)

        Returns:
            Экземпляр model

        Raises:
            DecodeError: Обязательный элемент отсутствует или значение не разбирается
        """
        values = {}
        for spec in self.fields:
            values[spec.name] = self._decode_field(element, spec, base_path)
        return self.model(**values)

    def empty(self) -> Any:
        """Структура с нулевыми значениями (элемент отсутствует)."""
        values = {}
        for spec in self.fields:
            if spec.many:
                values[spec.name] = []
            elif spec.optional:
                values[spec.name] = None
            elif isinstance(spec.kind, XmlSchema):
                values[spec.name] = spec.kind.empty()
            else:
                values[spec.name] = _ZERO[spec.kind]
        return self.model(**values)

    def _decode_field(self, element: Any, spec: XmlField, base_path: str) -> Any:
        elem_path, _, attr = spec.path.partition("@")
        full_path = f"{base_path}/{spec.path}" if base_path else spec.path

        if spec.many:
            children = element.findall(elem_path)
            if not children and spec.required:
                raise DecodeError(f"Отсутствует элемент {elem_path}", path=full_path)
            return [
                self._convert(child, spec, attr, f"{full_path}[{i}]")
                for i, child in enumerate(children)
            ]

        target = _pick(element.findall(elem_path), spec.prefer) if elem_path else element
        if target is None or (attr and target.get(attr) is None):
            if spec.required:
                raise DecodeError(f"Отсутствует элемент {spec.path}", path=full_path)
            if spec.optional:
                return None
            if isinstance(spec.kind, XmlSchema):
                return spec.kind.empty()
            return _ZERO[spec.kind]

        return self._convert(target, spec, attr, full_path)

    @staticmethod
    def _convert(target: Any, spec: XmlField, attr: str, path: str) -> Any:
        if isinstance(spec.kind, XmlSchema):
            return spec.kind.decode(target, path)

        raw = target.get(attr) if attr else target.text
        text = (raw or "").strip()
        if spec.kind is str:
            return text
        if not text:
            return _ZERO[spec.kind]
        try:
            return spec.kind(text)
        except ValueError as e:
            raise DecodeError(
                f"Значение {text!r} не является {spec.kind.__name__}",
                path=path,
            ) from e


def _pick(matches: List[Any], prefer: str) -> Optional[Any]:
    """
    Выбирает один элемент из повторяющихся.

    Сначала первый, подходящий под prefer, иначе последний:
    повторный элемент перекрывает предыдущий.
    """
    if not matches:
        return None
    if prefer:
        path, _, value = prefer.partition("=")
        for match in matches:
            if (match.findtext(path) or "").strip() == value:
                return match
    return matches[-1]


def _strip_namespaces(root: Any) -> None:
    """Убирает {namespace} из тегов и атрибутов (Junos добавляет xmlns)."""
    for elem in root.iter():
        if isinstance(elem.tag, str) and elem.tag.startswith("{"):
            elem.tag = elem.tag.split("}", 1)[1]
        for key in [k for k in elem.attrib if k.startswith("{")]:
            elem.attrib[key.split("}", 1)[1]] = elem.attrib.pop(key)


def parse_xml(data: Union[bytes, str]) -> Any:
    """
    Разбирает сырой ответ в дерево ElementTree.

    Текст до первого '<' и после последнего '>' отбрасывается
    (баннеры и строки вида "{master}" вокруг XML).

    Args:
        data: Ответ устройства

    Returns:
        Element: Корневой элемент (rpc-reply)

    Raises:
        DecodeError: Пустой или некорректный XML
    """
    if isinstance(data, str):
        data = data.encode("utf-8")

    start = data.find(b"<")
    end = data.rfind(b">")
    if start == -1 or end < start:
        raise DecodeError("Ответ не содержит XML")

    try:
        root = fromstring(data[start:end + 1])
    except (ParseError, DefusedXmlException) as e:
        raise DecodeError(f"Некорректный XML: {e}") from e

    _strip_namespaces(root)
    return root


def decode_document(data: Union[bytes, str], schema: XmlSchema) -> Any:
    """
    Разбирает ответ целиком: байты → дерево → конверт домена.

    Args:
        data: Ответ устройства
        schema: Схема корневого элемента

    Returns:
        Экземпляр schema.model
    """
    root = parse_xml(data)
    logger.debug(f"Разбор XML: корень <{root.tag}>")
    return schema.decode(root)
