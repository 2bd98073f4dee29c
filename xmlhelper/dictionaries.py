from __future__ import annotations

import xml.etree.ElementTree as ET
from typing import (
    Callable,
    Dict,
    Iterable,
    Iterator,
    MutableMapping,
    Optional,
    Tuple,
    TypeVar,
)

from xmlhelper.attributes import get_attr
from xmlhelper.config import TYPE_ATTRIBUTE
from xmlhelper.models import CaseInsensitiveDict, DictionaryValueType, ElementPayload
from xmlhelper.node import element, elements, is_leaf, local_name, name_of, text
from xmlhelper.parsing import parse_bool, parse_enum, parse_float, parse_int

K = TypeVar("K")
V = TypeVar("V")

Transform = Callable[[str], str]


def string_dictionary(
    node: Optional[ET.Element],
    dictionary: Optional[MutableMapping[str, str]] = None,
    nested: Optional[Callable[[ET.Element, str], str]] = None,
    case_sensitive: bool = False,
) -> MutableMapping[str, str]:
    """
    Flatten the element children of node into name -> text.

    Containers are passed to nested(child, key) when given, otherwise
    their concatenated text is used. Keys are case-insensitive unless
    case_sensitive is set or a dictionary is supplied.

    Example:
        <stats><hp>100</hp><crew>4</crew></stats>
        -> {"hp": "100", "crew": "4"}
    """
    if dictionary is None:
        dictionary = {} if case_sensitive else CaseInsensitiveDict()

    for item in elements(node):
        key = name_of(item)
        if nested is not None and not is_leaf(item):
            dictionary[key] = nested(item, key)
            continue
        dictionary[key] = text(item)

    return dictionary


def string_int_dictionary(
    node: Optional[ET.Element],
    key_transform: Optional[Transform] = None,
    value_transform: Optional[Transform] = None,
) -> Dict[str, int]:
    """
    name -> int for each element child. Unparseable values become 0.
    """
    result: Dict[str, int] = {}

    for item in elements(node):
        key = name_of(item)
        value = text(item)

        if key_transform is not None:
            key = key_transform(key)
        if value_transform is not None:
            value = value_transform(value)

        parsed = parse_int(value)
        result[key] = 0 if parsed is None else parsed

    return result


def bool_dictionary(node: Optional[ET.Element], key_uppercase: bool = True) -> Dict[str, bool]:
    result: Dict[str, bool] = {}

    for item in elements(node):
        key = name_of(item)
        if key_uppercase:
            key = key.upper()
        result[key] = parse_bool(text(item)) is True

    return result


def object_dictionary_of(
    node: Optional[ET.Element],
    child_name: str,
    default_type: DictionaryValueType = DictionaryValueType.STRING,
    key_uppercase: bool = True,
) -> Dict[str, object]:
    """
    Typed flattening of the child named child_name.

    Each entry picks its type from a "type" attribute (Int32, Boolean,
    Single, String; any case), else default_type. Values that do not
    parse as their type are kept as text.

    Example:
        <settings>
            <speed type="single">1.5</speed>
            <lives type="int32">3</lives>
            <name>Ace</name>
        </settings>
        -> {"SPEED": 1.5, "LIVES": 3, "NAME": "Ace"}
    """
    result: Dict[str, object] = {}

    for item in elements(element(node, child_name)):
        value_type = parse_enum(get_attr(item, TYPE_ATTRIBUTE), DictionaryValueType)
        if value_type is None:
            value_type = default_type

        key = name_of(item)
        if key_uppercase:
            key = key.upper()

        raw = text(item)
        value: object = None
        if value_type is DictionaryValueType.INT32:
            value = parse_int(raw)
        elif value_type is DictionaryValueType.BOOLEAN:
            value = parse_bool(raw)
        elif value_type is DictionaryValueType.SINGLE:
            value = parse_float(raw)

        result[key] = raw if value is None else value

    return result


def element_payloads(
    nodes: Iterable[ET.Element],
    key_transform: Transform,
    value_transform: Transform,
    nested: Optional[Callable[[ET.Element, str], str]] = None,
) -> Iterator[ElementPayload]:
    """
    One payload per node: transformed name, value and attributes.

    Containers are skipped unless nested is given.
    """
    for node in nodes:
        attributes = CaseInsensitiveDict(
            {local_name(k): v for k, v in node.attrib.items()}
        )
        key = key_transform(name_of(node))

        if is_leaf(node):
            value = value_transform(text(node))
        elif nested is not None:
            value = nested(node, key)
        else:
            continue

        yield ElementPayload(key=key, value=value, attributes=attributes)


def key_value_pairs(
    nodes: Iterable[ET.Element],
    key_transform: Callable[[str], K],
    value_transform: Callable[[str], V],
    nested: Optional[Callable[[ET.Element, K], V]] = None,
) -> Iterator[Tuple[K, V]]:
    """
    Like element_payloads without the attributes.
    """
    for node in nodes:
        key = key_transform(name_of(node))

        if is_leaf(node):
            value = value_transform(text(node))
        elif nested is not None:
            value = nested(node, key)
        else:
            continue

        yield key, value
