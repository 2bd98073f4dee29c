from __future__ import annotations

import xml.etree.ElementTree as ET
from enum import Enum
from typing import Mapping, Optional, Tuple, Type, TypeVar, Union

from xmlhelper.node import element, names_equal
from xmlhelper.parsing import parse_bool, parse_enum, parse_float, parse_int

E = TypeVar("E", bound=Enum)

# An element, or its attrib mapping
Owner = Union[ET.Element, Mapping[str, str], None]


def _attrib(owner: Owner) -> Optional[Mapping[str, str]]:
    if owner is None:
        return None
    if isinstance(owner, ET.Element):
        return owner.attrib
    return owner


# =============================================================================
# Raw lookup
# =============================================================================

def try_attr(owner: Owner, name: str) -> Tuple[bool, Optional[str]]:
    """
    Return (True, value) for the first attribute whose name matches,
    ignoring case and namespace, (False, None) otherwise.
    """
    attrib = _attrib(owner)
    if attrib is None:
        return False, None

    # Exact hit first, attrib is usually a plain dict
    if name in attrib:
        return True, attrib[name]

    for key, value in attrib.items():
        if names_equal(key, name):
            return True, value
    return False, None


def get_attr(owner: Owner, name: str) -> Optional[str]:
    """
    Safely retrieve an attribute from an XML element.

    Returns None if the element or attribute does not exist.
    """
    _, value = try_attr(owner, name)
    return value


def attributes_of(node: Optional[ET.Element], child_name: str) -> Optional[Mapping[str, str]]:
    """
    Attribute mapping of the first child named child_name, or None.
    """
    child = element(node, child_name)
    return None if child is None else child.attrib


# =============================================================================
# Typed lookup
# =============================================================================

def try_attr_string(owner: Owner, name: str) -> Tuple[bool, Optional[str]]:
    return try_attr(owner, name)


def get_attr_string(owner: Owner, name: str, default: str = "") -> str:
    found, value = try_attr(owner, name)
    return value if found else default


def try_attr_int(owner: Owner, name: str) -> Tuple[bool, int]:
    value = parse_int(get_attr(owner, name))
    return (False, 0) if value is None else (True, value)


def get_attr_int(owner: Owner, name: str, default: int = 0) -> int:
    """
    Examples:
        <ship crew="42"/>    -> 42
        <ship crew="lots"/>  -> default
        <ship/>              -> default
    """
    found, value = try_attr_int(owner, name)
    return value if found else default


def try_attr_float(owner: Owner, name: str) -> Tuple[bool, float]:
    value = parse_float(get_attr(owner, name))
    return (False, 0.0) if value is None else (True, value)


def get_attr_float(owner: Owner, name: str, default: float = 0.0) -> float:
    found, value = try_attr_float(owner, name)
    return value if found else default


def try_attr_bool(owner: Owner, name: str) -> Tuple[bool, bool]:
    value = parse_bool(get_attr(owner, name))
    return (False, False) if value is None else (True, value)


def get_attr_bool(owner: Owner, name: str, default: bool = False) -> bool:
    found, value = try_attr_bool(owner, name)
    return value if found else default


def try_attr_enum(owner: Owner, name: str, enum_type: Type[E]) -> Tuple[bool, Optional[E]]:
    value = parse_enum(get_attr(owner, name), enum_type)
    return (False, None) if value is None else (True, value)


def get_attr_enum(
    owner: Owner,
    name: str,
    enum_type: Type[E],
    default: Optional[E] = None,
) -> Optional[E]:
    found, value = try_attr_enum(owner, name, enum_type)
    return value if found else default
