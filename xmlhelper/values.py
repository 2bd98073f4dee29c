from __future__ import annotations

import xml.etree.ElementTree as ET
from typing import Callable, Iterable, List, Optional, TypeVar

from xmlhelper.models import (
    Bounds,
    Color,
    Quaternion,
    RangeInt,
    Vector2,
    Vector2Int,
    Vector3,
)
from xmlhelper.node import element, text
from xmlhelper.parsing import (
    parse_bounds,
    parse_color,
    parse_quaternion,
    parse_ranges_int,
    parse_vector2,
    parse_vector2int,
    parse_vector3,
    split_strings,
)

T = TypeVar("T")


# =============================================================================
# String lists
# =============================================================================

def strings_text(node: Optional[ET.Element], uppercase: bool = True) -> List[str]:
    """
    Items of the node's text, separated by commas and newlines.

    Example:
        <tags>fighter, scout
              military</tags>  -> ["FIGHTER", "SCOUT", "MILITARY"]
    """
    if node is None:
        return []
    return split_strings(text(node), uppercase)


def strings(
    nodes: Optional[Iterable[ET.Element]],
    trim: bool = True,
    uppercase: bool = True,
) -> List[str]:
    """
    Text of each node, one entry per node.
    """
    if nodes is None:
        return []
    return [text(n, trim, uppercase) for n in nodes]


# =============================================================================
# Compound values
# =============================================================================

def _value_of(
    node: Optional[ET.Element],
    name: str,
    parse: Callable[[Optional[str]], Optional[T]],
    default: T,
) -> T:
    child = element(node, name)
    if child is None:
        return default
    value = parse(text(child))
    return default if value is None else value


def vector2_of(node: Optional[ET.Element], name: str, default: Vector2 = Vector2()) -> Vector2:
    return _value_of(node, name, parse_vector2, default)


def vector3_of(node: Optional[ET.Element], name: str, default: Vector3 = Vector3()) -> Vector3:
    """
    Example:
        <offset>0, 1.5, -2</offset> -> Vector3(0.0, 1.5, -2.0)
    """
    return _value_of(node, name, parse_vector3, default)


def vector2int_of(
    node: Optional[ET.Element],
    name: str,
    default: Vector2Int = Vector2Int(),
) -> Vector2Int:
    return _value_of(node, name, parse_vector2int, default)


def quaternion_of(
    node: Optional[ET.Element],
    name: str,
    default: Quaternion = Quaternion(),
) -> Quaternion:
    return _value_of(node, name, parse_quaternion, default)


def color_of(node: Optional[ET.Element], name: str, default: Color = Color()) -> Color:
    return _value_of(node, name, parse_color, default)


def bounds_of(node: Optional[ET.Element], name: str, default: Bounds = Bounds()) -> Bounds:
    return _value_of(node, name, parse_bounds, default)


def ranges_int(
    node: Optional[ET.Element],
    default: Optional[List[RangeInt]] = None,
) -> Optional[List[RangeInt]]:
    """
    Integer ranges from the node's own text, e.g. "1-3, 7".
    """
    if node is None:
        return default
    value = parse_ranges_int(text(node))
    return default if value is None else value
