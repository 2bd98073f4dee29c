from __future__ import annotations

import xml.etree.ElementTree as ET
from typing import List, Mapping, Sequence

from xmlhelper.config import PATH_SEPARATOR
from xmlhelper.models import ElementRow, LeafRow
from xmlhelper.node import elements, is_leaf, local_name, name_of, text, walk


def format_attributes(attrib: Mapping[str, str]) -> str:
    """
    {"id": "a", "size": "s"} -> "id=a; size=s"
    """
    return "; ".join(f"{local_name(k)}={v}" for k, v in attrib.items())


def _join(prefix: Sequence[str], names: Sequence[str]) -> str:
    return PATH_SEPARATOR.join([*prefix, *names])


def leaf_rows(
    source: str,
    root: ET.Element,
    prefix: Sequence[str] = (),
) -> List[LeafRow]:
    """
    One row per leaf element below root, in document order.

    Paths start with prefix, usually the name path used to reach root.
    """
    rows: List[LeafRow] = []

    for names, node in walk(root, leaves_only=True):
        rows.append(
            LeafRow(
                source=source,
                path=_join(prefix, names),
                name=name_of(node),
                text=text(node, trim=True),
                attributes=format_attributes(node.attrib),
            )
        )

    return rows


def element_rows(
    source: str,
    root: ET.Element,
    prefix: Sequence[str] = (),
) -> List[ElementRow]:
    rows: List[ElementRow] = []

    for names, node in walk(root):
        rows.append(
            ElementRow(
                source=source,
                path=_join(prefix, names),
                name=name_of(node),
                depth=len(names),
                leaf=is_leaf(node),
                children=sum(1 for _ in elements(node)),
                attributes=format_attributes(node.attrib),
            )
        )

    return rows
