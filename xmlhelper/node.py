from __future__ import annotations

import xml.etree.ElementTree as ET
from enum import Enum
from typing import (
    Callable,
    Iterator,
    List,
    Optional,
    Sequence,
    Tuple,
    Type,
    TypeVar,
    Union,
)

from xmlhelper.config import NAMESPACE_RE, PATH_SEPARATOR
from xmlhelper.parsing import parse_bool, parse_enum, parse_float, parse_int

E = TypeVar("E", bound=Enum)

Path = Union[str, Sequence[str]]
Predicate = Callable[[ET.Element], bool]


# =============================================================================
# Names
# =============================================================================

def local_name(tag: str) -> str:
    """
    Strip a "{namespace}" prefix from an ElementTree tag or attribute key.
    """
    return NAMESPACE_RE.sub("", tag)


def name_of(node: ET.Element) -> str:
    return local_name(node.tag)


def names_equal(a: str, b: str) -> bool:
    """
    Case-insensitive, locale independent name comparison.
    """
    return local_name(a).casefold() == local_name(b).casefold()


def split_path(path: Optional[Path]) -> List[str]:
    """
    "a.b.c" -> ["a", "b", "c"]. Sequences are returned as a list.
    """
    if not path:
        return []
    if isinstance(path, str):
        return path.split(PATH_SEPARATOR)
    return list(path)


def is_element(node) -> bool:
    # Comments and processing instructions use factory functions as tag
    return isinstance(getattr(node, "tag", None), str)


# =============================================================================
# Children
# =============================================================================

def elements(
    node: Optional[ET.Element],
    *names: str,
    predicate: Optional[Predicate] = None,
) -> Iterator[ET.Element]:
    """
    Yield element children of node, never comments or processing instructions.

    Filters:
        elements(node)                      -> every element child
        elements(node, "a", "b")            -> children named a or b
        elements(node, predicate=callable)  -> children accepted by callable
    """
    if node is None:
        return

    wanted = {local_name(n).casefold() for n in names}

    for child in node:
        if not is_element(child):
            continue
        if wanted and name_of(child).casefold() not in wanted:
            continue
        if predicate is not None and not predicate(child):
            continue
        yield child


def try_element(
    node: Optional[ET.Element],
    name: str,
) -> Tuple[bool, Optional[ET.Element]]:
    """
    Return (True, child) for the first element child named name,
    (False, None) otherwise.
    """
    for child in elements(node, name):
        return True, child
    return False, None


def element(node: Optional[ET.Element], *names: str) -> Optional[ET.Element]:
    """
    First element child named names[0]; further names descend one level each.

    Example:
        element(root, "ship", "hull") -> <hull> inside the first <ship>
    """
    for name in names:
        _, node = try_element(node, name)
        if node is None:
            return None
    return node


def is_leaf(node: Optional[ET.Element]) -> bool:
    """
    True when node has no element children (text only or empty).
    None is not a leaf.
    """
    if node is None:
        return False
    for _ in elements(node):
        return False
    return True


def text(
    node: Optional[ET.Element],
    trim: bool = False,
    uppercase: bool = False,
    default: str = "",
) -> str:
    """
    All text inside node, children included, in document order.
    """
    if node is None:
        return default

    value = "".join(node.itertext())

    if trim:
        value = value.strip()
    if uppercase:
        value = value.upper()
    return value


# =============================================================================
# Path lookup
# =============================================================================

def find_path(
    root: Optional[ET.Element],
    path: Optional[Path],
) -> Optional[List[ET.Element]]:
    """
    Follow path from root taking the first matching child at each step.

    Returns the chain [root, child, grandchild, ...] or None if root is None
    or a segment does not match. An empty path returns [root].
    """
    if root is None:
        return None

    chain = [root]
    current = root

    for segment in split_path(path):
        _, current = try_element(current, segment)
        if current is None:
            return None
        chain.append(current)

    return chain


def find(root: Optional[ET.Element], path: Optional[Path]) -> Optional[ET.Element]:
    """
    Last node of find_path, e.g. find(root, "stats.hull.max").
    """
    chain = find_path(root, path)
    return chain[-1] if chain else None


def find_all(root: Optional[ET.Element], path: Optional[Path]) -> Iterator[ET.Element]:
    """
    Yield every node reached by path, expanding all matches at each level.

    Two <b> children with one <c> each give two results for "b.c".
    An empty path or a None root yields nothing.
    """
    segments = split_path(path)
    if root is None or not segments:
        return
    yield from _find_all(root, segments, 0)


def _find_all(
    node: ET.Element,
    segments: List[str],
    index: int,
) -> Iterator[ET.Element]:
    last = index == len(segments) - 1
    for child in elements(node, segments[index]):
        if last:
            yield child
        else:
            yield from _find_all(child, segments, index + 1)


# =============================================================================
# Traversal
# =============================================================================

def walk(
    root: Optional[ET.Element],
    leaves_only: bool = False,
) -> Iterator[Tuple[Tuple[str, ...], ET.Element]]:
    """
    Pre-order walk over the element descendants of root (root excluded).

    Yields (names, node) where names is the name path from root to node.
    With leaves_only, containers are walked through but not yielded and
    leaves are not expanded.

    Uses an explicit stack, so depth is not limited by the recursion limit.
    Children are pushed in reverse to come back out in document order.
    """
    if root is None:
        return

    stack: List[Tuple[Tuple[str, ...], ET.Element]] = []

    def push_children(names: Tuple[str, ...], node: ET.Element) -> None:
        children = list(elements(node))
        for child in reversed(children):
            stack.append((names + (name_of(child),), child))

    push_children((), root)

    while stack:
        names, node = stack.pop()
        leaf = is_leaf(node)

        if not leaves_only or leaf:
            yield names, node
        if not leaf:
            push_children(names, node)


def descendants(root: Optional[ET.Element]) -> Iterator[ET.Element]:
    """
    Every element below root in document pre-order.
    """
    for _, node in walk(root):
        yield node


def leaf_descendants(root: Optional[ET.Element]) -> Iterator[ET.Element]:
    """
    Every empty or text-only element below root, in document order.
    """
    for _, node in walk(root, leaves_only=True):
        yield node


# =============================================================================
# Typed child values
# =============================================================================

def string_of(
    node: Optional[ET.Element],
    name: str,
    trim: bool = False,
    uppercase: bool = False,
    default: str = "",
) -> str:
    return text(element(node, name), trim, uppercase, default)


def try_string_of(node: Optional[ET.Element], name: str) -> Tuple[bool, Optional[str]]:
    found, child = try_element(node, name)
    if not found:
        return False, None
    return True, text(child)


def try_int_of(node: Optional[ET.Element], name: str) -> Tuple[bool, int]:
    value = parse_int(_child_text(node, name))
    return (False, 0) if value is None else (True, value)


def int_of(node: Optional[ET.Element], name: str, default: int = 0) -> int:
    found, value = try_int_of(node, name)
    return value if found else default


def try_float_of(node: Optional[ET.Element], name: str) -> Tuple[bool, float]:
    value = parse_float(_child_text(node, name))
    return (False, 0.0) if value is None else (True, value)


def float_of(node: Optional[ET.Element], name: str, default: float = 0.0) -> float:
    found, value = try_float_of(node, name)
    return value if found else default


def try_bool_of(node: Optional[ET.Element], name: str) -> Tuple[bool, bool]:
    value = parse_bool(_child_text(node, name))
    return (False, False) if value is None else (True, value)


def bool_of(node: Optional[ET.Element], name: str, default: bool = False) -> bool:
    found, value = try_bool_of(node, name)
    return value if found else default


def try_enum_of(
    node: Optional[ET.Element],
    name: str,
    enum_type: Type[E],
) -> Tuple[bool, Optional[E]]:
    value = parse_enum(_child_text(node, name), enum_type)
    return (False, None) if value is None else (True, value)


def enum_of(
    node: Optional[ET.Element],
    name: str,
    enum_type: Type[E],
    default: Optional[E] = None,
) -> Optional[E]:
    """
    Enum member named by the text of child name, matched case-insensitively.

    Example:
        <unit><heading>south</heading></unit>
        enum_of(unit, "heading", Heading) -> Heading.South
    """
    found, value = try_enum_of(node, name, enum_type)
    return value if found else default


def _child_text(node: Optional[ET.Element], name: str) -> Optional[str]:
    child = element(node, name)
    return None if child is None else text(child)
