from __future__ import annotations

import logging
import re
from enum import Enum
from typing import List, Optional, Sequence, Type, TypeVar

from xmlhelper.config import (
    BOOL_LITERALS,
    COMPONENT_SPLIT_RE,
    HEX_COLOR_RE,
    INT_RE,
    RANGE_RE,
    STRING_SEPARATORS,
)
from xmlhelper.models import (
    Bounds,
    Color,
    Quaternion,
    RangeInt,
    Vector2,
    Vector2Int,
    Vector3,
)

log = logging.getLogger(__name__)

E = TypeVar("E", bound=Enum)


# =============================================================================
# Scalar parsing
# =============================================================================

def parse_int(value: Optional[str]) -> Optional[int]:
    """
    Parse a decimal integer from XML text.

    Surrounding whitespace and a sign are allowed, nothing else.

    Examples:
        "42"      -> 42
        " -7 "    -> -7
        "42.0"    -> None
        "1_000"   -> None
        None      -> None
    """
    if value is None:
        return None
    if not INT_RE.match(value):
        log.debug("Cannot parse %r as int", value)
        return None
    try:
        return int(value)
    except ValueError:
        # digit count above sys.get_int_max_str_digits()
        log.debug("Cannot parse %r as int", value)
        return None


def parse_float(value: Optional[str]) -> Optional[float]:
    """
    Parse a float from XML text.

    Examples:
        "3.5"     -> 3.5
        "1e3"     -> 1000.0
        "1_0"     -> None
        "invalid" -> None
    """
    if value is None:
        return None
    if "_" in value:
        log.debug("Cannot parse %r as float", value)
        return None
    try:
        return float(value)
    except ValueError:
        log.debug("Cannot parse %r as float", value)
        return None


def parse_bool(value: Optional[str]) -> Optional[bool]:
    """
    "true" / "false" in any case, surrounding whitespace ignored.
    """
    if value is None:
        return None
    result = BOOL_LITERALS.get(value.strip().lower())
    if result is None:
        log.debug("Cannot parse %r as bool", value)
    return result


def parse_enum(value: Optional[str], enum_type: Type[E]) -> Optional[E]:
    """
    Match trimmed text against the member names of enum_type,
    case-insensitively. Aliases count as names; values do not.
    """
    if value is None:
        return None
    key = value.strip().casefold()
    for name, member in enum_type.__members__.items():
        if name.casefold() == key:
            return member
    log.debug("Cannot parse %r as %s", value, enum_type.__name__)
    return None


# =============================================================================
# String lists
# =============================================================================

def split_strings(
    value: Optional[str],
    uppercase: bool = True,
    separators: Sequence[str] = STRING_SEPARATORS,
) -> List[str]:
    """
    Split text like "a, b\\nc" or "[a, b]" into trimmed, non-empty items.
    """
    if not value:
        return []
    s = value.strip()
    if s.startswith("[") and s.endswith("]"):
        s = s[1:-1]

    pattern = "|".join(re.escape(sep) for sep in separators)
    items = [x.strip() for x in re.split(pattern, s)] if pattern else [s.strip()]

    if uppercase:
        items = [x.upper() for x in items]
    return [x for x in items if x]


# =============================================================================
# Vectors & compound values
# =============================================================================

def _components(value: str) -> List[str]:
    s = value.strip()
    if s[:1] in "([" and s[-1:] in ")]":
        s = s[1:-1]
    return [c for c in COMPONENT_SPLIT_RE.split(s) if c]


def parse_floats(value: Optional[str]) -> Optional[List[float]]:
    """
    "1, 2.5, -3" / "(1 2 3)" -> [1.0, 2.5, -3.0]

    None if any component is not a float.
    """
    if value is None:
        return None
    out: List[float] = []
    for c in _components(value):
        f = parse_float(c)
        if f is None:
            return None
        out.append(f)
    return out


def _fixed_floats(value: Optional[str], count: int) -> Optional[List[float]]:
    numbers = parse_floats(value)
    if numbers is None or len(numbers) != count:
        if numbers is not None:
            log.debug("Expected %d components in %r", count, value)
        return None
    return numbers


def parse_vector2(value: Optional[str]) -> Optional[Vector2]:
    numbers = _fixed_floats(value, 2)
    return Vector2(*numbers) if numbers else None


def parse_vector3(value: Optional[str]) -> Optional[Vector3]:
    numbers = _fixed_floats(value, 3)
    return Vector3(*numbers) if numbers else None


def parse_quaternion(value: Optional[str]) -> Optional[Quaternion]:
    numbers = _fixed_floats(value, 4)
    return Quaternion(*numbers) if numbers else None


def parse_vector2int(value: Optional[str]) -> Optional[Vector2Int]:
    if value is None:
        return None
    parts = _components(value)
    ints = [parse_int(p) for p in parts]
    if len(ints) != 2 or None in ints:
        log.debug("Cannot parse %r as Vector2Int", value)
        return None
    return Vector2Int(*ints)


def parse_color(value: Optional[str]) -> Optional[Color]:
    """
    Parse a color from hex or float components.

    Examples:
        "#FF8000"        -> Color(1.0, 0.50196, 0.0, 1.0)
        "#FF800080"      -> alpha 0.50196
        "1, 0.5, 0"      -> Color(1.0, 0.5, 0.0, 1.0)
        "1, 0.5, 0, 0.2" -> Color(1.0, 0.5, 0.0, 0.2)
    """
    if value is None:
        return None

    m = HEX_COLOR_RE.match(value.strip())
    if m:
        h = m.group("hex")
        channels = [int(h[i:i + 2], 16) / 255.0 for i in range(0, len(h), 2)]
        return Color(*channels)

    numbers = parse_floats(value)
    if numbers is None or len(numbers) not in (3, 4):
        log.debug("Cannot parse %r as Color", value)
        return None
    return Color(*numbers)


def parse_bounds(value: Optional[str]) -> Optional[Bounds]:
    """
    Six components: center x, y, z then size x, y, z.
    """
    numbers = _fixed_floats(value, 6)
    if not numbers:
        return None
    return Bounds(Vector3(*numbers[:3]), Vector3(*numbers[3:]))


def parse_ranges_int(value: Optional[str]) -> Optional[List[RangeInt]]:
    """
    Parse a list of inclusive integer ranges.

    Examples:
        "1-3, 7"  -> [RangeInt(1, 3), RangeInt(7, 1)]
        "2..4"    -> [RangeInt(2, 3)]
        ""        -> []
        "5-1"     -> None
    """
    if value is None:
        return None

    ranges: List[RangeInt] = []
    for part in value.split(","):
        part = part.strip()
        if not part:
            continue
        m = RANGE_RE.match(part)
        if not m:
            log.debug("Cannot parse range %r in %r", part, value)
            return None
        start = parse_int(m.group("start"))
        end = parse_int(m.group("end")) if m.group("end") is not None else start
        if start is None or end is None:
            return None
        if end < start:
            log.debug("Descending range %r in %r", part, value)
            return None
        ranges.append(RangeInt(start, end - start + 1))

    return ranges
