import sys
import xml.etree.ElementTree as ET

import pytest

from xmlhelper.models import Bounds, Color, Quaternion, RangeInt, Vector2, Vector2Int, Vector3
from xmlhelper.node import elements
from xmlhelper.values import (
    bounds_of,
    color_of,
    quaternion_of,
    ranges_int,
    strings,
    strings_text,
    vector2_of,
    vector2int_of,
    vector3_of,
)

UNIT = """
<unit>
    <offset>0, 1.5, -2</offset>
    <size>4 8</size>
    <cell>3,7</cell>
    <rotation>0,0,0,1</rotation>
    <tint>#00FF00</tint>
    <box>0,0,0,1,1,1</box>
    <levels>1-3,10</levels>
    <tags>fighter, scout
          military</tags>
    <bad>nope</bad>
</unit>
"""


def test_compound_values():
    unit = ET.fromstring(UNIT)
    assert vector3_of(unit, "OFFSET") == Vector3(0.0, 1.5, -2.0)
    assert vector2_of(unit, "size") == Vector2(4.0, 8.0)
    assert vector2int_of(unit, "cell") == Vector2Int(3, 7)
    assert quaternion_of(unit, "rotation") == Quaternion(0, 0, 0, 1)
    assert color_of(unit, "tint") == Color(0.0, 1.0, 0.0, 1.0)
    assert bounds_of(unit, "box") == Bounds(Vector3(0, 0, 0), Vector3(1, 1, 1))


def test_compound_values_default_on_missing_or_malformed():
    unit = ET.fromstring(UNIT)
    fallback = Vector3(9, 9, 9)
    assert vector3_of(unit, "bad", fallback) == fallback
    assert vector3_of(unit, "missing", fallback) == fallback
    assert vector3_of(None, "offset", fallback) == fallback
    assert vector2_of(unit, "bad") == Vector2()
    assert color_of(unit, "bad") == Color()
    assert quaternion_of(unit, "missing") == Quaternion()


def test_ranges_int():
    unit = ET.fromstring(UNIT)
    levels = next(elements(unit, "levels"))
    assert ranges_int(levels) == [RangeInt(1, 3), RangeInt(10, 1)]
    bad = next(elements(unit, "bad"))
    assert ranges_int(bad, default=[]) == []
    assert ranges_int(None) is None


def test_strings_text():
    unit = ET.fromstring(UNIT)
    tags = next(elements(unit, "tags"))
    assert strings_text(tags) == ["FIGHTER", "SCOUT", "MILITARY"]
    assert strings_text(tags, uppercase=False) == ["fighter", "scout", "military"]
    assert strings_text(None) == []


def test_strings():
    root = ET.fromstring("<r><i> a </i><i>b</i></r>")
    assert strings(elements(root)) == ["A", "B"]
    assert strings(elements(root), trim=False, uppercase=False) == [" a ", "b"]
    assert strings(None) == []


@pytest.mark.skipif(
    not hasattr(sys, "get_int_max_str_digits"),
    reason="int() has no digit limit before Python 3.11",
)
def test_oversized_integers_give_default():
    root = ET.fromstring(
        "<r><cell>1, " + "9" * 5000 + "</cell><levels>" + "9" * 5000 + "</levels></r>"
    )
    assert vector2int_of(root, "cell", Vector2Int(-1, -1)) == Vector2Int(-1, -1)
    levels = next(elements(root, "levels"))
    assert ranges_int(levels, default=[]) == []
