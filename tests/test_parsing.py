import math
import sys
from enum import Enum

import pytest

from xmlhelper.models import Bounds, Color, Quaternion, RangeInt, Vector2, Vector2Int, Vector3
from xmlhelper.parsing import (
    parse_bool,
    parse_bounds,
    parse_color,
    parse_enum,
    parse_float,
    parse_floats,
    parse_int,
    parse_quaternion,
    parse_ranges_int,
    parse_vector2,
    parse_vector2int,
    parse_vector3,
    split_strings,
)


class Heading(Enum):
    North = 0
    South = 1
    Down = 1  # alias


@pytest.mark.parametrize(
    "text, expected",
    [
        ("42", 42),
        (" -7 ", -7),
        ("+3", 3),
        ("42.0", None),
        ("1_000", None),
        ("0x10", None),
        ("\u0664\u0662", None),
        ("", None),
        ("abc", None),
        (None, None),
    ],
)
def test_parse_int(text, expected):
    assert parse_int(text) == expected


@pytest.mark.parametrize(
    "text, expected",
    [
        ("3.5", 3.5),
        (" -2 ", -2.0),
        ("1e3", 1000.0),
        ("1_0", None),
        ("invalid", None),
        ("", None),
        (None, None),
    ],
)
def test_parse_float(text, expected):
    assert parse_float(text) == expected


def test_parse_float_special_values():
    assert math.isinf(parse_float("inf"))
    assert math.isnan(parse_float("NaN"))


@pytest.mark.parametrize(
    "text, expected",
    [
        ("true", True),
        ("False", False),
        (" TRUE ", True),
        ("1", None),
        ("yes", None),
        (None, None),
    ],
)
def test_parse_bool(text, expected):
    assert parse_bool(text) is expected


def test_parse_enum():
    assert parse_enum("south", Heading) is Heading.South
    assert parse_enum(" NORTH ", Heading) is Heading.North
    assert parse_enum("down", Heading) is Heading.South
    assert parse_enum("east", Heading) is None
    assert parse_enum("0", Heading) is None
    assert parse_enum(None, Heading) is None


def test_split_strings():
    assert split_strings("a, b\nc,,") == ["A", "B", "C"]
    assert split_strings("[argon, hatikvah]", uppercase=False) == ["argon", "hatikvah"]
    assert split_strings("a;b", separators=(";",)) == ["A", "B"]
    assert split_strings("") == []
    assert split_strings(None) == []


def test_parse_floats():
    assert parse_floats("1, 2.5 -3") == [1.0, 2.5, -3.0]
    assert parse_floats("(1 2)") == [1.0, 2.0]
    assert parse_floats("1, x") is None


def test_vectors():
    assert parse_vector2("1,2") == Vector2(1.0, 2.0)
    assert parse_vector3("(0, 1.5, -2)") == Vector3(0.0, 1.5, -2.0)
    assert parse_quaternion("0 0 0 1") == Quaternion(0.0, 0.0, 0.0, 1.0)
    assert parse_vector2int("3, -4") == Vector2Int(3, -4)
    assert parse_vector3("1,2") is None
    assert parse_vector2int("1.5, 2") is None
    assert parse_vector2(None) is None


def test_parse_color():
    assert parse_color("#FF0000") == Color(1.0, 0.0, 0.0, 1.0)
    assert parse_color("#00000000") == Color(0.0, 0.0, 0.0, 0.0)
    assert parse_color("1, 0.5, 0") == Color(1.0, 0.5, 0.0, 1.0)
    assert parse_color("1, 0.5, 0, 0.25") == Color(1.0, 0.5, 0.0, 0.25)
    assert parse_color("red") is None
    assert parse_color("100000") is None
    assert parse_color("FF0000") is None
    assert parse_color("1, 2") is None


def test_parse_bounds():
    assert parse_bounds("0,0,0, 2,4,6") == Bounds(Vector3(0, 0, 0), Vector3(2, 4, 6))
    assert parse_bounds("1,2,3") is None


def test_parse_ranges_int():
    assert parse_ranges_int("1-3, 7") == [RangeInt(1, 3), RangeInt(7, 1)]
    assert parse_ranges_int("2..4") == [RangeInt(2, 3)]
    assert parse_ranges_int("-3--1") == [RangeInt(-3, 3)]
    assert parse_ranges_int("") == []
    assert parse_ranges_int("5-1") is None
    assert parse_ranges_int("a-b") is None
    assert parse_ranges_int(None) is None
    assert parse_ranges_int("\u0661-\u0663") is None
    assert RangeInt(1, 3).end == 4


@pytest.mark.skipif(
    not hasattr(sys, "get_int_max_str_digits"),
    reason="int() has no digit limit before Python 3.11",
)
def test_oversized_integers_are_parse_failures():
    big = "9" * 5000
    assert parse_int(big) is None
    assert parse_ranges_int(big) is None
    assert parse_ranges_int("1-" + big) is None
    assert parse_vector2int("1, " + big) is None
