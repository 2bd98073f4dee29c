from __future__ import annotations

import re

# =============================================================================
# Paths & names
# =============================================================================

# "items.item.name" -> ["items", "item", "name"]
PATH_SEPARATOR = "."

# "{http://example.com/ns}item" -> "item"
NAMESPACE_RE = re.compile(r"^\{[^}]*\}")

# Attribute used by object dictionaries to select a value type
TYPE_ATTRIBUTE = "type"

# =============================================================================
# Scalar grammars
# =============================================================================

# ASCII decimal integers only. int() alone would accept "1_000" and "٤٢".
INT_RE = re.compile(r"^\s*[+-]?[0-9]+\s*$")

BOOL_LITERALS = {
    "true": True,
    "false": False,
}

# =============================================================================
# String lists & vectors
# =============================================================================

# Used by strings_text / split_strings
STRING_SEPARATORS = (",", "\n")

# "1, 2, 3" / "(1 2 3)" / "1;2;3"
COMPONENT_SPLIT_RE = re.compile(r"[,;\s]+")

# #RRGGBB or #RRGGBBAA
HEX_COLOR_RE = re.compile(r"^#(?P<hex>[0-9a-fA-F]{6}(?:[0-9a-fA-F]{2})?)$")

# "4-9", "-3--1", "12"
RANGE_RE = re.compile(r"^(?P<start>[+-]?[0-9]+)(?:\s*(?:-|\.\.)\s*(?P<end>[+-]?[0-9]+))?$")

# =============================================================================
# Excel export
# =============================================================================

LEAVES_SHEET = "Leaves"
ELEMENTS_SHEET = "Elements"

LEAVES_HEADERS = [
    "Source",
    "Path",
    "Name",
    "Text",
    "Attributes",
]

ELEMENTS_HEADERS = [
    "Source",
    "Path",
    "Name",
    "Depth",
    "Leaf",
    "Children",
    "Attributes",
]

MIN_COLUMN_WIDTH = 10
MAX_COLUMN_WIDTH = 70
