from __future__ import annotations

from pathlib import Path
from typing import List, Optional

from openpyxl import Workbook
from openpyxl.utils import get_column_letter
from openpyxl.worksheet.worksheet import Worksheet

from xmlhelper.config import (
    ELEMENTS_HEADERS,
    ELEMENTS_SHEET,
    LEAVES_HEADERS,
    LEAVES_SHEET,
    MAX_COLUMN_WIDTH,
    MIN_COLUMN_WIDTH,
)
from xmlhelper.models import ElementRow, LeafRow


# ---------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------

def autofit_columns(
    ws: Worksheet,
    min_width: int = MIN_COLUMN_WIDTH,
    max_width: int = MAX_COLUMN_WIDTH,
) -> None:
    """
    Adjust column widths based on content length.
    """
    for col in ws.columns:
        max_len = 0
        col_letter = get_column_letter(col[0].column)
        for cell in col:
            v = "" if cell.value is None else str(cell.value)
            if len(v) > max_len:
                max_len = len(v)
        ws.column_dimensions[col_letter].width = max(
            min_width,
            min(max_width, max_len + 2),
        )


def _finish_sheet(ws: Worksheet) -> None:
    ws.freeze_panes = "A2"
    ws.auto_filter.ref = ws.dimensions
    autofit_columns(ws)


# ---------------------------------------------------------------------
# Sheets
# ---------------------------------------------------------------------

def write_leaves_sheet(ws: Worksheet, rows: List[LeafRow]) -> None:
    ws.append(LEAVES_HEADERS)

    for r in rows:
        ws.append([
            r.source,
            r.path,
            r.name,
            r.text,
            r.attributes,
        ])

    _finish_sheet(ws)


def write_elements_sheet(ws: Worksheet, rows: List[ElementRow]) -> None:
    ws.append(ELEMENTS_HEADERS)

    for r in rows:
        ws.append([
            r.source,
            r.path,
            r.name,
            r.depth,
            "yes" if r.leaf else "no",
            r.children,
            r.attributes,
        ])

    _finish_sheet(ws)


# ---------------------------------------------------------------------
# Workbook export
# ---------------------------------------------------------------------

def export_to_excel(
    out_path: Path,
    leaf_rows: List[LeafRow],
    element_rows: Optional[List[ElementRow]] = None,
) -> None:
    wb = Workbook()
    wb.remove(wb.active)

    write_leaves_sheet(wb.create_sheet(LEAVES_SHEET), leaf_rows)

    if element_rows is not None:
        write_elements_sheet(wb.create_sheet(ELEMENTS_SHEET), element_rows)

    wb.save(out_path)
