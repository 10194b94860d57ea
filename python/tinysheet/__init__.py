"""tinysheet: the data and computation core of a small grid spreadsheet.

Usage::

    from tinysheet import Sheet

    updates = []
    sheet = Sheet(num_rows=10, num_cols=7,
                  on_display_changed=lambda row, col, text: updates.append((row, col, text)))
    sheet["A1"] = "5"
    sheet["B1"] = "=A1+1"
    print(sheet.get_display_value(0, 1))   # "6"
    sheet["A1"] = "10"
    print(sheet["B1"].display)             # "11"
"""

from tinysheet._cell import (
    EMPTY,
    Cell,
    CellKind,
    EmptyCell,
    FormulaCell,
    NumberCell,
    TextCell,
)
from tinysheet._sheet import DEFAULT_NUM_COLS, DEFAULT_NUM_ROWS, Sheet
from tinysheet._utils import a1_to_rowcol, format_number, rowcol_to_a1

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "DEFAULT_NUM_COLS",
    "DEFAULT_NUM_ROWS",
    "EMPTY",
    "Cell",
    "CellKind",
    "EmptyCell",
    "FormulaCell",
    "NumberCell",
    "Sheet",
    "TextCell",
    "a1_to_rowcol",
    "format_number",
    "rowcol_to_a1",
]
