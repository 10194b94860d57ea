"""Sheet: the fixed-size grid of cells and the edit entry points.

Coordinates in the API are 0-based ``(row, col)``; ``sheet["B3"]`` style
access takes the A1 name shown to users.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from typing import Any

from tinysheet._cell import (
    DEFAULT_NUMBER,
    EMPTY,
    Cell,
    CellKind,
    FormulaCell,
    NumberCell,
    TextCell,
)
from tinysheet._utils import MAX_COLS, a1_to_rowcol, rowcol_to_a1
from tinysheet.calc._errors import ERROR_TEXT
from tinysheet.calc._evaluator import FormulaEvaluator
from tinysheet.calc._protocol import DisplayCallback, RecomputeResult
from tinysheet.calc._recompute import RecomputeEngine
from tinysheet.calc._syntax import is_valid_formula, is_valid_number

logger = logging.getLogger(__name__)

DEFAULT_NUM_ROWS = 10
DEFAULT_NUM_COLS = 7


class Sheet:
    """A grid of ``num_rows`` x ``num_cols`` cells with ``+``-only formulas.

    Usage::

        sheet = Sheet(on_display_changed=lambda row, col, text: print(row, col, text))
        sheet["A1"] = "5"
        sheet["B1"] = "=A1+1"      # displays 6
        sheet["A1"] = "10"         # B1 is recomputed and displays 11
    """

    __slots__ = (
        "_num_rows", "_num_cols", "_cells",
        "_on_display_changed", "_evaluator", "_engine",
    )

    def __init__(
        self,
        num_rows: int = DEFAULT_NUM_ROWS,
        num_cols: int = DEFAULT_NUM_COLS,
        on_display_changed: DisplayCallback | None = None,
    ) -> None:
        if num_rows < 1:
            raise ValueError(f"num_rows must be at least 1, got {num_rows}")
        if not 1 <= num_cols <= MAX_COLS:
            raise ValueError(f"num_cols must be between 1 and {MAX_COLS}, got {num_cols}")
        self._num_rows = num_rows
        self._num_cols = num_cols
        self._cells: list[list[Cell]] = [[EMPTY] * num_cols for _ in range(num_rows)]
        self._on_display_changed = on_display_changed
        self._evaluator = FormulaEvaluator(self)
        self._engine = RecomputeEngine(self, self._evaluator)

    @property
    def num_rows(self) -> int:
        return self._num_rows

    @property
    def num_cols(self) -> int:
        return self._num_cols

    @property
    def on_display_changed(self) -> DisplayCallback | None:
        return self._on_display_changed

    @on_display_changed.setter
    def on_display_changed(self, callback: DisplayCallback | None) -> None:
        self._on_display_changed = callback

    # ------------------------------------------------------------------
    # Cell access
    # ------------------------------------------------------------------

    def __getitem__(self, key: str) -> Cell:
        """``sheet['A1']`` -> the cell variant stored there."""
        row, col = a1_to_rowcol(key)
        return self.get_cell(row, col)

    def __setitem__(self, key: str, value: str) -> None:
        """``sheet['A1'] = '=B1+2'``: shorthand for :meth:`set_cell_value`."""
        row, col = a1_to_rowcol(key)
        self.set_cell_value(row, col, value)

    def __delitem__(self, key: str) -> None:
        """``del sheet['A1']``: shorthand for :meth:`clear_cell`."""
        row, col = a1_to_rowcol(key)
        self.clear_cell(row, col)

    def get_cell(self, row: int, col: int) -> Cell:
        self._check_bounds(row, col)
        return self._cells[row][col]

    def get_display_value(self, row: int, col: int) -> str:
        """Text currently shown for a cell.

        The entered text for numbers and text, the computed result for a
        formula, ``""`` for an empty cell.
        """
        return self.get_cell(row, col).display

    def get_input_text(self, row: int, col: int) -> str:
        """Text as the user entered it; the formula itself for formula cells."""
        return self.get_cell(row, col).input_text

    def get_number(self, row: int, col: int) -> float:
        """Value a formula sees when it references this cell."""
        return self.get_cell(row, col).number

    def iter_cells(self, kind: CellKind | None = None) -> Iterator[tuple[int, int, Cell]]:
        """Yield ``(row, col, cell)`` for non-empty cells in row-major order.

        Pass *kind* to restrict to one kind of cell.
        """
        for row, cells in enumerate(self._cells):
            for col, cell in enumerate(cells):
                if cell.kind is CellKind.EMPTY:
                    continue
                if kind is None or cell.kind is kind:
                    yield row, col, cell

    # ------------------------------------------------------------------
    # Editing
    # ------------------------------------------------------------------

    def set_cell_value(self, row: int, col: int, text: str | None) -> RecomputeResult | None:
        """Store user text in a cell, recompute other formulas, update the display.

        Numbers are stored as numbers, formulas are evaluated once and keep
        their text, anything else is stored as text.  A formula that cannot
        be evaluated is stored as text and displays ``ERROR``.  Empty input
        is ignored and returns ``None``.
        """
        if not text:
            return None
        self._check_bounds(row, col)
        shown = self._store_text(row, col, text)
        recompute = self._engine.sweep(skip=(row, col))
        self._notify(row, col, shown)
        return recompute

    def clear_cell(self, row: int, col: int) -> None:
        """Empty a cell and show ``""`` for it. Does nothing if already empty.

        Formulas that reference the cell are not recomputed until the next
        edit.
        """
        self._check_bounds(row, col)
        if self._cells[row][col].kind is CellKind.EMPTY:
            return
        self._cells[row][col] = EMPTY
        self._notify(row, col, "")

    def recalculate(self) -> RecomputeResult:
        """Run one recompute pass over every formula cell."""
        return self._engine.sweep()

    # ------------------------------------------------------------------
    # Worksheet interop (openpyxl-compatible objects)
    # ------------------------------------------------------------------

    @classmethod
    def from_worksheet(
        cls,
        ws: Any,
        num_rows: int = DEFAULT_NUM_ROWS,
        num_cols: int = DEFAULT_NUM_COLS,
        on_display_changed: DisplayCallback | None = None,
    ) -> Sheet:
        """Build a sheet from the values of an openpyxl-style worksheet.

        Values are classified in row-major order the way typed text is, but
        without a recompute pass per cell.  Each loaded number, text or
        rejected formula is shown once; formulas are then shown by a single
        :meth:`recalculate` pass.  A formula that reads a formula later in
        row-major order may need another :meth:`recalculate` to settle.
        Cells outside the grid are skipped.
        """
        sheet = cls(num_rows, num_cols, on_display_changed)
        for ws_row in ws.iter_rows():
            for ws_cell in ws_row:
                text = _value_to_text(ws_cell.value)
                if not text:
                    continue
                row, col = ws_cell.row - 1, ws_cell.column - 1
                if not (row < sheet.num_rows and col < sheet.num_cols):
                    logger.warning(
                        "Skipping %s: outside the %dx%d grid",
                        getattr(ws_cell, "coordinate", (ws_cell.row, ws_cell.column)),
                        sheet.num_rows, sheet.num_cols,
                    )
                    continue
                shown = sheet._store_text(row, col, text)  # noqa: SLF001
                if sheet.get_cell(row, col).kind is not CellKind.FORMULA:
                    sheet._notify(row, col, shown)  # noqa: SLF001
        sheet.recalculate()
        return sheet

    def to_worksheet(self, ws: Any) -> None:
        """Write every non-empty cell into an openpyxl-style worksheet.

        Numbers are written as numbers, formulas and text as strings.
        """
        for row, col, cell in self.iter_cells():
            value: Any
            if isinstance(cell, NumberCell):
                value = _number_for_export(cell)
            else:
                value = cell.input_text
            ws.cell(row=row + 1, column=col + 1, value=value)

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _check_bounds(self, row: int, col: int) -> None:
        if not (0 <= row < self._num_rows and 0 <= col < self._num_cols):
            raise IndexError(
                f"Cell ({row}, {col}) is outside the {self._num_rows}x{self._num_cols} grid",
            )

    def _store_text(self, row: int, col: int, text: str) -> str:
        """Classify *text*, store the resulting cell and return the text to show."""
        # A never-written cell holds a zero number until classified below.
        if self._cells[row][col].kind is CellKind.EMPTY:
            self._cells[row][col] = DEFAULT_NUMBER

        if is_valid_number(text):
            stripped = text.strip()
            cell = NumberCell(float(stripped), stripped)
            self._cells[row][col] = cell
            return cell.display

        # Stored as text before evaluating, so a formula that reads its
        # own cell sees 0.
        self._cells[row][col] = TextCell(text)
        if not is_valid_formula(text):
            return text
        result = self._evaluator.try_evaluate(text)
        if result is None:
            return ERROR_TEXT
        formula_cell = FormulaCell(text, result)
        self._cells[row][col] = formula_cell
        return formula_cell.display

    def _replace_cell(self, row: int, col: int, cell: Cell) -> None:
        self._cells[row][col] = cell

    def _notify(self, row: int, col: int, text: str) -> None:
        if self._on_display_changed is not None:
            self._on_display_changed(row, col, text)

    def __repr__(self) -> str:
        last = rowcol_to_a1(self._num_rows - 1, self._num_cols - 1)
        return f"<Sheet A1:{last}>"


def _value_to_text(value: Any) -> str | None:
    """Turn a worksheet value into the text a user would have typed."""
    if value is None:
        return None
    if isinstance(value, bool):
        return "TRUE" if value else "FALSE"
    return str(value)


def _number_for_export(cell: NumberCell) -> int | float:
    # "5" goes back out as 5, "5.0" as 5.0
    if "." not in cell.text and cell.value.is_integer():
        return int(cell.value)
    return cell.value
