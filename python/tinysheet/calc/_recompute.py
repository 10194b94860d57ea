"""RecomputeEngine: one whole-grid pass over formula cells after an edit.

There is no dependency graph.  Every formula cell is re-evaluated once,
against the grid as it stood when the pass began, and results are
committed only after the scan.  A formula that reads another formula
changed by the same pass sees that formula's previous value; the next pass
catches it up.  Circular references therefore lag instead of looping.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from tinysheet._cell import CellKind, FormulaCell
from tinysheet._utils import format_number
from tinysheet.calc._errors import ERROR_TEXT
from tinysheet.calc._evaluator import FormulaEvaluator
from tinysheet.calc._protocol import CellUpdate, RecomputeResult

if TYPE_CHECKING:
    from tinysheet._sheet import Sheet

logger = logging.getLogger(__name__)


class RecomputeEngine:
    """Re-evaluates every formula cell of a sheet, except the one just edited."""

    __slots__ = ("_sheet", "_evaluator")

    def __init__(self, sheet: Sheet, evaluator: FormulaEvaluator | None = None) -> None:
        self._sheet = sheet
        self._evaluator = evaluator if evaluator is not None else FormulaEvaluator(sheet)

    def sweep(self, skip: tuple[int, int] | None = None) -> RecomputeResult:
        """Run one pass and report each re-evaluated cell to the display.

        A rejected formula shows ``ERROR`` but keeps its formula and last
        good value.
        """
        sheet = self._sheet
        updates: list[CellUpdate] = []
        pending: list[tuple[int, int, FormulaCell]] = []
        total = 0

        for row, col, cell in sheet.iter_cells(CellKind.FORMULA):
            if (row, col) == skip:
                continue
            total += 1
            result = self._evaluator.try_evaluate(cell.formula)
            if result is None:
                updates.append(CellUpdate(
                    row=row,
                    col=col,
                    text=ERROR_TEXT,
                    old_value=cell.value,
                    new_value=None,
                    formula=cell.formula,
                ))
                continue
            pending.append((row, col, FormulaCell(cell.formula, result)))
            updates.append(CellUpdate(
                row=row,
                col=col,
                text=format_number(result),
                old_value=cell.value,
                new_value=result,
                formula=cell.formula,
            ))

        # Commit after the scan so no evaluation sees a value from this pass.
        for row, col, new_cell in pending:
            sheet._replace_cell(row, col, new_cell)  # noqa: SLF001

        for update in updates:
            sheet._notify(update.row, update.col, update.text)  # noqa: SLF001

        result = RecomputeResult(
            skipped=skip,
            updates=tuple(updates),
            total_formula_cells=total,
            changed_cells=sum(1 for u in updates if u.changed),
            failed_cells=sum(1 for u in updates if u.failed),
        )
        logger.debug(
            "Recompute sweep: %d formula cell(s), %d changed (%.0f%%), %d failed",
            result.total_formula_cells, result.changed_cells,
            result.change_ratio * 100, result.failed_cells,
        )
        return result
