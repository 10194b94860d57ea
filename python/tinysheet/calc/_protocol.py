"""Display callback protocol and recompute result dataclasses."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol, runtime_checkable


@runtime_checkable
class DisplayCallback(Protocol):
    """Receives the text to show for a cell whenever it is (re)computed.

    Called synchronously from inside an edit; it must not edit the sheet.
    """

    def __call__(self, row: int, col: int, text: str) -> None:
        ...


@dataclass(frozen=True)
class CellUpdate:
    """One display update produced by an edit or a recompute sweep."""

    row: int
    col: int
    text: str  # what the display was given
    old_value: float | None
    new_value: float | None  # None when the formula was rejected
    formula: str | None = None

    @property
    def failed(self) -> bool:
        return self.new_value is None

    @property
    def changed(self) -> bool:
        return self.new_value is not None and self.new_value != self.old_value


@dataclass(frozen=True)
class RecomputeResult:
    """Result of one sweep over the formula cells of a sheet."""

    skipped: tuple[int, int] | None  # the cell just edited, if any
    updates: tuple[CellUpdate, ...]
    total_formula_cells: int = 0
    changed_cells: int = 0  # formula cells whose value actually changed
    failed_cells: int = 0

    @property
    def change_ratio(self) -> float:
        if self.total_formula_cells == 0:
            return 0.0
        return self.changed_cells / self.total_formula_cells
