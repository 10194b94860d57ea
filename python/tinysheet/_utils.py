"""A1-style addressing and number rendering helpers."""

from __future__ import annotations

import re

FORMULA_MARKER = "="

# Formula references name a column with one uppercase letter.
MAX_COLS = 26

_A1_RE = re.compile(r"^([A-Z])(\d+)$")


def column_letter(col: int) -> str:
    """0-based column index -> letter (``0`` -> ``"A"``)."""
    if not 0 <= col < MAX_COLS:
        raise ValueError(f"Column index out of range: {col}")
    return chr(ord("A") + col)


def column_index(letter: str) -> int:
    """Column letter -> 0-based index (``"A"`` -> ``0``)."""
    if len(letter) != 1 or not "A" <= letter <= "Z":
        raise ValueError(f"Invalid column letter: {letter!r}")
    return ord(letter) - ord("A")


def a1_to_rowcol(ref: str) -> tuple[int, int]:
    """Convert ``"B3"`` to a 0-based ``(row, col)`` pair, here ``(2, 1)``.

    Only uppercase single-letter columns are accepted, matching what a
    formula may reference.
    """
    m = _A1_RE.match(ref.strip())
    if not m:
        raise ValueError(f"Invalid cell reference: {ref!r}")
    row = int(m.group(2)) - 1
    if row < 0:
        raise ValueError(f"Row numbers start at 1: {ref!r}")
    return row, column_index(m.group(1))


def rowcol_to_a1(row: int, col: int) -> str:
    """Convert a 0-based ``(row, col)`` pair to ``"A1"`` notation."""
    if row < 0:
        raise ValueError(f"Row index out of range: {row}")
    return f"{column_letter(col)}{row + 1}"


def format_number(value: float) -> str:
    """Render a computed value the way a ``%g`` printf conversion does.

    Six significant digits, trailing zeros dropped: ``6.0`` -> ``"6"``,
    ``0.1 + 0.2`` -> ``"0.3"``, ``1234567.0`` -> ``"1.23457e+06"``.
    """
    return format(value, "g")
