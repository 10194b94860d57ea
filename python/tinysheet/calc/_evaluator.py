"""FormulaEvaluator: left-to-right scanner for ``+``-only formulas.

A formula is a flat chain of operands joined by ``+``.  An operand is
either a numeric literal (``12``, ``3.5``, ``.5``) or a cell reference made
of one uppercase column letter and a 1-based row number (``B3``).  There
are no other operators, no parentheses and no functions.

Operands are pushed onto a :class:`NumericStack` as they are scanned and
``+`` operators are only counted.  Once the scan is done the chain is
well-formed exactly when there is one more operand than operator, and the
result is the sum of the stack.
"""

from __future__ import annotations

import logging
import re
from typing import TYPE_CHECKING

from tinysheet.calc._errors import (
    FormulaError,
    FormulaSyntaxError,
    OperandCountMismatch,
    ReferenceOutOfRange,
)
from tinysheet.calc._stack import NumericStack
from tinysheet.calc._syntax import is_valid_formula

if TYPE_CHECKING:
    from tinysheet._sheet import Sheet

logger = logging.getLogger(__name__)

# Longest numeric literal at a position: digits with an optional fraction,
# or a bare fraction.  No exponent.
_LITERAL_RE = re.compile(r"[0-9]+(?:\.[0-9]*)?|\.[0-9]+")

_ROW_RE = re.compile(r"[0-9]+")


class FormulaEvaluator:
    """Evaluates formulas against the current values of a :class:`Sheet`.

    Usage::

        evaluator = FormulaEvaluator(sheet)
        evaluator.evaluate("=A1+B2+0.5")   # raises FormulaError on rejection
        evaluator.try_evaluate("=A1+")     # None, logged at DEBUG
    """

    __slots__ = ("_sheet",)

    def __init__(self, sheet: Sheet) -> None:
        self._sheet = sheet

    def evaluate(self, formula: str) -> float:
        """Return the sum a formula describes.

        References resolve to the referenced cell's numeric value at the
        time of the call.  Empty and text cells count as ``0``.
        """
        if not is_valid_formula(formula):
            raise FormulaSyntaxError(f"Invalid formula: {formula!r}", formula)

        body = formula.strip()
        operators = 0
        with NumericStack() as stack:
            # body[0] is the formula marker
            i = 1
            length = len(body)
            while i < length:
                ch = body[i]
                if ch.isspace():
                    i += 1
                elif ch == "+":
                    operators += 1
                    i += 1
                elif "A" <= ch <= "Z":
                    i = self._push_reference(body, i, stack, formula)
                elif "0" <= ch <= "9" or ch == ".":
                    m = _LITERAL_RE.match(body, i)
                    if m is None:
                        raise FormulaSyntaxError(
                            f"Malformed number at position {i} in {formula!r}", formula,
                        )
                    stack.push(float(m.group()))
                    i = m.end()
                else:
                    raise FormulaSyntaxError(
                        f"Unexpected character {ch!r} in {formula!r}", formula,
                    )

            if stack.size != operators + 1:
                raise OperandCountMismatch(stack.size, operators, formula)
            return stack.drain_sum()

    def try_evaluate(self, formula: str) -> float | None:
        """Like :meth:`evaluate` but returns ``None`` when the formula is rejected."""
        try:
            return self.evaluate(formula)
        except FormulaError as e:
            logger.debug("Cannot evaluate formula %r: %s", formula, e)
            return None

    def _push_reference(
        self, body: str, start: int, stack: NumericStack, formula: str,
    ) -> int:
        """Resolve the reference at ``body[start]`` and return the index after it."""
        col = ord(body[start]) - ord("A")
        m = _ROW_RE.match(body, start + 1)
        if m is None:
            raise FormulaSyntaxError(
                f"Column {body[start]!r} must be followed by a row number in {formula!r}",
                formula,
            )
        sheet = self._sheet
        # Compare digit counts first; int() refuses very long digit strings.
        digits = m.group().lstrip("0")
        if len(digits) > len(str(sheet.num_rows)):
            raise ReferenceOutOfRange(body[start : m.end()], formula)
        row = int(digits or "0") - 1
        if not (0 <= row < sheet.num_rows and 0 <= col < sheet.num_cols):
            raise ReferenceOutOfRange(body[start : m.end()], formula)
        stack.push(sheet.get_cell(row, col).number)
        return m.end()
