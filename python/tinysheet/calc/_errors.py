"""Error kinds raised by the formula engine.

Every rejection of a formula is a :class:`FormulaError`.  The sheet catches
these and shows :data:`ERROR_TEXT` instead of a value, so they never reach
code that edits cells.  :class:`EmptyStackError` is different: it signals a
bug in the evaluator and is allowed to propagate.
"""

from __future__ import annotations

# Display text for a formula that could not be evaluated.
ERROR_TEXT = "ERROR"


class FormulaError(ValueError):
    """A formula was rejected during evaluation."""

    def __init__(self, message: str, formula: str | None = None) -> None:
        super().__init__(message)
        self.formula = formula


class FormulaSyntaxError(FormulaError):
    """Malformed formula text (bad character, reference or literal)."""


class ReferenceOutOfRange(FormulaError):
    """A reference names a cell outside the grid."""

    def __init__(self, ref: str, formula: str | None = None) -> None:
        super().__init__(f"Reference out of range: {ref}", formula)
        self.ref = ref


class OperandCountMismatch(FormulaError):
    """Operands and ``+`` operators do not alternate."""

    def __init__(self, operands: int, operators: int, formula: str | None = None) -> None:
        super().__init__(
            f"Expected {operators + 1} operand(s) for {operators} operator(s), "
            f"got {operands}",
            formula,
        )
        self.operands = operands
        self.operators = operators


class EmptyStackError(IndexError):
    """Pop from an empty :class:`~tinysheet.calc.NumericStack`."""
