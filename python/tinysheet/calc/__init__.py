"""tinysheet.calc - Formula validation, evaluation and recompute for tinysheet sheets."""

from tinysheet.calc._errors import (
    ERROR_TEXT,
    EmptyStackError,
    FormulaError,
    FormulaSyntaxError,
    OperandCountMismatch,
    ReferenceOutOfRange,
)
from tinysheet.calc._evaluator import FormulaEvaluator
from tinysheet.calc._protocol import CellUpdate, DisplayCallback, RecomputeResult
from tinysheet.calc._recompute import RecomputeEngine
from tinysheet.calc._stack import NumericStack
from tinysheet.calc._syntax import is_valid_formula, is_valid_number

__all__ = [
    "ERROR_TEXT",
    "CellUpdate",
    "DisplayCallback",
    "EmptyStackError",
    "FormulaError",
    "FormulaEvaluator",
    "FormulaSyntaxError",
    "NumericStack",
    "OperandCountMismatch",
    "RecomputeEngine",
    "RecomputeResult",
    "ReferenceOutOfRange",
    "is_valid_formula",
    "is_valid_number",
]
