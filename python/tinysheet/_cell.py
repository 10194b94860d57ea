"""Cell variants: one immutable dataclass per kind of content.

A grid position always holds exactly one of :class:`EmptyCell`,
:class:`NumberCell`, :class:`TextCell` or :class:`FormulaCell`.  Writes
replace the whole object, so a cell never carries fields that do not
belong to its kind.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import ClassVar, Union

from tinysheet._utils import FORMULA_MARKER, format_number


class CellKind(Enum):
    EMPTY = "empty"
    NUMBER = "number"
    TEXT = "text"
    FORMULA = "formula"


@dataclass(frozen=True)
class EmptyCell:
    """A position that has never been written, or was cleared.

    There is one instance, :data:`EMPTY`; calling ``EmptyCell()`` returns it.
    """

    kind: ClassVar[CellKind] = CellKind.EMPTY
    _instance: ClassVar[EmptyCell | None] = None

    def __new__(cls) -> EmptyCell:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __reduce__(self) -> str:
        return "EMPTY"

    @property
    def number(self) -> float:
        return 0.0

    @property
    def text(self) -> None:
        return None

    @property
    def display(self) -> str:
        return ""

    @property
    def input_text(self) -> str:
        return ""


@dataclass(frozen=True)
class NumberCell:
    value: float
    text: str  # as entered, surrounding whitespace stripped

    kind: ClassVar[CellKind] = CellKind.NUMBER

    @property
    def number(self) -> float:
        return self.value

    @property
    def display(self) -> str:
        return self.text

    @property
    def input_text(self) -> str:
        return self.text


@dataclass(frozen=True)
class TextCell:
    text: str

    kind: ClassVar[CellKind] = CellKind.TEXT

    @property
    def number(self) -> float:
        return 0.0

    @property
    def display(self) -> str:
        return self.text

    @property
    def input_text(self) -> str:
        return self.text


@dataclass(frozen=True)
class FormulaCell:
    """A formula that evaluated successfully at least once.

    ``formula`` keeps the original text; ``value`` is the last computed
    result.
    """

    formula: str
    value: float

    kind: ClassVar[CellKind] = CellKind.FORMULA

    def __post_init__(self) -> None:
        if not self.formula.lstrip().startswith(FORMULA_MARKER):
            raise ValueError(f"Formula must start with {FORMULA_MARKER!r}: {self.formula!r}")

    @property
    def number(self) -> float:
        return self.value

    @property
    def text(self) -> str:
        return self.formula

    @property
    def display(self) -> str:
        return format_number(self.value)

    @property
    def input_text(self) -> str:
        return self.formula


Cell = Union[EmptyCell, NumberCell, TextCell, FormulaCell]

EMPTY = EmptyCell()

# State of a never-written cell just before its first value is classified.
DEFAULT_NUMBER = NumberCell(0.0, "")
