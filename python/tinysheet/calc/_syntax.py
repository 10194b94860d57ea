"""Up-front checks on raw cell text: is it a number, is it a formula.

Both checks look at the whole string after stripping surrounding
whitespace.  Passing :func:`is_valid_formula` does not mean a formula will
evaluate; operand/operator structure is left to the evaluator.
"""

from __future__ import annotations

import re

from tinysheet._utils import FORMULA_MARKER

# ---------------------------------------------------------------------------
# Patterns
# ---------------------------------------------------------------------------

# Digits with at most one decimal point anywhere; no sign, no exponent.
_NUMBER_RE = re.compile(r"[0-9]*\.?[0-9]*")

# Uppercase column letters, digits, decimal points and the plus operator.
_FORMULA_BODY_RE = re.compile(r"[A-Z0-9.+]*")

_WHITESPACE_RE = re.compile(r"\s+")


def is_valid_number(text: str | None) -> bool:
    """``True`` for text such as ``"42"``, ``"3.5"``, ``".5"`` or ``"7."``."""
    if text is None:
        return False
    body = text.strip()
    return _NUMBER_RE.fullmatch(body) is not None and any(ch.isdigit() for ch in body)


def is_valid_formula(text: str | None) -> bool:
    """``True`` when *text* starts with ``=`` and uses only formula characters.

    Internal whitespace is ignored.  A lowercase letter anywhere makes the
    whole formula invalid.
    """
    if text is None:
        return False
    body = text.strip()
    if not body.startswith(FORMULA_MARKER):
        return False
    rest = _WHITESPACE_RE.sub("", body[1:])
    return _FORMULA_BODY_RE.fullmatch(rest) is not None
