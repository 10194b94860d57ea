"""Tests for tinysheet.calc number and formula validation."""

from __future__ import annotations

import pytest

from tinysheet.calc import is_valid_formula, is_valid_number


class TestIsValidNumber:
    @pytest.mark.parametrize(
        "text",
        ["42", "3.5", ".5", "7.", "007", "0", "  12  ", "\t8\n"],
    )
    def test_accepts(self, text: str) -> None:
        assert is_valid_number(text)

    @pytest.mark.parametrize(
        "text",
        ["", ".", "   ", "1.2.3", "..5", "-1", "+1", "1e5", "12a", "1 2", "1,5", "=1"],
    )
    def test_rejects(self, text: str) -> None:
        assert not is_valid_number(text)

    def test_none(self) -> None:
        assert not is_valid_number(None)


class TestIsValidFormula:
    @pytest.mark.parametrize(
        "text",
        [
            "=A1+B2",
            "= A1 + 2",
            "  =1.5+C3  ",
            "=42",
            "=",
            # character-level check only; structure is checked on evaluation
            "=1E5",
            "=A1++",
            "=AB",
        ],
    )
    def test_accepts(self, text: str) -> None:
        assert is_valid_formula(text)

    @pytest.mark.parametrize(
        "text",
        ["A1+B2", "", "1+2", "hello", " A1=B2", "'=A1"],
    )
    def test_requires_leading_marker(self, text: str) -> None:
        assert not is_valid_formula(text)

    @pytest.mark.parametrize("text", ["=a1+1", "=A1+b2", "=Ab1", "=1e5"])
    def test_lowercase_letter_invalidates(self, text: str) -> None:
        assert not is_valid_formula(text)

    @pytest.mark.parametrize("text", ["=A1-B2", "=A1*2", "=(A1)", "==A1", "=A1,B2", "=SUM(A1)"])
    def test_other_characters_invalidate(self, text: str) -> None:
        assert not is_valid_formula(text)

    def test_none(self) -> None:
        assert not is_valid_formula(None)
