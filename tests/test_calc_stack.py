"""Tests for tinysheet.calc NumericStack."""

from __future__ import annotations

import pytest

from tinysheet.calc import EmptyStackError, NumericStack


class TestPushPop:
    def test_lifo_order(self) -> None:
        stack = NumericStack()
        stack.push(1.0)
        stack.push(2.0)
        stack.push(3.0)
        assert stack.pop() == 3.0
        assert stack.pop() == 2.0
        assert stack.pop() == 1.0

    def test_size_tracks_pushes_and_pops(self) -> None:
        stack = NumericStack()
        assert stack.size == 0
        stack.push(4.0)
        stack.push(5.0)
        assert stack.size == 2
        assert len(stack) == 2
        stack.pop()
        assert stack.size == 1

    def test_pop_empty_raises(self) -> None:
        stack = NumericStack()
        with pytest.raises(EmptyStackError):
            stack.pop()

    def test_empty_stack_error_is_index_error(self) -> None:
        stack = NumericStack()
        stack.push(1.0)
        stack.pop()
        with pytest.raises(IndexError, match="empty"):
            stack.pop()


class TestCapacity:
    def test_initial_capacity(self) -> None:
        assert NumericStack().capacity == 16

    def test_doubles_when_full(self) -> None:
        stack = NumericStack()
        for i in range(16):
            stack.push(float(i))
        assert stack.capacity == 16
        stack.push(16.0)
        assert stack.capacity == 32
        for i in range(16):
            stack.push(float(i))
        assert stack.capacity == 64
        assert stack.size == 33

    def test_values_survive_growth(self) -> None:
        stack = NumericStack(capacity=2)
        for i in range(5):
            stack.push(float(i))
        assert [stack.pop() for _ in range(5)] == [4.0, 3.0, 2.0, 1.0, 0.0]

    def test_invalid_capacity(self) -> None:
        with pytest.raises(ValueError, match="positive"):
            NumericStack(capacity=0)


class TestRelease:
    def test_release_drops_storage(self) -> None:
        stack = NumericStack()
        stack.push(1.0)
        stack.release()
        assert stack.size == 0
        assert stack.capacity == 0

    def test_push_after_release(self) -> None:
        stack = NumericStack()
        stack.release()
        stack.push(7.0)
        assert stack.capacity == 16
        assert stack.pop() == 7.0

    def test_context_manager_releases(self) -> None:
        with NumericStack() as stack:
            stack.push(1.0)
            stack.push(2.0)
        assert stack.size == 0
        assert stack.capacity == 0

    def test_context_manager_releases_on_error(self) -> None:
        with pytest.raises(RuntimeError):
            with NumericStack() as stack:
                stack.push(1.0)
                raise RuntimeError("scan failed")
        assert stack.size == 0
        assert stack.capacity == 0


class TestDrainSum:
    def test_sums_and_empties(self) -> None:
        stack = NumericStack()
        for v in (1.5, 2.5, 3.0):
            stack.push(v)
        assert stack.drain_sum() == 7.0
        assert stack.size == 0

    def test_empty_sum_is_zero(self) -> None:
        assert NumericStack().drain_sum() == 0.0
