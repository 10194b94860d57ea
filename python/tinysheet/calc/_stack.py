"""Growable stack of floats used as scratch space while evaluating a formula."""

from __future__ import annotations

from tinysheet.calc._errors import EmptyStackError

INITIAL_CAPACITY = 16


class NumericStack:
    """LIFO stack of floats with doubling storage.

    Use as a context manager so the storage is released on every exit path::

        with NumericStack() as stack:
            stack.push(1.0)
            stack.push(2.0)
            total = stack.drain_sum()
    """

    __slots__ = ("_data", "_size")

    def __init__(self, capacity: int = INITIAL_CAPACITY) -> None:
        if capacity < 1:
            raise ValueError(f"Capacity must be positive, got {capacity}")
        self._data: list[float] = [0.0] * capacity
        self._size = 0

    def __enter__(self) -> NumericStack:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.release()

    def __len__(self) -> int:
        return self._size

    @property
    def size(self) -> int:
        return self._size

    @property
    def capacity(self) -> int:
        return len(self._data)

    def push(self, value: float) -> None:
        if self._size >= len(self._data):
            self._grow()
        self._data[self._size] = value
        self._size += 1

    def pop(self) -> float:
        if self._size == 0:
            raise EmptyStackError("pop from empty NumericStack")
        self._size -= 1
        return self._data[self._size]

    def drain_sum(self) -> float:
        """Pop every value and return their sum (accumulated last-in first)."""
        total = 0.0
        while self._size > 0:
            total += self.pop()
        return total

    def release(self) -> None:
        """Drop the backing storage. Size and capacity become 0."""
        self._data = []
        self._size = 0

    def _grow(self) -> None:
        # A released stack starts over at the initial capacity.
        extra = len(self._data) or INITIAL_CAPACITY
        self._data.extend([0.0] * extra)
