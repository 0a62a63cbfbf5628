"""A growable integer array with rotation and search helpers."""

from __future__ import annotations

from typing import Iterator

_EXTRA_CAPACITY = 10


class Vector:
    """Zero-initialised array of ints whose capacity doubles as it fills."""

    def __init__(self, size: int = 0) -> None:
        if size < 0:
            raise ValueError("size must not be negative")
        self._items: list[int] = [0] * size
        self._capacity = size + _EXTRA_CAPACITY

    @property
    def capacity(self) -> int:
        return self._capacity

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[int]:
        return iter(self._items)

    def __repr__(self) -> str:
        return f"Vector({self._items!r})"

    def _check_index(self, index: int) -> None:
        if not 0 <= index < len(self._items):
            raise IndexError(f"index {index} out of range")

    def _reserve_one(self) -> None:
        if len(self._items) + 1 == self._capacity:
            self._capacity *= 2

    def get(self, index: int) -> int:
        self._check_index(index)
        return self._items[index]

    def set(self, index: int, value: int) -> None:
        self._check_index(index)
        self._items[index] = value

    def find(self, value: int) -> int:
        """Index of the first occurrence of ``value``, or -1."""
        try:
            return self._items.index(value)
        except ValueError:
            return -1

    def front(self) -> int:
        if not self._items:
            raise IndexError("front of empty vector")
        return self._items[0]

    def back(self) -> int:
        if not self._items:
            raise IndexError("back of empty vector")
        return self._items[-1]

    def push_back(self, value: int) -> None:
        self._reserve_one()
        self._items.append(value)

    def insert(self, index: int, value: int) -> None:
        if not 0 <= index <= len(self._items):
            raise IndexError(f"index {index} out of range")
        self._reserve_one()
        self._items.insert(index, value)

    def right_rotate(self, times: int = 1) -> None:
        """Move the last ``times`` elements to the front."""
        if not self._items:
            return
        times %= len(self._items)
        if times:
            self._items[:] = self._items[-times:] + self._items[:-times]

    def left_rotate(self) -> None:
        """Move the first element to the back."""
        if self._items:
            self._items.append(self._items.pop(0))

    def pop(self, index: int) -> int:
        self._check_index(index)
        return self._items.pop(index)

    def find_transposition(self, value: int) -> int:
        """Find ``value`` and move it one place towards the front.

        Returns its new index, or -1 when it is absent.
        """
        index = self.find(value)
        if index > 0:
            items = self._items
            items[index - 1], items[index] = items[index], items[index - 1]
            return index - 1
        return index