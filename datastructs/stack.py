"""Stack containers and classic algorithms built on stacks."""

from __future__ import annotations

import operator
from dataclasses import dataclass
from typing import Callable, Iterable, Iterator, Optional

_INITIAL_CAPACITY = 10


def _require(condition: bool, message: str) -> None:
    """Raise IndexError with ``message`` unless ``condition`` holds."""
    if not condition:
        raise IndexError(message)


class ArrayStack:
    """Stack over an array whose capacity doubles when it fills up."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self._items: list[int] = []
        self._capacity = _INITIAL_CAPACITY
        for value in values:
            self.push(value)

    @property
    def capacity(self) -> int:
        return self._capacity

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[int]:
        """Iterate from bottom to top."""
        return iter(self._items)

    def __repr__(self) -> str:
        return f"ArrayStack({self._items!r})"

    def is_full(self) -> bool:
        return len(self._items) >= self._capacity

    def is_empty(self) -> bool:
        return not self._items

    def _reserve_one(self) -> None:
        if self.is_full():
            self._capacity *= 2

    def push(self, value: int) -> None:
        self._reserve_one()
        self._items.append(value)

    def pop(self) -> int:
        _require(bool(self._items), "pop from empty stack")
        return self._items.pop()

    def top(self) -> int:
        _require(bool(self._items), "top of empty stack")
        return self._items[-1]

    def insert_at_bottom(self, value: int) -> None:
        """Place ``value`` beneath every element already on the stack."""
        self._reserve_one()
        self._items.insert(0, value)

    def reverse(self) -> None:
        """Reverse by popping everything and re-inserting each at the bottom."""
        popped = []
        while not self.is_empty():
            popped.append(self.pop())
        for value in reversed(popped):
            self.insert_at_bottom(value)

    def reverse_in_place(self) -> None:
        """Reverse by swapping elements inside the storage."""
        self._items.reverse()

    def to_list(self) -> list[int]:
        """Elements from bottom to top."""
        return list(self._items)


class _SlotArray:
    """Fixed-size integer storage that the array-backed stacks grow by doubling."""

    def __init__(self) -> None:
        self._slots: list[int] = [0] * _INITIAL_CAPACITY

    @property
    def capacity(self) -> int:
        return len(self._slots)


class BackFilledStack(_SlotArray):
    """Stack that fills its storage array from the last slot towards the first."""

    def __init__(self) -> None:
        super().__init__()
        self._count = 0

    def __len__(self) -> int:
        return self._count

    def __repr__(self) -> str:
        return f"BackFilledStack({self.to_list()!r})"

    def is_full(self) -> bool:
        return self._count == len(self._slots)

    def is_empty(self) -> bool:
        return self._count == 0

    def push(self, value: int) -> None:
        if self.is_full():
            # Keep the occupied tail aligned with the end of the new array.
            self._slots = [0] * len(self._slots) + self._slots
        self._count += 1
        self._slots[-self._count] = value

    def top(self) -> int:
        _require(not self.is_empty(), "stack is empty")
        return self._slots[-self._count]

    def pop(self) -> int:
        value = self.top()
        self._count -= 1
        return value

    def to_list(self) -> list[int]:
        """Elements from bottom to top."""
        return self._slots[len(self._slots) - self._count:][::-1]


class TwinStack(_SlotArray):
    """Two stacks sharing one array: stack 1 grows up, stack 2 grows down."""

    def __init__(self) -> None:
        super().__init__()
        self._counts = {1: 0, 2: 0}

    @staticmethod
    def _check_id(stack_id: int) -> None:
        if stack_id not in (1, 2):
            raise ValueError(f"stack id must be 1 or 2, got {stack_id!r}")

    def __len__(self) -> int:
        return sum(self._counts.values())

    def is_full(self) -> bool:
        return len(self) >= len(self._slots)

    def is_empty(self, stack_id: int) -> bool:
        self._check_id(stack_id)
        return self._counts[stack_id] == 0

    def _grow(self) -> None:
        size = len(self._slots)
        first = self._slots[: self._counts[1]]
        second = self._slots[size - self._counts[2]:]
        grown = [0] * (2 * size)
        grown[: len(first)] = first
        grown[2 * size - len(second):] = second
        self._slots = grown

    def push(self, stack_id: int, value: int) -> None:
        self._check_id(stack_id)
        if self.is_full():
            self._grow()
        self._counts[stack_id] += 1
        self._slots[self._top_index(stack_id)] = value

    def _top_index(self, stack_id: int) -> int:
        _require(not self.is_empty(stack_id), f"stack {stack_id} is empty")
        if stack_id == 1:
            return self._counts[1] - 1
        return len(self._slots) - self._counts[2]

    def pop(self, stack_id: int) -> int:
        value = self.top(stack_id)
        self._counts[stack_id] -= 1
        return value

    def top(self, stack_id: int) -> int:
        return self._slots[self._top_index(stack_id)]

    def to_list(self, stack_id: int) -> list[int]:
        """Elements of one stack from bottom to top."""
        self._check_id(stack_id)
        if stack_id == 1:
            return self._slots[: self._counts[1]]
        return self._slots[len(self._slots) - self._counts[2]:][::-1]


@dataclass
class _Node:
    value: int
    next: Optional["_Node"] = None


class LinkedStack:
    """Stack built from singly linked nodes."""

    def __init__(self) -> None:
        self._head: Optional[_Node] = None
        self._size = 0

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[int]:
        """Iterate from top to bottom."""
        node = self._head
        while node is not None:
            yield node.value
            node = node.next

    def push(self, value: int) -> None:
        self._head = _Node(value, self._head)
        self._size += 1

    def peek(self) -> int:
        _require(self._head is not None, "stack is empty")
        assert self._head is not None
        return self._head.value

    def pop(self) -> int:
        value = self.peek()
        assert self._head is not None
        self._head = self._head.next
        self._size -= 1
        return value

    def is_empty(self) -> bool:
        return self._head is None


def reverse_num(num: int) -> int:
    """Reverse the decimal digits of ``num``, keeping its sign."""
    sign = -1 if num < 0 else 1
    num = abs(num)
    digits = ArrayStack()
    while num:
        num, digit = divmod(num, 10)
        digits.push(digit)
    result, place = 0, 1
    while not digits.is_empty():
        result += digits.pop() * place
        place *= 10
    return sign * result


def reverse_words(text: str) -> str:
    """Reverse the letters of every space-separated word, keeping word order."""
    groups: list[list[str]] = []
    previous = " "
    for char in text:
        if previous == " ":
            groups.append([])
        if char != " ":
            groups[-1].append(char)
        previous = char
    words = []
    for stack in groups:
        letters = []
        while stack:
            letters.append(stack.pop())
        words.append("".join(letters))
    return " ".join(words)


def _cancel_pairs(text: str, cancels: Callable[[str, str], bool]) -> list[str]:
    """Push characters, popping instead whenever the top cancels the new one."""
    stack: list[str] = []
    for char in text:
        if stack and cancels(stack[-1], char):
            stack.pop()
        else:
            stack.append(char)
    return stack


_PAIRS = {")": "(", "]": "[", "}": "{"}


def is_valid(text: str) -> bool:
    """Whether every bracket in ``text`` is matched and properly nested."""
    return not _cancel_pairs(text, lambda top, char: _PAIRS.get(char) == top)


def remove_duplicates(text: str) -> str:
    """Repeatedly remove pairs of equal adjacent characters."""
    return "".join(_cancel_pairs(text, operator.eq))


def remaining_asteroids(asteroids: Iterable[int]) -> list[int]:
    """Asteroids left after collisions.

    A positive value moves right, a negative one left. When two meet the
    smaller one explodes; equal sizes both explode.
    """
    survivors: list[int] = []
    for asteroid in asteroids:
        while survivors and asteroid < 0 and survivors[-1] > 0:
            if -asteroid > survivors[-1]:
                survivors.pop()
                continue
            if -asteroid == survivors[-1]:
                survivors.pop()
            break
        else:
            survivors.append(asteroid)
    return survivors


def parentheses_score(text: str) -> int:
    """Score balanced parentheses: ``()`` is 1, ``(X)`` is twice X, ``XY`` is X + Y."""
    chars: list[str] = []
    scores: list[int] = []
    for char in text:
        if chars and chars[-1] == "(" and char == ")":
            chars.pop()
            inner = 0
            while scores and scores[-1] != 0:
                inner += scores.pop()
            if scores:
                scores.pop()
            scores.append(inner * 2 if inner else 1)
        else:
            chars.append(char)
            scores.append(0)
    return sum(scores)


def next_greater(values: Iterable[int]) -> list[int]:
    """For each element, the nearest strictly greater element to its right, or -1."""
    values = list(values)
    result = [-1] * len(values)
    pending: list[int] = []
    for position, value in enumerate(values):
        while pending and value > values[pending[-1]]:
            result[pending.pop()] = value
        pending.append(position)
    return result


def factorial_stack(n: int) -> int:
    """Compute ``n!`` by unwinding an explicit stack of frames."""
    if n < 0:
        raise ValueError("factorial is not defined for negative numbers")
    frames = [[i, 2 if i == 2 else -1] for i in range(n, 1, -1)]
    if not frames:
        return 1
    while len(frames) > 1:
        _, partial = frames.pop()
        frames[-1][1] = frames[-1][0] * partial
    return frames[-1][1]


def postfix(expression: str) -> str:
    """Convert an infix expression of single digits to postfix notation."""
    operators: list[str] = []
    output: list[str] = []
    for char in expression:
        if "0" <= char <= "9":
            output.append(char)
            continue
        if operators and char != "(":
            if char in "+-)" or operators[-1] in "*/":
                while operators and operators[-1] != "(":
                    output.append(operators.pop())
                if operators:
                    operators.pop()
        if char != ")":
            operators.append(char)
    output.extend(reversed(operators))
    return "".join(output)