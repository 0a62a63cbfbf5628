"""Doubly linked list of integers with classic list-manipulation exercises."""

from __future__ import annotations

from dataclasses import dataclass, field
from itertools import islice
from typing import Iterable, Iterator, Optional


@dataclass(eq=False)
class _Node:
    value: int
    prev: Optional["_Node"] = field(default=None, repr=False)
    next: Optional["_Node"] = field(default=None, repr=False)


def _check(condition: bool, message: str) -> None:
    if not condition:
        raise AssertionError(message)


def _walk(node: Optional[_Node], direction: str) -> Iterator[_Node]:
    """Yield nodes following ``direction``; unlinking the yielded node is safe."""
    while node is not None:
        following = getattr(node, direction)
        yield node
        node = following


class DoublyLinkedList:
    """Doubly linked list keeping head, tail and length."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self._head: Optional[_Node] = None
        self._tail: Optional[_Node] = None
        self._length = 0
        for value in values:
            self.insert_end(value)

    def __len__(self) -> int:
        return self._length

    def __iter__(self) -> Iterator[int]:
        return (node.value for node in self._forward())

    def __str__(self) -> str:
        return " ".join(map(str, self))

    def __repr__(self) -> str:
        return f"DoublyLinkedList({list(self)!r})"

    def reversed_values(self) -> list[int]:
        """Values read from tail to head."""
        return [node.value for node in self._backward()]

    def _forward(self) -> Iterator[_Node]:
        return _walk(self._head, "next")

    def _backward(self) -> Iterator[_Node]:
        return _walk(self._tail, "prev")

    def _unlink(self, node: _Node) -> None:
        if node.prev is None:
            self._head = node.next
        else:
            node.prev.next = node.next
        if node.next is None:
            self._tail = node.prev
        else:
            node.next.prev = node.prev
        node.prev = node.next = None
        self._length -= 1

    def _insert_before(self, node: _Node, value: int) -> None:
        new = _Node(value, prev=node.prev, next=node)
        if node.prev is None:
            self._head = new
        else:
            node.prev.next = new
        node.prev = new
        self._length += 1

    def insert_end(self, value: int) -> None:
        node = _Node(value, prev=self._tail)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._length += 1

    def insert_front(self, value: int) -> None:
        if self._head is None:
            self.insert_end(value)
        else:
            self._insert_before(self._head, value)

    def insert_sorted(self, value: int) -> None:
        """Insert keeping an ascending list ascending."""
        for node in self._forward():
            if value <= node.value:
                self._insert_before(node, value)
                return
        self.insert_end(value)

    def delete_front(self) -> None:
        """Remove the first node; does nothing on an empty list."""
        if self._head is not None:
            self._unlink(self._head)

    def delete_end(self) -> None:
        """Remove the last node; does nothing on an empty list."""
        if self._tail is not None:
            self._unlink(self._tail)

    def delete_key(self, value: int) -> None:
        """Remove the first node holding ``value``, if any."""
        match = next((node for node in self._forward() if node.value == value), None)
        if match is not None:
            self._unlink(match)

    def delete_all_with_key(self, value: int) -> None:
        """Remove every node holding ``value``."""
        for node in self._forward():
            if node.value == value:
                self._unlink(node)

    def _delete_positions(self, parity: int) -> None:
        for index, node in enumerate(self._forward()):
            if index % 2 == parity:
                self._unlink(node)

    def delete_even_positions(self) -> None:
        """Remove the 2nd, 4th, 6th... nodes (1-based positions)."""
        self._delete_positions(1)

    def delete_odd_positions(self) -> None:
        """Remove the 1st, 3rd, 5th... nodes (1-based positions)."""
        self._delete_positions(0)

    def is_palindrome(self) -> bool:
        """Whether the list reads the same from both ends."""
        pairs = islice(zip(self._forward(), self._backward()), self._length // 2)
        return all(front.value == back.value for front, back in pairs)

    def find_in_middle(self) -> int:
        """Middle value; for an even length, the second of the two middles."""
        if self._head is None:
            raise IndexError("middle of empty list")
        return next(islice(self._forward(), self._length // 2, None)).value

    def reverse(self) -> None:
        for node in self._forward():
            node.next, node.prev = node.prev, node.next
        self._head, self._tail = self._tail, self._head

    def swap_forward_backward(self, k: int) -> None:
        """Swap the k-th node from the front with the k-th from the back.

        Does nothing when ``k`` exceeds half the length.
        """
        if k < 1:
            raise ValueError("k must be at least 1")
        if k > self._length // 2:
            return
        front = next(islice(self._forward(), k - 1, None))
        back = next(islice(self._backward(), k - 1, None))
        front.value, back.value = back.value, front.value

    def merge(self, other: "DoublyLinkedList") -> None:
        """Merge the values of sorted ``other`` into this sorted list.

        ``other`` is left unchanged; on ties its values go after existing ones.
        """
        node = self._head
        for value in list(other):
            while node is not None and node.value <= value:
                node = node.next
            if node is None:
                self.insert_end(value)
            else:
                self._insert_before(node, value)

    def _count_walk(self, start: Optional[_Node], direction: str, back_link: str) -> tuple[int, Optional[_Node]]:
        """Walk one way, checking links point back; return node count and last node."""
        count, last = 0, None
        node = start
        while node is not None:
            _check(getattr(node, back_link) is last, "links in the two directions disagree")
            count += 1
            _check(count <= self._length, "more nodes than the recorded length")
            last, node = node, getattr(node, direction)
        return count, last

    def verify_integrity(self) -> None:
        """Check head, tail, length and both link directions.

        Raises AssertionError describing the first inconsistency found.
        """
        if self._length == 0:
            _check(self._head is None and self._tail is None,
                   "empty list must have no head or tail")
            return
        _check(self._head is not None and self._tail is not None,
               "non-empty list needs head and tail")
        _check((self._length == 1) == (self._head is self._tail),
               "head and tail must coincide only for one node")
        for start, end, direction, back_link in (
            (self._head, self._tail, "next", "prev"),
            (self._tail, self._head, "prev", "next"),
        ):
            count, last = self._count_walk(start, direction, back_link)
            _check(last is end, f"walk along {direction} does not end where expected")
            _check(count == self._length,
                   f"length is {self._length} but {count} nodes are linked")