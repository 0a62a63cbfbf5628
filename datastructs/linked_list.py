"""Singly linked list of integers with classic list-manipulation exercises."""

from __future__ import annotations

from dataclasses import dataclass, field
from itertools import groupby
from typing import Iterable, Iterator, Optional


@dataclass(eq=False)
class _Node:
    value: int
    next: Optional["_Node"] = field(default=None, repr=False)


class LinkedList:
    """Singly linked list keeping head, tail and length."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self._head: Optional[_Node] = None
        self._tail: Optional[_Node] = None
        self._length = 0
        for value in values:
            self.insert_end(value)

    # ------------------------------------------------------------------
    # Python protocol

    def __len__(self) -> int:
        return self._length

    def __iter__(self) -> Iterator[int]:
        for node in self._nodes():
            yield node.value

    def __str__(self) -> str:
        return " ".join(str(value) for value in self)

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, LinkedList):
            return NotImplemented
        return self.is_same(other)

    __hash__ = None  # type: ignore[assignment]

    # ------------------------------------------------------------------
    # Internal helpers

    def _nodes(self) -> Iterator[_Node]:
        """Yield nodes head to tail; relinking the yielded node is safe."""
        node = self._head
        while node is not None:
            following = node.next
            yield node
            node = following

    def _relink(self, nodes: list[_Node]) -> None:
        """Make ``nodes`` the whole list, in the given order."""
        for first, second in zip(nodes, nodes[1:]):
            first.next = second
        if nodes:
            nodes[-1].next = None
            self._head, self._tail = nodes[0], nodes[-1]
        else:
            self._head = self._tail = None
        self._length = len(nodes)

    def _node_at(self, n: int) -> _Node:
        """Node at 1-based position ``n``."""
        if not 1 <= n <= self._length:
            raise IndexError(f"position {n} out of range")
        for position, node in enumerate(self._nodes(), start=1):
            if position == n:
                return node
        raise IndexError(f"position {n} out of range")

    def _remove_after(self, prev: Optional[_Node]) -> int:
        """Unlink the node after ``prev`` (the head when ``prev`` is None)."""
        target = self._head if prev is None else prev.next
        if target is None:
            raise IndexError("no node to remove")
        if prev is None:
            self._head = target.next
        else:
            prev.next = target.next
        if target is self._tail:
            self._tail = prev
        target.next = None
        self._length -= 1
        return target.value

    # ------------------------------------------------------------------
    # Insertion

    def insert_end(self, value: int) -> None:
        node = _Node(value)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._length += 1

    def insert_front(self, value: int) -> None:
        self._head = _Node(value, self._head)
        if self._tail is None:
            self._tail = self._head
        self._length += 1

    def insert_sorted(self, value: int) -> None:
        """Insert keeping an ascending list ascending; ties go after equals."""
        if self._head is None or value < self._head.value:
            self.insert_front(value)
            return
        for node in self._nodes():
            if node.next is not None and node.next.value > value:
                node.next = _Node(value, node.next)
                self._length += 1
                return
        self.insert_end(value)

    # ------------------------------------------------------------------
    # Lookup

    def get_nth(self, n: int) -> int:
        """Value at 1-based position ``n``."""
        return self._node_at(n).value

    def get_nth_from_back(self, n: int) -> int:
        """Value at 1-based position ``n`` counted from the tail."""
        if not 1 <= n <= self._length:
            raise IndexError(f"position {n} out of range")
        return self.get_nth(self._length - n + 1)

    def index(self, value: int) -> int:
        """0-based position of the first ``value``, or -1."""
        for position, current in enumerate(self):
            if current == value:
                return position
        return -1

    def index_shift_left(self, value: int) -> int:
        """Find ``value``, move it one place towards the head, return its new index.

        Returns -1 when ``value`` is absent.
        """
        prev: Optional[_Node] = None
        for position, node in enumerate(self._nodes()):
            if node.value == value:
                if prev is None:
                    return 0
                prev.value, node.value = node.value, prev.value
                return position - 1
            prev = node
        return -1

    def is_same(self, other: "LinkedList") -> bool:
        """Whether both lists hold the same values in the same order."""
        if len(self) != len(other):
            return False
        return all(a == b for a, b in zip(self, other))

    def max(self) -> int:
        if self._head is None:
            raise ValueError("max of empty list")
        return max(self)

    # ------------------------------------------------------------------
    # Deletion

    def delete_front(self) -> int:
        """Remove the first node and return its value."""
        if self._head is None:
            raise IndexError("delete from empty list")
        return self._remove_after(None)

    def delete_last(self) -> int:
        """Remove the last node and return its value."""
        if self._head is None:
            raise IndexError("delete from empty list")
        return self.delete_nth(self._length)

    def delete_nth(self, n: int) -> int:
        """Remove the node at 1-based position ``n`` and return its value."""
        if not 1 <= n <= self._length:
            raise IndexError(f"position {n} out of range")
        prev = None if n == 1 else self._node_at(n - 1)
        return self._remove_after(prev)

    def delete_key(self, value: int) -> int:
        """Remove the first node holding ``value``."""
        prev: Optional[_Node] = None
        for node in self._nodes():
            if node.value == value:
                return self._remove_after(prev)
            prev = node
        raise ValueError(f"{value!r} not in list")

    def delete_last_occurrence(self, value: int) -> int:
        """Remove the last node holding ``value``."""
        found = False
        before_last: Optional[_Node] = None
        prev: Optional[_Node] = None
        for node in self._nodes():
            if node.value == value:
                found, before_last = True, prev
            prev = node
        if not found:
            raise ValueError(f"{value!r} not in list")
        return self._remove_after(before_last)

    def delete_even_positions(self) -> None:
        """Remove the 2nd, 4th, 6th... nodes (1-based positions)."""
        self._relink([n for i, n in enumerate(self._nodes()) if i % 2 == 0])

    def delete_duplicates(self) -> None:
        """Keep only the first occurrence of every value."""
        seen: set[int] = set()
        kept = []
        for node in self._nodes():
            if node.value not in seen:
                seen.add(node.value)
                kept.append(node)
        self._relink(kept)

    def remove_repeated(self) -> None:
        """In a sorted list, drop every value that occurs more than once."""
        kept = []
        for _, group in groupby(self._nodes(), key=lambda node: node.value):
            run = list(group)
            if len(run) == 1:
                kept.extend(run)
        self._relink(kept)

    # ------------------------------------------------------------------
    # Rearrangement

    def move_to_end(self, value: int) -> None:
        """Move every node holding ``value`` to the end, keeping other order."""
        nodes = list(self._nodes())
        others = [node for node in nodes if node.value != value]
        matches = [node for node in nodes if node.value == value]
        self._relink(others + matches)

    def swap_pairs(self) -> None:
        """Swap the values of nodes 1 and 2, 3 and 4, and so on."""
        nodes = list(self._nodes())
        for first, second in zip(nodes[::2], nodes[1::2]):
            first.value, second.value = second.value, first.value

    def swap_head_tail(self) -> None:
        """Swap the head and tail nodes themselves."""
        nodes = list(self._nodes())
        if len(nodes) < 2:
            return
        nodes[0], nodes[-1] = nodes[-1], nodes[0]
        self._relink(nodes)

    def reverse(self) -> None:
        prev: Optional[_Node] = None
        node = self._head
        while node is not None:
            node.next, prev, node = prev, node, node.next
        self._head, self._tail = self._tail, self._head

    def reverse_chains(self, k: int) -> None:
        """Reverse every full block of ``k`` nodes; a shorter remainder stays."""
        if k < 1:
            raise ValueError("k must be at least 1")
        nodes = list(self._nodes())
        full = len(nodes) // k * k
        result: list[_Node] = []
        for start in range(0, full, k):
            result.extend(reversed(nodes[start:start + k]))
        result.extend(nodes[full:])
        self._relink(result)

    def left_rotate(self, k: int) -> None:
        """Move the first ``k`` nodes to the end."""
        if not self._length:
            return
        k %= self._length
        if k:
            nodes = list(self._nodes())
            self._relink(nodes[k:] + nodes[:k])

    def arrange_odd_even(self) -> None:
        """Put nodes at odd positions first, then those at even positions."""
        nodes = list(self._nodes())
        self._relink(nodes[::2] + nodes[1::2])

    def insert_alternating(self, other: "LinkedList") -> None:
        """Interleave the nodes of ``other`` after each of ours; ``other`` is emptied."""
        if other is self:
            raise ValueError("cannot interleave a list with itself")
        mine, theirs = list(self._nodes()), list(other._nodes())
        merged: list[_Node] = []
        for a, b in zip(mine, theirs):
            merged.extend((a, b))
        shorter = min(len(mine), len(theirs))
        merged.extend(mine[shorter:])
        merged.extend(theirs[shorter:])
        self._relink(merged)
        other._relink([])

    def add_num(self, other: "LinkedList") -> None:
        """Add ``other`` to this list, both being decimal digits least significant first."""
        digits = list(other)
        node = self._head
        carry = 0
        position = 0
        while node is not None or position < len(digits) or carry:
            addend = digits[position] if position < len(digits) else 0
            total = carry + addend + (node.value if node is not None else 0)
            carry, digit = divmod(total, 10)
            if node is not None:
                node.value = digit
                node = node.next
            else:
                self.insert_end(digit)
            position += 1

    # ------------------------------------------------------------------
    # Consistency

    def verify_integrity(self) -> None:
        """Check head, tail and length; raise AssertionError on a mismatch."""
        if self._length == 0:
            if self._head is not None or self._tail is not None:
                raise AssertionError("empty list must have no head or tail")
            return
        if self._head is None or self._tail is None:
            raise AssertionError("non-empty list needs head and tail")
        if (self._length == 1) != (self._head is self._tail):
            raise AssertionError("head and tail must coincide only for one node")
        if self._tail.next is not None:
            raise AssertionError("tail has a next node")
        count = 0
        last = None
        node = self._head
        while node is not None:
            count += 1
            if count > self._length:
                raise AssertionError("more nodes than the recorded length")
            last, node = node, node.next
        if last is not self._tail:
            raise AssertionError("walk does not end at tail")
        if count != self._length:
            raise AssertionError(
                f"length is {self._length} but {count} nodes are linked"
            )