"""A singly linked list of integers and the drills that work on it."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass

__all__ = ["Node", "LinkedList", "merge_sorted", "delete_node"]


@dataclass(eq=False)
class Node:
    """One cell of a singly linked list."""

    value: int = 0
    next: Node | None = None


class LinkedList:
    """A singly linked list reachable from ``head``.

    Iterating a list whose nodes form a cycle never ends; use
    :meth:`has_cycle` to check first.
    """

    def __init__(self, values: Iterable[int] = ()) -> None:
        self.head: Node | None = None
        for value in reversed(list(values)):
            self.head = Node(value, self.head)

    def _nodes(self) -> Iterator[Node]:
        node = self.head
        while node is not None:
            yield node
            node = node.next

    def __iter__(self) -> Iterator[int]:
        return (node.value for node in self._nodes())

    def __str__(self) -> str:
        return " ".join(str(value) for value in self)

    def __repr__(self) -> str:
        return f"LinkedList([{', '.join(str(value) for value in self)}])"

    def append(self, value: int) -> Node:
        """Add a value at the end and return its node."""
        node = Node(value)
        if self.head is None:
            self.head = node
            return node
        tail = self.head
        while tail.next is not None:
            tail = tail.next
        tail.next = node
        return node

    def reverse(self) -> None:
        """Reverse the list in place."""
        previous: Node | None = None
        node = self.head
        while node is not None:
            node.next, previous, node = previous, node, node.next
        self.head = previous

    def has_cycle(self) -> bool:
        """Tell whether following ``next`` from the head ever revisits a node."""
        slow = fast = self.head
        while fast is not None and fast.next is not None:
            slow = slow.next  # type: ignore[union-attr]
            fast = fast.next.next
            if slow is fast:
                return True
        return False

    def maximum(self) -> int:
        """Return the largest value in the list."""
        if self.head is None:
            raise ValueError("the list is empty")
        return max(self)

    def remove_duplicates(self) -> None:
        """Drop every node whose value already appeared earlier in the list."""
        seen: set[int] = set()
        previous: Node | None = None
        node = self.head
        while node is not None:
            if node.value in seen:
                assert previous is not None
                previous.next = node.next
            else:
                seen.add(node.value)
                previous = node
            node = node.next

    def sort_012(self) -> None:
        """Sort a list that holds only 0s, 1s and 2s by counting them."""
        counts = {0: 0, 1: 0, 2: 0}
        for value in self:
            if value not in counts:
                raise ValueError(f"only 0, 1 and 2 may be sorted, found {value}")
            counts[value] += 1
        digits = (digit for digit, count in counts.items() for _ in range(count))
        for node, digit in zip(self._nodes(), digits):
            node.value = digit

    def to_number(self) -> int:
        """Read the values as the decimal digits of one number, head first."""
        if self.head is None:
            raise ValueError("the list is empty")
        number = 0
        for digit in self:
            number = number * 10 + digit
        return number


def merge_sorted(first: Iterable[int], second: Iterable[int]) -> LinkedList:
    """Merge two ascending sequences into a new ascending linked list."""
    merged: list[int] = []
    left = iter(first)
    right = iter(second)
    a = next(left, None)
    b = next(right, None)
    while a is not None and b is not None:
        if a < b:
            merged.append(a)
            a = next(left, None)
        else:
            merged.append(b)
            b = next(right, None)
    if a is not None:
        merged.append(a)
        merged.extend(left)
    if b is not None:
        merged.append(b)
        merged.extend(right)
    return LinkedList(merged)


def delete_node(node: Node) -> None:
    """Remove a node from its list without access to the head.

    The following node's value is copied in and that node is unlinked, so the
    last node of a list cannot be removed this way.
    """
    following = node.next
    if following is None:
        raise ValueError("the last node cannot be deleted without the head")
    node.value = following.value
    node.next = following.next