"""Singly, doubly and circular linked lists, with loop detection helpers."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any


class ListNode:
    """A list node holding ``value``, a ``next`` link and, in doubly linked lists, ``prev``."""

    __slots__ = ("value", "next", "prev")

    def __init__(
        self,
        value: Any,
        next: ListNode | None = None,
        prev: ListNode | None = None,
    ) -> None:
        self.value = value
        self.next = next
        self.prev = prev

    def __repr__(self) -> str:
        return f"ListNode({self.value!r})"


def _check_position(position: int) -> None:
    if position < 1:
        raise IndexError(f"positions start at 1, got {position}")


class SinglyLinkedList:
    """A singly linked list tracking its head and tail; positions start at 1."""

    def __init__(self, values: Any = ()) -> None:
        self.head: ListNode | None = None
        self.tail: ListNode | None = None
        for value in values:
            self.insert_at_tail(value)

    def insert_at_head(self, value: Any) -> None:
        """Put ``value`` in front of the current head."""
        node = ListNode(value, next=self.head)
        self.head = node
        if self.tail is None:
            self.tail = node

    def insert_at_tail(self, value: Any) -> None:
        """Append ``value`` after the current tail."""
        node = ListNode(value)
        if self.tail is None:
            self.head = self.tail = node
        else:
            self.tail.next = node
            self.tail = node

    def insert_at_position(self, position: int, value: Any) -> None:
        """Insert ``value`` so that it ends up at ``position``."""
        _check_position(position)
        if position == 1:
            self.insert_at_head(value)
            return
        before = self._node_at(position - 1)
        if before.next is None:
            self.insert_at_tail(value)
            return
        before.next = ListNode(value, next=before.next)

    def delete_at(self, position: int) -> Any:
        """Remove the node at ``position`` and return its value."""
        _check_position(position)
        if self.head is None:
            raise IndexError("cannot delete from an empty list")
        if position == 1:
            removed = self.head
            self.head = removed.next
            if self.head is None:
                self.tail = None
        else:
            before = self._node_at(position - 1)
            removed = before.next
            if removed is None:
                raise IndexError(f"no node at position {position}")
            before.next = removed.next
            if removed is self.tail:
                self.tail = before
        removed.next = None
        return removed.value

    def _node_at(self, position: int) -> ListNode:
        node = self.head
        for _ in range(position - 1):
            if node is None:
                break
            node = node.next
        if node is None:
            raise IndexError(f"no node at position {position}")
        return node

    def __iter__(self) -> Iterator[Any]:
        node = self.head
        while node is not None:
            yield node.value
            node = node.next

    def __len__(self) -> int:
        return sum(1 for _ in self)


class DoublyLinkedList:
    """A doubly linked list tracking its head and tail; positions start at 1."""

    def __init__(self, values: Any = ()) -> None:
        self.head: ListNode | None = None
        self.tail: ListNode | None = None
        for value in values:
            self.insert_at_tail(value)

    def insert_at_head(self, value: Any) -> None:
        """Put ``value`` in front of the current head."""
        node = ListNode(value, next=self.head)
        if self.head is None:
            self.tail = node
        else:
            self.head.prev = node
        self.head = node

    def insert_at_tail(self, value: Any) -> None:
        """Append ``value`` after the current tail."""
        node = ListNode(value, prev=self.tail)
        if self.tail is None:
            self.head = node
        else:
            self.tail.next = node
        self.tail = node

    def insert_at_position(self, position: int, value: Any) -> None:
        """Insert ``value`` so that it ends up at ``position``."""
        _check_position(position)
        if position == 1:
            self.insert_at_head(value)
            return
        before = self._node_at(position - 1)
        if before.next is None:
            self.insert_at_tail(value)
            return
        node = ListNode(value, next=before.next, prev=before)
        before.next.prev = node
        before.next = node

    def delete_at(self, position: int) -> Any:
        """Remove the node at ``position`` and return its value."""
        _check_position(position)
        removed = self._node_at(position)
        if removed.prev is None:
            self.head = removed.next
        else:
            removed.prev.next = removed.next
        if removed.next is None:
            self.tail = removed.prev
        else:
            removed.next.prev = removed.prev
        removed.next = removed.prev = None
        return removed.value

    def _node_at(self, position: int) -> ListNode:
        node = self.head
        for _ in range(position - 1):
            if node is None:
                break
            node = node.next
        if node is None:
            raise IndexError(f"no node at position {position}")
        return node

    def __iter__(self) -> Iterator[Any]:
        node = self.head
        while node is not None:
            yield node.value
            node = node.next

    def __reversed__(self) -> Iterator[Any]:
        node = self.tail
        while node is not None:
            yield node.value
            node = node.prev

    def __len__(self) -> int:
        return sum(1 for _ in self)


class CircularLinkedList:
    """A circular singly linked list addressed through its ``tail`` node.

    Iteration starts at the tail and goes once round the circle.
    """

    def __init__(self) -> None:
        self.tail: ListNode | None = None

    def _find(self, value: Any) -> tuple[ListNode, ListNode]:
        """Return ``(previous, node)`` for the first node after the tail holding ``value``."""
        if self.tail is None:
            raise ValueError("list is empty")
        prev = self.tail
        node = prev.next
        while True:
            if node.value == value:
                return prev, node
            if node is self.tail:
                raise ValueError(f"{value!r} is not in the list")
            prev, node = node, node.next

    def insert_after(self, element: Any, value: Any) -> None:
        """Insert ``value`` after the node holding ``element``.

        In an empty list ``element`` is ignored and ``value`` becomes the only node.
        """
        if self.tail is None:
            node = ListNode(value)
            node.next = node
            self.tail = node
            return
        _, anchor = self._find(element)
        anchor.next = ListNode(value, next=anchor.next)

    def delete(self, value: Any) -> None:
        """Remove the node holding ``value``; raise ValueError if there is none."""
        prev, node = self._find(value)
        prev.next = node.next
        if node is prev:
            self.tail = None
        elif node is self.tail:
            self.tail = prev
        node.next = None

    def __iter__(self) -> Iterator[Any]:
        if self.tail is None:
            return
        node = self.tail
        while True:
            yield node.value
            node = node.next
            if node is self.tail:
                return

    def __len__(self) -> int:
        return sum(1 for _ in self)


def is_circular(head: ListNode | None) -> bool:
    """Return True if following ``next`` from ``head`` leads back to ``head``.

    An empty list counts as circular.
    """
    if head is None:
        return True
    node = head.next
    while node is not None and node is not head:
        node = node.next
    return node is head


def detect_loop(head: ListNode | None) -> bool:
    """Return True if following ``next`` from ``head`` ever revisits a node."""
    visited: set[int] = set()
    node = head
    while node is not None:
        if id(node) in visited:
            return True
        visited.add(id(node))
        node = node.next
    return False


def floyd_detect_loop(head: ListNode | None) -> ListNode | None:
    """Return the node where the slow and fast walkers meet, or None without a loop."""
    slow = fast = head
    while slow is not None and fast is not None:
        fast = fast.next
        if fast is not None:
            fast = fast.next
        slow = slow.next
        if slow is fast and slow is not None:
            return slow
    return None


def loop_start(head: ListNode | None) -> ListNode | None:
    """Return the first node of the loop, or None if there is no loop."""
    meeting = floyd_detect_loop(head)
    if meeting is None:
        return None
    slow = head
    while slow is not meeting:
        slow = slow.next
        meeting = meeting.next
    return slow


def remove_loop(head: ListNode | None) -> None:
    """Break the loop, if any, by cutting the link that closes it."""
    start = loop_start(head)
    if start is None:
        return
    node = start
    while node.next is not start:
        node = node.next
    node.next = None