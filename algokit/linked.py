"""A singly linked list and a binary tree node with post-order traversal."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any


@dataclass
class ListNode:
    """One cell of a singly linked list."""

    value: Any
    next: ListNode | None = None


class LinkedList:
    """A singly linked list; positions are 1-based."""

    def __init__(self, values: Iterable = ()):
        self.head: ListNode | None = None
        tail = None
        for value in values:
            node = ListNode(value)
            if tail is None:
                self.head = node
            else:
                tail.next = node
            tail = node

    def _nodes(self) -> Iterator[ListNode]:
        node = self.head
        while node is not None:
            yield node
            node = node.next

    def __iter__(self) -> Iterator:
        return (node.value for node in self._nodes())

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"

    def _node_at(self, position: int) -> ListNode:
        for index, node in enumerate(self._nodes(), start=1):
            if index == position:
                return node
        raise IndexError(f"no node at position {position}")

    def push_front(self, value) -> None:
        """Insert ``value`` before the first node."""
        self.head = ListNode(value, self.head)

    def push_back(self, value) -> None:
        """Append ``value`` after the last node."""
        node = ListNode(value)
        if self.head is None:
            self.head = node
            return
        *_, last = self._nodes()
        last.next = node

    def insert_at(self, position: int, value) -> None:
        """Insert ``value`` so that it ends up at ``position`` (1 to len + 1)."""
        if position == 1:
            self.push_front(value)
            return
        if position < 1:
            raise IndexError(f"no position {position}")
        before = self._node_at(position - 1)
        before.next = ListNode(value, before.next)

    def remove_front(self):
        """Remove the first node and return its value."""
        if self.head is None:
            raise IndexError("remove from empty list")
        value = self.head.value
        self.head = self.head.next
        return value

    def remove_back(self):
        """Remove the last node and return its value."""
        if self.head is None:
            raise IndexError("remove from empty list")
        if self.head.next is None:
            return self.remove_front()
        current = self.head
        while current.next.next is not None:
            current = current.next
        value = current.next.value
        current.next = None
        return value

    def remove_at(self, position: int):
        """Remove the node at ``position`` (1 to len) and return its value."""
        if position == 1:
            return self.remove_front()
        if position < 1:
            raise IndexError(f"no position {position}")
        before = self._node_at(position - 1)
        if before.next is None:
            raise IndexError(f"no node at position {position}")
        value = before.next.value
        before.next = before.next.next
        return value

    def reverse(self) -> None:
        """Reverse the list in place by relinking nodes one by one."""
        previous = None
        current = self.head
        while current is not None:
            current.next, previous, current = previous, current, current.next
        self.head = previous

    def reverse_recursive(self) -> None:
        """Reverse the list in place by recursing to the tail."""

        def flip(node: ListNode | None) -> ListNode | None:
            if node is None or node.next is None:
                return node
            new_head = flip(node.next)
            node.next.next = node
            node.next = None
            return new_head

        self.head = flip(self.head)


@dataclass
class TreeNode:
    """A binary tree node."""

    value: Any
    left: TreeNode | None = None
    right: TreeNode | None = None


def postorder(node: TreeNode | None) -> Iterator:
    """Yield values left subtree first, then right subtree, then the node."""
    if node is None:
        return
    yield from postorder(node.left)
    yield from postorder(node.right)
    yield node.value