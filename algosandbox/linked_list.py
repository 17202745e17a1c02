"""A doubly linked list addressed through any of its nodes."""

from __future__ import annotations

from typing import Iterable, Optional


class LinkedListNode:
    """A node of a doubly linked list holding a numeric value."""

    __slots__ = ("value", "prev", "next")

    def __init__(
        self,
        value: float,
        prev: Optional[LinkedListNode] = None,
        next: Optional[LinkedListNode] = None,  # noqa: A002
    ) -> None:
        self.value = value
        self.prev = prev
        self.next = next

    def __repr__(self) -> str:
        return f"LinkedListNode({self.value!r})"

    def is_head(self) -> bool:
        """True when no node precedes this one."""
        return self.prev is None

    def is_tail(self) -> bool:
        """True when no node follows this one."""
        return self.next is None

    def head(self) -> LinkedListNode:
        """Return the first node of the list."""
        node = self
        while node.prev is not None:
            node = node.prev
        return node

    def tail(self) -> LinkedListNode:
        """Return the last node of the list."""
        node = self
        while node.next is not None:
            node = node.next
        return node

    def append(self, node: LinkedListNode) -> None:
        """Link ``node`` after the last node of the list."""
        tail = self.tail()
        tail.next = node
        node.prev = tail

    def prepend(self, node: LinkedListNode) -> None:
        """Link ``node`` before the first node of the list."""
        head = self.head()
        head.prev = node
        node.next = head

    def search(self, needle: float) -> Optional[LinkedListNode]:
        """Find a node holding ``needle``, looking forward first, then backward."""
        node: Optional[LinkedListNode] = self
        while node is not None:
            if node.value == needle:
                return node
            node = node.next
        node = self.prev
        while node is not None:
            if node.value == needle:
                return node
            node = node.prev
        return None

    def remove(self, needle: float) -> None:
        """Unlink the node holding ``needle``; does nothing if there is none."""
        target = self.search(needle)
        if target is None:
            return
        prev, following = target.prev, target.next
        if prev is not None:
            prev.next = following
        if following is not None:
            following.prev = prev

    def insert_after(self, node: LinkedListNode, mount_point: float) -> None:
        """Link ``node`` right after the node holding ``mount_point``, if any."""
        anchor = self.search(mount_point)
        if anchor is None:
            return
        following = anchor.next
        anchor.next = node
        node.prev = anchor
        node.next = following
        if following is not None:
            following.prev = node


def build(nodes: Iterable[LinkedListNode]) -> Optional[LinkedListNode]:
    """Link the nodes in the given order and return the first, or None if empty."""
    items = list(nodes)
    if not items:
        return None
    for prev, following in zip(items, items[1:]):
        prev.next = following
        following.prev = prev
    items[0].prev = None
    items[-1].next = None
    return items[0]