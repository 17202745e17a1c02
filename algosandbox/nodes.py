"""Plain node types for linked lists and binary trees."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional


@dataclass
class ListNode:
    """A node of a singly or doubly linked list of integers.

    The back link is left out of comparison and repr so cycles through it
    do not recurse.
    """

    val: int = 0
    next: Optional[ListNode] = None
    prev: Optional[ListNode] = field(default=None, compare=False, repr=False)


@dataclass
class TreeNode:
    """A node of a binary tree of integers."""

    val: int = 0
    left: Optional[TreeNode] = None
    right: Optional[TreeNode] = None