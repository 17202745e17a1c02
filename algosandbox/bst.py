"""A binary search tree of numeric values."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Optional


@dataclass
class BST:
    """A binary search tree node; smaller values go left, the rest go right."""

    value: float
    left: Optional[BST] = None
    right: Optional[BST] = None

    def insert_recursively(self, node: BST) -> BST:
        """Attach ``node`` below this tree, descending recursively; returns self."""
        if node.value < self.value:
            if self.left is None:
                self.left = node
            else:
                self.left.insert_recursively(node)
        elif self.right is None:
            self.right = node
        else:
            self.right.insert_recursively(node)
        return self

    def insert_iteratively(self, node: BST) -> BST:
        """Attach ``node`` below this tree, descending in a loop; returns self."""
        current = self
        while True:
            if node.value < current.value:
                if current.left is None:
                    current.left = node
                    break
                current = current.left
            else:
                if current.right is None:
                    current.right = node
                    break
                current = current.right
        return self

    def traverse_preorder(self) -> Iterator[BST]:
        """Yield nodes in node-left-right order."""
        stack = [self]
        while stack:
            node = stack.pop()
            yield node
            if node.right is not None:
                stack.append(node.right)
            if node.left is not None:
                stack.append(node.left)

    def traverse_inorder(self) -> Iterator[BST]:
        """Yield nodes in left-node-right order."""
        stack: list[BST] = []
        node: Optional[BST] = self
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node
            node = node.right

    def find(self, value: float) -> Optional[BST]:
        """Return the subtree rooted at ``value``, or None if it is absent."""
        node: Optional[BST] = self
        while node is not None and node.value != value:
            node = node.right if node.value < value else node.left
        return node

    def inorder_successor(self, value: float) -> tuple[Optional[BST], Optional[BST]]:
        """Return the first node holding ``value`` and the node after it in order."""
        nodes = self.traverse_inorder()
        for node in nodes:
            if node.value == value:
                return node, next(nodes, None)
        return None, None

    def delete(self, value: float) -> BST:
        """Remove ``value`` from the tree, rebuilding it in place; returns self.

        Raises ValueError if the value is not in the tree.
        """
        root = BST(self.value, self.left, self.right)
        target, successor = root.inorder_successor(value)
        if target is None:
            raise ValueError(f"value {value!r} not found in tree")

        if target.is_leaf():
            rebuilt = _rebuild(root, root.value, skip=target)
        elif (child := target._only_child()) is not None:
            root_value = root.value
            target.value = child.value
            rebuilt = _rebuild(root, root_value, skip=child)
        else:
            assert successor is not None
            target.value = successor.value
            rebuilt = _rebuild(root, root.value, skip=successor)

        self.value, self.left, self.right = rebuilt.value, rebuilt.left, rebuilt.right
        return self

    def is_leaf(self) -> bool:
        """True when the node has no children."""
        return self.left is None and self.right is None

    def branch_vectors(self) -> list[list[float]]:
        """Return the values along every root-to-leaf path, left to right."""
        return list(self._branches([]))

    def _branches(self, prefix: list[float]) -> Iterator[list[float]]:
        branch = [*prefix, self.value]
        if self.is_leaf():
            yield branch
            return
        for child in (self.left, self.right):
            if child is not None:
                yield from child._branches(branch)

    def _only_child(self) -> Optional[BST]:
        if self.left is not None and self.right is None:
            return self.left
        if self.right is not None and self.left is None:
            return self.right
        return None


def _rebuild(root: BST, root_value: float, skip: BST) -> BST:
    rebuilt = BST(root_value)
    for node in root.traverse_preorder():
        if node is not skip and node is not root:
            rebuilt.insert_iteratively(BST(node.value))
    return rebuilt