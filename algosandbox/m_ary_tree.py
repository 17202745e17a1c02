"""A tree whose nodes may have any number of children."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class MAryTree:
    """A node holding a string value and an ordered list of children."""

    value: str
    children: list[MAryTree] = field(default_factory=list)

    def traverse(self) -> list[str]:
        """Return the values in preorder: a node, then each child subtree in turn."""
        values: list[str] = []
        stack = [self]
        while stack:
            node = stack.pop()
            values.append(node.value)
            stack.extend(reversed(node.children))
        return values