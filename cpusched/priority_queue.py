"""A min-priority queue stored as a linked complete binary tree."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Optional

Comparator = Callable[[Any, Any], int]


@dataclass(eq=False)
class HeapNode:
    """One slot of the heap tree; its data may move between nodes."""

    data: Any
    left: Optional["HeapNode"] = field(default=None, repr=False)
    right: Optional["HeapNode"] = field(default=None, repr=False)
    parent: Optional["HeapNode"] = field(default=None, repr=False)


class PriorityQueue:
    """Min-heap ordered by a three-way comparison function.

    ``cmp(a, b)`` returns a negative number when ``a`` comes before ``b``.
    """

    def __init__(self, cmp: Comparator) -> None:
        self._cmp = cmp
        self.root: Optional[HeapNode] = None
        self._size = 0

    def __len__(self) -> int:
        return self._size

    def is_empty(self) -> bool:
        return self._size == 0

    def _node_at(self, index: int) -> HeapNode:
        """Return the node at 1-based level-order position ``index``."""
        node = self.root
        for bit in range(index.bit_length() - 2, -1, -1):
            node = node.right if (index >> bit) & 1 else node.left
        return node

    def _sift_up(self, node: HeapNode) -> None:
        while node.parent is not None and self._cmp(node.data, node.parent.data) < 0:
            node.data, node.parent.data = node.parent.data, node.data
            node = node.parent

    def _sift_down(self, node: HeapNode) -> None:
        while True:
            smallest = node
            for child in (node.left, node.right):
                if child is not None and self._cmp(child.data, smallest.data) < 0:
                    smallest = child
            if smallest is node:
                return
            node.data, smallest.data = smallest.data, node.data
            node = smallest

    def push(self, item: Any) -> HeapNode:
        """Insert ``item`` and return the tree node it was placed in."""
        node = HeapNode(item)
        self._size += 1
        if self.root is None:
            self.root = node
            return node
        parent = self._node_at(self._size // 2)
        node.parent = parent
        if self._size % 2 == 0:
            parent.left = node
        else:
            parent.right = node
        self._sift_up(node)
        return node

    def top(self) -> Any:
        """Return the smallest item without removing it."""
        if self.root is None:
            raise IndexError("top of an empty priority queue")
        return self.root.data

    def pop(self) -> Any:
        """Remove and return the smallest item."""
        if self.root is None:
            raise IndexError("pop from an empty priority queue")
        popped = self.root.data
        if self._size == 1:
            self.root = None
            self._size = 0
            return popped
        last = self._node_at(self._size)
        self.root.data = last.data
        if last.parent.left is last:
            last.parent.left = None
        else:
            last.parent.right = None
        last.parent = None
        self._size -= 1
        self._sift_down(self.root)
        return popped

    def node_value_changed(self, node: HeapNode) -> None:
        """Restore heap order after the data held by ``node`` changed."""
        if self._size == 0 or node is None:
            return
        if node.parent is not None and self._cmp(node.data, node.parent.data) < 0:
            self._sift_up(node)
        else:
            self._sift_down(node)