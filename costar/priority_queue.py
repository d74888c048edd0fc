"""Indexed binary min-heap with amortized decrease-key.

Entries are ``(node, priority, metadata)`` triples keyed by a hashable node.
A side index maps each live node to its array position so priority and
metadata lookups stay O(1).
"""

from __future__ import annotations

from collections.abc import Hashable
from typing import Generic, TypeVar

NodeT = TypeVar("NodeT", bound=Hashable)
MetaT = TypeVar("MetaT")


def parent_index(index: int) -> int:
    """Parent slot of ``index``.

    This heap uses ``index // 2`` rather than the textbook ``(index - 1) // 2``.
    Slot 0 is the root and never asks for a parent. Sift-down follows the same
    relation through :func:`child_indices`.
    """
    return index // 2


def child_indices(index: int) -> tuple[int, ...]:
    # Inverse of parent_index: 0 -> 1, then i -> 2i, 2i + 1.
    if index == 0:
        return (1,)
    return (2 * index, 2 * index + 1)


class IndexedPriorityQueue(Generic[NodeT, MetaT]):
    """Min-heap over node identifiers with per-node metadata."""

    def __init__(self) -> None:
        self._nodes: list[NodeT] = []
        self._entries: list[tuple[int, MetaT]] = []
        self._positions: dict[NodeT, int] = {}
        # Logical size. Slots at or beyond it are stale and get reused.
        self._size = 0

    def __len__(self) -> int:
        return self._size

    def __bool__(self) -> bool:
        return self._size > 0

    def __contains__(self, node: object) -> bool:
        return node in self._positions

    def insert_or_decrease_priority(self, node: NodeT, priority: int, metadata: MetaT) -> bool:
        """Insert ``node`` or lower its priority.

        Returns True when the queue changed. A present node is only updated
        when ``priority`` is strictly smaller than its current one.
        """
        position = self._positions.get(node)
        if position is None:
            self._insert(node, priority, metadata)
            return True

        current_priority, _ = self._entries[position]
        if priority >= current_priority:
            return False

        self._entries[position] = (priority, metadata)
        self._sift_up(position)
        return True

    def get_priority(self, node: NodeT) -> int | None:
        position = self._positions.get(node)
        if position is None:
            return None
        return self._entries[position][0]

    def get_metadata(self, node: NodeT) -> MetaT | None:
        position = self._positions.get(node)
        if position is None:
            return None
        return self._entries[position][1]

    def peek_min(self) -> NodeT | None:
        if self._size == 0:
            return None
        return self._nodes[0]

    def extract_min(self) -> NodeT | None:
        if self._size == 0:
            return None

        root = self._nodes[0]
        last = self._size - 1
        del self._positions[root]
        self._size = last

        if last > 0:
            self._nodes[0] = self._nodes[last]
            self._entries[0] = self._entries[last]
            self._positions[self._nodes[0]] = 0
            self._sift_down(0)
        return root

    def priorities(self) -> list[int]:
        """Priorities of the live slots in array order."""
        return [priority for priority, _ in self._entries[: self._size]]

    def _insert(self, node: NodeT, priority: int, metadata: MetaT) -> None:
        position = self._size
        if position < len(self._nodes):
            self._nodes[position] = node
            self._entries[position] = (priority, metadata)
        else:
            self._nodes.append(node)
            self._entries.append((priority, metadata))

        self._positions[node] = position
        self._size += 1
        self._sift_up(position)

    def _sift_up(self, index: int) -> None:
        while index > 0:
            parent = parent_index(index)
            if self._entries[index][0] >= self._entries[parent][0]:
                return
            self._swap(index, parent)
            index = parent

    def _sift_down(self, index: int) -> None:
        while True:
            smallest = index
            for child in child_indices(index):
                if child >= self._size:
                    break
                if self._entries[child][0] < self._entries[smallest][0]:
                    smallest = child
            if smallest == index:
                return
            self._swap(index, smallest)
            index = smallest

    def _swap(self, i: int, j: int) -> None:
        self._nodes[i], self._nodes[j] = self._nodes[j], self._nodes[i]
        self._entries[i], self._entries[j] = self._entries[j], self._entries[i]
        self._positions[self._nodes[i]] = i
        self._positions[self._nodes[j]] = j
