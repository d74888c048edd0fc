"""Reachability pruning over a built graph."""

from __future__ import annotations

from collections import deque
from collections.abc import Mapping

from costar.graph import AdjacencyGraph
from costar.models import Edge


def reachable_from(graph: AdjacencyGraph, root: int) -> list[tuple[int, Mapping[int, Edge]]]:
    """Breadth-first scan from ``root``.

    Returns every reachable node once, in visit order, paired with its
    original adjacency map. Unreachable nodes are dropped.
    """
    visited = {root}
    order = [root]
    queue: deque[int] = deque([root])

    while queue:
        current = queue.popleft()
        for neighbor in graph.neighbors(current):
            if neighbor in visited:
                continue
            visited.add(neighbor)
            order.append(neighbor)
            queue.append(neighbor)

    return [(node, graph.neighbors(node)) for node in order]
