"""Dijkstra shortest path over a read-only co-star graph.

Predecessors are never stored in a separate array: each queued node carries
the segment that produced its best known distance as heap metadata, and that
segment is copied into the path map at the moment the node is finalized.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from costar.errors import PathInvariantError, QueryCancelledError
from costar.graph import AdjacencyGraph
from costar.models import SENTINEL_SEGMENT, Segment
from costar.priority_queue import IndexedPriorityQueue

logger = logging.getLogger(__name__)


def shortest_path(
    graph: AdjacencyGraph,
    from_node: int,
    to_node: int,
    *,
    should_cancel: Callable[[], bool] | None = None,
) -> list[Segment]:
    """Return the minimum-weight path as segments ordered target to source.

    An empty list means no path exists (or ``from_node == to_node``).
    """
    for node in (from_node, to_node):
        if not 0 <= node < graph.node_count:
            raise IndexError(f"node id {node} outside [0, {graph.node_count})")
    if from_node == to_node:
        return []

    queue: IndexedPriorityQueue[int, Segment] = IndexedPriorityQueue()
    queue.insert_or_decrease_priority(from_node, 0, SENTINEL_SEGMENT)
    finalized: set[int] = set()
    paths: dict[int, Segment] = {}

    while len(finalized) < graph.node_count:
        if should_cancel is not None and should_cancel():
            raise QueryCancelledError(f"path query {from_node} -> {to_node} cancelled after {len(finalized)} nodes")

        current = queue.peek_min()
        if current is None:
            logger.debug("No path %s -> %s (explored %s nodes)", from_node, to_node, len(finalized))
            return []

        current_priority = queue.get_priority(current)
        segment = queue.get_metadata(current)
        if current_priority is None or segment is None:
            raise PathInvariantError(f"queue index lost node {current}")
        queue.extract_min()

        for neighbor, edge in graph.neighbors(current).items():
            if neighbor in finalized:
                continue
            queue.insert_or_decrease_priority(
                neighbor,
                current_priority + edge.weight,
                Segment(node=neighbor, other_node=current, edge=edge),
            )

        finalized.add(current)
        paths[current] = segment

        if current == to_node:
            logger.debug("Path %s -> %s settled at %s after %s nodes", from_node, to_node, current_priority, len(finalized))
            return _reconstruct(paths, from_node, to_node)

    raise PathInvariantError(f"target {to_node} never finalized from {from_node}")


def _reconstruct(paths: dict[int, Segment], from_node: int, to_node: int) -> list[Segment]:
    segments: list[Segment] = []
    segment = paths[to_node]
    segments.append(segment)
    while segment.other_node != from_node:
        segment = paths[segment.other_node]
        segments.append(segment)
    return segments


def path_weight(segments: list[Segment]) -> int:
    return sum(segment.edge.weight for segment in segments)
