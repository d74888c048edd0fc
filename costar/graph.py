"""Mutable co-star graph used during the build phase."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from typing import Protocol

from costar.models import Edge


class AdjacencyGraph(Protocol):
    @property
    def node_count(self) -> int: ...

    @property
    def edge_count(self) -> int: ...

    def neighbors(self, node: int) -> Mapping[int, Edge]: ...


class GraphBuilder:
    """Adjacency over dense node ids with value-deduplicated edges.

    ``add_edge`` only seeds the membership table the first time an edge value
    is seen. Node pairs get linked when the same edge value shows up again,
    and only among the ids passed in that later call.
    """

    def __init__(self, node_count: int) -> None:
        if node_count < 0:
            raise ValueError("node_count must be non-negative")
        self._adjacency: list[dict[int, Edge]] = [{} for _ in range(node_count)]
        self._members: dict[Edge, set[int]] = {}

    @property
    def node_count(self) -> int:
        return len(self._adjacency)

    @property
    def edge_count(self) -> int:
        return len(self._members)

    def add_edge(self, edge: Edge, node_ids: Iterable[int]) -> None:
        ids = list(node_ids)
        for node in ids:
            self._check_node(node)

        participants = self._members.get(edge)
        if participants is None:
            self._members[edge] = set(ids)
            return

        participants.update(ids)
        self._make_adjacent(ids, edge)

    def neighbors(self, node: int) -> Mapping[int, Edge]:
        self._check_node(node)
        return self._adjacency[node]

    def edges(self) -> Iterator[tuple[Edge, frozenset[int]]]:
        for edge, participants in self._members.items():
            yield edge, frozenset(participants)

    def participants(self, edge: Edge) -> frozenset[int] | None:
        members = self._members.get(edge)
        if members is None:
            return None
        return frozenset(members)

    def max_degree(self) -> int:
        return max((len(adjacent) for adjacent in self._adjacency), default=0)

    def _make_adjacent(self, ids: list[int], edge: Edge) -> None:
        for source in ids:
            adjacent = self._adjacency[source]
            for target in ids:
                if source == target:
                    continue
                existing = adjacent.get(target)
                if existing is None or edge.weight < existing.weight:
                    adjacent[target] = edge

    def _check_node(self, node: int) -> None:
        if not 0 <= node < len(self._adjacency):
            raise IndexError(f"node id {node} outside [0, {len(self._adjacency)})")
