"""Immutable co-star graph used for path queries."""

from __future__ import annotations

from collections.abc import Callable, Iterator, Mapping, Sequence
from types import MappingProxyType

from costar.graph import GraphBuilder
from costar.models import Edge, Segment
from costar.pathfinder import path_weight, shortest_path


class ReadonlyGraph:
    """Adjacency plus actor table, frozen after construction.

    Safe to share between queries as long as they do not overlap; each query
    allocates its own priority queue and visited set.
    """

    def __init__(
        self,
        adjacency: Sequence[Mapping[int, Edge]],
        actor_table: Mapping[int, str],
        edge_count: int,
    ) -> None:
        self._nodes: tuple[Mapping[int, Edge], ...] = tuple(MappingProxyType(dict(adjacent)) for adjacent in adjacency)
        self._actors: Mapping[int, str] = MappingProxyType(dict(actor_table))
        self._edge_count = edge_count
        self._ids_by_name: dict[str, int] | None = None

    @classmethod
    def from_builder(cls, graph: GraphBuilder, actor_table: Mapping[int, str]) -> ReadonlyGraph:
        adjacency = [graph.neighbors(node) for node in range(graph.node_count)]
        return cls(adjacency, actor_table, graph.edge_count)

    @property
    def node_count(self) -> int:
        return len(self._nodes)

    @property
    def edge_count(self) -> int:
        return self._edge_count

    def neighbors(self, node: int) -> Mapping[int, Edge]:
        return self._nodes[node]

    def actors(self) -> Iterator[tuple[int, str]]:
        for actor_id in sorted(self._actors):
            yield actor_id, self._actors[actor_id]

    def actor_label(self, node: int) -> str | None:
        return self._actors.get(node)

    def find_actor(self, name: str) -> int | None:
        if self._ids_by_name is None:
            self._ids_by_name = {label: actor_id for actor_id, label in self._actors.items()}
        return self._ids_by_name.get(name)

    def get_shortest_path(
        self,
        from_node: int,
        to_node: int,
        *,
        should_cancel: Callable[[], bool] | None = None,
    ) -> list[Segment]:
        return shortest_path(self, from_node, to_node, should_cancel=should_cancel)

    @staticmethod
    def total_weight(segments: list[Segment]) -> int:
        return path_weight(segments)
