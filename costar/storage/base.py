"""Storage backend interfaces for persisted co-star graphs."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Protocol

from costar.graph import GraphBuilder
from costar.models import MovieEntry
from costar.readonly import ReadonlyGraph


class GraphStore(Protocol):
    def save_graph(self, graph: GraphBuilder, labels: Mapping[int, str]) -> int: ...

    def load_graph(self) -> ReadonlyGraph: ...

    def save_movies(self, movies: Iterable[MovieEntry]) -> int: ...

    def load_movies(self) -> dict[int, str]: ...
