"""Core Pydantic domain models for costar."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

MAX_WEIGHT = 255


class Edge(BaseModel):
    """One shared movie between co-stars.

    Equality and hashing are by value, so two unrelated pairs linked by the
    same ``(movie_id, weight)`` collapse onto the same edge.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    movie_id: int
    weight: int = Field(ge=0, le=MAX_WEIGHT)


class Segment(BaseModel):
    """A directed hop ``other_node -> node`` via ``edge``."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    node: int
    other_node: int
    edge: Edge


SENTINEL_SEGMENT = Segment(node=-1, other_node=-1, edge=Edge(movie_id=-1, weight=0))


class MovieEntry(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    movie_id: int
    title: str
    year: int
    cast: tuple[str, ...] = ()

    def __hash__(self) -> int:
        return hash(self.movie_id)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, MovieEntry):
            return NotImplemented
        return self.movie_id == other.movie_id


class PathHop(BaseModel):
    model_config = ConfigDict(extra="forbid")

    source: str
    target: str
    movie_id: int
    movie_title: str | None = None
    weight: int


class PathResult(BaseModel):
    model_config = ConfigDict(extra="forbid")

    source: str
    target: str
    hops: list[PathHop] = Field(default_factory=list)
    total_weight: int = 0

    @property
    def found(self) -> bool:
        return bool(self.hops)


class BuildReport(BaseModel):
    model_config = ConfigDict(extra="forbid")

    processed_records: int
    skipped_records: int
    actor_count: int
    full_edge_count: int
    pruned_node_count: int
    pruned_edge_count: int
    pruned_movie_count: int
    prune_root: str
    profile: dict[str, float] = Field(default_factory=dict)

    @property
    def pruned_actor_count(self) -> int:
        return self.actor_count - self.pruned_node_count
