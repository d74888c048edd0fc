"""Renumber a pruned node set into a fresh dense graph."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field

from costar.graph import GraphBuilder
from costar.models import Edge, MovieEntry


@dataclass
class AssemblyResult:
    graph: GraphBuilder
    labels: dict[int, str]
    surviving_actors: set[str]
    movies: set[MovieEntry] = field(default_factory=set)
    # original node id -> new node id
    translation: dict[int, int] = field(default_factory=dict)


def assemble_pruned_graph(
    reachable: list[tuple[int, Mapping[int, Edge]]],
    actor_labels: Mapping[int, str],
    movies_by_actor: Mapping[str, Iterable[MovieEntry]] | None = None,
) -> AssemblyResult:
    """Build the renumbered graph for the nodes in ``reachable``.

    New ids follow the order of ``reachable``. Every adjacency entry is
    replayed as ``add_edge(edge, [new_i, new_j])``; since adjacency is
    symmetric each pair is presented twice and ends up linked.
    """
    translation = {original: new_id for new_id, (original, _) in enumerate(reachable)}

    graph = GraphBuilder(len(reachable))
    labels: dict[int, str] = {}
    surviving: set[str] = set()

    for new_id, (original, adjacent) in enumerate(reachable):
        label = actor_labels[original]
        labels[new_id] = label
        surviving.add(label)

        for neighbor, edge in adjacent.items():
            other = translation.get(neighbor)
            if other is None:
                # Reachable sets are closed under adjacency; a miss means the
                # caller passed a partial list.
                raise ValueError(f"node {neighbor} adjacent to {original} is not in the reachable set")
            graph.add_edge(Edge(movie_id=edge.movie_id, weight=edge.weight), [new_id, other])

    movies: set[MovieEntry] = set()
    if movies_by_actor is not None:
        for actor in surviving:
            movies.update(movies_by_actor.get(actor, ()))

    return AssemblyResult(
        graph=graph,
        labels=labels,
        surviving_actors=surviving,
        movies=movies,
        translation=translation,
    )
