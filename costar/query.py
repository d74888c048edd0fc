"""Name-level path queries over a read-only graph."""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping

from costar.errors import UnknownActorError
from costar.models import PathHop, PathResult, Segment
from costar.readonly import ReadonlyGraph

logger = logging.getLogger(__name__)


def resolve_actor(graph: ReadonlyGraph, name: str) -> int:
    node = graph.find_actor(name)
    if node is None:
        raise UnknownActorError(name)
    return node


def hops_from_segments(
    graph: ReadonlyGraph,
    segments: list[Segment],
    movies: Mapping[int, str] | None = None,
) -> list[PathHop]:
    """Turn target-to-source segments into source-to-target hops."""
    titles = movies or {}
    hops: list[PathHop] = []
    for segment in reversed(segments):
        hops.append(
            PathHop(
                source=graph.actor_label(segment.other_node) or str(segment.other_node),
                target=graph.actor_label(segment.node) or str(segment.node),
                movie_id=segment.edge.movie_id,
                movie_title=titles.get(segment.edge.movie_id),
                weight=segment.edge.weight,
            )
        )
    return hops


def find_path(
    graph: ReadonlyGraph,
    source: str,
    target: str,
    *,
    movies: Mapping[int, str] | None = None,
    should_cancel: Callable[[], bool] | None = None,
) -> PathResult:
    from_node = resolve_actor(graph, source)
    to_node = resolve_actor(graph, target)

    segments = graph.get_shortest_path(from_node, to_node, should_cancel=should_cancel)
    if not segments:
        logger.info("No path between %r and %r", source, target)
        return PathResult(source=source, target=target)

    hops = hops_from_segments(graph, segments, movies)
    return PathResult(source=source, target=target, hops=hops, total_weight=graph.total_weight(segments))
