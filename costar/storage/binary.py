"""Big-endian binary graph and movie table files.

Graph file::

    int32 actor_count
    actor_count x (int32 code_units, UTF-16-BE name)
    int32 edge_count
    edge_count x (int32 movie_id, uint8 weight, int32 k, k x int32 node_id)

Movie file, repeated until EOF::

    int32 movie_id, int32 code_units, UTF-16-BE title

Text lengths count UTF-16 code units, so a surrogate pair counts as two. The
weight byte is the two's-complement byte of a weight in [0, 255]; it is read
back unsigned.
"""

from __future__ import annotations

import logging
import struct
from collections.abc import Iterable, Mapping
from pathlib import Path
from typing import BinaryIO

from costar.errors import CodecError
from costar.graph import GraphBuilder
from costar.models import Edge, MovieEntry
from costar.readonly import ReadonlyGraph

logger = logging.getLogger(__name__)

_INT = struct.Struct(">i")
_WEIGHT = struct.Struct(">B")
_TEXT_ENCODING = "utf-16-be"


def _write_int(stream: BinaryIO, value: int) -> None:
    stream.write(_INT.pack(value))


def _write_text(stream: BinaryIO, text: str) -> None:
    encoded = text.encode(_TEXT_ENCODING, errors="surrogatepass")
    _write_int(stream, len(encoded) // 2)
    stream.write(encoded)


def _read_exact(stream: BinaryIO, size: int, what: str) -> bytes:
    data = stream.read(size)
    if len(data) != size:
        raise CodecError(f"Truncated {what}: expected {size} bytes, got {len(data)}")
    return data


def _read_int(stream: BinaryIO, what: str) -> int:
    return _INT.unpack(_read_exact(stream, _INT.size, what))[0]


def _read_count(stream: BinaryIO, what: str) -> int:
    value = _read_int(stream, what)
    if value < 0:
        raise CodecError(f"Negative {what}: {value}")
    return value


def _read_text(stream: BinaryIO, what: str) -> str:
    units = _read_count(stream, f"{what} length")
    raw = _read_exact(stream, units * 2, what)
    return raw.decode(_TEXT_ENCODING, errors="surrogatepass")


def write_graph(graph: GraphBuilder, labels: Mapping[int, str], stream: BinaryIO) -> int:
    """Serialize ``graph`` and its actor table; returns bytes written."""
    start = stream.tell() if stream.seekable() else 0

    _write_int(stream, len(labels))
    for actor_id in sorted(labels):
        _write_text(stream, labels[actor_id])

    _write_int(stream, graph.edge_count)
    for edge, participants in graph.edges():
        _write_int(stream, edge.movie_id)
        stream.write(_WEIGHT.pack(edge.weight))
        _write_int(stream, len(participants))
        for node in sorted(participants):
            _write_int(stream, node)

    return (stream.tell() - start) if stream.seekable() else 0


def read_graph(stream: BinaryIO) -> ReadonlyGraph:
    actor_count = _read_count(stream, "actor count")
    actors = {actor_id: _read_text(stream, "actor name") for actor_id in range(actor_count)}

    adjacency: list[dict[int, Edge]] = [{} for _ in range(actor_count)]
    edge_count = _read_count(stream, "edge count")
    for _ in range(edge_count):
        movie_id = _read_int(stream, "edge movie id")
        weight = _WEIGHT.unpack(_read_exact(stream, _WEIGHT.size, "edge weight"))[0]
        edge = Edge(movie_id=movie_id, weight=weight)

        k = _read_count(stream, "edge participant count")
        participants = [_read_int(stream, "edge participant") for _ in range(k)]
        for node in participants:
            if not 0 <= node < actor_count:
                raise CodecError(f"Edge {movie_id} references node {node} outside [0, {actor_count})")

        for source in participants:
            adjacent = adjacency[source]
            for target in participants:
                if source == target:
                    continue
                existing = adjacent.get(target)
                if existing is None or edge.weight < existing.weight:
                    adjacent[target] = edge

    return ReadonlyGraph(adjacency, actors, edge_count)


def write_movies(movies: Iterable[MovieEntry], stream: BinaryIO) -> int:
    written = 0
    for movie in sorted(movies, key=lambda entry: entry.movie_id):
        _write_int(stream, movie.movie_id)
        _write_text(stream, movie.title)
        written += 1
    return written


def read_movies(stream: BinaryIO) -> dict[int, str]:
    movies: dict[int, str] = {}
    while True:
        head = stream.read(_INT.size)
        if not head:
            return movies
        if len(head) != _INT.size:
            raise CodecError(f"Truncated movie id: expected {_INT.size} bytes, got {len(head)}")
        movie_id = _INT.unpack(head)[0]
        movies[movie_id] = _read_text(stream, "movie title")


class BinaryGraphStore:
    """Path-based access to a graph file and an optional movie table."""

    def __init__(self, graph_path: str | Path, movies_path: str | Path | None = None) -> None:
        self.graph_path = Path(graph_path)
        self.movies_path = Path(movies_path) if movies_path else None

    def save_graph(self, graph: GraphBuilder, labels: Mapping[int, str]) -> int:
        self.graph_path.parent.mkdir(parents=True, exist_ok=True)
        with self.graph_path.open("wb") as handle:
            size = write_graph(graph, labels, handle)
        logger.info(
            "Saved graph nodes=%s edges=%s actors=%s to %s (%s bytes)",
            graph.node_count,
            graph.edge_count,
            len(labels),
            self.graph_path,
            size,
        )
        return size

    def load_graph(self) -> ReadonlyGraph:
        with self.graph_path.open("rb") as handle:
            graph = read_graph(handle)
        logger.info("Loaded graph nodes=%s edges=%s from %s", graph.node_count, graph.edge_count, self.graph_path)
        return graph

    def save_movies(self, movies: Iterable[MovieEntry]) -> int:
        if self.movies_path is None:
            raise ValueError("movies_path is not configured")
        self.movies_path.parent.mkdir(parents=True, exist_ok=True)
        with self.movies_path.open("wb") as handle:
            count = write_movies(movies, handle)
        logger.info("Saved movie table movies=%s to %s", count, self.movies_path)
        return count

    def load_movies(self) -> dict[int, str]:
        if self.movies_path is None or not self.movies_path.exists():
            return {}
        with self.movies_path.open("rb") as handle:
            return read_movies(handle)
