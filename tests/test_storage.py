import io
import struct
from pathlib import Path

import pytest

from costar.config import CostarConfig
from costar.errors import CodecError
from costar.graph import GraphBuilder
from costar.models import Edge, MovieEntry
from costar.pipeline import GraphPipeline
from costar.storage import BinaryGraphStore, read_graph, read_movies, write_graph, write_movies


def _encode(graph: GraphBuilder, labels: dict[int, str]) -> bytes:
    buffer = io.BytesIO()
    write_graph(graph, labels, buffer)
    return buffer.getvalue()


def test_round_trip_preserves_counts_and_adjacency(sample_lines: list[str]) -> None:
    outcome = GraphPipeline(CostarConfig()).build_from_lines(sample_lines)
    graph = outcome.assembly.graph

    decoded = read_graph(io.BytesIO(_encode(graph, outcome.assembly.labels)))

    assert decoded.node_count == graph.node_count
    assert decoded.edge_count == graph.edge_count
    for node in range(graph.node_count):
        assert dict(decoded.neighbors(node)) == dict(graph.neighbors(node))
        assert decoded.actor_label(node) == outcome.assembly.labels[node]


def test_round_trip_of_multi_member_edges() -> None:
    graph = GraphBuilder(4)
    shared = Edge(movie_id=11, weight=200)
    cheap = Edge(movie_id=12, weight=3)
    for edge, members in ((shared, [0, 1, 2]), (cheap, [1, 2]), (Edge(movie_id=13, weight=90), [2, 3])):
        graph.add_edge(edge, members)
        graph.add_edge(edge, members)
    labels = {0: "Ann Lee", 1: "Bo Day", 2: "Cy Fox", 3: "Di Ray"}

    decoded = read_graph(io.BytesIO(_encode(graph, labels)))

    assert decoded.edge_count == 3
    assert decoded.neighbors(1)[2] == cheap
    assert decoded.neighbors(0)[2] == shared
    for node in range(4):
        assert dict(decoded.neighbors(node)) == dict(graph.neighbors(node))


def test_layout_is_big_endian_utf16_with_unsigned_weight_byte() -> None:
    graph = GraphBuilder(2)
    edge = Edge(movie_id=258, weight=200)
    graph.add_edge(edge, [0, 1])
    graph.add_edge(edge, [0, 1])

    data = _encode(graph, {0: "Zoë", 1: "A"})

    expected = b"".join(
        [
            struct.pack(">i", 2),
            struct.pack(">i", 3),
            "Zoë".encode("utf-16-be"),
            struct.pack(">i", 1),
            "A".encode("utf-16-be"),
            struct.pack(">i", 1),
            struct.pack(">i", 258),
            bytes([200]),
            struct.pack(">i", 2),
            struct.pack(">i", 0),
            struct.pack(">i", 1),
        ]
    )
    assert data == expected


def test_name_length_counts_utf16_code_units() -> None:
    graph = GraphBuilder(1)
    name = "Star \U0001f3ac"

    data = _encode(graph, {0: name})

    assert struct.unpack(">i", data[4:8])[0] == 7
    assert read_graph(io.BytesIO(data)).actor_label(0) == name


def test_truncated_graph_raises_codec_error(sample_lines: list[str]) -> None:
    outcome = GraphPipeline(CostarConfig()).build_from_lines(sample_lines)
    data = _encode(outcome.assembly.graph, outcome.assembly.labels)

    with pytest.raises(CodecError):
        read_graph(io.BytesIO(data[:-3]))
    with pytest.raises(CodecError):
        read_graph(io.BytesIO(b"\x00\x00"))


def test_out_of_range_participant_raises_codec_error() -> None:
    data = struct.pack(">i", 0) + struct.pack(">i", 1) + struct.pack(">i", 1) + bytes([5]) + struct.pack(">i", 1) + struct.pack(">i", 4)
    with pytest.raises(CodecError):
        read_graph(io.BytesIO(data))


def test_movie_table_round_trip() -> None:
    movies = [
        MovieEntry(movie_id=2, title="Sleepless in Seattle", year=1993),
        MovieEntry(movie_id=1, title="Apollo 13", year=1995),
    ]
    buffer = io.BytesIO()

    assert write_movies(movies, buffer) == 2
    assert read_movies(io.BytesIO(buffer.getvalue())) == {1: "Apollo 13", 2: "Sleepless in Seattle"}

    with pytest.raises(CodecError):
        read_movies(io.BytesIO(buffer.getvalue()[:-1]))


def test_store_persists_pipeline_output(tmp_path: Path, sample_lines: list[str]) -> None:
    pipeline = GraphPipeline(CostarConfig())
    outcome = pipeline.build_from_lines(sample_lines)
    store = BinaryGraphStore(tmp_path / "out" / "out.bin", tmp_path / "out" / "movies.bin")

    size = pipeline.persist(outcome, store)

    assert size == (tmp_path / "out" / "out.bin").stat().st_size
    graph = store.load_graph()
    assert graph.node_count == 3
    assert graph.find_actor("Meg Ryan") == 2
    assert store.load_movies() == {1: "Apollo 13", 2: "Sleepless in Seattle", 4: "In the Cut"}


def test_store_without_movie_table_loads_empty(tmp_path: Path) -> None:
    store = BinaryGraphStore(tmp_path / "out.bin")
    assert store.load_movies() == {}
    with pytest.raises(ValueError):
        store.save_movies([])
