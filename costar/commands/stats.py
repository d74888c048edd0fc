"""Stats command."""

from __future__ import annotations

import argparse
import json

from costar.commands.common import CommandRuntime, load_config, open_store


def run(args: argparse.Namespace, *, runtime: CommandRuntime) -> int:
    config = load_config(args)
    store = open_store(args, config, runtime=runtime)
    graph = store.load_graph()
    movies = store.load_movies()

    degrees = [len(graph.neighbors(node)) for node in range(graph.node_count)]
    payload = {
        "nodes": graph.node_count,
        "edges": graph.edge_count,
        "movies": len(movies),
        "max_degree": max(degrees, default=0),
        "isolated_nodes": sum(1 for degree in degrees if degree == 0),
    }

    if args.json:
        print(json.dumps(payload, indent=2))
        return 0

    print("Graph: nodes={nodes} edges={edges} max_degree={max_degree} isolated={isolated_nodes}".format(**payload))
    print(f"Movies: {payload['movies']}")
    return 0
