"""Path command: shortest collaboration path between two actors."""

from __future__ import annotations

import argparse
import json
import logging

from costar.commands.common import CommandRuntime, load_config, open_store
from costar.query import find_path

logger = logging.getLogger(__name__)


def run(args: argparse.Namespace, *, runtime: CommandRuntime) -> int:
    config = load_config(args)
    store = open_store(args, config, runtime=runtime)
    graph = store.load_graph()
    movies = store.load_movies()

    target = args.target or config.build.prune_root
    result = find_path(graph, args.source, target, movies=movies)

    if args.json:
        payload = result.model_dump()
        payload["found"] = result.found
        print(json.dumps(payload, indent=2))
    elif not result.found:
        print(f"No path from {result.source} to {result.target}")
    else:
        print(f"{result.source} -> {result.target}: {len(result.hops)} hops, total weight {result.total_weight}")
        for hop in result.hops:
            movie = hop.movie_title or f"movie #{hop.movie_id}"
            print(f"  {hop.source} -> {hop.target} via {movie} (weight {hop.weight})")

    if not result.found:
        return 1
    max_hops = config.query.max_path_hops
    if max_hops and len(result.hops) > max_hops:
        logger.warning("Path has %s hops, above query.max_path_hops=%s", len(result.hops), max_hops)
        return 1
    return 0
