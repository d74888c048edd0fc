"""CLI parser construction."""

from __future__ import annotations

import argparse

from costar.commands.common import add_common_config_flags, add_graph_flags


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Co-star graph builder and shortest collaboration path finder")
    parser.add_argument("--log-level", default="INFO", help="Logging level (DEBUG, INFO, WARNING, ERROR)")

    sub = parser.add_subparsers(dest="command", required=True)

    build = sub.add_parser("build", aliases=["generate"], help="Build the pruned graph and movie table from a TSV dump")
    build.add_argument("--input", required=True, help="Path to the tab-separated movie dump")
    build.add_argument("--output-dir", default=".", help="Directory for the graph and movie files")
    build.add_argument("--prune-root", help="Actor the graph is pruned around (overrides build.prune_root)")
    build.add_argument("--reference-year", type=int, help="Year used by the weight policy (overrides build.reference_year)")
    add_common_config_flags(build)

    path = sub.add_parser("path", aliases=["bacon"], help="Find the shortest collaboration path between two actors")
    path.add_argument("--from", dest="source", required=True, help="Source actor name")
    path.add_argument("--to", dest="target", default=None, help="Target actor name (default: build.prune_root)")
    path.add_argument("--json", action="store_true", help="Emit machine-readable JSON")
    add_graph_flags(path)
    add_common_config_flags(path)

    stats = sub.add_parser("stats", aliases=["info"], help="Show node and edge counts of a graph file")
    stats.add_argument("--json", action="store_true", help="Emit machine-readable JSON")
    add_graph_flags(stats)
    add_common_config_flags(stats)

    serve = sub.add_parser("serve", aliases=["serve-api"], help="Run the JSON path API over a graph file")
    serve.add_argument("--host", default="127.0.0.1", help="Bind host")
    serve.add_argument("--port", type=int, default=8765, help="Bind port")
    serve.add_argument(
        "--reload",
        action="store_true",
        help="Enable uvicorn auto-reload (development only)",
    )
    add_graph_flags(serve)
    add_common_config_flags(serve)

    return parser
