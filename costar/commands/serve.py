"""Serve API command."""

from __future__ import annotations

import argparse
import logging
import os

from costar.commands.common import CommandRuntime, load_config, open_store

logger = logging.getLogger(__name__)


def run(args: argparse.Namespace, *, runtime: CommandRuntime) -> int:
    config = load_config(args)
    graph_path = args.graph or config.build.graph_file

    try:
        import uvicorn
    except ImportError as exc:  # pragma: no cover - dependency/runtime
        raise RuntimeError("Missing optional API dependencies. Install with: pip install 'costar[api]'") from exc

    logger.info("Starting API on http://%s:%s (graph=%s)", args.host, args.port, graph_path)
    if args.reload:
        os.environ["COSTAR_REPO_PATH"] = str(args.repo_path)
        os.environ["COSTAR_GRAPH_PATH"] = str(graph_path)
        if args.movies:
            os.environ["COSTAR_MOVIES_PATH"] = str(args.movies)
        uvicorn.run(
            "costar.webapp:create_app_from_env",
            host=args.host,
            port=args.port,
            reload=True,
            factory=True,
            log_level=args.log_level.lower(),
        )
    else:
        from costar.webapp import create_app

        store = open_store(args, config, runtime=runtime)
        app = create_app(store.load_graph(), store.load_movies(), config)
        uvicorn.run(app, host=args.host, port=args.port, reload=False, log_level=args.log_level.lower())
    return 0
