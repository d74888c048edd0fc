"""Lightweight JSON API for path queries over a loaded graph."""

from __future__ import annotations

import logging
import os
import threading
from typing import Any

from fastapi import FastAPI, HTTPException, Query
from fastapi.responses import JSONResponse

from costar.config import CostarConfig, load_effective_config
from costar.errors import UnknownActorError
from costar.query import find_path
from costar.readonly import ReadonlyGraph
from costar.storage import BinaryGraphStore

logger = logging.getLogger(__name__)


def create_app(
    graph: ReadonlyGraph,
    movies: dict[int, str] | None = None,
    config: CostarConfig | None = None,
) -> FastAPI:
    cfg = config or CostarConfig()
    app = FastAPI(title="costar", version="0.1.0")
    # Queries on one graph instance run one at a time.
    query_lock = threading.Lock()

    @app.get("/api/stats", response_class=JSONResponse)
    def api_stats() -> dict[str, Any]:
        return {
            "nodes": graph.node_count,
            "edges": graph.edge_count,
            "movies": len(movies or {}),
        }

    @app.get("/api/actors/{node_id}", response_class=JSONResponse)
    def api_actor(node_id: int) -> dict[str, Any]:
        label = graph.actor_label(node_id)
        if label is None:
            raise HTTPException(status_code=404, detail=f"Unknown actor id: {node_id}")
        return {"id": node_id, "name": label, "degree": len(graph.neighbors(node_id))}

    @app.get("/api/path", response_class=JSONResponse)
    def api_path(
        source: str = Query(..., min_length=1),
        target: str = Query(..., min_length=1),
    ) -> dict[str, Any]:
        try:
            with query_lock:
                result = find_path(graph, source, target, movies=movies)
        except UnknownActorError as exc:
            raise HTTPException(status_code=404, detail=str(exc)) from exc

        payload = result.model_dump()
        payload["found"] = result.found
        payload["hop_count"] = len(result.hops)
        max_hops = cfg.query.max_path_hops
        payload["exceeds_max_hops"] = bool(max_hops and len(result.hops) > max_hops)
        return payload

    return app


def create_app_from_env() -> FastAPI:
    """Factory for uvicorn reload mode; reads paths from the environment."""
    repo_path = os.environ.get("COSTAR_REPO_PATH", ".")
    config = load_effective_config(repo_path)
    graph_path = os.environ.get("COSTAR_GRAPH_PATH", config.build.graph_file)
    movies_path = os.environ.get("COSTAR_MOVIES_PATH") or None
    store = BinaryGraphStore(graph_path, movies_path)
    return create_app(store.load_graph(), store.load_movies(), config)
