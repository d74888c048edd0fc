"""Service interfaces used by command/runtime orchestration."""

from __future__ import annotations

from pathlib import Path
from typing import Protocol

from costar.config import CostarConfig
from costar.hooks import HookManager
from costar.pipeline import GraphPipeline
from costar.storage.base import GraphStore


class GraphStoreFactory(Protocol):
    def __call__(self, graph_path: str | Path, movies_path: str | Path | None = None) -> GraphStore: ...


class PipelineFactory(Protocol):
    def __call__(self, config: CostarConfig, hooks: HookManager | None = None) -> GraphPipeline: ...
