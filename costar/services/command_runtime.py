"""Typed command runtime dependency container."""

from __future__ import annotations

from dataclasses import dataclass

from costar.services.interfaces import GraphStoreFactory, PipelineFactory


@dataclass(frozen=True)
class CommandRuntime:
    store_cls: GraphStoreFactory
    pipeline_cls: PipelineFactory
