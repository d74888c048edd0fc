"""Build orchestration: dump records to a pruned, renumbered graph."""

from __future__ import annotations

import logging
import time
from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path

from costar.assembler import AssemblyResult, assemble_pruned_graph
from costar.config import CostarConfig, load_effective_config
from costar.errors import UnknownActorError
from costar.graph import GraphBuilder
from costar.hooks import HookManager, HookName
from costar.loader import ParsedDump, load_dump, movie_edge, parse_dump
from costar.logging_utils import ProgressTicker
from costar.models import BuildReport
from costar.pruning import reachable_from
from costar.storage.base import GraphStore

logger = logging.getLogger(__name__)


@dataclass
class BuildOutcome:
    assembly: AssemblyResult
    report: BuildReport


class GraphPipeline:
    def __init__(self, config: CostarConfig, hooks: HookManager | None = None) -> None:
        self.config = config
        self.hooks = hooks or HookManager()

    @classmethod
    def from_repo(
        cls,
        repo_path: str | Path,
        system_defaults: dict | None = None,
        runtime_override: dict | None = None,
        hooks: HookManager | None = None,
    ) -> GraphPipeline:
        config = load_effective_config(
            repo_path=repo_path,
            system_defaults=system_defaults,
            runtime_override=runtime_override,
        )
        return cls(config=config, hooks=hooks)

    def build_from_lines(self, lines: Iterable[str]) -> BuildOutcome:
        context = {"source": "lines"}
        self.hooks.emit(HookName.BEFORE_PARSE, context, {})
        start = time.perf_counter()
        parsed = parse_dump(lines, self.config.dump, progress_every=self.config.build.progress_every)
        return self._build(parsed, context, parse_seconds=time.perf_counter() - start)

    def build_from_file(self, path: str | Path) -> BuildOutcome:
        context = {"source": str(path)}
        self.hooks.emit(HookName.BEFORE_PARSE, context, {})
        start = time.perf_counter()
        parsed = load_dump(path, self.config.dump, progress_every=self.config.build.progress_every)
        return self._build(parsed, context, parse_seconds=time.perf_counter() - start)

    def build_full_graph(self, parsed: ParsedDump) -> GraphBuilder:
        graph = GraphBuilder(len(parsed.actor_names))
        ticker = ProgressTicker(logger, "Graph records", self.config.build.progress_every, total=len(parsed.movies))
        for movie in parsed.movies:
            graph.add_edge(movie_edge(movie, self.config.build.reference_year), parsed.cast_ids(movie))
            if ticker.tick() and self.hooks.has_callbacks(HookName.PROGRESS):
                self.hooks.emit(HookName.PROGRESS, {"stage": "build"}, {"done": ticker.count, "total": len(parsed.movies)})
        return graph

    def _build(self, parsed: ParsedDump, context: dict, *, parse_seconds: float) -> BuildOutcome:
        profile: dict[str, float] = {"parse_seconds": round(parse_seconds, 4)}
        self.hooks.emit(
            HookName.AFTER_PARSE,
            context,
            {"processed": parsed.processed, "skipped": parsed.skipped, "actors": len(parsed.actor_names)},
        )

        root_name = self.config.build.prune_root
        root = parsed.actor_id(root_name)
        if root is None:
            raise UnknownActorError(root_name)

        stage = time.perf_counter()
        logger.info("Generating graph with %s nodes", len(parsed.actor_names))
        graph = self.build_full_graph(parsed)
        profile["build_seconds"] = round(time.perf_counter() - stage, 4)
        self.hooks.emit(HookName.AFTER_BUILD, context, {"nodes": graph.node_count, "edges": graph.edge_count})

        stage = time.perf_counter()
        reachable = reachable_from(graph, root)
        profile["prune_seconds"] = round(time.perf_counter() - stage, 4)
        logger.info("%s nodes left after pruning from %r", len(reachable), root_name)
        self.hooks.emit(HookName.AFTER_PRUNE, context, {"reachable": len(reachable), "pruned": graph.node_count - len(reachable)})

        stage = time.perf_counter()
        labels = dict(enumerate(parsed.actor_names))
        assembly = assemble_pruned_graph(reachable, labels, parsed.movies_by_actor)
        profile["assemble_seconds"] = round(time.perf_counter() - stage, 4)
        self.hooks.emit(
            HookName.AFTER_ASSEMBLE,
            context,
            {"nodes": assembly.graph.node_count, "edges": assembly.graph.edge_count, "movies": len(assembly.movies)},
        )

        report = BuildReport(
            processed_records=parsed.processed,
            skipped_records=parsed.skipped,
            actor_count=len(parsed.actor_names),
            full_edge_count=graph.edge_count,
            pruned_node_count=assembly.graph.node_count,
            pruned_edge_count=assembly.graph.edge_count,
            pruned_movie_count=len(assembly.movies),
            prune_root=root_name,
            profile=profile,
        )
        logger.info(
            "Build complete: processed=%s skipped=%s nodes=%s edges=%s movies=%s",
            report.processed_records,
            report.skipped_records,
            report.pruned_node_count,
            report.pruned_edge_count,
            report.pruned_movie_count,
        )
        return BuildOutcome(assembly=assembly, report=report)

    def persist(self, outcome: BuildOutcome, store: GraphStore) -> int:
        size = store.save_graph(outcome.assembly.graph, outcome.assembly.labels)
        store.save_movies(outcome.assembly.movies)
        return size
