"""Build command: dump to graph and movie files."""

from __future__ import annotations

import argparse
import logging
from pathlib import Path

from costar.commands.common import CommandRuntime, load_config

logger = logging.getLogger(__name__)


def run(args: argparse.Namespace, *, runtime: CommandRuntime) -> int:
    config = load_config(args)
    overrides: dict[str, object] = {}
    if args.prune_root:
        overrides["prune_root"] = args.prune_root
    if args.reference_year is not None:
        overrides["reference_year"] = args.reference_year
    if overrides:
        config = config.model_copy(update={"build": config.build.model_copy(update=overrides)})

    pipeline = runtime.pipeline_cls(config)
    outcome = pipeline.build_from_file(Path(args.input))

    output_dir = Path(args.output_dir)
    store = runtime.store_cls(output_dir / config.build.graph_file, output_dir / config.build.movies_file)
    size = pipeline.persist(outcome, store)

    report = outcome.report
    logger.info(
        "Saved graph with %s nodes (max degree %s), %s edges and %s actors (%s pruned) in %.1fMB",
        report.pruned_node_count,
        outcome.assembly.graph.max_degree(),
        report.pruned_edge_count,
        len(outcome.assembly.labels),
        report.pruned_actor_count,
        size / (1024 * 1024),
    )
    logger.info("Skipped %s malformed records; movie table holds %s movies", report.skipped_records, report.pruned_movie_count)
    return 0
