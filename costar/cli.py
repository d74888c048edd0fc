"""CLI entrypoint for building co-star graphs and querying paths."""

from __future__ import annotations

import argparse
import logging
from collections.abc import Callable

from costar.commands import build, path, serve, stats
from costar.commands.common import normalize_command
from costar.commands.parser import build_parser
from costar.errors import CostarError
from costar.logging_utils import configure_logging
from costar.pipeline import GraphPipeline
from costar.services.command_runtime import CommandRuntime
from costar.storage import BinaryGraphStore

logger = logging.getLogger(__name__)

CommandHandler = Callable[..., int]

COMMANDS: dict[str, CommandHandler] = {
    "build": build.run,
    "path": path.run,
    "stats": stats.run,
    "serve": serve.run,
}


def default_runtime() -> CommandRuntime:
    return CommandRuntime(store_cls=BinaryGraphStore, pipeline_cls=GraphPipeline)


def run_command(args: argparse.Namespace, *, runtime: CommandRuntime | None = None) -> int:
    handler = COMMANDS.get(normalize_command(args.command))
    if handler is None:
        raise ValueError(f"Unknown command: {args.command}")
    return handler(args, runtime=runtime or default_runtime())


def main(argv: list[str] | None = None, *, runtime: CommandRuntime | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.log_level)

    try:
        return run_command(args, runtime=runtime)
    except CostarError as exc:
        logger.error("%s", exc)
        return 2
    except FileNotFoundError as exc:
        logger.error("File not found: %s", exc.filename)
        return 2


if __name__ == "__main__":
    raise SystemExit(main())
