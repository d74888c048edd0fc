"""Shared helpers for CLI command modules."""

from __future__ import annotations

import argparse
import logging
from pathlib import Path

import yaml

from costar.config import CostarConfig, load_effective_config
from costar.services.command_runtime import CommandRuntime
from costar.storage.base import GraphStore

logger = logging.getLogger(__name__)

__all__ = [
    "ALIAS_TO_CANONICAL",
    "CommandRuntime",
    "add_common_config_flags",
    "add_graph_flags",
    "load_config",
    "load_yaml_dict",
    "normalize_command",
    "open_store",
]

ALIAS_TO_CANONICAL = {
    "generate": "build",
    "bacon": "path",
    "info": "stats",
    "serve-api": "serve",
}


def normalize_command(name: str) -> str:
    return ALIAS_TO_CANONICAL.get(name, name)


def load_yaml_dict(path: str | None) -> dict | None:
    if not path:
        return None
    data = yaml.safe_load(Path(path).read_text())
    if data is None:
        return None
    if not isinstance(data, dict):
        raise ValueError(f"YAML at {path} must decode to a mapping")
    return data


def load_config(args: argparse.Namespace) -> CostarConfig:
    return load_effective_config(
        repo_path=args.repo_path,
        system_defaults=load_yaml_dict(args.system_config),
        runtime_override=load_yaml_dict(args.runtime_override),
    )


def open_store(args: argparse.Namespace, config: CostarConfig, *, runtime: CommandRuntime) -> GraphStore:
    graph_path = args.graph or config.build.graph_file
    return runtime.store_cls(graph_path, getattr(args, "movies", None))


def add_common_config_flags(cmd: argparse.ArgumentParser) -> None:
    cmd.add_argument("--repo-path", default=".", help="Directory holding an optional .costar.yaml")
    cmd.add_argument("--system-config", help="Optional system defaults YAML")
    cmd.add_argument("--runtime-override", help="Optional runtime override YAML")


def add_graph_flags(cmd: argparse.ArgumentParser, *, with_movies: bool = True) -> None:
    cmd.add_argument("--graph", help="Graph file written by build (default: build.graph_file)")
    if with_movies:
        cmd.add_argument("--movies", help="Optional movie table written by build")
