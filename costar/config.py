"""Configuration models and loading for costar."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, Field


class DumpConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")

    id_column: int = Field(default=0, ge=0)
    title_column: int = Field(default=2, ge=0)
    year_column: int = Field(default=3, ge=0)
    cast_column: int = Field(default=10, ge=0)
    cast_separator: str = ", "
    missing_cast_marker: str = "N/A"
    encoding: str = "utf-8"


class BuildConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")

    prune_root: str = "Kevin Bacon"
    reference_year: int = 2015
    progress_every: int = Field(default=10000, ge=0)
    graph_file: str = "out.bin"
    movies_file: str = "movies.bin"


class QueryConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")

    max_path_hops: int = Field(default=0, ge=0)


class CostarConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")

    dump: DumpConfig = Field(default_factory=DumpConfig)
    build: BuildConfig = Field(default_factory=BuildConfig)
    query: QueryConfig = Field(default_factory=QueryConfig)


def _deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    merged = dict(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _deep_merge(merged[key], value)
        else:
            merged[key] = value
    return merged


def _load_yaml(path: Path) -> dict[str, Any]:
    if not path.exists():
        return {}
    data = yaml.safe_load(path.read_text())
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError(f"YAML at {path} must decode to a mapping")
    return data


def load_effective_config(
    repo_path: str | Path,
    system_defaults: dict[str, Any] | None = None,
    runtime_override: dict[str, Any] | None = None,
) -> CostarConfig:
    """Load config with precedence runtime > repo .costar.yaml > system."""
    repo_config = _load_yaml(Path(repo_path) / ".costar.yaml")

    merged: dict[str, Any] = {}
    if system_defaults:
        merged = _deep_merge(merged, system_defaults)
    if repo_config:
        merged = _deep_merge(merged, repo_config)
    if runtime_override:
        merged = _deep_merge(merged, runtime_override)

    return CostarConfig.model_validate(merged)
