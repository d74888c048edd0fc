"""Tab-separated movie dump parsing."""

from __future__ import annotations

import logging
from collections import Counter
from collections.abc import Iterable
from dataclasses import dataclass, field
from pathlib import Path

from costar.config import DumpConfig
from costar.logging_utils import ProgressTicker
from costar.models import MAX_WEIGHT, Edge, MovieEntry

logger = logging.getLogger(__name__)


@dataclass
class ParsedDump:
    movies: list[MovieEntry] = field(default_factory=list)
    actor_ids: dict[str, int] = field(default_factory=dict)
    actor_names: list[str] = field(default_factory=list)
    movies_by_actor: dict[str, list[MovieEntry]] = field(default_factory=dict)
    processed: int = 0
    skip_reasons: Counter[str] = field(default_factory=Counter)

    @property
    def skipped(self) -> int:
        return sum(self.skip_reasons.values())

    def actor_id(self, name: str) -> int | None:
        return self.actor_ids.get(name)

    def cast_ids(self, movie: MovieEntry) -> list[int]:
        return [self.actor_ids[name] for name in movie.cast]


def year_to_weight(year: int, reference_year: int) -> int:
    """Edge weight for a movie released in ``year``; recent movies weigh more."""
    return max(0, min(MAX_WEIGHT, MAX_WEIGHT - (reference_year - year)))


def movie_edge(movie: MovieEntry, reference_year: int) -> Edge:
    return Edge(movie_id=movie.movie_id, weight=year_to_weight(movie.year, reference_year))


def parse_cast(raw: str, config: DumpConfig) -> tuple[str, ...]:
    """Split a cast column; returns an empty tuple when the cast cannot link anyone."""
    cast = [name for name in raw.split(config.cast_separator) if name]
    # Needs two names; one single-token name rejects the whole record.
    if len(cast) <= 1 or cast[0] == config.missing_cast_marker or any(" " not in name for name in cast):
        return ()
    return tuple(cast)


def parse_record(line: str, config: DumpConfig) -> tuple[MovieEntry | None, str | None]:
    """Parse one dump line into a movie, or return the skip reason."""
    parts = line.rstrip("\r\n").split("\t")
    needed = max(config.id_column, config.title_column, config.year_column, config.cast_column)
    if len(parts) <= needed:
        return None, "missing_columns"

    try:
        movie_id = int(parts[config.id_column])
    except ValueError:
        return None, "invalid_id"

    try:
        year = int(parts[config.year_column])
    except ValueError:
        return None, "invalid_year"

    cast = parse_cast(parts[config.cast_column], config)
    if not cast:
        return None, "invalid_cast"

    return MovieEntry(movie_id=movie_id, title=parts[config.title_column], year=year, cast=cast), None


def parse_dump(lines: Iterable[str], config: DumpConfig | None = None, *, progress_every: int = 0) -> ParsedDump:
    cfg = config or DumpConfig()
    result = ParsedDump()
    ticker = ProgressTicker(logger, "Parsed records", progress_every)

    for line in lines:
        if not line.strip():
            continue
        movie, reason = parse_record(line, cfg)
        if movie is None:
            result.skip_reasons[reason or "unknown"] += 1
            continue

        result.movies.append(movie)
        for member in movie.cast:
            if member not in result.actor_ids:
                result.actor_ids[member] = len(result.actor_names)
                result.actor_names.append(member)
            result.movies_by_actor.setdefault(member, []).append(movie)

        result.processed += 1
        ticker.tick()

    logger.info(
        "Parsed dump: movies=%s actors=%s skipped=%s",
        len(result.movies),
        len(result.actor_names),
        result.skipped,
    )
    if result.skip_reasons:
        logger.debug("Skip reasons: %s", dict(result.skip_reasons))
    return result


def load_dump(path: str | Path, config: DumpConfig | None = None, *, progress_every: int = 0) -> ParsedDump:
    cfg = config or DumpConfig()
    with Path(path).open(encoding=cfg.encoding, errors="replace", newline="") as handle:
        return parse_dump(handle, cfg, progress_every=progress_every)
