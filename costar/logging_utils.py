"""Logging configuration and progress helpers."""

from __future__ import annotations

import logging
import time


def configure_logging(level: str = "INFO") -> None:
    normalized = level.upper()
    logging.basicConfig(
        level=getattr(logging, normalized, logging.INFO),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )


class ProgressTicker:
    """Logs a progress line every ``every`` ticks (0 disables)."""

    def __init__(self, logger: logging.Logger, label: str, every: int, total: int | None = None) -> None:
        self._logger = logger
        self._label = label
        self._every = every
        self._total = total
        self._started = time.perf_counter()
        self.count = 0

    def tick(self) -> bool:
        self.count += 1
        if self._every <= 0 or self.count % self._every != 0:
            return False
        elapsed = time.perf_counter() - self._started
        rate = self.count / elapsed if elapsed > 0 else 0.0
        if self._total:
            self._logger.debug("%s: %s/%s (%.0f/s)", self._label, self.count, self._total, rate)
        else:
            self._logger.debug("%s: %s (%.0f/s)", self._label, self.count, rate)
        return True
