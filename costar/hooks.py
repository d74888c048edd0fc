"""Hook registry for build pipeline stages."""

from __future__ import annotations

import logging
from collections import defaultdict
from collections.abc import Callable
from enum import Enum
from typing import Any

logger = logging.getLogger(__name__)


class HookName(str, Enum):
    BEFORE_PARSE = "before_parse"
    AFTER_PARSE = "after_parse"
    AFTER_BUILD = "after_build"
    AFTER_PRUNE = "after_prune"
    AFTER_ASSEMBLE = "after_assemble"
    PROGRESS = "progress"
    ON_ERROR = "on_error"


HookCallback = Callable[[dict[str, Any], dict[str, Any]], dict[str, Any] | None]


class HookManager:
    """Stage callbacks run in registration order; each may patch the envelope."""

    def __init__(self) -> None:
        self._callbacks: dict[HookName, list[HookCallback]] = defaultdict(list)

    def register(self, name: HookName, callback: HookCallback) -> None:
        self._callbacks[name].append(callback)

    def has_callbacks(self, name: HookName) -> bool:
        return bool(self._callbacks.get(name))

    def emit(self, name: HookName, context: dict[str, Any], envelope: dict[str, Any]) -> dict[str, Any]:
        result = dict(envelope)
        for callback in self._callbacks.get(name, ()):
            try:
                patch = callback(context, dict(result))
            except Exception as exc:
                self._emit_error(name, exc, context)
                continue
            if patch:
                result.update(patch)
        return result

    def _emit_error(self, name: HookName, exc: Exception, context: dict[str, Any]) -> None:
        handlers = self._callbacks.get(HookName.ON_ERROR, ())
        if not handlers:
            logger.warning("Hook %s failed: %s", name.value, exc)
            return
        for callback in handlers:
            callback({"exception": exc, "hook": name.value, **context}, {})
