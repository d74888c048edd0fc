"""Exception types raised by costar."""

from __future__ import annotations


class CostarError(Exception):
    """Base class for errors surfaced at the command boundary."""


class PathInvariantError(CostarError):
    """The target was never finalized although the search ran to exhaustion."""


class QueryCancelledError(CostarError):
    pass


class CodecError(CostarError):
    """A persisted graph or movie table could not be decoded."""


class UnknownActorError(CostarError):
    def __init__(self, name: str) -> None:
        super().__init__(f"Unknown actor: {name!r}")
        self.name = name
