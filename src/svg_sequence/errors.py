from __future__ import annotations

# ============================================================================
# Exceptions
#
# Layout errors are raised by finalization and never logged or retried here:
# the model is deterministic, so the caller decides what to do with them.
# ============================================================================


class SequenceError(ValueError):
    """Base class for every error raised while building or laying out a sequence."""


class ModelIncompleteError(SequenceError):
    """The sequence has no actors or no steps."""


class InvalidStepError(SequenceError):
    def __init__(self, position: int) -> None:
        self.position = position
        super().__init__(f"step #{position} defined an actor with an empty name")


class UnclosedSectionError(SequenceError):
    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"found open section: {name}")


class ConfigParseError(SequenceError):
    """A .cfg line could not be understood."""

    def __init__(self, message: str, line: int, token: str) -> None:
        self.line = line
        self.token = token
        super().__init__(f"{message} at line {line}")


class ConfigReadError(OSError):
    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        super().__init__(f"error reading file '{path}': {reason}")
