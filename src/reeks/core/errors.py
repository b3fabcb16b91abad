from __future__ import annotations


class ReeksError(Exception):
    """Base class for all exceptions raised by the reeks library."""

    pass


class InvalidArgumentError(ReeksError, ValueError):
    """Raised when an operation is called with malformed parameters."""

    def __init__(self, operation: str, message: str):
        self.operation = operation
        self.message = message
        super().__init__(f"Invalid argument for '{operation}': {message}")


class EmptyCollectionError(ReeksError, ValueError):
    """Raised when an operation needs at least one element and none remain."""

    pass


class SourceNotResettableError(ReeksError):
    """Raised when `reset()` is called on a source that cannot rewind."""

    pass


class BuilderClosedError(ReeksError):
    """Raised when a builder is used again after `build()`."""

    pass


class NoSuchElementError(ReeksError, LookupError):
    """Raised when the value of an empty Option is requested."""

    pass
