from collections.abc import Iterable as IterableABC, Mapping
from typing import Any, Callable, Iterable

from typeguard import TypeCheckError, check_type

from .errors import InvalidArgumentError

# Iterables that stand for a single value rather than a sequence of elements.
ATOMIC_TYPES = (str, bytes, bytearray, Mapping)


def is_traversable(obj: Any) -> bool:
    """True for iterables that should be flattened element by element."""
    return isinstance(obj, IterableABC) and not isinstance(obj, ATOMIC_TYPES)


def ensure_iterable(obj: Any) -> Iterable[Any]:
    """
    Ensures that the given object is an iterable of elements.
    Traversable values are returned as is, any other value is wrapped in a
    one-element tuple. `None` is treated as an empty sequence.
    """
    if obj is None:
        return ()
    if is_traversable(obj):
        return obj
    return (obj,)


def constant(value: Any) -> Callable[[Any], Any]:
    """Returns a function that ignores its argument and returns `value`."""

    def _constant(_element: Any) -> Any:
        return value

    return _constant


def resolve_mapper(mapper: Any) -> Callable[[Any], Any]:
    """Resolves a `map_by` argument: callables pass through, anything else is a constant."""
    if callable(mapper):
        return mapper
    return constant(mapper)


def resolve_flat_mapper(mapper: Any) -> Callable[[Any], Any]:
    """
    Resolves a `flat_map_by` argument.

    A callable passes through. A traversable is materialized once, so every
    outer element expands to the same elements even when `mapper` is a
    one-shot iterator.

    :raises InvalidArgumentError: If `mapper` is neither callable nor traversable.
    """
    if callable(mapper):
        return mapper
    if is_traversable(mapper):
        return constant(tuple(mapper))
    raise InvalidArgumentError(
        "flat_map_by",
        f"expected a callable or an iterable, got {type(mapper).__name__}",
    )


def require_non_negative_int(operation: str, name: str, value: Any) -> int:
    """Validates an index-like argument, rejecting bools, non-ints and negatives."""
    try:
        check_type(value, int)
    except TypeCheckError as e:
        raise InvalidArgumentError(operation, f"{name} must be an int: {e}") from e
    if isinstance(value, bool):
        raise InvalidArgumentError(operation, f"{name} must be an int, not bool")
    if value < 0:
        raise InvalidArgumentError(operation, f"{name} must be >= 0, got {value}")
    return value
