"""Equality and ordering helpers used by `contains` and `sort_by`."""
from __future__ import annotations

from functools import cmp_to_key
from typing import Any, Callable

Comparator = Callable[[Any, Any], int]


def is_equal(a: Any, b: Any) -> bool:
    """
    Element equality for `contains`.

    Identity wins, then an `equals(other)` method on `a` if it has one,
    then `==`.
    """
    if a is b:
        return True
    equals = getattr(a, "equals", None)
    if callable(equals):
        return bool(equals(b))
    return bool(a == b)


def natural_order(a: Any, b: Any) -> int:
    if a < b:
        return -1
    if b < a:
        return 1
    return 0


def reverse_order(comparator: Comparator = natural_order) -> Comparator:
    def _reversed(a: Any, b: Any) -> int:
        return comparator(b, a)

    return _reversed


def comparator_key(comparator: Comparator) -> Callable[[Any], Any]:
    """Adapts a three-way comparator into a sort key."""
    return cmp_to_key(comparator)
