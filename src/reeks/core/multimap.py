"""
Keyed results: the `KeyedMap` element variant understood by `pluck`, and the
`Multimap` returned by `Collection.group_by`.
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Dict, Hashable, Iterator, List, Optional, Tuple

from .errors import BuilderClosedError
from .option import Nothing, Option, Some


class KeyedMap(ABC):
    """An element exposing keyed lookup through an Option."""

    @abstractmethod
    def get_option(self, key: Any) -> Option:
        ...


class Multimap(KeyedMap):
    """
    A map from unique keys to ordered sequences of values.

    Keys keep the order in which they were first seen and values keep the
    order in which they were put. Lookups of absent keys return an empty
    tuple rather than raising.
    """

    def __init__(self, buckets: Optional[Dict[Hashable, List[Any]]] = None):
        self._buckets: Dict[Hashable, Tuple[Any, ...]] = {
            key: tuple(values) for key, values in (buckets or {}).items()
        }

    def get(self, key: Hashable) -> Tuple[Any, ...]:
        return self._buckets.get(key, ())

    def get_option(self, key: Hashable) -> Option:
        if key in self._buckets:
            return Some(self._buckets[key])
        return Nothing()

    def keys(self):
        return self._buckets.keys()

    def items(self):
        return self._buckets.items()

    def to_dict(self) -> Dict[Hashable, List[Any]]:
        return {key: list(values) for key, values in self._buckets.items()}

    def __contains__(self, key: Any) -> bool:
        return key in self._buckets

    def __len__(self) -> int:
        return len(self._buckets)

    def __iter__(self) -> Iterator[Hashable]:
        return iter(self._buckets)

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Multimap):
            return NotImplemented
        return self._buckets == other._buckets

    def __repr__(self) -> str:
        return f"Multimap({self.to_dict()})"


class MultimapBuilder:
    """Accumulates key/value pairs into a `Multimap`."""

    def __init__(self) -> None:
        self._buckets: Dict[Hashable, List[Any]] = {}
        self._built = False

    def put(self, key: Hashable, value: Any) -> "MultimapBuilder":
        if self._built:
            raise BuilderClosedError("MultimapBuilder was already built")
        self._buckets.setdefault(key, []).append(value)
        return self

    add = put

    def build(self) -> Multimap:
        if self._built:
            raise BuilderClosedError("MultimapBuilder was already built")
        self._built = True
        return Multimap(self._buckets)
