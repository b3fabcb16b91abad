"""
This module defines the `Collection` class, the pipeline engine of reeks.

A Collection holds exactly one `ElementSource`, either raw or wrapped in lazy
stages. Every operation works on the remaining, undrained part of that
source and falls in one of two groups:

* Lazy operations (`filter_by`, `reject_by`, `map_by`, `flat_map_by`) return
  a new Collection around a new stage. No element is read.
* Eager operations (everything else) drain the source from its current
  position, either to the end or until a result is known.

Sources are one-shot. Draining a collection twice yields nothing the second
time, and a collection that has been transformed should not be reused: it
shares its source with the collection derived from it. Use `materialize()`
when the same elements are needed more than once.
"""
from __future__ import annotations

import heapq
from collections.abc import Mapping, Sequence
from itertools import count as counter, islice
from typing import Any, Callable, Hashable, Iterable, List, Optional, Tuple

from .builder import BuilderFactory, CollectionBuilder
from .comparison import Comparator, comparator_key, is_equal, natural_order
from .errors import EmptyCollectionError
from .guard import ReadOnlySource
from .log import get_logger
from .multimap import KeyedMap, Multimap, MultimapBuilder
from .option import Nothing, Option, Some
from .source import ElementSource, as_source
from .stages import FilterStage, FlatMapStage, MapStage
from .utils import (
    require_non_negative_int,
    resolve_flat_mapper,
    resolve_mapper,
)

logger = get_logger("reeks.collection")


class Collection:
    """A uniform, functional-style view over a one-shot source of elements.

    Attributes:
        builder_factory: Callable taking a size hint and returning the builder
            used for every collection this one materializes. Derived
            collections inherit it.
    """

    def __init__(
        self,
        source: Optional[Iterable[Any]] = None,
        *,
        builder_factory: BuilderFactory = CollectionBuilder,
    ):
        """Initializes a Collection.

        Args:
            source: An `ElementSource`, a sequence, any other iterable, or
                `None` for an empty collection.
            builder_factory: Builder constructor for materialized results.

        Raises:
            InvalidArgumentError: If `source` is not iterable or is a string.
        """
        self._source: ElementSource = as_source(source)
        self.builder_factory = builder_factory

    @classmethod
    def of(cls, *elements: Any) -> "Collection":
        """Creates a list-backed collection of the given elements."""
        return cls(list(elements))

    def _derive(self, source: ElementSource) -> "Collection":
        return Collection(source, builder_factory=self.builder_factory)

    def _create_builder(self, size_hint: Optional[int] = 0) -> CollectionBuilder:
        return self.builder_factory(size_hint or 0)

    def __repr__(self) -> str:
        return f"Collection({self._source!r})"

    # --- Iteration ---

    def get_iterator(self) -> ReadOnlySource:
        """Returns a read-only forward iterator over the held source.

        The iterator cannot reset the source. It is a view, not a copy, so
        iterating it consumes the collection like any eager operation.
        """
        return ReadOnlySource(self._source)

    def __iter__(self) -> ReadOnlySource:
        return self.get_iterator()

    # --- Inspection ---

    def is_empty(self) -> bool:
        """Returns True when no element remains.

        The declared size is used when known. Otherwise the cursor is
        positioned on the next element, which reads but never drops it.
        """
        size = self._source.declared_size()
        if size is not None:
            return size == 0
        return not self._source.valid()

    def contains(
        self, element: Any, equals: Callable[[Any, Any], bool] = is_equal
    ) -> bool:
        """Linear scan for `element`, stopping at the first match."""
        for candidate in self._source:
            if equals(element, candidate):
                return True
        return False

    def count(self) -> int:
        """Returns the number of remaining elements.

        A known declared size is returned without reading anything. Otherwise
        the source is drained to count it, which consumes the collection.
        """
        size = self._source.declared_size()
        if size is not None:
            return size
        total = sum(1 for _ in self._source)
        logger.debug("count_drained", items=total)
        return total

    # --- Lazy operations ---

    def filter_by(self, predicate: Callable[[Any], Any]) -> "Collection":
        """Lazy. Keeps the elements for which `predicate` is truthy."""
        return self._derive(FilterStage(self._source, predicate))

    def reject_by(self, predicate: Callable[[Any], Any]) -> "Collection":
        """Lazy. Keeps the elements for which `predicate` is falsy."""

        def _rejected(element: Any) -> bool:
            return not predicate(element)

        return self.filter_by(_rejected)

    def map_by(self, mapper: Any) -> "Collection":
        """Lazy. Maps every element through `mapper`, or to `mapper` itself
        when it is not callable."""
        return self._derive(MapStage(self._source, resolve_mapper(mapper)))

    def flat_map_by(self, mapper: Any) -> "Collection":
        """Lazy. Replaces every element with the elements `mapper` produces.

        Args:
            mapper: A callable returning an iterable, a single value or None;
                or an iterable every element expands to.

        Raises:
            InvalidArgumentError: If `mapper` is neither callable nor iterable.
        """
        return self._derive(FlatMapStage(self._source, resolve_flat_mapper(mapper)))

    # --- Eager operations ---

    def slice(self, offset: int, length: int) -> "Collection":
        """Returns at most `length` elements starting at `offset`.

        Only the first `offset + length` elements are read.

        Raises:
            InvalidArgumentError: If either argument is not a non-negative int.
        """
        offset = require_non_negative_int("slice", "offset", offset)
        length = require_non_negative_int("slice", "length", length)
        return (
            self._create_builder(length)
            .add_all(islice(self._source, offset, offset + length))
            .build()
        )

    def pluck(self, key: Any) -> "Collection":
        """Collects the value at `key` of every element that has one.

        Elements are matched against three shapes: a `KeyedMap` contributes
        its `get_option(key)` value when present; a mapping or a non-string
        sequence contributes `element[key]` when the key or index exists;
        anything else is skipped.
        """
        builder = self._create_builder(self._source.declared_size())
        for element in self._source:
            if isinstance(element, KeyedMap):
                element.get_option(key).if_present(builder.add)
            elif isinstance(element, Mapping):
                if key in element:
                    builder.add(element[key])
            elif isinstance(element, Sequence) and not isinstance(
                element, (str, bytes, bytearray)
            ):
                if _has_index(element, key):
                    builder.add(element[key])
        return builder.build()

    def each_by(self, processor: Callable[[Any], Any]) -> None:
        """Calls `processor` on every element, in order, for its side effects."""
        for element in self._source:
            processor(element)

    def find_by(self, predicate: Callable[[Any], Any]) -> Option:
        """Returns `Some` of the first matching element, or `Nothing()`.

        Reading stops right after the match.
        """
        for element in self._source:
            if predicate(element):
                return Some(element)
        return Nothing()

    def fold_by(self, folder: Callable[[Any, Any], Any], accumulator: Any) -> Any:
        """Left fold: `folder(...folder(folder(accumulator, e1), e2)..., en)`."""
        for element in self._source:
            accumulator = folder(accumulator, element)
        return accumulator

    def reduce_by(self, reducer: Callable[[Any, Any], Any]) -> Any:
        """Left fold seeded with the first element.

        Raises:
            EmptyCollectionError: If no element remains.
        """
        if not self._source.valid():
            raise EmptyCollectionError("Unable to reduce an empty collection.")
        reduced = self._source.current()
        self._source.advance()
        return self.fold_by(reducer, reduced)

    def partition_by(
        self, partitioner: Callable[[Any], Any]
    ) -> Tuple["Collection", "Collection"]:
        """Splits the elements in one pass.

        Returns:
            A pair of collections: the elements for which `partitioner` is
            truthy, then the rest. Both keep the input order.
        """
        size_hint = self._source.declared_size()
        matching = self._create_builder(size_hint)
        rest = self._create_builder(size_hint)
        for element in self._source:
            if partitioner(element):
                matching.add(element)
            else:
                rest.add(element)
        return matching.build(), rest.build()

    def sort_by(self, comparator: Comparator = natural_order) -> "Collection":
        """Returns all elements ordered by a three-way `comparator`.

        The sort is stable: elements the comparator considers equal keep
        their input order.
        """
        key = comparator_key(comparator)
        heap: List[Tuple[Any, int, Any]] = []
        sequence = counter()
        for element in self._source:
            heapq.heappush(heap, (key(element), next(sequence), element))

        builder = self._create_builder(len(heap))
        while heap:
            builder.add(heapq.heappop(heap)[2])
        logger.debug("sort_finished", items=len(builder))
        return builder.build()

    def group_by(self, key_finder: Callable[[Any], Hashable]) -> Multimap:
        """Groups elements by `key_finder(element)`, computed once per element."""

        def _put(multimap_builder: MultimapBuilder, element: Any) -> MultimapBuilder:
            return multimap_builder.put(key_finder(element), element)

        return self.fold_by(_put, MultimapBuilder()).build()

    def to_list(self) -> List[Any]:
        """Returns the remaining elements as a list."""
        elements = list(self._source)
        logger.debug("to_list_finished", items=len(elements))
        return elements

    def materialize(self) -> "Collection":
        """Drains the remaining elements into a new, list-backed collection.

        The result has a declared size and can be counted without being
        consumed.
        """
        return self._create_builder(self._source.declared_size()).add_all(
            self._source
        ).build()


def _has_index(sequence: Sequence, key: Any) -> bool:
    return isinstance(key, int) and not isinstance(key, bool) and 0 <= key < len(sequence)
