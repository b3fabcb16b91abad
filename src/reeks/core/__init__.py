# reeks.core
# This package contains the pipeline engine (Collection), the element
# sources and lazy stages it is built on, and the small value types its
# operations return.

from .builder import CollectionBuilder
from .collection import Collection
from .comparison import is_equal, natural_order, reverse_order
from .errors import (
    BuilderClosedError,
    EmptyCollectionError,
    InvalidArgumentError,
    NoSuchElementError,
    ReeksError,
    SourceNotResettableError,
)
from .guard import ReadOnlySource
from .multimap import KeyedMap, Multimap, MultimapBuilder
from .option import Nothing, Option, Some
from .source import ElementSource, EmptySource, IteratorSource, SequenceSource, as_source
from .stages import FilterStage, FlatMapStage, MapStage

__all__ = [
    "Collection",
    "CollectionBuilder",
    "ElementSource",
    "EmptySource",
    "IteratorSource",
    "SequenceSource",
    "as_source",
    "FilterStage",
    "MapStage",
    "FlatMapStage",
    "ReadOnlySource",
    "Option",
    "Some",
    "Nothing",
    "KeyedMap",
    "Multimap",
    "MultimapBuilder",
    "is_equal",
    "natural_order",
    "reverse_order",
    "ReeksError",
    "InvalidArgumentError",
    "EmptyCollectionError",
    "SourceNotResettableError",
    "BuilderClosedError",
    "NoSuchElementError",
]
