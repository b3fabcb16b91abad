from typing import Optional

from .config import Config, load_config
from .core.builder import CollectionBuilder
from .core.collection import Collection
from .core.comparison import is_equal, natural_order, reverse_order
from .core.errors import (
    BuilderClosedError,
    EmptyCollectionError,
    InvalidArgumentError,
    NoSuchElementError,
    ReeksError,
    SourceNotResettableError,
)
from .core.log import configure_logging, get_logger
from .core.multimap import KeyedMap, Multimap, MultimapBuilder
from .core.option import Nothing, Option, Some
from .core.source import ElementSource, IteratorSource, SequenceSource


def configure(config_path: Optional[str] = None) -> Config:
    """Loads a YAML config file and applies its `logging` section."""
    config = load_config(config_path)
    configure_logging(config)
    return config


__all__ = [
    "Collection",
    "CollectionBuilder",
    "ElementSource",
    "IteratorSource",
    "SequenceSource",
    "Option",
    "Some",
    "Nothing",
    "KeyedMap",
    "Multimap",
    "MultimapBuilder",
    "is_equal",
    "natural_order",
    "reverse_order",
    "Config",
    "load_config",
    "configure",
    "configure_logging",
    "get_logger",
    "ReeksError",
    "InvalidArgumentError",
    "EmptyCollectionError",
    "SourceNotResettableError",
    "BuilderClosedError",
    "NoSuchElementError",
]
