from __future__ import annotations

from typing import Any, Optional

from .errors import SourceNotResettableError
from .source import ElementSource


class ReadOnlySource(ElementSource):
    """
    Re-exposes a source without giving the caller control over its position.

    Reads and forward moves are forwarded; `reset()` is refused. This is a
    view, not a copy: iterating it consumes the wrapped source.
    """

    def __init__(self, source: ElementSource):
        self._source = source

    def valid(self) -> bool:
        return self._source.valid()

    def current(self) -> Any:
        return self._source.current()

    def advance(self) -> None:
        self._source.advance()

    def declared_size(self) -> Optional[int]:
        return self._source.declared_size()

    def reset(self) -> None:
        raise SourceNotResettableError("collection iterators are read-only")

    def __iter__(self) -> "ReadOnlySource":
        return self

    def __next__(self) -> Any:
        if not self._source.valid():
            raise StopIteration
        element = self._source.current()
        self._source.advance()
        return element

    def __repr__(self) -> str:
        return f"ReadOnlySource({self._source!r})"
