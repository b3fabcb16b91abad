"""
This module defines the `ElementSource` contract and the concrete sources the
library ships with.

An `ElementSource` is a one-shot cursor: it can be advanced and read, and only
some sources can be reset. Positioning is lazy, so creating a source (or
wrapping one in a stage) never reads an element; the first call to `valid()`
or `current()` does.
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterator as IteratorABC, Sequence, Sized
from typing import Any, Iterable, Iterator, Optional

from .errors import InvalidArgumentError, SourceNotResettableError

# Marks a position with no element behind it.
EXHAUSTED = object()
_UNSET = object()


class ElementSource(ABC):
    """A forward-only cursor over an ordered, possibly unbounded, sequence."""

    @abstractmethod
    def valid(self) -> bool:
        """Returns True while the cursor points at an element."""

    @abstractmethod
    def current(self) -> Any:
        """Returns the element under the cursor, or None when not valid."""

    @abstractmethod
    def advance(self) -> None:
        """Moves past the current element. Does nothing once exhausted."""

    def declared_size(self) -> Optional[int]:
        """Number of elements remaining, when it is known without reading them."""
        return None

    def reset(self) -> None:
        raise SourceNotResettableError(f"{type(self).__name__} cannot be reset")

    def __iter__(self) -> Iterator[Any]:
        # The cursor moves before each element is handed out, so a consumer
        # that stops early leaves nothing half-read behind it.
        while self.valid():
            element = self.current()
            self.advance()
            yield element


class BufferedSource(ElementSource):
    """
    Base for sources that fetch the element under the cursor on demand.

    Subclasses implement `_fetch()`, returning the element at the current
    position or `EXHAUSTED`, and `_move()`, which steps past that position.
    The fetched element is held until the cursor moves, so `current()` can be
    called repeatedly without re-running any user code.
    """

    def __init__(self) -> None:
        self._slot: Any = _UNSET

    @abstractmethod
    def _fetch(self) -> Any:
        ...

    def _move(self) -> None:
        pass

    def _peek(self) -> Any:
        if self._slot is _UNSET:
            self._slot = self._fetch()
        return self._slot

    def valid(self) -> bool:
        return self._peek() is not EXHAUSTED

    def current(self) -> Any:
        element = self._peek()
        return None if element is EXHAUSTED else element

    def advance(self) -> None:
        if self._peek() is EXHAUSTED:
            return
        self._move()
        self._slot = _UNSET

    def _clear(self) -> None:
        self._slot = _UNSET


class EmptySource(ElementSource):
    """A source with no elements."""

    def valid(self) -> bool:
        return False

    def current(self) -> Any:
        return None

    def advance(self) -> None:
        pass

    def declared_size(self) -> Optional[int]:
        return 0

    def reset(self) -> None:
        pass

    def __repr__(self) -> str:
        return "EmptySource()"


class SequenceSource(ElementSource):
    """An index cursor over a `Sequence`. Sized and resettable."""

    def __init__(self, sequence: Sequence):
        self._sequence = sequence
        self._index = 0

    def valid(self) -> bool:
        return self._index < len(self._sequence)

    def current(self) -> Any:
        if not self.valid():
            return None
        return self._sequence[self._index]

    def advance(self) -> None:
        if self.valid():
            self._index += 1

    def declared_size(self) -> Optional[int]:
        return max(len(self._sequence) - self._index, 0)

    def reset(self) -> None:
        self._index = 0

    def __repr__(self) -> str:
        return f"SequenceSource(size={len(self._sequence)}, position={self._index})"


class IteratorSource(BufferedSource):
    """
    Wraps any iterable or iterator.

    The declared size is known only when the wrapped object is sized and is
    not itself an iterator (e.g. a set or a dict view). It is never resettable.
    """

    def __init__(self, iterable: Iterable[Any]):
        super().__init__()
        self._size: Optional[int] = None
        if isinstance(iterable, Sized) and not isinstance(iterable, IteratorABC):
            self._size = len(iterable)
        self._iterator = iter(iterable)
        self._moved = 0

    def _fetch(self) -> Any:
        return next(self._iterator, EXHAUSTED)

    def _move(self) -> None:
        self._moved += 1

    def declared_size(self) -> Optional[int]:
        if self._size is None:
            return None
        return max(self._size - self._moved, 0)

    def __repr__(self) -> str:
        return f"IteratorSource(size={self._size}, consumed={self._moved})"


def as_source(obj: Any) -> ElementSource:
    """
    Resolves `obj` to an ElementSource.

    `None` becomes an empty source, sources pass through, sequences get an
    index cursor and any other iterable is wrapped as a one-shot iterator.

    :raises InvalidArgumentError: If `obj` is a string or is not iterable.
    """
    if obj is None:
        return EmptySource()
    if isinstance(obj, ElementSource):
        return obj
    if isinstance(obj, (str, bytes, bytearray)):
        raise InvalidArgumentError(
            "Collection", "strings are not element sources; wrap them in a list"
        )
    if isinstance(obj, Sequence):
        return SequenceSource(obj)
    try:
        return IteratorSource(obj)
    except TypeError as e:
        raise InvalidArgumentError(
            "Collection", f"{type(obj).__name__} is not iterable"
        ) from e
