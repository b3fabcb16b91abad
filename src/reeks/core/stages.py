"""
Lazy stage wrappers.

Each stage is itself an `ElementSource` wrapping exactly one upstream source
and one user function. Stages nest: a chain of n lazy operations is a chain of
n wrapped sources, and nothing runs until the outermost one is read.
Exceptions raised by user functions propagate to whoever is pulling.
"""
from __future__ import annotations

from typing import Any, Callable, Iterator, Optional

from .log import get_logger
from .source import EXHAUSTED, BufferedSource, ElementSource
from .utils import ensure_iterable

logger = get_logger("reeks.stages")


class Stage(BufferedSource):
    """Common plumbing for a source that wraps an upstream source."""

    kind = "stage"

    def __init__(self, upstream: ElementSource, func: Callable[[Any], Any]):
        super().__init__()
        self.upstream = upstream
        self.func = func
        logger.debug(
            "stage_created",
            stage=self.kind,
            func=getattr(func, "__name__", repr(func)),
        )

    def reset(self) -> None:
        self.upstream.reset()
        self._clear()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.upstream!r})"


class FilterStage(Stage):
    """Exposes only the upstream elements for which the predicate is truthy."""

    kind = "filter"

    def _fetch(self) -> Any:
        while self.upstream.valid():
            element = self.upstream.current()
            if self.func(element):
                return element
            self.upstream.advance()
        return EXHAUSTED

    def _move(self) -> None:
        self.upstream.advance()


class MapStage(Stage):
    """Exposes `func(element)` for every upstream element. Never skips."""

    kind = "map"

    def _fetch(self) -> Any:
        if not self.upstream.valid():
            return EXHAUSTED
        return self.func(self.upstream.current())

    def _move(self) -> None:
        self.upstream.advance()

    def declared_size(self) -> Optional[int]:
        return self.upstream.declared_size()


class FlatMapStage(Stage):
    """
    Exposes the in-order concatenation of the sequences `func` produces.

    A traversable result is flattened, `None` contributes nothing and any
    other value is a single element. The inner sequence for an outer element
    is exhausted before the outer source advances.
    """

    kind = "flat_map"

    def __init__(self, upstream: ElementSource, func: Callable[[Any], Any]):
        super().__init__(upstream, func)
        self._inner: Optional[Iterator[Any]] = None

    def _fetch(self) -> Any:
        while True:
            if self._inner is None:
                if not self.upstream.valid():
                    return EXHAUSTED
                produced = self.func(self.upstream.current())
                self._inner = iter(ensure_iterable(produced))

            element = next(self._inner, EXHAUSTED)
            if element is not EXHAUSTED:
                return element

            self._inner = None
            self.upstream.advance()

    def reset(self) -> None:
        super().reset()
        self._inner = None
