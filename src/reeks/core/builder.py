from __future__ import annotations

from typing import TYPE_CHECKING, Any, Callable, Iterable, List

from .errors import BuilderClosedError
from .source import SequenceSource

if TYPE_CHECKING:
    from .collection import Collection

BuilderFactory = Callable[[int], "CollectionBuilder"]


class CollectionBuilder:
    """
    Accumulates elements and materializes them into a list-backed Collection.

    A builder is single use: once `build()` has been called any further call
    raises `BuilderClosedError`. The size hint is informational only.

    Subclasses may override `build()` to produce a different concrete
    collection; the collection they build is handed the subclass as its
    builder factory, so every derived collection keeps the same builder.
    """

    def __init__(self, size_hint: Any = 0):
        if not isinstance(size_hint, int) or isinstance(size_hint, bool) or size_hint < 0:
            size_hint = 0
        self.size_hint = size_hint
        self._elements: List[Any] = []
        self._built = False

    def _check_open(self) -> None:
        if self._built:
            raise BuilderClosedError(f"{type(self).__name__} was already built")

    def add(self, element: Any) -> "CollectionBuilder":
        self._check_open()
        self._elements.append(element)
        return self

    def add_all(self, elements: Iterable[Any]) -> "CollectionBuilder":
        """Adds every element of an iterable or ElementSource, in order."""
        self._check_open()
        self._elements.extend(elements)
        return self

    def build(self) -> "Collection":
        from .collection import Collection

        self._check_open()
        self._built = True
        return Collection(
            SequenceSource(self._elements), builder_factory=type(self)
        )

    def __len__(self) -> int:
        return len(self._elements)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(size_hint={self.size_hint}, added={len(self._elements)})"
