from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Callable, Iterator

from .errors import NoSuchElementError


class Option(ABC):
    """
    A value that may or may not be present.

    Returned by single-element searches such as `Collection.find_by`. An
    Option is either `Some(value)` or `Nothing()`; both are immutable and
    compare by value.
    """

    @abstractmethod
    def is_present(self) -> bool:
        ...

    def is_empty(self) -> bool:
        return not self.is_present()

    @abstractmethod
    def get(self) -> Any:
        ...

    def get_or_else(self, default: Any) -> Any:
        return self.get() if self.is_present() else default

    def map(self, fn: Callable[[Any], Any]) -> "Option":
        return Some(fn(self.get())) if self.is_present() else self

    def if_present(self, fn: Callable[[Any], Any]) -> None:
        """Calls `fn` with the value when there is one."""
        if self.is_present():
            fn(self.get())

    def __bool__(self) -> bool:
        return self.is_present()

    def __iter__(self) -> Iterator[Any]:
        if self.is_present():
            yield self.get()


@dataclass(frozen=True)
class Some(Option):
    value: Any

    def is_present(self) -> bool:
        return True

    def get(self) -> Any:
        return self.value


@dataclass(frozen=True)
class Nothing(Option):
    def is_present(self) -> bool:
        return False

    def get(self) -> Any:
        raise NoSuchElementError("Nothing has no value")
