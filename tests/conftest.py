import pytest

from reeks import configure_logging


class PullTracker:
    """An iterable that records every element handed out to a consumer."""

    def __init__(self, elements):
        self.elements = list(elements)
        self.pulled = []

    def __iter__(self):
        for element in self.elements:
            self.pulled.append(element)
            yield element


@pytest.fixture
def tracked():
    """Factory fixture: `tracked([1, 2, 3])` returns a fresh PullTracker."""
    return PullTracker


@pytest.fixture
def reset_logging():
    yield
    configure_logging()
