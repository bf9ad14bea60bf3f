"""Shared pytest fixtures for deferredvec tests."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import Any

import pytest


class CountingFactory:
    """Factory wrapper that records how many times it was called."""

    def __init__(self, produce: Callable[[], Iterable[Any]]) -> None:
        self._produce = produce
        self.calls = 0

    def __call__(self) -> Iterable[Any]:
        self.calls += 1
        return self._produce()


@pytest.fixture()
def counting_factory() -> CountingFactory:
    """Factory returning ``[1, 2, 3]`` and counting its calls."""
    return CountingFactory(lambda: [1, 2, 3])
