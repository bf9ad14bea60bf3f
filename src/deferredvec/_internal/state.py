from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import Any, TypeAlias


@dataclass(frozen=True, slots=True)
class Uninitialized:
    """Hold the pending factory of a container that has not been materialized yet."""

    factory: Callable[[], Iterable[Any]]


@dataclass(frozen=True, slots=True)
class Initialized:
    """Hold the owned contents of a materialized container.

    The dataclass is frozen but ``contents`` itself is a mutable list owned by
    the container; appends happen in place.
    """

    contents: list[Any]


DeferredState: TypeAlias = Uninitialized | Initialized
"""Exactly one of the two container states."""


__all__ = ["DeferredState", "Initialized", "Uninitialized"]
