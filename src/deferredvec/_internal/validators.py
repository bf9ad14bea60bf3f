from __future__ import annotations

from collections.abc import Iterable, Mapping, Set
from typing import Any

from deferredvec.exceptions import (
    DeferredVecInvalidFactoryError,
    DeferredVecInvalidFactoryResultError,
)


class FactoryValidator:
    """Validates factories at construction time and their results at materialization."""

    def validate_callable(self, candidate: object, *, role: str) -> None:
        """Validate that a factory or clone argument can be called."""
        if not callable(candidate):
            msg = f"DeferredVec {role} must be callable, got {candidate!r}."
            raise DeferredVecInvalidFactoryError(msg)

    def validate_result(self, result: object) -> Iterable[Any]:
        """Return the factory result when it is an iterable of elements.

        Strings, bytes and mappings are iterable but would be split into
        characters or keys, and sets have no order, so they are rejected as well.
        """
        if isinstance(result, (str, bytes, bytearray, Mapping, Set)) or not isinstance(result, Iterable):
            msg = (
                "DeferredVec factory must return an iterable of elements, "
                f"got {type(result).__qualname__}."
            )
            raise DeferredVecInvalidFactoryResultError(msg)
        return result


__all__ = ["FactoryValidator"]
