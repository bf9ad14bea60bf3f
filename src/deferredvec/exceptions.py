from __future__ import annotations


class DeferredVecError(Exception):
    """Represent a base class for all deferredvec-specific failures.

    Catch this type when you want to handle any deferredvec error path without
    matching each concrete exception class individually.
    """


class DeferredVecIndexError(DeferredVecError, IndexError):
    """Signal element access outside the materialized contents.

    Raised by ``DeferredVec.get`` and ``DeferredVec.__getitem__`` when the
    index is negative or not smaller than the number of elements. Negative
    indices never wrap around to the end of the sequence.

    Typical fix is checking ``len(vec)`` before indexing or iterating instead.
    """

    def __init__(self, index: int, length: int) -> None:
        self.index = index
        self.length = length
        super().__init__(f"Index {index} is out of range for DeferredVec of length {length}.")

    def __reduce__(self) -> tuple[type[DeferredVecIndexError], tuple[int, int]]:
        return type(self), (self.index, self.length)


class DeferredVecInvalidFactoryError(DeferredVecError, TypeError):
    """Signal an invalid factory or clone callable passed to ``DeferredVec``.

    Raised at construction time, before anything is deferred, so that a bad
    argument does not surface only on first access.
    """


class DeferredVecInvalidFactoryResultError(DeferredVecError, TypeError):
    """Signal that the factory returned something that is not a sequence of elements.

    Raised on first access when the factory result is not iterable, or is a
    ``str``, ``bytes`` or mapping. The container stays deferred and the next
    access calls the factory again.

    Typical fix is returning a ``list`` (or any other iterable of elements)
    from the factory.
    """
