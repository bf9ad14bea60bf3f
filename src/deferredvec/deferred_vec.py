from __future__ import annotations

import copy
import logging
import operator
from collections.abc import Callable, Iterable, Iterator
from typing import TYPE_CHECKING, Generic, TypeVar

from deferredvec._internal.state import DeferredState, Initialized, Uninitialized
from deferredvec._internal.validators import FactoryValidator
from deferredvec.exceptions import DeferredVecIndexError

if TYPE_CHECKING:
    from typing_extensions import Self

T = TypeVar("T")

logger = logging.getLogger(__name__)


class DeferredVec(Generic[T]):
    """Wrap a list whose contents are produced by a factory on first access.

    The container starts deferred and holds only the factory. The first
    operation that needs the contents calls the factory once, copies its
    result into a list owned by the container and drops the factory. From then
    on the container stays materialized.

    Read accessors hand out duplicates made with ``clone`` so callers can never
    mutate the internal list through a returned value.

    If the factory raises, the exception propagates to the caller of the
    accessor that triggered it and the container stays deferred; the next
    access calls the factory again.

    The container is not thread-safe. Guard every accessor with a lock when a
    single instance is shared between threads.

    Examples:
        .. code-block:: python

            vec = DeferredVec(lambda: [1, 2, 3])
            assert vec.is_deferred()
            assert len(vec) == 3
            assert not vec.is_deferred()
            assert vec.get(1) == 2

    """

    __slots__ = ("_clone", "_state", "_validator")

    def __init__(
        self,
        factory: Callable[[], Iterable[T]],
        *,
        clone: Callable[[T], T] = copy.deepcopy,
    ) -> None:
        """Store the factory without calling it.

        Args:
            factory: Zero-argument callable returning the initial elements. Any
                iterable is accepted; the container keeps its own list copy.
            clone: Callable used to duplicate elements returned by read
                accessors. Defaults to ``copy.deepcopy``. Pass ``copy.copy`` or
                an identity function for cheap or immutable elements.

        Raises:
            DeferredVecInvalidFactoryError: If ``factory`` or ``clone`` is not
                callable.

        """
        self._validator = FactoryValidator()
        self._validator.validate_callable(factory, role="factory")
        self._validator.validate_callable(clone, role="clone")
        self._clone = clone
        self._state: DeferredState = Uninitialized(factory=factory)

    def is_deferred(self) -> bool:
        """Return whether the factory has not been called successfully yet.

        This never materializes the container.
        """
        return isinstance(self._state, Uninitialized)

    def materialize(self) -> Self:
        """Force materialization now and return the container.

        Calling it on an already materialized container does nothing.
        """
        self._ensure_initialized()
        return self

    def get(self, index: int) -> T:
        """Return a duplicate of the element at ``index``.

        Args:
            index: Position in ``[0, len(self))``. Negative values are out of
                range and do not count from the end.

        Raises:
            DeferredVecIndexError: If ``index`` is outside the contents.
            TypeError: If ``index`` is not an integer.

        """
        position = operator.index(index)
        contents = self._ensure_initialized()
        if not 0 <= position < len(contents):
            raise DeferredVecIndexError(index=position, length=len(contents))
        return self._clone(contents[position])

    def get_all(self) -> list[T]:
        """Return an independent copy of all elements in order."""
        return [self._clone(item) for item in self._ensure_initialized()]

    def push(self, value: T) -> None:
        """Append ``value`` to the end of the contents."""
        self._ensure_initialized().append(value)

    def is_empty(self) -> bool:
        return not self._ensure_initialized()

    def __len__(self) -> int:
        return len(self._ensure_initialized())

    def __getitem__(self, index: int) -> T:
        return self.get(index)

    def __iter__(self) -> Iterator[T]:
        # Snapshot taken at iter() time; later pushes are not observed.
        snapshot = tuple(self._ensure_initialized())
        return (self._clone(item) for item in snapshot)

    def __repr__(self) -> str:
        if isinstance(self._state, Initialized):
            return f"{type(self).__name__}({self._state.contents!r})"
        return f"{type(self).__name__}(<deferred>)"

    def _ensure_initialized(self) -> list[T]:
        state = self._state
        if isinstance(state, Initialized):
            return state.contents

        try:
            result = self._validator.validate_result(state.factory())
            contents = list(result)
        except Exception:
            logger.debug("DeferredVec factory %r failed; staying deferred", state.factory)
            raise

        self._state = Initialized(contents=contents)
        logger.debug("Materialized DeferredVec with %d element(s)", len(contents))
        return contents


__all__ = ["DeferredVec"]
