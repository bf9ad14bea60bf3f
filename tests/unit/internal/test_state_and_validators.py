from __future__ import annotations

import dataclasses

import pytest

from deferredvec import DeferredVec
from deferredvec._internal.state import Initialized, Uninitialized
from deferredvec._internal.validators import FactoryValidator
from deferredvec.exceptions import (
    DeferredVecInvalidFactoryError,
    DeferredVecInvalidFactoryResultError,
)


def test_states_are_frozen() -> None:
    state = Initialized(contents=[1])

    with pytest.raises(dataclasses.FrozenInstanceError):
        state.contents = []  # type: ignore[misc]


def test_container_drops_factory_after_materialization() -> None:
    factory = lambda: [1]  # noqa: E731
    vec = DeferredVec(factory)

    assert vec._state == Uninitialized(factory=factory)

    vec.materialize()

    assert isinstance(vec._state, Initialized)
    assert not hasattr(vec._state, "factory")
    assert vec._state.contents == [1]


def test_validate_callable_accepts_callables() -> None:
    validator = FactoryValidator()

    validator.validate_callable(list, role="factory")
    validator.validate_callable(lambda: [], role="factory")


def test_validate_callable_names_the_role() -> None:
    validator = FactoryValidator()

    with pytest.raises(DeferredVecInvalidFactoryError, match="clone must be callable, got 3"):
        validator.validate_callable(3, role="clone")


@pytest.mark.parametrize("result", [[1], (1,), range(3), iter([1])])
def test_validate_result_accepts_iterables(result: object) -> None:
    assert FactoryValidator().validate_result(result) is result


def test_validate_result_reports_type_name() -> None:
    with pytest.raises(DeferredVecInvalidFactoryResultError, match="got NoneType"):
        FactoryValidator().validate_result(None)


@pytest.mark.parametrize("result", [{1, 2}, frozenset({1})])
def test_validate_result_rejects_unordered_sets(result: object) -> None:
    with pytest.raises(DeferredVecInvalidFactoryResultError, match="must return an iterable"):
        FactoryValidator().validate_result(result)
