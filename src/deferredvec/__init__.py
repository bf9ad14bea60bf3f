from deferredvec.deferred_vec import DeferredVec
from deferredvec.exceptions import (
    DeferredVecError,
    DeferredVecIndexError,
    DeferredVecInvalidFactoryError,
    DeferredVecInvalidFactoryResultError,
)

__all__ = [
    "DeferredVec",
    "DeferredVecError",
    "DeferredVecIndexError",
    "DeferredVecInvalidFactoryError",
    "DeferredVecInvalidFactoryResultError",
]
