"""
tryresult: a Success/Failure result type for computations that may raise.

Build results with ``Try.run``, ``Try.success`` or ``Try.failure``, then chain
``map``, ``filter``, ``flat_map``, ``recover`` and ``or_else``.
"""

from tryresult.domain.exceptions import PredicateNotSatisfiedError, TryError
from tryresult.domain.maybe import Just, Maybe, MaybeValue, Nothing
from tryresult.result import Failure, Result, Success, Try

__all__ = [
    "Try",
    "Success",
    "Failure",
    "Result",
    "Maybe",
    "Just",
    "Nothing",
    "MaybeValue",
    "TryError",
    "PredicateNotSatisfiedError",
]
