"""Domain-level exceptions for result combinators.

These exceptions are produced by the combinators themselves, not by the
computations a result wraps. Causes captured from caller code are carried
as-is and never rewrapped.
"""

from typing import Any


class TryError(Exception):
    """Base exception for all errors raised by this package."""
    pass


class PredicateNotSatisfiedError(TryError, ValueError):
    """Raised (as a Failure cause) when ``filter`` rejects a success value.

    Attributes:
        value: The value the predicate did not hold for
    """

    def __init__(self, value: Any) -> None:
        super().__init__(f"Predicate does not hold for {value!r}")
        self.value = value
