"""Result type for capturing computations that may raise.

A result is either ``Success(value)`` or ``Failure(cause)``. ``Try.run`` runs a
callable and converts any raised ``Exception`` into a ``Failure``; the
combinators apply the same capture to every caller-supplied function they call,
so a chain of combinators never raises. ``unwrap()`` is the only operation that
re-raises a captured cause.

Usage:
    from tryresult import Try

    result = Try.run(lambda: 10 / 0).map(lambda x: x * 2)
    result.get_or_else(lambda: -1)  # -1
"""

import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Generic, TypeVar, Union

from pydantic import ValidationError

from tryresult.domain.exceptions import PredicateNotSatisfiedError
from tryresult.domain.maybe import Just, Maybe, Nothing
from tryresult.shared.config import Settings, get_settings

logger = logging.getLogger(__name__)

T = TypeVar("T")  # Success type
U = TypeVar("U")  # Map target type
R = TypeVar("R")  # Switch handler return type


@dataclass(frozen=True)
class Success(Generic[T]):
    """Successful result containing a value."""

    value: T

    @property
    def is_success(self) -> bool:
        return True

    @property
    def is_failure(self) -> bool:
        return False

    def unwrap(self) -> T:
        """Get the value (safe because this is Success)."""
        return self.value

    def get_or_else(self, default: Callable[[], T]) -> T:
        """Get the value (``default`` is not called)."""
        return self.value

    def or_else(self, default: Callable[[], "Result[T]"]) -> "Result[T]":
        return self

    def to_maybe(self) -> Just[T]:
        return Maybe.just(self.value)

    def map(self, func: Callable[[T], U]) -> "Result[U]":
        """Transform the success value, capturing anything ``func`` raises."""
        return _attempt(func, self.value)

    def filter(self, predicate: Callable[[T], bool]) -> "Result[T]":
        """Keep this result if ``predicate`` holds for the value.

        A rejected value becomes a Failure carrying ``PredicateNotSatisfiedError``;
        an exception raised by ``predicate`` becomes a Failure carrying that exception.
        """
        try:
            holds = bool(predicate(self.value))
        except Exception as e:
            return _captured(e, predicate)
        if holds:
            return self
        if _capture_logging_enabled():
            logger.debug("Predicate %s rejected %r", _name_of(predicate), self.value)
        return Failure(PredicateNotSatisfiedError(self.value))

    def flat_map(self, func: Callable[[T], "Result[U]"]) -> "Result[U]":
        """Chain a result-returning function; its result is returned as-is."""
        try:
            return func(self.value)
        except Exception as e:
            return _captured(e, func)

    def recover(self, func: Callable[[Exception], T]) -> "Result[T]":
        return self

    def recover_with(self, func: Callable[[Exception], "Result[T]"]) -> "Result[T]":
        return self

    def switch(
        self, on_success: Callable[[T], R], on_failure: Callable[[Exception], R]
    ) -> R:
        """Call ``on_success`` with the value and return what it returns."""
        return on_success(self.value)

    def flatten(self) -> "Result[Any]":
        """Collapse ``Success(result)`` into ``result``."""
        if isinstance(self.value, (Success, Failure)):
            return self.value
        return self

    # LINQ-style aliases
    select = map
    where = filter
    select_many = flat_map

    def __repr__(self) -> str:
        return f"Success({self.value!r})"


@dataclass(frozen=True)
class Failure(Generic[T]):
    """Failed result containing the exception that caused it."""

    cause: Exception

    def __post_init__(self) -> None:
        if not isinstance(self.cause, BaseException):
            raise TypeError(
                f"Failure cause must be an exception, got {type(self.cause).__name__}"
            )

    @property
    def is_success(self) -> bool:
        return False

    @property
    def is_failure(self) -> bool:
        return True

    def unwrap(self) -> T:
        """Get the value (raises the cause because this is Failure)."""
        raise self.cause

    def get_or_else(self, default: Callable[[], T]) -> T:
        """Call and return ``default()``."""
        return default()

    def or_else(self, default: Callable[[], "Result[T]"]) -> "Result[T]":
        """Fall back to the result of ``default()``, capturing anything it raises."""
        return Try.run(default).flatten()

    def to_maybe(self) -> Nothing:
        return Maybe.nothing()

    def map(self, func: Callable[[T], U]) -> "Result[U]":
        return Failure(self.cause)

    def filter(self, predicate: Callable[[T], bool]) -> "Result[T]":
        return self

    def flat_map(self, func: Callable[[T], "Result[U]"]) -> "Result[U]":
        return Failure(self.cause)

    def recover(self, func: Callable[[Exception], T]) -> "Result[T]":
        """Turn the cause into a success value, capturing anything ``func`` raises."""
        return _attempt(func, self.cause)

    def recover_with(self, func: Callable[[Exception], "Result[T]"]) -> "Result[T]":
        """Replace this failure with the result ``func`` builds from the cause."""
        return _attempt(func, self.cause).flatten()

    def switch(
        self, on_success: Callable[[T], R], on_failure: Callable[[Exception], R]
    ) -> R:
        """Call ``on_failure`` with the cause and return what it returns."""
        return on_failure(self.cause)

    def flatten(self) -> "Result[Any]":
        return self

    select = map
    where = filter
    select_many = flat_map

    def __repr__(self) -> str:
        return f"Failure({self.cause!r})"


# Type alias for clearer function signatures
Result = Union[Success[T], Failure[T]]


class Try:
    """Factory for results."""

    @staticmethod
    def run(producer: Callable[[], T]) -> Result[T]:
        """Call ``producer`` once and capture its outcome.

        Args:
            producer: Zero-argument callable to run

        Returns:
            Success with the returned value, or Failure with the raised exception.
            ``BaseException`` subclasses such as ``KeyboardInterrupt`` propagate.
        """
        return _attempt(producer)

    @staticmethod
    def success(value: T) -> Result[T]:
        return Success(value)

    @staticmethod
    def failure(cause: Exception) -> Result[Any]:
        return Failure(cause)

    @staticmethod
    def flatten(result: "Result[Result[T]]") -> Result[T]:
        return result.flatten()


def _name_of(func: Callable[..., Any]) -> str:
    return getattr(func, "__qualname__", None) or type(func).__qualname__


def _capture_logging_enabled() -> bool:
    """Whether capture records should be emitted.

    Settings are only read once DEBUG is enabled for this logger. Malformed
    ``TRYRESULT_*`` variables fall back to the field default so that capture
    itself never raises.
    """
    if not logger.isEnabledFor(logging.DEBUG):
        return False
    try:
        return get_settings().log_captured_errors
    except ValidationError:
        return Settings.model_fields["log_captured_errors"].default


def _attempt(func: Callable[..., T], *args: Any) -> Result[T]:
    try:
        return Success(func(*args))
    except Exception as e:
        return _captured(e, func)


def _captured(error: Exception, func: Callable[..., Any]) -> Failure[Any]:
    if _capture_logging_enabled():
        logger.debug("Captured %s from %s: %s", type(error).__name__, _name_of(func), error)
    return Failure(error)
