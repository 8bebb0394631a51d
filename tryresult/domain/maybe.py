"""Optional-value companion type.

``Result.to_maybe()`` converts into this type through the two factory entry
points ``Maybe.just`` and ``Maybe.nothing``.
"""

from collections.abc import Callable
from dataclasses import dataclass
from typing import Generic, TypeVar, Union

T = TypeVar("T")


@dataclass(frozen=True)
class Just(Generic[T]):
    """A present value. ``None`` is a legitimate value."""

    value: T

    @property
    def has_value(self) -> bool:
        return True

    def get_or_else(self, default: Callable[[], T]) -> T:
        """Get the value (``default`` is not called)."""
        return self.value

    def __repr__(self) -> str:
        return f"Just({self.value!r})"


@dataclass(frozen=True)
class Nothing:
    """An absent value. All instances compare equal."""

    @property
    def has_value(self) -> bool:
        return False

    def get_or_else(self, default: Callable[[], T]) -> T:
        """Call and return ``default()``."""
        return default()

    def __repr__(self) -> str:
        return "Nothing"


class Maybe:
    """Factory for optional values."""

    @staticmethod
    def just(value: T) -> "Just[T]":
        return Just(value)

    @staticmethod
    def nothing() -> Nothing:
        return Nothing()


# Type alias for clearer function signatures
MaybeValue = Union[Just[T], Nothing]
