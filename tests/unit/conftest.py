"""Unit test fixtures.

Provides:
- Settings cache isolation between tests
- Call counters for observing whether combinators invoke caller functions
- Sample causes
"""

from collections.abc import Callable, Iterator
from typing import Any

import pytest

from tryresult.shared.config import get_settings


@pytest.fixture(autouse=True)
def clear_settings_cache() -> Iterator[None]:
    """Reload settings for every test so monkeypatched env vars take effect."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


class CallCounter:
    """Callable that records every call and delegates to ``func``."""

    def __init__(self, func: Callable[..., Any] = lambda *args: None) -> None:
        self.func = func
        self.calls: list[tuple[Any, ...]] = []

    def __call__(self, *args: Any) -> Any:
        self.calls.append(args)
        return self.func(*args)

    @property
    def count(self) -> int:
        return len(self.calls)


@pytest.fixture
def counter() -> type[CallCounter]:
    """Factory for call counters."""
    return CallCounter


@pytest.fixture
def cause() -> ValueError:
    """Sample failure cause."""
    return ValueError("boom")
