"""
Pytest fixtures for the Rivix site tests.

Time never advances on its own in these tests: the limiter reads a fake
clock that each test moves explicitly.
"""

import pytest

from rivix_core.security import FixedWindowRateLimiter


class FakeClock:
    """Manually advanced stand-in for time.time()."""

    def __init__(self, start: float = 1_700_000_000.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def limiter(clock) -> FixedWindowRateLimiter:
    """Limiter with the production defaults (5 POSTs per 60s) on a fake clock."""
    return FixedWindowRateLimiter(window_seconds=60, max_requests=5, clock=clock)
