"""
Tests for the fixed-window POST rate limiter.

Tests:
- Quota admission and rejection inside one window
- Reset-on-expiry behaviour
- Method gating and client isolation
- Sweep of expired windows
- Atomic check-then-increment under threads
"""

from concurrent.futures import ThreadPoolExecutor

import pytest

from rivix_core.security import FixedWindowRateLimiter, RateWindow


class TestAdmit:
    """Tests for FixedWindowRateLimiter.admit."""

    def test_first_request_opens_window(self, limiter):
        decision = limiter.admit("10.0.0.1", now=100.0)

        assert decision.allowed
        assert decision.remaining == 4
        assert limiter.get("10.0.0.1") == RateWindow(count=1, reset_at=160.0)

    def test_quota_then_reject_then_reset(self, limiter):
        """Five POSTs at t=0..4ms pass, the sixth is rejected, the window resets at 61s."""
        results = [limiter.admit("A", now=t / 1000).allowed for t in range(5)]
        assert results == [True] * 5

        rejected = limiter.admit("A", now=0.010)
        assert not rejected.allowed
        assert rejected.remaining == 0
        assert rejected.retry_after == 60

        after_expiry = limiter.admit("A", now=61.0)
        assert after_expiry.allowed
        assert limiter.get("A").count == 1
        assert limiter.get("A").reset_at == pytest.approx(121.0)

    def test_rejection_does_not_mutate_window(self, limiter):
        for _ in range(5):
            limiter.admit("A", now=0.0)
        before = limiter.get("A")

        for _ in range(10):
            assert not limiter.admit("A", now=30.0).allowed

        assert limiter.get("A") == before

    def test_all_requests_in_window_after_quota_rejected(self, limiter):
        for _ in range(5):
            limiter.admit("A", now=0.0)

        assert not any(limiter.admit("A", now=t).allowed for t in (1.0, 30.0, 59.9, 60.0))

    def test_window_boundary_is_inclusive(self, limiter):
        """A window only expires once ``now`` is strictly past ``reset_at``."""
        for _ in range(5):
            limiter.admit("A", now=0.0)

        assert not limiter.admit("A", now=60.0).allowed
        assert limiter.admit("A", now=60.001).allowed

    def test_burst_straddling_boundary(self, limiter):
        """Reset-on-expiry allows up to twice the quota across a window edge."""
        limiter.admit("A", now=0.0)
        late = [limiter.admit("A", now=59.9).allowed for _ in range(4)]
        early = [limiter.admit("A", now=60.001).allowed for _ in range(5)]

        # nine POSTs admitted within ~0.1s
        assert late + early == [True] * 9
        assert not limiter.admit("A", now=60.002).allowed

    def test_retry_after_is_at_least_one_second(self, limiter):
        for _ in range(5):
            limiter.admit("A", now=0.0)

        decision = limiter.admit("A", now=59.99)

        assert decision.retry_after == 1

    def test_uses_clock_when_now_omitted(self, limiter, clock):
        for _ in range(5):
            assert limiter.admit("A").allowed
        assert not limiter.admit("A").allowed

        clock.advance(61)

        assert limiter.admit("A").allowed


class TestMethodGating:
    """Only POST spends quota."""

    @pytest.mark.parametrize("method", ["GET", "HEAD", "OPTIONS", "PUT", "DELETE"])
    def test_ungated_methods_always_allowed(self, limiter, method):
        for _ in range(50):
            decision = limiter.admit("A", now=0.0, method=method)
            assert decision.allowed

        assert limiter.get("A") is None
        assert decision.to_headers() == {}

    def test_method_is_case_insensitive(self, limiter):
        limiter.admit("A", now=0.0, method="post")

        assert limiter.get("A").count == 1

    def test_get_does_not_consume_post_budget(self, limiter):
        for _ in range(4):
            limiter.admit("A", now=0.0)
        limiter.admit("A", now=0.0, method="GET")

        assert limiter.admit("A", now=0.0).allowed
        assert not limiter.admit("A", now=0.0).allowed


class TestClientIsolation:
    def test_clients_do_not_share_counts(self, limiter):
        for _ in range(5):
            limiter.admit("A", now=0.0)

        assert not limiter.admit("A", now=1.0).allowed
        assert limiter.admit("B", now=1.0).allowed
        assert limiter.get("B").count == 1
        assert limiter.get("A").count == 5


class TestSweep:
    def test_expired_entry_survives_until_sweep(self, limiter):
        t0 = 1000.0
        limiter.admit("A", now=t0)

        assert limiter.get("A") is not None  # still tracked at t0 + 60.001

        removed = limiter.sweep(now=t0 + 60.001)

        assert removed == 1
        assert limiter.get("A") is None
        assert len(limiter) == 0

    def test_request_after_eviction_opens_fresh_window(self, limiter):
        t0 = 1000.0
        for _ in range(5):
            limiter.admit("A", now=t0)
        limiter.sweep(now=t0 + 60.001)

        decision = limiter.admit("A", now=t0 + 60.002)

        assert decision.allowed
        assert limiter.get("A").count == 1

    def test_sweep_keeps_live_windows(self, limiter):
        limiter.admit("old", now=0.0)
        limiter.admit("new", now=50.0)

        removed = limiter.sweep(now=61.0)

        assert removed == 1
        assert limiter.get("old") is None
        assert limiter.get("new") is not None

    def test_sweep_empty_table(self, limiter):
        assert limiter.sweep(now=0.0) == 0


class TestManagement:
    def test_reset_and_clear(self, limiter):
        limiter.admit("A", now=0.0)
        limiter.admit("B", now=0.0)

        limiter.reset("A")
        assert limiter.get("A") is None
        assert len(limiter) == 1

        limiter.reset("missing")  # no error

        limiter.clear()
        assert len(limiter) == 0

    def test_get_returns_copy(self, limiter):
        limiter.admit("A", now=0.0)

        snapshot = limiter.get("A")
        snapshot.count = 99

        assert limiter.get("A").count == 1

    @pytest.mark.parametrize(
        "kwargs",
        [{"window_seconds": 0}, {"window_seconds": -1}, {"max_requests": 0}],
    )
    def test_rejects_invalid_configuration(self, kwargs):
        with pytest.raises(ValueError):
            FixedWindowRateLimiter(**kwargs)

    def test_decision_headers(self, limiter):
        for _ in range(5):
            limiter.admit("A", now=0.0)

        headers = limiter.admit("A", now=10.0).to_headers()

        assert headers["X-RateLimit-Limit"] == "5"
        assert headers["X-RateLimit-Remaining"] == "0"
        assert headers["X-RateLimit-Reset"] == "60"
        assert headers["Retry-After"] == "50"


def test_concurrent_admits_never_exceed_quota(limiter):
    """
    admit() must make the check-then-increment atomic.

    100 concurrent POSTs from one client inside one window admit exactly 5.
    """
    with ThreadPoolExecutor(max_workers=16) as pool:
        results = list(pool.map(lambda _: limiter.admit("A", now=0.0).allowed, range(100)))

    assert results.count(True) == 5
    assert limiter.get("A").count == 5


def test_sweep_concurrent_with_admits(limiter):
    """Sweeping while other threads admit never loses or over-counts a window."""

    def work(i: int) -> bool:
        if i % 10 == 0:
            limiter.sweep(now=0.0)
            return False
        return limiter.admit(f"client-{i % 3}", now=0.0).allowed

    with ThreadPoolExecutor(max_workers=16) as pool:
        results = list(pool.map(work, range(200)))

    assert results.count(True) == 15
    for i in range(3):
        assert limiter.get(f"client-{i}").count == 5
