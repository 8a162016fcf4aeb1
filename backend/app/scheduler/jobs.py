"""
Background job functions for the internal scheduler.

Includes:
- Rate limit table maintenance (expired window sweep)
"""

from __future__ import annotations

from rivix_core.logging import get_logger
from rivix_core.security import FixedWindowRateLimiter

logger = get_logger("backend.scheduler.jobs")


def run_rate_limit_sweep(limiter: FixedWindowRateLimiter) -> int:
    """
    Evict expired rate limit windows.

    Purely a memory bound: a client whose window was evicted simply opens a
    fresh one on its next POST, exactly as if the expired entry were still
    there.
    """
    removed = limiter.sweep()
    logger.info(
        "rate_limit_sweep_completed",
        removed_count=removed,
        tracked_clients=len(limiter),
    )
    return removed
