"""
Scheduler initialization and management.
"""

from __future__ import annotations

import logging
from typing import Any

from apscheduler.schedulers.asyncio import AsyncIOScheduler
from apscheduler.triggers.interval import IntervalTrigger

from rivix_core.security import FixedWindowRateLimiter

from . import jobs

logger = logging.getLogger("backend.scheduler")

SWEEP_JOB_ID = "rate_limit_sweep"
DEFAULT_SWEEP_INTERVAL_SECONDS = 300

JOB_DEFINITIONS = {
    SWEEP_JOB_ID: {
        "func": jobs.run_rate_limit_sweep,
        "description": "Evict expired POST rate limit windows (memory maintenance)",
    },
}


def build_scheduler(
    limiter: FixedWindowRateLimiter,
    interval_seconds: int = DEFAULT_SWEEP_INTERVAL_SECONDS,
) -> AsyncIOScheduler:
    """
    Create a scheduler with the rate limit sweep registered.

    The scheduler is not started; the application lifespan owns that.
    """
    scheduler = AsyncIOScheduler(timezone="UTC")
    scheduler.add_job(
        jobs.run_rate_limit_sweep,
        trigger=IntervalTrigger(seconds=interval_seconds),
        id=SWEEP_JOB_ID,
        name="Rate limit sweep",
        kwargs={"limiter": limiter},
        replace_existing=True,
        max_instances=1,
        coalesce=True,
    )
    return scheduler


def start_scheduler(scheduler: AsyncIOScheduler) -> None:
    if scheduler.running:
        return
    scheduler.start()
    logger.info("Scheduler started with %d jobs", len(scheduler.get_jobs()))


def shutdown_scheduler(scheduler: AsyncIOScheduler) -> None:
    if scheduler.running:
        scheduler.shutdown(wait=False)
        logger.info("Scheduler shut down")


def list_jobs(scheduler: AsyncIOScheduler) -> list[dict[str, Any]]:
    items = []
    for job in scheduler.get_jobs():
        next_run_time = getattr(job, "next_run_time", None)
        items.append(
            {
                "id": job.id,
                "name": job.name,
                "next_run_time": next_run_time.isoformat() if next_run_time else None,
                "trigger": str(job.trigger),
                "description": JOB_DEFINITIONS.get(job.id, {}).get("description"),
            }
        )
    return items
