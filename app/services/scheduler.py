"""
APScheduler Configuration

Manages periodic housekeeping jobs for the in-memory platform state.
"""
import logging
from apscheduler.schedulers.asyncio import AsyncIOScheduler
from apscheduler.triggers.interval import IntervalTrigger

from app.services.rate_limiter import FixedWindowRateLimiter

logger = logging.getLogger(__name__)


def sweep_rate_limit_windows(limiter: FixedWindowRateLimiter):
    """
    Periodic job that drops expired rate-limit windows.

    Keeps the per-client table from growing with every address ever seen.
    """
    try:
        removed = limiter.sweep()
        if removed:
            logger.info(f"Rate limiter sweep removed {removed} expired windows ({len(limiter)} active)")
    except Exception as e:
        logger.error(f"Failed to sweep rate limiter windows: {e}", exc_info=True)


def configure_scheduler(limiter: FixedWindowRateLimiter, sweep_seconds: int) -> AsyncIOScheduler:
    """
    Build an APScheduler instance with the platform's jobs.

    Jobs:
        - Rate limiter sweep: every sweep_seconds
    """
    scheduler = AsyncIOScheduler()
    scheduler.add_job(
        sweep_rate_limit_windows,
        trigger=IntervalTrigger(seconds=sweep_seconds),
        args=[limiter],
        id='rate_limit_sweep',
        name='Sweep Expired Rate Limit Windows',
        replace_existing=True,
        coalesce=True,  # Combine missed runs into single execution
        max_instances=1
    )

    logger.info(f"Scheduler configured with rate limit sweep every {sweep_seconds}s")
    return scheduler


def start_scheduler(scheduler: AsyncIOScheduler):
    """Start the APScheduler"""
    scheduler.start()
    logger.info("Scheduler started")


def stop_scheduler(scheduler: AsyncIOScheduler):
    """Stop the APScheduler"""
    if scheduler.running:
        scheduler.shutdown(wait=False)
    logger.info("Scheduler stopped")
