# vehicle_stats/jobs/scheduler.py
import asyncio
import logging

from apscheduler.schedulers.asyncio import AsyncIOScheduler
from apscheduler.triggers.interval import IntervalTrigger

from vehicle_stats.config import settings
from vehicle_stats.store import DatasetStore

logger = logging.getLogger(__name__)

async def reload_dataset(store: DatasetStore) -> int:
    count = await asyncio.to_thread(store.reload)
    logger.info("Scheduled reload done: %d listings", count)
    return count

async def start_scheduler(store: DatasetStore) -> AsyncIOScheduler:
    sched = AsyncIOScheduler(timezone="UTC")
    sched.add_job(
        reload_dataset,
        IntervalTrigger(minutes=settings.RELOAD_INTERVAL_MINUTES),
        args=[store],
        max_instances=1,
        coalesce=True,
    )
    sched.start()
    return sched
