# main.py — FastAPI + APScheduler; the dataset loads in the background while the server starts
import asyncio
import logging

import uvicorn
from vehicle_stats.config import settings
from vehicle_stats.jobs.scheduler import start_scheduler
from vehicle_stats.store import DatasetStore
from vehicle_stats.web.server import create_app

logger = logging.getLogger(__name__)
logging.basicConfig(level=getattr(logging, settings.LOG_LEVEL))

def _log_load_failure(task: asyncio.Task) -> None:
    if not task.cancelled() and task.exception() is not None:
        logger.error("Dataset load failed", exc_info=task.exception())

async def run():
    # 1) Dataset: requests served before this finishes see an empty table
    store = DatasetStore(settings.DATA_CSV_PATH)
    load_task = asyncio.create_task(asyncio.to_thread(store.load))
    load_task.add_done_callback(_log_load_failure)

    # 2) Optional periodic reload
    scheduler = None
    if settings.RELOAD_INTERVAL_MINUTES > 0:
        scheduler = await start_scheduler(store)

    # 3) FastAPI via Uvicorn (blocks until Ctrl+C / shutdown)
    server = uvicorn.Server(
        uvicorn.Config(
            create_app(store),
            host=settings.WEB_HOST,
            port=settings.WEB_PORT,
            log_level=settings.LOG_LEVEL.lower(),
        )
    )
    logger.info("Server is running on port %d", settings.WEB_PORT)

    try:
        await server.serve()
    finally:
        if scheduler is not None:
            scheduler.shutdown(wait=False)
        if not load_task.done():
            logger.info("Shutting down before the dataset finished loading")
        await asyncio.gather(load_task, return_exceptions=True)

if __name__ == "__main__":
    try:
        asyncio.run(run())
    except (KeyboardInterrupt, SystemExit):
        pass
