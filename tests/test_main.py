import asyncio
import logging

from main import _log_load_failure


def test_background_load_failure_is_logged(caplog):
    async def boom():
        raise RuntimeError("disk gone")

    async def run():
        task = asyncio.create_task(boom())
        await asyncio.gather(task, return_exceptions=True)
        return task

    task = asyncio.run(run())
    with caplog.at_level(logging.ERROR):
        _log_load_failure(task)
    assert "Dataset load failed" in caplog.text
    assert "disk gone" in caplog.text


def test_successful_load_logs_nothing(caplog):
    async def ok():
        return 3

    async def run():
        task = asyncio.create_task(ok())
        await task
        return task

    task = asyncio.run(run())
    with caplog.at_level(logging.ERROR):
        _log_load_failure(task)
    assert not [r for r in caplog.records if r.levelno >= logging.ERROR]
