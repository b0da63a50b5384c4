# Area: Core
"""
bingo_referee._core.scheduler — Round Scheduler Adapter
=======================================================

Drives the number-calling loop with an APScheduler interval job on the
running asyncio loop. At most one job is live at a time.

Each tick runs the handler coroutine once. A failing tick is logged and
skipped; the next tick fires as usual. A tick that is still waiting on
entropy when the next one is due causes that next one to be skipped
(``max_instances=1``).
"""

from __future__ import annotations

import logging
from typing import Any, Awaitable, Callable, Optional

from apscheduler.jobstores.base import JobLookupError
from apscheduler.schedulers.asyncio import AsyncIOScheduler

logger = logging.getLogger("bingo_referee.scheduler")

TickHandler = Callable[[], Awaitable[Any]]

JOB_ID = "bingo-round-tick"


class RoundScheduler:
    """
    Cancellable periodic timer for the active round.

    Attributes:
        failed_ticks: Number of ticks whose handler raised
    """

    def __init__(self, scheduler: Optional[AsyncIOScheduler] = None):
        self._scheduler = scheduler
        self._job = None
        self.failed_ticks = 0

    @property
    def armed(self) -> bool:
        return self._job is not None

    @property
    def scheduler(self) -> Optional[AsyncIOScheduler]:
        return self._scheduler

    def arm(self, interval_seconds: float, handler: TickHandler) -> None:
        """
        Start calling ``handler`` every ``interval_seconds``.

        Must be called from code running on the event loop. Any job armed
        earlier is disarmed first.
        """
        self.disarm()
        scheduler = self._ensure_started()
        self._job = scheduler.add_job(
            self._run_tick,
            "interval",
            seconds=interval_seconds,
            args=[handler],
            id=JOB_ID,
            replace_existing=True,
            max_instances=1,
            coalesce=True,
        )
        logger.info(f"Round timer armed: every {interval_seconds}s")

    def disarm(self) -> None:
        """Stop the timer. No-op if nothing is armed."""
        if self._job is None:
            return
        job, self._job = self._job, None
        try:
            job.remove()
        except JobLookupError:
            logger.debug("Round timer job already gone")
        logger.info("Round timer disarmed")

    def shutdown(self) -> None:
        """
        Disarm and stop the underlying scheduler.

        AsyncIOScheduler finishes its shutdown on a later loop iteration,
        so the instance is released here and a later ``arm`` starts a
        fresh one.
        """
        self.disarm()
        scheduler, self._scheduler = self._scheduler, None
        if scheduler is not None and scheduler.running:
            scheduler.shutdown(wait=False)

    def _ensure_started(self) -> AsyncIOScheduler:
        if self._scheduler is None:
            self._scheduler = AsyncIOScheduler()
        if not self._scheduler.running:
            self._scheduler.start()
        return self._scheduler

    async def _run_tick(self, handler: TickHandler) -> None:
        try:
            await handler()
        except Exception as e:
            self.failed_ticks += 1
            logger.error(f"Round tick failed, skipping: {e}", exc_info=True)
