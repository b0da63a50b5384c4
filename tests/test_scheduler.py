# Area: Core Tests
"""Tests for the APScheduler-backed round timer."""

import asyncio

from bingo_referee._core.scheduler import RoundScheduler


class TickCounter:
    """Handler recording how often it ran."""

    def __init__(self, fail=False):
        self.calls = 0
        self.fail = fail

    async def __call__(self):
        self.calls += 1
        if self.fail:
            raise RuntimeError("entropy source down")


def run(coro):
    return asyncio.run(coro)


class TestRoundSchedulerArming:
    """Tests for arm/disarm bookkeeping."""

    def test_not_armed_initially(self):
        assert RoundScheduler().armed is False

    def test_disarm_without_arm_is_noop(self):
        scheduler = RoundScheduler()
        scheduler.disarm()
        scheduler.disarm()
        assert scheduler.armed is False

    def test_arm_then_disarm_twice(self):
        async def scenario():
            scheduler = RoundScheduler()
            scheduler.arm(60, TickCounter())
            assert scheduler.armed is True
            scheduler.disarm()
            scheduler.disarm()
            assert scheduler.armed is False
            assert scheduler.scheduler.get_jobs() == []
            scheduler.shutdown()

        run(scenario())

    def test_rearm_keeps_single_job(self):
        async def scenario():
            scheduler = RoundScheduler()
            scheduler.arm(60, TickCounter())
            scheduler.arm(60, TickCounter())
            assert len(scheduler.scheduler.get_jobs()) == 1
            scheduler.shutdown()

        run(scenario())

    def test_shutdown_stops_scheduler(self):
        async def scenario():
            scheduler = RoundScheduler()
            scheduler.arm(60, TickCounter())
            underlying = scheduler.scheduler
            scheduler.shutdown()
            assert scheduler.armed is False
            assert scheduler.scheduler is None
            # The stop itself lands on the next loop iteration
            await asyncio.sleep(0.01)
            assert underlying.running is False

        run(scenario())

    def test_shutdown_twice(self):
        async def scenario():
            scheduler = RoundScheduler()
            scheduler.arm(60, TickCounter())
            scheduler.shutdown()
            scheduler.shutdown()
            assert scheduler.armed is False

        run(scenario())

    def test_rearm_right_after_shutdown_keeps_ticking(self):
        async def scenario():
            scheduler = RoundScheduler()
            scheduler.arm(0.05, TickCounter())
            first = scheduler.scheduler
            scheduler.shutdown()

            handler = TickCounter()
            scheduler.arm(0.05, handler)
            assert scheduler.scheduler is not first
            await asyncio.sleep(0.4)

            assert scheduler.armed is True
            assert scheduler.scheduler.running is True
            assert handler.calls >= 2
            scheduler.shutdown()

        run(scenario())


class TestRoundSchedulerTicks:
    """Tests that actually let the timer fire."""

    def test_handler_runs_every_interval(self):
        async def scenario():
            scheduler = RoundScheduler()
            handler = TickCounter()
            scheduler.arm(0.02, handler)
            await asyncio.sleep(0.3)
            scheduler.shutdown()
            return handler.calls

        assert run(scenario()) >= 3

    def test_no_ticks_after_disarm(self):
        async def scenario():
            scheduler = RoundScheduler()
            handler = TickCounter()
            scheduler.arm(0.02, handler)
            await asyncio.sleep(0.15)
            scheduler.disarm()
            await asyncio.sleep(0.02)
            calls_at_disarm = handler.calls
            await asyncio.sleep(0.15)
            scheduler.shutdown()
            return calls_at_disarm, handler.calls

        at_disarm, final = run(scenario())
        assert final == at_disarm

    def test_failing_tick_is_skipped_not_fatal(self):
        async def scenario():
            scheduler = RoundScheduler()
            handler = TickCounter(fail=True)
            scheduler.arm(0.02, handler)
            await asyncio.sleep(0.3)
            still_armed = scheduler.armed
            scheduler.shutdown()
            return handler.calls, scheduler.failed_ticks, still_armed

        calls, failed, still_armed = run(scenario())
        assert calls >= 2
        assert failed == calls
        assert still_armed is True

    def test_run_tick_swallows_errors(self):
        scheduler = RoundScheduler()
        handler = TickCounter(fail=True)
        run(scheduler._run_tick(handler))
        assert scheduler.failed_ticks == 1
