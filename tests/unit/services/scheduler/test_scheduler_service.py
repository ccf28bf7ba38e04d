# -*- coding: utf-8 -*-
# ============================================================================ #
# GardenStockBot (GSB)                                                         #
# Copyright (c) 2025 MAX                                                       #
# Licensed under the MIT License                                               #
# ============================================================================ #
"""
Unit tests for PollingLoop and PollingScheduler.

Loops run with a fake clock and a sleep stub, so no test waits in real time.
"""

import asyncio
from datetime import datetime, timedelta, timezone

import pytest

from services.config.config_service import PollingSettings
from services.exceptions import CycleOverlapError, FeedNetworkError
from services.scheduling import scheduler_service
from services.scheduling.cadence import BoundaryCadence, IntervalCadence
from services.scheduling.scheduler_service import (
    LoopState,
    PollingLoop,
    PollingScheduler,
    build_polling_scheduler,
    get_scheduler_stats,
    set_active_scheduler,
)


class FakeClock:
    def __init__(self, start):
        self.now = start

    def __call__(self):
        return self.now

    async def sleep(self, seconds):
        self.now += timedelta(seconds=seconds)


def start_time():
    return datetime(2025, 6, 1, 12, 3, 10, tzinfo=timezone.utc)


class TestArm:
    def test_arm_returns_delay_to_boundary(self):
        clock = FakeClock(start_time())
        loop = PollingLoop("stock", BoundaryCadence(), _noop, clock=clock)

        delay = loop.arm()

        assert delay == 140
        assert loop.state is LoopState.ARMED
        assert loop.next_fire_at == datetime(2025, 6, 1, 12, 5, 30, tzinfo=timezone.utc)

    def test_arm_never_returns_past_fire_time(self):
        class StaleCadence:
            period = timedelta(seconds=30)

            def anchored_at(self, start):
                return self

            def next_fire_after(self, now):
                return now - timedelta(seconds=5)

        loop = PollingLoop("weather", StaleCadence(), _noop, clock=FakeClock(start_time()))

        assert loop.arm() == 25


async def _noop():
    return None


class TestRunCycle:
    @pytest.mark.asyncio
    async def test_success_updates_stats_and_returns_to_idle(self):
        async def cycle():
            return "notified"

        loop = PollingLoop("weather", IntervalCadence(), cycle, clock=FakeClock(start_time()))

        assert await loop.run_cycle() == "notified"
        assert loop.state is LoopState.IDLE
        assert loop.stats["cycles_succeeded"] == 1
        assert loop.stats["last_outcome"] == "notified"

    @pytest.mark.asyncio
    async def test_failure_is_logged_and_swallowed(self):
        async def cycle():
            raise FeedNetworkError("Network error fetching weather data: boom")

        loop = PollingLoop("weather", IntervalCadence(), cycle, clock=FakeClock(start_time()))

        assert await loop.run_cycle() is None
        assert loop.state is LoopState.IDLE
        assert loop.stats["cycles_failed"] == 1
        assert "FeedNetworkError" in loop.stats["last_error"]
        assert loop.stats["last_error_details"]["error"] == "FeedNetworkError"

    @pytest.mark.asyncio
    async def test_overlapping_cycle_raises(self):
        release = asyncio.Event()

        async def cycle():
            await release.wait()

        loop = PollingLoop("stock", BoundaryCadence(), cycle, clock=FakeClock(start_time()))
        first = asyncio.ensure_future(loop.run_cycle())
        await asyncio.sleep(0)
        assert loop.state is LoopState.FETCHING

        with pytest.raises(CycleOverlapError):
            await loop.run_cycle()

        release.set()
        await first
        assert loop.state is LoopState.IDLE


class TestRunForever:
    @pytest.mark.asyncio
    async def test_rearms_after_failure(self):
        clock = FakeClock(start_time())
        fired_at = []

        async def cycle():
            fired_at.append(clock())
            if len(fired_at) == 1:
                raise FeedNetworkError("boom")
            if len(fired_at) == 3:
                raise asyncio.CancelledError()

        loop = PollingLoop("stock", BoundaryCadence(), cycle, clock=clock, sleep=clock.sleep)

        with pytest.raises(asyncio.CancelledError):
            await loop.run_forever()

        assert fired_at == [
            datetime(2025, 6, 1, 12, 5, 30, tzinfo=timezone.utc),
            datetime(2025, 6, 1, 12, 10, 30, tzinfo=timezone.utc),
            datetime(2025, 6, 1, 12, 15, 30, tzinfo=timezone.utc),
        ]
        assert loop.stats["cycles_failed"] == 1

    @pytest.mark.asyncio
    async def test_unexpected_error_does_not_stop_loop(self):
        clock = FakeClock(start_time())
        fired_at = []

        async def cycle():
            fired_at.append(clock())
            if len(fired_at) == 1:
                return [][0]
            if len(fired_at) == 3:
                raise asyncio.CancelledError()

        loop = PollingLoop("stock", BoundaryCadence(), cycle, clock=clock, sleep=clock.sleep)

        with pytest.raises(asyncio.CancelledError):
            await loop.run_forever()

        assert fired_at == [
            datetime(2025, 6, 1, 12, 5, 30, tzinfo=timezone.utc),
            datetime(2025, 6, 1, 12, 10, 30, tzinfo=timezone.utc),
            datetime(2025, 6, 1, 12, 15, 30, tzinfo=timezone.utc),
        ]
        assert loop.stats["cycles_failed"] == 1
        assert loop.stats["cycles_succeeded"] == 1
        assert loop.stats["last_error_details"] is None

    @pytest.mark.asyncio
    async def test_early_wakeup_does_not_refire_window(self):
        clock = FakeClock(start_time())
        windows = []

        async def early_sleep(seconds):
            clock.now += timedelta(seconds=seconds) - timedelta(milliseconds=50)

        async def cycle():
            windows.append(loop.next_fire_at)
            if len(windows) == 3:
                raise asyncio.CancelledError()

        loop = PollingLoop("stock", BoundaryCadence(), cycle, clock=clock, sleep=early_sleep)

        with pytest.raises(asyncio.CancelledError):
            await loop.run_forever()

        assert windows == [
            datetime(2025, 6, 1, 12, 5, 30, tzinfo=timezone.utc),
            datetime(2025, 6, 1, 12, 10, 30, tzinfo=timezone.utc),
            datetime(2025, 6, 1, 12, 15, 30, tzinfo=timezone.utc),
        ]

    @pytest.mark.asyncio
    async def test_interval_loop_ticks_from_start(self):
        clock = FakeClock(start_time())
        fired_at = []

        async def cycle():
            fired_at.append(clock())
            if len(fired_at) == 2:
                raise asyncio.CancelledError()

        loop = PollingLoop("weather", IntervalCadence(), cycle, clock=clock, sleep=clock.sleep)

        with pytest.raises(asyncio.CancelledError):
            await loop.run_forever()

        assert fired_at == [start_time() + timedelta(seconds=30), start_time() + timedelta(seconds=60)]


class TestPollingScheduler:
    @pytest.fixture(autouse=True)
    def reset_active_scheduler(self):
        yield
        set_active_scheduler(None)

    @pytest.mark.asyncio
    async def test_start_and_stop(self):
        never = asyncio.Event()

        async def sleep(_):
            await never.wait()

        loops = [
            PollingLoop("stock", BoundaryCadence(), _noop, sleep=sleep),
            PollingLoop("weather", IntervalCadence(), _noop, sleep=sleep),
        ]
        scheduler = PollingScheduler(loops)

        assert scheduler.start() is True
        await asyncio.sleep(0)
        assert scheduler.running
        assert scheduler.start() is False

        assert await scheduler.stop() is True
        assert not scheduler.running

    def test_stats_without_active_scheduler(self):
        assert get_scheduler_stats() == {"running": False, "loops": {}}

    def test_stats_of_active_scheduler(self):
        scheduler = PollingScheduler([PollingLoop("weather", IntervalCadence(), _noop)])
        set_active_scheduler(scheduler)

        stats = get_scheduler_stats()

        assert stats["running"] is False
        assert stats["loops"]["weather"]["state"] == "idle"
        assert stats["loops"]["weather"]["period_seconds"] == 30.0

    def test_build_polling_scheduler_uses_settings(self):
        class StubWatch:
            async def run_cycle(self):
                return None

        settings = PollingSettings(stock_period_seconds=600, stock_offset_seconds=15, weather_interval_seconds=45)
        scheduler = build_polling_scheduler(settings, StubWatch(), StubWatch())

        stock = scheduler.get_loop("stock")
        weather = scheduler.get_loop("weather")
        assert stock.cadence == BoundaryCadence(period=timedelta(minutes=10), offset=timedelta(seconds=15))
        assert weather.cadence.period == timedelta(seconds=45)
        assert scheduler_service.get_active_scheduler() is None
