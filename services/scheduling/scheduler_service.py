# -*- coding: utf-8 -*-
# ============================================================================ #
# GardenStockBot (GSB)                                                         #
# Copyright (c) 2025 MAX                                                       #
# Licensed under the MIT License                                               #
# ============================================================================ #

import asyncio
import logging
import time
from datetime import datetime, timedelta, timezone
from enum import Enum
from typing import Any, Awaitable, Callable, Dict, List, Optional, Sequence

import aiohttp
import discord

from services.config.config_service import PollingSettings
from services.exceptions import CycleOverlapError, GardenBotBaseException
from services.tracking.watch_service import ResourceWatchService
from utils.logging_utils import setup_logger

from .cadence import BoundaryCadence, Cadence, IntervalCadence

# Logger for Scheduler Service
logger = setup_logger('gsb.scheduler_service', level=logging.DEBUG)

# Expected cycle failures; anything else is logged with a traceback as unexpected
CYCLE_ERRORS = (
    GardenBotBaseException,
    discord.DiscordException,
    aiohttp.ClientError,
    asyncio.TimeoutError,
    OSError,
    RuntimeError,
    ValueError,
    TypeError,
    KeyError,
)

Clock = Callable[[], datetime]
Sleeper = Callable[[float], Awaitable[Any]]


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class LoopState(Enum):
    IDLE = "idle"
    ARMED = "armed"
    FETCHING = "fetching"


class PollingLoop:
    """One self re-arming polling loop.

    ``IDLE -> ARMED`` when the next fire time is computed, ``ARMED -> FETCHING``
    when the cycle starts and ``FETCHING -> IDLE`` when it ends, whatever the
    outcome.  The loop only re-arms from ``IDLE``, so two cycles of the same
    loop never overlap.
    """

    def __init__(
        self,
        name: str,
        cadence: Cadence,
        cycle: Callable[[], Awaitable[Any]],
        *,
        clock: Optional[Clock] = None,
        sleep: Optional[Sleeper] = None,
    ):
        self.name = name
        self._cadence = cadence
        self._cycle = cycle
        self._clock = clock or _utc_now
        self._sleep = sleep or asyncio.sleep
        self._state = LoopState.IDLE
        self._next_fire_at: Optional[datetime] = None
        self._last_fire_at: Optional[datetime] = None
        self.stats: Dict[str, Any] = {
            'cycles_started': 0,
            'cycles_succeeded': 0,
            'cycles_failed': 0,
            'last_outcome': None,
            'last_error': None,
            'last_error_details': None,
            'last_started_at': None,
            'last_finished_at': None,
            'avg_cycle_time': 0.0,
        }

    @property
    def state(self) -> LoopState:
        return self._state

    @property
    def cadence(self) -> Cadence:
        return self._cadence

    @property
    def next_fire_at(self) -> Optional[datetime]:
        return self._next_fire_at

    def arm(self) -> float:
        """Compute the next fire time and return the delay in seconds.

        A window that already fired is never armed again, even when the
        sleep woke up slightly before its fire time.
        """
        now = self._clock()
        reference = now
        if self._last_fire_at is not None and self._last_fire_at > now:
            reference = self._last_fire_at
        fire_at = self._cadence.next_fire_after(reference)
        delay = (fire_at - now).total_seconds()
        if delay <= 0:
            fire_at += self._cadence.period
            delay = (fire_at - now).total_seconds()

        self._next_fire_at = fire_at
        self._state = LoopState.ARMED
        logger.info(f"⏳ Next {self.name} check in {round(delay)}s (at {fire_at.isoformat()})")
        return delay

    async def run_cycle(self) -> Any:
        """Run one cycle; errors are logged and swallowed.

        Raises:
            CycleOverlapError: If the previous cycle of this loop is still running.
        """
        if self._state is LoopState.FETCHING:
            raise CycleOverlapError(
                f"{self.name} cycle started while the previous one is still running",
                details={'loop': self.name}
            )

        self._state = LoopState.FETCHING
        start_time = time.time()
        self.stats['cycles_started'] += 1
        self.stats['last_started_at'] = start_time
        logger.debug(f"🔄 Running {self.name} check...")

        try:
            outcome = await self._cycle()
        except CYCLE_ERRORS as e:
            self._record_failure(e)
            logger.error(f"❌ Error during {self.name} check: {e}", exc_info=True)
            return None
        except Exception as e:
            # A cycle never ends its loop; CancelledError is not an Exception
            self._record_failure(e)
            logger.exception(f"❌ Unexpected error during {self.name} check: {e}")
            return None
        else:
            self.stats['cycles_succeeded'] += 1
            self.stats['last_outcome'] = getattr(outcome, 'value', outcome)
            self.stats['last_error'] = None
            self.stats['last_error_details'] = None
            return outcome
        finally:
            execution_time = time.time() - start_time
            self.stats['avg_cycle_time'] = (self.stats['avg_cycle_time'] * 0.9) + (execution_time * 0.1)
            self.stats['last_finished_at'] = time.time()
            self._state = LoopState.IDLE

    def _record_failure(self, error: Exception) -> None:
        self.stats['cycles_failed'] += 1
        self.stats['last_outcome'] = 'failed'
        self.stats['last_error'] = f"{type(error).__name__}: {error}"
        self.stats['last_error_details'] = (
            error.to_dict() if isinstance(error, GardenBotBaseException) else None
        )

    async def run_forever(self) -> None:
        """Arm, wait, run, repeat for the process lifetime."""
        self._cadence = self._cadence.anchored_at(self._clock())
        logger.info(f"{self.name} loop started")

        while True:
            delay = self.arm()
            await self._sleep(delay)
            self._last_fire_at = self._next_fire_at
            try:
                await self.run_cycle()
            except CycleOverlapError as e:
                logger.warning(f"Skipping {self.name} window: {e}")

    def get_stats(self) -> Dict[str, Any]:
        return {
            'state': self._state.value,
            'next_fire_at': self._next_fire_at.isoformat() if self._next_fire_at else None,
            'period_seconds': self._cadence.period.total_seconds(),
            **self.stats,
        }


class PollingScheduler:
    """Owns the inventory and weather loops and runs them as asyncio tasks."""

    def __init__(self, loops: Sequence[PollingLoop]):
        self._loops: List[PollingLoop] = list(loops)
        self._tasks: Dict[str, asyncio.Task] = {}

    @property
    def loops(self) -> List[PollingLoop]:
        return list(self._loops)

    @property
    def running(self) -> bool:
        return any(not task.done() for task in self._tasks.values())

    def get_loop(self, name: str) -> Optional[PollingLoop]:
        for loop in self._loops:
            if loop.name == name:
                return loop
        return None

    def start(self) -> bool:
        """Start every loop on the running event loop."""
        if self.running:
            logger.warning("Polling scheduler is already running.")
            return False

        event_loop = asyncio.get_running_loop()
        for loop in self._loops:
            task = event_loop.create_task(loop.run_forever(), name=f"gsb-{loop.name}-loop")
            task.add_done_callback(self._on_loop_done)
            self._tasks[loop.name] = task
        logger.info(f"Polling scheduler started ({', '.join(loop.name for loop in self._loops)})")
        return True

    def _on_loop_done(self, task: asyncio.Task) -> None:
        if task.cancelled():
            return
        error = task.exception()
        if error is not None:
            logger.critical(f"Polling task {task.get_name()} stopped unexpectedly: {error}", exc_info=error)

    async def stop(self) -> bool:
        """Cancel the loop tasks; only used on shutdown."""
        if not self._tasks:
            return False
        tasks = list(self._tasks.values())
        for task in tasks:
            task.cancel()
        await asyncio.gather(*tasks, return_exceptions=True)
        self._tasks.clear()
        logger.info("Polling scheduler stopped")
        return True

    def get_stats(self) -> Dict[str, Any]:
        return {
            'running': self.running,
            'loops': {loop.name: loop.get_stats() for loop in self._loops},
        }


def build_polling_scheduler(
    settings: PollingSettings,
    inventory_watch: ResourceWatchService,
    weather_watch: ResourceWatchService,
    *,
    clock: Optional[Clock] = None,
    sleep: Optional[Sleeper] = None,
) -> PollingScheduler:
    """Create the boundary-aligned stock loop and the fixed-interval weather loop."""
    stock_loop = PollingLoop(
        'stock',
        BoundaryCadence(
            period=timedelta(seconds=settings.stock_period_seconds),
            offset=timedelta(seconds=settings.stock_offset_seconds),
        ),
        inventory_watch.run_cycle,
        clock=clock,
        sleep=sleep,
    )
    weather_loop = PollingLoop(
        'weather',
        IntervalCadence(interval=timedelta(seconds=settings.weather_interval_seconds)),
        weather_watch.run_cycle,
        clock=clock,
        sleep=sleep,
    )
    return PollingScheduler([stock_loop, weather_loop])


# Scheduler registered by the bot runtime, read by the health endpoint
_active_scheduler: Optional[PollingScheduler] = None


def set_active_scheduler(scheduler: Optional[PollingScheduler]) -> None:
    global _active_scheduler
    _active_scheduler = scheduler


def get_active_scheduler() -> Optional[PollingScheduler]:
    return _active_scheduler


def get_scheduler_stats() -> Dict[str, Any]:
    """
    Gets current scheduler statistics.

    Returns:
        Dictionary with scheduler statistics, empty when the bot has not started the loops
    """
    if _active_scheduler is None:
        return {'running': False, 'loops': {}}
    return _active_scheduler.get_stats()
