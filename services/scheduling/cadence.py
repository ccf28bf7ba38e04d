# -*- coding: utf-8 -*-
# ============================================================================ #
# GardenStockBot (GSB)                                                         #
# Copyright (c) 2025 MAX                                                       #
# Licensed under the MIT License                                               #
# ============================================================================ #

"""Fire-time computation for the polling loops.

Two cadences are supported:

* :class:`BoundaryCadence` fires on epoch-aligned boundaries plus a fixed
  offset (``12:00:30, 12:05:30, ...`` for a five minute period with a thirty
  second offset).  Every real UTC offset is a multiple of five minutes, so the
  boundaries coincide with the local wall clock as well.
* :class:`IntervalCadence` fires every ``interval`` measured from the moment
  the loop was started.

Both return the next fire time *strictly after* the supplied instant.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, replace
from datetime import datetime, timedelta
from typing import Optional, Protocol


class Cadence(Protocol):
    """Protocol shared by all polling cadences."""

    @property
    def period(self) -> timedelta:
        """Length of one scheduling window."""

    def anchored_at(self, start: datetime) -> "Cadence":
        """Return the cadence to use for a loop started at ``start``."""

    def next_fire_after(self, now: datetime) -> datetime:
        """Return the first fire time strictly after ``now``."""


def _require_aware(moment: datetime) -> None:
    if moment.tzinfo is None or moment.utcoffset() is None:
        raise ValueError("Cadence computations require timezone-aware datetimes")


@dataclass(frozen=True)
class BoundaryCadence:
    """Wall-clock aligned cadence: every ``period`` plus ``offset``."""

    period: timedelta = timedelta(minutes=5)
    offset: timedelta = timedelta(seconds=30)

    def __post_init__(self):
        if self.period <= timedelta(0):
            raise ValueError("period must be positive")
        if not timedelta(0) <= self.offset < self.period:
            raise ValueError("offset must be within [0, period)")

    def anchored_at(self, start: datetime) -> "BoundaryCadence":
        return self

    def next_fire_after(self, now: datetime) -> datetime:
        _require_aware(now)
        period = self.period.total_seconds()
        offset = self.offset.total_seconds()

        window = math.floor((now.timestamp() - offset) / period) + 1
        return datetime.fromtimestamp(window * period + offset, tz=now.tzinfo)


@dataclass(frozen=True)
class IntervalCadence:
    """Fixed-interval cadence counted from ``anchor``."""

    interval: timedelta = timedelta(seconds=30)
    anchor: Optional[datetime] = None

    def __post_init__(self):
        if self.interval <= timedelta(0):
            raise ValueError("interval must be positive")

    @property
    def period(self) -> timedelta:
        return self.interval

    def anchored_at(self, start: datetime) -> "IntervalCadence":
        _require_aware(start)
        return replace(self, anchor=start)

    def next_fire_after(self, now: datetime) -> datetime:
        _require_aware(now)
        if self.anchor is None:
            return now + self.interval

        elapsed = (now - self.anchor).total_seconds()
        ticks = math.floor(elapsed / self.interval.total_seconds()) + 1
        return self.anchor + self.interval * ticks
