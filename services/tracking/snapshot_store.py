# -*- coding: utf-8 -*-
# ============================================================================ #
# GardenStockBot (GSB)                                                         #
# Copyright (c) 2025 MAX                                                       #
# Licensed under the MIT License                                               #
# ============================================================================ #

"""Last-known state of the polled feeds.

The store keeps the most recently *announced* inventory and weather snapshots.
It lives for the process lifetime and is handed explicitly to the services
that need it, so tests can run against an isolated instance seeded with
fixture snapshots.  Only the notification service writes to it.
"""

from __future__ import annotations

import time
from dataclasses import dataclass
from typing import Dict, Optional

from services.feed.models import FeedResource, InventorySnapshot, Snapshot, WeatherSnapshot
from utils.logging_utils import get_module_logger

logger = get_module_logger("tracking.snapshot_store")

_SNAPSHOT_TYPES = {
    FeedResource.INVENTORY: InventorySnapshot,
    FeedResource.WEATHER: WeatherSnapshot,
}


@dataclass
class _LastKnownState:
    """Container for the snapshots and their commit bookkeeping."""

    inventory: Optional[InventorySnapshot] = None
    weather: Optional[WeatherSnapshot] = None
    inventory_committed_at: float = 0.0
    weather_committed_at: float = 0.0


class SnapshotStore:
    """Mutable last-known state shared by the poll cycles."""

    def __init__(self) -> None:
        self._state = _LastKnownState()

    # ------------------------------------------------------------------
    # Read helpers
    # ------------------------------------------------------------------
    @property
    def inventory(self) -> Optional[InventorySnapshot]:
        return self._state.inventory

    @property
    def weather(self) -> Optional[WeatherSnapshot]:
        return self._state.weather

    def get(self, resource: FeedResource) -> Optional[Snapshot]:
        if resource is FeedResource.INVENTORY:
            return self._state.inventory
        return self._state.weather

    def has_baseline(self, resource: FeedResource) -> bool:
        return self.get(resource) is not None

    def committed_at(self, resource: FeedResource) -> float:
        if resource is FeedResource.INVENTORY:
            return self._state.inventory_committed_at
        return self._state.weather_committed_at

    # ------------------------------------------------------------------
    # Write helpers
    # ------------------------------------------------------------------
    def commit(self, resource: FeedResource, snapshot: Snapshot, *, timestamp: Optional[float] = None) -> None:
        """Replace the last-known snapshot for ``resource``."""

        expected = _SNAPSHOT_TYPES[resource]
        if not isinstance(snapshot, expected):
            raise TypeError(
                f"{resource.label} snapshot must be {expected.__name__}, got {type(snapshot).__name__}"
            )

        committed_at = timestamp if timestamp is not None else time.time()
        if resource is FeedResource.INVENTORY:
            self._state.inventory = snapshot
            self._state.inventory_committed_at = committed_at
        else:
            self._state.weather = snapshot
            self._state.weather_committed_at = committed_at
        logger.debug("Committed %s snapshot", resource.label)

    def describe(self) -> Dict[str, object]:
        return {
            "inventory_known": self._state.inventory is not None,
            "weather_known": self._state.weather is not None,
            "inventory_committed_at": self._state.inventory_committed_at or None,
            "weather_committed_at": self._state.weather_committed_at or None,
        }
