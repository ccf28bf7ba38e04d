# -*- coding: utf-8 -*-
# ============================================================================ #
# GardenStockBot (GSB)                                                         #
# Copyright (c) 2025 MAX                                                       #
# Licensed under the MIT License                                               #
# ============================================================================ #
"""
Resource Watch Service

One poll cycle for one feed: resolve the destination, fetch, canonicalize,
compare against the last-known snapshot and notify on change.  Errors are not
handled here; they propagate to the polling loop, which logs them and re-arms.
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Any, Dict

from services.feed.fetch_service import FeedFetchService
from services.feed.inventory_parser import parse_inventory
from services.feed.models import FeedResource, Snapshot
from services.feed.weather_normalizer import extract_weather
from utils.logging_utils import get_module_logger

from .change_detector import has_changed
from .snapshot_store import SnapshotStore

if TYPE_CHECKING:
    from services.discord.notification_service import NotificationService

logger = get_module_logger('tracking.watch_service')


class CycleOutcome(Enum):
    BASELINE = "baseline"
    UNCHANGED = "unchanged"
    NOTIFIED = "notified"


def to_snapshot(resource: FeedResource, document: Dict[str, Any]) -> Snapshot:
    """Canonicalize a fetched document for ``resource``."""
    if resource is FeedResource.INVENTORY:
        return parse_inventory(document)
    return extract_weather(document)


class ResourceWatchService:
    """
    Service running fetch -> detect -> notify for a single feed.

    When no snapshot is known yet, the first successful fetch is recorded as
    the baseline without an announcement, unless ``announce_baseline`` is set.
    """

    def __init__(
        self,
        resource: FeedResource,
        fetcher: FeedFetchService,
        store: SnapshotStore,
        notifier: "NotificationService",
        *,
        announce_baseline: bool = False,
    ):
        self.resource = resource
        self._fetcher = fetcher
        self._store = store
        self._notifier = notifier
        self._announce_baseline = announce_baseline

    async def prime(self) -> bool:
        """
        Record the current feed state as baseline, without notifying.

        Returns:
            True if a baseline is known afterwards, False if the fetch failed
        """
        if self._store.has_baseline(self.resource):
            return True
        if self._announce_baseline:
            logger.debug(f"Baseline announcements enabled, not priming {self.resource.label}")
            return False

        result = await self._fetcher.fetch(self.resource)
        if not result.success:
            logger.warning(f"Initial {self.resource.label} fetch failed: {result.error_message}")
            return False

        self._notifier.record_baseline(self.resource, to_snapshot(self.resource, result.document))
        return True

    async def run_cycle(self) -> CycleOutcome:
        """
        Run one cycle.

        Raises:
            DestinationUnavailableError: Output channel could not be resolved
            FeedError: Fetch or document parsing failed
            DeliveryError: The notification could not be sent
        """
        channel = await self._notifier.resolve_destination()

        document = (await self._fetcher.fetch(self.resource)).unwrap()
        snapshot = to_snapshot(self.resource, document)
        previous = self._store.get(self.resource)

        if previous is None and not self._announce_baseline:
            self._notifier.record_baseline(self.resource, snapshot)
            return CycleOutcome.BASELINE

        if not has_changed(previous, snapshot):
            logger.info(f"No {self.resource.label} changes.")
            return CycleOutcome.UNCHANGED

        logger.info(f"{self.resource.label.capitalize()} changed, sending message...")
        await self._notifier.notify(channel, self.resource, snapshot)
        return CycleOutcome.NOTIFIED
