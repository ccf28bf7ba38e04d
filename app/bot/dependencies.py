# -*- coding: utf-8 -*-
# ============================================================================ #
# GardenStockBot (GSB)                                                         #
# Copyright (c) 2025 MAX                                                       #
# Licensed under the MIT License                                               #
# ============================================================================ #
"""Service container wiring the feed, tracking and Discord services together."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Mapping, Optional, Tuple

from services.config.config_service import PollingSettings
from services.discord import NotificationService, StockEmbedService, StockQueryService
from services.feed import FeedFetchService, FeedResource
from services.scheduling import PollingScheduler, build_polling_scheduler
from services.tracking import ResourceWatchService, SnapshotStore


@dataclass(frozen=True)
class BotServices:
    """Container for the services shared by the startup steps and the cog."""

    settings: PollingSettings
    store: SnapshotStore
    fetcher: FeedFetchService
    embed_service: StockEmbedService
    notifier: NotificationService
    query_service: StockQueryService
    inventory_watch: ResourceWatchService
    weather_watch: ResourceWatchService
    scheduler: PollingScheduler

    @property
    def watches(self) -> Tuple[ResourceWatchService, ResourceWatchService]:
        return (self.inventory_watch, self.weather_watch)

    async def close(self) -> None:
        """Stop the polling loops and release the HTTP session."""
        await self.scheduler.stop()
        await self.fetcher.close()


def build_services(
    bot: Any,
    config: Mapping[str, Any],
    logger: logging.Logger,
    *,
    fetcher: Optional[FeedFetchService] = None,
) -> BotServices:
    """Construct every service for one bot process.

    Raises:
        ConfigValidationError: If the polling settings are invalid.
    """

    settings = PollingSettings.from_config(config)
    store = SnapshotStore()
    if fetcher is None:
        fetcher = FeedFetchService(
            str(config["api_base_url"]),
            timeout_seconds=settings.feed_timeout_seconds,
        )
    embed_service = StockEmbedService(stock_period_seconds=settings.stock_period_seconds)
    notifier = NotificationService(bot, config.get("channel_id"), store, embed_service)
    if notifier.channel_id is None:
        logger.warning("No CHANNEL_ID configured - change notifications will fail until it is set")

    inventory_watch = ResourceWatchService(
        FeedResource.INVENTORY, fetcher, store, notifier,
        announce_baseline=settings.announce_baseline,
    )
    weather_watch = ResourceWatchService(
        FeedResource.WEATHER, fetcher, store, notifier,
        announce_baseline=settings.announce_baseline,
    )

    return BotServices(
        settings=settings,
        store=store,
        fetcher=fetcher,
        embed_service=embed_service,
        notifier=notifier,
        query_service=StockQueryService(fetcher, embed_service),
        inventory_watch=inventory_watch,
        weather_watch=weather_watch,
        scheduler=build_polling_scheduler(settings, inventory_watch, weather_watch),
    )
