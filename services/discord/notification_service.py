#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# ============================================================================ #
# GardenStockBot (GSB)                                                         #
# Copyright (c) 2025 MAX                                                       #
# Licensed under the MIT License                                               #
# ============================================================================ #
"""
Notification Service

Delivers change notifications to the configured Discord channel and commits
the announced snapshot into the snapshot store once Discord accepted the
message.
"""

from __future__ import annotations

import asyncio
from typing import Any, Optional

import discord

from services.exceptions import DeliveryError, DestinationUnavailableError
from services.feed.models import FeedResource, Snapshot
from services.tracking.snapshot_store import SnapshotStore
from utils.logging_utils import get_module_logger

from .embed_service import StockEmbedService

logger = get_module_logger('notification_service')


class NotificationService:
    """
    Service for announcing snapshot changes.

    Responsibilities:
    - Resolve the single destination channel (cache first, then API)
    - Render and send the notification embed
    - Commit the new snapshot only after a confirmed delivery
    """

    def __init__(
        self,
        bot: Any,
        channel_id: Optional[int],
        store: SnapshotStore,
        embed_service: StockEmbedService,
    ):
        self._bot = bot
        self._channel_id = channel_id
        self._store = store
        self._embed_service = embed_service

    @property
    def channel_id(self) -> Optional[int]:
        return self._channel_id

    async def resolve_destination(self):
        """
        Resolve the output channel.

        Raises:
            DestinationUnavailableError: If no channel is configured or Discord
                cannot provide it.
        """
        if not self._channel_id:
            raise DestinationUnavailableError("No notification channel configured (CHANNEL_ID)")

        channel = self._bot.get_channel(self._channel_id)
        if channel is None:
            try:
                channel = await self._bot.fetch_channel(self._channel_id)
            except (discord.HTTPException, discord.InvalidData, asyncio.TimeoutError) as e:
                raise DestinationUnavailableError(
                    f"Channel {self._channel_id} could not be fetched: {e}",
                    details={'channel_id': self._channel_id}
                ) from e

        if channel is None or not hasattr(channel, 'send'):
            raise DestinationUnavailableError(
                f"Channel {self._channel_id} not found or not messageable",
                details={'channel_id': self._channel_id}
            )
        return channel

    async def notify(self, channel, resource: FeedResource, snapshot: Snapshot) -> None:
        """
        Announce ``snapshot`` in ``channel`` and commit it as last-known state.

        Raises:
            DeliveryError: If Discord rejects the message; the store keeps the
                previous snapshot so the change is announced again next cycle.
        """
        embed = self._embed_service.build_notification(resource, snapshot)
        try:
            await channel.send(embed=embed)
        except (discord.HTTPException, asyncio.TimeoutError) as e:
            raise DeliveryError(
                f"Failed to deliver {resource.label} notification: {e}",
                details={'channel_id': self._channel_id, 'resource': resource.label}
            ) from e

        self._store.commit(resource, snapshot)
        logger.info(f"📢 {resource.label.capitalize()} updated, message sent.")

    def record_baseline(self, resource: FeedResource, snapshot: Snapshot) -> None:
        """Commit ``snapshot`` without announcing it."""
        self._store.commit(resource, snapshot)
        logger.info(f"Recorded {resource.label} baseline without notification")
