#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# ============================================================================ #
# GardenStockBot (GSB)                                                         #
# Copyright (c) 2025 MAX                                                       #
# Licensed under the MIT License                                               #
# ============================================================================ #
"""
Stock Embed Service

Builds the Discord embeds for stock and weather snapshots.  All output is a
pure function of the snapshot (plus the send time), so the same snapshot
always renders the same fields in the same order.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Callable, Dict, List, Optional

import discord

from services.feed.models import (
    FeedResource,
    InventoryItem,
    InventorySnapshot,
    Snapshot,
    WeatherSnapshot,
)
from utils.logging_utils import get_module_logger

logger = get_module_logger('stock_embed_service')

STOCK_COLOR = 0x2ECC71
WEATHER_COLOR = 0x87CEEB

# Discord embed limits
MAX_FIELDS = 25
MAX_FIELD_VALUE = 1024
MAX_DESCRIPTION = 4096

EMOJIS: Dict[str, Dict[str, str]] = {
    'seeds': {'Carrot': '🥕', 'Daffodil': '🌼', 'Strawberry': '🍓', 'Tomato': '🍅', 'Blueberry': '🫐'},
    'eggs': {'Common': '🥚', 'Rare': '🐣', 'Epic': '🐤', 'Legendary': '🐥'},
    'gear': {'WateringCan': '💧', 'Shovel': '🪣', 'Hoe': '🪓', 'Gloves': '🧤'},
    'weather': {
        'Sunny': '☀️', 'Rainy': '🌧️', 'Cloudy': '☁️', 'Stormy': '⛈️',
        'Snowy': '❄️', 'Windy': '🌬️', 'Foggy': '🌫️',
    },
}

FALLBACK_EMOJIS: Dict[str, str] = {
    'seeds': '🌱',
    'eggs': '🥚',
    'gear': '🛠️',
    'weather': '🌤️',
}
DEFAULT_ITEM_EMOJI = '📦'

CATEGORY_TITLES: Dict[str, str] = {
    'seeds': '🌱 Seeds',
    'eggs': '🥚 Eggs',
    'gear': '🛠️ Gear',
}

NO_WEATHER_TEXT = '🌤️ **No Weather Data**'
NO_ACTIVE_WEATHER_TEXT = '🌤️ **No active weather** in Grow a Garden right now.'


def _truncate_lines(lines: List[str], limit: int) -> str:
    """Join lines, dropping trailing ones that would exceed ``limit``."""
    kept: List[str] = []
    size = 0
    for line in lines:
        extra = len(line) + (1 if kept else 0)
        if size + extra > limit:
            while kept and size + len(f"… and {len(lines) - len(kept)} more") + 1 > limit:
                size -= len(kept.pop()) + (1 if kept else 0)
            kept.append(f"… and {len(lines) - len(kept)} more")
            break
        kept.append(line)
        size += extra
    return "\n".join(kept)


class StockEmbedService:
    """
    Service for rendering feed snapshots as Discord embeds.

    Responsibilities:
    - Resolve item and weather emojis with per-category fallbacks
    - Render the stock overview grouped by category
    - Render the weather status (query) and weather change (notification) embeds
    """

    def __init__(
        self,
        *,
        stock_period_seconds: int = 300,
        clock: Optional[Callable[[], datetime]] = None,
    ):
        self._stock_period_seconds = stock_period_seconds
        self._clock = clock or (lambda: datetime.now(timezone.utc))

    # ------------------------------------------------------------------
    # Emoji helpers
    # ------------------------------------------------------------------
    @staticmethod
    def item_emoji(category: str, name: str) -> str:
        table = EMOJIS.get(category, {})
        return table.get(name, FALLBACK_EMOJIS.get(category, DEFAULT_ITEM_EMOJI))

    @staticmethod
    def weather_emoji(condition: str) -> str:
        return EMOJIS['weather'].get(condition, FALLBACK_EMOJIS['weather'])

    @staticmethod
    def category_title(category: str) -> str:
        return CATEGORY_TITLES.get(category, f"{DEFAULT_ITEM_EMOJI} {category[:1].upper()}{category[1:]}")

    def _footer_text(self) -> str:
        minutes, seconds = divmod(self._stock_period_seconds, 60)
        if seconds == 0 and minutes == 1:
            return "Updated every minute"
        if seconds == 0:
            return f"Updated every {minutes} minutes"
        return f"Updated every {self._stock_period_seconds} seconds"

    # ------------------------------------------------------------------
    # Line formatting
    # ------------------------------------------------------------------
    def format_item(self, category: str, item: InventoryItem) -> str:
        return f"{self.item_emoji(category, item.name)} **{item.name}**: `{item.quantity:,}`"

    def format_condition(self, condition: str) -> str:
        return f"{self.weather_emoji(condition)} **{condition}**"

    # ------------------------------------------------------------------
    # Embeds
    # ------------------------------------------------------------------
    def build_stock_embed(self, snapshot: InventorySnapshot) -> discord.Embed:
        """Stock overview, one inline field per category."""
        embed = discord.Embed(
            title='🌾 Grow a Garden — Current Stock',
            color=STOCK_COLOR,
            timestamp=self._clock(),
        )
        embed.set_footer(text=self._footer_text())

        categories = list(snapshot.items())
        if not categories:
            embed.description = 'No stock data available.'
            return embed

        if len(categories) > MAX_FIELDS:
            logger.warning(f"Stock has {len(categories)} categories, only {MAX_FIELDS} are shown")

        for category, items in categories[:MAX_FIELDS]:
            lines = [self.format_item(category, item) for item in items]
            embed.add_field(
                name=self.category_title(category),
                value=_truncate_lines(lines, MAX_FIELD_VALUE) if lines else '*Sold out*',
                inline=True,
            )
        return embed

    def build_weather_status_embed(self, snapshot: WeatherSnapshot) -> discord.Embed:
        """Weather block of the on-demand ``/stock`` answer."""
        lines = [self.format_condition(condition) for condition in snapshot.conditions]
        return discord.Embed(
            title='☁️ Weather Status',
            description=_truncate_lines(lines, MAX_DESCRIPTION) if lines else NO_WEATHER_TEXT,
            color=WEATHER_COLOR,
            timestamp=self._clock(),
        )

    def build_weather_notification_embed(self, snapshot: WeatherSnapshot) -> discord.Embed:
        """Announcement sent when the active weather changes."""
        lines = [
            f"{self.weather_emoji(condition)} **{condition}** is now active in Grow a Garden!"
            for condition in snapshot.conditions
        ]
        return discord.Embed(
            title='🌦️ Current Weather',
            description=_truncate_lines(lines, MAX_DESCRIPTION) if lines else NO_ACTIVE_WEATHER_TEXT,
            color=WEATHER_COLOR,
            timestamp=self._clock(),
        )

    def build_notification(self, resource: FeedResource, snapshot: Snapshot) -> discord.Embed:
        if resource is FeedResource.INVENTORY:
            return self.build_stock_embed(snapshot)
        return self.build_weather_notification_embed(snapshot)
