#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# ============================================================================ #
# GardenStockBot (GSB)                                                         #
# Copyright (c) 2025 MAX                                                       #
# Licensed under the MIT License                                               #
# ============================================================================ #
"""
Stock Query Service

Answers the on-demand ``/stock`` command with a fresh combined report.  The
report is all-or-nothing: if either feed fails, the caller receives a single
failure message instead of a partial answer.  The snapshot store is never
consulted or modified here.
"""

from __future__ import annotations

import asyncio
from dataclasses import dataclass
from typing import Optional, Tuple

import discord

from services.exceptions import FeedError
from services.feed.fetch_service import FeedFetchService
from services.feed.inventory_parser import parse_inventory
from services.feed.models import FeedResource
from services.feed.weather_normalizer import extract_weather
from utils.logging_utils import get_module_logger

from .embed_service import StockEmbedService

logger = get_module_logger('stock_query_service')

FAILURE_MESSAGE = '⚠️ Unable to fetch data right now. Please try again later.'


@dataclass(frozen=True)
class QueryResult:
    """Result of an on-demand stock query."""
    success: bool
    embeds: Tuple[discord.Embed, ...] = ()
    error_message: Optional[str] = None


class StockQueryService:
    """Service building the combined stock and weather report."""

    def __init__(self, fetcher: FeedFetchService, embed_service: StockEmbedService):
        self._fetcher = fetcher
        self._embed_service = embed_service

    async def respond(self) -> QueryResult:
        """
        Fetch both feeds and render them.

        Returns:
            QueryResult with the stock and weather embeds, or a failure message
        """
        stock_result, weather_result = await asyncio.gather(
            self._fetcher.fetch(FeedResource.INVENTORY),
            self._fetcher.fetch(FeedResource.WEATHER),
        )

        failed = [result for result in (stock_result, weather_result) if not result.success]
        if failed:
            for result in failed:
                logger.error(f"❌ /stock query failed fetching {result.resource.path}: {result.error_message}")
            return QueryResult(success=False, error_message=FAILURE_MESSAGE)

        try:
            inventory = parse_inventory(stock_result.document)
        except FeedError as e:
            logger.error(f"❌ /stock query could not parse stock data: {e}")
            return QueryResult(success=False, error_message=FAILURE_MESSAGE)

        weather = extract_weather(weather_result.document)
        return QueryResult(
            success=True,
            embeds=(
                self._embed_service.build_stock_embed(inventory),
                self._embed_service.build_weather_status_embed(weather),
            ),
        )
