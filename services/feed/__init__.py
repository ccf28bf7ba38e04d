#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# ============================================================================ #
# GardenStockBot (GSB)                                                         #
# Copyright (c) 2025 MAX                                                       #
# Licensed under the MIT License                                               #
# ============================================================================ #
"""
Feed Services

Access to the upstream game-status API and canonicalization of its documents.

Services:
- FeedFetchService: HTTP retrieval of the stock and weather documents
- parse_inventory: stock document -> InventorySnapshot
- normalize_weather / extract_weather: weather shapes -> WeatherSnapshot
"""

__all__ = [
    'FeedResource',
    'FetchResult',
    'InventoryItem',
    'InventorySnapshot',
    'WeatherSnapshot',
    'FeedFetchService',
    'parse_inventory',
    'classify_weather',
    'normalize_weather',
    'extract_weather',
]

from .models import (
    FeedResource,
    FetchResult,
    InventoryItem,
    InventorySnapshot,
    WeatherSnapshot,
)
from .fetch_service import FeedFetchService
from .inventory_parser import parse_inventory
from .weather_normalizer import classify_weather, extract_weather, normalize_weather
