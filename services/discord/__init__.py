# -*- coding: utf-8 -*-
# ============================================================================ #
# GardenStockBot (GSB)                                                         #
# Copyright (c) 2025 MAX                                                       #
# Licensed under the MIT License                                               #
# ============================================================================ #
"""
Discord Services

Service-First architecture for Discord-specific operations.

Services:
- StockEmbedService: Embed rendering for stock and weather snapshots
- NotificationService: Channel delivery of change notifications
- StockQueryService: On-demand combined stock report
"""

__all__ = [
    'StockEmbedService',
    'NotificationService',
    'StockQueryService',
    'QueryResult',
    'FAILURE_MESSAGE',
]

from .embed_service import StockEmbedService
from .notification_service import NotificationService
from .query_service import FAILURE_MESSAGE, QueryResult, StockQueryService
