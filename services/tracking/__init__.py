# -*- coding: utf-8 -*-
# ============================================================================ #
# GardenStockBot (GSB)                                                         #
# Copyright (c) 2025 MAX                                                       #
# Licensed under the MIT License                                               #
# ============================================================================ #

"""
Tracking Services - last-known state and change detection for the feeds
"""

from .change_detector import has_changed
from .snapshot_store import SnapshotStore
from .watch_service import CycleOutcome, ResourceWatchService, to_snapshot

__all__ = [
    'has_changed',
    'SnapshotStore',
    'CycleOutcome',
    'ResourceWatchService',
    'to_snapshot',
]
