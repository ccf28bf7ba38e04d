# -*- coding: utf-8 -*-
# ============================================================================ #
# GardenStockBot (GSB)                                                         #
# Copyright (c) 2025 MAX                                                       #
# Licensed under the MIT License                                               #
# ============================================================================ #

"""
Scheduling Services - polling cadences and the self re-arming feed loops
"""

from .cadence import BoundaryCadence, Cadence, IntervalCadence
from .scheduler_service import (
    LoopState,
    PollingLoop,
    PollingScheduler,
    build_polling_scheduler,
    get_active_scheduler,
    get_scheduler_stats,
    set_active_scheduler,
)

__all__ = [
    'BoundaryCadence', 'Cadence', 'IntervalCadence',
    'LoopState', 'PollingLoop', 'PollingScheduler',
    'build_polling_scheduler',
    'get_active_scheduler',
    'get_scheduler_stats',
    'set_active_scheduler',
]
