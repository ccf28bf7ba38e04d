# -*- coding: utf-8 -*-
# ============================================================================ #
# GardenStockBot (GSB)                                                         #
# Copyright (c) 2025 MAX                                                       #
# Licensed under the MIT License                                               #
# ============================================================================ #
"""
Config Services Package - Unified configuration service
"""

from .config_service import (
    ConfigService,
    PollingSettings,
    get_config_service,
    load_config,
)

__all__ = [
    'ConfigService', 'PollingSettings', 'get_config_service', 'load_config'
]
