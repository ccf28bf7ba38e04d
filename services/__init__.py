# -*- coding: utf-8 -*-
# ============================================================================ #
# GardenStockBot (GSB)                                                         #
# Copyright (c) 2025 MAX                                                       #
# Licensed under the MIT License                                               #
# ============================================================================ #
"""
Services Package - Clean service architecture for GSB

This package contains the bot's business logic organized by domain:
- config: Configuration service (environment, .env and config.json)
- feed: Upstream feed fetching and document canonicalization
- tracking: Last-known snapshots, change detection and poll cycles
- discord: Embed formatting, channel notifications and on-demand queries
- scheduling: Boundary-aligned and fixed-interval polling loops

All services follow clean architecture patterns:
- Immutable dataclasses for type safety
- Result wrappers for consistent error handling
- Explicitly injected state instead of module-level globals
"""
