# -*- coding: utf-8 -*-
# ============================================================================ #
# GardenStockBot (GSB)                                                         #
# Copyright (c) 2025 MAX                                                       #
# Licensed under the MIT License                                               #
# ============================================================================ #
"""Flask liveness application served next to the Discord bot."""

from .app_factory import create_app

__all__ = ["create_app"]
