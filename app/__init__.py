# -*- coding: utf-8 -*-
# ============================================================================ #
# GardenStockBot (GSB)                                                         #
# Copyright (c) 2025 MAX                                                       #
# Licensed under the MIT License                                               #
# ============================================================================ #
"""GardenStockBot application package: bot runtime, bootstrap and liveness web app."""

__version__ = "1.0.0"
SERVICE_NAME = "GardenStockBot"
