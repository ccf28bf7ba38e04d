# -*- coding: utf-8 -*-
# ============================================================================ #
# GardenStockBot (GSB)                                                         #
# Copyright (c) 2025 MAX                                                       #
# Licensed under the MIT License                                               #
# ============================================================================ #
"""Utilities for constructing and running the Discord bot runtime."""

from .runtime import BotRuntime, build_runtime  # noqa: F401
from .dependencies import BotServices, build_services  # noqa: F401
from .factory import create_bot  # noqa: F401
from .events import register_event_handlers  # noqa: F401
from .token import get_bot_token  # noqa: F401
