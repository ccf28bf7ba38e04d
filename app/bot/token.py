# -*- coding: utf-8 -*-
# ============================================================================ #
# GardenStockBot (GSB)                                                         #
# Copyright (c) 2025 MAX                                                       #
# Licensed under the MIT License                                               #
# ============================================================================ #
"""Token retrieval helpers for the Discord bot."""

from __future__ import annotations

from typing import Optional

from .runtime import BotRuntime


def get_bot_token(runtime: BotRuntime) -> Optional[str]:
    """Resolve the Discord bot token from the effective configuration."""

    token = runtime.config.get("bot_token")
    if token:
        runtime.logger.info("✅ Using bot token from configuration")
        return str(token).strip()

    runtime.logger.error(
        "Bot token missing: set DISCORD_BOT_TOKEN (or TOKEN) in the environment or .env file"
    )
    return None
