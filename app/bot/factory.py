# -*- coding: utf-8 -*-
# ============================================================================ #
# GardenStockBot (GSB)                                                         #
# Copyright (c) 2025 MAX                                                       #
# Licensed under the MIT License                                               #
# ============================================================================ #
"""Factory helpers for creating the Discord bot client."""

from __future__ import annotations

import discord

from .runtime import BotRuntime


def _build_intents() -> discord.Intents:
    # Slash commands and channel sends only need guild events
    intents = discord.Intents.none()
    intents.guilds = True
    return intents


def create_bot(runtime: BotRuntime) -> discord.Bot:
    """Create the py-cord client.

    When a guild id is configured every application command is registered
    with that guild only, otherwise commands are global.
    """

    logger = runtime.logger
    guild_id = runtime.config.get("guild_id")
    debug_guilds = [guild_id] if guild_id else None

    bot = discord.Bot(intents=_build_intents(), debug_guilds=debug_guilds)
    if debug_guilds:
        logger.info("Created bot with guild-scoped commands for guild %s", guild_id)
    else:
        logger.info("Created bot with global commands (no GUILD_ID configured)")
    return bot
