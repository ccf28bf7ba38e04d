# -*- coding: utf-8 -*-
# ============================================================================ #
# GardenStockBot (GSB)                                                         #
# Copyright (c) 2025 MAX                                                       #
# Licensed under the MIT License                                               #
# ============================================================================ #
"""Startup routines for registering and synchronising bot commands."""

from __future__ import annotations

import asyncio

import discord

from cogs.stock_commands import StockCommandsCog
from services.exceptions import RegistrationError

from ..startup_context import StartupContext, as_step


@as_step
async def load_extensions_step(context: StartupContext) -> None:
    bot = context.bot
    logger = context.logger

    if bot.get_cog(StockCommandsCog.__cog_name__) is not None:
        logger.info("StockCommandsCog already loaded, skipping")
        return

    logger.info("Loading StockCommandsCog...")
    bot.add_cog(StockCommandsCog(bot, context.services.query_service))
    logger.info("Successfully loaded StockCommandsCog")


@as_step
async def synchronize_commands_step(context: StartupContext) -> None:
    bot = context.bot
    logger = context.logger

    guild_id = context.runtime.config.get("guild_id")
    guild_ids = [guild_id] if guild_id else None
    if guild_ids:
        logger.info("Synchronizing commands for Guild ID: %s", guild_id)
    else:
        logger.info("No guild ID configured, synchronizing global commands")

    command_names = [cmd.name for cmd in getattr(bot, "pending_application_commands", [])]
    if command_names:
        logger.info("Found %d commands to sync: %s", len(command_names), command_names)

    try:
        await bot.sync_commands(guild_ids=guild_ids)
        logger.info("✅ Slash commands registered.")
    except (asyncio.TimeoutError, discord.DiscordException) as e:
        error = RegistrationError(
            f"Error syncing commands: {e}",
            details={'guild_id': guild_id}
        )
        # The bot keeps running; /stock is unavailable until the next successful sync
        logger.error(error.message)
