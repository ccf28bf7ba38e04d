# -*- coding: utf-8 -*-
# ============================================================================ #
# GardenStockBot (GSB)                                                         #
# Copyright (c) 2025 MAX                                                       #
# Licensed under the MIT License                                               #
# ============================================================================ #
"""Event wiring for the Discord bot."""

from __future__ import annotations

import traceback
from typing import Any

import discord

from .runtime import BotRuntime
from .startup import StartupManager


def register_event_handlers(bot: discord.Bot, runtime: BotRuntime) -> StartupManager:
    """Attach the core event handlers to the bot instance."""

    startup_manager = StartupManager(bot, runtime)
    logger = runtime.logger

    @bot.event
    async def on_ready():
        logger.info("-" * 50)
        user = getattr(bot, "user", None)
        if user is not None:
            logger.info("✅ Logged in as %s (ID: %s)", user, user.id)
        else:
            logger.info("Logged in (user unavailable during startup)")
        logger.info("py-cord Version: %s", discord.__version__)
        logger.info("-" * 50)

        await startup_manager.handle_ready()

    @bot.event
    async def on_error(event: str, *args: Any, **kwargs: Any) -> None:
        logger.error("Error in event %s: %s", event, traceback.format_exc())

    @bot.event
    async def on_application_command_error(ctx: discord.ApplicationContext, error: discord.DiscordException) -> None:
        logger.error("Command Error in '%s': %s", ctx.command, error, exc_info=error)
        try:
            await ctx.respond("⚠️ Something went wrong while running this command.", ephemeral=True)
        except discord.HTTPException as e:
            logger.debug("Could not report command error to the user: %s", e)

    return startup_manager
