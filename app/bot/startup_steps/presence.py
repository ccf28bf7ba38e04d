# -*- coding: utf-8 -*-
# ============================================================================ #
# GardenStockBot (GSB)                                                         #
# Copyright (c) 2025 MAX                                                       #
# Licensed under the MIT License                                               #
# ============================================================================ #
"""Startup routine setting the bot presence."""

from __future__ import annotations

import discord

from ..startup_context import StartupContext, as_step

ACTIVITY_NAME = "Grow a Garden 🌱"


@as_step
async def set_presence_step(context: StartupContext) -> None:
    logger = context.logger
    try:
        await context.bot.change_presence(
            status=discord.Status.dnd,
            activity=discord.Game(name=ACTIVITY_NAME),
        )
        logger.info("Presence set: Playing %s", ACTIVITY_NAME)
    except discord.DiscordException as e:
        logger.warning("Could not set presence: %s", e)
