# -*- coding: utf-8 -*-
# ============================================================================ #
# GardenStockBot (GSB)                                                         #
# Copyright (c) 2025 MAX                                                       #
# Licensed under the MIT License                                               #
# ============================================================================ #
"""Startup orchestration for the Discord bot."""

from __future__ import annotations

import discord

from .runtime import BotRuntime
from .startup_context import StartupContext
from .startup_steps import STARTUP_STEPS, run_startup_sequence


class StartupManager:
    """Run the startup sequence once, on the first ready event."""

    def __init__(self, bot: discord.Bot, runtime: BotRuntime):
        self._context = StartupContext(bot=bot, runtime=runtime)
        self._initial_startup_done = False

    @property
    def initial_startup_done(self) -> bool:
        return self._initial_startup_done

    async def handle_ready(self) -> None:
        logger = self._context.logger

        if self._initial_startup_done:
            # Reconnects fire on_ready again; loops and baseline are already in place
            logger.info("GSB reconnected and is ready.")
            return

        logger.info("First initialization after start...")

        await run_startup_sequence(self._context, STARTUP_STEPS)

        self._initial_startup_done = True
        logger.info("Initialization complete.")
        logger.info("GSB is ready.")
