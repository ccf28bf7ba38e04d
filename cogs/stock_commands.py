# -*- coding: utf-8 -*-
# ============================================================================ #
# GardenStockBot (GSB)                                                         #
# Copyright (c) 2025 MAX                                                       #
# Licensed under the MIT License                                               #
# ============================================================================ #

import logging

import discord
from discord.ext import commands

from services.discord.query_service import StockQueryService
from utils.logging_utils import setup_logger

logger = setup_logger('gsb.stock_commands', level=logging.INFO)


class StockCommandsCog(commands.Cog):
    """Cog exposing the on-demand stock report."""

    def __init__(self, bot: discord.Bot, query_service: StockQueryService):
        self.bot = bot
        self.query_service = query_service
        logger.info("StockCommandsCog initialized")

    @commands.slash_command(name="stock", description="Show current Grow a Garden stock and weather")
    async def stock_command(self, ctx: discord.ApplicationContext):
        """Reply with the current stock and weather, or a failure message."""
        # Both fetches can outlast the 3 second interaction window
        await ctx.defer()

        result = await self.query_service.respond()
        if result.success:
            await ctx.followup.send(embeds=list(result.embeds))
        else:
            await ctx.followup.send(result.error_message)
