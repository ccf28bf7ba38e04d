# -*- coding: utf-8 -*-
# ============================================================================ #
# GardenStockBot (GSB)                                                         #
# Copyright (c) 2025 MAX                                                       #
# Licensed under the MIT License                                               #
# ============================================================================ #

"""Entry point for the GardenStockBot Discord bot."""

from __future__ import annotations

import asyncio
import logging
import sys

import discord

from app.bootstrap import configure_environment, load_main_configuration
from app.bot import (
    BotRuntime,
    build_runtime,
    build_services,
    create_bot,
    get_bot_token,
    register_event_handlers,
)
from services.exceptions import ConfigServiceError


def _prepare_event_loop() -> asyncio.AbstractEventLoop:
    """Create the asyncio loop the bot and its polling loops share."""

    if sys.platform == "win32":
        asyncio.set_event_loop_policy(asyncio.WindowsSelectorEventLoopPolicy())

    loop = asyncio.new_event_loop()
    asyncio.set_event_loop(loop)
    return loop


async def _run_bot(bot: discord.Bot, runtime: BotRuntime, token: str) -> None:
    services = runtime.require_services()
    try:
        await bot.start(token)
    finally:
        if not bot.is_closed():
            await bot.close()
        await services.close()
        runtime.logger.info("Polling loops stopped and HTTP session closed.")


def _cancel_pending(loop: asyncio.AbstractEventLoop) -> None:
    pending = asyncio.all_tasks(loop)
    for task in pending:
        task.cancel()
    if pending:
        loop.run_until_complete(asyncio.gather(*pending, return_exceptions=True))


def main() -> None:
    """Main entry point for the Discord bot."""

    configure_environment()
    try:
        config = load_main_configuration()
    except ConfigServiceError as e:
        logging.getLogger("gsb.bot").critical("FATAL: Invalid configuration: %s", e)
        sys.exit(1)

    runtime = build_runtime(config)

    token = get_bot_token(runtime)
    if not token:
        runtime.logger.error("FATAL: Bot token not found.")
        sys.exit(1)

    # py-cord binds the client to the current event loop on construction
    loop = _prepare_event_loop()
    bot = create_bot(runtime)
    try:
        runtime = runtime.with_services(build_services(bot, config, runtime.logger))
    except ConfigServiceError as e:
        runtime.logger.critical("FATAL: Invalid polling configuration: %s", e)
        sys.exit(1)
    register_event_handlers(bot, runtime)

    runtime.logger.info("Starting bot with token ending in: ...%s", token[-4:])
    try:
        loop.run_until_complete(_run_bot(bot, runtime, token))
    except discord.LoginFailure:
        runtime.logger.error("FATAL: Invalid Discord Bot Token provided.")
        sys.exit(1)
    finally:
        _cancel_pending(loop)
        loop.close()
        asyncio.set_event_loop(None)
    runtime.logger.info("Bot has stopped gracefully.")


if __name__ == "__main__":
    try:
        main()
    except KeyboardInterrupt:
        logging.getLogger("gsb.bot").info("Received keyboard interrupt - shutting down gracefully")
