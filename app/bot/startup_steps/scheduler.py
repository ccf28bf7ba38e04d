# -*- coding: utf-8 -*-
# ============================================================================ #
# GardenStockBot (GSB)                                                         #
# Copyright (c) 2025 MAX                                                       #
# Licensed under the MIT License                                               #
# ============================================================================ #
"""Startup routines for the baseline snapshot and the polling loops."""

from __future__ import annotations

from services.exceptions import FeedError
from services.scheduling import set_active_scheduler

from ..startup_context import StartupContext, as_step


@as_step
async def prime_baseline_step(context: StartupContext) -> None:
    logger = context.logger
    for watch in context.services.watches:
        label = watch.resource.label
        try:
            if await watch.prime():
                logger.info("Initial %s data loaded.", label)
            else:
                logger.warning("No initial %s baseline, the first cycle will record it.", label)
        except FeedError as e:
            logger.error("Error loading initial %s data: %s", label, e)


@as_step
async def start_scheduler_step(context: StartupContext) -> None:
    logger = context.logger
    scheduler = context.services.scheduler

    logger.info("Starting polling loops...")
    if scheduler.start():
        set_active_scheduler(scheduler)
        logger.info("Polling loops started successfully.")
    else:
        logger.warning("Polling loops could not be started or were already running.")
