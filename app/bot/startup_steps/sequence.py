# -*- coding: utf-8 -*-
# ============================================================================ #
# GardenStockBot (GSB)                                                         #
# Copyright (c) 2025 MAX                                                       #
# Licensed under the MIT License                                               #
# ============================================================================ #
"""Helpers for orchestrating the Discord bot startup sequence."""

from __future__ import annotations

import time
from typing import List, Sequence

from ..startup_context import StartupContext, StartupStep


async def run_startup_sequence(context: StartupContext, steps: Sequence[StartupStep]) -> List[str]:
    """Execute the startup steps in order and return the names of those that ran.

    A step that raises aborts the sequence; later steps depend on earlier ones.
    """

    logger = context.logger
    completed: List[str] = []
    for step in steps:
        step_name = getattr(step, "step_name", getattr(step, "__name__", "unknown"))
        logger.info("→ Running startup step: %s", step_name)
        started = time.monotonic()
        await step(context)
        logger.info("✓ Completed startup step: %s (%.2fs)", step_name, time.monotonic() - started)
        completed.append(step_name)
    return completed
