# -*- coding: utf-8 -*-
# ============================================================================ #
# GardenStockBot (GSB)                                                         #
# Copyright (c) 2025 MAX                                                       #
# Licensed under the MIT License                                               #
# ============================================================================ #
"""Composable startup routines executed when the Discord bot becomes ready."""

from __future__ import annotations

from typing import Sequence

from ..startup_context import StartupStep
from .commands import load_extensions_step, synchronize_commands_step
from .presence import set_presence_step
from .scheduler import prime_baseline_step, start_scheduler_step
from .sequence import run_startup_sequence

STARTUP_STEPS: Sequence[StartupStep] = (
    set_presence_step,
    load_extensions_step,
    synchronize_commands_step,
    prime_baseline_step,            # MUST run before start_scheduler_step so the first cycles compare
    start_scheduler_step,
)

__all__ = [
    "STARTUP_STEPS",
    "run_startup_sequence",
    "set_presence_step",
    "load_extensions_step",
    "synchronize_commands_step",
    "prime_baseline_step",
    "start_scheduler_step",
]
