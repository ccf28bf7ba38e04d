# -*- coding: utf-8 -*-
# ============================================================================ #
# GardenStockBot (GSB)                                                         #
# Copyright (c) 2025 MAX                                                       #
# Licensed under the MIT License                                               #
# ============================================================================ #
"""Bootstrap utilities for preparing the Discord bot runtime.

Environment loading, configuration and logging setup live here so that
importing :mod:`bot` has no side-effects and the primitives can be tested in
isolation.
"""

from .runtime import (
    configure_environment,
    ensure_log_files,
    initialize_logging,
    load_main_configuration,
    resolve_log_level,
    resolve_timezone,
)

__all__ = [
    "configure_environment",
    "ensure_log_files",
    "initialize_logging",
    "load_main_configuration",
    "resolve_log_level",
    "resolve_timezone",
]
