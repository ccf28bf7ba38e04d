# -*- coding: utf-8 -*-
# ============================================================================ #
# GardenStockBot (GSB)                                                         #
# Copyright (c) 2025 MAX                                                       #
# Licensed under the MIT License                                               #
# ============================================================================ #
"""Runtime state helpers for the Discord bot."""

from __future__ import annotations

import dataclasses
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional

import pytz

from app.bootstrap import (
    ensure_log_files,
    initialize_logging,
    resolve_log_level,
    resolve_timezone,
)

from .dependencies import BotServices


@dataclass(frozen=True)
class BotRuntime:
    """Aggregated state required by the bot entrypoint and event handlers."""

    config: Mapping[str, object]
    logger: logging.Logger
    timezone: pytz.BaseTzInfo
    logs_dir: Path
    services: Optional[BotServices] = None

    def with_services(self, services: BotServices) -> "BotRuntime":
        return dataclasses.replace(self, services=services)

    def require_services(self) -> BotServices:
        if self.services is None:
            raise RuntimeError("Bot services have not been attached to the runtime")
        return self.services


def build_runtime(config: Mapping[str, object], *, logs_dir: Optional[Path] = None) -> BotRuntime:
    """Construct the runtime container for the bot."""

    logger = initialize_logging("gsb.bot", level=resolve_log_level(config))
    timezone = resolve_timezone(config, logger=logger)

    if logs_dir is None:
        logs_dir = Path(__file__).resolve().parents[2] / "logs"
    ensure_log_files(logger, logs_dir)

    logger.info("Final effective timezone for logging and operations: %s", timezone)

    return BotRuntime(
        config=config,
        logger=logger,
        timezone=timezone,
        logs_dir=logs_dir,
    )
