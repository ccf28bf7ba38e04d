# -*- coding: utf-8 -*-
# ============================================================================ #
# GardenStockBot (GSB)                                                         #
# Copyright (c) 2025 MAX                                                       #
# Licensed under the MIT License                                               #
# ============================================================================ #
"""Runtime bootstrap helpers for the Discord bot."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Mapping, Optional, Union

import pytz
from dotenv import load_dotenv

from services.config.config_service import get_config_service, load_config
from utils.logging_utils import setup_logger


def configure_environment(dotenv_path: Optional[Union[str, Path]] = None, *, override: bool = False) -> bool:
    """Populate :data:`os.environ` from a ``.env`` file.

    Parameters
    ----------
    dotenv_path:
        Explicit file to load.  When omitted, python-dotenv searches the
        current working directory and its parents.
    override:
        Whether values from the file replace variables that are already set.

    Returns
    -------
    bool
        ``True`` when at least one variable was loaded.
    """

    loaded = load_dotenv(dotenv_path=dotenv_path, override=override)
    if loaded:
        # Values read before the file was loaded are stale
        get_config_service().invalidate_cache()
    return loaded


def load_main_configuration() -> Mapping[str, object]:
    """Load the effective configuration (defaults, config.json, environment)."""

    return load_config()


def resolve_log_level(config: Optional[Mapping[str, object]], default: int = logging.INFO) -> int:
    """Translate the configured ``log_level`` name into a :mod:`logging` level."""

    if not config:
        return default
    level = logging.getLevelName(str(config.get("log_level", "")).upper())
    return level if isinstance(level, int) else default


def initialize_logging(name: str, level: int = logging.INFO) -> logging.Logger:
    """Create the primary logger for the bot."""

    logger = setup_logger(name, level=level)
    return logger


def resolve_timezone(
    config: Optional[Mapping[str, object]],
    *,
    default: str = "Europe/Berlin",
    logger: Optional[logging.Logger] = None,
) -> pytz.BaseTzInfo:
    """Resolve the timezone defined in the configuration.

    Falls back to UTC when the configured timezone is unknown.
    """

    active_logger = logger or logging.getLogger("gsb.bootstrap")
    timezone_str = default
    if config is not None:
        timezone_str = str(config.get("timezone") or default)

    try:
        tz = pytz.timezone(timezone_str)
        active_logger.info("Using timezone '%s'", timezone_str)
        return tz
    except pytz.exceptions.UnknownTimeZoneError:
        active_logger.warning(
            "Unknown timezone '%s'. Falling back to UTC for this session.", timezone_str
        )

    return pytz.timezone("UTC")


def _has_file_handler(logger: logging.Logger, path: Path) -> bool:
    return any(
        isinstance(handler, logging.FileHandler)
        and getattr(handler, "baseFilename", "") == str(path)
        for handler in logger.handlers
    )


def ensure_log_files(logger: logging.Logger, logs_dir: Path) -> None:
    """Attach file handlers for ``discord.log`` and ``bot_error.log`` if missing."""

    logs_dir.mkdir(parents=True, exist_ok=True)
    formatter = logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")

    for filename, level in (("discord.log", logging.INFO), ("bot_error.log", logging.ERROR)):
        path = logs_dir / filename
        if _has_file_handler(logger, path):
            continue
        handler = logging.FileHandler(path, encoding="utf-8")
        handler.setLevel(level)
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    logger.info(
        "Bot file loggers initialized: discord.log (INFO+), bot_error.log (ERROR+)"
    )
