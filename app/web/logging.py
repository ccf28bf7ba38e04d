# -*- coding: utf-8 -*-
# ============================================================================ #
# GardenStockBot (GSB)                                                         #
# Copyright (c) 2025 MAX                                                       #
# Licensed under the MIT License                                               #
# ============================================================================ #
"""Logging configuration utilities for the liveness application."""

from __future__ import annotations

import logging

# Uptime monitors hit these paths every few seconds
PROBE_PATHS = ('"GET / ', '"GET /health ')


class ProbeAccessLogFilter(logging.Filter):
    """Drop access-log lines for liveness probes when not in debug mode."""

    def __init__(self, debug_mode: bool) -> None:
        super().__init__()
        self._debug_mode = debug_mode

    @property
    def debug_mode(self) -> bool:
        return self._debug_mode

    def filter(self, record: logging.LogRecord) -> bool:
        if self._debug_mode or record.levelno > logging.INFO:
            return True
        message = record.getMessage()
        return not any(path in message for path in PROBE_PATHS)


def configure_logging(app) -> ProbeAccessLogFilter:
    """Configure the Flask logger and silence probe access lines."""
    log_level = getattr(logging, str(app.config.get("LOG_LEVEL", "INFO")).upper(), logging.INFO)
    app.logger.setLevel(log_level)

    if not app.logger.handlers:
        handler = logging.StreamHandler()
        handler.setLevel(log_level)
        formatter = logging.Formatter("%(asctime)s - %(levelname)s - %(message)s [in %(pathname)s:%(lineno)d]")
        handler.setFormatter(formatter)
        app.logger.addHandler(handler)

    filter_instance = ProbeAccessLogFilter(debug_mode=log_level == logging.DEBUG)
    for logger_name in ("werkzeug", "waitress"):
        logging.getLogger(logger_name).addFilter(filter_instance)

    return filter_instance
