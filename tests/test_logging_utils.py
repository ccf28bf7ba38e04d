# -*- coding: utf-8 -*-
# ============================================================================ #
# GardenStockBot (GSB)                                                         #
# Copyright (c) 2025 MAX                                                       #
# Licensed under the MIT License                                               #
# ============================================================================ #

import logging

import pytz

from utils.logging_utils import DebugModeFilter, TimezoneFormatter, get_module_logger, setup_logger


def _record(level):
    return logging.LogRecord("gsb.test", level, __file__, 1, "message", (), None)


def test_debug_records_need_debug_mode(monkeypatch):
    log_filter = DebugModeFilter()

    monkeypatch.setenv("GARDEN_DEBUG_MODE", "false")
    assert not log_filter.filter(_record(logging.DEBUG))
    assert log_filter.filter(_record(logging.INFO))

    monkeypatch.setenv("GARDEN_DEBUG_MODE", "true")
    assert log_filter.filter(_record(logging.DEBUG))


def test_timezone_formatter_uses_configured_zone():
    record = _record(logging.INFO)
    record.created = 1748779530.0  # 2025-06-01 12:05:30 UTC

    formatted = TimezoneFormatter(tz=pytz.timezone("Europe/Berlin")).formatTime(record)

    assert formatted == "2025-06-01 14:05:30 CEST"


def test_timezone_formatter_survives_unknown_zone(monkeypatch):
    monkeypatch.setenv("TZ", "Invalid/Zone")

    assert TimezoneFormatter().formatTime(_record(logging.INFO))


def test_module_logger_prefix():
    assert get_module_logger("feed_fetch_service").name == "gsb.feed_fetch_service"


def test_setup_logger_does_not_duplicate_handlers():
    logger = setup_logger("gsb.tests.handlers")
    handler_count = len(logger.handlers)

    setup_logger("gsb.tests.handlers")

    assert len(logger.handlers) == handler_count == 1
