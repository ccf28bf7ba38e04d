# -*- coding: utf-8 -*-
# ============================================================================ #
# GardenStockBot (GSB)                                                         #
# Copyright (c) 2025 MAX                                                       #
# Licensed under the MIT License                                               #
# ============================================================================ #

from __future__ import annotations

import logging

from flask import Flask

from app.web.logging import ProbeAccessLogFilter, configure_logging


def _record(message, level=logging.INFO):
    return logging.LogRecord(
        name="werkzeug",
        level=level,
        pathname=__file__,
        lineno=10,
        msg=message,
        args=(),
        exc_info=None,
    )


def test_probe_filter_respects_debug_state():
    record = _record('127.0.0.1 - - [01/Jun/2025 12:00:00] "GET /health HTTP/1.1" 200 -')

    assert not ProbeAccessLogFilter(debug_mode=False).filter(record)
    assert ProbeAccessLogFilter(debug_mode=True).filter(record)


def test_probe_filter_keeps_other_records():
    log_filter = ProbeAccessLogFilter(debug_mode=False)

    assert log_filter.filter(_record('"GET /other HTTP/1.1" 404 -'))
    assert log_filter.filter(_record('"GET / HTTP/1.1" 500 -', level=logging.ERROR))


def test_configure_logging_installs_stream_handler():
    app = Flask(__name__)
    app.config["LOG_LEVEL"] = "INFO"

    filter_instance = configure_logging(app)

    assert isinstance(filter_instance, ProbeAccessLogFilter)
    assert not filter_instance.debug_mode
    assert any(isinstance(handler, logging.StreamHandler) for handler in app.logger.handlers)
