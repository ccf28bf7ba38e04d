# -*- coding: utf-8 -*-
# ============================================================================ #
# GardenStockBot (GSB)                                                         #
# Copyright (c) 2025 MAX                                                       #
# Licensed under the MIT License                                               #
# ============================================================================ #
"""Application factory for the Flask liveness app."""

from __future__ import annotations

import os
from typing import Mapping, Optional

from flask import Flask

from .config import build_config
from .logging import configure_logging
from .routes import register_routes


def create_app(test_config: Optional[Mapping[str, object]] = None) -> Flask:
    """Create and configure the Flask application instance."""
    app = Flask("app")
    app.config.update(build_config(os.environ, test_config))

    configure_logging(app)
    register_routes(app)

    return app
