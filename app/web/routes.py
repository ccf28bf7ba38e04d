# -*- coding: utf-8 -*-
# ============================================================================ #
# GardenStockBot (GSB)                                                         #
# Copyright (c) 2025 MAX                                                       #
# Licensed under the MIT License                                               #
# ============================================================================ #
"""Liveness routes registered directly on the Flask app."""

from __future__ import annotations

from datetime import datetime, timezone

from flask import Flask, jsonify

from services.scheduling import get_scheduler_stats

ROOT_MESSAGE = "Bot is running!"


def register_routes(app: Flask) -> None:
    """Attach the root and health routes."""

    @app.route("/")
    def index():
        return ROOT_MESSAGE, 200, {"Content-Type": "text/plain; charset=utf-8"}

    @app.route("/health")
    def health_check():
        scheduler_stats = get_scheduler_stats()
        health_data = {
            "status": "healthy" if scheduler_stats.get("running") else "starting",
            "service": app.config["SERVICE_NAME"],
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "version": app.config["SERVICE_VERSION"],
            "loops": scheduler_stats.get("loops", {}),
        }
        return jsonify(health_data), 200
