# -*- coding: utf-8 -*-
# ============================================================================ #
# GardenStockBot (GSB)                                                         #
# Copyright (c) 2025 MAX                                                       #
# Licensed under the MIT License                                               #
# ============================================================================ #
"""Configuration helpers for the Flask liveness application."""

from __future__ import annotations

from typing import Mapping, MutableMapping, Optional

from app import SERVICE_NAME, __version__

DEFAULTS = {
    "JSON_AS_ASCII": False,
    "LOG_LEVEL": "INFO",
    "PORT": 3000,
    "HOST": "0.0.0.0",
    "SERVICE_NAME": SERVICE_NAME,
    "SERVICE_VERSION": __version__,
}


def resolve_port(env: Mapping[str, str], default: int = DEFAULTS["PORT"]) -> int:
    """Return the listening port from ``PORT``, falling back to ``default``."""
    candidate = str(env.get("PORT", "")).strip()
    if not candidate.isdigit() or not 0 < int(candidate) < 65536:
        return default
    return int(candidate)


def build_config(env: Mapping[str, str], overrides: Optional[Mapping[str, object]] = None) -> MutableMapping[str, object]:
    """Construct the Flask configuration dictionary."""
    config: MutableMapping[str, object] = dict(DEFAULTS)
    config.update(
        LOG_LEVEL=env.get("LOG_LEVEL", DEFAULTS["LOG_LEVEL"]),
        PORT=resolve_port(env),
        HOST=env.get("HOST", DEFAULTS["HOST"]),
    )

    if overrides:
        config.update(overrides)

    return config
