# -*- coding: utf-8 -*-
# ============================================================================ #
# GardenStockBot (GSB)                                                         #
# Copyright (c) 2025 MAX                                                       #
# Licensed under the MIT License                                               #
# ============================================================================ #

from __future__ import annotations

import os

from app.web.config import build_config, resolve_port


def test_resolve_port_defaults_to_3000():
    assert resolve_port({}) == 3000
    assert resolve_port({"PORT": "not-a-port"}) == 3000
    assert resolve_port({"PORT": "70000"}) == 3000


def test_resolve_port_from_env():
    assert resolve_port({"PORT": "8080"}) == 8080


def test_build_config_respects_overrides(monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "DEBUG")
    monkeypatch.setenv("PORT", "8081")
    config = build_config(os.environ, {"CUSTOM": "VALUE"})

    assert config["LOG_LEVEL"] == "DEBUG"
    assert config["PORT"] == 8081
    assert config["CUSTOM"] == "VALUE"
    assert config["SERVICE_NAME"] == "GardenStockBot"
