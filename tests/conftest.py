# -*- coding: utf-8 -*-
# ============================================================================ #
# GardenStockBot (GSB) - Pytest Configuration & Fixtures                       #
# Copyright (c) 2025 MAX                                                       #
# Licensed under the MIT License                                               #
# ============================================================================ #
"""
Global pytest configuration and fixtures for all test suites.
"""

import os
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional
from unittest.mock import AsyncMock, Mock

import pytest

# Add project root to Python path
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

# Test environment setup
os.environ["TESTING"] = "true"

from services.config.config_service import ConfigService, _ENV_KEYS  # noqa: E402
from services.discord.embed_service import StockEmbedService  # noqa: E402
from services.exceptions import FeedError, FeedNetworkError  # noqa: E402
from services.feed.models import FeedResource, FetchResult  # noqa: E402
from services.tracking.snapshot_store import SnapshotStore  # noqa: E402


class FakeFetcher:
    """Stand-in for FeedFetchService returning queued results per resource."""

    def __init__(self):
        self.responses: Dict[FeedResource, List[FetchResult]] = {
            FeedResource.INVENTORY: [],
            FeedResource.WEATHER: [],
        }
        self.calls: List[FeedResource] = []

    def queue_document(self, resource: FeedResource, document: Dict[str, Any]) -> None:
        self.responses[resource].append(FetchResult.ok(resource, document))

    def queue_failure(self, resource: FeedResource, error: Optional[FeedError] = None) -> None:
        error = error or FeedNetworkError(f"Network error fetching {resource.path} data: boom")
        self.responses[resource].append(FetchResult.failed(resource, error))

    async def fetch(self, resource: FeedResource) -> FetchResult:
        self.calls.append(resource)
        return self.responses[resource].pop(0)

    async def close(self) -> None:
        pass


class FakeChannel:
    """Messageable channel recording sent embeds."""

    def __init__(self, channel_id: int = 987654321, error: Optional[Exception] = None):
        self.id = channel_id
        self.error = error
        self.sent: List[Any] = []

    async def send(self, content=None, *, embed=None, embeds=None):
        if self.error is not None:
            raise self.error
        self.sent.append(embed if embed is not None else (embeds or content))


class FakeBot:
    """Minimal bot exposing the channel lookups used by the notifier."""

    def __init__(self, channel: Optional[FakeChannel] = None):
        self.channel = channel
        self.get_channel = Mock(return_value=channel)
        self.fetch_channel = AsyncMock(return_value=channel)


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Point the config service at an empty directory and clear GSB variables."""
    for env_names in _ENV_KEYS.values():
        for env_name in env_names:
            monkeypatch.delenv(env_name, raising=False)
    monkeypatch.delenv("GARDEN_DEBUG_MODE", raising=False)

    config_dir = tmp_path / "config"
    config_dir.mkdir()
    monkeypatch.setenv("GSB_CONFIG_DIR", str(config_dir))

    ConfigService._instance = None
    yield config_dir
    ConfigService._instance = None


@pytest.fixture
def fake_fetcher():
    return FakeFetcher()


@pytest.fixture
def fake_channel():
    return FakeChannel()


@pytest.fixture
def fake_bot(fake_channel):
    return FakeBot(fake_channel)


@pytest.fixture
def channel_factory():
    return FakeChannel


@pytest.fixture
def bot_factory():
    return FakeBot


@pytest.fixture
def store():
    return SnapshotStore()


@pytest.fixture
def embed_service():
    return StockEmbedService()


@pytest.fixture
def mock_discord_ctx():
    """Mock Discord application context for testing slash commands."""
    ctx = AsyncMock()
    ctx.guild_id = 123456789
    ctx.channel_id = 987654321
    ctx.defer = AsyncMock()
    ctx.respond = AsyncMock()
    ctx.followup.send = AsyncMock()
    return ctx


@pytest.fixture
def http_error():
    """Factory for discord.HTTPException instances."""
    import discord

    def _make(status: int = 500, message: str = "Internal Server Error"):
        return discord.HTTPException(Mock(status=status, reason=message), message)

    return _make


@pytest.fixture
def stock_document() -> Dict[str, Any]:
    """Stock document in the shape served by the upstream feed."""
    return {
        "seedsStock": [
            {"name": "Carrot", "value": 5},
            {"name": "Strawberry", "value": 2},
        ],
        "eggStock": [
            {"name": "Common", "value": 3},
        ],
        "gearStock": [
            {"name": "WateringCan", "value": 1},
        ],
    }


# Markers for test categorization
pytestmark = [
    pytest.mark.filterwarnings("ignore:.*unclosed.*:ResourceWarning"),
    pytest.mark.filterwarnings("ignore::DeprecationWarning"),
]
