# -*- coding: utf-8 -*-
# ============================================================================ #
# GardenStockBot (GSB)                                                         #
# Copyright (c) 2025 MAX                                                       #
# Licensed under the MIT License                                               #
# ============================================================================ #
"""Tests for the bot service container and the startup steps."""

import logging
from pathlib import Path
from unittest.mock import AsyncMock, Mock

import discord
import pytest
import pytz

from app.bot.dependencies import build_services
from app.bot.runtime import BotRuntime
from app.bot.startup import StartupManager
from app.bot.startup_context import StartupContext
from app.bot.startup_steps import (
    STARTUP_STEPS,
    load_extensions_step,
    prime_baseline_step,
    run_startup_sequence,
    set_presence_step,
    start_scheduler_step,
    synchronize_commands_step,
)
from app.bot.token import get_bot_token
from services.config.config_service import get_config_service
from services.feed.models import FeedResource
from services.scheduling import get_active_scheduler, set_active_scheduler


class StartupBot:
    """Bot double recording the startup calls."""

    def __init__(self, sync_error=None):
        self.cogs = {}
        self.change_presence = AsyncMock()
        self.sync_commands = AsyncMock(side_effect=sync_error)
        self.pending_application_commands = []
        self.get_channel = Mock(return_value=None)
        self.fetch_channel = AsyncMock(return_value=None)

    def get_cog(self, name):
        return self.cogs.get(name)

    def add_cog(self, cog):
        self.cogs[cog.__cog_name__] = cog


def make_runtime(config, bot, fetcher=None):
    logger = logging.getLogger("gsb.tests.startup")
    runtime = BotRuntime(config=config, logger=logger, timezone=pytz.UTC, logs_dir=Path("."))
    return runtime.with_services(build_services(bot, config, logger, fetcher=fetcher))


@pytest.fixture
def config():
    return get_config_service().get_config(env={"CHANNEL_ID": "987654321", "GUILD_ID": "123456789"})


@pytest.fixture(autouse=True)
def reset_active_scheduler():
    yield
    set_active_scheduler(None)


class TestServiceContainer:
    def test_build_services_wires_settings(self, config):
        services = build_services(StartupBot(), config, logging.getLogger("gsb.tests"))

        assert services.notifier.channel_id == 987654321
        assert [watch.resource for watch in services.watches] == [FeedResource.INVENTORY, FeedResource.WEATHER]
        assert [loop.name for loop in services.scheduler.loops] == ["stock", "weather"]

    def test_runtime_without_services_raises(self):
        runtime = BotRuntime(config={}, logger=logging.getLogger("gsb.tests"), timezone=pytz.UTC, logs_dir=Path("."))
        with pytest.raises(RuntimeError):
            runtime.require_services()

    def test_token_resolution(self, config):
        runtime = BotRuntime(config=dict(config, bot_token="abc.def"), logger=logging.getLogger("gsb.tests"),
                             timezone=pytz.UTC, logs_dir=Path("."))
        assert get_bot_token(runtime) == "abc.def"

        missing = BotRuntime(config=config, logger=logging.getLogger("gsb.tests"), timezone=pytz.UTC, logs_dir=Path("."))
        assert get_bot_token(missing) is None


class TestStartupSteps:
    def test_step_order(self):
        names = [step.step_name for step in STARTUP_STEPS]
        assert names == [
            "set_presence_step",
            "load_extensions_step",
            "synchronize_commands_step",
            "prime_baseline_step",
            "start_scheduler_step",
        ]

    @pytest.mark.asyncio
    async def test_presence_is_dnd_playing(self, config):
        bot = StartupBot()
        await set_presence_step(StartupContext(bot=bot, runtime=make_runtime(config, bot)))

        kwargs = bot.change_presence.await_args.kwargs
        assert kwargs["status"] is discord.Status.dnd
        assert kwargs["activity"].name == "Grow a Garden 🌱"

    @pytest.mark.asyncio
    async def test_load_extensions_adds_cog_once(self, config):
        bot = StartupBot()
        context = StartupContext(bot=bot, runtime=make_runtime(config, bot))

        await load_extensions_step(context)
        await load_extensions_step(context)

        assert list(bot.cogs) == ["StockCommandsCog"]

    @pytest.mark.asyncio
    async def test_sync_targets_configured_guild(self, config):
        bot = StartupBot()
        await synchronize_commands_step(StartupContext(bot=bot, runtime=make_runtime(config, bot)))

        bot.sync_commands.assert_awaited_once_with(guild_ids=[123456789])

    @pytest.mark.asyncio
    async def test_sync_failure_is_not_fatal(self, config, http_error):
        bot = StartupBot(sync_error=http_error(403, "Missing Access"))
        context = StartupContext(bot=bot, runtime=make_runtime(config, bot))

        await synchronize_commands_step(context)

    @pytest.mark.asyncio
    async def test_prime_records_both_baselines(self, config, fake_fetcher, stock_document):
        fake_fetcher.queue_document(FeedResource.INVENTORY, stock_document)
        fake_fetcher.queue_document(FeedResource.WEATHER, {"weather": ["Sunny"]})
        bot = StartupBot()
        runtime = make_runtime(config, bot, fake_fetcher)

        await prime_baseline_step(StartupContext(bot=bot, runtime=runtime))

        assert runtime.services.store.has_baseline(FeedResource.INVENTORY)
        assert runtime.services.store.has_baseline(FeedResource.WEATHER)

    @pytest.mark.asyncio
    async def test_prime_failure_is_not_fatal(self, config, fake_fetcher):
        fake_fetcher.queue_failure(FeedResource.INVENTORY)
        fake_fetcher.queue_failure(FeedResource.WEATHER)
        bot = StartupBot()
        runtime = make_runtime(config, bot, fake_fetcher)

        await prime_baseline_step(StartupContext(bot=bot, runtime=runtime))

        assert runtime.services.store.describe()["inventory_known"] is False

    @pytest.mark.asyncio
    async def test_start_scheduler_registers_active_scheduler(self, config):
        bot = StartupBot()
        runtime = make_runtime(config, bot)

        await start_scheduler_step(StartupContext(bot=bot, runtime=runtime))

        try:
            assert runtime.services.scheduler.running
            assert get_active_scheduler() is runtime.services.scheduler
        finally:
            await runtime.services.scheduler.stop()


class TestStartupManager:
    @pytest.mark.asyncio
    async def test_sequence_runs_once(self, config, monkeypatch):
        calls = []

        async def fake_sequence(context, steps):
            calls.append(steps)

        monkeypatch.setattr("app.bot.startup.run_startup_sequence", fake_sequence)
        bot = StartupBot()
        manager = StartupManager(bot, make_runtime(config, bot))

        await manager.handle_ready()
        await manager.handle_ready()

        assert len(calls) == 1
        assert manager.initial_startup_done

    @pytest.mark.asyncio
    async def test_run_startup_sequence_returns_completed_names(self, config):
        bot = StartupBot()
        context = StartupContext(bot=bot, runtime=make_runtime(config, bot))

        completed = await run_startup_sequence(context, [set_presence_step, load_extensions_step])

        assert completed == ["set_presence_step", "load_extensions_step"]
