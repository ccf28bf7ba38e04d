# -*- coding: utf-8 -*-
# ============================================================================ #
# GardenStockBot (GSB)                                                         #
# Copyright (c) 2025 MAX                                                       #
# Licensed under the MIT License                                               #
# ============================================================================ #
"""
Configuration Service - Single source of truth for all bot configuration.

Values are read from the process environment (optionally populated from a
``.env`` file) and may be complemented by ``config/config.json``.  Environment
variables always win over the JSON file.
"""

import json
import logging
import os
from dataclasses import dataclass
from pathlib import Path
from threading import Lock
from typing import Any, Dict, Mapping, Optional

from services.exceptions import ConfigLoadError, ConfigValidationError

logger = logging.getLogger('gsb.config_service')

DEFAULT_API_BASE_URL = "https://growagarden.gg/api"
DEFAULT_TIMEZONE = "Europe/Berlin"

_TRUE_VALUES = ('1', 'true', 'yes', 'on')

# config key -> environment variables, first match wins
_ENV_KEYS: Dict[str, tuple] = {
    'bot_token': ('DISCORD_BOT_TOKEN', 'TOKEN'),
    'guild_id': ('GUILD_ID',),
    'channel_id': ('CHANNEL_ID',),
    'api_base_url': ('GARDEN_API_BASE_URL',),
    'timezone': ('TZ',),
    'stock_period_seconds': ('GARDEN_STOCK_PERIOD_SECONDS',),
    'stock_offset_seconds': ('GARDEN_STOCK_OFFSET_SECONDS',),
    'weather_interval_seconds': ('GARDEN_WEATHER_INTERVAL_SECONDS',),
    'feed_timeout_seconds': ('GARDEN_FEED_TIMEOUT_SECONDS',),
    'announce_baseline': ('GARDEN_ANNOUNCE_BASELINE',),
    'health_port': ('PORT',),
    'log_level': ('LOG_LEVEL',),
}

DEFAULTS: Dict[str, Any] = {
    'bot_token': None,
    'guild_id': None,
    'channel_id': None,
    'api_base_url': DEFAULT_API_BASE_URL,
    'timezone': DEFAULT_TIMEZONE,
    'stock_period_seconds': 300,
    'stock_offset_seconds': 30,
    'weather_interval_seconds': 30,
    'feed_timeout_seconds': None,
    'announce_baseline': False,
    'health_port': 3000,
    'log_level': 'INFO',
}


def _parse_bool(value: Any) -> bool:
    if isinstance(value, bool):
        return value
    return str(value).strip().lower() in _TRUE_VALUES


def _parse_optional_int(value: Any, key: str) -> Optional[int]:
    if value is None or str(value).strip() == "":
        return None
    try:
        return int(str(value).strip())
    except ValueError as e:
        raise ConfigValidationError(
            f"Configuration value '{key}' must be an integer, got {value!r}",
            details={'key': key}
        ) from e


def _parse_number(value: Any, key: str) -> Optional[float]:
    if value is None or str(value).strip() == "":
        return None
    try:
        return float(str(value).strip())
    except ValueError as e:
        raise ConfigValidationError(
            f"Configuration value '{key}' must be a number, got {value!r}",
            details={'key': key}
        ) from e


@dataclass(frozen=True)
class PollingSettings:
    """Timing settings for the two polling loops."""

    stock_period_seconds: int = 300
    stock_offset_seconds: int = 30
    weather_interval_seconds: int = 30
    feed_timeout_seconds: Optional[float] = None
    announce_baseline: bool = False

    def __post_init__(self):
        if self.stock_period_seconds <= 0:
            raise ConfigValidationError("stock_period_seconds must be positive")
        if not 0 <= self.stock_offset_seconds < self.stock_period_seconds:
            raise ConfigValidationError(
                "stock_offset_seconds must be within [0, stock_period_seconds)",
                details={
                    'stock_offset_seconds': self.stock_offset_seconds,
                    'stock_period_seconds': self.stock_period_seconds,
                }
            )
        if self.weather_interval_seconds <= 0:
            raise ConfigValidationError("weather_interval_seconds must be positive")
        if self.feed_timeout_seconds is not None and self.feed_timeout_seconds <= 0:
            raise ConfigValidationError("feed_timeout_seconds must be positive when set")

    @classmethod
    def from_config(cls, config: Mapping[str, Any]) -> "PollingSettings":
        return cls(
            stock_period_seconds=int(config.get('stock_period_seconds', DEFAULTS['stock_period_seconds'])),
            stock_offset_seconds=int(config.get('stock_offset_seconds', DEFAULTS['stock_offset_seconds'])),
            weather_interval_seconds=int(
                config.get('weather_interval_seconds', DEFAULTS['weather_interval_seconds'])
            ),
            feed_timeout_seconds=config.get('feed_timeout_seconds'),
            announce_baseline=bool(config.get('announce_baseline', False)),
        )


class ConfigService:
    """Configuration service - single source of truth for all GSB configuration.

    The service is implemented as a singleton - use :func:`get_config_service` to get the
    instance instead of creating it directly.

    Example:
        >>> config = get_config_service().get_config()
        >>> print(f"Channel: {config['channel_id']}")
    """

    _instance = None
    _lock = Lock()

    def __new__(cls):
        if cls._instance is None:
            with cls._lock:
                if cls._instance is None:
                    cls._instance = super(ConfigService, cls).__new__(cls)
                    cls._instance._initialized = False
        return cls._instance

    def __init__(self):
        if self._initialized:
            return

        base_dir = os.environ.get("GSB_CONFIG_DIR")
        if base_dir:
            self.config_dir = Path(base_dir)
        else:
            self.config_dir = Path(__file__).resolve().parents[2] / "config"
        self.main_config_file = self.config_dir / "config.json"

        self._cache: Optional[Dict[str, Any]] = None
        self._initialized = True

    def get_config(self, force_reload: bool = False, env: Optional[Mapping[str, str]] = None) -> Dict[str, Any]:
        """Get the effective configuration.

        Args:
            force_reload: Bypass the cached configuration.
            env: Environment mapping to read from, defaults to :data:`os.environ`.
                Passing a mapping always bypasses the cache.

        Returns:
            Dict[str, Any]: Configuration with normalised value types.

        Raises:
            ConfigLoadError: If ``config/config.json`` exists but cannot be read.
            ConfigValidationError: If a value has the wrong type.
        """
        if env is None and self._cache is not None and not force_reload:
            return dict(self._cache)

        source_env = os.environ if env is None else env
        raw: Dict[str, Any] = dict(DEFAULTS)
        raw.update(self._load_file_config())

        for key, env_names in _ENV_KEYS.items():
            for env_name in env_names:
                value = source_env.get(env_name)
                if value is not None and str(value).strip() != "":
                    raw[key] = value
                    break

        config = self._normalise(raw)
        if env is None:
            self._cache = dict(config)
        return config

    def invalidate_cache(self) -> None:
        self._cache = None

    def _load_file_config(self) -> Dict[str, Any]:
        if not self.main_config_file.exists():
            return {}
        try:
            data = json.loads(self.main_config_file.read_text(encoding='utf-8'))
        except (IOError, OSError, json.JSONDecodeError) as e:
            raise ConfigLoadError(
                f"Could not read {self.main_config_file}: {e}",
                details={'path': str(self.main_config_file)}
            ) from e
        if not isinstance(data, dict):
            raise ConfigLoadError(f"{self.main_config_file} must contain a JSON object")
        return {key: value for key, value in data.items() if key in DEFAULTS}

    @staticmethod
    def _normalise(raw: Mapping[str, Any]) -> Dict[str, Any]:
        config = dict(raw)
        config['bot_token'] = str(raw['bot_token']).strip() if raw.get('bot_token') else None
        config['guild_id'] = _parse_optional_int(raw.get('guild_id'), 'guild_id')
        config['channel_id'] = _parse_optional_int(raw.get('channel_id'), 'channel_id')
        config['api_base_url'] = str(raw.get('api_base_url') or DEFAULT_API_BASE_URL).rstrip('/')
        config['timezone'] = str(raw.get('timezone') or DEFAULT_TIMEZONE)
        for key in ('stock_period_seconds', 'stock_offset_seconds', 'weather_interval_seconds', 'health_port'):
            config[key] = _parse_optional_int(raw.get(key), key)
            if config[key] is None:
                config[key] = DEFAULTS[key]
        config['feed_timeout_seconds'] = _parse_number(raw.get('feed_timeout_seconds'), 'feed_timeout_seconds')
        config['announce_baseline'] = _parse_bool(raw.get('announce_baseline', False))
        config['log_level'] = str(raw.get('log_level') or 'INFO').upper()
        return config


def get_config_service() -> ConfigService:
    """Get the global configuration service instance."""
    return ConfigService()


def load_config() -> Dict[str, Any]:
    """Return the cached effective configuration."""
    return get_config_service().get_config()

