#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# ============================================================================ #
# GardenStockBot (GSB)                                                         #
# Copyright (c) 2025 MAX                                                       #
# Licensed under the MIT License                                               #
# ============================================================================ #
"""
Feed Fetch Service

Retrieves the stock and weather documents from the upstream game-status API.
Every call issues exactly one request; retrying is left to the polling loops.
"""

from __future__ import annotations

import asyncio
import time
from typing import Any, Callable, Optional

import aiohttp

from services.exceptions import FeedNetworkError, FeedParseError, FeedStatusError

from utils.logging_utils import get_module_logger

from .models import FeedResource, FetchResult

logger = get_module_logger('feed_fetch_service')

SessionFactory = Callable[[], Any]


class FeedFetchService:
    """
    Service for fetching feed documents over HTTP.

    Responsibilities:
    - Build the resource specific endpoint URL
    - Own one shared aiohttp session for the process lifetime
    - Map transport, status and body failures to typed feed errors
    """

    def __init__(
        self,
        base_url: str,
        *,
        timeout_seconds: Optional[float] = None,
        session_factory: Optional[SessionFactory] = None,
    ):
        self._base_url = base_url.rstrip('/')
        self._timeout_seconds = timeout_seconds
        self._session_factory = session_factory or self._default_session_factory
        self._session = None
        logger.info(f"FeedFetchService initialized (base url: {self._base_url})")

    def _default_session_factory(self) -> aiohttp.ClientSession:
        if self._timeout_seconds is not None:
            return aiohttp.ClientSession(timeout=aiohttp.ClientTimeout(total=self._timeout_seconds))
        return aiohttp.ClientSession()

    def url_for(self, resource: FeedResource) -> str:
        return f"{self._base_url}/{resource.path}"

    async def _get_session(self):
        if self._session is None or getattr(self._session, 'closed', False):
            self._session = self._session_factory()
        return self._session

    async def fetch(self, resource: FeedResource) -> FetchResult:
        """
        Fetch one feed document.

        Args:
            resource: Which feed to request

        Returns:
            FetchResult carrying the parsed JSON object or the typed error
        """
        url = self.url_for(resource)
        start_time = time.time()
        session = await self._get_session()

        try:
            async with session.get(url) as response:
                if not 200 <= response.status < 300:
                    error = FeedStatusError(
                        f"Failed fetching {resource.path} data: {response.status}",
                        status=response.status,
                        details={'url': url}
                    )
                    logger.warning(error.message)
                    return FetchResult.failed(resource, error)

                try:
                    document = await response.json(content_type=None)
                except ValueError as e:
                    error = FeedParseError(
                        f"Malformed {resource.path} body: {e}",
                        details={'url': url}
                    )
                    logger.warning(error.message)
                    return FetchResult.failed(resource, error)

        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            error = FeedNetworkError(
                f"Network error fetching {resource.path} data: {e or type(e).__name__}",
                details={'url': url}
            )
            logger.warning(error.message)
            return FetchResult.failed(resource, error)

        if not isinstance(document, dict):
            error = FeedParseError(
                f"Expected a JSON object from {resource.path}, got {type(document).__name__}",
                details={'url': url}
            )
            logger.warning(error.message)
            return FetchResult.failed(resource, error)

        duration_ms = (time.time() - start_time) * 1000
        logger.debug(f"Fetched {resource.path} in {duration_ms:.1f}ms")
        return FetchResult.ok(resource, document)

    async def close(self) -> None:
        """Close the shared HTTP session."""
        if self._session is not None and not getattr(self._session, 'closed', False):
            await self._session.close()
            logger.info("FeedFetchService session closed")
        self._session = None
