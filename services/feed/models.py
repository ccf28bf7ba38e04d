#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# ============================================================================ #
# GardenStockBot (GSB)                                                         #
# Copyright (c) 2025 MAX                                                       #
# Licensed under the MIT License                                               #
# ============================================================================ #
"""
Feed Service Models

Dataclasses for the upstream documents and the canonical snapshots derived
from them.  Snapshots are immutable so that ``==`` is a deep, order-sensitive
structural comparison.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Iterator, Optional, Tuple, Union

from services.exceptions import FeedError


class FeedResource(Enum):
    """The two resources exposed by the upstream feed."""

    INVENTORY = "stock"
    WEATHER = "weather"

    @property
    def path(self) -> str:
        return self.value

    @property
    def label(self) -> str:
        return "inventory" if self is FeedResource.INVENTORY else "weather"


# =========================================================================
# Snapshot Models
# =========================================================================

@dataclass(frozen=True)
class InventoryItem:
    name: str
    quantity: int


@dataclass(frozen=True)
class InventorySnapshot:
    """
    Inventory grouped by category, in feed order.

    ``categories`` holds ``(category_name, items)`` pairs; both the category
    order and the item order are significant for equality.
    """
    categories: Tuple[Tuple[str, Tuple[InventoryItem, ...]], ...] = ()

    def items(self) -> Iterator[Tuple[str, Tuple[InventoryItem, ...]]]:
        return iter(self.categories)

    def get(self, category: str) -> Tuple[InventoryItem, ...]:
        for name, items in self.categories:
            if name == category:
                return items
        return ()

    @property
    def category_names(self) -> Tuple[str, ...]:
        return tuple(name for name, _ in self.categories)


@dataclass(frozen=True)
class WeatherSnapshot:
    """Canonical ordered set of active weather conditions."""
    conditions: Tuple[str, ...] = ()

    @property
    def is_empty(self) -> bool:
        return not self.conditions


Snapshot = Union[InventorySnapshot, WeatherSnapshot]


# =========================================================================
# Fetch Models
# =========================================================================

@dataclass(frozen=True)
class FetchResult:
    """
    Outcome of a single feed request.

    Either ``success`` is True and ``document`` holds the parsed JSON object,
    or ``success`` is False and ``error`` says why.
    """
    resource: FeedResource
    success: bool
    document: Optional[Dict[str, Any]] = None
    error: Optional[FeedError] = field(default=None, compare=False)

    @classmethod
    def ok(cls, resource: FeedResource, document: Dict[str, Any]) -> FetchResult:
        return cls(resource=resource, success=True, document=document)

    @classmethod
    def failed(cls, resource: FeedResource, error: FeedError) -> FetchResult:
        return cls(resource=resource, success=False, error=error)

    @property
    def error_message(self) -> Optional[str]:
        return self.error.message if self.error is not None else None

    def unwrap(self) -> Dict[str, Any]:
        """Return the document or raise the recorded error."""
        if not self.success:
            raise self.error
        return self.document
