#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# ============================================================================ #
# GardenStockBot (GSB)                                                         #
# Copyright (c) 2025 MAX                                                       #
# Licensed under the MIT License                                               #
# ============================================================================ #
"""Conversion of the stock feed document into an ``InventorySnapshot``."""

from __future__ import annotations

from typing import Any, List, Mapping, Optional, Tuple

from services.exceptions import FeedParseError
from utils.logging_utils import get_module_logger

from .models import InventoryItem, InventorySnapshot

logger = get_module_logger('inventory_parser')

# Known category fields, in display order
KNOWN_CATEGORIES: Tuple[Tuple[str, str], ...] = (
    ("seeds", "seedsStock"),
    ("eggs", "eggStock"),
    ("gear", "gearStock"),
)

_STOCK_SUFFIX = "Stock"


def _coerce_quantity(value: Any) -> Optional[int]:
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        quantity = value
    elif isinstance(value, float) and value.is_integer():
        quantity = int(value)
    else:
        return None
    return quantity if quantity >= 0 else None


def _parse_items(category: str, raw_items: List[Any]) -> Tuple[InventoryItem, ...]:
    items = []
    for raw in raw_items:
        if not isinstance(raw, Mapping) or not isinstance(raw.get("name"), str):
            logger.warning("Skipping malformed %s entry: %r", category, raw)
            continue
        quantity = _coerce_quantity(raw.get("value"))
        if quantity is None:
            logger.warning("Skipping %s entry %r with invalid value %r", category, raw["name"], raw.get("value"))
            continue
        items.append(InventoryItem(name=raw["name"], quantity=quantity))
    return tuple(items)


def _extra_categories(document: Mapping[str, Any]) -> List[Tuple[str, str]]:
    known_fields = {field for _, field in KNOWN_CATEGORIES}
    extras = []
    for key in document:
        if key in known_fields or not isinstance(key, str):
            continue
        if key.endswith(_STOCK_SUFFIX) and len(key) > len(_STOCK_SUFFIX):
            extras.append((key[:-len(_STOCK_SUFFIX)], key))
    return extras


def parse_inventory(document: Any) -> InventorySnapshot:
    """
    Build the canonical inventory snapshot from a stock document.

    Known categories come first in a fixed order, any further ``*Stock`` arrays
    follow in document order.  Fields that are not arrays are ignored.

    Raises:
        FeedParseError: If the document is not a JSON object.
    """
    if not isinstance(document, Mapping):
        raise FeedParseError(
            "Stock document must be a JSON object",
            details={'type': type(document).__name__}
        )

    categories = []
    for category, field in list(KNOWN_CATEGORIES) + _extra_categories(document):
        raw_items = document.get(field)
        if not isinstance(raw_items, list):
            continue
        categories.append((category, _parse_items(category, raw_items)))

    return InventorySnapshot(categories=tuple(categories))
