# -*- coding: utf-8 -*-
# ============================================================================ #
# GardenStockBot (GSB)                                                         #
# Copyright (c) 2025 MAX                                                       #
# Licensed under the MIT License                                               #
# ============================================================================ #
"""Structural change detection between two snapshots of the same feed."""

from __future__ import annotations

from typing import Optional

from services.feed.models import Snapshot


def has_changed(previous: Optional[Snapshot], current: Snapshot) -> bool:
    """
    Return ``True`` when ``current`` differs from ``previous``.

    Snapshots are frozen dataclasses over tuples, so equality is a deep,
    order-sensitive comparison.  A missing previous snapshot always counts as
    a change.

    Raises:
        TypeError: If the two snapshots belong to different feeds.
    """
    if previous is None:
        return True
    if type(previous) is not type(current):
        raise TypeError(
            f"Cannot compare {type(previous).__name__} with {type(current).__name__}"
        )
    return previous != current
