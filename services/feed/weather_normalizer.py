#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# ============================================================================ #
# GardenStockBot (GSB)                                                         #
# Copyright (c) 2025 MAX                                                       #
# Licensed under the MIT License                                               #
# ============================================================================ #
"""
Weather Normalizer

The ``weather`` field of the upstream feed arrives in one of three shapes:
a list of condition names, a mapping of name -> active flag, or a single
condition name.  Each shape is classified into a tagged value first and then
normalized by the function registered for that tag, producing the canonical
``WeatherSnapshot`` used for change detection.

Normalization is total: unknown shapes produce an empty snapshot.
"""

from __future__ import annotations

from dataclasses import dataclass
from numbers import Number
from typing import Any, Callable, Dict, Iterable, Mapping, Tuple, Type, Union

from .models import WeatherSnapshot


@dataclass(frozen=True)
class ConditionList:
    names: Tuple[Any, ...]


@dataclass(frozen=True)
class ConditionFlags:
    flags: Tuple[Tuple[Any, Any], ...]


@dataclass(frozen=True)
class SingleCondition:
    name: str


@dataclass(frozen=True)
class NoConditions:
    pass


WeatherShape = Union[ConditionList, ConditionFlags, SingleCondition, NoConditions]


def classify_weather(raw: Any) -> WeatherShape:
    """Tag a raw ``weather`` value with the shape it was delivered in."""
    if isinstance(raw, str):
        return SingleCondition(raw)
    if isinstance(raw, Mapping):
        return ConditionFlags(tuple(raw.items()))
    if isinstance(raw, (list, tuple)):
        return ConditionList(tuple(raw))
    return NoConditions()


def _is_active(flag: Any) -> bool:
    if isinstance(flag, bool):
        return flag
    if isinstance(flag, Number):
        return flag != 0
    return False


def _unique(names: Iterable[Any]) -> Tuple[str, ...]:
    seen = set()
    ordered = []
    for name in names:
        if not isinstance(name, str) or not name.strip():
            continue
        if name in seen:
            continue
        seen.add(name)
        ordered.append(name)
    return tuple(ordered)


def _from_list(shape: ConditionList) -> Tuple[str, ...]:
    """Keep non-blank string entries in first-seen order so equivalent payloads compare equal."""
    return _unique(shape.names)


def _from_flags(shape: ConditionFlags) -> Tuple[str, ...]:
    return _unique(name for name, flag in shape.flags if _is_active(flag))


def _from_single(shape: SingleCondition) -> Tuple[str, ...]:
    return _unique((shape.name,))


def _from_nothing(shape: NoConditions) -> Tuple[str, ...]:
    return ()


_NORMALIZERS: Dict[Type, Callable[[Any], Tuple[str, ...]]] = {
    ConditionList: _from_list,
    ConditionFlags: _from_flags,
    SingleCondition: _from_single,
    NoConditions: _from_nothing,
}


def normalize_weather(raw: Any) -> WeatherSnapshot:
    """Convert any supported ``weather`` shape into a canonical snapshot."""
    shape = classify_weather(raw)
    return WeatherSnapshot(conditions=_NORMALIZERS[type(shape)](shape))


def extract_weather(document: Any) -> WeatherSnapshot:
    """Normalize the ``weather`` field of a weather feed document."""
    if not isinstance(document, Mapping):
        return WeatherSnapshot()
    return normalize_weather(document.get('weather'))
