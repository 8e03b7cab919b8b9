from __future__ import annotations

from copy import deepcopy
from typing import Any, Dict, Mapping


def deep_merge(base: Mapping[str, Any] | None, upd: Mapping[str, Any] | None) -> Dict[str, Any]:
    """Right-biased recursive merge; neither input is mutated."""

    merged: Dict[str, Any] = deepcopy(dict(base or {}))
    for key, value in (upd or {}).items():
        if isinstance(value, Mapping) and isinstance(merged.get(key), Mapping):
            merged[key] = deep_merge(merged[key], value)
        else:
            merged[key] = deepcopy(value)
    return merged


def merge_into(target: Dict[str, Any], upd: Mapping[str, Any] | None) -> Dict[str, Any]:
    """In-place variant of :func:`deep_merge`; nested dicts of ``target`` keep their identity."""

    for key, value in (upd or {}).items():
        if isinstance(value, Mapping) and isinstance(target.get(key), dict):
            merge_into(target[key], value)
        else:
            target[key] = deepcopy(value)
    return target
