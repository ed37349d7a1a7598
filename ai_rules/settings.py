"""Merge a technology's settings template into an existing settings file."""

from __future__ import annotations

from copy import deepcopy
from typing import Any

PERMISSION_LISTS: tuple[str, ...] = ("allow", "deny")


def _union(existing: list[Any], incoming: list[Any]) -> list[Any]:
    merged: list[Any] = []
    for item in [*existing, *incoming]:
        if item not in merged:
            merged.append(item)
    return merged


def _merge_permissions(
    existing: dict[str, Any] | None, template: dict[str, Any]
) -> dict[str, Any]:
    merged = deepcopy(existing) if isinstance(existing, dict) else {}
    for key in PERMISSION_LISTS:
        merged[key] = _union(
            list(merged.get(key) or []), list(template.get(key) or [])
        )
    for key, value in template.items():
        if key not in PERMISSION_LISTS:
            merged.setdefault(key, deepcopy(value))
    return merged


def _merge_env(
    existing: dict[str, Any] | None, template: dict[str, Any]
) -> dict[str, Any]:
    merged = deepcopy(existing) if isinstance(existing, dict) else {}
    for key, value in template.items():
        merged.setdefault(key, value)
    return merged


def merge_settings(existing: dict[str, Any], template: dict[str, Any]) -> dict[str, Any]:
    """Return ``existing`` with ``template`` folded in.

    Permission lists are unioned in first-seen order. Every other key,
    including ``env`` entries, is taken from the template only when the
    existing settings do not define it.
    """
    merged = deepcopy(existing)
    for key, value in template.items():
        if key == "permissions" and isinstance(value, dict):
            merged[key] = _merge_permissions(merged.get(key), value)
        elif key == "env" and isinstance(value, dict):
            merged[key] = _merge_env(merged.get(key), value)
        else:
            merged.setdefault(key, deepcopy(value))
    return merged
