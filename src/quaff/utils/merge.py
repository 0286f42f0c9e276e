# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Deep merge for nested option mappings."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any


def _copy_value(value: Any) -> Any:
    if isinstance(value, Mapping):
        return {key: _copy_value(item) for key, item in value.items()}
    if isinstance(value, list):
        return [_copy_value(item) for item in value]
    return value


def _merge_into(target: dict[Any, Any], source: Mapping[Any, Any]) -> None:
    for key, value in source.items():
        if key not in target:
            target[key] = _copy_value(value)
            continue
        current = target[key]
        if isinstance(current, dict) and isinstance(value, Mapping):
            _merge_into(current, value)
        elif isinstance(current, list) and isinstance(value, list):
            current.extend(_copy_value(item) for item in value)
        else:
            target[key] = _copy_value(value)


def merge_options(*sources: Mapping[Any, Any] | None) -> dict[Any, Any]:
    """
    Merge option mappings left to right into a new dict.

    Nested mappings are merged key by key, lists found under the same key are
    concatenated, and any other collision is won by the later source. Inputs are
    never mutated.
    """
    merged: dict[Any, Any] = {}
    for source in sources:
        if source:
            _merge_into(merged, source)
    return merged


__all__ = ["merge_options"]
