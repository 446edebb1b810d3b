"""Message-table merge operators.

``merge`` layers sources left to right; later values overwrite earlier
ones and nested mappings are merged recursively.  ``defaults`` only adds
top-level keys the target does not have yet.
"""

from collections.abc import Mapping
from copy import deepcopy
from typing import Any


def _merge_into(target: dict[str, Any], changes: Mapping[str, Any]) -> dict[str, Any]:
    for key, value in changes.items():
        if isinstance(value, Mapping):
            if not isinstance(target.get(key), dict):
                target[key] = {}
            _merge_into(target[key], value)
        else:
            target[key] = deepcopy(value)
    return target


def merge(*sources: Mapping[str, Any] | None) -> dict[str, Any]:
    """Deep-merge ``sources`` into a new dict; missing sources are skipped."""
    result: dict[str, Any] = {}
    for source in sources:
        if source:
            _merge_into(result, source)
    return result


def defaults(target: dict[str, Any], *sources: Mapping[str, Any] | None) -> dict[str, Any]:
    """Fill keys absent from ``target`` in place, first source wins."""
    for source in sources:
        for key, value in (source or {}).items():
            if key not in target:
                target[key] = deepcopy(value)
    return target
