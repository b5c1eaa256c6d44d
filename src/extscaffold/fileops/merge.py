"""Structured document merge."""

from __future__ import annotations

import copy
from collections.abc import Mapping
from typing import Any


def deep_merge(base: Mapping[str, Any], patch: Mapping[str, Any]) -> dict[str, Any]:
    """Return *base* with *patch* applied.

    Nested mappings merge recursively; lists and scalars in *patch* replace
    the existing value. Keys of *base* keep their order and new keys are
    appended. Neither argument is modified.
    """
    merged = copy.deepcopy(dict(base))
    for key, value in patch.items():
        existing = merged.get(key)
        if isinstance(existing, Mapping) and isinstance(value, Mapping):
            merged[key] = deep_merge(existing, value)
        else:
            merged[key] = copy.deepcopy(value)
    return merged
