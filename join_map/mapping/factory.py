"""Mapped object creation and field access.

Mapped objects are plain dicts unless a result map supplies ``create_new``.
Mapping-style objects are read and written by key, anything else by
attribute, so dataclasses, Pydantic models and plain classes all work.
"""

from __future__ import annotations

from collections.abc import Mapping, MutableMapping
from typing import Any

from join_map.mapping.plan import ResultMap


def create_mapped_object(result_map: ResultMap) -> Any:
    """Create a blank object for ``result_map``."""
    if result_map.create_new is not None:
        return result_map.create_new()
    return {}


def get_value(obj: Any, name: str) -> Any:
    """Read a field, returning None when it is absent."""
    if isinstance(obj, Mapping):
        return obj.get(name)
    return getattr(obj, name, None)


def set_value(obj: Any, name: str, value: Any) -> None:
    """Write a field on a dict-like or attribute-based object."""
    if isinstance(obj, MutableMapping):
        obj[name] = value
    else:
        setattr(obj, name, value)
