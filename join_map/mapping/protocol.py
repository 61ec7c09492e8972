"""Callable protocols.

Result maps carry caller-supplied callables. These protocols describe the
signatures the engine invokes them with.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Protocol


class ColumnTransform(Protocol):
    """Computes a property value from the row and the active column prefix."""

    def __call__(self, row: Mapping[str, Any], column_prefix: str) -> Any: ...


class PostProcessor(Protocol):
    """Runs after an object has been populated from the current row."""

    def __call__(self, mapped_object: Any, row: Mapping[str, Any]) -> None: ...


class ObjectFactory(Protocol):
    """Produces a blank mapped object."""

    def __call__(self) -> Any: ...
