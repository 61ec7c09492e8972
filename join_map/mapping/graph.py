"""Graph builder - public entry points.

Maps a flat result set onto a graph of nested objects in a single pass
over the rows. Each call is self-contained: no state survives between
calls.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from typing import Any

from join_map.core.config import DEFAULT_OPTIONS, MapperOptions
from join_map.core.enums import NotFoundReason
from join_map.core.exceptions import NotFoundError
from join_map.mapping.injector import GraphInjector
from join_map.mapping.registry import ResultMapRegistry

logger = logging.getLogger(__name__)


class GraphMapper:
    """Reusable mapper for one root result map.

    Compiles and validates the result maps once, then maps any number of
    result sets.

    Args:
        maps: Result maps as a registry, ResultMap plans or plain mappings.
        root_map_id: Map id of the top-level objects.
        column_prefix: Prefix applied to the top-level objects' columns.
        options: Engine options; defaults to MapperOptions().

    Raises:
        ConfigurationError: If the result maps are malformed, reference an
            unknown map id, or reference each other in a cycle.
    """

    def __init__(
        self,
        maps: ResultMapRegistry | Iterable[Any],
        root_map_id: str,
        column_prefix: str = "",
        options: MapperOptions | None = None,
    ) -> None:
        self._registry = ResultMapRegistry.coerce(maps)
        self._root_map_id = root_map_id
        self._column_prefix = column_prefix or ""
        self._options = options or DEFAULT_OPTIONS

        if self._options.detect_cycles:
            self._registry.check_acyclic(root_map_id)
        else:
            self._registry.get(root_map_id)

    @property
    def registry(self) -> ResultMapRegistry:
        return self._registry

    def map_many(self, rows: Iterable[Mapping[str, Any]]) -> list[Any]:
        """Map all rows to a list of distinct top-level objects.

        Objects appear in the order their identity is first seen.
        """
        injector = GraphInjector(self._registry, self._options)
        mapped_collection: list[Any] = []
        count = 0
        for row in rows:
            injector.inject_into_collection(
                row, mapped_collection, self._root_map_id, self._column_prefix
            )
            count += 1

        logger.debug(
            "Mapped %d rows to %d '%s' objects", count, len(mapped_collection), self._root_map_id
        )
        return mapped_collection

    def map_one(self, rows: Iterable[Mapping[str, Any]], is_required: bool = True) -> Any | None:
        """Map rows and return the first top-level object.

        A single object may still span several rows (one per child in a
        one-to-many join), so all rows are mapped and the first distinct
        identity is returned.

        Raises:
            NotFoundError: If nothing was mapped and ``is_required`` is true.
        """
        mapped_collection = self.map_many(rows)
        if mapped_collection:
            return mapped_collection[0]
        if is_required:
            raise NotFoundError(NotFoundReason.EMPTY_RESPONSE)
        return None


def map_many(
    rows: Iterable[Mapping[str, Any]],
    maps: ResultMapRegistry | Iterable[Any],
    root_map_id: str,
    column_prefix: str = "",
    *,
    options: MapperOptions | None = None,
) -> list[Any]:
    """Map a result set to a list of objects.

    Args:
        rows: Row mappings, e.g. the result of a join query.
        maps: Result maps.
        root_map_id: Map id of the top-level objects.
        column_prefix: Prefix applied to the top-level objects' columns.
        options: Engine options.

    Returns:
        Distinct top-level objects in first-appearance order.
    """
    return GraphMapper(maps, root_map_id, column_prefix, options).map_many(rows)


def map_one(
    rows: Iterable[Mapping[str, Any]],
    maps: ResultMapRegistry | Iterable[Any],
    root_map_id: str,
    column_prefix: str = "",
    is_required: bool = True,
    *,
    options: MapperOptions | None = None,
) -> Any | None:
    """Map a result set to a single object.

    Returns:
        The first distinct top-level object, or None when nothing was
        mapped and ``is_required`` is false.

    Raises:
        NotFoundError: If nothing was mapped and ``is_required`` is true.
    """
    return GraphMapper(maps, root_map_id, column_prefix, options).map_one(rows, is_required)
