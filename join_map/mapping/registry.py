"""Result map registry.

Compiles a sequence of result map definitions once and serves lookups by
map id. The registry is read-only after construction.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from typing import Any

from join_map.core.exceptions import (
    CyclicResultMapError,
    DuplicateResultMapError,
    UnknownResultMapError,
)
from join_map.mapping.plan import ResultMap
from join_map.mapping.schema import compile_result_map

logger = logging.getLogger(__name__)


class ResultMapRegistry:
    """Registry of compiled result maps keyed by map id.

    Args:
        maps: Result maps as ResultMap plans or plain mappings.

    Raises:
        PlanCompilationError: If a definition is malformed.
        DuplicateResultMapError: If two definitions share a map id.
    """

    def __init__(self, maps: Iterable[ResultMap | Mapping[str, Any]]) -> None:
        self._maps: dict[str, ResultMap] = {}
        for definition in maps:
            compiled = compile_result_map(definition)
            if compiled.map_id in self._maps:
                raise DuplicateResultMapError(compiled.map_id)
            self._maps[compiled.map_id] = compiled
        logger.debug("Compiled %d result maps: %s", len(self._maps), self.map_ids)

    @classmethod
    def coerce(cls, maps: ResultMapRegistry | Iterable[Any]) -> ResultMapRegistry:
        """Return ``maps`` unchanged if already a registry, else compile it."""
        if isinstance(maps, ResultMapRegistry):
            return maps
        return cls(maps)

    def get(self, map_id: str) -> ResultMap:
        """Look up a result map by id.

        Raises:
            UnknownResultMapError: If no map has the given id.
        """
        try:
            return self._maps[map_id]
        except KeyError:
            raise UnknownResultMapError(map_id) from None

    def has(self, map_id: str) -> bool:
        """Check if a map id is registered."""
        return map_id in self._maps

    def check_acyclic(self, root_map_id: str) -> None:
        """Verify every map reachable from ``root_map_id`` exists and none recurse.

        The engine always descends into associations and collections, so a
        cycle in the reference graph would recurse without end.

        Raises:
            UnknownResultMapError: If a referenced map id is not registered.
            CyclicResultMapError: If a map references itself, directly or not.
        """
        done: set[str] = set()

        def visit(map_id: str, path: list[str]) -> None:
            if map_id in path:
                raise CyclicResultMapError(path[path.index(map_id) :] + [map_id])
            if map_id in done:
                return
            result_map = self.get(map_id)
            for relation in result_map.associations + result_map.collections:
                visit(relation.map_id, path + [map_id])
            done.add(map_id)

        visit(root_map_id, [])

    @property
    def map_ids(self) -> list[str]:
        """List all registered map ids, in registration order."""
        return list(self._maps)

    def __len__(self) -> int:
        """Number of registered result maps."""
        return len(self._maps)
