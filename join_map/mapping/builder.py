"""Result map DSL builder.

Provides a fluent builder for defining result maps in code.
"""

from __future__ import annotations

from typing import Any

from join_map.core.exceptions import PlanCompilationError
from join_map.mapping.plan import IdProperty, PropertySpec, RelationSpec, ResultMap
from join_map.mapping.protocol import ColumnTransform, ObjectFactory, PostProcessor
from join_map.mapping.schema import compile_result_map


def result_map(map_id: str) -> ResultMapBuilder:
    """Entry point for the result map DSL.

    Args:
        map_id: Unique id of the result map within its registry.

    Returns:
        A builder for chaining mapping declarations.
    """
    return ResultMapBuilder(map_id)


class ResultMapBuilder:
    """Fluent builder for result map definitions."""

    def __init__(self, map_id: str) -> None:
        self._map_id = map_id
        self._id_property: IdProperty | None = None
        self._properties: list[PropertySpec] = []
        self._associations: list[RelationSpec] = []
        self._collections: list[RelationSpec] = []
        self._fns: list[Any] = []
        self._create_new: ObjectFactory | None = None

    def id(self, name: str, column: str | None = None) -> ResultMapBuilder:
        """Set the identity property. Defaults to ``id`` read from column ``id``."""
        self._id_property = IdProperty(name=name, column=column or name)
        return self

    def property(
        self,
        name: str,
        column: str | None = None,
        fn: ColumnTransform | None = None,
    ) -> ResultMapBuilder:
        """Map a scalar property from a column, or compute it with ``fn``."""
        self._properties.append(PropertySpec(name=name, column=column or name, fn=fn))
        return self

    def properties(self, *names: str) -> ResultMapBuilder:
        """Map several properties whose column names equal their names."""
        for name in names:
            self.property(name)
        return self

    def association(self, name: str, map_id: str, prefix: str = "") -> ResultMapBuilder:
        """Declare a single nested object built by another result map."""
        self._associations.append(RelationSpec(name=name, map_id=map_id, column_prefix=prefix))
        return self

    def collection(self, name: str, map_id: str, prefix: str = "") -> ResultMapBuilder:
        """Declare a deduplicated list of objects built by another result map."""
        self._collections.append(RelationSpec(name=name, map_id=map_id, column_prefix=prefix))
        return self

    def fn(self, post_processor: PostProcessor) -> ResultMapBuilder:
        """Append a post-processor run after each row is merged into an object."""
        self._fns.append(post_processor)
        return self

    def create_new(self, factory: ObjectFactory) -> ResultMapBuilder:
        """Set the factory producing blank objects for this map."""
        self._create_new = factory
        return self

    def build(self) -> ResultMap:
        """Compile and validate the definition into a ResultMap."""
        seen: set[str] = set()
        for name in (
            [p.name for p in self._properties]
            + [a.name for a in self._associations]
            + [c.name for c in self._collections]
        ):
            if name in seen:
                raise PlanCompilationError(
                    f"Duplicate field '{name}' in result map '{self._map_id}'"
                )
            seen.add(name)

        definition = ResultMap(
            map_id=self._map_id,
            id_property=self._id_property or IdProperty(),
            properties=tuple(self._properties),
            associations=tuple(self._associations),
            collections=tuple(self._collections),
            fns=tuple(self._fns),
            create_new=self._create_new,
        )
        return compile_result_map(definition)
