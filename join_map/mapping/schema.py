"""Result map schema parsing.

Result maps may be authored as plain mappings (snake_case or camelCase
keys) or as ResultMap plans. Mappings are validated with Pydantic and
compiled into frozen ResultMap plans.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import Any

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, ValidationError

from join_map.core.exceptions import PlanCompilationError
from join_map.mapping.identity import resolve_id_property
from join_map.mapping.plan import PropertySpec, RelationSpec, ResultMap


class _Schema(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True, populate_by_name=True)


class PropertySchema(_Schema):
    """Scalar property declared as a mapping."""

    name: str
    column: str | None = None
    fn: Callable[..., Any] | None = None


class RelationSchema(_Schema):
    """Association or collection declared as a mapping."""

    name: str
    map_id: str = Field(validation_alias=AliasChoices("map_id", "mapId"))
    column_prefix: str | None = Field(
        default=None, validation_alias=AliasChoices("column_prefix", "columnPrefix")
    )


class ResultMapSchema(_Schema):
    """A result map declared as a mapping."""

    map_id: str = Field(validation_alias=AliasChoices("map_id", "mapId"))
    id_property: Any = Field(
        default=None, validation_alias=AliasChoices("id_property", "idProperty")
    )
    properties: list[str | PropertySchema] = []
    associations: list[RelationSchema] = []
    collections: list[RelationSchema] = []
    fns: list[Any] = []
    create_new: Callable[[], Any] | None = Field(
        default=None, validation_alias=AliasChoices("create_new", "createNew")
    )


def _property_spec(prop: Any) -> PropertySpec:
    if isinstance(prop, str):
        return PropertySpec(name=prop, column=prop)
    if isinstance(prop, (PropertySpec, PropertySchema)):
        if not prop.name:
            raise PlanCompilationError(f"Property specification has no name: {prop!r}")
        if prop.fn is not None and not callable(prop.fn):
            raise PlanCompilationError(f"Property '{prop.name}' has a non-callable fn")
        return PropertySpec(name=prop.name, column=prop.column or prop.name, fn=prop.fn)
    raise PlanCompilationError(f"Invalid property specification: {prop!r}")


def _relation_spec(rel: RelationSpec | RelationSchema) -> RelationSpec:
    return RelationSpec(name=rel.name, map_id=rel.map_id, column_prefix=rel.column_prefix or "")


def compile_result_map(definition: ResultMap | Mapping[str, Any]) -> ResultMap:
    """Compile a result map definition into a normalized ResultMap plan.

    Raises:
        PlanCompilationError: If the definition is malformed.
    """
    if isinstance(definition, Mapping):
        try:
            definition = ResultMapSchema.model_validate(definition)
        except ValidationError as e:
            raise PlanCompilationError(f"Invalid result map definition: {e}") from e
    elif not isinstance(definition, ResultMap):
        raise PlanCompilationError(f"Invalid result map definition: {definition!r}")

    if not definition.map_id:
        raise PlanCompilationError("Result map must have a map_id")
    if definition.create_new is not None and not callable(definition.create_new):
        raise PlanCompilationError(
            f"Result map '{definition.map_id}' has a non-callable create_new"
        )

    return ResultMap(
        map_id=definition.map_id,
        id_property=resolve_id_property(definition.id_property),
        properties=tuple(_property_spec(p) for p in definition.properties),
        associations=tuple(_relation_spec(a) for a in definition.associations),
        collections=tuple(_relation_spec(c) for c in definition.collections),
        fns=tuple(definition.fns),
        create_new=definition.create_new,
    )
