"""Result map plan data classes.

Frozen dataclasses representing compiled, validated result maps.
Used by GraphInjector at execution time.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from join_map.mapping.protocol import ColumnTransform, ObjectFactory


@dataclass(frozen=True)
class IdProperty:
    """Identity of a mapped object: attribute name and source column."""

    name: str = "id"
    column: str = "id"


@dataclass(frozen=True)
class PropertySpec:
    """A scalar property read from one column, or computed by ``fn``."""

    name: str
    column: str
    fn: ColumnTransform | None = None


@dataclass(frozen=True)
class RelationSpec:
    """An association (single object) or collection (list) of another map."""

    name: str
    map_id: str
    column_prefix: str = ""


@dataclass(frozen=True)
class ResultMap:
    """Compiled result map: how one object type is built from row columns."""

    map_id: str
    id_property: IdProperty = field(default_factory=IdProperty)
    properties: tuple[PropertySpec, ...] = ()
    associations: tuple[RelationSpec, ...] = ()
    collections: tuple[RelationSpec, ...] = ()
    fns: tuple[Any, ...] = ()  # non-callable entries are skipped at run time
    create_new: ObjectFactory | None = None
