"""Identity resolution for result maps."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from join_map.core.exceptions import PlanCompilationError
from join_map.mapping.plan import IdProperty

DEFAULT_ID_PROPERTY = IdProperty(name="id", column="id")


def resolve_id_property(spec: Any = None) -> IdProperty:
    """Normalize an id specification into an IdProperty.

    Accepted forms:
        None                      -> IdProperty("id", "id")
        "user_id"                 -> IdProperty("user_id", "user_id")
        {"name": "id", "column": "user_id"}
        IdProperty(...)           -> column defaults to name when empty
    """
    if spec is None:
        return DEFAULT_ID_PROPERTY

    if isinstance(spec, str):
        return IdProperty(name=spec, column=spec)

    if isinstance(spec, IdProperty):
        name, column = spec.name, spec.column
    elif isinstance(spec, Mapping):
        name, column = spec.get("name"), spec.get("column")
    else:
        raise PlanCompilationError(f"Invalid id property specification: {spec!r}")

    if not name:
        raise PlanCompilationError(f"Id property specification has no name: {spec!r}")
    return IdProperty(name=name, column=column or name)
