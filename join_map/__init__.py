"""join-map - map joined SQL result sets onto nested object graphs."""

from __future__ import annotations

from join_map.core.config import MapperOptions
from join_map.core.enums import NotFoundReason
from join_map.core.exceptions import (
    ConfigurationError,
    CyclicResultMapError,
    DuplicateResultMapError,
    JoinMapError,
    MappingError,
    NotFoundError,
    PlanCompilationError,
    StrictModeViolation,
    UnknownResultMapError,
)
from join_map.mapping.builder import ResultMapBuilder, result_map
from join_map.mapping.graph import GraphMapper, map_many, map_one
from join_map.mapping.plan import IdProperty, PropertySpec, RelationSpec, ResultMap
from join_map.mapping.registry import ResultMapRegistry

__all__ = [
    # Entry points
    "map_many",
    "map_one",
    "GraphMapper",
    # Result maps
    "ResultMap",
    "IdProperty",
    "PropertySpec",
    "RelationSpec",
    "ResultMapRegistry",
    "ResultMapBuilder",
    "result_map",
    # Configuration
    "MapperOptions",
    # Enums
    "NotFoundReason",
    # Exceptions
    "JoinMapError",
    "NotFoundError",
    "MappingError",
    "StrictModeViolation",
    "ConfigurationError",
    "UnknownResultMapError",
    "DuplicateResultMapError",
    "CyclicResultMapError",
    "PlanCompilationError",
]
