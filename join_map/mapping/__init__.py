"""Mapping layer - transform joined rows into nested object graphs."""

from __future__ import annotations

from join_map.mapping.builder import ResultMapBuilder, result_map
from join_map.mapping.graph import GraphMapper, map_many, map_one
from join_map.mapping.identity import resolve_id_property
from join_map.mapping.injector import GraphInjector
from join_map.mapping.plan import IdProperty, PropertySpec, RelationSpec, ResultMap
from join_map.mapping.registry import ResultMapRegistry
from join_map.mapping.schema import compile_result_map

__all__ = [
    "map_many",
    "map_one",
    "GraphMapper",
    "GraphInjector",
    "ResultMapRegistry",
    "ResultMapBuilder",
    "result_map",
    "compile_result_map",
    "resolve_id_property",
    "ResultMap",
    "IdProperty",
    "PropertySpec",
    "RelationSpec",
]
