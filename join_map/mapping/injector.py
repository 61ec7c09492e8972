"""Graph injection - merges one row into the mapped object graph.

A GraphInjector lives for a single map call. It holds the per-call state
the merge needs: which fields each object has had written, and an identity
index per collection so lookups stay O(1) per row.
"""

from __future__ import annotations

from collections.abc import Hashable, Mapping
from typing import Any

from join_map.core.config import DEFAULT_OPTIONS, MapperOptions
from join_map.core.exceptions import StrictModeViolation
from join_map.mapping.factory import create_mapped_object, get_value, set_value
from join_map.mapping.plan import ResultMap
from join_map.mapping.registry import ResultMapRegistry


class _IdentityIndex:
    """Identity -> element lookup for one collection.

    Elements are keyed by their current id value, so an id rewritten by a
    post-processor is matched under its new value, not the row's.
    """

    def __init__(self, id_name: str, elements: list[Any]) -> None:
        self._id_name = id_name
        self._hashed: dict[Any, Any] = {}
        self._unhashable: list[tuple[Any, Any]] = []
        # id(element) -> key the element is indexed under
        self._keys: dict[int, Any] = {}
        for element in elements:
            self.add(get_value(element, id_name), element)

    def add(self, identity: Any, element: Any) -> None:
        self._keys[id(element)] = identity
        if isinstance(identity, Hashable):
            try:
                self._hashed.setdefault(identity, element)
                return
            except TypeError:
                pass  # e.g. a tuple holding a list
        self._unhashable.append((identity, element))

    def rekey(self, element: Any) -> None:
        """Re-index ``element`` if its id no longer equals the key it is stored under."""
        old = self._keys.get(id(element))
        current = get_value(element, self._id_name)
        if current is old or current == old:
            return
        try:
            if self._hashed.get(old) is element:
                del self._hashed[old]
        except TypeError:
            self._unhashable = [(c, e) for c, e in self._unhashable if e is not element]
        self.add(current, element)

    def find(self, identity: Any) -> Any | None:
        if isinstance(identity, Hashable):
            try:
                if identity in self._hashed:
                    return self._hashed[identity]
            except TypeError:
                pass
        for candidate, element in self._unhashable:
            if candidate == identity:
                return element
        return None


class GraphInjector:
    """Merges rows into mapped objects and collections for one map call.

    Args:
        registry: Compiled result maps.
        options: Engine options; defaults to MapperOptions().
    """

    def __init__(self, registry: ResultMapRegistry, options: MapperOptions | None = None) -> None:
        self._registry = registry
        self._options = options or DEFAULT_OPTIONS
        # id(obj) -> (obj, written field names); obj is held so ids stay unique
        self._written: dict[int, tuple[Any, set[str]]] = {}
        # id(list) -> (list, index)
        self._indexes: dict[int, tuple[list[Any], _IdentityIndex]] = {}

    def inject_into_collection(
        self,
        row: Mapping[str, Any],
        collection: list[Any],
        map_id: str,
        column_prefix: str = "",
    ) -> None:
        """Find or create the object for this row's identity, then merge the row into it."""
        result_map = self._registry.get(map_id)
        id_property = result_map.id_property
        identity = self._read(row, column_prefix + id_property.column, result_map)

        if identity is None and self._options.skip_null_identities:
            return

        index = self._index_for(collection, id_property.name)
        mapped_object = index.find(identity)
        if mapped_object is None:
            mapped_object = create_mapped_object(result_map)
            collection.append(mapped_object)
            index.add(identity, mapped_object)

        self.inject_into_object(row, mapped_object, map_id, column_prefix)
        index.rekey(mapped_object)

    def inject_into_object(
        self,
        row: Mapping[str, Any],
        mapped_object: Any,
        map_id: str,
        column_prefix: str = "",
    ) -> None:
        """Merge one row into one object: id, properties, associations, collections, fns."""
        result_map = self._registry.get(map_id)

        id_property = result_map.id_property
        if not self._is_written(mapped_object, id_property.name):
            value = self._read(row, column_prefix + id_property.column, result_map)
            self._write(mapped_object, id_property.name, value)

        for prop in result_map.properties:
            if self._is_written(mapped_object, prop.name):
                continue
            if prop.fn is not None:
                value = prop.fn(row, column_prefix)
            else:
                value = self._read(row, column_prefix + prop.column, result_map)
            self._write(mapped_object, prop.name, value)

        for association in result_map.associations:
            associated = get_value(mapped_object, association.name)
            if associated is None:
                associated = create_mapped_object(self._registry.get(association.map_id))
                set_value(mapped_object, association.name, associated)
            self.inject_into_object(row, associated, association.map_id, association.column_prefix)

        for coll in result_map.collections:
            children = get_value(mapped_object, coll.name)
            if children is None:
                children = []
                set_value(mapped_object, coll.name, children)
            self.inject_into_collection(row, children, coll.map_id, coll.column_prefix)

        for fn in result_map.fns:
            if callable(fn):
                fn(mapped_object, row)

    def _read(self, row: Mapping[str, Any], column: str, result_map: ResultMap) -> Any:
        if self._options.strict and column not in row:
            raise StrictModeViolation(result_map.map_id, column)
        return row.get(column)

    def _is_written(self, obj: Any, name: str) -> bool:
        if self._options.overwrite_falsy:
            return bool(get_value(obj, name))
        entry = self._written.get(id(obj))
        return entry is not None and name in entry[1]

    def _write(self, obj: Any, name: str, value: Any) -> None:
        set_value(obj, name, value)
        self._written.setdefault(id(obj), (obj, set()))[1].add(name)

    def _index_for(self, collection: list[Any], id_name: str) -> _IdentityIndex:
        entry = self._indexes.get(id(collection))
        if entry is None:
            entry = (collection, _IdentityIndex(id_name, collection))
            self._indexes[id(collection)] = entry
        return entry[1]
