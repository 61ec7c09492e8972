"""Unit tests for result map schema compilation."""

from __future__ import annotations

import pytest

from join_map.core.exceptions import PlanCompilationError
from join_map.mapping.plan import IdProperty, PropertySpec, RelationSpec, ResultMap
from join_map.mapping.schema import compile_result_map


def _upper(row, prefix):
    return row[prefix + "name"].upper()


class TestCompileResultMap:
    def test_minimal_mapping(self) -> None:
        compiled = compile_result_map({"map_id": "A"})
        assert compiled == ResultMap(map_id="A")
        assert compiled.id_property == IdProperty("id", "id")

    def test_snake_case_keys(self) -> None:
        compiled = compile_result_map(
            {
                "map_id": "Post",
                "id_property": "post_id",
                "properties": ["title", {"name": "slug", "column": "post_slug"}],
                "associations": [{"name": "author", "map_id": "Author", "column_prefix": "a_"}],
                "collections": [{"name": "tags", "map_id": "Tag"}],
            }
        )
        assert compiled.id_property == IdProperty("post_id", "post_id")
        assert compiled.properties == (
            PropertySpec("title", "title"),
            PropertySpec("slug", "post_slug"),
        )
        assert compiled.associations == (RelationSpec("author", "Author", "a_"),)
        assert compiled.collections == (RelationSpec("tags", "Tag", ""),)

    def test_camel_case_keys(self) -> None:
        compiled = compile_result_map(
            {
                "mapId": "Post",
                "idProperty": {"name": "id", "column": "postId"},
                "collections": [{"name": "tags", "mapId": "Tag", "columnPrefix": "tag_"}],
                "createNew": dict,
            }
        )
        assert compiled.map_id == "Post"
        assert compiled.id_property == IdProperty("id", "postId")
        assert compiled.collections == (RelationSpec("tags", "Tag", "tag_"),)
        assert compiled.create_new is dict

    @pytest.mark.parametrize("key", ["id_property", "idProperty"])
    def test_id_property_mapping_without_column(self, key: str) -> None:
        compiled = compile_result_map({"map_id": "A", key: {"name": "code"}})
        assert compiled.id_property == IdProperty("code", "code")

    def test_id_property_instance(self) -> None:
        compiled = compile_result_map({"map_id": "A", "id_property": IdProperty("key", "k")})
        assert compiled.id_property == IdProperty("key", "k")

    def test_property_fn(self) -> None:
        compiled = compile_result_map(
            {"map_id": "A", "properties": [{"name": "shout", "fn": _upper}]}
        )
        assert compiled.properties == (PropertySpec("shout", "shout", _upper),)

    def test_null_column_prefix(self) -> None:
        compiled = compile_result_map(
            {"map_id": "A", "collections": [{"name": "bs", "map_id": "B", "column_prefix": None}]}
        )
        assert compiled.collections[0].column_prefix == ""

    def test_fns_keep_non_callables(self) -> None:
        compiled = compile_result_map({"map_id": "A", "fns": [None, print]})
        assert compiled.fns == (None, print)

    def test_result_map_is_normalized(self) -> None:
        compiled = compile_result_map(
            ResultMap(
                map_id="A",
                id_property=IdProperty("key", ""),
                properties=(PropertySpec("name", ""),),
            )
        )
        assert compiled.id_property == IdProperty("key", "key")
        assert compiled.properties == (PropertySpec("name", "name"),)

    @pytest.mark.parametrize(
        "definition",
        [
            {},
            {"map_id": ""},
            {"map_id": "A", "unknown": 1},
            {"map_id": "A", "properties": [{"column": "x"}]},
            {"map_id": "A", "properties": [{"name": "x", "fn": 3}]},
            {"map_id": "A", "collections": [{"name": "bs"}]},
            {"map_id": "A", "create_new": "dict"},
        ],
    )
    def test_invalid_mapping(self, definition: dict) -> None:
        with pytest.raises(PlanCompilationError):
            compile_result_map(definition)

    def test_invalid_type(self) -> None:
        with pytest.raises(PlanCompilationError):
            compile_result_map(["map_id", "A"])  # type: ignore[arg-type]

    def test_result_map_with_non_callable_fn(self) -> None:
        bad = PropertySpec("x", "x", "nope")  # type: ignore[arg-type]
        with pytest.raises(PlanCompilationError):
            compile_result_map(ResultMap(map_id="A", properties=(bad,)))
