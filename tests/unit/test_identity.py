"""Unit tests for id property resolution."""

from __future__ import annotations

import pytest

from join_map.core.exceptions import PlanCompilationError
from join_map.mapping.identity import resolve_id_property
from join_map.mapping.plan import IdProperty


class TestResolveIdProperty:
    def test_default(self) -> None:
        assert resolve_id_property() == IdProperty("id", "id")
        assert resolve_id_property(None) == IdProperty("id", "id")

    def test_bare_name(self) -> None:
        assert resolve_id_property("user_id") == IdProperty("user_id", "user_id")

    def test_mapping_with_column(self) -> None:
        spec = {"name": "id", "column": "uid"}
        assert resolve_id_property(spec) == IdProperty("id", "uid")

    def test_mapping_column_defaults_to_name(self) -> None:
        assert resolve_id_property({"name": "code"}) == IdProperty("code", "code")

    def test_id_property_with_empty_column(self) -> None:
        assert resolve_id_property(IdProperty("key", "")) == IdProperty("key", "key")

    def test_does_not_mutate_input(self) -> None:
        spec = {"name": "code"}
        resolve_id_property(spec)
        assert spec == {"name": "code"}

    def test_missing_name(self) -> None:
        with pytest.raises(PlanCompilationError):
            resolve_id_property({"column": "uid"})

    def test_invalid_type(self) -> None:
        with pytest.raises(PlanCompilationError):
            resolve_id_property(42)
