"""Unit tests for mapped object creation and field access."""

from __future__ import annotations

from dataclasses import dataclass

from join_map.mapping.factory import create_mapped_object, get_value, set_value
from join_map.mapping.plan import ResultMap


@dataclass
class Widget:
    id: int | None = None
    label: str | None = None


class TestCreateMappedObject:
    def test_default_is_empty_dict(self) -> None:
        first = create_mapped_object(ResultMap(map_id="A"))
        second = create_mapped_object(ResultMap(map_id="A"))
        assert first == {}
        assert first is not second

    def test_uses_create_new(self) -> None:
        obj = create_mapped_object(ResultMap(map_id="W", create_new=Widget))
        assert isinstance(obj, Widget)


class TestFieldAccess:
    def test_dict(self) -> None:
        obj: dict = {}
        assert get_value(obj, "id") is None
        set_value(obj, "id", 3)
        assert get_value(obj, "id") == 3

    def test_attribute_object(self) -> None:
        obj = Widget()
        set_value(obj, "label", "x")
        assert obj.label == "x"
        assert get_value(obj, "label") == "x"
        assert get_value(obj, "missing") is None

    def test_attribute_object_gains_new_attributes(self) -> None:
        obj = Widget()
        set_value(obj, "extra", 1)
        assert get_value(obj, "extra") == 1
