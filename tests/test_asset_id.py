import pytest

from tilecraft.asset_id import AssetId, AssetType
from tilecraft.ids import NULL_ID, Id


def test_str_format():
    assert str(AssetId(Id("default", "icon"), AssetType.TEXTURE)) == "default::icon#texture"


def test_default_is_null_unknown():
    asset = AssetId()
    assert asset.id == NULL_ID
    assert asset.type is AssetType.UNKNOWN


def test_string_id_is_parsed():
    asset = AssetId("icon", AssetType.FONT)
    assert asset.namespace == "default"
    assert asset.name == "icon"
    assert asset.id == Id.parse("icon")


def test_type_orders_before_id():
    assert AssetId(Id("z", "z"), AssetType.TEXTURE) < AssetId(Id("a", "a"), AssetType.FONT)


def test_same_type_orders_by_id():
    first = AssetId(Id("a", "b"), AssetType.TEXTURE)
    second = AssetId(Id("a", "c"), AssetType.TEXTURE)
    assert first < second
    assert second > first
    assert sorted([second, first]) == [first, second]


def test_with_type_keeps_id():
    original = AssetId(Id("ns", "thing"), AssetType.UNKNOWN)
    changed = original.with_type(AssetType.TEXTURE_ITEM)
    assert changed.id == original.id
    assert changed.type is AssetType.TEXTURE_ITEM
    assert original.type is AssetType.UNKNOWN


@pytest.mark.parametrize("kind", list(AssetType))
def test_equal_ids_hash_equal(kind):
    a = AssetId(Id("ns", "x"), kind)
    b = AssetId("ns::x", kind)
    assert a == b
    assert len({a, b}) == 1


def test_different_types_are_distinct():
    assert AssetId("x", AssetType.TEXTURE) != AssetId("x", AssetType.FONT)