from pathlib import Path

import pytest

from tilecraft.definitions import (
    CollisionType,
    DefinitionError,
    HandleModelType,
    ItemDefinition,
    ItemHandle,
    ModelType,
    TileDefinition,
    TileHandle,
)
from tilecraft.ids import Id


def test_tile_defaults():
    tile = TileDefinition.from_json({})
    assert tile.texture is None
    assert tile.model is ModelType.BLOCK
    assert tile.collision is CollisionType.BLOCK


def test_tile_enum_model():
    tile = TileDefinition.from_json({"model": "none", "collision": "none"})
    assert tile.model is ModelType.NONE
    assert tile.collision is CollisionType.NONE


def test_tile_custom_model():
    tile = TileDefinition.from_json({"model": "models/door", "texture": "door"})
    assert tile.model == "models/door"
    assert tile.texture == "door"


@pytest.mark.parametrize(
    "data",
    [{"colour": "red"}, {"collision": "soft"}, {"texture": 5}, {"model": 3}, ["texture"]],
)
def test_tile_rejects(data):
    with pytest.raises(DefinitionError):
        TileDefinition.from_json(data)


def test_item_definition():
    assert ItemDefinition.from_json({"texture": "pick"}).texture == "pick"
    with pytest.raises(DefinitionError):
        ItemDefinition.from_json({"model": "block"})


def test_tile_handle_custom():
    ident = Id("core", "door")
    handle = TileHandle.from_definition(ident, TileDefinition(texture="door", model="models/door"))
    assert handle.model_type is HandleModelType.CUSTOM
    assert handle.model_path == Path("models/door")
    assert handle.texture_path == Path("door")
    assert handle.id == ident


@pytest.mark.parametrize(
    ("model", "expected"),
    [(ModelType.BLOCK, HandleModelType.BLOCK), (ModelType.NONE, HandleModelType.NONE)],
)
def test_tile_handle_enum_models(model, expected):
    handle = TileHandle.from_definition(Id("core", "x"), TileDefinition(model=model))
    assert handle.model_type is expected
    assert handle.model_path is None
    assert handle.texture_path is None


def test_item_handle():
    handle = ItemHandle.from_definition(Id("core", "pick"), ItemDefinition("tools/pick"))
    assert handle.texture_path == Path("tools/pick")
    assert ItemHandle.from_definition(Id("core", "a"), ItemDefinition()).texture_path is None