"""Tile and item definitions as read from data files, and the handles built from them."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Union

from tilecraft.ids import Id


class DefinitionError(ValueError):
    """Raised when a definition in a data file is malformed."""


class ModelType(enum.Enum):
    NONE = "none"
    BLOCK = "block"


class CollisionType(enum.Enum):
    NONE = "none"
    BLOCK = "block"


class HandleModelType(enum.Enum):
    NONE = "none"
    BLOCK = "block"
    CUSTOM = "custom"


def _check_keys(data: Any, allowed: set[str], kind: str) -> dict[str, Any]:
    if not isinstance(data, dict):
        raise DefinitionError(f"{kind} definition must be an object")
    unknown = set(data) - allowed
    if unknown:
        raise DefinitionError(f"unknown key '{sorted(unknown)[0]}' in {kind} definition")
    return data


def _read_texture(data: dict[str, Any]) -> str | None:
    texture = data.get("texture")
    if texture is not None and not isinstance(texture, str):
        raise DefinitionError("texture must be a string")
    return texture


@dataclass(frozen=True)
class TileDefinition:
    texture: str | None = None
    model: Union[ModelType, str] = ModelType.BLOCK
    collision: CollisionType = CollisionType.BLOCK

    @classmethod
    def from_json(cls, data: Any) -> TileDefinition:
        data = _check_keys(data, {"texture", "model", "collision"}, "tile")
        model: Union[ModelType, str] = ModelType.BLOCK
        if "model" in data:
            raw = data["model"]
            if not isinstance(raw, str):
                raise DefinitionError("model must be a string")
            try:
                model = ModelType(raw)
            except ValueError:
                model = raw
        collision = CollisionType.BLOCK
        if "collision" in data:
            try:
                collision = CollisionType(data["collision"])
            except (ValueError, TypeError) as exc:
                raise DefinitionError(f"invalid collision type {data['collision']!r}") from exc
        return cls(_read_texture(data), model, collision)


@dataclass(frozen=True)
class ItemDefinition:
    texture: str | None = None

    @classmethod
    def from_json(cls, data: Any) -> ItemDefinition:
        data = _check_keys(data, {"texture"}, "item")
        return cls(_read_texture(data))


@dataclass(frozen=True)
class TileHandle:
    id: Id
    model_type: HandleModelType
    texture_path: Path | None = None
    model_path: Path | None = None

    @classmethod
    def from_definition(cls, id: Id, definition: TileDefinition) -> TileHandle:
        texture = Path(definition.texture) if definition.texture is not None else None
        if isinstance(definition.model, str):
            return cls(id, HandleModelType.CUSTOM, texture, Path(definition.model))
        model_type = HandleModelType.BLOCK if definition.model is ModelType.BLOCK else HandleModelType.NONE
        return cls(id, model_type, texture)


@dataclass(frozen=True)
class ItemHandle:
    id: Id
    texture_path: Path | None = None

    @classmethod
    def from_definition(cls, id: Id, definition: ItemDefinition) -> ItemHandle:
        texture = Path(definition.texture) if definition.texture is not None else None
        return cls(id, texture)