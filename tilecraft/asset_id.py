"""Identifiers for loadable assets: a namespaced id plus the kind of asset."""

from __future__ import annotations

import enum
import functools
from dataclasses import dataclass
from typing import Union

from tilecraft.ids import NULL_ID, Id


class AssetType(enum.Enum):
    """Kinds of asset, in the order they sort."""

    UNKNOWN = 0
    TEXTURE = 1
    TEXTURE_TILESET = 2
    TEXTURE_ITEM = 3
    FONT = 4

    def __str__(self) -> str:
        return self.name.lower()


@functools.total_ordering
@dataclass(frozen=True)
class AssetId:
    """An asset identifier, ordered by type and then by id."""

    id: Union[Id, str] = NULL_ID
    type: AssetType = AssetType.UNKNOWN

    def __post_init__(self) -> None:
        if isinstance(self.id, str):
            object.__setattr__(self, "id", Id.parse(self.id))

    @property
    def namespace(self) -> str:
        return self.id.namespace

    @property
    def name(self) -> str:
        return self.id.name

    def _key(self) -> tuple[int, Id]:
        return (self.type.value, self.id)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, AssetId):
            return NotImplemented
        return self._key() < other._key()

    def with_type(self, type: AssetType) -> AssetId:
        """Return the same id with a different asset type."""
        return AssetId(self.id, type)

    def __str__(self) -> str:
        return f"{self.id}#{self.type}"