"""Loading of tile and item definitions from the resources folder."""

from __future__ import annotations

import json
import os
import re
from collections.abc import Callable
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Union

from tilecraft.console import ERROR, INFO, SUCCESS, log
from tilecraft.definitions import (
    DefinitionError,
    ItemDefinition,
    ItemHandle,
    TileDefinition,
    TileHandle,
)
from tilecraft.ids import Id

_OWNER = "DataManager"
_JSONC = re.compile(r'("(?:\\.|[^"\\])*")|//[^\n]*|/\*.*?\*/', re.S)


def strip_jsonc(text: str) -> str:
    """Remove ``//`` and ``/* */`` comments that lie outside strings."""
    return _JSONC.sub(lambda m: m.group(1) or "", text)


@dataclass
class Registry:
    """The tiles and items declared by one or more data files."""

    tiles: dict[str, TileDefinition] = field(default_factory=dict)
    items: dict[str, ItemDefinition] = field(default_factory=dict)

    @classmethod
    def from_json(cls, data: Any) -> Registry:
        if not isinstance(data, dict):
            raise DefinitionError("registry must be an object")
        unknown = set(data) - {"tiles", "items"}
        if unknown:
            raise DefinitionError(f"unknown key '{sorted(unknown)[0]}'")
        return cls(
            tiles=_read_section(data.get("tiles", {}), TileDefinition.from_json),
            items=_read_section(data.get("items", {}), ItemDefinition.from_json),
        )

    def merge(self, other: Registry) -> None:
        self.tiles.update(other.tiles)
        self.items.update(other.items)


def _read_section(section: Any, reader: Callable[[Any], Any]) -> dict[str, Any]:
    if not isinstance(section, dict):
        raise DefinitionError("section must be an object")
    return {name: reader(value) for name, value in section.items()}


def load_namespace(namespace: str, root: Path) -> Registry:
    """Merge every ``.json`` file directly inside ``root``; bad files are reported and skipped."""
    registry = Registry()
    for path in sorted(Path(root).iterdir()):
        if path.suffix != ".json" or not path.is_file():
            continue
        try:
            text = path.read_text(encoding="utf-8")
        except OSError:
            continue
        try:
            registry.merge(Registry.from_json(json.loads(strip_jsonc(text))))
        except (json.JSONDecodeError, DefinitionError) as exc:
            log(ERROR, "Error loading from '{}' : {}.", path, exc, owner=_OWNER)
    log(SUCCESS, "Loaded namespace '{}'.", namespace, owner=_OWNER)
    return registry


IdLike = Union[Id, str]


def _as_id(ident: IdLike) -> Id:
    return ident if isinstance(ident, Id) else Id.parse(ident)


class DataManager:
    """Holds the loaded tile and item handles and their numeric id mappings."""

    def __init__(self, resources_folder: str | os.PathLike[str] = "resources") -> None:
        self._resources_folder = Path(os.path.normpath(resources_folder))
        self._tiles: dict[Id, TileHandle] = {}
        self._items: dict[Id, ItemHandle] = {}
        self._mapped_to_ids: dict[int, Id] = {}
        self._ids_to_mapped: dict[Id, int] = {}
        self._listeners: list[Callable[[], None]] = []

    @property
    def resources_folder(self) -> Path:
        return self._resources_folder

    def set_resources_folder(self, path: str | os.PathLike[str]) -> None:
        normalised = Path(os.path.normpath(path))
        if normalised != self._resources_folder:
            log(INFO, "Resources path set to '{}'.", normalised, owner=_OWNER)
        self._resources_folder = normalised

    def add_listener(self, callback: Callable[[], None]) -> None:
        """Call ``callback`` after every successful reload."""
        self._listeners.append(callback)

    def reload(self) -> None:
        """Reload all namespaces under ``<resources>/data``."""
        self._tiles.clear()
        self._items.clear()
        self._mapped_to_ids.clear()
        self._ids_to_mapped.clear()

        data_root = self._resources_folder / "data"
        if not data_root.exists():
            log(ERROR, "Data directory '{}' invalid.", data_root, owner=_OWNER)
            return

        namespaces = {
            entry.name: load_namespace(entry.name, entry)
            for entry in sorted(data_root.iterdir())
            if entry.is_dir()
        }

        ordered: set[Id] = set()
        for namespace, registry in namespaces.items():
            for name, tile_def in registry.tiles.items():
                tile_id = Id(namespace, name)
                self._tiles[tile_id] = TileHandle.from_definition(tile_id, tile_def)
                ordered.add(tile_id)
            for name, item_def in registry.items.items():
                item_id = Id(namespace, name)
                self._items[item_id] = ItemHandle.from_definition(item_id, item_def)
                ordered.add(item_id)

        for mapped, ident in enumerate(sorted(ordered)):
            self._mapped_to_ids[mapped] = ident
            self._ids_to_mapped[ident] = mapped

        log(SUCCESS, "Created id mappings.", owner=_OWNER)
        for callback in self._listeners:
            callback()

    def get_tile(self, id: IdLike) -> TileHandle | None:
        return self._tiles.get(_as_id(id))

    def get_item(self, id: IdLike) -> ItemHandle | None:
        return self._items.get(_as_id(id))

    def tile_ids(self) -> list[Id]:
        return list(self._tiles)

    def item_ids(self) -> list[Id]:
        return list(self._items)

    def id_mapping(self, id: IdLike) -> int:
        """Return the numeric mapping of ``id``; raises KeyError if unknown."""
        return self._ids_to_mapped[_as_id(id)]

    def mapped_id(self, mapped: int) -> Id:
        """Return the id for a numeric mapping; raises KeyError if unknown."""
        return self._mapped_to_ids[mapped]