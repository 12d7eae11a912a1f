"""Loading and lookup of textures and fonts from the resources folder."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

from PIL import Image

from tilecraft.asset_id import AssetId, AssetType
from tilecraft.console import ERROR, WARNING, log
from tilecraft.data_manager import DataManager
from tilecraft.definitions import HandleModelType
from tilecraft.ids import DEFAULT_NAMESPACE, Id

_OWNER = "AssetManager"
PLACEHOLDER = Id(DEFAULT_NAMESPACE, "placeholder")

_TEXTURE_TYPES = (AssetType.TEXTURE, AssetType.TEXTURE_TILESET, AssetType.TEXTURE_ITEM)
_TEXTURE_EXTS = (".png", ".jpg", ".jpeg", ".bmp", ".tga", ".hdr")
_ALLOWED_EXTS = {
    AssetType.FONT: (".ttf", ".otf"),
    **{kind: _TEXTURE_EXTS for kind in _TEXTURE_TYPES},
}
_TYPE_FOLDERS = {
    AssetType.FONT: "font",
    AssetType.TEXTURE: "texture",
    AssetType.TEXTURE_TILESET: "texture/tileset",
    AssetType.TEXTURE_ITEM: "texture/item",
}
_FONT_SIGNATURES = (b"\x00\x01\x00\x00", b"OTTO", b"true", b"ttcf")

AssetKey = Union[AssetId, Id, str]


class AssetError(Exception):
    """Raised when an asset cannot be loaded or found."""


@dataclass
class Texture:
    """A decoded RGBA image; an empty texture has no image."""

    image: Optional[Image.Image] = None

    @property
    def size(self) -> tuple[int, int]:
        return (0, 0) if self.image is None else self.image.size

    @classmethod
    def load(cls, path: Union[str, os.PathLike]) -> Texture:
        try:
            with Image.open(path) as img:
                img.load()
                return cls(img.convert("RGBA"))
        except OSError as exc:
            raise AssetError(f"cannot read image '{path}': {exc}") from exc


@dataclass
class Font:
    """The raw contents of a TrueType or OpenType font file."""

    data: bytes = b""
    smooth: bool = False

    @classmethod
    def load(cls, path: Union[str, os.PathLike]) -> Font:
        try:
            data = Path(path).read_bytes()
        except OSError as exc:
            raise AssetError(f"cannot read font '{path}': {exc}") from exc
        if data[:4] not in _FONT_SIGNATURES:
            raise AssetError(f"'{path}' is not a font file")
        return cls(data, smooth=False)


def _as_asset_id(key: AssetKey) -> AssetId:
    return key if isinstance(key, AssetId) else AssetId(key)


class AssetManager:
    """Holds the textures and fonts named by the loaded data."""

    def __init__(self, data_manager: DataManager) -> None:
        self._data = data_manager
        self._textures: dict[AssetId, Texture] = {}
        self._fonts: dict[AssetId, Font] = {}
        data_manager.add_listener(self.on_data_changed)

    def reload(self) -> None:
        self.unload()
        self.on_data_changed()

    def unload(self) -> None:
        self._textures.clear()
        self._fonts.clear()

    def try_get_texture(self, id: AssetKey) -> Optional[Texture]:
        asset = _as_asset_id(id)
        if asset.type is AssetType.UNKNOWN:
            asset = asset.with_type(AssetType.TEXTURE)
        return self._textures.get(asset)

    def get_texture(self, id: AssetKey) -> Texture:
        """Return the texture, or a placeholder; raise AssetError if there is none."""
        asset = _as_asset_id(id)
        for candidate in (asset, AssetId(PLACEHOLDER, asset.type), AssetId(PLACEHOLDER, AssetType.TEXTURE)):
            texture = self.try_get_texture(candidate)
            if texture is not None:
                return texture
        log(ERROR, "Failed to find texture placeholder.", owner=_OWNER)
        raise AssetError("Failed to find texture placeholder.")

    def try_get_font(self, id: AssetKey) -> Optional[Font]:
        asset = _as_asset_id(id)
        if asset.type is AssetType.UNKNOWN:
            asset = asset.with_type(AssetType.FONT)
        return self._fonts.get(asset)

    def get_font(self, id: AssetKey) -> Font:
        """Return the font, or a placeholder; raise AssetError if there is none."""
        asset = _as_asset_id(id)
        for candidate in (asset, AssetId(PLACEHOLDER, asset.type), AssetId(PLACEHOLDER, AssetType.FONT)):
            font = self.try_get_font(candidate)
            if font is not None:
                return font
        log(ERROR, "Failed to find font placeholder.", owner=_OWNER)
        raise AssetError("Failed to find font placeholder.")

    def on_data_changed(self) -> None:
        """Load every asset the current data refers to."""
        placeholder = AssetId(PLACEHOLDER, AssetType.TEXTURE)
        if not self.load(placeholder):
            self._textures[placeholder] = Texture()

        for tile_id in self._data.tile_ids():
            handle = self._data.get_tile(tile_id)
            if handle.model_type is HandleModelType.BLOCK:
                self.load(AssetId(tile_id, AssetType.TEXTURE_TILESET), handle.texture_path)
            elif handle.model_type is HandleModelType.CUSTOM:
                self.load(AssetId(tile_id, AssetType.TEXTURE), handle.texture_path)

        for item_id in self._data.item_ids():
            handle = self._data.get_item(item_id)
            self.load(AssetId(item_id, AssetType.TEXTURE_ITEM), handle.texture_path)

        self.load_all_within("font", AssetType.FONT)

    def validate_file_path(self, path: Union[str, os.PathLike], type: AssetType) -> Path:
        """Resolve ``path`` under the assets folder, supplying an extension if it lacks one."""
        resolved = Path(os.path.normpath(self._data.resources_folder / "assets" / path))
        allowed = _ALLOWED_EXTS.get(type)
        if allowed is None:
            return resolved
        if not resolved.suffix:
            for ext in allowed:
                resolved = resolved.with_suffix(ext)
                if resolved.exists():
                    break
        elif resolved.suffix not in allowed:
            log(
                WARNING,
                "{} : invalid file extension '{}' for {}.",
                Path("assets") / path,
                resolved.suffix,
                type,
                owner=_OWNER,
            )
        return resolved

    def load(self, asset_id: AssetId, path: Union[str, os.PathLike, None] = None) -> bool:
        """Load one asset; report and return False on failure."""
        if path is None:
            path = Path(_TYPE_FOLDERS.get(asset_id.type, "")) / asset_id.name
        resolved = self.validate_file_path(path, asset_id.type)
        if not resolved.exists():
            log(ERROR, "Could not find asset {} at {}.", asset_id, resolved, owner=_OWNER)
            return False

        if asset_id.type is AssetType.FONT:
            try:
                self._fonts[asset_id] = Font.load(resolved)
            except AssetError:
                log(ERROR, "Failed to load font from '{}'.", resolved, owner=_OWNER)
                return False
            return True
        if asset_id.type in _TEXTURE_TYPES:
            try:
                self._textures[asset_id] = Texture.load(resolved)
            except AssetError:
                log(ERROR, "Failed to load texture from '{}'.", resolved, owner=_OWNER)
                return False
            return True
        log(ERROR, "Could not load {} - unhandled asset type.", asset_id, owner=_OWNER)
        return False

    def load_all_within(self, folder: Union[str, os.PathLike], type: AssetType) -> None:
        """Load every file below ``assets/<folder>``, named by its path without extension."""
        asset_root = Path(os.path.normpath(self._data.resources_folder / "assets"))
        folder_root = Path(os.path.normpath(asset_root / folder))
        if not folder_root.is_dir():
            log(ERROR, "Asset folder '{}' does not exist.", folder_root, owner=_OWNER)
            return
        for entry in sorted(folder_root.rglob("*")):
            if entry.is_dir():
                continue
            name = entry.relative_to(folder_root).with_suffix("").as_posix()
            self.load(AssetId(Id(DEFAULT_NAMESPACE, name), type), entry.relative_to(asset_root))