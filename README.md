# tilecraft

Core systems for a 2D tile game, used as a library.

## Modules

- `tilecraft.ids`: `Id`, a frozen, ordered identifier of the form
  `namespace::name`. `Id.parse("stone")` gives `default::stone`;
  `Id.from_json` does the same but raises `InvalidIdError` when the
  namespace or name is empty. `split_namespace` does the splitting.
- `tilecraft.definitions`: `TileDefinition` and `ItemDefinition`, read from
  JSON objects with `from_json` (unknown keys or bad values raise
  `DefinitionError`), and the `TileHandle` / `ItemHandle` built from them with
  `from_definition`. A tile's model is `ModelType.NONE`, `ModelType.BLOCK` or
  a custom model path, which the handle records as `HandleModelType`.
- `tilecraft.data_manager`: `DataManager(resources_folder)` loads every
  namespace folder under `<resources>/data` on `reload()`. Each `.json` file
  in a namespace may hold `tiles` and `items` sections and may contain `//`
  and `/* */` comments (`strip_jsonc`); files that fail to parse are reported
  and skipped. Every tile and item id gets a numeric mapping in sorted order
  (`id_mapping`, `mapped_id`). Callbacks added with `add_listener` run after
  each reload.
- `tilecraft.asset_id`: `AssetId`, an `Id` paired with an `AssetType`
  (`UNKNOWN`, `TEXTURE`, `TEXTURE_TILESET`, `TEXTURE_ITEM`, `FONT`),
  printed as `default::stone#texture_tileset`.
- `tilecraft.asset_manager`: `AssetManager(data_manager)` loads textures
  (decoded to RGBA with Pillow) and fonts (raw TrueType/OpenType bytes) from
  `<resources>/assets`, whenever the data manager reloads. It looks for
  `texture/tileset`, `texture/item`, `texture` and `font` files by name,
  fills in a missing file extension, and warns about unexpected ones.
  `get_texture` and `get_font` fall back to `default::placeholder` and raise
  `AssetError` if there is none; `try_get_texture` and `try_get_font`
  return `None` instead. If no placeholder texture file exists, an empty
  `Texture` stands in for it.
- `tilecraft.render`: `Camera`, `View`, the draw layer numbers
  (`LAYER_TILE_FOREGROUND`, `LAYER_UI_START`, ...), the `Drawable` base class,
  `RenderTarget` and `RenderManager`. The manager uses the registered camera
  with the highest priority, draws layers in ascending order, switches to a UI
  camera from `LAYER_UI_START` up, and converts between pixel, world and UI
  coordinates.
- `tilecraft.input_action`: `InputAction` with `down()`, `just_pressed()`,
  `just_released()` and `value()`; `ActionDefinition` for actions that mirror
  or sum other actions; the modifiers `constrain_length_to_norm` and
  `juggle_pos_x` / `juggle_neg_x` / `juggle_pos_y` / `juggle_neg_y`; and the
  input source enums `Key`, `ScanCode`, `MouseAxis`, `MouseButton`,
  `MouseWheel`, `ControllerButton`, `ControllerAxis`.
- `tilecraft.actions`: `define_actions(manager)` creates and registers the
  game's actions and returns them as an `Actions` record (`cursor`, `place`,
  `destroy`, `move`, ...).
- `tilecraft.input_manager`: `InputManager` links dependent actions on
  `init()`, binds input sources to actions, and applies event objects
  (`KeyEvent`, `MouseButtonEvent`, `MouseMoveEvent`, `MouseWheelEvent`,
  `ControllerButtonEvent`, `ControllerAxisEvent`,
  `ControllerConnectionEvent`) through `receive_event`. `tick()` ends the
  frame. Registering after `init()` or calling `init()` twice raises
  `InputError`.
- `tilecraft.game_loop`: `GameLoop` calls a per-frame callback with the
  elapsed seconds, a fixed-rate callback once per 160 ms step of accumulated
  time, and a network callback with the tick count.
- `tilecraft.console`: `log` and `format_line` write lines such as
  `[error|DataManager] message`, coloured when the stream is a terminal.

## Installing

```
pip install .
```

For the test suite:

```
pip install .[test]
pytest
```

## Example

```python
from tilecraft.ids import Id
from tilecraft.data_manager import DataManager
from tilecraft.asset_manager import AssetManager

stone = Id.parse("stone")
print(stone)                    # default::stone

data = DataManager("resources")
assets = AssetManager(data)     # reloads its assets whenever data reloads
data.reload()
tile = data.get_tile(stone)
if tile is not None:
    print(tile.model_type, data.id_mapping(stone))
```

Input actions are set up against an `InputManager` and driven by events:

```python
from tilecraft.input_manager import InputManager, KeyEvent
from tilecraft.input_action import ScanCode
from tilecraft.actions import define_actions

manager = InputManager()
actions = define_actions(manager)
manager.init()
manager.setup_default_binds(actions)

manager.receive_event(KeyEvent(pressed=True, scancode=ScanCode.D))
print(actions.move.value())     # (1.0, 0.0)
manager.tick()
```

## What it does not do

There is no command to run and no game to play. The package opens no
window, reads no input from the operating system and draws nothing on
screen: `RenderTarget` only records what is drawn on it, and input arrives
only as the event objects passed to `InputManager.receive_event`. It has no
networking, no world, chunk or player logic, and no saving or loading of
worlds.