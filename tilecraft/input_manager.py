"""Routing of raw input events to the actions bound to them."""

from __future__ import annotations

import enum
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any, Optional, Union

from tilecraft.actions import Actions
from tilecraft.console import DEBUG, ERROR, SUCCESS, log
from tilecraft.input_action import (
    ActionModifier,
    ControllerAxis,
    ControllerButton,
    InputAction,
    Key,
    MouseAxis,
    MouseButton,
    MouseWheel,
    ScanCode,
    Vec2,
)

_OWNER = "InputManager"
_BINDABLE = (MouseButton, MouseWheel, Key, ScanCode, ControllerButton, ControllerAxis)


class InputError(RuntimeError):
    """Raised when the input manager is used out of order."""


@dataclass(frozen=True)
class KeyEvent:
    pressed: bool
    code: Optional[Key] = None
    scancode: Optional[ScanCode] = None


@dataclass(frozen=True)
class MouseButtonEvent:
    pressed: bool
    button: MouseButton
    position: tuple[int, int] = (0, 0)


@dataclass(frozen=True)
class MouseMoveEvent:
    position: tuple[int, int]


@dataclass(frozen=True)
class MouseWheelEvent:
    wheel: MouseWheel
    delta: float


@dataclass(frozen=True)
class ControllerButtonEvent:
    pressed: bool
    button: Union[int, ControllerButton]
    joystick_id: int = 0


@dataclass(frozen=True)
class ControllerAxisEvent:
    axis: ControllerAxis
    position: float
    joystick_id: int = 0


@dataclass(frozen=True)
class ControllerConnectionEvent:
    connected: bool
    joystick_id: int = 0
    name: str = ""


def _to_vec2(value: Any) -> Vec2:
    if isinstance(value, (tuple, list)):
        return (float(value[0]), float(value[1]))
    return (float(value), 0.0)


@dataclass
class _ActionMeta:
    simple_dependents: dict[InputAction, None] = field(default_factory=dict)
    complex_dependents: dict[InputAction, None] = field(default_factory=dict)


class InputManager:
    """Keeps the registered actions and updates them from input events."""

    JOYSTICK_DEADZONE = 0.1

    def __init__(self) -> None:
        self._initialised = False
        self._meta: dict[InputAction, _ActionMeta] = {}
        self._complex: dict[InputAction, dict[InputAction, Optional[ActionModifier]]] = {}
        self._bound_mouse: dict[InputAction, None] = {}
        self._binds: dict[enum.Enum, dict[InputAction, None]] = {}
        self._prev_mouse: tuple[int, int] = (0, 0)

    def register(self, action: InputAction) -> None:
        if self._initialised:
            raise InputError(f"register({action.name}) called after manager initialisation.")
        self._meta[action] = _ActionMeta()

    def unregister(self, action: InputAction) -> None:
        self._meta.pop(action, None)

    def get_action_by_name(self, name: str) -> Optional[InputAction]:
        return next((action for action in self._meta if action.name == name), None)

    def init(self) -> None:
        """Link dependent actions to the actions they read from; call once."""
        if self._initialised:
            raise InputError("Attempted to initialise InputManager a second time")
        self._initialised = True

        for action in self._meta:
            definition = action.definition
            if definition.value_mirrors:
                dependency = self.get_action_by_name(definition.value_mirrors)
                if dependency is not None:
                    self._meta[dependency].simple_dependents[action] = None
                else:
                    self._report_missing(action, definition.value_mirrors)
            if definition.value_sums:
                sources: dict[InputAction, Optional[ActionModifier]] = {}
                for component in definition.value_sums:
                    dependency = self.get_action_by_name(component.name)
                    if dependency is not None:
                        self._meta[dependency].complex_dependents[action] = None
                        sources[dependency] = component.modifier
                    else:
                        self._report_missing(action, component.name)
                self._complex[action] = sources

        log(SUCCESS, "Initialised.", owner=_OWNER)

    @staticmethod
    def _report_missing(action: InputAction, name: str) -> None:
        log(ERROR, "{} attempted to depend on non-existent action '{}'.", action.name, name, owner=_OWNER)

    def _set_action_value(self, action: InputAction, value: Any, dependent_override: bool = False) -> None:
        if action.definition.is_dependent and not dependent_override:
            return
        vec = _to_vec2(value)
        if action.definition.modifier is not None:
            vec = action.definition.modifier(vec)
        action.set_value(vec)
        meta = self._meta[action]
        for dependent in meta.simple_dependents:
            self._set_action_value(dependent, vec, True)
        for dependent in meta.complex_dependents:
            self._recalculate_complex(dependent)

    def _recalculate_complex(self, action: InputAction) -> None:
        ax, ay = 0.0, 0.0
        for dependency, modifier in self._complex[action].items():
            val = _to_vec2(dependency.value())
            if modifier is not None:
                val = modifier(val)
            ax += val[0]
            ay += val[1]
        self._set_action_value(action, (ax, ay), True)

    def _press(self, actions: dict[InputAction, None], pressed: bool) -> None:
        for action in list(actions):
            action._set_down(pressed)
            self._set_action_value(action, pressed)

    def bind(self, source: enum.Enum, action: InputAction) -> None:
        if isinstance(source, MouseAxis):
            self._bound_mouse[action] = None
        elif isinstance(source, _BINDABLE):
            self._binds.setdefault(source, {})[action] = None
        else:
            raise TypeError(f"cannot bind input source {source!r}")

    def unbind(self, source: enum.Enum, action: InputAction) -> None:
        if isinstance(source, MouseAxis):
            self._bound_mouse.pop(action, None)
        elif isinstance(source, _BINDABLE):
            self._binds.get(source, {}).pop(action, None)
        else:
            raise TypeError(f"cannot unbind input source {source!r}")

    def setup_default_binds(self, actions: Actions) -> None:
        self.bind(Key.F3, actions.debug_modifier)
        self.bind(Key.T, actions.debug_tile)
        self.bind(Key.N, actions.debug_network)

        self.bind(MouseAxis.MOTION, actions.cursor)
        self.bind(MouseButton.LEFT, actions.click)
        self.bind(MouseButton.LEFT, actions.place)
        self.bind(MouseButton.RIGHT, actions.destroy)

        self.bind(Key.ENTER, actions.select)
        self.bind(ControllerButton.XBOX_A, actions.select)

        self.bind(Key.ESCAPE, actions.back)
        self.bind(ControllerButton.XBOX_B, actions.select)

        self.bind(ScanCode.A, actions.left_move)
        self.bind(ScanCode.D, actions.right_move)
        self.bind(ScanCode.W, actions.up_move)
        self.bind(ScanCode.S, actions.down_move)

        self.bind(ControllerAxis.X, actions.horizontal_move)
        self.bind(ControllerAxis.Y, actions.vertical_move)

    def receive_event(self, event: Any) -> None:
        """Apply one input event to the actions bound to its source."""
        match event:
            case KeyEvent(pressed=pressed, code=code, scancode=scancode):
                for source in (code, scancode):
                    if source is not None and source in self._binds:
                        self._press(self._binds[source], pressed)
            case MouseButtonEvent(pressed=pressed, button=button, position=position):
                for action in self._bound_mouse:
                    if action.definition.is_position:
                        action.set_value(_to_vec2(position))
                if button in self._binds:
                    self._press(self._binds[button], pressed)
            case MouseMoveEvent(position=position):
                for action in list(self._bound_mouse):
                    if action.definition.is_position:
                        self._set_action_value(action, position)
                    else:
                        delta = (position[0] - self._prev_mouse[0], position[1] - self._prev_mouse[1])
                        self._set_action_value(action, delta)
            case MouseWheelEvent(wheel=wheel, delta=delta):
                for action in list(self._binds.get(wheel, {})):
                    self._set_action_value(action, float(delta))
            case ControllerButtonEvent(pressed=pressed, button=button):
                try:
                    source = ControllerButton(button)
                except ValueError:
                    return
                if source in self._binds:
                    self._press(self._binds[source], pressed)
            case ControllerAxisEvent(axis=axis, position=position):
                for action in list(self._binds.get(axis, {})):
                    exceeds = abs(position) > self.JOYSTICK_DEADZONE
                    action._set_down(exceeds)
                    self._set_action_value(action, position / 100.0 if exceeds else 0.0)
            case ControllerConnectionEvent(connected=connected, joystick_id=joystick_id, name=name):
                if connected:
                    log(DEBUG, "Controller '{}' connected as Controller #{}", name, joystick_id)
                else:
                    log(DEBUG, "Controller #{} disconnected", joystick_id)

    def tick(self, mouse_position: Optional[tuple[int, int]] = None) -> None:
        """End the frame: remember pressed states and the mouse position."""
        for action in self._meta:
            action._end_frame()
        if mouse_position is not None:
            self._prev_mouse = (mouse_position[0], mouse_position[1])