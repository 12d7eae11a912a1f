"""Named input actions, their value conversions and the input sources they bind to."""

from __future__ import annotations

import enum
import math
import string
from collections.abc import Callable
from dataclasses import dataclass
from typing import Optional, Union

Vec2 = tuple[float, float]
ActionModifier = Callable[[Vec2], Vec2]
ActionValue = Union[bool, float, Vec2]


class ValueType(enum.Enum):
    """The kind of value an action holds."""

    BOOL = "bool"
    FLOAT = "float"
    VEC2 = "vec2"


def juggle_pos_x(v: Vec2) -> Vec2:
    """Route the x component to positive x."""
    return (v[0], 0.0)


def juggle_neg_x(v: Vec2) -> Vec2:
    """Route the x component to negative x."""
    return (-v[0], 0.0)


def juggle_pos_y(v: Vec2) -> Vec2:
    """Route the x component to positive y."""
    return (0.0, v[0])


def juggle_neg_y(v: Vec2) -> Vec2:
    """Route the x component to negative y."""
    return (0.0, -v[0])


def constrain_length_to_norm(v: Vec2) -> Vec2:
    """Scale a vector longer than one down to unit length."""
    x, y = v
    if x * x + y * y > 1:
        length = math.hypot(x, y)
        return (x / length, y / length)
    return (x, y)


@dataclass(frozen=True)
class SumComponent:
    """One action that contributes to a summed action, with an optional modifier."""

    name: str
    modifier: Optional[ActionModifier] = None


@dataclass(frozen=True)
class ActionDefinition:
    """How an action's value is derived and post-processed."""

    is_position: bool = False
    value_mirrors: str = ""
    value_sums: tuple[SumComponent, ...] = ()
    modifier: Optional[ActionModifier] = None

    @property
    def is_dependent(self) -> bool:
        return bool(self.value_mirrors) or bool(self.value_sums)


_INITIAL: dict[ValueType, ActionValue] = {
    ValueType.BOOL: False,
    ValueType.FLOAT: 0.0,
    ValueType.VEC2: (0.0, 0.0),
}


class InputAction:
    """A named input whose value and pressed state are driven by an input manager."""

    def __init__(
        self,
        name: str,
        value_type: ValueType = ValueType.BOOL,
        definition: Optional[ActionDefinition] = None,
    ) -> None:
        self.name = name
        self.value_type = value_type
        self.definition = definition if definition is not None else ActionDefinition()
        self._value: ActionValue = _INITIAL[value_type]
        self._down = False
        self._was_down = False

    def __repr__(self) -> str:
        return f"InputAction({self.name!r}, {self.value_type.name}, value={self._value!r})"

    def down(self) -> bool:
        return self._down

    def just_pressed(self) -> bool:
        return self._down and not self._was_down

    def just_released(self) -> bool:
        return not self._down and self._was_down

    def __bool__(self) -> bool:
        return self.down()

    def value(self) -> ActionValue:
        return self._value

    def set_value(self, value: ActionValue) -> None:
        """Store ``value`` converted to this action's value type."""
        if isinstance(value, bool):
            converted = {
                ValueType.BOOL: value,
                ValueType.FLOAT: float(value),
                ValueType.VEC2: (float(value), 0.0),
            }[self.value_type]
        elif isinstance(value, (int, float)):
            converted = {
                ValueType.BOOL: value > 0,
                ValueType.FLOAT: float(value),
                ValueType.VEC2: (float(value), 0.0),
            }[self.value_type]
        elif isinstance(value, (tuple, list)) and len(value) == 2:
            x, y = float(value[0]), float(value[1])
            converted = {
                ValueType.BOOL: x != 0,
                ValueType.FLOAT: x,
                ValueType.VEC2: (x, y),
            }[self.value_type]
        else:
            raise TypeError(f"cannot set action {self.name!r} to {value!r}")
        self._value = converted

    def _set_down(self, state: bool) -> None:
        self._down = state

    def _end_frame(self) -> None:
        self._was_down = self._down


class MouseAxis(enum.Enum):
    MOTION = 0


class MouseButton(enum.Enum):
    LEFT = 0
    RIGHT = 1
    MIDDLE = 2
    EXTRA1 = 3
    EXTRA2 = 4


class MouseWheel(enum.Enum):
    VERTICAL = 0
    HORIZONTAL = 1


_KEY_NAMES = (
    list(string.ascii_uppercase)
    + [f"NUM{d}" for d in range(10)]
    + ["ESCAPE", "ENTER", "SPACE", "TAB", "BACKSPACE"]
    + ["LSHIFT", "RSHIFT", "LCONTROL", "RCONTROL", "LALT", "RALT"]
    + ["LEFT", "RIGHT", "UP", "DOWN"]
    + [f"F{n}" for n in range(1, 16)]
)

Key = enum.Enum("Key", _KEY_NAMES)
ScanCode = enum.Enum("ScanCode", _KEY_NAMES)


class ControllerButton(enum.Enum):
    FACE_BOTTOM = 0
    FACE_RIGHT = 1
    FACE_LEFT = 2
    FACE_TOP = 3

    XBOX_A = 0
    XBOX_B = 1
    XBOX_X = 2
    XBOX_Y = 3

    LB = 4
    RB = 5
    MENU = 6
    START = 7
    LEFT_STICK = 8
    RIGHT_STICK = 9


class ControllerAxis(enum.Enum):
    X = 0
    Y = 1
    Z = 2
    R = 3
    U = 4
    V = 5
    POV_X = 6
    POV_Y = 7