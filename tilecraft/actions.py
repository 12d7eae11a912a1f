"""The game's input actions."""

from __future__ import annotations

import dataclasses
from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any

from tilecraft.input_action import (
    ActionDefinition,
    InputAction,
    SumComponent,
    ValueType,
    constrain_length_to_norm,
    juggle_neg_x,
    juggle_neg_y,
    juggle_pos_x,
    juggle_pos_y,
)


@dataclass(frozen=True)
class Actions:
    """Every action the client reads input through."""

    cursor: InputAction
    click: InputAction
    place: InputAction
    destroy: InputAction
    interact: InputAction
    select: InputAction
    back: InputAction
    move: InputAction
    debug_modifier: InputAction
    debug_tile: InputAction
    debug_network: InputAction
    left_move: InputAction
    right_move: InputAction
    up_move: InputAction
    down_move: InputAction
    horizontal_move: InputAction
    vertical_move: InputAction

    def __iter__(self) -> Iterator[InputAction]:
        return (getattr(self, f.name) for f in dataclasses.fields(self))


def define_actions(manager: Any) -> Actions:
    """Create every action and register it with ``manager``."""

    def make(name: str, value_type: ValueType, **definition: Any) -> InputAction:
        action = InputAction(name, value_type, ActionDefinition(**definition))
        manager.register(action)
        return action

    return Actions(
        cursor=make("cursor", ValueType.VEC2, is_position=True),
        click=make("click", ValueType.VEC2, value_mirrors="cursor"),
        place=make("place", ValueType.VEC2, value_mirrors="cursor"),
        destroy=make("destroy", ValueType.VEC2, value_mirrors="cursor"),
        interact=make("interact", ValueType.VEC2, value_mirrors="cursor"),
        select=make("select", ValueType.BOOL),
        back=make("back", ValueType.BOOL),
        move=make(
            "move",
            ValueType.VEC2,
            value_sums=(
                SumComponent("_horizontal_move", juggle_pos_x),
                SumComponent("_vertical_move", juggle_neg_y),
                SumComponent("_left_move", juggle_neg_x),
                SumComponent("_right_move", juggle_pos_x),
                SumComponent("_up_move", juggle_pos_y),
                SumComponent("_down_move", juggle_neg_y),
            ),
            modifier=constrain_length_to_norm,
        ),
        debug_modifier=make("modifier", ValueType.BOOL),
        debug_tile=make("tile", ValueType.BOOL),
        debug_network=make("network", ValueType.BOOL),
        left_move=make("_left_move", ValueType.FLOAT),
        right_move=make("_right_move", ValueType.FLOAT),
        up_move=make("_up_move", ValueType.FLOAT),
        down_move=make("_down_move", ValueType.FLOAT),
        horizontal_move=make("_horizontal_move", ValueType.FLOAT),
        vertical_move=make("_vertical_move", ValueType.FLOAT),
    )