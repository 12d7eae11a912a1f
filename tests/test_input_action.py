import math

import pytest

from tilecraft.input_action import (
    ActionDefinition,
    ControllerButton,
    InputAction,
    SumComponent,
    ValueType,
    constrain_length_to_norm,
    juggle_neg_x,
    juggle_neg_y,
    juggle_pos_x,
    juggle_pos_y,
)


def test_initial_values_per_type():
    assert InputAction("a", ValueType.BOOL).value() is False
    assert InputAction("b", ValueType.FLOAT).value() == 0.0
    assert InputAction("c", ValueType.VEC2).value() == (0.0, 0.0)


def test_new_action_is_not_down():
    action = InputAction("a")
    assert not action
    assert action.just_pressed() is False
    assert action.just_released() is False


def test_bool_action_from_float_uses_sign():
    action = InputAction("a", ValueType.BOOL)
    action.set_value(0.5)
    assert action.value() is True
    action.set_value(-0.5)
    assert action.value() is False


def test_bool_action_from_vector_uses_x():
    action = InputAction("a", ValueType.BOOL)
    action.set_value((0.0, 3.0))
    assert action.value() is False
    action.set_value((1.0, 0.0))
    assert action.value() is True


def test_float_action_conversions():
    action = InputAction("a", ValueType.FLOAT)
    action.set_value(True)
    assert action.value() == 1.0
    action.set_value((2.5, 7.0))
    assert action.value() == 2.5


def test_vector_action_conversions():
    action = InputAction("a", ValueType.VEC2)
    action.set_value(2.0)
    assert action.value() == (2.0, 0.0)
    action.set_value((3.0, 4.0))
    assert action.value() == (3.0, 4.0)


def test_set_value_rejects_other_types():
    with pytest.raises(TypeError):
        InputAction("a").set_value("yes")


def test_juggle_functions_route_x():
    v = (0.7, 0.2)
    assert juggle_pos_x(v) == (0.7, 0.0)
    assert juggle_neg_x(v) == (-0.7, 0.0)
    assert juggle_pos_y(v) == (0.0, 0.7)
    assert juggle_neg_y(v) == (0.0, -0.7)


def test_constrain_keeps_short_vectors():
    assert constrain_length_to_norm((0.3, 0.4)) == (0.3, 0.4)


def test_constrain_normalises_long_vectors():
    x, y = constrain_length_to_norm((3.0, 4.0))
    assert math.hypot(x, y) == pytest.approx(1.0)
    assert x * 4 == pytest.approx(y * 3)


def test_definition_dependency():
    assert ActionDefinition().is_dependent is False
    assert ActionDefinition(value_mirrors="cursor").is_dependent is True
    assert ActionDefinition(value_sums=(SumComponent("x"),)).is_dependent is True


def test_controller_button_aliases():
    assert ControllerButton.XBOX_A is ControllerButton.FACE_BOTTOM
    assert ControllerButton(1) is ControllerButton.XBOX_B