import types
from datetime import timedelta

import pytest

from enhanced_input.action import (
    Accumulation,
    Action,
    ActionMock,
    ActionSettings,
    ActionState,
    ActionTime,
    InputAction,
    MockSpan,
    unwrap_value,
)
from enhanced_input.value import ActionValue, ActionValueDim


class Jump(InputAction, output=bool):
    pass


class Zoom(InputAction, output=float):
    pass


class Move(InputAction, output=ActionValueDim.AXIS2D):
    pass


def test_settings_defaults():
    settings = ActionSettings()
    assert settings.accumulation is Accumulation.CUMULATIVE
    assert settings.require_reset is False
    assert settings.consume_input is True


def test_state_ordering():
    fired = ActionMock(ActionState.FIRED, True, MockSpan.manual())
    ongoing = ActionMock(ActionState.ONGOING, True, MockSpan.manual())
    none = ActionMock(ActionState.NONE, False, MockSpan.manual())
    assert none.state < ongoing.state < fired.state
    assert max(ongoing.state, fired.state) is ActionState.FIRED


def test_time_none_resets():
    time = ActionTime(elapsed_secs=1.5, fired_secs=0.5)
    time.update(0.25, ActionState.NONE)
    assert time == ActionTime()


def test_time_ongoing_accumulates_elapsed_only():
    time = ActionTime()
    time.update(0.5, ActionState.ONGOING)
    assert time.elapsed_secs == pytest.approx(0.5)
    assert time.fired_secs == 0.0


def test_time_fired_accumulates_both():
    time = ActionTime()
    time.update(0.5, ActionState.ONGOING)
    time.update(0.25, ActionState.FIRED)
    assert time.fired_secs == pytest.approx(0.25)
    assert time.elapsed_secs > time.fired_secs
    time.update(0.5, ActionState.ONGOING)
    assert time.fired_secs == 0.0


def test_mock_span_constructors():
    assert MockSpan.updates(3).count == 3
    assert MockSpan.duration(timedelta(seconds=2)).seconds == pytest.approx(2.0)
    assert MockSpan.manual().is_manual
    assert not MockSpan.updates(1).is_manual


@pytest.mark.parametrize("kwargs", [{"count": -1}, {"seconds": -1.0}, {"count": 1, "seconds": 1.0}])
def test_mock_span_rejects_invalid(kwargs):
    with pytest.raises(ValueError):
        MockSpan(**kwargs)


def test_mock_once():
    mock = ActionMock.once(ActionState.FIRED, True)
    assert mock.span == MockSpan.updates(1)
    assert mock.enabled is True
    assert mock.value == ActionValue(True)
    assert mock.state is ActionState.FIRED


def test_mock_accepts_timedelta_span():
    mock = ActionMock(ActionState.FIRED, (0.0, 1.0), timedelta(seconds=2))
    assert mock.span == MockSpan.duration(2.0)
    assert mock.value.dim() == ActionValueDim.AXIS2D


def test_mock_rejects_bare_number_span():
    with pytest.raises(TypeError):
        ActionMock(ActionState.FIRED, True, 2)


def test_input_action_requires_output():
    with pytest.raises(TypeError, match="missing action output"):
        types.new_class("Missing", (InputAction,))
    valid = types.new_class("Valid", (InputAction,), {"output": bool})
    assert Action(valid).output is False


def test_input_action_output_dims():
    assert Action(Jump).value.dim() == ActionValueDim.BOOL
    assert Action(Zoom).value.dim() == ActionValueDim.AXIS1D
    assert Action(Move).value.dim() == ActionValueDim.AXIS2D
    assert Jump.output is ActionValueDim.BOOL
    assert Zoom.output is ActionValueDim.AXIS1D
    assert Move.output is ActionValueDim.AXIS2D


def test_action_defaults_to_zero():
    jump = Action(Jump)
    assert jump.output is False
    assert jump.value == ActionValue.zero(ActionValueDim.BOOL)
    assert jump.state is ActionState.NONE
    assert Action(Move).output == (0.0, 0.0)
    assert jump.name == "Jump"


def test_action_store_value():
    move = Action(Move)
    move.store_value((0.5, -1.0))
    assert move.output == (0.5, -1.0)
    assert move.value == ActionValue((0.5, -1.0))


def test_action_store_value_wrong_dim():
    zoom = Action(Zoom)
    with pytest.raises(TypeError, match="axis 1D"):
        zoom.store_value(True)
    assert zoom.output == 0.0


def test_action_rejects_non_input_action():
    with pytest.raises(TypeError):
        Action(int)


def test_unwrap_value():
    assert unwrap_value(ActionValueDim.AXIS1D, ActionValue(0.5)) == 0.5
    with pytest.raises(TypeError, match="output value should be bool"):
        unwrap_value(ActionValueDim.BOOL, ActionValue(0.5))