import pytest

from enhanced_input.value import ActionValue, ActionValueDim


def test_bool_conversion():
    value = ActionValue(True)
    assert value.convert(ActionValueDim.BOOL) == ActionValue(True)
    assert value.convert(ActionValueDim.AXIS1D) == ActionValue(1.0)
    assert value.convert(ActionValueDim.AXIS2D) == ActionValue((1.0, 0.0))
    assert value.convert(ActionValueDim.AXIS3D) == ActionValue((1.0, 0.0, 0.0))


def test_axis1d_conversion():
    value = ActionValue(1.0)
    assert value.convert(ActionValueDim.BOOL) == ActionValue(True)
    assert value.convert(ActionValueDim.AXIS1D) == ActionValue(1.0)
    assert value.convert(ActionValueDim.AXIS2D) == ActionValue((1.0, 0.0))
    assert value.convert(ActionValueDim.AXIS3D) == ActionValue((1.0, 0.0, 0.0))


def test_axis2d_conversion():
    value = ActionValue((1.0, 1.0))
    assert value.convert(ActionValueDim.BOOL) == ActionValue(True)
    assert value.convert(ActionValueDim.AXIS1D) == ActionValue(1.0)
    assert value.convert(ActionValueDim.AXIS2D) == ActionValue((1.0, 1.0))
    assert value.convert(ActionValueDim.AXIS3D) == ActionValue((1.0, 1.0, 0.0))


def test_axis3d_conversion():
    value = ActionValue((1.0, 1.0, 1.0))
    assert value.convert(ActionValueDim.BOOL) == ActionValue(True)
    assert value.convert(ActionValueDim.AXIS1D) == ActionValue(1.0)
    assert value.convert(ActionValueDim.AXIS2D) == ActionValue((1.0, 1.0))
    assert value.convert(ActionValueDim.AXIS3D) == ActionValue((1.0, 1.0, 1.0))


@pytest.mark.parametrize("dim", list(ActionValueDim))
def test_zero_has_requested_dim_and_is_false(dim):
    zero = ActionValue.zero(dim)
    assert zero.dim() == dim
    assert zero.as_bool() is False


@pytest.mark.parametrize(
    "raw, dim",
    [
        (False, ActionValueDim.BOOL),
        (0.5, ActionValueDim.AXIS1D),
        (2, ActionValueDim.AXIS1D),
        ((0.5, 0.25), ActionValueDim.AXIS2D),
        ([1, 2, 3], ActionValueDim.AXIS3D),
    ],
)
def test_dim_is_inferred(raw, dim):
    assert ActionValue(raw).dim() == dim


def test_bool_and_axis_are_not_equal():
    assert not ActionValue(True) == ActionValue(1.0)
    assert not ActionValue(False) == ActionValue(0.0)


def test_zero_axes_are_false():
    assert ActionValue(0.0).as_bool() is False
    assert ActionValue((0.0, 0.0)).as_bool() is False
    assert ActionValue((0.0, 0.0, 2.0)).as_bool() is True


def test_is_actuated():
    assert ActionValue((3.0, 4.0)).is_actuated(5.0)
    assert not ActionValue((3.0, 4.0)).is_actuated(5.1)
    assert not ActionValue(False).is_actuated(0.5)
    assert ActionValue(True).is_actuated(1.0)


def test_from_output_passes_values_through():
    value = ActionValue((1.0, 2.0))
    assert ActionValue.from_output(value) is value
    assert ActionValue.from_output(0.5) == ActionValue(0.5)


def test_values_are_hashable_and_immutable():
    value = ActionValue((1.0, 2.0))
    assert {value, ActionValue((1.0, 2.0))} == {value}
    with pytest.raises(AttributeError):
        value.value = 3.0


@pytest.mark.parametrize("raw", ["fast", None, ("a", 1.0)])
def test_invalid_types_are_rejected(raw):
    with pytest.raises(TypeError):
        ActionValue(raw)


@pytest.mark.parametrize("raw", [(1.0,), (1.0, 2.0, 3.0, 4.0)])
def test_invalid_lengths_are_rejected(raw):
    with pytest.raises(ValueError):
        ActionValue(raw)