"""Dynamically typed values produced by actions and bindings."""

from __future__ import annotations

import enum
import numbers
from dataclasses import dataclass, field
from typing import Tuple, Union

Output = Union[bool, float, Tuple[float, float], Tuple[float, float, float]]


class ActionValueDim(enum.IntEnum):
    """Dimension discriminant for :class:`ActionValue`."""

    BOOL = 0
    AXIS1D = 1
    AXIS2D = 2
    AXIS3D = 3


def _is_number(item: object) -> bool:
    return isinstance(item, numbers.Real) and not isinstance(item, bool)


def _normalize(raw: object) -> tuple[Output, ActionValueDim]:
    if isinstance(raw, bool):
        return raw, ActionValueDim.BOOL
    if _is_number(raw):
        return float(raw), ActionValueDim.AXIS1D
    if isinstance(raw, (tuple, list)):
        if len(raw) not in (2, 3):
            raise ValueError(f"axis value must have 2 or 3 components, got {len(raw)}")
        if not all(_is_number(item) for item in raw):
            raise TypeError("axis components must be numbers")
        components = tuple(float(item) for item in raw)
        dim = ActionValueDim.AXIS2D if len(components) == 2 else ActionValueDim.AXIS3D
        return components, dim
    raise TypeError(f"unsupported action value: {raw!r}")


@dataclass(frozen=True)
class ActionValue:
    """An action value of one of four dimensions.

    Holds a ``bool``, a ``float``, or a tuple of two or three floats.
    """

    value: Output
    _dim: ActionValueDim = field(init=False, repr=False)

    def __post_init__(self) -> None:
        value, dim = _normalize(self.value)
        object.__setattr__(self, "value", value)
        object.__setattr__(self, "_dim", dim)

    @classmethod
    def zero(cls, dim: ActionValueDim) -> ActionValue:
        """Return a zero-initialised value of the given dimension."""
        dim = ActionValueDim(dim)
        if dim is ActionValueDim.BOOL:
            return cls(False)
        if dim is ActionValueDim.AXIS1D:
            return cls(0.0)
        if dim is ActionValueDim.AXIS2D:
            return cls((0.0, 0.0))
        return cls((0.0, 0.0, 0.0))

    @classmethod
    def from_output(cls, value: ActionValue | Output) -> ActionValue:
        """Wrap a raw output, passing existing values through unchanged."""
        if isinstance(value, ActionValue):
            return value
        return cls(value)

    def dim(self) -> ActionValueDim:
        """Return the dimension of this value."""
        return self._dim

    def convert(self, dim: ActionValueDim) -> ActionValue:
        """Convert to another dimension, zero-filling or dropping axes."""
        dim = ActionValueDim(dim)
        if dim is ActionValueDim.BOOL:
            return ActionValue(self.as_bool())
        if dim is ActionValueDim.AXIS1D:
            return ActionValue(self.as_axis1d())
        if dim is ActionValueDim.AXIS2D:
            return ActionValue(self.as_axis2d())
        return ActionValue(self.as_axis3d())

    def is_actuated(self, actuation: float) -> bool:
        """Return whether the magnitude reaches ``actuation``."""
        return sum(c * c for c in self.as_axis3d()) >= actuation * actuation

    def as_bool(self) -> bool:
        """Return the value as a boolean; non-zero axes count as true."""
        if self._dim is ActionValueDim.BOOL:
            return bool(self.value)
        if self._dim is ActionValueDim.AXIS1D:
            return self.value != 0.0
        return any(c != 0.0 for c in self.value)

    def as_axis1d(self) -> float:
        """Return the value as one axis; multi-axis values yield X."""
        if self._dim is ActionValueDim.BOOL:
            return 1.0 if self.value else 0.0
        if self._dim is ActionValueDim.AXIS1D:
            return self.value
        return self.value[0]

    def as_axis2d(self) -> tuple[float, float]:
        """Return the value as two axes."""
        if self._dim is ActionValueDim.BOOL:
            return (1.0, 0.0) if self.value else (0.0, 0.0)
        if self._dim is ActionValueDim.AXIS1D:
            return (self.value, 0.0)
        return (self.value[0], self.value[1])

    def as_axis3d(self) -> tuple[float, float, float]:
        """Return the value as three axes."""
        if self._dim is ActionValueDim.BOOL:
            return (1.0, 0.0, 0.0) if self.value else (0.0, 0.0, 0.0)
        if self._dim is ActionValueDim.AXIS1D:
            return (self.value, 0.0, 0.0)
        if self._dim is ActionValueDim.AXIS2D:
            return (self.value[0], self.value[1], 0.0)
        return self.value