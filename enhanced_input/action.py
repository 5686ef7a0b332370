"""Actions, their state, timing, settings and mocking."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from datetime import timedelta
from typing import ClassVar, Optional

from enhanced_input.value import ActionValue, ActionValueDim, Output

_DIM_NAMES = {
    ActionValueDim.BOOL: "bool",
    ActionValueDim.AXIS1D: "axis 1D",
    ActionValueDim.AXIS2D: "axis 2D",
    ActionValueDim.AXIS3D: "axis 3D",
}


class ActionState(enum.IntEnum):
    """Evaluation state of an action, ordered by significance."""

    NONE = 0
    ONGOING = 1
    FIRED = 2


class Accumulation(enum.Enum):
    """How values from several inputs with the same state are combined."""

    CUMULATIVE = "cumulative"
    MAX_ABS = "max_abs"


@dataclass
class ActionSettings:
    """Behaviour configuration for an action."""

    accumulation: Accumulation = Accumulation.CUMULATIVE
    require_reset: bool = False
    consume_input: bool = True


@dataclass
class ActionTime:
    """Time an action spent in the ongoing and fired states."""

    elapsed_secs: float = 0.0
    fired_secs: float = 0.0

    def update(self, delta_secs: float, state: ActionState) -> None:
        """Advance the timers by ``delta_secs`` for the given state."""
        state = ActionState(state)
        if state is ActionState.NONE:
            self.elapsed_secs = 0.0
            self.fired_secs = 0.0
        elif state is ActionState.ONGOING:
            self.elapsed_secs += delta_secs
            self.fired_secs = 0.0
        else:
            self.elapsed_secs += delta_secs
            self.fired_secs += delta_secs


@dataclass(frozen=True)
class MockSpan:
    """How long a mock stays active: a number of updates, a duration, or until disabled."""

    count: Optional[int] = None
    seconds: Optional[float] = None

    def __post_init__(self) -> None:
        if self.count is not None and self.seconds is not None:
            raise ValueError("a mock span is either a count of updates or a duration")
        if self.count is not None and (
            isinstance(self.count, bool) or not isinstance(self.count, int) or self.count < 0
        ):
            raise ValueError(f"update count must be a non-negative integer, got {self.count!r}")
        if self.seconds is not None and self.seconds < 0:
            raise ValueError(f"duration must not be negative, got {self.seconds!r}")

    @classmethod
    def updates(cls, count: int) -> MockSpan:
        """Active for a fixed number of context evaluations."""
        return cls(count=count)

    @classmethod
    def duration(cls, seconds: float | timedelta) -> MockSpan:
        """Active for a span of real time."""
        if isinstance(seconds, timedelta):
            seconds = seconds.total_seconds()
        return cls(seconds=float(seconds))

    @classmethod
    def manual(cls) -> MockSpan:
        """Active until disabled by hand."""
        return cls()

    @property
    def is_manual(self) -> bool:
        return self.count is None and self.seconds is None


@dataclass
class ActionMock:
    """Overrides an action's state and value for a given span."""

    state: ActionState
    value: ActionValue
    span: MockSpan
    enabled: bool = True

    def __post_init__(self) -> None:
        self.state = ActionState(self.state)
        self.value = ActionValue.from_output(self.value)
        if isinstance(self.span, timedelta):
            self.span = MockSpan.duration(self.span)
        elif not isinstance(self.span, MockSpan):
            raise TypeError(f"span must be a MockSpan or timedelta, got {self.span!r}")

    @classmethod
    def once(cls, state: ActionState, value: ActionValue | Output) -> ActionMock:
        """Mock only for a single context evaluation."""
        return cls(state, value, MockSpan.updates(1))


def _as_dim(output: object) -> ActionValueDim:
    if isinstance(output, ActionValueDim):
        return output
    if output is bool:
        return ActionValueDim.BOOL
    if output is float:
        return ActionValueDim.AXIS1D
    raise TypeError(f"unsupported action output: {output!r}")


class InputAction:
    """Base for action marker classes.

    Subclasses declare their output dimension::

        class Move(InputAction, output=ActionValueDim.AXIS2D): ...
    """

    output: ClassVar[ActionValueDim]

    def __init_subclass__(cls, output: object = None, **kwargs) -> None:
        super().__init_subclass__(**kwargs)
        if output is not None:
            cls.output = _as_dim(output)
        elif getattr(cls, "output", None) is None:
            raise TypeError(f"missing action output for {cls.__name__}")


def unwrap_value(dim: ActionValueDim, value: ActionValue) -> Output:
    """Return the raw output of ``value``, which must have dimension ``dim``."""
    dim = ActionValueDim(dim)
    if value.dim() != dim:
        raise TypeError(f"output value should be {_DIM_NAMES[dim]}")
    return value.value


@dataclass
class Action:
    """A user action with its typed output and associated data."""

    action: type
    output: Optional[Output] = None
    settings: ActionSettings = field(default_factory=ActionSettings)
    state: ActionState = ActionState.NONE
    time: ActionTime = field(default_factory=ActionTime)
    mock: Optional[ActionMock] = None
    value: ActionValue = field(init=False)

    def __post_init__(self) -> None:
        if not (isinstance(self.action, type) and issubclass(self.action, InputAction)):
            raise TypeError(f"{self.action!r} is not an InputAction")
        if self.output is None:
            self.value = ActionValue.zero(self.dim)
        else:
            self.value = ActionValue(self.output)
        self.output = unwrap_value(self.dim, self.value)

    @property
    def dim(self) -> ActionValueDim:
        return self.action.output

    @property
    def name(self) -> str:
        return self.action.__qualname__

    def store_value(self, value: ActionValue | Output) -> None:
        """Store a value, which must match the action's output dimension."""
        value = ActionValue.from_output(value)
        self.output = unwrap_value(self.dim, value)
        self.value = value