"""Events raised by action state transitions and a simple observer registry."""

from __future__ import annotations

import enum
import logging
from collections import defaultdict
from dataclasses import dataclass
from typing import Callable, Dict, List, Union

from enhanced_input.action import ActionState, ActionTime, InputAction, unwrap_value
from enhanced_input.value import ActionValue, Output

logger = logging.getLogger(__name__)


class ActionEvents(enum.IntFlag):
    """Bitset of events caused by a transition between two action states."""

    STARTED = 0b00001
    ONGOING = 0b00010
    FIRED = 0b00100
    CANCELED = 0b01000
    COMPLETED = 0b10000

    @classmethod
    def from_transition(cls, previous: ActionState, current: ActionState) -> ActionEvents:
        """Return the events for a transition from ``previous`` to ``current``."""
        return _TRANSITIONS[(ActionState(previous), ActionState(current))]


_TRANSITIONS = {
    (ActionState.NONE, ActionState.NONE): ActionEvents(0),
    (ActionState.NONE, ActionState.ONGOING): ActionEvents.STARTED | ActionEvents.ONGOING,
    (ActionState.NONE, ActionState.FIRED): ActionEvents.STARTED | ActionEvents.FIRED,
    (ActionState.ONGOING, ActionState.NONE): ActionEvents.CANCELED,
    (ActionState.ONGOING, ActionState.ONGOING): ActionEvents.ONGOING,
    (ActionState.ONGOING, ActionState.FIRED): ActionEvents.FIRED,
    (ActionState.FIRED, ActionState.NONE): ActionEvents.COMPLETED,
    (ActionState.FIRED, ActionState.ONGOING): ActionEvents.ONGOING,
    (ActionState.FIRED, ActionState.FIRED): ActionEvents.FIRED,
}


@dataclass(frozen=True)
class _EventKey:
    event_type: type
    action: type


class _ActionEvent:
    """Base for action events; ``Fired[Jump]`` selects events of one action."""

    def __class_getitem__(cls, action: type) -> _EventKey:
        if not (isinstance(action, type) and issubclass(action, InputAction)):
            raise TypeError(f"{action!r} is not an InputAction")
        return _EventKey(cls, action)


@dataclass(frozen=True)
class Started(_ActionEvent):
    """The action left the none state for ongoing or fired."""

    action: type
    value: Output
    state: ActionState


@dataclass(frozen=True)
class Ongoing(_ActionEvent):
    """The action is in the ongoing state."""

    action: type
    value: Output
    state: ActionState
    elapsed_secs: float


@dataclass(frozen=True)
class Fired(_ActionEvent):
    """The action is in the fired state."""

    action: type
    value: Output
    state: ActionState
    fired_secs: float
    elapsed_secs: float


@dataclass(frozen=True)
class Canceled(_ActionEvent):
    """The action went from ongoing back to none."""

    action: type
    value: Output
    state: ActionState
    elapsed_secs: float


@dataclass(frozen=True)
class Completed(_ActionEvent):
    """The action went from fired to none."""

    action: type
    value: Output
    state: ActionState
    fired_secs: float
    elapsed_secs: float


ActionEvent = Union[Started, Ongoing, Fired, Canceled, Completed]
Callback = Callable[[ActionEvent, object], None]


class Observers:
    """Callbacks keyed by event type, optionally narrowed to one action."""

    def __init__(self) -> None:
        self._callbacks: Dict[object, List[Callback]] = defaultdict(list)

    def add(self, event_type: Union[type, _EventKey], callback: Callback) -> None:
        """Register ``callback(event, target)`` for an event type or ``Event[Action]``."""
        if isinstance(event_type, _EventKey):
            key: object = event_type
        elif isinstance(event_type, type) and issubclass(event_type, _ActionEvent):
            key = event_type
        else:
            raise TypeError(f"{event_type!r} is not an action event type")
        self._callbacks[key].append(callback)

    def trigger(self, event: ActionEvent, target: object) -> None:
        """Call every callback registered for this event."""
        event_type = type(event)
        for key in (event_type, _EventKey(event_type, event.action)):
            for callback in list(self._callbacks.get(key, ())):
                callback(event, target)


def build_events(
    action: type,
    state: ActionState,
    events: ActionEvents,
    value: ActionValue,
    time: ActionTime,
) -> List[ActionEvent]:
    """Create event objects for every flag in ``events``, in flag order."""
    state = ActionState(state)
    result: List[ActionEvent] = []
    for flag in ActionEvents:
        if not flag & events:
            continue
        output = unwrap_value(action.output, value)
        if flag is ActionEvents.STARTED:
            result.append(Started(action, output, state))
        elif flag is ActionEvents.ONGOING:
            result.append(Ongoing(action, output, state, time.elapsed_secs))
        elif flag is ActionEvents.FIRED:
            result.append(Fired(action, output, state, time.fired_secs, time.elapsed_secs))
        elif flag is ActionEvents.CANCELED:
            result.append(Canceled(action, output, state, time.elapsed_secs))
        else:
            result.append(Completed(action, output, state, time.fired_secs, time.elapsed_secs))
    return result


def trigger_events(
    observers: Observers,
    target: object,
    action: type,
    state: ActionState,
    events: ActionEvents,
    value: ActionValue,
    time: ActionTime,
) -> List[ActionEvent]:
    """Build the events for ``events`` and deliver them to ``observers``."""
    built = build_events(action, state, events, value, time)
    for event in built:
        logger.debug("triggering `%r` for `%s` for `%r`", event, action.__qualname__, target)
        observers.trigger(event, target)
    return built