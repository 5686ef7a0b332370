# enhanced_input

A small pure-Python library for describing game input as *actions* rather
than raw keys. It has no dependencies outside the standard library.

An action has a typed value (a boolean, or a 1D, 2D or 3D axis), a state
(`NONE`, `ONGOING`, `FIRED`) and timing. A change of state between two
updates produces events (`Started`, `Ongoing`, `Fired`, `Canceled`,
`Completed`) that observers can react to. Inputs are described by `Binding`
values: keyboard keys and mouse buttons with optional modifier keys, mouse
motion and wheel, gamepad buttons and axes.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

- `enhanced_input.value` – `ActionValue` and `ActionValueDim`. An
  `ActionValue` holds a `bool`, a `float` or a tuple of two or three floats;
  `convert` changes its dimension (extra axes are zero-filled or dropped),
  `as_bool`, `as_axis1d`, `as_axis2d`, `as_axis3d` read it in any form,
  `is_actuated` compares its magnitude with a threshold, and `zero` /
  `from_output` create values.
- `enhanced_input.action` – `InputAction` (base for action marker classes),
  `Action` (an action with its output, settings, state, time and optional
  mock), `unwrap_value`, `ActionState`, `ActionSettings`, `Accumulation`,
  `ActionTime`, `ActionMock` and `MockSpan`.
- `enhanced_input.events` – `ActionEvents` flags derived from a state
  transition with `ActionEvents.from_transition`, the event classes
  `Started`, `Ongoing`, `Fired`, `Canceled`, `Completed`, an `Observers`
  registry, and `build_events` / `trigger_events`.
- `enhanced_input.binding` – `Binding`, `BindingKind` and `ModKeys`.
- `enhanced_input.relationship` – `ActionOf`, `Actions` and the `actions`
  helper that ties action objects to a context class.

## Examples

Values and bindings:

```python
from enhanced_input.value import ActionValue, ActionValueDim
from enhanced_input.binding import Binding, ModKeys

value = ActionValue.from_output(True)
value.convert(ActionValueDim.AXIS2D).value     # (1.0, 0.0)
ActionValue((3.0, 4.0)).is_actuated(5.0)        # True

str(Binding.keyboard("KeyA", ModKeys.CONTROL))  # "Ctrl + KeyA"
str(Binding.mouse_button("Left"))               # "Mouse Left"
Binding.gamepad_axis("LeftStickX").with_mod_keys(ModKeys.SHIFT)  # raises ValueError
```

Declaring actions and storing values:

```python
from enhanced_input.action import Action, ActionState, ActionTime, InputAction
from enhanced_input.value import ActionValueDim

class Jump(InputAction, output=bool): ...
class Move(InputAction, output=ActionValueDim.AXIS2D): ...

jump = Action(Jump)
jump.store_value(True)
jump.output            # True
jump.store_value(1.0)  # raises TypeError: output value should be bool

time = ActionTime()
time.update(0.5, ActionState.FIRED)  # elapsed_secs == fired_secs == 0.5
```

Events and observers:

```python
from enhanced_input.action import ActionState, ActionTime
from enhanced_input.events import ActionEvents, Fired, Observers, trigger_events
from enhanced_input.value import ActionValue

observers = Observers()
observers.add(Fired[Jump], lambda event, target: print(event.value, target))

events = ActionEvents.from_transition(ActionState.NONE, ActionState.FIRED)
# STARTED and FIRED
trigger_events(observers, "player", Jump, ActionState.FIRED,
               events, ActionValue(True), ActionTime())
# prints "True player"
```

`Observers.add` accepts an event class (every action) or `Event[Action]`
(one action). Events are built and delivered in the order Started, Ongoing,
Fired, Canceled, Completed, and `trigger_events` returns the list it built.

Relating actions to a context:

```python
from enhanced_input.relationship import actions

class Player: ...

player_actions = actions(Player, jump, Action(Move))
len(player_actions)      # 2
player_actions.remove(jump)
jump in player_actions   # False
```

## What this package does not do

It does not read keyboard, mouse or gamepad devices, and it has no input
conditions, modifiers, contexts or per-frame evaluation loop. `Binding`
only describes an input; `ActionSettings` and `ActionMock` are plain data
that nothing in the package applies. Producing states and values from real
input, and calling `trigger_events` each update, is left to the caller.