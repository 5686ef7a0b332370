"""Inputs that can be bound to actions."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Optional

_MOD_KEY_NAMES = {
    "CONTROL": "Ctrl",
    "SHIFT": "Shift",
    "ALT": "Alt",
    "SUPER": "Super",
}


class ModKeys(enum.IntFlag):
    """Keyboard modifiers that may accompany a keyboard or mouse binding."""

    CONTROL = 0b0001
    SHIFT = 0b0010
    ALT = 0b0100
    SUPER = 0b1000

    def members(self) -> list[ModKeys]:
        """Return the single modifiers set in this value, in declaration order."""
        return [flag for flag in ModKeys if flag & self]

    def __str__(self) -> str:
        return " + ".join(_MOD_KEY_NAMES[flag.name] for flag in self.members())


_NO_MOD_KEYS = ModKeys(0)


class BindingKind(enum.Enum):
    """Which kind of input a binding refers to."""

    KEYBOARD = "keyboard"
    MOUSE_BUTTON = "mouse_button"
    MOUSE_MOTION = "mouse_motion"
    MOUSE_WHEEL = "mouse_wheel"
    GAMEPAD_BUTTON = "gamepad_button"
    GAMEPAD_AXIS = "gamepad_axis"
    NONE = "none"


_NAMED_KINDS = {
    BindingKind.KEYBOARD,
    BindingKind.MOUSE_BUTTON,
    BindingKind.GAMEPAD_BUTTON,
    BindingKind.GAMEPAD_AXIS,
}

_MODIFIABLE_KINDS = {
    BindingKind.KEYBOARD,
    BindingKind.MOUSE_BUTTON,
    BindingKind.MOUSE_MOTION,
    BindingKind.MOUSE_WHEEL,
}


@dataclass(frozen=True)
class Binding:
    """An input bound to an action.

    ``input`` names the key, mouse button, gamepad button or gamepad axis
    (for example ``"KeyA"``, ``"Left"``, ``"North"``, ``"LeftStickX"``);
    it is ``None`` for mouse motion, mouse wheel and the empty binding.
    """

    kind: BindingKind
    input: Optional[str] = None
    mod_keys: ModKeys = field(default=_NO_MOD_KEYS)

    def __post_init__(self) -> None:
        kind = BindingKind(self.kind)
        object.__setattr__(self, "kind", kind)
        object.__setattr__(self, "mod_keys", ModKeys(self.mod_keys))
        if kind in _NAMED_KINDS:
            if not isinstance(self.input, str) or not self.input:
                raise ValueError(f"{kind.value} binding needs an input name")
        elif self.input is not None:
            raise ValueError(f"{kind.value} binding takes no input name")
        if self.mod_keys and kind not in _MODIFIABLE_KINDS:
            raise ValueError("keyboard modifiers can be applied only to mouse and keyboard")

    @classmethod
    def keyboard(cls, key: str, mod_keys: ModKeys = _NO_MOD_KEYS) -> Binding:
        """Keyboard key, captured as a boolean."""
        return cls(BindingKind.KEYBOARD, key, mod_keys)

    @classmethod
    def mouse_button(cls, button: str, mod_keys: ModKeys = _NO_MOD_KEYS) -> Binding:
        """Mouse button, captured as a boolean."""
        return cls(BindingKind.MOUSE_BUTTON, button, mod_keys)

    @classmethod
    def mouse_motion(cls) -> Binding:
        """Mouse movement without modifiers, captured as two axes."""
        return cls(BindingKind.MOUSE_MOTION)

    @classmethod
    def mouse_wheel(cls) -> Binding:
        """Mouse wheel without modifiers, captured as two axes."""
        return cls(BindingKind.MOUSE_WHEEL)

    @classmethod
    def gamepad_button(cls, button: str) -> Binding:
        """Gamepad button, captured as one axis."""
        return cls(BindingKind.GAMEPAD_BUTTON, button)

    @classmethod
    def gamepad_axis(cls, axis: str) -> Binding:
        """Gamepad stick axis, captured as one axis."""
        return cls(BindingKind.GAMEPAD_AXIS, axis)

    @classmethod
    def none(cls) -> Binding:
        """A binding that corresponds to no input."""
        return cls(BindingKind.NONE)

    def mod_keys_count(self) -> int:
        """Return how many keyboard modifiers are attached."""
        return len(self.mod_keys.members())

    def with_mod_keys(self, mod_keys: ModKeys) -> Binding:
        """Return a copy with the modifiers replaced.

        Raises ``ValueError`` for gamepad and empty bindings.
        """
        if self.kind not in _MODIFIABLE_KINDS:
            raise ValueError("keyboard modifiers can be applied only to mouse and keyboard")
        return Binding(self.kind, self.input, ModKeys(mod_keys))

    def without_mod_keys(self) -> Binding:
        """Return a copy without keyboard modifiers."""
        return self.with_mod_keys(_NO_MOD_KEYS)

    def __str__(self) -> str:
        prefix = f"{self.mod_keys} + " if self.mod_keys else ""
        if self.kind is BindingKind.MOUSE_BUTTON:
            body = f"Mouse {self.input}"
        elif self.kind is BindingKind.MOUSE_MOTION:
            body = "Mouse Motion"
        elif self.kind is BindingKind.MOUSE_WHEEL:
            body = "Scroll Wheel"
        elif self.kind is BindingKind.NONE:
            body = "None"
        else:
            body = str(self.input)
        return prefix + body