"""Relationships between context entities and their action entities."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, List


def _check_context(context: object) -> type:
    if not isinstance(context, type):
        raise TypeError(f"context must be a class, got {context!r}")
    return context


@dataclass(frozen=True)
class ActionOf:
    """Links an action entity to the context entity it belongs to, for context ``context``."""

    context: type
    entity: object

    def __post_init__(self) -> None:
        _check_context(self.context)


@dataclass
class Actions:
    """Action entities associated with a context, in spawn order."""

    context: type
    entities: List[object] = field(default_factory=list)

    def __post_init__(self) -> None:
        _check_context(self.context)
        unique: List[object] = []
        for entity in self.entities:
            if not any(entity is known for known in unique):
                unique.append(entity)
        self.entities = unique

    def add(self, action: object) -> None:
        """Relate an action; relating the same action twice has no effect."""
        if action not in self:
            self.entities.append(action)

    def remove(self, action: object) -> None:
        """Remove a related action; raises ``ValueError`` if it is not related."""
        for index, known in enumerate(self.entities):
            if known is action:
                del self.entities[index]
                return
        raise ValueError(f"{action!r} is not an action of {self.context.__qualname__}")

    def __contains__(self, action: object) -> bool:
        return any(known is action for known in self.entities)

    def __iter__(self) -> Iterator[object]:
        return iter(list(self.entities))

    def __len__(self) -> int:
        return len(self.entities)


def actions(context: type, *args: object) -> Actions:
    """Return the actions of ``context`` holding the given action entities in order."""
    return Actions(context, list(args))