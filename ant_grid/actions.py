"""Input enumerations and the per-frame input snapshot.

Hosts (pygame window, Streamlit app, Gymnasium env) translate their own key
codes into an :class:`InputSnapshot` once per frame; systems only ever read
the snapshot.
"""

from dataclasses import dataclass, field
from enum import StrEnum, auto
from typing import FrozenSet, Iterable


class Key(StrEnum):
    """Logical keys understood by the simulation.

    Members:
        FORWARD, BACKWARD: Translate along the current heading.
        LEFT, RIGHT: Turn counter-clockwise / clockwise.
        CLOSE: End the session.
    """

    FORWARD = auto()
    BACKWARD = auto()
    LEFT = auto()
    RIGHT = auto()
    CLOSE = auto()


MOVE_KEYS = [Key.FORWARD, Key.BACKWARD, Key.LEFT, Key.RIGHT]


@dataclass(frozen=True)
class InputSnapshot:
    """Read-only view of the keyboard for one frame.

    Attributes:
        held: Keys currently held down.
        pressed: Keys that went down during this frame.
    """

    held: FrozenSet[Key] = field(default_factory=frozenset)
    pressed: FrozenSet[Key] = field(default_factory=frozenset)

    @classmethod
    def holding(cls, *keys: Key) -> "InputSnapshot":
        return cls(held=frozenset(keys))

    @classmethod
    def from_keys(cls, held: Iterable[Key], pressed: Iterable[Key] = ()) -> "InputSnapshot":
        return cls(held=frozenset(held), pressed=frozenset(pressed))

    def is_held(self, key: Key) -> bool:
        return key in self.held

    def was_pressed(self, key: Key) -> bool:
        return key in self.pressed


NO_INPUT = InputSnapshot()
