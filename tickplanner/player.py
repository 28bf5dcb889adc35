"""The player, the NPCs it can target and the actions it can take."""

import math
from dataclasses import dataclass
from typing import Optional, Union

from tickplanner.movement import Vec2, step_towards

PLAYER_SPEED = 2


def _format_number(value: float) -> str:
    value = float(value)
    if value.is_integer():
        text = str(int(value))
        if value == 0 and math.copysign(1.0, value) < 0:
            return "-0"
        return text
    return repr(value)


def _format_vec2(vector: Vec2) -> str:
    return f"[{_format_number(vector[0])}, {_format_number(vector[1])}]"


@dataclass(frozen=True)
class Npc:
    """A non-player character that can be attacked."""

    name: str


@dataclass(frozen=True)
class Idle:
    """Do nothing this tick."""

    def __str__(self) -> str:
        return "Idle"


@dataclass(frozen=True)
class Move:
    """Walk to a tile."""

    destination: Vec2

    def __str__(self) -> str:
        return f"Move: {_format_vec2(self.destination)}"


@dataclass(frozen=True)
class Attack:
    """Attack an NPC."""

    target: Npc

    def __str__(self) -> str:
        return f"Attack: {self.target.name}"


PlayerAction = Union[Idle, Move, Attack]


@dataclass
class Player:
    """The player character: where it stands and where it is heading."""

    position: Vec2 = (0.0, 0.0)
    speed: int = PLAYER_SPEED
    destination: Optional[Vec2] = None

    def apply_action(self, action: PlayerAction) -> None:
        """Replace the current action with ``action``."""
        if isinstance(action, Move):
            x, y = action.destination
            self.destination = (float(x), float(y))
        elif isinstance(action, Attack):
            # Attacking has no target positions yet; walk to the origin.
            self.destination = (0.0, 0.0)
        elif isinstance(action, Idle):
            self.destination = None
        else:
            raise TypeError(f"not a player action: {action!r}")

    def advance(self) -> Vec2:
        """Move one game tick towards the destination and return the new position."""
        if self.destination is None:
            return self.position
        self.position = step_towards(self.position, self.destination, self.speed)
        if self.position == self.destination:
            self.destination = None
        return self.position