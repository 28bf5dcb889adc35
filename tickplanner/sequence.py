"""A tick-by-tick sequence of planned player actions."""

from dataclasses import dataclass, field
from typing import Iterator

from tickplanner.player import Idle, PlayerAction


@dataclass
class ActionSequence:
    """One planned action per game tick, with a selected tick being edited."""

    actions: list = field(default_factory=lambda: [Idle()])
    current_tick: int = 0

    def __post_init__(self) -> None:
        if not self.actions:
            raise ValueError("a sequence holds at least one tick")
        if not 0 <= self.current_tick < len(self.actions):
            raise IndexError(f"tick {self.current_tick} out of range")

    def __len__(self) -> int:
        return len(self.actions)

    def __iter__(self) -> Iterator[PlayerAction]:
        return iter(self.actions)

    @property
    def current_action(self) -> PlayerAction:
        """The action planned for the selected tick."""
        return self.actions[self.current_tick]

    def add_tick(self) -> int:
        """Append an idle tick and return its index."""
        self.actions.append(Idle())
        return len(self.actions) - 1

    def record(self, action: PlayerAction) -> None:
        """Overwrite the selected tick's action."""
        self.actions[self.current_tick] = action

    def select(self, tick: int) -> None:
        """Select the tick to edit."""
        if not 0 <= tick < len(self.actions):
            raise IndexError(f"tick {tick} out of range 0..{len(self.actions) - 1}")
        self.current_tick = tick

    def reset(self) -> None:
        """Select the first tick again."""
        self.current_tick = 0