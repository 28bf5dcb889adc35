"""The interactive tick sequence planner."""

import argparse
import math
from typing import Optional, Sequence

from tickplanner.camera import Camera
from tickplanner.game_ticks import GameTickTimer
from tickplanner.movement import Vec2
from tickplanner.player import Move, Player
from tickplanner.sequence import ActionSequence
from tickplanner.state import ToolState

_BACKGROUND = (40, 40, 40)
_PLAYER_COLOUR = (127, 255, 127)
_MARKER_COLOUR = (127, 127, 127)
_TEXT_COLOUR = (230, 230, 230)
_PANEL_COLOUR = (20, 20, 20)
_PANEL_RECT = (10, 10, 320, 130)


def _round_half_away(value: float) -> float:
    return math.copysign(math.floor(abs(value) + 0.5), value) + 0.0


class Tool:
    """The planner's world: mode, game clock, player and planned sequence."""

    def __init__(self) -> None:
        self.state = ToolState.FREE_ROAM
        self.timer = GameTickTimer()
        self.player = Player()
        self.sequence = ActionSequence()

    def set_editing(self, editing: bool) -> ToolState:
        """Switch sequence creation mode on or off and return the new state."""
        if self.state is ToolState.FREE_ROAM and editing:
            self.state = ToolState.EDITING
            self.player = Player()
        elif self.state is ToolState.EDITING and not editing:
            self.state = ToolState.FREE_ROAM
            self.sequence.reset()
        return self.state

    def click(self, world_position: Vec2) -> Optional[Move]:
        """Handle a click on a world position.

        Free roam sends the player there; editing records the move for the
        selected tick. Returns the resulting action, or None if ignored.
        """
        if self.state not in (ToolState.FREE_ROAM, ToolState.EDITING):
            return None
        x, y = world_position
        action = Move((_round_half_away(x), _round_half_away(y)))
        if self.state is ToolState.FREE_ROAM:
            self.player.apply_action(action)
        else:
            self.sequence.record(action)
        return action

    def update(self, delta: float) -> bool:
        """Advance time by ``delta`` seconds; return True if a game tick ran."""
        if self.state is not ToolState.FREE_ROAM:
            return False
        ticked = self.timer.tick(delta)
        if ticked:
            self.player.advance()
        return ticked


def _handle_key(tool: Tool, key: int, pygame) -> None:
    if key == pygame.K_e:
        tool.set_editing(tool.state is not ToolState.EDITING)
    elif tool.state is ToolState.EDITING:
        sequence = tool.sequence
        if key == pygame.K_a:
            sequence.add_tick()
        elif key == pygame.K_LEFT:
            sequence.select(max(0, sequence.current_tick - 1))
        elif key == pygame.K_RIGHT:
            sequence.select(min(len(sequence) - 1, sequence.current_tick + 1))


def _draw_tile(screen, pygame, camera: Camera, position: Vec2, colour) -> None:
    x, y = position
    left, top = camera.world_to_screen((x - 0.5, y + 0.5))
    size = 1 / camera.scale
    pygame.draw.rect(screen, colour, pygame.Rect(round(left), round(top), round(size), round(size)))


def _panel_lines(tool: Tool) -> list:
    editing = tool.state is ToolState.EDITING
    lines = ["Tick Sequence", f"[{'x' if editing else ' '}] Sequence Creation Mode (E)"]
    if editing:
        sequence = tool.sequence
        x, y = tool.player.position
        lines += [
            f"Current tick: {sequence.current_tick} / {len(sequence) - 1} (Left/Right)",
            f"Location: [{x:g}, {y:g}]",
            f"Action: {sequence.current_action}",
            "Add tick (A)",
        ]
    return lines


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Open the planner window and run until it is closed."""
    parser = argparse.ArgumentParser(prog="tickplanner", description="Plan tick-perfect action sequences.")
    parser.add_argument("--width", type=int, default=1280, help="window width in pixels")
    parser.add_argument("--height", type=int, default=720, help="window height in pixels")
    args = parser.parse_args(argv)

    import pygame

    pygame.init()
    try:
        screen = pygame.display.set_mode((args.width, args.height))
        pygame.display.set_caption("Tick Sequence")
        font = pygame.font.Font(None, 22)
        clock = pygame.time.Clock()
        camera = Camera(args.width, args.height)
        panel = pygame.Rect(*_PANEL_RECT)
        tool = Tool()

        running = True
        while running:
            delta = clock.tick(60) / 1000
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN:
                    _handle_key(tool, event.key, pygame)
                elif (
                    event.type == pygame.MOUSEBUTTONDOWN
                    and event.button == 1
                    and not panel.collidepoint(event.pos)
                ):
                    tool.click(camera.screen_to_world(event.pos))
            tool.update(delta)

            screen.fill(_BACKGROUND)
            if tool.player.destination is not None:
                _draw_tile(screen, pygame, camera, tool.player.destination, _MARKER_COLOUR)
            _draw_tile(screen, pygame, camera, tool.player.position, _PLAYER_COLOUR)

            pygame.draw.rect(screen, _PANEL_COLOUR, panel)
            for row, line in enumerate(_panel_lines(tool)):
                text = font.render(line, True, _TEXT_COLOUR)
                screen.blit(text, (panel.left + 8, panel.top + 6 + row * 20))
            pygame.display.flip()
    finally:
        pygame.quit()
    return 0