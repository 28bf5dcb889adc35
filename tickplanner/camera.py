"""Orthographic 2D camera mapping between screen pixels and world tiles."""

from dataclasses import dataclass

from tickplanner.movement import Vec2

# World units per screen pixel.
PIXEL_SCALE = 0.1


@dataclass
class Camera:
    """A camera looking at ``center`` through a viewport of the given size.

    Screen coordinates start at the top-left corner with y pointing down;
    world coordinates have y pointing up.
    """

    width: float
    height: float
    scale: float = PIXEL_SCALE
    center: Vec2 = (0.0, 0.0)

    def __post_init__(self) -> None:
        if self.scale <= 0:
            raise ValueError(f"scale must be positive, got {self.scale!r}")
        if self.width <= 0 or self.height <= 0:
            raise ValueError("viewport size must be positive")

    def screen_to_world(self, position: Vec2) -> Vec2:
        """Convert a viewport position to a world position."""
        sx, sy = position
        return (
            self.center[0] + (sx - self.width / 2) * self.scale,
            self.center[1] - (sy - self.height / 2) * self.scale,
        )

    def world_to_screen(self, position: Vec2) -> Vec2:
        """Convert a world position to a viewport position."""
        wx, wy = position
        return (
            (wx - self.center[0]) / self.scale + self.width / 2,
            (self.center[1] - wy) / self.scale + self.height / 2,
        )