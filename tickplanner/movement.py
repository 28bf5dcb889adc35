"""Tile-based movement towards a destination."""

import math

Vec2 = tuple[float, float]

DEFAULT_SPEED = 1
MAX_SPEED = 255


def _signum(value: float) -> float:
    return math.copysign(1.0, value)


def step_towards(position: Vec2, destination: Vec2, speed: int) -> Vec2:
    """Return the position reached after one game tick of movement.

    The mover first walks straight along the axis with the greater remaining
    distance until the path is a pure diagonal, then walks diagonally. Each
    straight or diagonal tile costs one point of ``speed``.
    """
    if not isinstance(speed, int) or not 0 <= speed <= MAX_SPEED:
        raise ValueError(f"speed must be an integer in 0..{MAX_SPEED}, got {speed!r}")

    x, y = float(position[0]), float(position[1])
    target_x, target_y = float(destination[0]), float(destination[1])
    dx, dy = target_x - x, target_y - y

    speed_left = speed
    while abs(abs(dx) - abs(dy)) > 0 and speed_left > 0:
        if abs(dx) > abs(dy):
            x += _signum(dx)
        else:
            y += _signum(dy)
        dx, dy = target_x - x, target_y - y
        speed_left -= 1

    if speed_left > 0:
        to_travel = min(float(speed_left), abs(dx))
        x += to_travel * _signum(dx)
        y += to_travel * _signum(dy)

    return (x, y)