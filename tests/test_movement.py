import itertools

import pytest

from tickplanner.movement import MAX_SPEED, step_towards


def _chebyshev(a, b):
    return max(abs(a[0] - b[0]), abs(a[1] - b[1]))


OFFSETS = list(itertools.product(range(-6, 7), repeat=2))


def test_zero_speed_stays_put():
    assert step_towards((2.0, 3.0), (7.0, -1.0), 0) == (2.0, 3.0)


def test_already_at_destination():
    assert step_towards((4.0, 4.0), (4.0, 4.0), 2) == (4.0, 4.0)


def test_straight_line_step():
    assert step_towards((0.0, 0.0), (5.0, 0.0), 2) == (2.0, 0.0)


@pytest.mark.parametrize("speed", [1, 2, 3])
def test_reaches_destination_when_in_range(speed):
    for dx, dy in OFFSETS:
        destination = (float(dx), float(dy))
        if _chebyshev((0.0, 0.0), destination) <= speed:
            assert step_towards((0.0, 0.0), destination, speed) == destination


@pytest.mark.parametrize("speed", [1, 2, 3])
def test_distance_shrinks_by_speed(speed):
    for dx, dy in OFFSETS:
        destination = (float(dx), float(dy))
        before = _chebyshev((0.0, 0.0), destination)
        after = _chebyshev(step_towards((0.0, 0.0), destination, speed), destination)
        assert after == max(0.0, before - speed)


def test_repeated_steps_converge():
    position = (0.0, 0.0)
    destination = (-5.0, 9.0)
    for _ in range(20):
        position = step_towards(position, destination, 2)
    assert position == destination


@pytest.mark.parametrize("speed", [-1, MAX_SPEED + 1, 1.5])
def test_invalid_speed_rejected(speed):
    with pytest.raises(ValueError):
        step_towards((0.0, 0.0), (1.0, 1.0), speed)