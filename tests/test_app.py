from tickplanner.app import Tool
from tickplanner.game_ticks import GAME_TICK_SECONDS
from tickplanner.player import Idle, Move
from tickplanner.state import ToolState


def _chebyshev(a, b):
    return max(abs(a[0] - b[0]), abs(a[1] - b[1]))


def test_starts_in_free_roam():
    assert Tool().state is ToolState.FREE_ROAM


def test_toggle_editing():
    tool = Tool()
    assert tool.set_editing(True) is ToolState.EDITING
    assert tool.set_editing(False) is ToolState.FREE_ROAM


def test_playback_ignores_toggle_and_clicks():
    tool = Tool()
    tool.state = ToolState.PLAYBACK
    assert tool.set_editing(True) is ToolState.PLAYBACK
    assert tool.click((1.0, 1.0)) is None
    assert tool.player.destination is None


def test_free_roam_click_sets_player_destination():
    tool = Tool()
    action = tool.click((3.0, 4.0))
    assert action == Move((3.0, 4.0))
    assert tool.player.destination == (3.0, 4.0)
    assert list(tool.sequence) == [Idle()]


def test_click_rounds_half_away_from_zero():
    tool = Tool()
    tool.click((2.5, -2.5))
    assert tool.player.destination == (3.0, -3.0)


def test_editing_click_records_into_sequence():
    tool = Tool()
    tool.set_editing(True)
    tool.click((5.0, 6.0))
    assert tool.sequence.current_action == Move((5.0, 6.0))
    assert tool.player.destination is None


def test_player_moves_only_on_game_tick():
    tool = Tool()
    destination = (8.0, 0.0)
    tool.click(destination)
    start = tool.player.position
    assert tool.update(GAME_TICK_SECONDS / 2) is False
    assert tool.player.position == start
    assert tool.update(GAME_TICK_SECONDS / 2) is True
    moved = _chebyshev(start, destination) - _chebyshev(tool.player.position, destination)
    assert moved == tool.player.speed


def test_editing_freezes_time():
    tool = Tool()
    tool.click((8.0, 0.0))
    tool.set_editing(True)
    assert tool.update(GAME_TICK_SECONDS * 2) is False


def test_leaving_editing_resets_selected_tick():
    tool = Tool()
    tool.set_editing(True)
    tool.sequence.add_tick()
    tool.sequence.select(1)
    tool.set_editing(False)
    assert tool.sequence.current_tick == 0


def test_entering_editing_respawns_player_at_origin():
    tool = Tool()
    tool.click((4.0, 4.0))
    for _ in range(5):
        tool.update(GAME_TICK_SECONDS)
    assert tool.player.position == (4.0, 4.0)
    tool.set_editing(True)
    assert tool.player.position == (0.0, 0.0)
    assert tool.player.destination is None