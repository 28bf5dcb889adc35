"""The modes the tool can be in."""

from enum import Enum


class ToolState(Enum):
    """Which mode the tool is running in.

    ``FREE_ROAM`` is the mode the tool starts in.
    """

    FREE_ROAM = "free_roam"
    EDITING = "editing"
    PLAYBACK = "playback"