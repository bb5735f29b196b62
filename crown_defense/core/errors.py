"""
Failure reasons returned by session commands.

Commands return ``(True, payload)`` on success and ``(False, reason)`` on
failure, where *reason* is one of the enums below. A failed command never
changes session state.
"""

from enum import Enum


class PlacementError(Enum):
    """Why a tower cannot stand at a given point."""
    OUT_OF_BOUNDS = "out_of_bounds"
    ON_OBJECTIVE = "on_objective"
    OVERLAP = "overlap"
    ON_PATH = "on_path"


class CommandError(Enum):
    INSUFFICIENT_FUNDS = "insufficient_funds"
    WAVE_ALREADY_ACTIVE = "wave_already_active"
    WAVE_IN_PROGRESS = "wave_in_progress"
    NO_TOWER_SELECTED = "no_tower_selected"
    UNKNOWN_TOWER_TYPE = "unknown_tower_type"
    UNKNOWN_TOWER = "unknown_tower"
    NOT_CONFIGURED = "not_configured"
    NOT_RUNNING = "not_running"
    SESSION_STARTED = "session_started"


MESSAGES = {
    PlacementError.OUT_OF_BOUNDS: "Invalid position: outside the field",
    PlacementError.ON_OBJECTIVE: "Invalid position: too close to the Crown",
    PlacementError.OVERLAP: "Invalid position: overlaps another tower",
    PlacementError.ON_PATH: "Invalid position: on the path",
    CommandError.INSUFFICIENT_FUNDS: "Not enough money!",
    CommandError.WAVE_ALREADY_ACTIVE: "Wave already in progress",
    CommandError.WAVE_IN_PROGRESS: "Wait for the wave to end!",
    CommandError.NO_TOWER_SELECTED: "Select a tower first",
    CommandError.UNKNOWN_TOWER_TYPE: "Unknown tower type",
    CommandError.UNKNOWN_TOWER: "No such tower",
    CommandError.NOT_CONFIGURED: "Choose difficulty and health mode first",
    CommandError.NOT_RUNNING: "Game is not running",
    CommandError.SESSION_STARTED: "Game already started",
}


def describe(reason):
    return MESSAGES.get(reason, str(reason))
