"""
Structured error codes and the invalid-range exception.
Use the keys in reports and batch rows; map to user-facing messages in the CLI.
"""

from __future__ import annotations

# Known error / outcome keys
INVALID_RANGE = "invalid_range"
SCENARIO_LOAD_FAILED = "scenario_load_failed"
NOT_COVERED = "not_covered"
RUN_FAILED = "run_failed"

# User-facing messages (short, actionable)
USER_MESSAGES: dict[str, str] = {
    INVALID_RANGE: "An envelope has min > max on some axis. Fix the scenario bounds.",
    SCENARIO_LOAD_FAILED: "Scenario file could not be read. Check the path and JSON layout.",
    NOT_COVERED: "The cameras leave part of the required envelope uncovered.",
    RUN_FAILED: "Run failed. Check scenario and inputs.",
}


class InvalidRangeError(ValueError):
    """An envelope (camera or required) has min > max on the distance or light axis."""

    code = INVALID_RANGE


def user_message(error_key: str | None, fallback: str = "Something went wrong.") -> str:
    """Return a user-facing message for the given error key."""
    if not error_key:
        return fallback
    return USER_MESSAGES.get(error_key, fallback)
