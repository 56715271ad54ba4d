# roster.py
"""
Roster parsing and validation.

Player names arrive as free text from the setup page. parse_player_names()
turns that text into a clean list; validate_roster() checks the list against
the requested court count without raising, so the UI can show the message.
"""

import logging
import re

from app_types import PlayerName, RosterViolation, ValidationResult
from constants import MIN_PLAYERS, PLAYERS_PER_COURT

logger = logging.getLogger("app.roster")

_NAME_SEPARATORS = re.compile(r"[,\n]")


def parse_player_names(raw: str) -> list[PlayerName]:
    """Splits raw input on commas and newlines, trimming and dropping blanks."""
    names = (name.strip() for name in _NAME_SEPARATORS.split(raw))
    return [name for name in names if name]


def max_courts(num_players: int) -> int:
    """Largest court count a roster of this size can fill (never below 1)."""
    return max(1, num_players // PLAYERS_PER_COURT)


def validate_roster(names: list[PlayerName], num_courts: int) -> ValidationResult:
    """
    Checks a roster against the requested number of courts.

    Rules are checked in order and the first one broken is reported:
    too few players, fewer than one court, too few players for the courts,
    too many courts for the players, duplicate names.

    Args:
        names: Trimmed, non-empty player names
        num_courts: Requested number of courts

    Returns:
        ValidationResult, valid or carrying the first violation found.
    """
    num_players = len(names)

    if num_players < MIN_PLAYERS:
        result = ValidationResult(
            RosterViolation.INSUFFICIENT_PLAYERS,
            f"Please enter at least {MIN_PLAYERS} players. You entered {num_players}.",
        )
    elif num_courts < 1:
        result = ValidationResult(
            RosterViolation.INVALID_COURT_COUNT,
            "There must be at least 1 court.",
        )
    elif num_players < num_courts * PLAYERS_PER_COURT:
        result = ValidationResult(
            RosterViolation.INSUFFICIENT_PLAYERS_FOR_COURTS,
            f"You need at least {num_courts * PLAYERS_PER_COURT} players for "
            f"{num_courts} courts ({PLAYERS_PER_COURT} per court).",
        )
    elif num_courts > num_players // PLAYERS_PER_COURT:
        result = ValidationResult(
            RosterViolation.TOO_MANY_COURTS,
            "Too many courts for the number of players. "
            f"Max courts: {num_players // PLAYERS_PER_COURT}",
        )
    elif len(set(names)) != num_players:
        result = ValidationResult(
            RosterViolation.DUPLICATE_NAMES,
            "Please ensure all player names are unique.",
        )
    else:
        return ValidationResult()

    logger.info("Roster rejected (%s): %s", result.violation.value, result.message)
    return result
