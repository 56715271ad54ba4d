"""
Service layer for orchestrating session operations.

This module sits between the UI (pages) and the lower-level logic modules,
ensuring that input parsing, validation and schedule replacement happen the
same way regardless of where the operation is initiated (UI or tests).
"""

import logging

from app_types import CourtWinner
from exceptions import InputError
from roster import parse_player_names
from scheduler import Shuffler
from session_logic import PadelSession

logger = logging.getLogger("app.session_service")


def create_new_session(
    player_input: str,
    num_courts: int,
    duration_hours: float,
    round_minutes: float,
    rng: Shuffler | None = None,
) -> PadelSession:
    """
    Creates a session from raw setup-page input and generates its schedule.

    1. Parses player names from the text input
    2. Initializes the PadelSession object (validates the roster)
    3. Generates the first schedule (and its empty ledger)

    Returns:
        The initialized PadelSession object.

    Raises:
        InputError: If the roster or settings cannot be scheduled.
    """
    players = parse_player_names(player_input)

    session = PadelSession(
        players=players,
        num_courts=num_courts,
        duration_hours=duration_hours,
        round_minutes=round_minutes,
        rng=rng,
    )
    session.generate()
    return session


def update_session_settings(
    session: PadelSession,
    num_courts: int,
    duration_hours: float,
    round_minutes: float,
) -> tuple[bool, str | None]:
    """
    Applies new dial settings and regenerates the schedule.

    Returns:
        Tuple of (success, error_message). On failure the current schedule
        and its results are left as they were.
    """
    try:
        session.update_settings(
            num_courts=num_courts,
            duration_hours=duration_hours,
            round_minutes=round_minutes,
        )
    except InputError as e:
        logger.info("Settings rejected: %s", e)
        return False, str(e)

    session.regenerate()
    return True, None


def record_court_result(
    session: PadelSession, round_index: int, court_index: int, winner: CourtWinner
) -> None:
    """
    Records the winner picked for one court, or clears it when winner is None.

    Args:
        session: The active session
        round_index: Zero-based round index
        court_index: Zero-based court index
        winner: Team.TEAM_1, Team.TEAM_2 or None

    Raises:
        LedgerRangeError: If the cell does not exist in the current schedule.
    """
    if winner is None:
        session.clear_winner(round_index, court_index)
    else:
        session.set_winner(round_index, court_index, winner)
