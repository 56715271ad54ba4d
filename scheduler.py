# scheduler.py
"""
Round-count calculation and fair-rotation schedule generation.

Each round the players with the fewest games so far are put on court and the
rest sit out. Who lands on which court, and on which team, is decided by a
shuffle of the selected group.
"""

import logging
import math
import random
from typing import Protocol

from app_types import Court, PlayerCounts, PlayerName, Round, Schedule
from constants import PLAYERS_PER_COURT
from exceptions import InputError
from logger import log_round_debug
from roster import validate_roster

logger = logging.getLogger("app.scheduler")


class Shuffler(Protocol):
    """Anything that can permute a list in place (random.Random qualifies)."""

    def shuffle(self, x: list) -> None: ...


def calculate_rounds(duration_hours: float, round_minutes: float, num_courts: int) -> int:
    """
    Works out how many rounds fit into a session.

    The raw count is rounded down to a multiple of the court count so every
    court is used equally, then clamped up to one full pass over the courts.

    Args:
        duration_hours: Session length in hours
        round_minutes: Length of one round in minutes
        num_courts: Number of courts in use

    Returns:
        Number of rounds, always at least num_courts.

    Raises:
        InputError: If round_minutes or num_courts is not positive.
    """
    if round_minutes <= 0:
        raise InputError("Round length must be greater than 0 minutes.")
    if num_courts < 1:
        raise InputError("There must be at least 1 court.")

    rounds = math.floor(duration_hours * 60 / round_minutes)
    rounds = (rounds // num_courts) * num_courts
    if rounds < num_courts:
        rounds = num_courts
    return rounds


def select_players(
    players: list[PlayerName], games_played: PlayerCounts, num_playing: int
) -> tuple[list[PlayerName], list[PlayerName]]:
    """
    Splits the roster into (selected, resting) for one round.

    Players are ordered by games played so far. sorted() is stable, so ties
    keep the original roster order and earlier players win them.
    """
    ordered = sorted(players, key=lambda name: games_played[name])
    return ordered[:num_playing], ordered[num_playing:]


def generate_schedule(
    players: list[PlayerName],
    num_courts: int,
    num_rounds: int,
    rng: Shuffler | None = None,
) -> Schedule:
    """
    Generates a full session schedule.

    Args:
        players: Unique player names, in roster order (used for tie-breaks)
        num_courts: Courts filled every round
        num_rounds: Number of rounds to generate
        rng: Source of shuffles; defaults to a freshly seeded random.Random

    Returns:
        A Schedule with exactly num_rounds rounds.

    Raises:
        InputError: If the roster fails validation or num_rounds is negative.
    """
    validate_roster(players, num_courts).raise_for_error()
    if num_rounds < 0:
        raise InputError("Number of rounds cannot be negative.")

    if rng is None:
        rng = random.Random()

    num_playing = num_courts * PLAYERS_PER_COURT
    games_played = {name: 0 for name in players}
    rounds = []

    for round_num in range(num_rounds):
        selected, resting = select_players(players, games_played, num_playing)

        shuffled = list(selected)
        rng.shuffle(shuffled)
        courts = tuple(
            Court(tuple(shuffled[c * PLAYERS_PER_COURT:(c + 1) * PLAYERS_PER_COURT]))
            for c in range(num_courts)
        )

        for name in selected:
            games_played[name] += 1

        rounds.append(Round(courts=courts, resting=tuple(resting)))
        log_round_debug(logger, round_num, courts, resting)

    logger.info(
        "Generated schedule: %d players, %d courts, %d rounds",
        len(players),
        num_courts,
        num_rounds,
    )
    return Schedule(players=tuple(players), num_courts=num_courts, rounds=tuple(rounds))
