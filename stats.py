# stats.py
"""
Per-player statistics derived from a schedule and its outcome ledger.

Nothing here is stored: every count is recomputed from the schedule (and
ledger) on each call, and neither input is modified. Each function accepts
a missing schedule and returns an empty result for it.
"""

from app_types import PlayerCounts, Schedule, Standings, Team
from exceptions import LedgerRangeError
from ledger import OutcomeLedger


def games_played(schedule: Schedule | None) -> PlayerCounts:
    """Number of courts each player appears on across all rounds."""
    if schedule is None:
        return {}

    counts = {name: 0 for name in schedule.players}
    for round_ in schedule.rounds:
        for name in round_.playing:
            counts[name] += 1
    return counts


def rests(schedule: Schedule | None) -> PlayerCounts:
    """Number of rounds each player sits out."""
    if schedule is None:
        return {}

    counts = {name: 0 for name in schedule.players}
    for round_ in schedule.rounds:
        for name in round_.resting:
            counts[name] += 1
    return counts


def wins(schedule: Schedule | None, ledger: OutcomeLedger | None) -> PlayerCounts:
    """
    Number of recorded wins for each player.

    A Team 1 result credits the players in court positions 0 and 1, a Team 2
    result credits positions 2 and 3. Unset cells credit nobody.

    Raises:
        LedgerRangeError: If the ledger was not sized for this schedule.
    """
    if schedule is None:
        return {}

    counts = {name: 0 for name in schedule.players}
    if ledger is None:
        return counts

    if ledger.shape != (schedule.num_rounds, schedule.num_courts):
        raise LedgerRangeError(
            f"Ledger is {ledger.num_rounds}x{ledger.num_courts} but schedule is "
            f"{schedule.num_rounds}x{schedule.num_courts}"
        )

    for round_index, court_index, winner in ledger.cells():
        if winner is None:
            continue
        court = schedule.court(round_index, court_index)
        for name in court.players_on(Team(winner)):
            counts[name] += 1
    return counts


def leaderboard(schedule: Schedule | None, ledger: OutcomeLedger | None) -> Standings:
    """(player, wins) pairs, most wins first; ties keep roster order."""
    win_counts = wins(schedule, ledger)
    return sorted(win_counts.items(), key=lambda item: item[1], reverse=True)
