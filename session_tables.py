# session_tables.py
"""
Tabular views of a session for display.

This module converts schedules, ledgers and derived statistics into pandas
DataFrames for the session page.
"""

import pandas as pd

from app_types import Schedule, Team
from ledger import OutcomeLedger
from stats import games_played, leaderboard, rests, wins

SCHEDULE_COLUMNS = ["Round", "Court", "Team 1", "Team 2", "Winner"]
PLAYER_STATS_COLUMNS = ["Player", "Games Played", "Rests", "Wins"]
LEADERBOARD_COLUMNS = ["Player", "Wins"]

WINNER_LABELS = {Team.TEAM_1: "Team 1", Team.TEAM_2: "Team 2", None: ""}


def team_label(team: Team, players: tuple[str, str]) -> str:
    """Button/label text for a team, e.g. 'Team 1 (Ana, Ben)'."""
    return f"{WINNER_LABELS[team]} ({players[0]}, {players[1]})"


def create_schedule_dataframe(
    schedule: Schedule | None, ledger: OutcomeLedger | None = None
) -> pd.DataFrame:
    """One row per court per round, numbered from 1 for display."""
    if schedule is None:
        return pd.DataFrame(columns=SCHEDULE_COLUMNS)

    rows = []
    for round_index, round_ in enumerate(schedule.rounds):
        for court_index, court in enumerate(round_.courts):
            winner = ledger.get_winner(round_index, court_index) if ledger else None
            rows.append(
                {
                    "Round": round_index + 1,
                    "Court": court_index + 1,
                    "Team 1": " & ".join(court.team_1),
                    "Team 2": " & ".join(court.team_2),
                    "Winner": WINNER_LABELS[winner],
                }
            )
    return pd.DataFrame(rows, columns=SCHEDULE_COLUMNS)


def create_player_stats_dataframe(
    schedule: Schedule | None, ledger: OutcomeLedger | None = None
) -> pd.DataFrame:
    """Games played, rests and wins for every player, in roster order."""
    if schedule is None:
        return pd.DataFrame(columns=PLAYER_STATS_COLUMNS)

    played = games_played(schedule)
    rested = rests(schedule)
    won = wins(schedule, ledger)
    return pd.DataFrame(
        {
            "Player": list(schedule.players),
            "Games Played": [played[name] for name in schedule.players],
            "Rests": [rested[name] for name in schedule.players],
            "Wins": [won[name] for name in schedule.players],
        },
        columns=PLAYER_STATS_COLUMNS,
    )


def create_leaderboard_dataframe(
    schedule: Schedule | None, ledger: OutcomeLedger | None
) -> pd.DataFrame:
    """Leaderboard with ranks starting at 1."""
    standings = leaderboard(schedule, ledger)
    if not standings:
        return pd.DataFrame(columns=LEADERBOARD_COLUMNS)

    df = pd.DataFrame(standings, columns=LEADERBOARD_COLUMNS)
    df.index += 1  # Start rank from 1
    return df
