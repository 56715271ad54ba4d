"""
Type aliases and data classes for the Padel Scheduler.

This module defines the schedule data model (courts, rounds, schedules)
along with type aliases that give semantic meaning to complex type hints.
"""

from dataclasses import dataclass, field
from enum import Enum

from constants import PLAYERS_PER_COURT
from exceptions import InputError

# =============================================================================
# Basic Type Aliases
# =============================================================================


class Team(int, Enum):
    """Side of a court. Positions 0-1 are Team 1, positions 2-3 are Team 2."""

    TEAM_1 = 1
    TEAM_2 = 2


# A player's name (unique identifier within a roster)
PlayerName = str

# A pair of player names forming one team on a court
PlayerPair = tuple[PlayerName, PlayerName]

# Recorded outcome of one court in one round; None means undecided
CourtWinner = Team | None

# Mapping of player names to a per-player count (games played, wins, rests)
PlayerCounts = dict[PlayerName, int]

# Ordered (player, wins) pairs, best first
Standings = list[tuple[PlayerName, int]]


# =============================================================================
# Schedule Data Classes
# =============================================================================


@dataclass(frozen=True)
class Court:
    """The four players on one court in one round.

    Attributes:
        players: Player names in court order; positions 0-1 form Team 1,
            positions 2-3 form Team 2.
    """

    players: tuple[PlayerName, ...]

    def __post_init__(self) -> None:
        if len(self.players) != PLAYERS_PER_COURT:
            raise ValueError(
                f"A court needs exactly {PLAYERS_PER_COURT} players, got {len(self.players)}"
            )
        if len(set(self.players)) != PLAYERS_PER_COURT:
            raise ValueError(f"Duplicate player on court: {self.players}")

    @property
    def team_1(self) -> PlayerPair:
        return self.players[0], self.players[1]

    @property
    def team_2(self) -> PlayerPair:
        return self.players[2], self.players[3]

    def players_on(self, team: Team) -> PlayerPair:
        """Returns the pair of players making up the given team."""
        return self.team_1 if team is Team.TEAM_1 else self.team_2


@dataclass(frozen=True)
class Round:
    """One time slot: the courts being played and who sits out.

    Attributes:
        courts: Courts in index order (court 0 first)
        resting: Players not assigned to any court this round
    """

    courts: tuple[Court, ...]
    resting: tuple[PlayerName, ...] = ()

    @property
    def playing(self) -> list[PlayerName]:
        """All players assigned to a court, in court order."""
        return [name for court in self.courts for name in court.players]


@dataclass(frozen=True)
class Schedule:
    """A generated session schedule. Never edited; regeneration builds a new one.

    Attributes:
        players: The roster, in the order it was entered
        num_courts: Courts used in every round
        rounds: Rounds in play order
    """

    players: tuple[PlayerName, ...]
    num_courts: int
    rounds: tuple[Round, ...] = field(default_factory=tuple)

    @property
    def num_rounds(self) -> int:
        return len(self.rounds)

    def court(self, round_index: int, court_index: int) -> Court:
        return self.rounds[round_index].courts[court_index]


# =============================================================================
# Result Data Classes
# =============================================================================


class RosterViolation(str, Enum):
    """Reasons a roster cannot be scheduled, in the order they are checked."""

    INSUFFICIENT_PLAYERS = "insufficient players"
    INVALID_COURT_COUNT = "invalid court count"
    INSUFFICIENT_PLAYERS_FOR_COURTS = "insufficient players for requested courts"
    TOO_MANY_COURTS = "too many courts for player count"
    DUPLICATE_NAMES = "duplicate player names"


@dataclass
class ValidationResult:
    """Result from roster validation.

    Attributes:
        violation: The first rule the roster broke, or None if it is valid
        message: User-facing description of the violation
        is_valid: Whether the roster passed every rule
    """

    violation: RosterViolation | None = None
    message: str | None = None
    is_valid: bool = field(init=False)

    def __post_init__(self) -> None:
        self.is_valid = self.violation is None

    def raise_for_error(self) -> None:
        """Raises InputError carrying the user-facing message if invalid."""
        if not self.is_valid:
            raise InputError(self.message, violation=self.violation)
