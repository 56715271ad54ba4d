# session_logic.py
import logging

from app_types import CourtWinner, PlayerCounts, PlayerName, Schedule, Standings
from constants import DEFAULT_DURATION_HOURS, DEFAULT_NUM_COURTS, DEFAULT_ROUND_MINUTES
from exceptions import SessionError
from ledger import OutcomeLedger
from roster import validate_roster
from scheduler import Shuffler, calculate_rounds, generate_schedule
from stats import games_played, leaderboard, rests, wins

logger = logging.getLogger("app.session_logic")


class PadelSession:
    """
    Owns the state of one playing session: roster, dial settings, the current
    schedule and the ledger of results for that schedule.

    The schedule and ledger are always replaced together, so a ledger never
    describes any schedule other than the one it sits next to.
    """

    def __init__(
        self,
        players: list[PlayerName],
        num_courts: int = DEFAULT_NUM_COURTS,
        duration_hours: float = DEFAULT_DURATION_HOURS,
        round_minutes: float = DEFAULT_ROUND_MINUTES,
        rng: Shuffler | None = None,
    ):
        validate_roster(players, num_courts).raise_for_error()

        self.players = list(players)
        self.num_courts = num_courts
        self.duration_hours = duration_hours
        self.round_minutes = round_minutes
        self.rng = rng

        self.schedule: Schedule | None = None
        self.ledger: OutcomeLedger | None = None
        self.generation = 0  # Bumped on every (re)generation

    @property
    def num_rounds(self) -> int:
        return calculate_rounds(self.duration_hours, self.round_minutes, self.num_courts)

    def generate(self) -> Schedule:
        """
        Builds a new schedule from the current roster and dials, and a fresh
        ledger to go with it. Any results recorded so far are discarded.
        """
        schedule = generate_schedule(
            self.players, self.num_courts, self.num_rounds, rng=self.rng
        )
        ledger = OutcomeLedger.for_schedule(schedule)

        self.schedule, self.ledger = schedule, ledger
        self.generation += 1
        logger.info(
            "Schedule generation %d ready (%d rounds)", self.generation, schedule.num_rounds
        )
        return schedule

    def regenerate(self) -> Schedule:
        """Replaces the current schedule with a new one, dropping all results."""
        if self.schedule is None:
            raise SessionError("Cannot regenerate before a schedule exists.")
        return self.generate()

    def update_settings(
        self,
        num_courts: int | None = None,
        duration_hours: float | None = None,
        round_minutes: float | None = None,
    ) -> None:
        """Changes the dials. Takes effect on the next generate()."""
        num_courts = self.num_courts if num_courts is None else num_courts
        duration_hours = self.duration_hours if duration_hours is None else duration_hours
        round_minutes = self.round_minutes if round_minutes is None else round_minutes

        validate_roster(self.players, num_courts).raise_for_error()
        calculate_rounds(duration_hours, round_minutes, num_courts)

        self.num_courts = num_courts
        self.duration_hours = duration_hours
        self.round_minutes = round_minutes

    def _require_ledger(self) -> OutcomeLedger:
        if self.ledger is None:
            raise SessionError("No schedule has been generated yet.")
        return self.ledger

    def set_winner(self, round_index: int, court_index: int, team: CourtWinner) -> None:
        self._require_ledger().set_winner(round_index, court_index, team)

    def clear_winner(self, round_index: int, court_index: int) -> None:
        self._require_ledger().clear_winner(round_index, court_index)

    def get_winner(self, round_index: int, court_index: int) -> CourtWinner:
        return self._require_ledger().get_winner(round_index, court_index)

    def games_played(self) -> PlayerCounts:
        return games_played(self.schedule)

    def rests(self) -> PlayerCounts:
        return rests(self.schedule)

    def wins(self) -> PlayerCounts:
        return wins(self.schedule, self.ledger)

    def get_standings(self) -> Standings:
        """Returns players with their win counts, sorted from most to fewest."""
        return leaderboard(self.schedule, self.ledger)
