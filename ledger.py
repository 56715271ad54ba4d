# ledger.py
"""
Outcome ledger: the recorded winner of every (round, court) cell.

The ledger is a dense table sized to one schedule. It never grows; any
access outside its bounds raises LedgerRangeError and leaves it untouched.
"""

import logging
from collections.abc import Iterator

from app_types import CourtWinner, Schedule, Team
from exceptions import LedgerRangeError

logger = logging.getLogger("app.ledger")


class OutcomeLedger:
    """Winner per (round, court); None means no result recorded yet."""

    def __init__(self, num_rounds: int, num_courts: int):
        if num_rounds < 0 or num_courts < 0:
            raise ValueError("Ledger dimensions cannot be negative.")
        self.num_rounds = num_rounds
        self.num_courts = num_courts
        self._cells: list[list[CourtWinner]] = [
            [None] * num_courts for _ in range(num_rounds)
        ]

    @classmethod
    def for_schedule(cls, schedule: Schedule) -> "OutcomeLedger":
        """Creates an all-unset ledger matching the schedule's dimensions."""
        return cls(schedule.num_rounds, schedule.num_courts)

    @property
    def shape(self) -> tuple[int, int]:
        return self.num_rounds, self.num_courts

    def _check_bounds(self, round_index: int, court_index: int) -> None:
        if not (0 <= round_index < self.num_rounds and 0 <= court_index < self.num_courts):
            logger.warning(
                "Ledger access out of range: round %s, court %s (ledger is %dx%d)",
                round_index,
                court_index,
                self.num_rounds,
                self.num_courts,
            )
            raise LedgerRangeError(
                f"No court {court_index} in round {round_index}; "
                f"schedule has {self.num_rounds} rounds of {self.num_courts} courts"
            )

    def get_winner(self, round_index: int, court_index: int) -> CourtWinner:
        self._check_bounds(round_index, court_index)
        return self._cells[round_index][court_index]

    def set_winner(self, round_index: int, court_index: int, team: CourtWinner) -> None:
        """
        Records (or clears, with None) the winning team of one court.

        Later writes replace earlier ones.

        Raises:
            LedgerRangeError: If the cell is outside the ledger.
        """
        self._check_bounds(round_index, court_index)
        if team is not None:
            team = Team(team)
        self._cells[round_index][court_index] = team
        logger.debug("Round %d court %d winner: %s", round_index, court_index, team)

    def clear_winner(self, round_index: int, court_index: int) -> None:
        self.set_winner(round_index, court_index, None)

    def cells(self) -> Iterator[tuple[int, int, CourtWinner]]:
        """Yields (round_index, court_index, winner) for every cell."""
        for round_index, row in enumerate(self._cells):
            for court_index, winner in enumerate(row):
                yield round_index, court_index, winner

    def recorded_count(self) -> int:
        return sum(1 for _, _, winner in self.cells() if winner is not None)

    def is_complete(self) -> bool:
        """True once every court in every round has a winner."""
        return self.recorded_count() == self.num_rounds * self.num_courts


def record_winner(
    ledger: OutcomeLedger, round_index: int, court_index: int, team: CourtWinner
) -> None:
    """Writes one ledger cell. Pass None to clear a previously recorded winner."""
    ledger.set_winner(round_index, court_index, team)
