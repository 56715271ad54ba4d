import pytest

from app_types import Court, Round, Schedule
from tests.utils import IdentityShuffler


@pytest.fixture
def sample_players():
    """Returns a roster of eight sample players."""
    return ["Alice", "Bob", "Charlie", "Dave", "Eve", "Frank", "Grace", "Heidi"]


@pytest.fixture
def identity_shuffler():
    """A shuffle source that leaves the selected order untouched."""
    return IdentityShuffler()


@pytest.fixture
def two_round_schedule():
    """Six players, one court, two rounds with a known layout."""
    return Schedule(
        players=("P1", "P2", "P3", "P4", "P5", "P6"),
        num_courts=1,
        rounds=(
            Round(courts=(Court(("P1", "P2", "P3", "P4")),), resting=("P5", "P6")),
            Round(courts=(Court(("P5", "P6", "P1", "P2")),), resting=("P3", "P4")),
        ),
    )
