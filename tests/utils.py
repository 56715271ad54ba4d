import random

from app_types import Schedule
from scheduler import generate_schedule


class IdentityShuffler:
    """Shuffle source that keeps the order it is given."""

    def shuffle(self, x: list) -> None:
        pass


class ReverseShuffler:
    """Shuffle source that reverses the order it is given."""

    def shuffle(self, x: list) -> None:
        x.reverse()


def generate_player_names(n: int) -> list[str]:
    """Generates N player names P1 to Pn."""
    return [f"P{i}" for i in range(1, n + 1)]


def generate_seeded_schedule(
    num_players: int, num_courts: int, num_rounds: int, seed: int = 0
) -> Schedule:
    """Generates a schedule with a seeded random source for repeatable tests."""
    return generate_schedule(
        generate_player_names(num_players),
        num_courts,
        num_rounds,
        rng=random.Random(seed),
    )
