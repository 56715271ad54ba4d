import pytest

from app_types import RosterViolation
from exceptions import InputError
from roster import max_courts, parse_player_names, validate_roster


class TestParsePlayerNames:
    """Tests for turning raw setup input into a roster."""

    def test_splits_on_newlines_and_commas(self):
        assert parse_player_names("Ana\nBen, Cleo,Dan") == ["Ana", "Ben", "Cleo", "Dan"]

    def test_trims_and_drops_blank_entries(self):
        assert parse_player_names("  Ana \n\n , ,Ben\n   ") == ["Ana", "Ben"]

    def test_empty_input(self):
        assert parse_player_names("") == []

    def test_keeps_duplicates_for_the_validator(self):
        assert parse_player_names("Ana\nAna") == ["Ana", "Ana"]


class TestMaxCourts:
    def test_whole_courts_only(self):
        assert max_courts(9) == 2
        assert max_courts(12) == 3

    def test_never_below_one(self):
        assert max_courts(0) == 1
        assert max_courts(3) == 1


class TestValidateRoster:
    """Tests for roster validation rules and their precedence."""

    def test_valid_roster(self, sample_players):
        result = validate_roster(sample_players, 2)
        assert result.is_valid is True
        assert result.violation is None
        assert result.message is None

    def test_too_few_players(self):
        result = validate_roster(["A", "B", "C"], 1)
        assert result.is_valid is False
        assert result.violation is RosterViolation.INSUFFICIENT_PLAYERS
        assert "You entered 3" in result.message

    def test_too_few_players_checked_before_court_count(self):
        result = validate_roster(["A", "B"], 0)
        assert result.violation is RosterViolation.INSUFFICIENT_PLAYERS

    def test_zero_courts(self, sample_players):
        result = validate_roster(sample_players, 0)
        assert result.violation is RosterViolation.INVALID_COURT_COUNT

    def test_not_enough_players_for_courts(self):
        players = [f"P{i}" for i in range(1, 10)]
        result = validate_roster(players, 3)
        assert result.violation is RosterViolation.INSUFFICIENT_PLAYERS_FOR_COURTS
        assert "at least 12 players for 3 courts" in result.message

    def test_duplicate_names(self):
        result = validate_roster(["A", "B", "A", "C"], 1)
        assert result.violation is RosterViolation.DUPLICATE_NAMES
        assert result.message == "Please ensure all player names are unique."

    def test_duplicate_names_are_case_sensitive(self):
        result = validate_roster(["Ana", "ana", "Ben", "Cleo"], 1)
        assert result.is_valid is True

    def test_court_count_checked_before_duplicates(self):
        result = validate_roster(["A", "A", "B", "C"], 2)
        assert result.violation is RosterViolation.INSUFFICIENT_PLAYERS_FOR_COURTS

    def test_exact_fit_is_valid(self):
        players = [f"P{i}" for i in range(1, 13)]
        assert validate_roster(players, 3).is_valid is True

    def test_raise_for_error(self):
        result = validate_roster(["A", "B", "C"], 1)
        with pytest.raises(InputError) as exc_info:
            result.raise_for_error()
        assert exc_info.value.violation is RosterViolation.INSUFFICIENT_PLAYERS
        assert str(exc_info.value) == "Please enter at least 4 players. You entered 3."

    def test_raise_for_error_on_valid_roster_is_noop(self, sample_players):
        validate_roster(sample_players, 1).raise_for_error()
