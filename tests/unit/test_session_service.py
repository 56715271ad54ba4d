import logging

import pytest

from app_types import RosterViolation, Team
from exceptions import InputError, LedgerRangeError
from session_service import create_new_session, record_court_result, update_session_settings
from tests.utils import IdentityShuffler

PLAYER_INPUT = "Ana\nBen\nCleo\nDan, Eva, Finn\nGus\nHal\n\nIan"


class TestCreateNewSession:
    def test_parses_input_and_generates(self):
        session = create_new_session(PLAYER_INPUT, 2, 2, 15, rng=IdentityShuffler())

        assert session.players == ["Ana", "Ben", "Cleo", "Dan", "Eva", "Finn", "Gus", "Hal", "Ian"]
        assert session.schedule.num_rounds == 8
        assert session.ledger.shape == (8, 2)
        assert session.schedule.rounds[0].resting == ("Ian",)

    def test_too_few_players(self):
        with pytest.raises(InputError) as exc_info:
            create_new_session("Ana, Ben, Cleo", 1, 2, 15)
        assert exc_info.value.violation is RosterViolation.INSUFFICIENT_PLAYERS

    def test_duplicate_names_after_trimming(self):
        with pytest.raises(InputError) as exc_info:
            create_new_session("Ana\n Ana \nBen\nCleo", 1, 2, 15)
        assert exc_info.value.violation is RosterViolation.DUPLICATE_NAMES

    def test_too_many_courts(self):
        with pytest.raises(InputError) as exc_info:
            create_new_session(PLAYER_INPUT, 3, 2, 15)
        assert exc_info.value.violation is RosterViolation.INSUFFICIENT_PLAYERS_FOR_COURTS


class TestUpdateSessionSettings:
    def test_applies_and_regenerates(self):
        session = create_new_session(PLAYER_INPUT, 2, 2, 15)
        session.set_winner(0, 0, Team.TEAM_1)

        success, error = update_session_settings(session, 1, 1, 20)

        assert success is True
        assert error is None
        assert session.ledger.shape == (3, 1)
        assert session.ledger.recorded_count() == 0

    def test_rejected_settings_keep_schedule_and_results(self):
        session = create_new_session(PLAYER_INPUT, 2, 2, 15)
        session.set_winner(0, 0, Team.TEAM_1)
        schedule = session.schedule

        success, error = update_session_settings(session, 3, 2, 15)

        assert success is False
        assert "12 players for 3 courts" in error
        assert session.schedule is schedule
        assert session.get_winner(0, 0) is Team.TEAM_1


class TestRecordCourtResult:
    def test_record_and_clear(self):
        session = create_new_session(PLAYER_INPUT, 2, 2, 15)

        record_court_result(session, 2, 1, Team.TEAM_2)
        assert session.get_winner(2, 1) is Team.TEAM_2

        record_court_result(session, 2, 1, None)
        assert session.get_winner(2, 1) is None

    def test_out_of_range(self):
        session = create_new_session(PLAYER_INPUT, 2, 2, 15)
        with pytest.raises(LedgerRangeError):
            record_court_result(session, 8, 0, Team.TEAM_1)


def test_rejected_roster_is_validated_once(caplog):
    caplog.set_level(logging.INFO, logger="app")

    with pytest.raises(InputError):
        create_new_session("Ana\nBen\nCleo", 1, 2, 15)

    rejections = [r for r in caplog.records if r.name == "app.roster"]
    assert len(rejections) == 1
