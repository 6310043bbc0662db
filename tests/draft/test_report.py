from io import StringIO

import pytest
from rich.console import Console

from fantasy_mock_draft.domain.draft import DraftResult
from fantasy_mock_draft.domain.errors import GradingDataGap, PoolExhausted, TurnSkipped
from fantasy_mock_draft.domain.player import Position, ScoringFormat
from fantasy_mock_draft.draft import report
from fantasy_mock_draft.draft.simulation import run_mock_draft
from tests.helpers import make_player, make_settings, skill_pool


@pytest.fixture(scope="module")
def result() -> DraftResult:
    return run_mock_draft(make_settings(teams=10, rounds=12), skill_pool(40))


def _capture_output(func, *args):
    """Capture output from a print function by temporarily replacing the console."""
    output = StringIO()
    test_console = Console(file=output, force_terminal=True, width=200)
    original_console = report.console
    report.console = test_console
    try:
        func(*args)
    finally:
        report.console = original_console
    return output.getvalue()


class TestPrintPickLog:
    def test_contains_header(self, result: DraftResult) -> None:
        output = _capture_output(report.print_pick_log, result)
        assert "Draft Pick Log" in output
        assert "Player" in output
        assert "Reason" in output

    def test_contains_picks(self, result: DraftResult) -> None:
        output = _capture_output(report.print_pick_log, result)
        assert "P000" in output
        assert "P039" in output

    def test_marks_user_team(self, result: DraftResult) -> None:
        output = _capture_output(report.print_pick_log, result)
        assert "Team 4 (you)" in output

    def test_truncation_notice(self, result: DraftResult) -> None:
        output = _capture_output(report.print_pick_log, result)
        assert "Draft truncated" in output

    def test_skipped_turn_notice(self) -> None:
        skipped = DraftResult(
            settings=make_settings(),
            seed=1,
            picks=(),
            rosters=(),
            grades=(),
            truncated=True,
            skipped_turns=(TurnSkipped(message="Team 3 skipped pick 23", overall_pick=23, team_index=3),),
        )
        output = _capture_output(report.print_pick_log, skipped)
        assert "Skipped:" in output
        assert "Team 3 skipped pick 23" in output


class TestPrintRosters:
    def test_team_titles_and_slots(self, result: DraftResult) -> None:
        output = _capture_output(report.print_rosters, result)
        assert "Team 1 (" in output
        assert "Team 10 (" in output
        assert "FLEX" in output
        assert "BN3" in output


class TestPrintGrades:
    def test_grade_card(self, result: DraftResult) -> None:
        output = _capture_output(report.print_grades, result)
        assert "Draft Grades" in output
        assert "Your draft:" in output

    def test_no_grades(self) -> None:
        empty = DraftResult(settings=make_settings(), seed=1, picks=(), rosters=(), grades=())
        assert "No grades available" in _capture_output(report.print_grades, empty)


class TestPrintExtras:
    def test_league_steals(self, result: DraftResult) -> None:
        assert "League Steals" in _capture_output(report.print_league_steals, result)

    def test_data_gaps(self) -> None:
        gapped = DraftResult(
            settings=make_settings(),
            seed=1,
            picks=(),
            rosters=(),
            grades=(),
            truncated=True,
            exhaustion=PoolExhausted(message="stop", overall_pick=1, team_index=1, remaining_players=0),
            data_gaps=(GradingDataGap(message="Kicker has no ADP", player_id="k", field="adp"),),
        )
        output = _capture_output(report.print_data_gaps, gapped)
        assert "Kicker has no ADP" in output

    def test_player_board(self) -> None:
        players = [make_player("bijan", Position.RB, adp=1.0, name="Bijan Robinson", bye_week=5)]
        output = _capture_output(report.print_player_board, players, ScoringFormat.PPR)
        assert "Bijan Robinson" in output
        assert "Player Pool (ppr)" in output
