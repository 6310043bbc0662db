from __future__ import annotations

from typing import TYPE_CHECKING

from rich.console import Console
from rich.table import Table

if TYPE_CHECKING:
    from fantasy_mock_draft.domain.draft import DraftResult, Pick, TeamRosterState
    from fantasy_mock_draft.domain.player import Player, ScoringFormat

console = Console(highlight=False)

_GRADE_COLORS: dict[str, str] = {"A": "green", "B": "cyan", "C": "yellow", "D": "magenta", "F": "red"}


def _team_label(team_index: int, draft_slot: int) -> str:
    label = f"Team {team_index}"
    return f"{label} (you)" if team_index == draft_slot else label


def _fmt_delta(delta: float | None) -> str:
    return "-" if delta is None else f"{delta:+.1f}"


def print_pick_log(result: DraftResult) -> None:
    """Print pick-by-pick draft log."""
    slot = result.settings.draft_slot
    table = Table(title="Draft Pick Log")
    table.add_column("Pick", justify="right")
    table.add_column("Rd", justify="right")
    table.add_column("Team")
    table.add_column("Player")
    table.add_column("Pos")
    table.add_column("ADP", justify="right")
    table.add_column("+/-", justify="right")
    table.add_column("Slot")
    table.add_column("Reason")

    for pick in result.picks:
        player = pick.player
        table.add_row(
            str(pick.overall_pick),
            str(pick.round_number),
            _team_label(pick.team_index, slot),
            player.name,
            player.position.value,
            "-" if player.adp is None else f"{player.adp:.1f}",
            _fmt_delta(pick.adp_delta),
            pick.slot,
            pick.reason,
        )
    console.print(table)

    for skip in result.skipped_turns:
        console.print(f"[yellow]Skipped:[/yellow] {skip.message}")
    if result.truncated and result.exhaustion is not None:
        console.print(f"[yellow]Draft truncated:[/yellow] {result.exhaustion.message}")


def print_team_roster(state: TeamRosterState, picks: tuple[Pick, ...], scoring: ScoringFormat) -> None:
    """Print a single team's roster in slot order."""
    by_id: dict[str, Pick] = {p.player.player_id: p for p in picks}
    table = Table(title=f"Team {state.team_index} ({state.strategy.value})")
    table.add_column("Slot")
    table.add_column("Player")
    table.add_column("Pos")
    table.add_column("Rd", justify="right")
    table.add_column("Pick", justify="right")
    table.add_column("Proj", justify="right")

    for slot, player_id in state.slots.items():
        pick = by_id.get(player_id) if player_id else None
        if pick is None:
            table.add_row(slot, "-", "", "", "", "")
            continue
        player: Player = pick.player
        projection = player.projection(scoring)
        table.add_row(
            slot,
            player.name,
            player.position.value,
            str(pick.round_number),
            str(pick.overall_pick),
            "-" if projection is None else f"{projection:.1f}",
        )
    console.print(table)


def print_rosters(result: DraftResult) -> None:
    for state in result.rosters:
        print_team_roster(state, result.team_picks(state.team_index), result.settings.scoring)


def print_grades(result: DraftResult) -> None:
    """Print the league grade card, best teams first."""
    if not result.grades:
        console.print("No grades available.")
        return

    table = Table(title="Draft Grades")
    table.add_column("Team")
    table.add_column("Strategy")
    table.add_column("Grade", justify="center")
    table.add_column("Value", justify="right")
    table.add_column("Starters", justify="right")
    table.add_column("Best Value")
    table.add_column("Biggest Reach")

    slot = result.settings.draft_slot
    for grade in sorted(result.grades, key=lambda g: (-g.value_score, g.team_index)):
        color = _GRADE_COLORS.get(grade.letter_grade, "white")
        best = grade.best_value_pick
        reach = grade.biggest_reach
        table.add_row(
            _team_label(grade.team_index, slot),
            grade.strategy.value,
            f"[{color}]{grade.letter_grade}[/{color}]",
            f"{grade.value_score:+.0f}",
            f"{grade.total_projected_points:.1f}",
            f"{best.player_name} ({best.value_delta:+.0f})" if best else "-",
            f"{reach.player_name} ({reach.value_delta:+.0f})" if reach else "-",
        )
    console.print(table)

    user = result.grade(slot)
    if user is not None and user.summary:
        console.print(f"[bold]Your draft:[/bold] {user.summary}")


def print_league_steals(result: DraftResult) -> None:
    if not result.league_steals:
        return
    table = Table(title="League Steals")
    table.add_column("Pick", justify="right")
    table.add_column("Team")
    table.add_column("Player")
    table.add_column("Pos")
    table.add_column("+/-", justify="right")
    for pick in result.league_steals:
        table.add_row(
            str(pick.overall_pick),
            _team_label(pick.team_index, result.settings.draft_slot),
            pick.player.name,
            pick.player.position.value,
            _fmt_delta(pick.adp_delta),
        )
    console.print(table)


def print_data_gaps(result: DraftResult) -> None:
    if not result.data_gaps:
        return
    console.print(f"[yellow]{len(result.data_gaps)} grading data gap(s):[/yellow]")
    for gap in result.data_gaps:
        console.print(f"  {gap.message}")


def print_player_board(players: list[Player], scoring: ScoringFormat) -> None:
    table = Table(title=f"Player Pool ({scoring.value})")
    table.add_column("#", justify="right")
    table.add_column("Player")
    table.add_column("Pos")
    table.add_column("Team")
    table.add_column("Bye", justify="right")
    table.add_column("ADP", justify="right")
    table.add_column("Proj", justify="right")
    for rank, player in enumerate(players, start=1):
        projection = player.projection(scoring)
        table.add_row(
            str(rank),
            player.name,
            player.position.value,
            player.team_abbr,
            "-" if player.bye_week is None else str(player.bye_week),
            "-" if player.adp is None else f"{player.adp:.1f}",
            "-" if projection is None else f"{projection:.1f}",
        )
    console.print(table)
