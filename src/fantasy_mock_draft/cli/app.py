from typing import Annotated

import typer

from fantasy_mock_draft.cli._logging import configure_logging
from fantasy_mock_draft.cli._output import print_error, print_strategies
from fantasy_mock_draft.config import create_config, load_draft_defaults, load_engine_tuning, load_player_pool
from fantasy_mock_draft.domain.player import ScoringFormat
from fantasy_mock_draft.domain.settings import Strategy
from fantasy_mock_draft.draft import report
from fantasy_mock_draft.draft.serialization import result_to_json
from fantasy_mock_draft.draft.simulation import run_mock_draft
from fantasy_mock_draft.draft.strategy_presets import STRATEGY_PRESETS
from fantasy_mock_draft.exceptions import PlayerDataError, ValidationError

app = typer.Typer(name="mockdraft", help="Fantasy football mock draft simulator")


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Enable DEBUG logging")] = False,
) -> None:
    """Fantasy football mock draft simulator."""
    configure_logging(verbose=verbose)
    if ctx.invoked_subcommand is None:
        raise typer.Exit()


_ConfigOpt = Annotated[str, typer.Option("--config", help="Path to a YAML config file")]
_PlayersOpt = Annotated[str | None, typer.Option("--players", help="CSV player source (default: bundled board)")]
_ScoringOpt = Annotated[ScoringFormat | None, typer.Option("--scoring", help="Scoring format")]


def _parse_seed(raw: str) -> int | str:
    """Integer-looking seeds map to the numeric seed so ``--seed 7`` matches ``seed: 7`` in YAML."""
    stripped = raw.strip()
    try:
        return int(stripped)
    except ValueError:
        return raw


def _build_overrides(**sections: dict[str, object]) -> dict[str, object]:
    overrides: dict[str, object] = {}
    for section, values in sections.items():
        present = {key: value for key, value in values.items() if value is not None}
        if present:
            overrides[section] = present
    return overrides


@app.command()
def simulate(
    teams: Annotated[int | None, typer.Option("--teams", help="League size (10, 12 or 14)")] = None,
    rounds: Annotated[int | None, typer.Option("--rounds", help="Draft rounds (12, 15 or 18)")] = None,
    draft_slot: Annotated[int | None, typer.Option("--slot", help="Your draft slot, 1-based")] = None,
    scoring: _ScoringOpt = None,
    strategy: Annotated[Strategy | None, typer.Option("--strategy", help="Your drafting strategy")] = None,
    seed: Annotated[str | None, typer.Option("--seed", help="Seed for a reproducible mock")] = None,
    players: _PlayersOpt = None,
    config: _ConfigOpt = "mockdraft.yaml",
    as_json: Annotated[bool, typer.Option("--json", help="Print the result as JSON")] = False,
    show_log: Annotated[bool, typer.Option("--log/--no-log", help="Show the pick-by-pick log")] = True,
    show_rosters: Annotated[bool, typer.Option("--rosters/--no-rosters", help="Show every team's roster")] = False,
    show_grades: Annotated[bool, typer.Option("--grades/--no-grades", help="Show the league grade card")] = True,
) -> None:
    """Run a full mock draft and grade every team."""
    overrides = _build_overrides(
        draft={
            "teams": teams,
            "rounds": rounds,
            "draft_slot": draft_slot,
            "scoring": scoring.value if scoring else None,
            "strategy": strategy.value if strategy else None,
            "seed": _parse_seed(seed) if seed is not None else None,
        },
        players={"source": players},
    )
    try:
        cfg = create_config(yaml_path=config, overrides=overrides)
        settings = load_draft_defaults(cfg)
        tuning = load_engine_tuning(cfg)
        pool = load_player_pool(cfg)
        result = run_mock_draft(settings, pool, tuning)
    except (ValidationError, PlayerDataError) as e:
        print_error(str(e))
        raise typer.Exit(code=1) from None

    if as_json:
        typer.echo(result_to_json(result))
        return

    if show_log:
        report.print_pick_log(result)
    if show_rosters:
        report.print_rosters(result)
    if show_grades:
        report.print_grades(result)
        report.print_league_steals(result)
    report.print_data_gaps(result)


@app.command()
def strategies() -> None:
    """List the available drafting strategies."""
    print_strategies(STRATEGY_PRESETS)


@app.command("players")
def players_cmd(
    scoring: _ScoringOpt = None,
    top: Annotated[int, typer.Option("--top", help="Number of players to show")] = 25,
    players: _PlayersOpt = None,
    config: _ConfigOpt = "mockdraft.yaml",
) -> None:
    """Show the top of the player board by ADP."""
    overrides = _build_overrides(
        draft={"scoring": scoring.value if scoring else None},
        players={"source": players},
    )
    try:
        cfg = create_config(yaml_path=config, overrides=overrides)
        fmt = load_draft_defaults(cfg).scoring
        pool = load_player_pool(cfg)
    except (ValidationError, PlayerDataError) as e:
        print_error(str(e))
        raise typer.Exit(code=1) from None

    report.print_player_board(pool.list_players(fmt)[: max(top, 0)], fmt)
