from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from fantasy_mock_draft.domain.draft import DraftResult, Pick
from fantasy_mock_draft.domain.errors import PoolExhausted, TurnSkipped
from fantasy_mock_draft.domain.settings import Strategy
from fantasy_mock_draft.draft.grading import grade_picks
from fantasy_mock_draft.draft.order import pick_in_round, round_for_pick, team_on_clock
from fantasy_mock_draft.draft.rng import create_rng, derive_seed, next_index
from fantasy_mock_draft.draft.roster import DEFAULT_SCHEMA, SlotKind, apply_pick, eligible_positions, new_roster
from fantasy_mock_draft.draft.strategy import DEFAULT_TUNING, PickContext, select_pick
from fantasy_mock_draft.players.pool import build_board

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

    from fantasy_mock_draft.domain.draft import TeamGrade, TeamRosterState
    from fantasy_mock_draft.domain.errors import GradingDataGap
    from fantasy_mock_draft.domain.player import Player
    from fantasy_mock_draft.domain.settings import MockDraftSettings
    from fantasy_mock_draft.draft.rng import RngState
    from fantasy_mock_draft.draft.roster import RosterSlotSchema
    from fantasy_mock_draft.draft.strategy import EngineTuning, Selection
    from fantasy_mock_draft.players.pool import PlayerPool

logger = logging.getLogger(__name__)

_STRATEGIES: tuple[Strategy, ...] = tuple(Strategy)

# Bias at or above this reads as a strategy-driven pick.
STRATEGY_FIT_THRESHOLD = 0.45


def assign_strategies(settings: MockDraftSettings, rng: RngState) -> tuple[dict[int, Strategy], RngState]:
    """The user's slot drafts with ``settings.strategy``; every other team draws one, in team order."""
    strategies: dict[int, Strategy] = {}
    for team_index in range(1, settings.teams + 1):
        if team_index == settings.draft_slot:
            strategies[team_index] = settings.strategy
            continue
        idx, rng = next_index(rng, len(_STRATEGIES))
        strategies[team_index] = _STRATEGIES[idx]
    return strategies, rng


def _any_team_can_pick(
    rosters: Iterable[TeamRosterState],
    available: Sequence[Player],
    schema: RosterSlotSchema,
) -> bool:
    for roster in rosters:
        if roster.picks_made >= roster.total_rounds:
            continue
        positions = set(eligible_positions(roster, schema))
        if any(p.position in positions for p in available):
            return True
    return False


def pick_reason(
    selection: Selection,
    overall_pick: int,
    roster_before: TeamRosterState,
    slot_kind: SlotKind,
) -> str:
    player = selection.player
    delta = overall_pick - player.adp if player.adp is not None else None
    if delta is not None and delta >= 14:
        return "Big value fall versus ADP"
    if delta is not None and delta >= 7:
        return "Good value at current slot"
    if slot_kind is SlotKind.STARTER and roster_before.count(player.position) == 0:
        return "Addresses a major roster need"
    if slot_kind is not SlotKind.BENCH:
        return "Fills depth at a priority position"
    if selection.breakdown.positional_bias >= STRATEGY_FIT_THRESHOLD:
        return "Fits the team's strategy profile"
    if delta is not None and delta <= -10:
        return "Aggressive upside reach"
    return "Best balance of projection and roster fit"


def run_mock_draft(
    settings: MockDraftSettings,
    pool: PlayerPool,
    tuning: EngineTuning = DEFAULT_TUNING,
    schema: RosterSlotSchema = DEFAULT_SCHEMA,
) -> DraftResult:
    """Run a full snake draft and grade every team.

    The result depends only on the arguments: the same settings, pool and
    tuning always produce the same board. A team with no legal candidate
    loses its turn while other teams can still draft; once no team can take
    any remaining player the draft stops. Either way the result is marked
    truncated.
    """
    board = build_board(pool, settings.scoring, settings.total_picks)
    seed = derive_seed(settings)
    rng = create_rng(seed)
    strategies, rng = assign_strategies(settings, rng)

    logger.info(
        "Mock draft: %d teams x %d rounds, %s, slot %d (%s), seed %d, %d players",
        settings.teams,
        settings.rounds,
        settings.scoring.value,
        settings.draft_slot,
        settings.strategy.value,
        seed,
        len(board.players),
    )

    rosters: dict[int, TeamRosterState] = {
        team: new_roster(team, strategy, settings.rounds, schema) for team, strategy in strategies.items()
    }
    available = list(board.players)
    picks: list[Pick] = []
    exhaustion: PoolExhausted | None = None
    skipped: list[TurnSkipped] = []

    for overall in range(1, settings.total_picks + 1):
        team = team_on_clock(overall, settings.teams)
        round_number = round_for_pick(overall, settings.teams)
        roster = rosters[team]

        selection: Selection | None = None
        if available:
            context = PickContext(
                overall_pick=overall,
                round_number=round_number,
                total_rounds=settings.rounds,
                teams=settings.teams,
                board=board,
            )
            selection, rng = select_pick(roster.strategy, context, available, roster, rng, tuning, schema)

        if selection is None and _any_team_can_pick(rosters.values(), available, schema):
            skip = TurnSkipped(
                message=f"Team {team} skipped pick {overall}: no legal candidate for open roster slots",
                overall_pick=overall,
                team_index=team,
            )
            logger.info("%s (%d players left)", skip.message, len(available))
            skipped.append(skip)
            continue

        if selection is None:
            reason = "player pool exhausted" if not available else "no team can take a remaining player"
            exhaustion = PoolExhausted(
                message=f"Draft stopped at pick {overall}: {reason}",
                overall_pick=overall,
                team_index=team,
                remaining_players=len(available),
            )
            logger.warning(
                "%s (team %d, %d players left)", exhaustion.message, team, exhaustion.remaining_players
            )
            break

        player = selection.player
        updated, slot = apply_pick(roster, player, schema)
        slot_kind = schema.spec_for(slot, settings.rounds).kind
        pick = Pick(
            overall_pick=overall,
            round_number=round_number,
            pick_in_round=pick_in_round(overall, settings.teams),
            team_index=team,
            player=player,
            slot=slot,
            strategy=roster.strategy,
            reason=pick_reason(selection, overall, roster, slot_kind),
        )
        rosters[team] = updated
        available.remove(player)
        picks.append(pick)
        logger.debug(
            "Pick %d (R%d) team %d: %s %s -> %s [%.3f]",
            overall,
            round_number,
            team,
            player.position.value,
            player.name,
            slot,
            selection.score,
        )

    grades: tuple[TeamGrade, ...] = ()
    data_gaps: tuple[GradingDataGap, ...] = ()
    league_steals: tuple[Pick, ...] = ()
    try:
        report = grade_picks(settings, picks, schema)
    except Exception:
        logger.exception("Grading failed; returning picks without grades")
    else:
        grades = report.grades
        data_gaps = report.data_gaps
        league_steals = report.league_steals

    return DraftResult(
        settings=settings,
        seed=seed,
        picks=tuple(picks),
        rosters=tuple(rosters[team] for team in sorted(rosters)),
        grades=grades,
        truncated=exhaustion is not None or bool(skipped),
        exhaustion=exhaustion,
        data_gaps=data_gaps,
        league_steals=league_steals,
        skipped_turns=tuple(skipped),
    )


def replay_rosters(
    settings: MockDraftSettings,
    picks: Sequence[Pick],
    upto: int | None = None,
    schema: RosterSlotSchema = DEFAULT_SCHEMA,
) -> tuple[TeamRosterState, ...]:
    """Rebuild every team's roster from a pick log, optionally stopping after overall pick ``upto``."""
    strategies: dict[int, Strategy] = {}
    for pick in picks:
        strategies.setdefault(pick.team_index, pick.strategy)

    rosters = {
        team: new_roster(team, strategies.get(team, settings.strategy), settings.rounds, schema)
        for team in range(1, settings.teams + 1)
    }
    for pick in sorted(picks, key=lambda p: p.overall_pick):
        if upto is not None and pick.overall_pick > upto:
            break
        rosters[pick.team_index], _ = apply_pick(rosters[pick.team_index], pick.player, schema)
    return tuple(rosters[team] for team in sorted(rosters))
