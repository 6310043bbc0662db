from __future__ import annotations

import logging
from collections import defaultdict
from dataclasses import dataclass
from typing import TYPE_CHECKING

from fantasy_mock_draft.domain.draft import Pick, PickValue, TeamGrade
from fantasy_mock_draft.domain.errors import GradingDataGap
from fantasy_mock_draft.domain.player import POSITION_ORDER
from fantasy_mock_draft.draft.roster import DEFAULT_SCHEMA
from fantasy_mock_draft.players.pool import upside_index

if TYPE_CHECKING:
    from collections.abc import Sequence

    from fantasy_mock_draft.domain.draft import DraftResult
    from fantasy_mock_draft.domain.player import Player, ScoringFormat
    from fantasy_mock_draft.domain.settings import MockDraftSettings
    from fantasy_mock_draft.draft.roster import RosterSlotSchema
    from fantasy_mock_draft.players.pool import PlayerPool

logger = logging.getLogger(__name__)

# (minimum value per pick, letter), checked top down.
GRADE_THRESHOLDS: tuple[tuple[float, str], ...] = (
    (4.0, "A"),
    (1.5, "B"),
    (-1.5, "C"),
    (-4.0, "D"),
)
FAILING_GRADE = "F"

LEAGUE_STEALS_COUNT = 8


@dataclass(frozen=True)
class GradingReport:
    grades: tuple[TeamGrade, ...]
    data_gaps: tuple[GradingDataGap, ...]
    league_steals: tuple[Pick, ...]


def letter_for(value_per_pick: float) -> str:
    for threshold, letter in GRADE_THRESHOLDS:
        if value_per_pick >= threshold:
            return letter
    return FAILING_GRADE


def expected_picks(picks: Sequence[Pick]) -> dict[int, int]:
    """Map overall pick -> the slot the market expected that player to go.

    Among picks whose player has an ADP, the k-th lowest ADP (ties by player
    id) is expected at the k-th earliest of those same overall picks. Deltas
    against this mapping sum to zero across the league.
    """
    with_adp = [p for p in picks if p.player.adp is not None]
    by_adp = sorted(with_adp, key=lambda p: (p.player.adp, p.player.player_id))
    slots = sorted(p.overall_pick for p in with_adp)
    return {pick.overall_pick: slot for pick, slot in zip(by_adp, slots, strict=True)}


def optimal_lineup_points(
    players: Sequence[Player],
    scoring: ScoringFormat,
    schema: RosterSlotSchema = DEFAULT_SCHEMA,
) -> float:
    """Best legal starting lineup: top players per dedicated slot, then the best remaining FLEX."""
    ranked = sorted(players, key=lambda p: (-(p.projection(scoring) or 0.0), p.player_id))
    used: set[str] = set()
    total = 0.0
    for position, count in schema.starters:
        for player in [p for p in ranked if p.position is position][:count]:
            used.add(player.player_id)
            total += player.projection(scoring) or 0.0
    flex = [p for p in ranked if p.player_id not in used and p.position in schema.flex_positions]
    for player in flex[: schema.flex_count]:
        used.add(player.player_id)
        total += player.projection(scoring) or 0.0
    return round(total, 2)


def balance_index(
    players: Sequence[Player],
    rounds: int,
    schema: RosterSlotSchema = DEFAULT_SCHEMA,
) -> float:
    """1.0 when positional counts match the schema's roster targets, falling toward 0 as they drift."""
    errors: list[float] = []
    for position in POSITION_ORDER:
        target = schema.target_for(position, rounds)
        if target == 0:
            errors.append(0.0)
            continue
        count = sum(1 for p in players if p.position is position)
        errors.append(abs(count - target) / target)
    return round(min(1.0, max(0.0, 1.0 - sum(errors) / len(errors))), 2)


def percentile(value: float, population: Sequence[float]) -> float:
    """Fraction of the league at or below ``value``'s rank; 1.0 for a league of one."""
    if len(population) <= 1:
        return 1.0
    ordered = sorted(population)
    for index, entry in enumerate(ordered):
        if value <= entry:
            return index / (len(ordered) - 1)
    return 1.0


def build_summary(letter: str, starter_pct: float, value_pct: float, balance_pct: float, upside_pct: float) -> str:
    strengths: list[str] = []
    if starter_pct >= 0.65:
        strengths.append("strong weekly starter core")
    if value_pct >= 0.6:
        strengths.append("value-driven picks")
    if balance_pct >= 0.7:
        strengths.append("clean roster construction")
    if upside_pct >= 0.7:
        strengths.append("high-upside bench profile")
    if strengths:
        return f"Built on {' and '.join(strengths[:2])}."
    if letter in ("D", FAILING_GRADE):
        return "This draft is playable, but it needs better ADP discipline and positional timing in early rounds."
    return "Balanced result with room to improve value timing and late-round upside swings."


def _pick_value(pick: Pick, delta: float) -> PickValue:
    return PickValue(
        overall_pick=pick.overall_pick,
        round_number=pick.round_number,
        player_id=pick.player.player_id,
        player_name=pick.player.name,
        value_delta=delta,
    )


def _collect_gaps(picks: Sequence[Pick], scoring: ScoringFormat) -> list[GradingDataGap]:
    gaps: list[GradingDataGap] = []
    for pick in picks:
        player = pick.player
        if player.adp is None:
            gaps.append(
                GradingDataGap(
                    message=f"{player.name} has no ADP; graded as neutral value",
                    player_id=player.player_id,
                    field="adp",
                )
            )
        if player.projection(scoring) is None:
            gaps.append(
                GradingDataGap(
                    message=f"{player.name} has no {scoring.value} projection; counted as 0 points",
                    player_id=player.player_id,
                    field=f"projection.{scoring.value}",
                )
            )
    for gap in gaps:
        logger.warning("Grading data gap: %s", gap.message)
    return gaps


def league_steals(picks: Sequence[Pick], count: int = LEAGUE_STEALS_COUNT) -> tuple[Pick, ...]:
    """Largest falls past ADP league-wide."""
    with_adp = [p for p in picks if p.player.adp is not None]
    with_adp.sort(key=lambda p: (-(p.overall_pick - p.player.adp), p.overall_pick))  # type: ignore[operator]
    return tuple(with_adp[:count])


def grade_picks(
    settings: MockDraftSettings,
    picks: Sequence[Pick],
    schema: RosterSlotSchema = DEFAULT_SCHEMA,
) -> GradingReport:
    scoring = settings.scoring
    expected = expected_picks(picks)
    gaps = _collect_gaps(picks, scoring)

    by_team: dict[int, list[Pick]] = defaultdict(list)
    for pick in picks:
        by_team[pick.team_index].append(pick)

    drafted = tuple(p.player for p in picks)
    upside = upside_index(drafted, scoring, float(settings.total_picks))

    starters: dict[int, float] = {}
    balance: dict[int, float] = {}
    upside_avg: dict[int, float] = {}
    values: dict[int, float] = {}
    deltas: dict[int, list[tuple[Pick, float]]] = {}
    for team in range(1, settings.teams + 1):
        team_picks = by_team.get(team, [])
        players = [p.player for p in team_picks]
        starters[team] = optimal_lineup_points(players, scoring, schema)
        balance[team] = balance_index(players, settings.rounds, schema)
        upside_avg[team] = sum(upside.get(p.player_id, 0.0) for p in players) / len(players) if players else 0.0
        team_deltas = [
            (p, float(p.overall_pick - expected[p.overall_pick]) if p.overall_pick in expected else 0.0)
            for p in team_picks
        ]
        deltas[team] = team_deltas
        values[team] = sum(d for _, d in team_deltas)

    grades: list[TeamGrade] = []
    for team in range(1, settings.teams + 1):
        team_picks = by_team.get(team, [])
        team_deltas = deltas[team]
        per_pick = values[team] / len(team_picks) if team_picks else 0.0
        letter = letter_for(per_pick)

        gains = [(p, d) for p, d in team_deltas if d > 0]
        reaches = [(p, d) for p, d in team_deltas if d < 0]
        best = max(gains, key=lambda item: (item[1], -item[0].overall_pick), default=None)
        worst = min(reaches, key=lambda item: (item[1], item[0].overall_pick), default=None)

        strategy = team_picks[0].strategy if team_picks else settings.strategy
        grades.append(
            TeamGrade(
                team_index=team,
                strategy=strategy,
                total_projected_points=starters[team],
                value_score=values[team],
                letter_grade=letter,
                best_value_pick=_pick_value(*best) if best else None,
                biggest_reach=_pick_value(*worst) if worst else None,
                summary=build_summary(
                    letter,
                    percentile(starters[team], list(starters.values())),
                    percentile(values[team], list(values.values())),
                    percentile(balance[team], list(balance.values())),
                    percentile(upside_avg[team], list(upside_avg.values())),
                ),
            )
        )

    logger.debug("Graded %d teams over %d picks", len(grades), len(picks))
    return GradingReport(grades=tuple(grades), data_gaps=tuple(gaps), league_steals=league_steals(picks))


def grade(
    result: DraftResult,
    pool: PlayerPool,
    schema: RosterSlotSchema = DEFAULT_SCHEMA,
) -> tuple[TeamGrade, ...]:
    """Grade a finished draft against ``pool``, resolving players by id.

    Picks whose player is no longer in the pool keep the player embedded in
    the pick.
    """
    by_id = {p.player_id: p for p in pool.list_players(result.settings.scoring)}
    resolved = [
        Pick(
            overall_pick=pick.overall_pick,
            round_number=pick.round_number,
            pick_in_round=pick.pick_in_round,
            team_index=pick.team_index,
            player=by_id.get(pick.player.player_id, pick.player),
            slot=pick.slot,
            strategy=pick.strategy,
            reason=pick.reason,
        )
        for pick in result.picks
    ]
    return grade_picks(result.settings, resolved, schema).grades
