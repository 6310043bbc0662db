from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from fantasy_mock_draft.domain.player import Position
from fantasy_mock_draft.draft.rng import next_value
from fantasy_mock_draft.draft.roster import (
    DEFAULT_SCHEMA,
    eligible_positions,
    filled_starter_slots,
    open_needs,
    open_starter_positions,
)
from fantasy_mock_draft.draft.strategy_presets import STRATEGY_PRESETS

if TYPE_CHECKING:
    from collections.abc import Sequence

    from fantasy_mock_draft.domain.draft import TeamRosterState
    from fantasy_mock_draft.domain.player import Player
    from fantasy_mock_draft.domain.settings import Strategy
    from fantasy_mock_draft.draft.rng import RngState
    from fantasy_mock_draft.draft.roster import RosterSlotSchema
    from fantasy_mock_draft.draft.strategy_presets import StrategyProfile
    from fantasy_mock_draft.players.pool import PlayerBoard

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class EngineTuning:
    reach_weight: float = 0.25
    reach_grace_rounds: float = 0.5
    need_bonus: float = 0.6
    need_threshold: float = 2 / 3
    jitter: float = 0.02
    base_value_cap: float = 2.5
    elite_qb_count: int = 2

    def __post_init__(self) -> None:
        if not 0 <= self.jitter < 1:
            msg = "jitter must be in [0, 1)"
            raise ValueError(msg)
        if not 0 < self.need_threshold < 1:
            msg = "need_threshold must be in (0, 1)"
            raise ValueError(msg)
        if self.reach_weight < 0 or self.reach_grace_rounds < 0 or self.need_bonus < 0:
            msg = "reach_weight, reach_grace_rounds and need_bonus must be non-negative"
            raise ValueError(msg)
        if self.base_value_cap <= 0:
            msg = "base_value_cap must be positive"
            raise ValueError(msg)
        if self.elite_qb_count < 0:
            msg = "elite_qb_count must be non-negative"
            raise ValueError(msg)


DEFAULT_TUNING = EngineTuning()


@dataclass(frozen=True)
class PickContext:
    overall_pick: int
    round_number: int
    total_rounds: int
    teams: int
    board: PlayerBoard

    @property
    def round_fraction(self) -> float:
        return self.round_number / self.total_rounds


@dataclass(frozen=True)
class ScoreBreakdown:
    base_value: float
    reach_penalty: float
    positional_bias: float
    need_bonus: float

    @property
    def total(self) -> float:
        return self.base_value - self.reach_penalty + self.positional_bias + self.need_bonus


@dataclass(frozen=True)
class Selection:
    player: Player
    breakdown: ScoreBreakdown
    score: float


def base_value(adp: float, context: PickContext, tuning: EngineTuning = DEFAULT_TUNING) -> float:
    """Inverse ADP relative to the pick on the clock; 1.0 is a player taken exactly at ADP."""
    return min(tuning.base_value_cap, context.overall_pick / max(adp, 1.0))


def reach_penalty(adp: float, context: PickContext, tuning: EngineTuning = DEFAULT_TUNING) -> float:
    grace = tuning.reach_grace_rounds * context.teams
    overshoot = adp - context.overall_pick - grace
    if overshoot <= 0:
        return 0.0
    return tuning.reach_weight * overshoot / context.teams


def positional_bias(
    player: Player,
    profile: StrategyProfile,
    context: PickContext,
    roster: TeamRosterState,
    elite_qb_ids: frozenset[str] = frozenset(),
) -> float:
    fraction = context.round_fraction
    bias = profile.band_weight(player.position, fraction)
    if (
        profile.elite_qb_bonus
        and player.player_id in elite_qb_ids
        and fraction <= profile.elite_qb_max_fraction
        and roster.count(Position.QB) == 0
    ):
        bias += profile.elite_qb_bonus
    if profile.upside_weight:
        bias += profile.upside_weight * context.board.upside_of(player)
    return bias


def need_bonus(
    position: Position,
    context: PickContext,
    roster: TeamRosterState,
    tuning: EngineTuning = DEFAULT_TUNING,
    schema: RosterSlotSchema = DEFAULT_SCHEMA,
) -> float:
    """Pull toward positions with no starter yet once the draft reaches its final stretch."""
    fraction = context.round_fraction
    if fraction < tuning.need_threshold:
        return 0.0
    if position not in open_starter_positions(roster, schema):
        return 0.0
    if filled_starter_slots(roster, position, schema) > 0:
        return 0.0
    ramp = (fraction - tuning.need_threshold) / (1.0 - tuning.need_threshold)
    return tuning.need_bonus * (1.0 + ramp)


def score_player(
    player: Player,
    profile: StrategyProfile,
    context: PickContext,
    roster: TeamRosterState,
    tuning: EngineTuning = DEFAULT_TUNING,
    schema: RosterSlotSchema = DEFAULT_SCHEMA,
    elite_qb_ids: frozenset[str] = frozenset(),
) -> ScoreBreakdown:
    adp = context.board.effective_adp(player)
    return ScoreBreakdown(
        base_value=base_value(adp, context, tuning),
        reach_penalty=reach_penalty(adp, context, tuning),
        positional_bias=positional_bias(player, profile, context, roster, elite_qb_ids),
        need_bonus=need_bonus(player.position, context, roster, tuning, schema),
    )


def _elite_qbs(available: Sequence[Player], context: PickContext, count: int) -> frozenset[str]:
    qbs = sorted(
        (p for p in available if p.position is Position.QB),
        key=lambda p: (context.board.effective_adp(p), p.player_id),
    )
    return frozenset(p.player_id for p in qbs[:count])


def select_pick(
    strategy: Strategy,
    context: PickContext,
    available: Sequence[Player],
    roster: TeamRosterState,
    rng: RngState,
    tuning: EngineTuning = DEFAULT_TUNING,
    schema: RosterSlotSchema = DEFAULT_SCHEMA,
) -> tuple[Selection | None, RngState]:
    """Choose the next player for ``roster`` under ``strategy``.

    Candidates are available players at a needed position, falling back to
    any position with an open slot. Each candidate gets one jitter draw in
    board order; the best jittered score wins, ties going to lower ADP and
    then player id.
    """
    profile = STRATEGY_PRESETS[strategy]
    needs = set(open_needs(roster, schema))
    candidates = [p for p in available if p.position in needs]
    if not candidates:
        relaxed = set(eligible_positions(roster, schema))
        candidates = [p for p in available if p.position in relaxed]
        if candidates:
            logger.debug(
                "Team %d: no players at needed positions %s, relaxing to %s",
                roster.team_index,
                sorted(p.value for p in needs),
                sorted(p.value for p in relaxed),
            )
    if not candidates:
        return None, rng

    candidates.sort(key=lambda p: (context.board.effective_adp(p), p.player_id))
    elite_ids = _elite_qbs(available, context, tuning.elite_qb_count) if profile.elite_qb_bonus else frozenset()

    best: Selection | None = None
    best_key: tuple[float, float, str] | None = None
    for player in candidates:
        breakdown = score_player(player, profile, context, roster, tuning, schema, elite_ids)
        raw = breakdown.total
        u, rng = next_value(rng)
        score = raw + abs(raw) * tuning.jitter * (2.0 * u - 1.0)
        key = (-score, context.board.effective_adp(player), player.player_id)
        if best_key is None or key < best_key:
            best_key = key
            best = Selection(player=player, breakdown=breakdown, score=score)

    return best, rng
