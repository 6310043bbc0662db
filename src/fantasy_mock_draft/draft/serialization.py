"""JSON output for draft results. Keys are camelCase and sorted on dump so equal results serialize identically."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

from fantasy_mock_draft.domain.player import POSITION_ORDER

if TYPE_CHECKING:
    from fantasy_mock_draft.domain.draft import DraftResult, Pick, PickValue, TeamGrade, TeamRosterState
    from fantasy_mock_draft.domain.errors import GradingDataGap, PoolExhausted, TurnSkipped
    from fantasy_mock_draft.domain.player import Player


def player_to_dict(player: Player) -> dict[str, Any]:
    return {
        "playerId": player.player_id,
        "name": player.name,
        "position": player.position.value,
        "team": player.team_abbr,
        "byeWeek": player.bye_week,
        "adp": player.adp,
        "projectedPoints": {fmt.value: points for fmt, points in player.projected_points.items()},
    }


def pick_to_dict(pick: Pick) -> dict[str, Any]:
    return {
        "overallPick": pick.overall_pick,
        "round": pick.round_number,
        "pickInRound": pick.pick_in_round,
        "teamIndex": pick.team_index,
        "slot": pick.slot,
        "strategy": pick.strategy.value,
        "reason": pick.reason,
        "adpDelta": pick.adp_delta,
        "player": player_to_dict(pick.player),
    }


def roster_to_dict(state: TeamRosterState) -> dict[str, Any]:
    return {
        "teamIndex": state.team_index,
        "strategy": state.strategy.value,
        "slots": dict(state.slots),
        "counts": {position.value: state.count(position) for position in POSITION_ORDER},
    }


def _pick_value_to_dict(value: PickValue | None) -> dict[str, Any] | None:
    if value is None:
        return None
    return {
        "overallPick": value.overall_pick,
        "round": value.round_number,
        "playerId": value.player_id,
        "playerName": value.player_name,
        "valueDelta": value.value_delta,
    }


def grade_to_dict(grade: TeamGrade) -> dict[str, Any]:
    return {
        "teamIndex": grade.team_index,
        "strategy": grade.strategy.value,
        "totalProjectedPoints": grade.total_projected_points,
        "valueScore": grade.value_score,
        "letterGrade": grade.letter_grade,
        "bestValuePick": _pick_value_to_dict(grade.best_value_pick),
        "biggestReach": _pick_value_to_dict(grade.biggest_reach),
        "summary": grade.summary,
    }


def _exhaustion_to_dict(record: PoolExhausted | None) -> dict[str, Any] | None:
    if record is None:
        return None
    return {
        "message": record.message,
        "overallPick": record.overall_pick,
        "teamIndex": record.team_index,
        "remainingPlayers": record.remaining_players,
    }


def _gap_to_dict(gap: GradingDataGap) -> dict[str, Any]:
    return {"message": gap.message, "playerId": gap.player_id, "field": gap.field}


def _skip_to_dict(skip: TurnSkipped) -> dict[str, Any]:
    return {"message": skip.message, "overallPick": skip.overall_pick, "teamIndex": skip.team_index}


def result_to_dict(result: DraftResult) -> dict[str, Any]:
    return {
        "settings": result.settings.to_dict(),
        "seed": result.seed,
        "picks": [pick_to_dict(p) for p in result.picks],
        "rosters": [roster_to_dict(r) for r in result.rosters],
        "grades": [grade_to_dict(g) for g in result.grades],
        "truncated": result.truncated,
        "exhaustion": _exhaustion_to_dict(result.exhaustion),
        "dataGaps": [_gap_to_dict(g) for g in result.data_gaps],
        "leagueSteals": [pick_to_dict(p) for p in result.league_steals],
        "skippedTurns": [_skip_to_dict(s) for s in result.skipped_turns],
    }


def result_to_json(result: DraftResult, *, indent: int | None = 2) -> str:
    return json.dumps(result_to_dict(result), indent=indent, sort_keys=True)
