from __future__ import annotations

import pytest

from fantasy_mock_draft.domain.draft import TeamRosterState
from fantasy_mock_draft.domain.player import Position
from fantasy_mock_draft.domain.settings import Strategy
from fantasy_mock_draft.draft.roster import (
    DEFAULT_SCHEMA,
    SlotKind,
    apply_pick,
    eligible_positions,
    filled_starter_slots,
    new_roster,
    open_needs,
    open_starter_positions,
    unfilled_starter_count,
)
from fantasy_mock_draft.exceptions import RosterFullError
from tests.helpers import make_player


def _draft(state: TeamRosterState, *positions: Position) -> TeamRosterState:
    for i, position in enumerate(positions, start=state.picks_made + 1):
        state, _ = apply_pick(state, make_player(f"{position.value.lower()}{i}", position))
    return state


class TestSchema:
    def test_slot_names(self) -> None:
        names = [spec.name for spec in DEFAULT_SCHEMA.slot_specs(15)]
        assert names == ["QB", "RB1", "RB2", "WR1", "WR2", "TE", "FLEX", "DST", "K"] + [f"BN{i}" for i in range(1, 7)]

    def test_bench_capacity(self) -> None:
        assert DEFAULT_SCHEMA.starters_count == 9
        assert DEFAULT_SCHEMA.bench_capacity(12) == 3
        assert DEFAULT_SCHEMA.bench_capacity(18) == 9

    @pytest.mark.parametrize("rounds", [12, 15, 18])
    def test_caps_allow_a_full_roster(self, rounds: int) -> None:
        assert sum(DEFAULT_SCHEMA.cap_for(p, rounds) for p in Position) >= rounds

    def test_caps_by_rounds(self) -> None:
        assert DEFAULT_SCHEMA.cap_for(Position.RB, 12) == 5
        assert DEFAULT_SCHEMA.cap_for(Position.QB, 18) == 3
        assert DEFAULT_SCHEMA.cap_for(Position.K, 15) == 1

    def test_earliest_rounds(self) -> None:
        assert DEFAULT_SCHEMA.earliest_round(Position.DST, 15) == 9
        assert DEFAULT_SCHEMA.earliest_round(Position.K, 15) == 11
        assert DEFAULT_SCHEMA.earliest_round(Position.WR, 15) == 1

    def test_flex_kind(self) -> None:
        assert DEFAULT_SCHEMA.spec_for("FLEX", 15).kind is SlotKind.FLEX
        with pytest.raises(KeyError):
            DEFAULT_SCHEMA.spec_for("BN7", 15)

    def test_slot_specs_reused_per_round_count(self) -> None:
        assert DEFAULT_SCHEMA.slot_specs(15) is DEFAULT_SCHEMA.slot_specs(15)
        assert DEFAULT_SCHEMA.slot_specs(12) is not DEFAULT_SCHEMA.slot_specs(15)


class TestApplyPick:
    def test_returns_new_snapshot(self) -> None:
        state = new_roster(1, Strategy.BALANCED, 15)
        updated, slot = apply_pick(state, make_player("rb1", Position.RB))
        assert slot == "RB1"
        assert state.picks_made == 0
        assert state.slots["RB1"] is None
        assert updated.picks_made == 1
        assert updated.slots["RB1"] == "rb1"
        assert updated.count(Position.RB) == 1

    def test_dedicated_then_flex_then_bench(self) -> None:
        state = new_roster(1, Strategy.HERO_RB, 15)
        slots: list[str] = []
        for i in range(4):
            state, slot = apply_pick(state, make_player(f"rb{i}", Position.RB))
            slots.append(slot)
        assert slots == ["RB1", "RB2", "FLEX", "BN1"]

    def test_cap_enforced(self) -> None:
        state = _draft(new_roster(1, Strategy.BALANCED, 12), Position.TE, Position.TE)
        with pytest.raises(RosterFullError, match="TE cap"):
            apply_pick(state, make_player("te3", Position.TE))

    def test_no_slot_for_kicker_once_filled(self) -> None:
        state = _draft(new_roster(1, Strategy.BALANCED, 12), Position.K)
        with pytest.raises(RosterFullError):
            apply_pick(state, make_player("k2", Position.K))


class TestOpenNeeds:
    def test_first_round_skips_kicker_and_defense(self) -> None:
        state = new_roster(1, Strategy.BALANCED, 15)
        assert open_needs(state) == (Position.QB, Position.RB, Position.WR, Position.TE)

    def test_kicker_allowed_from_earliest_round(self) -> None:
        state = _draft(new_roster(1, Strategy.BALANCED, 15), *([Position.WR] * 6), *([Position.RB] * 4))
        assert state.picks_made == 10
        needs = open_needs(state)
        assert Position.K in needs
        assert Position.DST in needs

    def test_capped_position_removed(self) -> None:
        state = _draft(new_roster(1, Strategy.BALANCED, 12), Position.QB, Position.QB)
        assert Position.QB not in open_needs(state)

    def test_forced_fill_skips_bench(self) -> None:
        picks = [Position.QB, Position.QB, Position.TE, Position.TE] + [Position.RB] * 4
        state = _draft(new_roster(1, Strategy.BALANCED, 12), *picks)
        assert unfilled_starter_count(state) == 4
        assert open_needs(state) == (Position.WR, Position.DST, Position.K)

    def test_full_roster_raises(self) -> None:
        state = new_roster(1, Strategy.BALANCED, 12)
        full = TeamRosterState(
            team_index=1,
            strategy=Strategy.BALANCED,
            total_rounds=12,
            slots={name: f"p{i}" for i, name in enumerate(state.slots)},
            counts=dict(state.counts),
            picks_made=12,
        )
        with pytest.raises(RosterFullError):
            open_needs(full)


class TestEligiblePositions:
    def test_ignores_draft_timing(self) -> None:
        state = new_roster(1, Strategy.BALANCED, 15)
        assert eligible_positions(state) == (
            Position.QB,
            Position.RB,
            Position.WR,
            Position.TE,
            Position.DST,
            Position.K,
        )

    def test_open_starter_positions(self) -> None:
        state = _draft(new_roster(1, Strategy.BALANCED, 15), Position.QB, Position.RB)
        assert open_starter_positions(state) == frozenset(
            {Position.RB, Position.WR, Position.TE, Position.DST, Position.K}
        )


class TestFilledStarterSlots:
    def test_counts_dedicated_slots_only(self) -> None:
        state = _draft(new_roster(1, Strategy.BALANCED, 15), Position.WR, Position.WR, Position.WR)
        assert filled_starter_slots(state, Position.WR) == 2
        assert filled_starter_slots(state, Position.RB) == 0
