from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from enum import Enum
from functools import cache
from typing import TYPE_CHECKING

from fantasy_mock_draft.domain.draft import TeamRosterState
from fantasy_mock_draft.domain.player import POSITION_ORDER, Position
from fantasy_mock_draft.exceptions import RosterFullError

if TYPE_CHECKING:
    from fantasy_mock_draft.domain.player import Player
    from fantasy_mock_draft.domain.settings import Strategy

logger = logging.getLogger(__name__)


class SlotKind(Enum):
    STARTER = "starter"
    FLEX = "flex"
    BENCH = "bench"


@dataclass(frozen=True)
class SlotSpec:
    name: str
    kind: SlotKind
    eligible: frozenset[Position]


@cache
def _slot_specs(
    starters: tuple[tuple[Position, int], ...],
    flex_count: int,
    flex_positions: frozenset[Position],
    rounds: int,
) -> tuple[SlotSpec, ...]:
    specs: list[SlotSpec] = []
    for position, count in starters:
        for i in range(1, count + 1):
            name = position.value if count == 1 else f"{position.value}{i}"
            specs.append(SlotSpec(name=name, kind=SlotKind.STARTER, eligible=frozenset({position})))
        if position is Position.TE:
            for i in range(1, flex_count + 1):
                name = "FLEX" if flex_count == 1 else f"FLEX{i}"
                specs.append(SlotSpec(name=name, kind=SlotKind.FLEX, eligible=flex_positions))
    bench = max(0, rounds - sum(count for _, count in starters) - flex_count)
    for i in range(1, bench + 1):
        specs.append(SlotSpec(name=f"BN{i}", kind=SlotKind.BENCH, eligible=frozenset(POSITION_ORDER)))
    return tuple(specs)


@cache
def _slot_index(
    starters: tuple[tuple[Position, int], ...],
    flex_count: int,
    flex_positions: frozenset[Position],
    rounds: int,
) -> dict[str, SlotSpec]:
    return {spec.name: spec for spec in _slot_specs(starters, flex_count, flex_positions, rounds)}


@dataclass(frozen=True)
class RosterSlotSchema:
    starters: tuple[tuple[Position, int], ...]
    flex_count: int
    flex_positions: frozenset[Position]
    position_caps: dict[int, dict[Position, int]] = field(default_factory=dict)
    earliest_round_fraction: dict[Position, float] = field(default_factory=dict)
    roster_targets: dict[int, dict[Position, int]] = field(default_factory=dict)

    @property
    def starters_count(self) -> int:
        return sum(count for _, count in self.starters) + self.flex_count

    def bench_capacity(self, rounds: int) -> int:
        return max(0, rounds - self.starters_count)

    def slot_specs(self, rounds: int) -> tuple[SlotSpec, ...]:
        return _slot_specs(self.starters, self.flex_count, self.flex_positions, rounds)

    def spec_for(self, slot_name: str, rounds: int) -> SlotSpec:
        spec = _slot_index(self.starters, self.flex_count, self.flex_positions, rounds).get(slot_name)
        if spec is None:
            msg = f"Unknown slot {slot_name!r}"
            raise KeyError(msg)
        return spec

    def starter_slots_for(self, position: Position) -> int:
        return sum(count for pos, count in self.starters if pos is position)

    def cap_for(self, position: Position, rounds: int) -> int:
        caps = self.position_caps.get(rounds)
        if caps is not None and position in caps:
            return caps[position]
        flex = self.flex_count if position in self.flex_positions else 0
        return self.starter_slots_for(position) + flex + self.bench_capacity(rounds)

    def earliest_round(self, position: Position, rounds: int) -> int:
        fraction = self.earliest_round_fraction.get(position)
        if fraction is None:
            return 1
        return max(1, math.ceil(fraction * rounds))

    def target_for(self, position: Position, rounds: int) -> int:
        """Typical count of ``position`` on a well-built roster of ``rounds`` players."""
        targets = self.roster_targets.get(rounds)
        if targets is not None and position in targets:
            return targets[position]
        return self.starter_slots_for(position)


DEFAULT_SCHEMA = RosterSlotSchema(
    starters=(
        (Position.QB, 1),
        (Position.RB, 2),
        (Position.WR, 2),
        (Position.TE, 1),
        (Position.DST, 1),
        (Position.K, 1),
    ),
    flex_count=1,
    flex_positions=frozenset({Position.RB, Position.WR, Position.TE}),
    position_caps={
        12: {Position.QB: 2, Position.RB: 5, Position.WR: 5, Position.TE: 2, Position.DST: 1, Position.K: 1},
        15: {Position.QB: 2, Position.RB: 6, Position.WR: 6, Position.TE: 2, Position.DST: 1, Position.K: 1},
        18: {Position.QB: 3, Position.RB: 7, Position.WR: 7, Position.TE: 3, Position.DST: 1, Position.K: 1},
    },
    earliest_round_fraction={Position.DST: 0.6, Position.K: 0.7},
    roster_targets={
        12: {Position.QB: 1, Position.RB: 4, Position.WR: 4, Position.TE: 2, Position.DST: 1, Position.K: 0},
        15: {Position.QB: 1, Position.RB: 5, Position.WR: 5, Position.TE: 2, Position.DST: 1, Position.K: 1},
        18: {Position.QB: 2, Position.RB: 6, Position.WR: 6, Position.TE: 2, Position.DST: 1, Position.K: 1},
    },
)


def new_roster(
    team_index: int,
    strategy: Strategy,
    rounds: int,
    schema: RosterSlotSchema = DEFAULT_SCHEMA,
) -> TeamRosterState:
    return TeamRosterState(
        team_index=team_index,
        strategy=strategy,
        total_rounds=rounds,
        slots={spec.name: None for spec in schema.slot_specs(rounds)},
        counts={position: 0 for position in POSITION_ORDER},
    )


def _open_specs(state: TeamRosterState, schema: RosterSlotSchema) -> list[SlotSpec]:
    return [spec for spec in schema.slot_specs(state.total_rounds) if state.slots.get(spec.name) is None]


def _has_room(state: TeamRosterState, position: Position, schema: RosterSlotSchema) -> bool:
    return state.count(position) < schema.cap_for(position, state.total_rounds)


def unfilled_starter_count(state: TeamRosterState, schema: RosterSlotSchema = DEFAULT_SCHEMA) -> int:
    return sum(1 for spec in _open_specs(state, schema) if spec.kind is not SlotKind.BENCH)


def open_starter_positions(state: TeamRosterState, schema: RosterSlotSchema = DEFAULT_SCHEMA) -> frozenset[Position]:
    """Positions that still have an open dedicated starter slot."""
    positions: set[Position] = set()
    for spec in _open_specs(state, schema):
        if spec.kind is SlotKind.STARTER:
            positions.update(spec.eligible)
    return frozenset(positions)


def filled_starter_slots(
    state: TeamRosterState,
    position: Position,
    schema: RosterSlotSchema = DEFAULT_SCHEMA,
) -> int:
    return sum(
        1
        for spec in schema.slot_specs(state.total_rounds)
        if spec.kind is SlotKind.STARTER and position in spec.eligible and state.slots.get(spec.name) is not None
    )


def open_needs(state: TeamRosterState, schema: RosterSlotSchema = DEFAULT_SCHEMA) -> tuple[Position, ...]:
    """Positions acceptable for this team's next pick, scarcest first.

    Unfilled dedicated starter slots come first, then FLEX-eligible
    positions, then bench. Bench picks are allowed only while enough picks
    remain to fill every open starter slot; DST and K wait for their
    earliest round unless the pick is forced into a starter slot.
    """
    open_specs = _open_specs(state, schema)
    if not open_specs or state.picks_made >= state.total_rounds:
        msg = f"Team {state.team_index} has no open roster slots"
        raise RosterFullError(msg)

    round_number = state.picks_made + 1
    remaining_after = state.total_rounds - round_number
    unfilled = sum(1 for spec in open_specs if spec.kind is not SlotKind.BENCH)
    forced = remaining_after < unfilled

    ordered: list[Position] = []
    for kind in (SlotKind.STARTER, SlotKind.FLEX, SlotKind.BENCH):
        if kind is SlotKind.BENCH and forced:
            continue
        eligible: set[Position] = set()
        for spec in open_specs:
            if spec.kind is kind:
                eligible.update(spec.eligible)
        for position in POSITION_ORDER:
            if position not in eligible or position in ordered:
                continue
            if not _has_room(state, position, schema):
                continue
            if not forced and round_number < schema.earliest_round(position, state.total_rounds):
                continue
            ordered.append(position)
    return tuple(ordered)


def eligible_positions(state: TeamRosterState, schema: RosterSlotSchema = DEFAULT_SCHEMA) -> tuple[Position, ...]:
    """Every position with an open slot and cap room, ignoring draft-timing conventions."""
    open_specs = _open_specs(state, schema)
    eligible: set[Position] = set()
    for spec in open_specs:
        eligible.update(spec.eligible)
    return tuple(p for p in POSITION_ORDER if p in eligible and _has_room(state, p, schema))


def apply_pick(
    state: TeamRosterState,
    player: Player,
    schema: RosterSlotSchema = DEFAULT_SCHEMA,
) -> tuple[TeamRosterState, str]:
    """Place ``player`` in the first open dedicated slot, else FLEX, else bench."""
    position = player.position
    if not _has_room(state, position, schema):
        msg = f"Team {state.team_index} is at the {position.value} cap"
        raise RosterFullError(msg)

    open_specs = _open_specs(state, schema)
    slot_name: str | None = None
    for kind in (SlotKind.STARTER, SlotKind.FLEX, SlotKind.BENCH):
        for spec in open_specs:
            if spec.kind is kind and position in spec.eligible:
                slot_name = spec.name
                break
        if slot_name is not None:
            break

    if slot_name is None:
        msg = f"Team {state.team_index} has no open slot for {player.name} ({position.value})"
        raise RosterFullError(msg)

    slots = dict(state.slots)
    slots[slot_name] = player.player_id
    counts = dict(state.counts)
    counts[position] = counts.get(position, 0) + 1
    logger.debug("Team %d: %s -> %s", state.team_index, player.player_id, slot_name)
    return (
        TeamRosterState(
            team_index=state.team_index,
            strategy=state.strategy,
            total_rounds=state.total_rounds,
            slots=slots,
            counts=counts,
            picks_made=state.picks_made + 1,
        ),
        slot_name,
    )
