from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from fantasy_mock_draft.domain.errors import GradingDataGap, PoolExhausted, TurnSkipped
    from fantasy_mock_draft.domain.player import Player, Position
    from fantasy_mock_draft.domain.settings import MockDraftSettings, Strategy


@dataclass(frozen=True)
class TeamRosterState:
    """Snapshot of one team's roster.

    ``slots`` maps slot name to the drafted player id (None while open) in
    schema order. Snapshots are never mutated; applying a pick returns a new one.
    """

    team_index: int
    strategy: Strategy
    total_rounds: int
    slots: dict[str, str | None]
    counts: dict[Position, int]
    picks_made: int = 0

    def count(self, position: Position) -> int:
        return self.counts.get(position, 0)

    def player_ids(self) -> tuple[str, ...]:
        return tuple(pid for pid in self.slots.values() if pid is not None)


@dataclass(frozen=True)
class Pick:
    overall_pick: int
    round_number: int
    pick_in_round: int
    team_index: int
    player: Player
    slot: str
    strategy: Strategy
    reason: str = ""

    @property
    def adp_delta(self) -> float | None:
        """Raw picks-after-ADP; positive when the player fell."""
        if self.player.adp is None:
            return None
        return round(self.overall_pick - self.player.adp, 1)


@dataclass(frozen=True)
class PickValue:
    overall_pick: int
    round_number: int
    player_id: str
    player_name: str
    value_delta: float


@dataclass(frozen=True)
class TeamGrade:
    team_index: int
    strategy: Strategy
    total_projected_points: float
    value_score: float
    letter_grade: str
    best_value_pick: PickValue | None
    biggest_reach: PickValue | None
    summary: str = ""


@dataclass(frozen=True)
class DraftResult:
    settings: MockDraftSettings
    seed: int
    picks: tuple[Pick, ...]
    rosters: tuple[TeamRosterState, ...]
    grades: tuple[TeamGrade, ...]
    truncated: bool = False
    exhaustion: PoolExhausted | None = None
    data_gaps: tuple[GradingDataGap, ...] = ()
    league_steals: tuple[Pick, ...] = field(default_factory=tuple)
    skipped_turns: tuple[TurnSkipped, ...] = ()

    def team_picks(self, team_index: int) -> tuple[Pick, ...]:
        return tuple(p for p in self.picks if p.team_index == team_index)

    def roster(self, team_index: int) -> TeamRosterState:
        for state in self.rosters:
            if state.team_index == team_index:
                return state
        msg = f"No roster for team {team_index}"
        raise KeyError(msg)

    def grade(self, team_index: int) -> TeamGrade | None:
        for grade in self.grades:
            if grade.team_index == team_index:
                return grade
        return None
