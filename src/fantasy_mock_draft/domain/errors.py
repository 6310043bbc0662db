from dataclasses import dataclass


@dataclass(frozen=True)
class DraftIssue:
    message: str


@dataclass(frozen=True)
class PoolExhausted(DraftIssue):
    overall_pick: int
    team_index: int
    remaining_players: int


@dataclass(frozen=True)
class GradingDataGap(DraftIssue):
    player_id: str
    field: str


@dataclass(frozen=True)
class TurnSkipped(DraftIssue):
    overall_pick: int
    team_index: int
