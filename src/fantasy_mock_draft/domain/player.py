from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Mapping


class Position(Enum):
    QB = "QB"
    RB = "RB"
    WR = "WR"
    TE = "TE"
    DST = "DST"
    K = "K"


class ScoringFormat(Enum):
    PPR = "ppr"
    HALF_PPR = "half_ppr"
    STANDARD = "standard"


# Canonical display and tie-break order for positions.
POSITION_ORDER: tuple[Position, ...] = (
    Position.QB,
    Position.RB,
    Position.WR,
    Position.TE,
    Position.DST,
    Position.K,
)

_POSITION_ALIASES: dict[str, Position] = {
    "D/ST": Position.DST,
    "DEF": Position.DST,
    "PK": Position.K,
}


def parse_position(raw: str) -> Position:
    value = raw.strip().upper()
    if value in _POSITION_ALIASES:
        return _POSITION_ALIASES[value]
    return Position(value)


@dataclass(frozen=True)
class Player:
    """A draftable player as published by a ranking source.

    Attributes:
        player_id: Unique, stable identifier. Picks reference players by it.
        name: Display name.
        position: Fantasy position.
        team_abbr: NFL team abbreviation.
        bye_week: Bye week, if known.
        adp: Market-consensus average draft position; None when the market has no consensus.
        projected_points: Season projection keyed by scoring format.
    """

    player_id: str
    name: str
    position: Position
    team_abbr: str
    bye_week: int | None = None
    adp: float | None = None
    projected_points: Mapping[ScoringFormat, float] = field(default_factory=dict)

    def projection(self, scoring: ScoringFormat) -> float | None:
        return self.projected_points.get(scoring)
