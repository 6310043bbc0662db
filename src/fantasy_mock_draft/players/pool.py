from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol

from fantasy_mock_draft.domain.player import Player, Position, ScoringFormat

if TYPE_CHECKING:
    from collections.abc import Iterable

logger = logging.getLogger(__name__)

# Positions whose projection-versus-ADP gap is read as boom potential.
UPSIDE_POSITIONS: frozenset[Position] = frozenset({Position.QB, Position.RB, Position.WR, Position.TE})


class PlayerPool(Protocol):
    """Supplies the ranked, immutable set of draftable players."""

    def list_players(self, scoring: ScoringFormat) -> list[Player]: ...


class InMemoryPlayerPool:
    def __init__(self, players: Iterable[Player]) -> None:
        self._players: tuple[Player, ...] = tuple(players)

    def list_players(self, scoring: ScoringFormat) -> list[Player]:
        return sorted(self._players, key=lambda p: (p.adp if p.adp is not None else float("inf"), p.player_id))

    def __len__(self) -> int:
        return len(self._players)


@dataclass(frozen=True)
class PlayerBoard:
    """A draft-ready view of a pool for one scoring format.

    Players are ordered by effective ADP then id. Players without an ADP are
    ranked at ``default_adp`` (the last pick of the draft).
    """

    players: tuple[Player, ...]
    scoring: ScoringFormat
    default_adp: float
    upside: dict[str, float]

    def effective_adp(self, player: Player) -> float:
        return player.adp if player.adp is not None else self.default_adp

    def upside_of(self, player: Player) -> float:
        return self.upside.get(player.player_id, 0.0)

    def projection(self, player: Player) -> float:
        return player.projection(self.scoring) or 0.0


def upside_index(players: tuple[Player, ...], scoring: ScoringFormat, default_adp: float) -> dict[str, float]:
    """Projection share within position minus the share of the board already gone at the player's ADP.

    Late-ADP players with strong projections score positive; players priced
    at their projection score near zero.
    """
    ceilings: dict[Position, float] = {}
    for p in players:
        proj = p.projection(scoring) or 0.0
        if proj > ceilings.get(p.position, 1.0):
            ceilings[p.position] = proj
    max_adp = max((p.adp if p.adp is not None else default_adp for p in players), default=1.0)
    max_adp = max(max_adp, 1.0)

    upside: dict[str, float] = {}
    for p in players:
        if p.position not in UPSIDE_POSITIONS:
            upside[p.player_id] = 0.0
            continue
        proj_share = (p.projection(scoring) or 0.0) / ceilings.get(p.position, 1.0)
        adp = p.adp if p.adp is not None else default_adp
        depth = adp / max_adp
        upside[p.player_id] = max(-1.0, min(1.0, proj_share - (1.0 - depth)))
    return upside


def build_board(pool: PlayerPool, scoring: ScoringFormat, total_picks: int) -> PlayerBoard:
    """Snapshot a pool into a ``PlayerBoard``, dropping duplicate ids (first wins)."""
    default_adp = float(total_picks)
    seen: set[str] = set()
    unique: list[Player] = []
    for player in pool.list_players(scoring):
        if player.player_id in seen:
            logger.warning("Duplicate player id %s in pool; keeping first entry", player.player_id)
            continue
        seen.add(player.player_id)
        unique.append(player)

    missing_adp = [p.player_id for p in unique if p.adp is None]
    if missing_adp:
        logger.debug("%d players without ADP ranked at pick %d", len(missing_adp), total_picks)

    players = tuple(sorted(unique, key=lambda p: (p.adp if p.adp is not None else default_adp, p.player_id)))
    logger.debug("Built %s board with %d players", scoring.value, len(players))
    return PlayerBoard(
        players=players,
        scoring=scoring,
        default_adp=default_adp,
        upside=upside_index(players, scoring, default_adp),
    )
