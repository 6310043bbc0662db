from __future__ import annotations

import csv
import logging
from typing import TYPE_CHECKING

from fantasy_mock_draft.domain.player import Player, ScoringFormat, parse_position
from fantasy_mock_draft.exceptions import PlayerDataError
from fantasy_mock_draft.players.pool import InMemoryPlayerPool

if TYPE_CHECKING:
    from pathlib import Path

logger = logging.getLogger(__name__)

_PROJECTION_COLUMNS: dict[ScoringFormat, str] = {
    ScoringFormat.PPR: "proj_ppr",
    ScoringFormat.HALF_PPR: "proj_half_ppr",
    ScoringFormat.STANDARD: "proj_standard",
}

_REQUIRED_COLUMNS: tuple[str, ...] = ("player_id", "name", "position", "team")


def _optional_float(raw: str | None, column: str, line: int) -> float | None:
    if raw is None or not raw.strip():
        return None
    try:
        return float(raw)
    except ValueError as err:
        msg = f"row {line}: invalid {column} {raw!r}"
        raise PlayerDataError(msg) from err


def _optional_int(raw: str | None, column: str, line: int) -> int | None:
    value = _optional_float(raw, column, line)
    return int(value) if value is not None else None


def load_players_file(path: Path) -> list[Player]:
    """Read players from a CSV with a header row.

    Columns: player_id, name, position, team, bye_week, adp, proj_ppr,
    proj_half_ppr, proj_standard. Blank numeric cells mean missing data.
    Lines starting with ``#`` are ignored.
    """
    if not path.is_file():
        msg = f"{path}: no such file"
        raise PlayerDataError(msg)

    players: list[Player] = []
    with path.open(newline="") as f:
        rows = (line for line in f if line.strip() and not line.lstrip().startswith("#"))
        reader = csv.DictReader(rows)
        header = reader.fieldnames or []
        missing = [c for c in _REQUIRED_COLUMNS if c not in header]
        if missing:
            msg = f"{path}: missing columns {', '.join(missing)}"
            raise PlayerDataError(msg)

        for line, row in enumerate(reader, start=1):
            player_id = (row.get("player_id") or "").strip()
            if not player_id:
                msg = f"row {line}: player_id is required"
                raise PlayerDataError(msg)
            try:
                position = parse_position(row.get("position") or "")
            except ValueError as err:
                msg = f"row {line}: unknown position {row.get('position')!r}"
                raise PlayerDataError(msg) from err

            projections: dict[ScoringFormat, float] = {}
            for scoring, column in _PROJECTION_COLUMNS.items():
                value = _optional_float(row.get(column), column, line)
                if value is not None:
                    projections[scoring] = value

            players.append(
                Player(
                    player_id=player_id,
                    name=(row.get("name") or "").strip(),
                    position=position,
                    team_abbr=(row.get("team") or "").strip().upper(),
                    bye_week=_optional_int(row.get("bye_week"), "bye_week", line),
                    adp=_optional_float(row.get("adp"), "adp", line),
                    projected_points=projections,
                )
            )

    logger.debug("Loaded %d players from %s", len(players), path)
    return players


class CsvPlayerPool(InMemoryPlayerPool):
    def __init__(self, path: Path) -> None:
        self._path = path
        super().__init__(load_players_file(path))
