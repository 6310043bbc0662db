"""Bundled consensus rankings used when no player file is configured.

Named players carry hand-set ADP/projection curves per position; each
position is then padded with generic depth players so every supported
league size can complete its draft.
"""

from __future__ import annotations

import re
from functools import cache

from fantasy_mock_draft.domain.player import Player, Position, ScoringFormat
from fantasy_mock_draft.players.pool import InMemoryPlayerPool

TEAM_CODES: tuple[str, ...] = (
    "ARI", "ATL", "BAL", "BUF", "CAR", "CHI", "CIN", "CLE",
    "DAL", "DEN", "DET", "GB", "HOU", "IND", "JAX", "KC",
    "LAC", "LAR", "LV", "MIA", "MIN", "NE", "NO", "NYG",
    "NYJ", "PHI", "PIT", "SEA", "SF", "TB", "TEN", "WAS",
)  # fmt: skip

TEAM_NAMES: dict[str, str] = {
    "ARI": "Arizona Cardinals",
    "ATL": "Atlanta Falcons",
    "BAL": "Baltimore Ravens",
    "BUF": "Buffalo Bills",
    "CAR": "Carolina Panthers",
    "CHI": "Chicago Bears",
    "CIN": "Cincinnati Bengals",
    "CLE": "Cleveland Browns",
    "DAL": "Dallas Cowboys",
    "DEN": "Denver Broncos",
    "DET": "Detroit Lions",
    "GB": "Green Bay Packers",
    "HOU": "Houston Texans",
    "IND": "Indianapolis Colts",
    "JAX": "Jacksonville Jaguars",
    "KC": "Kansas City Chiefs",
    "LAC": "Los Angeles Chargers",
    "LAR": "Los Angeles Rams",
    "LV": "Las Vegas Raiders",
    "MIA": "Miami Dolphins",
    "MIN": "Minnesota Vikings",
    "NE": "New England Patriots",
    "NO": "New Orleans Saints",
    "NYG": "New York Giants",
    "NYJ": "New York Jets",
    "PHI": "Philadelphia Eagles",
    "PIT": "Pittsburgh Steelers",
    "SEA": "Seattle Seahawks",
    "SF": "San Francisco 49ers",
    "TB": "Tampa Bay Buccaneers",
    "TEN": "Tennessee Titans",
    "WAS": "Washington Commanders",
}

BYE_WEEKS: dict[str, int] = {
    "ATL": 5, "CHI": 5, "GB": 5, "PIT": 5,
    "HOU": 6, "MIN": 6,
    "BAL": 7, "BUF": 7,
    "ARI": 8, "DET": 8, "JAX": 8, "LV": 8, "LAR": 8, "SEA": 8,
    "CLE": 9, "NYJ": 9, "PHI": 9, "TB": 9,
    "CIN": 10, "DAL": 10, "KC": 10, "TEN": 10,
    "IND": 11, "NO": 11,
    "DEN": 12, "LAC": 12, "MIA": 12, "WAS": 12,
    "CAR": 14, "NE": 14, "NYG": 14, "SF": 14,
}  # fmt: skip

QB_NAMES: tuple[tuple[str, str], ...] = (
    ("Josh Allen", "BUF"),
    ("Lamar Jackson", "BAL"),
    ("Jalen Hurts", "PHI"),
    ("Patrick Mahomes", "KC"),
    ("Joe Burrow", "CIN"),
    ("Jayden Daniels", "WAS"),
    ("C.J. Stroud", "HOU"),
    ("Dak Prescott", "DAL"),
    ("Justin Herbert", "LAC"),
    ("Kyler Murray", "ARI"),
    ("Trevor Lawrence", "JAX"),
    ("Jordan Love", "GB"),
    ("Brock Purdy", "SF"),
    ("Caleb Williams", "CHI"),
    ("Drake Maye", "NE"),
    ("Bo Nix", "DEN"),
    ("Tua Tagovailoa", "MIA"),
    ("J.J. McCarthy", "MIN"),
    ("Baker Mayfield", "TB"),
    ("Anthony Richardson", "IND"),
    ("Geno Smith", "SEA"),
    ("Cam Ward", "TEN"),
    ("Jaxson Dart", "NYG"),
    ("Daniel Jones", "IND"),
)

RB_NAMES: tuple[tuple[str, str], ...] = (
    ("Bijan Robinson", "ATL"),
    ("Christian McCaffrey", "SF"),
    ("Breece Hall", "NYJ"),
    ("Saquon Barkley", "PHI"),
    ("Jahmyr Gibbs", "DET"),
    ("Jonathan Taylor", "IND"),
    ("De'Von Achane", "MIA"),
    ("Kyren Williams", "LAR"),
    ("Josh Jacobs", "GB"),
    ("Kenneth Walker III", "SEA"),
    ("Isiah Pacheco", "KC"),
    ("James Cook", "BUF"),
    ("Alvin Kamara", "NO"),
    ("Joe Mixon", "HOU"),
    ("Derrick Henry", "BAL"),
    ("Rachaad White", "TB"),
    ("J.K. Dobbins", "DEN"),
    ("Tony Pollard", "TEN"),
    ("D'Andre Swift", "CHI"),
    ("Najee Harris", "PIT"),
    ("Travis Etienne Jr.", "JAX"),
    ("Jerome Ford", "CLE"),
    ("Brian Robinson Jr.", "WAS"),
    ("Zach Charbonnet", "SEA"),
    ("Tyjae Spears", "TEN"),
    ("Rico Dowdle", "DAL"),
    ("Trey Benson", "ARI"),
    ("Tyler Allgeier", "ATL"),
)

WR_NAMES: tuple[tuple[str, str], ...] = (
    ("Justin Jefferson", "MIN"),
    ("CeeDee Lamb", "DAL"),
    ("Ja'Marr Chase", "CIN"),
    ("Amon-Ra St. Brown", "DET"),
    ("Tyreek Hill", "MIA"),
    ("A.J. Brown", "PHI"),
    ("Puka Nacua", "LAR"),
    ("Garrett Wilson", "NYJ"),
    ("Drake London", "ATL"),
    ("Nico Collins", "HOU"),
    ("Marvin Harrison Jr.", "ARI"),
    ("Brandon Aiyuk", "SF"),
    ("DJ Moore", "CHI"),
    ("DK Metcalf", "SEA"),
    ("DeVonta Smith", "PHI"),
    ("Rashee Rice", "KC"),
    ("Chris Olave", "NO"),
    ("Jaylen Waddle", "MIA"),
    ("Zay Flowers", "BAL"),
    ("Terry McLaurin", "WAS"),
    ("George Pickens", "PIT"),
    ("Rome Odunze", "CHI"),
    ("Tank Dell", "HOU"),
    ("Xavier Worthy", "KC"),
    ("Keenan Allen", "CHI"),
    ("Courtland Sutton", "DEN"),
    ("Jaxon Smith-Njigba", "SEA"),
    ("Rashid Shaheed", "NO"),
    ("Jordan Addison", "MIN"),
    ("Calvin Ridley", "TEN"),
    ("Malik Nabers", "NYG"),
    ("Ladd McConkey", "LAC"),
    ("Jerry Jeudy", "CLE"),
    ("Christian Kirk", "JAX"),
    ("DeAndre Hopkins", "TEN"),
    ("Mike Evans", "TB"),
    ("Chris Godwin", "TB"),
    ("Jameson Williams", "DET"),
    ("Amari Cooper", "BUF"),
    ("Stefon Diggs", "HOU"),
)

TE_NAMES: tuple[tuple[str, str], ...] = (
    ("Sam LaPorta", "DET"),
    ("Travis Kelce", "KC"),
    ("Trey McBride", "ARI"),
    ("George Kittle", "SF"),
    ("Mark Andrews", "BAL"),
    ("Dalton Kincaid", "BUF"),
    ("Jake Ferguson", "DAL"),
    ("Evan Engram", "JAX"),
    ("Dallas Goedert", "PHI"),
    ("T.J. Hockenson", "MIN"),
    ("Kyle Pitts", "ATL"),
    ("David Njoku", "CLE"),
    ("Cole Kmet", "CHI"),
    ("Pat Freiermuth", "PIT"),
    ("Tyler Higbee", "LAR"),
    ("Chigoziem Okonkwo", "TEN"),
)

DST_CODES: tuple[str, ...] = (
    "SF", "BAL", "BUF", "DAL", "KC", "NYJ", "PIT", "CLE",
    "PHI", "MIA", "DET", "HOU", "SEA", "DEN", "LAR", "MIN",
)  # fmt: skip

KICKER_NAMES: tuple[tuple[str, str], ...] = (
    ("Justin Tucker", "BAL"),
    ("Brandon Aubrey", "DAL"),
    ("Harrison Butker", "KC"),
    ("Jake Elliott", "PHI"),
    ("Tyler Bass", "BUF"),
    ("Younghoe Koo", "ATL"),
    ("Cameron Dicker", "LAC"),
    ("Jason Sanders", "MIA"),
    ("Chase McLaughlin", "TB"),
    ("Evan McPherson", "CIN"),
    ("Ka'imi Fairbairn", "HOU"),
    ("Greg Zuerlein", "NYJ"),
)


def slugify(value: str) -> str:
    return re.sub(r"[^a-z0-9]+", "-", value.lower()).strip("-")


def _round1(value: float) -> float:
    return round(value, 1)


def _projections(std: float, half: float, ppr: float) -> dict[ScoringFormat, float]:
    return {
        ScoringFormat.STANDARD: _round1(std),
        ScoringFormat.HALF_PPR: _round1(half),
        ScoringFormat.PPR: _round1(ppr),
    }


def _skill_players(
    names: tuple[tuple[str, str], ...],
    position: Position,
    adp_start: float,
    adp_step: float,
    starts: tuple[float, float, float],
    drops: tuple[float, float, float],
) -> list[Player]:
    std_start, half_start, ppr_start = starts
    std_drop, half_drop, ppr_drop = drops
    players: list[Player] = []
    for index, (name, team) in enumerate(names):
        players.append(
            Player(
                player_id=f"{slugify(name)}-{team.lower()}-{position.value.lower()}",
                name=name,
                position=position,
                team_abbr=team,
                bye_week=BYE_WEEKS.get(team),
                adp=_round1(adp_start + index * adp_step),
                projected_points=_projections(
                    max(95.0, std_start - index * std_drop),
                    max(110.0, half_start - index * half_drop),
                    max(120.0, ppr_start - index * ppr_drop),
                ),
            )
        )
    return players


def _defenses() -> list[Player]:
    players: list[Player] = []
    for index, team in enumerate(DST_CODES):
        points = 120 - index * 2.1
        players.append(
            Player(
                player_id=f"{team.lower()}-dst",
                name=f"{TEAM_NAMES.get(team, team)} D/ST",
                position=Position.DST,
                team_abbr=team,
                bye_week=BYE_WEEKS.get(team),
                adp=_round1(145 + index * 2.2),
                projected_points=_projections(points, points, points),
            )
        )
    return players


def _kickers() -> list[Player]:
    players: list[Player] = []
    for index, (name, team) in enumerate(KICKER_NAMES):
        points = 132 - index * 1.8
        players.append(
            Player(
                player_id=f"{slugify(name)}-{team.lower()}-k",
                name=name,
                position=Position.K,
                team_abbr=team,
                bye_week=BYE_WEEKS.get(team),
                adp=_round1(165 + index * 2.4),
                projected_points=_projections(points, points, points),
            )
        )
    return players


def _fill_depth(
    players: list[Player],
    position: Position,
    target: int,
    adp_start: float,
    adp_step: float,
    starts: tuple[float, float, float],
) -> None:
    std_start, half_start, ppr_start = starts
    count = sum(1 for p in players if p.position is position)
    created = 1
    while count < target:
        team = TEAM_CODES[(count + created) % len(TEAM_CODES)]
        if position is Position.DST:
            name = f"{TEAM_NAMES.get(team, team)} D/ST Depth {created}"
        else:
            name = f"{team} {position.value} Depth {created}"
        penalty = (count - target / 2) * 0.85
        players.append(
            Player(
                player_id=f"{position.value.lower()}-depth-{team.lower()}-{created}",
                name=name,
                position=position,
                team_abbr=team,
                bye_week=BYE_WEEKS.get(team),
                adp=_round1(adp_start + count * adp_step),
                projected_points=_projections(
                    max(50.0, std_start - penalty),
                    max(58.0, half_start - penalty),
                    max(64.0, ppr_start - penalty),
                ),
            )
        )
        count += 1
        created += 1


@cache
def consensus_players() -> tuple[Player, ...]:
    players: list[Player] = [
        *_skill_players(QB_NAMES, Position.QB, 24, 4.8, (305, 308, 312), (4.1, 4.1, 4.1)),
        *_skill_players(RB_NAMES, Position.RB, 1, 3.1, (242, 258, 272), (3.2, 3.1, 2.9)),
        *_skill_players(WR_NAMES, Position.WR, 2, 2.9, (212, 248, 286), (2.7, 2.9, 3.1)),
        *_skill_players(TE_NAMES, Position.TE, 28, 5.9, (145, 166, 183), (2.7, 2.9, 3.1)),
        *_defenses(),
        *_kickers(),
    ]
    _fill_depth(players, Position.QB, 36, 170, 2.2, (170, 170, 170))
    _fill_depth(players, Position.RB, 92, 115, 1.65, (132, 145, 158))
    _fill_depth(players, Position.WR, 102, 105, 1.55, (125, 142, 165))
    _fill_depth(players, Position.TE, 36, 175, 2.1, (105, 112, 120))
    _fill_depth(players, Position.DST, 20, 172, 1.7, (98, 98, 98))
    _fill_depth(players, Position.K, 20, 185, 1.8, (103, 103, 103))

    unique: dict[str, Player] = {}
    for player in players:
        unique.setdefault(player.player_id, player)
    return tuple(sorted(unique.values(), key=lambda p: (p.adp or 0.0, p.player_id)))


def consensus_pool() -> InMemoryPlayerPool:
    return InMemoryPlayerPool(consensus_players())
