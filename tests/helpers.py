from fantasy_mock_draft.domain.draft import Pick
from fantasy_mock_draft.domain.player import Player, Position, ScoringFormat
from fantasy_mock_draft.domain.settings import MockDraftSettings, Strategy
from fantasy_mock_draft.players.pool import InMemoryPlayerPool


def make_player(
    player_id: str,
    position: Position = Position.RB,
    *,
    adp: float | None = None,
    projection: float | None = 100.0,
    name: str | None = None,
    team: str = "KC",
    bye_week: int | None = None,
) -> Player:
    """Build a player with the same projection in every scoring format."""
    projected = {} if projection is None else {fmt: projection for fmt in ScoringFormat}
    return Player(
        player_id=player_id,
        name=name or player_id.title(),
        position=position,
        team_abbr=team,
        bye_week=bye_week,
        adp=adp,
        projected_points=projected,
    )


def make_pick(
    overall: int,
    team: int,
    player: Player,
    *,
    teams: int = 2,
    slot: str = "BN1",
    strategy: Strategy = Strategy.BALANCED,
) -> Pick:
    round_number = (overall - 1) // teams + 1
    return Pick(
        overall_pick=overall,
        round_number=round_number,
        pick_in_round=overall - (round_number - 1) * teams,
        team_index=team,
        player=player,
        slot=slot,
        strategy=strategy,
    )


def make_settings(**overrides: object) -> MockDraftSettings:
    values: dict[str, object] = {
        "teams": 10,
        "rounds": 15,
        "draft_slot": 4,
        "scoring": ScoringFormat.PPR,
        "strategy": Strategy.BALANCED,
        "seed": "abc",
    }
    values.update(overrides)
    return MockDraftSettings(**values)  # type: ignore[arg-type]


def skill_pool(count: int) -> InMemoryPlayerPool:
    """Small pool of skill players with ascending ADP, cycling RB, WR, QB, TE."""
    positions = (Position.RB, Position.WR, Position.QB, Position.TE)
    players = [
        make_player(f"p{i:03d}", positions[i % len(positions)], adp=float(i + 1), projection=300.0 - i)
        for i in range(count)
    ]
    return InMemoryPlayerPool(players)
