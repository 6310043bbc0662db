import pytest

from fantasy_mock_draft.domain.player import POSITION_ORDER, Player, Position, ScoringFormat, parse_position


class TestParsePosition:
    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            ("QB", Position.QB),
            (" wr ", Position.WR),
            ("D/ST", Position.DST),
            ("DEF", Position.DST),
            ("dst", Position.DST),
            ("PK", Position.K),
            ("k", Position.K),
        ],
    )
    def test_known_values(self, raw: str, expected: Position) -> None:
        assert parse_position(raw) is expected

    def test_unknown_raises(self) -> None:
        with pytest.raises(ValueError):
            parse_position("OL")


class TestPlayer:
    def test_projection_by_format(self) -> None:
        player = Player(
            player_id="p1",
            name="Test Back",
            position=Position.RB,
            team_abbr="ATL",
            projected_points={ScoringFormat.PPR: 250.0},
        )
        assert player.projection(ScoringFormat.PPR) == 250.0
        assert player.projection(ScoringFormat.STANDARD) is None

    def test_defaults(self) -> None:
        player = Player(player_id="p1", name="Test", position=Position.K, team_abbr="BAL")
        assert player.adp is None
        assert player.bye_week is None
        assert dict(player.projected_points) == {}

    def test_frozen(self) -> None:
        player = Player(player_id="p1", name="Test", position=Position.K, team_abbr="BAL")
        with pytest.raises(AttributeError):
            player.adp = 3.0  # type: ignore[misc]


def test_position_order_covers_every_position() -> None:
    assert set(POSITION_ORDER) == set(Position)
