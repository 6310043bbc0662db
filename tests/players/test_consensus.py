from collections import Counter

from fantasy_mock_draft.domain.player import Position, ScoringFormat
from fantasy_mock_draft.players.consensus import consensus_players, consensus_pool, slugify


class TestConsensusPlayers:
    def test_position_depth(self) -> None:
        counts = Counter(p.position for p in consensus_players())
        assert counts == {
            Position.QB: 36,
            Position.RB: 92,
            Position.WR: 102,
            Position.TE: 36,
            Position.DST: 20,
            Position.K: 20,
        }

    def test_ids_unique(self) -> None:
        ids = [p.player_id for p in consensus_players()]
        assert len(ids) == len(set(ids))

    def test_every_player_has_adp_and_projections(self) -> None:
        for player in consensus_players():
            assert player.adp is not None
            for fmt in ScoringFormat:
                assert player.projection(fmt) is not None

    def test_top_of_board(self) -> None:
        first = consensus_pool().list_players(ScoringFormat.PPR)[0]
        assert first.name == "Bijan Robinson"
        assert first.adp == 1.0

    def test_enough_players_for_largest_league(self) -> None:
        assert len(consensus_pool()) >= 14 * 18


def test_slugify() -> None:
    assert slugify("Ja'Marr Chase") == "ja-marr-chase"
