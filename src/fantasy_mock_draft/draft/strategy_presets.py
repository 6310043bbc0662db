from __future__ import annotations

from dataclasses import dataclass

from fantasy_mock_draft.domain.player import Position
from fantasy_mock_draft.domain.settings import Strategy


@dataclass(frozen=True)
class BiasBand:
    """Positional weights applied while ``round / rounds <= max_fraction``."""

    max_fraction: float
    weights: dict[Position, float]


@dataclass(frozen=True)
class StrategyProfile:
    name: str
    description: str
    bands: tuple[BiasBand, ...]
    elite_qb_bonus: float = 0.0
    elite_qb_max_fraction: float = 0.0
    upside_weight: float = 0.0

    def __post_init__(self) -> None:
        fractions = [band.max_fraction for band in self.bands]
        if fractions != sorted(fractions):
            msg = "bands must be ordered by max_fraction"
            raise ValueError(msg)
        if self.upside_weight < 0:
            msg = "upside_weight must be non-negative"
            raise ValueError(msg)

    def band_weight(self, position: Position, round_fraction: float) -> float:
        for band in self.bands:
            if round_fraction <= band.max_fraction:
                return band.weights.get(position, 0.0)
        return 0.0


STRATEGY_PRESETS: dict[Strategy, StrategyProfile] = {
    Strategy.BALANCED: StrategyProfile(
        name="balanced",
        description="Follows the market with a mild positional-scarcity curve.",
        bands=(
            BiasBand(max_fraction=0.25, weights={Position.RB: 0.05, Position.QB: -0.1, Position.TE: -0.05}),
            BiasBand(max_fraction=0.6, weights={Position.RB: 0.05, Position.WR: 0.03}),
            BiasBand(max_fraction=1.0, weights={}),
        ),
    ),
    Strategy.HERO_RB: StrategyProfile(
        name="hero_rb",
        description="Anchors the roster with an early workhorse RB, then loads up on receivers.",
        bands=(
            BiasBand(max_fraction=0.17, weights={Position.RB: 0.8}),
            BiasBand(max_fraction=0.5, weights={Position.RB: -0.3, Position.WR: 0.1, Position.TE: 0.05}),
            BiasBand(max_fraction=1.0, weights={Position.RB: 0.1}),
        ),
    ),
    Strategy.ZERO_RB: StrategyProfile(
        name="zero_rb",
        description="Fades RB early for elite WR/TE, then attacks RB volume in the middle rounds.",
        bands=(
            BiasBand(max_fraction=0.25, weights={Position.RB: -3.0, Position.WR: 0.25, Position.TE: 0.2}),
            BiasBand(max_fraction=0.5, weights={Position.RB: 0.35}),
            BiasBand(max_fraction=1.0, weights={Position.RB: 0.5}),
        ),
    ),
    Strategy.ELITE_QB: StrategyProfile(
        name="elite_qb",
        description="Secures one of the top two quarterbacks early and an early TE edge.",
        bands=(
            BiasBand(max_fraction=0.25, weights={Position.TE: 0.2}),
            BiasBand(max_fraction=1.0, weights={Position.QB: -0.2}),
        ),
        elite_qb_bonus=1.2,
        elite_qb_max_fraction=0.25,
    ),
    Strategy.UPSIDE_CHASER: StrategyProfile(
        name="upside_chaser",
        description="Prefers players whose projections outrun their ADP.",
        bands=(BiasBand(max_fraction=0.3, weights={Position.WR: 0.05}),),
        upside_weight=0.9,
    ),
}
