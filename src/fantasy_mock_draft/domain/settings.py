from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Any, TypeVar

from fantasy_mock_draft.domain.player import ScoringFormat
from fantasy_mock_draft.exceptions import ValidationError

if TYPE_CHECKING:
    from collections.abc import Mapping


class Strategy(Enum):
    BALANCED = "balanced"
    HERO_RB = "hero_rb"
    ZERO_RB = "zero_rb"
    ELITE_QB = "elite_qb"
    UPSIDE_CHASER = "upside_chaser"


ALLOWED_TEAMS: tuple[int, ...] = (10, 12, 14)
ALLOWED_ROUNDS: tuple[int, ...] = (12, 15, 18)

_FIELD_ALIASES: dict[str, str] = {
    "teams": "teams",
    "rounds": "rounds",
    "draftSlot": "draft_slot",
    "draft_slot": "draft_slot",
    "scoring": "scoring",
    "strategy": "strategy",
    "seed": "seed",
}

_REQUIRED_FIELDS: tuple[str, ...] = ("teams", "rounds", "draft_slot", "scoring", "strategy")


def _is_int(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _options(values: tuple[object, ...]) -> str:
    return ", ".join(str(v) for v in values)


def validate_settings_values(
    teams: object,
    rounds: object,
    draft_slot: object,
    scoring: object,
    strategy: object,
    seed: object,
) -> list[str]:
    """Return every problem with the given settings values (empty when valid)."""
    errors: list[str] = []
    if not _is_int(teams) or teams not in ALLOWED_TEAMS:
        errors.append(f"teams must be one of: {_options(ALLOWED_TEAMS)}")
    if not _is_int(rounds) or rounds not in ALLOWED_ROUNDS:
        errors.append(f"rounds must be one of: {_options(ALLOWED_ROUNDS)}")
    if not _is_int(draft_slot):
        errors.append("draftSlot must be an integer")
    elif _is_int(teams) and not 1 <= draft_slot <= teams:  # type: ignore[operator]
        errors.append("draftSlot must be between 1 and teams")
    if not isinstance(scoring, ScoringFormat):
        errors.append(f"scoring must be one of: {_options(tuple(s.value for s in ScoringFormat))}")
    if not isinstance(strategy, Strategy):
        errors.append(f"strategy must be one of: {_options(tuple(s.value for s in Strategy))}")
    if seed is not None:
        if isinstance(seed, bool) or not isinstance(seed, (int, float, str)):
            errors.append("seed must be a string or a number")
        elif isinstance(seed, float) and not math.isfinite(seed):
            errors.append("seed must be a finite number")
    return errors


@dataclass(frozen=True)
class MockDraftSettings:
    teams: int
    rounds: int
    draft_slot: int
    scoring: ScoringFormat
    strategy: Strategy
    seed: int | float | str | None = None

    def __post_init__(self) -> None:
        if isinstance(self.seed, str) and not self.seed.strip():
            object.__setattr__(self, "seed", None)
        errors = validate_settings_values(
            self.teams, self.rounds, self.draft_slot, self.scoring, self.strategy, self.seed
        )
        if errors:
            raise ValidationError(errors)

    @property
    def total_picks(self) -> int:
        return self.teams * self.rounds

    def to_dict(self) -> dict[str, Any]:
        return {
            "teams": self.teams,
            "rounds": self.rounds,
            "draftSlot": self.draft_slot,
            "scoring": self.scoring.value,
            "strategy": self.strategy.value,
            "seed": self.seed,
        }


E = TypeVar("E", bound=Enum)


def _coerce_enum(enum_type: type[E], value: object) -> E | object:
    if isinstance(value, enum_type):
        return value
    if isinstance(value, str):
        try:
            return enum_type(value.strip())
        except ValueError:
            return value
    return value


def parse_settings(raw: Mapping[str, object]) -> MockDraftSettings:
    """Build validated settings from a JSON-like mapping.

    Accepts camelCase (``draftSlot``) or snake_case keys. Unknown keys,
    missing fields, wrong types and out-of-range values all fail closed with
    a single ``ValidationError`` listing every problem.
    """
    errors: list[str] = []
    values: dict[str, object] = {}
    for key, value in raw.items():
        name = _FIELD_ALIASES.get(key)
        if name is None:
            errors.append(f"unrecognized field '{key}'")
            continue
        if name in values:
            errors.append(f"duplicate field '{key}'")
            continue
        values[name] = value

    for name in _REQUIRED_FIELDS:
        if name not in values:
            errors.append(f"missing required field '{name}'")

    if errors:
        raise ValidationError(errors)

    scoring = _coerce_enum(ScoringFormat, values["scoring"])
    strategy = _coerce_enum(Strategy, values["strategy"])
    errors = validate_settings_values(
        values["teams"], values["rounds"], values["draft_slot"], scoring, strategy, values.get("seed")
    )
    if errors:
        raise ValidationError(errors)

    return MockDraftSettings(
        teams=values["teams"],  # type: ignore[arg-type]
        rounds=values["rounds"],  # type: ignore[arg-type]
        draft_slot=values["draft_slot"],  # type: ignore[arg-type]
        scoring=scoring,  # type: ignore[arg-type]
        strategy=strategy,  # type: ignore[arg-type]
        seed=values.get("seed"),  # type: ignore[arg-type]
    )
