from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING, Protocol, TypeVar

from config import ConfigurationSet, config_from_dict, config_from_env, config_from_yaml

from fantasy_mock_draft.domain.player import ScoringFormat
from fantasy_mock_draft.domain.settings import MockDraftSettings, Strategy
from fantasy_mock_draft.draft.strategy import EngineTuning
from fantasy_mock_draft.exceptions import ValidationError
from fantasy_mock_draft.players.consensus import consensus_pool
from fantasy_mock_draft.players.csv_source import CsvPlayerPool

if TYPE_CHECKING:
    from fantasy_mock_draft.players.pool import PlayerPool

logger = logging.getLogger(__name__)


class AppConfig(Protocol):
    def __getitem__(self, key: str) -> object: ...


_DEFAULTS: dict[str, object] = {
    "draft": {
        "teams": 12,
        "rounds": 15,
        "draft_slot": 6,
        "scoring": "half_ppr",
        "strategy": "balanced",
        "seed": "",
    },
    "engine": {
        "reach_weight": 0.25,
        "reach_grace_rounds": 0.5,
        "need_bonus": 0.6,
        "need_threshold": 2 / 3,
        "jitter": 0.02,
        "base_value_cap": 2.5,
        "elite_qb_count": 2,
    },
    "players": {
        "source": "",
    },
}


def create_config(
    yaml_path: str = "mockdraft.yaml",
    env_prefix: str = "MOCKDRAFT",
    defaults: dict[str, object] | None = None,
    *,
    overrides: dict[str, object] | None = None,
) -> ConfigurationSet:
    """Create a layered configuration.

    Priority (highest to lowest): explicit overrides > env vars > YAML file > defaults dict.

    Args:
        yaml_path: Path to the YAML config file.
        env_prefix: Prefix for environment variables, e.g. ``MOCKDRAFT__DRAFT__TEAMS``.
        defaults: Default configuration values.
        overrides: Nested values that win over every other layer (CLI options).
    """
    if defaults is None:
        defaults = _DEFAULTS

    layers = [
        config_from_env(env_prefix, separator="__", lowercase_keys=True),
        config_from_yaml(yaml_path, read_from_file=True, ignore_missing_paths=True),
        config_from_dict(defaults),
    ]
    if overrides:
        layers.insert(0, config_from_dict(overrides))

    return ConfigurationSet(*layers)


def _as_int(cfg: AppConfig, key: str) -> int:
    raw = cfg[key]
    try:
        return int(str(raw))
    except ValueError as err:
        msg = f"{key} must be an integer, got {raw!r}"
        raise ValidationError([msg]) from err


def _as_float(cfg: AppConfig, key: str) -> float:
    raw = cfg[key]
    try:
        return float(str(raw))
    except ValueError as err:
        msg = f"{key} must be a number, got {raw!r}"
        raise ValidationError([msg]) from err


E = TypeVar("E", ScoringFormat, Strategy)


def _as_enum(cfg: AppConfig, key: str, enum_type: type[E]) -> E:
    raw = str(cfg[key]).strip()
    try:
        return enum_type(raw)
    except ValueError as err:
        options = ", ".join(member.value for member in enum_type)
        msg = f"{key} must be one of: {options}"
        raise ValidationError([msg]) from err


def load_engine_tuning(cfg: ConfigurationSet | None = None) -> EngineTuning:
    if cfg is None:
        cfg = create_config()
    try:
        return EngineTuning(
            reach_weight=_as_float(cfg, "engine.reach_weight"),
            reach_grace_rounds=_as_float(cfg, "engine.reach_grace_rounds"),
            need_bonus=_as_float(cfg, "engine.need_bonus"),
            need_threshold=_as_float(cfg, "engine.need_threshold"),
            jitter=_as_float(cfg, "engine.jitter"),
            base_value_cap=_as_float(cfg, "engine.base_value_cap"),
            elite_qb_count=_as_int(cfg, "engine.elite_qb_count"),
        )
    except ValueError as err:
        raise ValidationError([f"engine: {err}"]) from err


def load_draft_defaults(cfg: ConfigurationSet | None = None) -> MockDraftSettings:
    """Build settings from the ``draft`` section; an empty seed means none."""
    if cfg is None:
        cfg = create_config()
    seed_raw = cfg["draft.seed"]
    seed: int | float | str | None
    if seed_raw is None or (isinstance(seed_raw, str) and not seed_raw.strip()):
        seed = None
    elif isinstance(seed_raw, (int, float, str)) and not isinstance(seed_raw, bool):
        seed = seed_raw
    else:
        seed = str(seed_raw)
    return MockDraftSettings(
        teams=_as_int(cfg, "draft.teams"),
        rounds=_as_int(cfg, "draft.rounds"),
        draft_slot=_as_int(cfg, "draft.draft_slot"),
        scoring=_as_enum(cfg, "draft.scoring", ScoringFormat),
        strategy=_as_enum(cfg, "draft.strategy", Strategy),
        seed=seed,
    )


def load_player_pool(cfg: ConfigurationSet | None = None) -> PlayerPool:
    """CSV pool from ``players.source`` when set, otherwise the bundled consensus board."""
    if cfg is None:
        cfg = create_config()
    source = str(cfg["players.source"] or "").strip()
    if not source:
        return consensus_pool()
    path = Path(source).expanduser()
    logger.debug("Loading player pool from %s", path)
    return CsvPlayerPool(path)
