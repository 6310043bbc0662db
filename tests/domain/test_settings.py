import pytest

from fantasy_mock_draft.domain.player import ScoringFormat
from fantasy_mock_draft.domain.settings import MockDraftSettings, Strategy, parse_settings
from fantasy_mock_draft.exceptions import ValidationError


def _settings(**overrides: object) -> MockDraftSettings:
    values: dict[str, object] = {
        "teams": 10,
        "rounds": 15,
        "draft_slot": 1,
        "scoring": ScoringFormat.PPR,
        "strategy": Strategy.BALANCED,
    }
    values.update(overrides)
    return MockDraftSettings(**values)  # type: ignore[arg-type]


def _raw(**overrides: object) -> dict[str, object]:
    raw: dict[str, object] = {
        "teams": 10,
        "rounds": 15,
        "draftSlot": 4,
        "scoring": "ppr",
        "strategy": "balanced",
        "seed": "abc",
    }
    raw.update(overrides)
    return raw


class TestMockDraftSettings:
    def test_valid(self) -> None:
        settings = MockDraftSettings(
            teams=12, rounds=12, draft_slot=1, scoring=ScoringFormat.STANDARD, strategy=Strategy.ZERO_RB
        )
        assert settings.total_picks == 144
        assert settings.seed is None

    @pytest.mark.parametrize("teams", [8, 11, 16, 0])
    def test_rejects_teams_outside_options(self, teams: int) -> None:
        with pytest.raises(ValidationError, match="teams must be one of: 10, 12, 14"):
            _settings(teams=teams)

    def test_rejects_rounds_outside_options(self) -> None:
        with pytest.raises(ValidationError, match="rounds must be one of"):
            _settings(rounds=16)

    def test_rejects_slot_past_league_size(self) -> None:
        with pytest.raises(ValidationError, match="draftSlot must be between 1 and teams"):
            _settings(draft_slot=11)

    def test_rejects_bool_for_number(self) -> None:
        with pytest.raises(ValidationError):
            _settings(teams=True)

    def test_collects_every_problem(self) -> None:
        with pytest.raises(ValidationError) as exc_info:
            _settings(teams=9, rounds=9)
        assert len(exc_info.value.errors) == 2

    @pytest.mark.parametrize("seed", [float("nan"), float("inf"), True])
    def test_rejects_bad_seed(self, seed: object) -> None:
        with pytest.raises(ValidationError, match="seed"):
            _settings(seed=seed)

    @pytest.mark.parametrize("seed", ["", "   "])
    def test_blank_seed_means_no_seed(self, seed: str) -> None:
        assert _settings(seed=seed).seed is None
        assert _settings(seed=seed) == _settings(seed=None)

    def test_to_dict_uses_camel_case_slot(self) -> None:
        settings = parse_settings(_raw())
        assert settings.to_dict() == {
            "teams": 10,
            "rounds": 15,
            "draftSlot": 4,
            "scoring": "ppr",
            "strategy": "balanced",
            "seed": "abc",
        }


class TestParseSettings:
    def test_camel_case(self) -> None:
        settings = parse_settings(_raw())
        assert settings.draft_slot == 4
        assert settings.scoring is ScoringFormat.PPR
        assert settings.strategy is Strategy.BALANCED

    def test_snake_case(self) -> None:
        raw = _raw()
        raw["draft_slot"] = raw.pop("draftSlot")
        assert parse_settings(raw).draft_slot == 4

    def test_seed_optional(self) -> None:
        raw = _raw()
        del raw["seed"]
        assert parse_settings(raw).seed is None

    def test_blank_seed_parses_as_absent(self) -> None:
        assert parse_settings(_raw(seed=" ")).seed is None

    def test_unknown_field(self) -> None:
        with pytest.raises(ValidationError, match="unrecognized field 'pickTimer'"):
            parse_settings(_raw(pickTimer=30))

    def test_duplicate_field(self) -> None:
        with pytest.raises(ValidationError, match="duplicate field"):
            parse_settings(_raw(draft_slot=4))

    def test_missing_field(self) -> None:
        raw = _raw()
        del raw["strategy"]
        with pytest.raises(ValidationError, match="missing required field 'strategy'"):
            parse_settings(raw)

    def test_unknown_strategy(self) -> None:
        with pytest.raises(ValidationError, match="strategy must be one of"):
            parse_settings(_raw(strategy="robust_rb"))

    def test_string_number_rejected(self) -> None:
        with pytest.raises(ValidationError, match="teams"):
            parse_settings(_raw(teams="10"))
