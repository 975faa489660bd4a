"""Tests for config models — defaults and sparse overrides."""

import pytest
from pydantic import ValidationError

from rangectl.config.models import DEFAULT_RANGES, RangeConfig, SelectorConfig, StateConfig
from rangectl.domain.state import StateFields


class TestSelectorConfig:
    def test_defaults(self) -> None:
        cfg = SelectorConfig()
        assert cfg.ranges == list(DEFAULT_RANGES)
        assert cfg.init_range == 4
        assert cfg.initial_rule == "+1m"
        assert cfg.previous is False
        assert cfg.lang == "en"

    def test_ranges_not_shared(self) -> None:
        assert SelectorConfig().ranges is not SelectorConfig().ranges

    def test_invalid_rule(self) -> None:
        with pytest.raises(ValidationError, match="Invalid rule"):
            SelectorConfig(ranges=["+1m", "+1.5d"])

    def test_empty_ranges(self) -> None:
        with pytest.raises(ValidationError, match="At least one"):
            SelectorConfig(ranges=[], init_range=0)

    @pytest.mark.parametrize("index", [-1, 10])
    def test_init_range_bounds(self, index: int) -> None:
        with pytest.raises(ValidationError, match="init_range"):
            SelectorConfig(init_range=index)

    def test_init_range_checked_against_custom_ranges(self) -> None:
        with pytest.raises(ValidationError):
            SelectorConfig(ranges=["+7d", "+0"], init_range=2)


class TestStateConfig:
    def test_fields(self) -> None:
        assert StateConfig().fields() == StateFields()

    def test_renamed_fields(self) -> None:
        cfg = StateConfig.model_validate({"from_field": "since"})
        assert cfg.fields().names() == ("__daterange", "since", "to")


class TestRangeConfig:
    def test_sparse_override(self) -> None:
        cfg = RangeConfig.model_validate({"selector": {"previous": True}})
        assert cfg.selector.previous is True
        assert cfg.selector.init_range == 4  # default preserved
        assert cfg.state == StateConfig()

    def test_json_round_trip(self) -> None:
        cfg = RangeConfig.model_validate({"locales": {"xx": {"init": "..."}}})
        assert RangeConfig.model_validate_json(cfg.model_dump_json()) == cfg
