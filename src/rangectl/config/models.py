"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults live here, ``rangectl.toml`` only holds
overrides. An empty file is a valid configuration.
"""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator, model_validator

from rangectl.domain.locales import LocaleTable
from rangectl.domain.rules import parse_rule
from rangectl.domain.state import StateFields

DEFAULT_RANGES: tuple[str, ...] = (
    "+1d",
    "+7d",
    "+14d",
    "+0.5m",
    "+1m",
    "+2m",
    "+3m",
    "+6m",
    "+1y",
    "+0",
)


class SelectorConfig(BaseModel):
    """[selector] section."""

    model_config = {"frozen": True}

    ranges: list[str] = Field(default_factory=lambda: list(DEFAULT_RANGES))
    init_range: int = 4
    previous: bool = False
    lang: str = "en"

    @field_validator("ranges")
    @classmethod
    def _ranges_parse(cls, value: list[str]) -> list[str]:
        if not value:
            msg = "At least one range rule is required"
            raise ValueError(msg)
        for token in value:
            parse_rule(token)
        return value

    @model_validator(mode="after")
    def _init_range_in_bounds(self) -> SelectorConfig:
        if not 0 <= self.init_range < len(self.ranges):
            msg = f"init_range {self.init_range} is outside ranges (0..{len(self.ranges) - 1})"
            raise ValueError(msg)
        return self

    @property
    def initial_rule(self) -> str:
        return self.ranges[self.init_range]


class StateConfig(BaseModel):
    """[state] section — key names in the interchange dict."""

    model_config = {"frozen": True}

    rule_field: str = "__daterange"
    from_field: str = "from"
    to_field: str = "to"

    def fields(self) -> StateFields:
        return StateFields(rule=self.rule_field, start=self.from_field, end=self.to_field)


class RangeConfig(BaseModel):
    """Root configuration composing all sections."""

    model_config = {"frozen": True}

    selector: SelectorConfig = Field(default_factory=SelectorConfig)
    state: StateConfig = Field(default_factory=StateConfig)
    locales: dict[str, LocaleTable] = Field(default_factory=dict)
