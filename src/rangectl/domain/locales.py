"""Locale tables and the registry that serves them.

A locale supplies a display label per rule token, twelve month labels,
optional weekday labels (Sunday first), a long-form date format spec, and
two prompt strings used by hosts.

Locales live in an explicit :class:`LocaleRegistry` handed to whatever
needs them; there is no process-wide mutable table.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator, Mapping
from typing import Any

from pydantic import BaseModel, Field, field_validator

from rangectl.domain.errors import UnresolvedLocaleField
from rangectl.domain.rules import is_valid_rule

logger = logging.getLogger(__name__)


class LocaleTable(BaseModel):
    """Display strings for one language."""

    model_config = {"frozen": True}

    rules: dict[str, str] = Field(default_factory=dict)
    month: list[str] = Field(default_factory=list)
    day: list[str] = Field(default_factory=list)
    format: list[str] = Field(default_factory=lambda: ["FullYear", "-", "Month", "-", "Date"])
    init: str = ""
    submit: str = ""

    @field_validator("rules")
    @classmethod
    def _rule_keys_parse(cls, value: dict[str, str]) -> dict[str, str]:
        bad = sorted(token for token in value if not is_valid_rule(token))
        if bad:
            msg = f"Unknown rule tokens in locale: {', '.join(bad)}"
            raise ValueError(msg)
        return value

    @field_validator("month")
    @classmethod
    def _twelve_months(cls, value: list[str]) -> list[str]:
        if value and len(value) != 12:
            msg = f"Month labels need 12 entries, got {len(value)}"
            raise ValueError(msg)
        return value

    @field_validator("day")
    @classmethod
    def _seven_days(cls, value: list[str]) -> list[str]:
        if value and len(value) != 7:
            msg = f"Weekday labels need 7 entries, got {len(value)}"
            raise ValueError(msg)
        return value

    def labels(self, field: str) -> list[str]:
        """Label list for a localisable date field (``Month`` or ``Day``)."""
        if field == "Month":
            return self.month
        if field == "Day":
            return self.day
        return []


EN = LocaleTable(
    rules={
        "+1d": "Daily",
        "+7d": "Weekly",
        "+14d": "Bi-weekly",
        "+0.5m": "Semi-monthly",
        "+1m": "Monthly",
        "+2m": "Bi-monthly",
        "+3m": "Quarterly",
        "+6m": "Semi-yearly",
        "+1y": "Yearly",
        "+0": "Other...",
    },
    month=["Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec"],
    format=["LocaleMonth", " ", "Date", ", ", "FullYear"],
    init="Choose dates...",
    submit="Apply",
)

FR = LocaleTable(
    rules={
        "+1d": "Quotidien",
        "+7d": "Hebdomadaire",
        "+14d": "Deux semaines",
        "+0.5m": "Bimensuel",
        "+1m": "Mensuel",
        "+2m": "Bimestriel",
        "+3m": "Trimestriel",
        "+6m": "Semestriel",
        "+1y": "Annuel",
        "+0": "Autre...",
    },
    month=[
        "Jan",
        "Fév",
        "Mars",
        "Avr",
        "Mai",
        "Juin",
        "Juil",
        "Août",
        "Sept",
        "Oct",
        "Nov",
        "Déc",
    ],
    format=["Date", " ", "LocaleMonth", " ", "FullYear"],
    init="Choisir dates...",
    submit="Appliquer",
)

DEFAULT_LOCALES: dict[str, LocaleTable] = {"en": EN, "fr": FR}


class LocaleRegistry:
    """Named collection of :class:`LocaleTable` objects.

    Usage::

        registry = LocaleRegistry.default()
        registry.register("de", {"month": [...], "format": [...]})
        registry.rule_label("de", "+1m")
    """

    def __init__(self, locales: Mapping[str, LocaleTable] | None = None) -> None:
        self._locales: dict[str, LocaleTable] = dict(locales or {})

    @classmethod
    def default(cls) -> LocaleRegistry:
        """Registry preloaded with the shipped ``en`` and ``fr`` tables."""
        return cls(DEFAULT_LOCALES)

    def register(self, lang: str, table: LocaleTable | Mapping[str, Any]) -> LocaleTable:
        """Add *lang*, replacing any table already registered under it."""
        if not isinstance(table, LocaleTable):
            table = LocaleTable.model_validate(table)
        if lang in self._locales:
            logger.debug("Replacing locale %s", lang)
        self._locales[lang] = table
        return table

    def get(self, lang: str) -> LocaleTable:
        """Return the table for *lang*.

        Raises:
            UnresolvedLocaleField: No table is registered for *lang*.
        """
        try:
            return self._locales[lang]
        except KeyError:
            raise UnresolvedLocaleField(lang) from None

    def __contains__(self, lang: object) -> bool:
        return lang in self._locales

    def __iter__(self) -> Iterator[str]:
        return iter(self._locales)

    def languages(self) -> list[str]:
        return sorted(self._locales)

    def rule_label(self, lang: str, token: str) -> str:
        """Display label for *token*, or ``""`` when none is defined."""
        table = self._locales.get(lang)
        if table is None or token not in table.rules:
            logger.debug("No rule label for %s in locale %s", token, lang)
            return ""
        return table.rules[token]

    def month_label(self, lang: str, index: int) -> str:
        """Display label for a zero-based month *index*, or ``""``."""
        table = self._locales.get(lang)
        if table is None or not 0 <= index < len(table.month):
            logger.debug("No month label %d in locale %s", index, lang)
            return ""
        return table.month[index]
