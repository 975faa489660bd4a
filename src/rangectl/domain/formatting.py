"""Date formatting from a token list and a locale table.

Each token in a format spec is resolved on its own, in order:

1. ``Locale<Field>`` — the field's index on the date selects a label
   from the locale table (``LocaleMonth`` → ``Jan``).
2. ``<Field>`` — a :class:`DateField`, rendered as its number.
3. Anything else is emitted verbatim.

Example::

    >>> render_date(["LocaleMonth", " ", "Date", ", ", "FullYear"], date(2014, 6, 1), EN)
    'Jun 1, 2014'
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from datetime import date
from enum import StrEnum

from rangectl.domain.dates import sunday_index
from rangectl.domain.errors import UnresolvedLocaleField
from rangectl.domain.locales import LocaleRegistry, LocaleTable

logger = logging.getLogger(__name__)

LOCALE_PREFIX = "Locale"


class DateField(StrEnum):
    """Date components a format spec may name."""

    DATE = "Date"
    DAY = "Day"
    MONTH = "Month"
    FULL_YEAR = "FullYear"


_FIELD_VALUES: dict[DateField, Callable[[date], int]] = {
    DateField.DATE: lambda d: d.day,
    DateField.DAY: sunday_index,
    # Calendar month 1-12, not the 0-11 index used for LocaleMonth.
    DateField.MONTH: lambda d: d.month,
    DateField.FULL_YEAR: lambda d: d.year,
}

# Zero-based positions into the locale's label lists.
_FIELD_INDEXES: dict[DateField, Callable[[date], int]] = {
    DateField.DAY: sunday_index,
    DateField.MONTH: lambda d: d.month - 1,
}


def _as_field(name: str) -> DateField | None:
    try:
        return DateField(name)
    except ValueError:
        return None


def _localized(name: str, day: date, locale: LocaleTable | None) -> str:
    field = _as_field(name)
    index_of = _FIELD_INDEXES.get(field) if field is not None else None
    if index_of is None or locale is None:
        logger.debug("Unresolved locale field %s", name)
        return ""
    labels = locale.labels(field)
    index = index_of(day)
    if index >= len(labels):
        logger.debug("Unresolved locale field %s", name)
        return ""
    return labels[index]


def render_token(token: str, day: date, locale: LocaleTable | None) -> str:
    """Resolve a single format token against *day*."""
    if token.startswith(LOCALE_PREFIX) and token != LOCALE_PREFIX:
        return _localized(token[len(LOCALE_PREFIX) :], day, locale)
    field = _as_field(token)
    if field is not None:
        return str(_FIELD_VALUES[field](day))
    return token


def render_date(spec: Sequence[str], day: date, locale: LocaleTable | None) -> str:
    """Render *day* with the format *spec*; unresolved labels render empty."""
    return "".join(render_token(token, day, locale) for token in spec)


class DateFormatter:
    """Formats dates for one language of a :class:`LocaleRegistry`."""

    def __init__(self, registry: LocaleRegistry, lang: str) -> None:
        self.registry = registry
        self.lang = lang

    @property
    def locale(self) -> LocaleTable | None:
        try:
            return self.registry.get(self.lang)
        except UnresolvedLocaleField:
            logger.debug("Formatting without locale %s", self.lang)
            return None

    def format(self, day: date, spec: Sequence[str] | None = None) -> str:
        """Render *day*, defaulting to the locale's long-form spec."""
        locale = self.locale
        if spec is None:
            spec = locale.format if locale is not None else LocaleTable().format
        return render_date(spec, day, locale)
