"""RuleService — rule grammar, offsets, alignment, and formatting ops."""

from __future__ import annotations

import logging

from rangectl.domain.alignment import start_of_range
from rangectl.domain.dates import format_date, parse_date
from rangectl.domain.errors import DateRangeError
from rangectl.domain.formatting import DateFormatter
from rangectl.domain.offsets import apply_rule
from rangectl.domain.rules import Offset, invert_rule, parse_rule
from rangectl.services.base import BaseService
from rangectl.services.result import ServiceResult

logger = logging.getLogger(__name__)


class RuleService(BaseService):
    """Stateless operations on rule tokens and date strings."""

    def parse_rule(self, token: str) -> ServiceResult:
        """Describe the structure of a rule token."""
        op = "parse_rule"
        try:
            rule = parse_rule(token)
        except DateRangeError as exc:
            return self._failure(op, exc, token=token)

        data: dict[str, object] = {"token": str(rule), "manual": rule.is_manual}
        if isinstance(rule, Offset):
            data.update(
                sign=rule.sign,
                unit=rule.unit.name.lower(),
                whole=rule.whole,
                fraction=str(rule.fraction),
            )
        label = self._settings.locale_registry().rule_label(self._settings.effective_lang, token)
        if label:
            data["label"] = label
        return ServiceResult(ok=True, op=op, data=data)

    def invert_rule(self, token: str) -> ServiceResult:
        op = "invert_rule"
        try:
            inverted = invert_rule(token)
        except DateRangeError as exc:
            return self._failure(op, exc, token=token)
        return ServiceResult(ok=True, op=op, data={"token": token, "inverted": inverted})

    def apply_rule(self, day: str, token: str) -> ServiceResult:
        """Move the date *day* by the rule *token*."""
        op = "apply_rule"
        try:
            moved = apply_rule(parse_date(day), token)
        except DateRangeError as exc:
            return self._failure(op, exc, date=day, token=token)
        logger.debug("Applied %s to %s -> %s", token, day, moved)
        return ServiceResult(
            ok=True,
            op=op,
            data={"date": day, "rule": token, "result": format_date(moved)},
        )

    def start_of_range(self, day: str, token: str) -> ServiceResult:
        """Align the date *day* to the start of its period under *token*."""
        op = "start_of_range"
        try:
            start = start_of_range(parse_date(day), token)
        except DateRangeError as exc:
            return self._failure(op, exc, date=day, token=token)
        return ServiceResult(
            ok=True,
            op=op,
            data={"date": day, "rule": token, "start": format_date(start)},
        )

    def format_date(self, day: str, spec: list[str] | None = None) -> ServiceResult:
        """Render *day* with the configured locale (or an explicit *spec*)."""
        op = "format_date"
        lang = self._settings.effective_lang
        warnings: list[str] = []
        try:
            value = parse_date(day)
        except DateRangeError as exc:
            return self._failure(op, exc, date=day)
        registry = self._settings.locale_registry()
        if lang not in registry:
            warnings.append(f"No locale registered for {lang!r}; localized fields render empty")
        text = DateFormatter(registry, lang).format(value, spec)
        return ServiceResult(
            ok=True,
            op=op,
            data={"date": day, "lang": lang, "text": text},
            warnings=warnings,
        )
