"""RangeSelector and SelectorService — one range picker's state and ops.

A :class:`RangeSelector` owns a single :class:`RangeState` and exposes
the operations a host widget wires to its controls: pick a rule, step a
period up or down, read or merge interchange state, and build a label.

:class:`SelectorService` drives a selector rebuilt from explicit
arguments for each call, which is what the stateless CLI needs.
"""

from __future__ import annotations

import logging
from collections.abc import MutableMapping, Sequence
from datetime import date
from typing import TYPE_CHECKING, Any

from rangectl.domain.dates import format_date, parse_date
from rangectl.domain.errors import DateRangeError, UnknownRule
from rangectl.domain.formatting import DateFormatter
from rangectl.domain.navigation import (
    Direction,
    derive_end,
    initial_range,
    range_label,
    select_rule,
    step,
)
from rangectl.domain.rules import parse_rule, same_rule
from rangectl.domain.state import RangeState, StateCodec, check_order
from rangectl.services.base import BaseService
from rangectl.services.result import ServiceResult

if TYPE_CHECKING:
    from rangectl.config.settings import RangeSettings

logger = logging.getLogger(__name__)


class RangeSelector:
    """Stateful range picker bound to a rule list, codec, and formatter."""

    def __init__(
        self,
        *,
        ranges: Sequence[str],
        codec: StateCodec,
        formatter: DateFormatter,
        previous: bool = False,
        state: RangeState | None = None,
    ) -> None:
        self.ranges = list(ranges)
        self.codec = codec
        self.formatter = formatter
        self.previous = previous
        self._state = state if state is not None else RangeState()

    @classmethod
    def from_settings(
        cls,
        settings: RangeSettings,
        state: RangeState | None = None,
    ) -> RangeSelector:
        return cls(
            ranges=settings.selector.ranges,
            codec=StateCodec(settings.state.fields()),
            formatter=DateFormatter(settings.locale_registry(), settings.effective_lang),
            previous=settings.selector.previous,
            state=state,
        )

    @property
    def state(self) -> RangeState:
        return self._state

    def _known(self, token: str) -> str:
        for candidate in self.ranges:
            if same_rule(candidate, token):
                return candidate
        parse_rule(token)
        raise UnknownRule(token)

    def initialize(
        self,
        rule: str,
        *,
        today: date | None = None,
        data_select: str | None = None,
    ) -> RangeState:
        """Set up the range shown before any user interaction.

        *data_select* (a rule echoed back by a host form) takes priority
        over *rule* when it is one of the configured ranges.
        """
        token = rule
        if data_select and any(same_rule(r, data_select) for r in self.ranges):
            token = data_select
        token = self._known(token)
        self._state = initial_range(today or date.today(), token, previous=self.previous)
        logger.debug("Initialized selector with %s at %s", token, self._state.start)
        return self._state

    def select(self, token: str) -> RangeState:
        self._state = select_rule(self._state, self._known(token), previous=self.previous)
        return self._state

    def step_forward(self) -> RangeState:
        self._state = step(self._state, Direction.FORWARD)
        return self._state

    def step_backward(self) -> RangeState:
        self._state = step(self._state, Direction.BACKWARD)
        return self._state

    def get_state(self) -> dict[str, str]:
        return self.codec.decode(self._state)

    def set_state(self, blob: MutableMapping[str, str]) -> bool:
        """Merge this selector's keys out of *blob*; return True on change.

        A rule change without a supplied start realigns the current start
        to the new rule. A periodic rule without a supplied end has its
        end derived from the start.
        """
        fields = self.codec.fields
        start_supplied = fields.start in blob
        end_supplied = fields.end in blob
        if fields.rule in blob:
            self._known(blob[fields.rule])

        before = self._state
        merged, changed = self.codec.merge(blob, before, check=False)
        if not changed:
            return False

        start = merged.start
        if merged.rule != before.rule and not start_supplied:
            start = select_rule(before, str(merged.rule), previous=self.previous).start
        end = merged.end
        if not merged.is_manual and not end_supplied:
            end = derive_end(start, merged.rule) if start is not None else None
        self._state = check_order(RangeState(rule=merged.rule, start=start, end=end))
        logger.debug("Merged external state: %s", self.get_state())
        return True

    def label(self) -> str:
        locale = self.formatter.locale
        if locale is None:
            return ""
        return range_label(self._state, locale)

    def rule_options(self) -> list[dict[str, Any]]:
        """Configured rules with their display labels, current one flagged."""
        registry = self.formatter.registry
        return [
            {
                "rule": token,
                "label": registry.rule_label(self.formatter.lang, token),
                "selected": same_rule(token, str(self._state.rule)),
            }
            for token in self.ranges
        ]


def _parse_optional(value: str | None) -> date | None:
    return parse_date(value) if value else None


class SelectorService(BaseService):
    """Selector operations over explicitly passed state."""

    def _selector(
        self,
        rule: str | None = None,
        start: str | None = None,
        end: str | None = None,
    ) -> RangeSelector:
        state = RangeState(
            rule=parse_rule(rule) if rule else parse_rule(self._settings.selector.initial_rule),
            start=_parse_optional(start),
            end=_parse_optional(end),
        )
        return RangeSelector.from_settings(self._settings, check_order(state))

    def _range_data(self, selector: RangeSelector) -> dict[str, Any]:
        state = selector.state
        return {
            "rule": str(state.rule),
            "from": format_date(state.start) if state.start else None,
            "to": format_date(state.end) if state.end else None,
            "label": selector.label(),
        }

    def init_range(
        self,
        *,
        today: str | None = None,
        rule: str | None = None,
        data_select: str | None = None,
        previous: bool | None = None,
    ) -> ServiceResult:
        """Initial range for *today* (default: the current date).

        *previous* overrides ``selector.previous`` from the settings.
        """
        op = "init_range"
        try:
            selector = RangeSelector.from_settings(self._settings)
            if previous is not None:
                selector.previous = previous
            selector.initialize(
                rule or self._settings.selector.initial_rule,
                today=_parse_optional(today),
                data_select=data_select,
            )
        except DateRangeError as exc:
            return self._failure(op, exc, today=today, rule=rule)
        return ServiceResult(ok=True, op=op, data=self._range_data(selector))

    def step(self, direction: Direction, *, rule: str, start: str) -> ServiceResult:
        """Move the range starting at *start* one period in *direction*."""
        op = "step"
        warnings: list[str] = []
        try:
            selector = self._selector(rule, start)
            if selector.state.is_manual:
                warnings.append("Manual ranges do not step; state unchanged")
            if direction is Direction.FORWARD:
                selector.step_forward()
            else:
                selector.step_backward()
        except DateRangeError as exc:
            return self._failure(op, exc, rule=rule, start=start)
        data = {"direction": direction.value, **self._range_data(selector)}
        return ServiceResult(ok=True, op=op, data=data, warnings=warnings)

    def select_rule(
        self,
        new_rule: str,
        *,
        rule: str,
        start: str | None = None,
        end: str | None = None,
    ) -> ServiceResult:
        """Switch from *rule* to *new_rule*, realigning as needed."""
        op = "select_rule"
        try:
            selector = self._selector(rule, start, end)
            selector.select(new_rule)
        except DateRangeError as exc:
            return self._failure(op, exc, rule=rule, new_rule=new_rule)
        return ServiceResult(ok=True, op=op, data=self._range_data(selector))

    def get_state(
        self,
        *,
        rule: str,
        start: str | None = None,
        end: str | None = None,
    ) -> ServiceResult:
        """Interchange dict for the given state."""
        op = "get_state"
        try:
            selector = self._selector(rule, start, end)
        except DateRangeError as exc:
            return self._failure(op, exc, rule=rule)
        return ServiceResult(ok=True, op=op, data={"state": selector.get_state()})

    def merge_state(
        self,
        blob: dict[str, str],
        *,
        rule: str,
        start: str | None = None,
        end: str | None = None,
    ) -> ServiceResult:
        """Merge *blob* into the given state.

        ``data["remaining"]`` holds the keys this selector did not consume.
        """
        op = "merge_state"
        try:
            selector = self._selector(rule, start, end)
            changed = selector.set_state(blob)
        except DateRangeError as exc:
            return self._failure(op, exc, rule=rule)
        data = {
            "changed": changed,
            "state": selector.get_state(),
            "remaining": blob,
            "label": selector.label(),
        }
        return ServiceResult(ok=True, op=op, data=data)

    def list_rules(self, *, rule: str | None = None) -> ServiceResult:
        """Configured rules with localized labels; *rule* is flagged selected."""
        op = "list_rules"
        try:
            selector = self._selector(rule)
        except DateRangeError as exc:
            return self._failure(op, exc, rule=rule)
        items = selector.rule_options()
        return ServiceResult(ok=True, op=op, data={"items": items, "count": len(items)})
