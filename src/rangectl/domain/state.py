"""Selector state and its flat key/value interchange form.

A host form exchanges state as a single ``dict[str, str]`` keyed by the
selector's three field names. Several selectors may read from the same
dict: each one removes the keys it recognises and leaves the rest for the
next consumer.

Example::

    codec = StateCodec(StateFields())
    blob = {"__daterange": "+2m", "foo": "1", "from": "2014-01-01"}
    state, changed = codec.merge(blob, state)
    assert blob == {"foo": "1"}
"""

from __future__ import annotations

from collections.abc import MutableMapping
from dataclasses import dataclass, replace
from datetime import date

from pydantic import BaseModel

from rangectl.domain.dates import format_date, parse_date
from rangectl.domain.errors import RangeOrderError
from rangectl.domain.rules import MANUAL, Rule, parse_rule


@dataclass(frozen=True)
class RangeState:
    """Rule plus range bounds for one selector."""

    rule: Rule = MANUAL
    start: date | None = None
    end: date | None = None

    @property
    def is_manual(self) -> bool:
        return self.rule.is_manual


def check_order(state: RangeState) -> RangeState:
    """Return *state* unchanged if ``start <= end``.

    Raises:
        RangeOrderError: Both bounds are set and start falls after end.
    """
    if state.start is not None and state.end is not None and state.start > state.end:
        msg = f"Range start {format_date(state.start)} is after end {format_date(state.end)}"
        raise RangeOrderError(msg)
    return state


class StateFields(BaseModel):
    """Key names used for the three fields in the interchange dict."""

    model_config = {"frozen": True}

    rule: str = "__daterange"
    start: str = "from"
    end: str = "to"

    def names(self) -> tuple[str, str, str]:
        return (self.rule, self.start, self.end)


def _date_text(value: date | None) -> str:
    return format_date(value) if value is not None else ""


class StateCodec:
    """Encode a :class:`RangeState` to, and merge it from, a flat dict."""

    def __init__(self, fields: StateFields | None = None) -> None:
        self.fields = fields or StateFields()

    def decode(self, state: RangeState) -> dict[str, str]:
        """Flat dict of the non-empty fields of *state*."""
        values = {
            self.fields.rule: str(state.rule),
            self.fields.start: _date_text(state.start),
            self.fields.end: _date_text(state.end),
        }
        return {key: value for key, value in values.items() if value}

    def merge(
        self,
        blob: MutableMapping[str, str],
        current: RangeState,
        *,
        check: bool = True,
    ) -> tuple[RangeState, bool]:
        """Fold recognised keys of *blob* into *current*.

        Every recognised key is removed from *blob* whether or not its
        value differs; other keys are left in place. *current* is not
        modified. With ``check=False`` the bound order is left to the
        caller, which may still re-derive one of the bounds.

        Returns:
            The merged state and whether any field changed value.

        Raises:
            InvalidRuleToken: The rule value does not parse.
            InvalidDateString: A date value does not parse.
            RangeOrderError: The merged start falls after the merged end
                (only when *check* is set).
        """
        updates: dict[str, object] = {}

        if self.fields.rule in blob:
            token = blob.pop(self.fields.rule)
            if token != str(current.rule):
                rule = parse_rule(token)
                if rule != current.rule:
                    updates["rule"] = rule

        for attr, key in (("start", self.fields.start), ("end", self.fields.end)):
            if key not in blob:
                continue
            text = blob.pop(key)
            if text != _date_text(getattr(current, attr)):
                updates[attr] = parse_date(text) if text else None

        if not updates:
            return current, False
        merged = replace(current, **updates)
        return (check_order(merged) if check else merged), True
