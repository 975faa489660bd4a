"""Range selector behaviour as pure state transitions.

The end of a non-manual range is always one day before the start of the
next period. Manual ranges keep whatever bounds the user supplied.
"""

from __future__ import annotations

from dataclasses import replace
from datetime import date, timedelta
from enum import StrEnum

from rangectl.domain.alignment import start_of_range
from rangectl.domain.formatting import render_date
from rangectl.domain.locales import LocaleTable
from rangectl.domain.offsets import apply_rule
from rangectl.domain.rules import Rule, parse_rule
from rangectl.domain.state import RangeState, check_order


class Direction(StrEnum):
    """Navigation direction for :func:`step`."""

    FORWARD = "next"
    BACKWARD = "prev"


def derive_end(start: date, rule: Rule) -> date | None:
    """Last day of the period beginning at *start*; None for manual rules."""
    if rule.is_manual:
        return None
    return apply_rule(start, rule) - timedelta(days=1)


def aligned_start(reference: date, rule: Rule, *, previous: bool = False) -> date:
    """Start of the period holding *reference*, or the one before it."""
    start = start_of_range(reference, str(rule))
    if previous:
        start = apply_rule(start, rule.inverted())
    return start


def initial_range(today: date, token: str, *, previous: bool = False) -> RangeState:
    """Range a fresh selector shows for *today* under *token*.

    A manual rule keeps *today* as the start and leaves the end open.
    """
    rule = parse_rule(token)
    if rule.is_manual:
        return RangeState(rule=rule, start=today)
    start = aligned_start(today, rule, previous=previous)
    return RangeState(rule=rule, start=start, end=derive_end(start, rule))


def step(state: RangeState, direction: Direction) -> RangeState:
    """Move a range one period forward or backward.

    Manual ranges and ranges without a start are returned unchanged.
    """
    if state.is_manual or state.start is None:
        return state
    rule = state.rule if direction is Direction.FORWARD else state.rule.inverted()
    start = apply_rule(state.start, rule)
    return check_order(replace(state, start=start, end=derive_end(start, state.rule)))


def select_rule(state: RangeState, token: str, *, previous: bool = False) -> RangeState:
    """Switch *state* to the rule *token*.

    Moving between two periodic rules realigns the start to the new
    period; moving to the manual rule keeps the current bounds.
    """
    rule = parse_rule(token)
    if rule == state.rule:
        return state
    start = state.start
    if not state.is_manual and not rule.is_manual and start is not None:
        start = aligned_start(start, rule, previous=previous)
    if rule.is_manual:
        return replace(state, rule=rule)
    end = derive_end(start, rule) if start is not None else None
    return check_order(RangeState(rule=rule, start=start, end=end))


def range_label(state: RangeState, locale: LocaleTable) -> str:
    """Human-readable label for a range.

    Manual ranges have no label since their bounds are edited directly.
    Without a start the locale's ``init`` prompt is returned.
    """
    if state.is_manual:
        return ""
    if state.start is None:
        return locale.init
    end = state.end if state.end is not None else state.start
    text = render_date(locale.format, end, locale)
    if state.start != end:
        text = f"{render_date(locale.format, state.start, locale)} - {text}"
    return text
