"""Date offset engine — apply a rule to a calendar date.

Month and year arithmetic never relies on a library rollover: the target
month is computed by carrying/borrowing whole years, then the original
day of month is laid onto that month with forward overflow (Jan 31 + 1m
lands on Feb 31, i.e. Mar 2 or Mar 3).

Fractional months and years interpolate linearly between the
integer-adjusted date and one more unit in the same direction, measured
between noon anchors. Fractional months snap to the 1st when they land
on day 1 or 2 so semi-monthly periods stay on month starts.
"""

from __future__ import annotations

from datetime import date, timedelta
from decimal import Decimal

from rangectl.domain.dates import at_noon
from rangectl.domain.errors import InvalidRuleToken
from rangectl.domain.rules import ManualRange, Offset, Rule, Unit, parse_rule

SNAP_MAX_DAY = 2


def _place(year: int, month: int, day: int) -> date:
    """Lay *day* onto (year, month), overflowing into the next month."""
    return date(year, month, 1) + timedelta(days=day - 1)


def add_months(day: date, months: int) -> date:
    """Move *day* by a signed number of months with manual renormalisation."""
    sign = -1 if months < 0 else 1
    years, remainder = divmod(abs(months), 12)
    year = day.year + sign * years
    month = day.month + sign * remainder
    if month < 1:
        year -= 1
        month += 12
    elif month > 12:
        year += 1
        month -= 12
    return _place(year, month, day.day)


def add_years(day: date, years: int) -> date:
    """Move *day* by a signed number of years (Feb 29 overflows to Mar 1)."""
    return _place(day.year + years, day.month, day.day)


def _interpolate(first: date, second: date, fraction: Decimal) -> date:
    base = at_noon(first)
    moved = base + (at_noon(second) - base) * float(fraction)
    return moved.date()


def _apply_offset(day: date, rule: Offset) -> date:
    if rule.unit is Unit.DAY:
        return day + timedelta(days=rule.sign * rule.whole)

    if rule.unit is Unit.MONTH:
        moved = add_months(day, rule.sign * rule.whole)
        if rule.fraction:
            moved = _interpolate(moved, add_months(moved, rule.sign), rule.fraction)
            if moved.day <= SNAP_MAX_DAY:
                moved = moved.replace(day=1)
        return moved

    moved = add_years(day, rule.sign * rule.whole)
    if rule.fraction:
        moved = _interpolate(moved, add_years(moved, rule.sign), rule.fraction)
    return moved


def apply_rule(day: date, rule: Rule | str) -> date:
    """Return *day* moved by *rule*.

    The manual sentinel (``+0``) and zero offsets return *day* unchanged.

    Raises:
        InvalidRuleToken: *rule* is an unparseable token, or the result
            falls outside the representable calendar.
    """
    if isinstance(rule, str):
        rule = parse_rule(rule)
    if isinstance(rule, ManualRange):
        return day
    try:
        return _apply_offset(day, rule)
    except (OverflowError, ValueError) as exc:
        raise InvalidRuleToken(str(rule), "result falls outside the supported calendar") from exc
