"""Range alignment — the start of the period a date falls in.

Periods tile forward from January 1st of the reference year; they do not
restart on later January 1sts. Weekly and bi-weekly rules tile from the
first Sunday of the year instead.
"""

from __future__ import annotations

from datetime import date, timedelta

from rangectl.domain.dates import sunday_index
from rangectl.domain.errors import InvalidRuleToken
from rangectl.domain.offsets import apply_rule
from rangectl.domain.rules import WEEK_RULES, ManualRange, parse_rule


def period_anchor(reference: date, token: str) -> date:
    """First boundary of the tiling used for *reference* and *token*."""
    anchor = date(reference.year, 1, 1)
    if token in WEEK_RULES:
        while sunday_index(anchor) != 0:
            anchor += timedelta(days=1)
    return anchor


def start_of_range(reference: date, token: str) -> date:
    """Return the latest period boundary on or before *reference*.

    A reference that is itself a boundary is returned unchanged. When the
    anchor already lies after *reference* (early January for weekly
    rules) the anchor is stepped back once with the inverse rule.

    Raises:
        InvalidRuleToken: *token* is unparseable, the manual sentinel, or
            an offset that does not move forward.
    """
    rule = parse_rule(token)
    if isinstance(rule, ManualRange):
        raise InvalidRuleToken(token, "manual ranges have no alignment")
    if rule.sign < 0 or rule.is_zero:
        raise InvalidRuleToken(token, "alignment needs a forward offset")

    candidate = period_anchor(reference, token)
    boundary: date | None = None
    while candidate <= reference:
        boundary = candidate
        candidate = apply_rule(candidate, rule)
    if boundary is None:
        boundary = apply_rule(candidate, rule.inverted())
    return boundary
