"""Rule grammar — parsing, serialisation, and inversion of offset tokens.

A rule token is a signed magnitude with a unit::

    +1d   -7d   +0.5m   +3m   -2.25y

The special token ``+0`` selects manual (custom) range mode. It is a
distinct variant, not a zero-length offset, so inverting it is a no-op.

INVARIANT: ``serialize_rule(parse_rule(token)) == token`` for every
canonical token.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from decimal import Decimal
from enum import StrEnum

from rangectl.domain.errors import InvalidRuleToken

RULE_PATTERN = re.compile(r"^([+-])(\d+)(\.\d+)?([dmy])$")

MANUAL_TOKEN = "+0"
_MANUAL_ALIASES = frozenset({"+0", "-0"})

# Alignment starts these rules on the first Sunday of the year.
WEEK_RULES = frozenset({"+7d", "+14d"})


class Unit(StrEnum):
    """Calendar unit of an offset."""

    DAY = "d"
    MONTH = "m"
    YEAR = "y"


@dataclass(frozen=True)
class Offset:
    """A signed calendar offset such as ``+1m`` or ``-0.5y``.

    ``magnitude`` keeps the digits exactly as written so the token
    round-trips (``+01d`` stays ``+01d``).
    """

    sign: int
    unit: Unit
    magnitude: str

    @property
    def whole(self) -> int:
        """Whole units of the offset, unsigned."""
        return int(self.magnitude.partition(".")[0])

    @property
    def fraction(self) -> Decimal:
        """Fractional part of the offset in ``[0, 1)``, unsigned."""
        _, dot, digits = self.magnitude.partition(".")
        if not dot:
            return Decimal(0)
        return Decimal(f"0.{digits}")

    @property
    def is_zero(self) -> bool:
        return self.whole == 0 and self.fraction == 0

    @property
    def is_manual(self) -> bool:
        return False

    def inverted(self) -> Offset:
        return Offset(sign=-self.sign, unit=self.unit, magnitude=self.magnitude)

    def __str__(self) -> str:
        prefix = "+" if self.sign > 0 else "-"
        return f"{prefix}{self.magnitude}{self.unit.value}"


@dataclass(frozen=True)
class ManualRange:
    """Custom range mode: no alignment, no derived end date."""

    @property
    def is_manual(self) -> bool:
        return True

    def inverted(self) -> ManualRange:
        return self

    def __str__(self) -> str:
        return MANUAL_TOKEN


Rule = Offset | ManualRange

MANUAL = ManualRange()


def parse_rule(token: str) -> Rule:
    """Parse a rule token into an :class:`Offset` or :data:`MANUAL`.

    ``-0`` is accepted as a legacy spelling of the manual sentinel.

    Raises:
        InvalidRuleToken: The token does not match the grammar, or it
            combines a fraction with the day unit.
    """
    if not isinstance(token, str):
        raise InvalidRuleToken(repr(token), "rule tokens must be strings")
    if token in _MANUAL_ALIASES:
        return MANUAL
    match = RULE_PATTERN.fullmatch(token)
    if match is None:
        raise InvalidRuleToken(token)
    sign, whole, fraction, unit = match.groups()
    if fraction and unit == Unit.DAY:
        raise InvalidRuleToken(token, "fractional days are not supported")
    return Offset(
        sign=1 if sign == "+" else -1,
        unit=Unit(unit),
        magnitude=whole + (fraction or ""),
    )


def serialize_rule(rule: Rule) -> str:
    """Inverse of :func:`parse_rule`."""
    return str(rule)


def is_valid_rule(token: str) -> bool:
    """Check whether *token* parses as a rule."""
    try:
        parse_rule(token)
    except InvalidRuleToken:
        return False
    return True


def invert_rule(token: str) -> str:
    """Return the token that navigates in the opposite direction.

    Only the sign changes; the manual sentinel inverts to itself.

    Examples:
        >>> invert_rule("+1m")
        '-1m'
        >>> invert_rule("-0.5y")
        '+0.5y'
        >>> invert_rule("+0")
        '+0'
    """
    return serialize_rule(parse_rule(token).inverted())


def same_rule(left: str, right: str) -> bool:
    """Compare two tokens, treating every manual spelling as equal."""
    if left in _MANUAL_ALIASES and right in _MANUAL_ALIASES:
        return True
    return left == right
