"""Typed failures raised by the domain layer.

Services translate these into ``ServiceResult`` errors; nothing here is
fatal to the caller.
"""

from __future__ import annotations


class DateRangeError(Exception):
    """Base class for all rangectl domain errors."""

    code = "DATERANGE_ERROR"


class InvalidRuleToken(DateRangeError, ValueError):
    """A rule token is malformed or cannot be used for the operation."""

    code = "INVALID_RULE"

    def __init__(self, token: str, reason: str = "does not match the rule grammar") -> None:
        self.token = token
        self.reason = reason
        super().__init__(f"Invalid rule {token!r}: {reason}")


class InvalidDateString(DateRangeError, ValueError):
    """Date text is not a valid ``YYYY-MM-DD`` calendar date."""

    code = "INVALID_DATE"

    def __init__(self, value: str) -> None:
        self.value = value
        super().__init__(f"Invalid date {value!r}: expected YYYY-MM-DD")


class UnresolvedLocaleField(DateRangeError, LookupError):
    """A locale, or a field within one, has no entry."""

    code = "UNKNOWN_LOCALE"

    def __init__(self, lang: str, field: str | None = None) -> None:
        self.lang = lang
        self.field = field
        if field is None:
            msg = f"No locale registered for {lang!r}"
        else:
            msg = f"Locale {lang!r} has no entry for {field!r}"
        super().__init__(msg)


class RangeOrderError(DateRangeError, ValueError):
    """A range start falls after its end."""

    code = "INVALID_RANGE"


class UnknownRule(InvalidRuleToken):
    """A valid rule that is not among a selector's configured ranges."""

    code = "UNKNOWN_RULE"

    def __init__(self, token: str) -> None:
        super().__init__(token, "not one of the configured ranges")
