"""Tests for format-spec date rendering."""

from datetime import date

import pytest

from rangectl.domain.formatting import DateField, DateFormatter, render_date, render_token
from rangectl.domain.locales import EN, FR, LocaleRegistry

JUNE_FIRST = date(2014, 6, 1)  # a Sunday


class TestRenderDate:
    def test_english_long_form(self) -> None:
        assert render_date(EN.format, JUNE_FIRST, EN) == "Jun 1, 2014"

    def test_french_long_form(self) -> None:
        assert render_date(FR.format, JUNE_FIRST, FR) == "1 Juin 2014"
        assert render_date(FR.format, date(2014, 8, 15), FR) == "15 Août 2014"

    def test_literals_pass_through(self) -> None:
        assert render_date(["[", "Date", "]"], JUNE_FIRST, EN) == "[1]"

    def test_order_preserved(self) -> None:
        spec = ["FullYear", "/", "Month", "/", "Date"]
        assert render_date(spec, date(2014, 12, 25), None) == "2014/12/25"

    def test_spec_not_mutated(self) -> None:
        spec = ["LocaleMonth", " ", "Date"]
        render_date(spec, JUNE_FIRST, EN)
        assert spec == ["LocaleMonth", " ", "Date"]


class TestRenderToken:
    @pytest.mark.parametrize(
        "token,expected",
        [
            ("Date", "1"),
            ("Day", "0"),
            ("Month", "6"),
            ("FullYear", "2014"),
            ("LocaleMonth", "Jun"),
            ("Year", "Year"),  # not a known field, so a literal
        ],
    )
    def test_english(self, token: str, expected: str) -> None:
        assert render_token(token, JUNE_FIRST, EN) == expected

    def test_unknown_locale_field_is_empty(self) -> None:
        assert render_token("LocaleFullYear", JUNE_FIRST, EN) == ""
        assert render_token("LocaleWhatever", JUNE_FIRST, EN) == ""

    def test_missing_weekday_table_is_empty(self) -> None:
        assert render_token("LocaleDay", JUNE_FIRST, EN) == ""

    def test_no_locale_is_empty(self) -> None:
        assert render_token("LocaleMonth", JUNE_FIRST, None) == ""

    def test_weekday_labels(self) -> None:
        days = ["Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat"]
        locale = EN.model_copy(update={"day": days})
        assert render_token("LocaleDay", JUNE_FIRST, locale) == "Sun"

    def test_field_enum_values(self) -> None:
        assert {f.value for f in DateField} == {"Date", "Day", "Month", "FullYear"}


class TestDateFormatter:
    def test_uses_locale_format(self) -> None:
        formatter = DateFormatter(LocaleRegistry.default(), "fr")
        assert formatter.format(JUNE_FIRST) == "1 Juin 2014"

    def test_explicit_spec(self) -> None:
        formatter = DateFormatter(LocaleRegistry.default(), "en")
        assert formatter.format(JUNE_FIRST, ["LocaleMonth"]) == "Jun"

    def test_unknown_language_falls_back(self) -> None:
        formatter = DateFormatter(LocaleRegistry.default(), "xx")
        assert formatter.locale is None
        assert formatter.format(JUNE_FIRST) == "2014-6-1"
