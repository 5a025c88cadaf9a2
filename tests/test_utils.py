"""Tests for utils.py - form parsing and holidays."""

from datetime import date
from decimal import Decimal

import pytest

from errors import ValidationError
from utils import format_hours, get_public_holidays, hours_choice, parse_date_input, parse_hours_input


class TestParseDateInput:
    def test_iso_date(self):
        assert parse_date_input(" 2024-01-10 ") == date(2024, 1, 10)

    @pytest.mark.parametrize("val", ["", "10/01/2024", "2024-13-01", "yesterday"])
    def test_invalid(self, val):
        with pytest.raises(ValidationError):
            parse_date_input(val)


class TestParseHoursInput:
    def test_not_recorded(self):
        assert parse_hours_input("none") is None
        assert parse_hours_input("") is None

    def test_presets(self):
        assert parse_hours_input("8") == Decimal("8")
        assert parse_hours_input("4") == Decimal("4")
        assert parse_hours_input("0") == Decimal("0")

    def test_custom(self):
        assert parse_hours_input("custom", "6.5") == Decimal("6.5")

    @pytest.mark.parametrize("custom", ["", "abc", "-1", "NaN", "Infinity"])
    def test_invalid_custom(self, custom):
        with pytest.raises(ValidationError):
            parse_hours_input("custom", custom)


class TestHoursChoice:
    def test_none(self):
        assert hours_choice(None) == ("none", "")

    def test_preset(self):
        assert hours_choice(Decimal("8")) == ("8", "")
        assert hours_choice(Decimal("0")) == ("0", "")

    def test_custom(self):
        assert hours_choice(Decimal("6.5")) == ("custom", "6.5")


def test_format_hours():
    assert format_hours(Decimal("8")) == "8"
    assert format_hours(Decimal("7.5")) == "7.5"


class TestPublicHolidays:
    def test_no_country(self):
        assert get_public_holidays(2024, "") == {}

    def test_thailand(self):
        holidays = get_public_holidays(2024, "TH")
        assert date(2024, 4, 13) in holidays

    def test_unknown_country(self):
        assert get_public_holidays(2024, "ZZ") == {}
