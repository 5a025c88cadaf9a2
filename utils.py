"""Helpers for parsing form input and looking up public holidays."""

from __future__ import annotations

from datetime import date
from decimal import Decimal, InvalidOperation

from errors import ValidationError

# (value, translation key) choices for the hours field.
HOURS_OPTIONS = [
    ("none", "hours_not_recorded"),
    ("8", "full_day"),
    ("4", "half_day"),
    ("0", "holiday_leave"),
    ("custom", "custom"),
]


def parse_date_input(val: str) -> date:
    """Parse a YYYY-MM-DD date typed into a form."""
    try:
        return date.fromisoformat(val.strip())
    except ValueError as exc:
        raise ValidationError(f"Invalid date: {val!r}") from exc


def parse_hours_input(choice: str, custom: str = "") -> Decimal | None:
    """Turn the hours selector (and custom field) into a value.

    "none" means hours were not recorded and stays None.
    """
    if not choice or choice == "none":
        return None
    raw = custom.strip() if choice == "custom" else choice
    if not raw:
        raise ValidationError("Custom hours are required")
    try:
        hours = Decimal(raw)
    except InvalidOperation as exc:
        raise ValidationError(f"Invalid hours: {raw!r}") from exc
    if not hours.is_finite() or hours < 0:
        raise ValidationError(f"Invalid hours: {raw!r}")
    return hours


def hours_choice(hours: Decimal | None) -> tuple[str, str]:
    """Selector value and custom text that represent existing hours."""
    if hours is None:
        return "none", ""
    for value, _ in HOURS_OPTIONS:
        if value not in ("none", "custom") and Decimal(value) == hours:
            return value, ""
    return "custom", format_hours(hours)


def format_hours(hours: Decimal) -> str:
    return f"{float(hours):g}"


def get_public_holidays(year: int, country: str) -> dict[date, str]:
    """Get public holidays for a country and year; empty if none configured."""
    if not country:
        return {}
    import holidays
    try:
        country_holidays = holidays.country_holidays(country, years=year)
    except NotImplementedError:
        return {}
    return {d: name for d, name in country_holidays.items()}
