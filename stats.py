"""Summary statistics derived from the current log snapshot."""

from __future__ import annotations

from collections.abc import Iterable
from decimal import Decimal

from i18n import Translator
from models import HOURS_PER_DAY, WORKING_DAYS_PER_MONTH, LogEntry, LogStats


def compute_stats(entries: Iterable[LogEntry]) -> LogStats:
    """Recompute every total from scratch for the given entries."""
    entries = list(entries)
    if not entries:
        return LogStats()

    total_hours = sum((e.effective_hours for e in entries), Decimal("0"))
    total_days = total_hours / HOURS_PER_DAY
    days_off = sum(1 for e in entries if e.is_day_off)
    dates = [e.date for e in entries]

    return LogStats(
        total_hours=total_hours,
        total_days=total_days,
        total_months=total_days / WORKING_DAYS_PER_MONTH,
        days_off=days_off,
        first_date=min(dates),
        last_date=max(dates),
    )


def format_date_range(stats: LogStats, translator: Translator) -> str:
    """Display the first and last logged dates, or the empty sentinel."""
    date_range = stats.date_range
    if date_range is None:
        return translator.t("no_records", "No records")
    first, last = date_range
    return f"{translator.format_date(first)} - {translator.format_date(last)}"


def format_number(value: Decimal, places: int = 1) -> str:
    """Format a total for display, dropping trailing zeros on whole numbers."""
    if value == value.to_integral_value():
        return str(int(value))
    return f"{float(value):.{places}f}"
