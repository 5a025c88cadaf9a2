from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal

from errors import ValidationError

# Hours assumed for an entry whose hours were never recorded.
DEFAULT_HOURS = Decimal("8")
HOURS_PER_DAY = Decimal("8")
# Fixed approximation used to express days as months.
WORKING_DAYS_PER_MONTH = Decimal("22")


@dataclass(frozen=True)
class LogEntry:
    id: str
    date: date
    description: str
    user_id: str
    hours: Decimal | None = None
    work_link: str | None = None
    created_at: datetime | None = None

    @property
    def effective_hours(self) -> Decimal:
        """Hours counted towards totals (recorded hours, or the default)."""
        if self.hours is None:
            return DEFAULT_HOURS
        return self.hours

    @property
    def is_day_off(self) -> bool:
        """True only when zero hours were explicitly recorded."""
        return self.hours is not None and self.hours == 0

    def to_draft(self) -> LogDraft:
        return LogDraft(
            date=self.date,
            description=self.description,
            hours=self.hours,
            work_link=self.work_link,
        )


@dataclass
class LogDraft:
    """The user-editable fields of an entry, as submitted from a form."""

    date: date
    description: str
    hours: Decimal | None = None
    work_link: str | None = None

    def validate(self) -> None:
        if not self.description or not self.description.strip():
            raise ValidationError("Description is required")
        if self.hours is not None and self.hours < 0:
            raise ValidationError("Hours cannot be negative")


@dataclass(frozen=True)
class LogStats:
    total_hours: Decimal = Decimal("0")
    total_days: Decimal = Decimal("0")
    total_months: Decimal = Decimal("0")
    days_off: int = 0
    first_date: date | None = None
    last_date: date | None = None

    @property
    def date_range(self) -> tuple[date, date] | None:
        if self.first_date is None or self.last_date is None:
            return None
        return (self.first_date, self.last_date)


THEMES = ("dark", "blue", "light")
LANGUAGES = ("TH", "EN")


@dataclass
class Preferences:
    theme: str = "dark"
    language: str = "TH"
