"""Month calendar layout for the calendar view.

Months are 1-based (1 = January), as in ``datetime.date``. Weeks start on
Sunday. The grid is always six weeks long.
"""

from __future__ import annotations

from calendar import monthrange
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from datetime import date, timedelta

from models import LogEntry

GRID_WEEKS = 6
GRID_CELLS = GRID_WEEKS * 7


@dataclass(frozen=True)
class DayCell:
    date: date
    in_month: bool
    entries: tuple[LogEntry, ...] = ()
    holiday: str | None = None

    @property
    def day(self) -> int:
        return self.date.day

    @property
    def first_entry(self) -> LogEntry | None:
        return self.entries[0] if self.entries else None

    @property
    def extra_count(self) -> int:
        """Entries beyond the first, shown as dots."""
        return max(len(self.entries) - 1, 0)


def first_weekday(year: int, month: int) -> int:
    """Day of week of the 1st of the month, 0 = Sunday."""
    return (date(year, month, 1).weekday() + 1) % 7


def days_in_month(year: int, month: int) -> int:
    return monthrange(year, month)[1]


def shift_month(year: int, month: int, delta: int) -> tuple[int, int]:
    index = year * 12 + (month - 1) + delta
    return index // 12, index % 12 + 1


def build_month_grid(
    year: int,
    month: int,
    entries: Iterable[LogEntry],
    holidays: Mapping[date, str] | None = None,
) -> list[DayCell]:
    """Lay out 42 day cells for a month with the matching entries attached."""
    entries = list(entries)
    holidays = holidays or {}
    first = date(year, month, 1)
    leading = first_weekday(year, month)
    month_days = days_in_month(year, month)

    cells = []
    for offset in range(leading, 0, -1):
        cells.append(DayCell(date=first - timedelta(days=offset), in_month=False))

    for day in range(1, month_days + 1):
        d = date(year, month, day)
        matching = tuple(e for e in entries if e.date == d)
        cells.append(DayCell(date=d, in_month=True, entries=matching, holiday=holidays.get(d)))

    last = date(year, month, month_days)
    trailing = GRID_CELLS - len(cells)
    for offset in range(1, trailing + 1):
        cells.append(DayCell(date=last + timedelta(days=offset), in_month=False))

    return cells


def entry_at(cell: DayCell, index: int) -> LogEntry | None:
    """Entry behind the index-th marker of a cell (0 is the summary)."""
    if not cell.in_month or index < 0 or index >= len(cell.entries):
        return None
    return cell.entries[index]


def cell_at(cells: list[DayCell], row: int, column: int) -> DayCell | None:
    index = row * 7 + column
    if 0 <= index < len(cells):
        return cells[index]
    return None


def locate_date(cells: list[DayCell], d: date) -> tuple[int, int] | None:
    """(row, column) of an in-month date in the grid."""
    for index, cell in enumerate(cells):
        if cell.in_month and cell.date == d:
            return divmod(index, 7)
    return None
