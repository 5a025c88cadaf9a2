"""Tests for calendar_grid.py - month layout for the calendar view."""

from datetime import date

import pytest

from calendar_grid import (
    GRID_CELLS,
    build_month_grid,
    cell_at,
    days_in_month,
    entry_at,
    first_weekday,
    locate_date,
    shift_month,
)


class TestMonthHelpers:
    def test_first_weekday_sunday_is_zero(self):
        # 1 September 2024 was a Sunday
        assert first_weekday(2024, 9) == 0
        # 1 February 2024 was a Thursday
        assert first_weekday(2024, 2) == 4

    def test_days_in_month_leap_year(self):
        assert days_in_month(2024, 2) == 29
        assert days_in_month(2023, 2) == 28

    @pytest.mark.parametrize(
        "year,month,delta,expected",
        [
            (2024, 1, -1, (2023, 12)),
            (2024, 12, 1, (2025, 1)),
            (2024, 6, 0, (2024, 6)),
            (2024, 3, 13, (2025, 4)),
        ],
    )
    def test_shift_month(self, year, month, delta, expected):
        assert shift_month(year, month, delta) == expected


class TestBuildMonthGrid:
    """Tests for build_month_grid."""

    def test_february_2024(self):
        cells = build_month_grid(2024, 2, [])

        assert len(cells) == GRID_CELLS == 42
        leading = [c for c in cells[:4]]
        assert all(not c.in_month for c in leading)
        assert [c.date for c in leading] == [date(2024, 1, 28), date(2024, 1, 29), date(2024, 1, 30), date(2024, 1, 31)]
        assert cells[4].date == date(2024, 2, 1)
        assert cells[4].in_month
        assert sum(1 for c in cells if c.in_month) == 29
        assert sum(1 for c in cells[33:] if not c.in_month) == 9
        assert cells[-1].date == date(2024, 3, 9)

    def test_always_six_weeks(self):
        for month in range(1, 13):
            assert len(build_month_grid(2025, month, [])) == 42

    def test_month_starting_sunday_has_no_leading_padding(self):
        cells = build_month_grid(2024, 9, [])
        assert cells[0].date == date(2024, 9, 1)
        assert cells[0].in_month

    def test_entries_attached_to_their_day(self, make_entry):
        first = make_entry(date(2024, 2, 14), description="Sprint planning")
        second = make_entry(date(2024, 2, 14), description="Retro")
        other = make_entry(date(2024, 3, 1))
        cells = build_month_grid(2024, 2, [first, second, other])

        row, column = locate_date(cells, date(2024, 2, 14))
        cell = cell_at(cells, row, column)
        assert cell.entries == (first, second)
        assert cell.first_entry is first
        assert cell.extra_count == 1

    def test_padding_cells_have_no_entries(self, make_entry):
        entry = make_entry(date(2024, 3, 1))
        cells = build_month_grid(2024, 2, [entry])
        padding = [c for c in cells if c.date == date(2024, 3, 1)]
        assert len(padding) == 1
        assert not padding[0].in_month
        assert padding[0].entries == ()

    def test_holidays_marked(self):
        cells = build_month_grid(2024, 4, [], {date(2024, 4, 13): "Songkran Festival"})
        row, column = locate_date(cells, date(2024, 4, 13))
        assert cell_at(cells, row, column).holiday == "Songkran Festival"


class TestCellLookup:
    def test_entry_at(self, make_entry):
        entries = [make_entry(date(2024, 2, 5)), make_entry(date(2024, 2, 5))]
        cells = build_month_grid(2024, 2, entries)
        cell = cell_at(cells, *locate_date(cells, date(2024, 2, 5)))

        assert entry_at(cell, 0) is entries[0]
        assert entry_at(cell, 1) is entries[1]
        assert entry_at(cell, 2) is None
        assert entry_at(cell, -1) is None

    def test_cell_at_out_of_range(self):
        cells = build_month_grid(2024, 2, [])
        assert cell_at(cells, 6, 0) is None
        assert cell_at(cells, 5, 6) is cells[41]

    def test_locate_date_outside_month(self):
        cells = build_month_grid(2024, 2, [])
        assert locate_date(cells, date(2024, 1, 31)) is None
