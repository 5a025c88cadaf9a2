"""Spreadsheet export of the current log snapshot."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path

from openpyxl import Workbook
from openpyxl.cell.cell import ILLEGAL_CHARACTERS_RE
from openpyxl.utils import get_column_letter

from models import LogEntry

logger = logging.getLogger(__name__)

EXPORT_FILENAME = "internship_logs.xlsx"
SHEET_TITLE = "Internship Logs"
EXPORT_COLUMNS = ("Date", "Hours", "Description", "Link")
COLUMN_WIDTHS = (12, 8, 60, 40)


def _cell_text(value: str | None) -> str | None:
    """Drop control characters that worksheets cannot hold."""
    if value is None:
        return None
    return ILLEGAL_CHARACTERS_RE.sub("", value)


def export_rows(entries: Iterable[LogEntry]) -> list[dict]:
    """Flatten entries into spreadsheet rows. Unrecorded hours stay blank."""
    return [
        {
            "Date": entry.date.isoformat(),
            "Hours": float(entry.hours) if entry.hours is not None else None,
            "Description": _cell_text(entry.description),
            "Link": _cell_text(entry.work_link) or None,
        }
        for entry in entries
    ]


def write_workbook(entries: Iterable[LogEntry], path: Path | str | None = None) -> Path:
    """Write entries to an .xlsx file and return where it went.

    `path` may be a directory (the fixed filename is used inside it) or a file.
    """
    target = Path(path) if path is not None else Path.cwd()
    if target.is_dir():
        target = target / EXPORT_FILENAME

    rows = export_rows(entries)
    wb = Workbook()
    ws = wb.active
    ws.title = SHEET_TITLE
    ws.append(list(EXPORT_COLUMNS))
    for row in rows:
        ws.append([row[column] for column in EXPORT_COLUMNS])

    for index, width in enumerate(COLUMN_WIDTHS, start=1):
        ws.column_dimensions[get_column_letter(index)].width = width

    target.parent.mkdir(parents=True, exist_ok=True)
    wb.save(target)
    logger.info("Exported %d entries to %s", len(rows), target)
    return target
