#!/usr/bin/env python3
"""Internship log TUI application."""

from __future__ import annotations

import argparse
import logging
import os
from datetime import date

from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Container, Grid, VerticalScroll
from textual.logging import TextualHandler
from textual.widgets import DataTable, Footer, ListView, Static
from textual.coordinate import Coordinate
from rich.text import Text

import prefs
import storage
from auth import AuthSession, User, uid_for_email
from calendar_grid import DayCell, build_month_grid, cell_at, entry_at, locate_date, shift_month
from errors import AuthError, ModalStateError, QueryError, ValidationError
from export import write_workbook
from i18n import Translator
from models import LogDraft, LogEntry
from screens import ConfirmDeleteScreen, EntryDetailsScreen, EntryFormScreen, LoginScreen
from selection import Selection
from stats import compute_stats
from utils import get_public_holidays
from view_state import MODAL_VIEWING, ViewCoordinator
from widgets import AppHeader, CalendarHeader, EntryCard, EntryListItem, StatsPanel, first_line

logger = logging.getLogger(__name__)

# Preference theme name -> Textual theme.
TEXTUAL_THEMES = {
    "dark": "textual-dark",
    "blue": "nord",
    "light": "textual-light",
}


class LogDataTable(DataTable):
    """DataTable that turns left/right at the calendar edges into month navigation."""

    def on_key(self, event) -> None:
        if getattr(self.app, "view_mode", None) != "calendar" or self.id != "calendar-table":
            return

        column = self.cursor_coordinate.column
        if event.key == "left" and column == 0:
            self.app.action_prev_month()  # type: ignore[attr-defined]
            self.move_cursor(column=6)
            event.prevent_default()
            event.stop()
        elif event.key == "right" and column == 6:
            self.app.action_next_month()  # type: ignore[attr-defined]
            self.move_cursor(column=0)
            event.prevent_default()
            event.stop()


class InternLogApp(App):
    """Main internship log application."""

    CSS = """
    Screen {
        background: $surface;
    }

    #app-header {
        height: auto;
        background: $primary;
        color: $text;
        padding: 0 1;
        text-style: bold;
    }

    #stats-panel {
        height: auto;
        padding: 1 2;
        color: $text;
    }

    #loading, #empty-state {
        height: auto;
        padding: 1 2;
        color: $text-muted;
        text-align: center;
    }

    #selection-bar {
        height: auto;
        padding: 0 2;
        color: $text-muted;
    }

    #list-container, #table-container, #calendar-container, #grid-container {
        height: 1fr;
        margin: 0 2;
    }

    #log-grid {
        grid-size: 3;
        grid-gutter: 1 2;
        height: auto;
    }

    EntryCard {
        height: 6;
        padding: 0 1;
        border: round $panel-lighten-2;
    }

    EntryCard:focus {
        border: round $accent;
    }

    EntryCard.selected {
        border: round $primary;
        background: $boost;
    }

    EntryCard.day-off {
        color: $text-muted;
    }

    #calendar-header {
        height: auto;
        background: $primary;
        color: $text;
        padding: 0 1;
        margin: 1 2 0 2;
        text-style: bold;
    }

    .hidden {
        display: none;
    }

    DataTable {
        height: 100%;
    }

    DataTable > .datatable--cursor {
        background: $secondary;
    }
    """

    BINDINGS = [
        Binding("q", "quit", "Quit"),
        Binding("a", "add_entry", "Add"),
        Binding("e", "edit_entry", "Edit"),
        Binding("space", "toggle_select", "Select"),
        Binding("ctrl+a", "toggle_select_all", "All"),
        Binding("d", "delete_selected", "Delete"),
        Binding("x", "export", "Export"),
        Binding("l", "list_view", "List"),
        Binding("g", "grid_view", "Grid"),
        Binding("t", "table_view", "Table"),
        Binding("c", "calendar_view", "Calendar"),
        Binding("left_square_bracket", "prev_month", "◄ Month"),
        Binding("right_square_bracket", "next_month", "Month ►"),
        Binding("i", "toggle_language", "TH/EN"),
        Binding("m", "cycle_theme", "Theme"),
        Binding("r", "refresh", "Refresh", show=False),
        Binding("ctrl+o", "sign_out", "Sign out"),
        Binding("question_mark", "toggle_help", "?", show=False),
        # Calendar: open the n-th entry of the highlighted day
        *[Binding(str(n), f"open_marker({n - 1})", show=False) for n in range(1, 10)],
    ]

    def __init__(self, user_email: str | None = None):
        super().__init__()
        storage.init_db()

        self.preferences = prefs.load_preferences()
        self.translator = Translator(self.preferences.language)
        self.auth = AuthSession()
        self.coordinator = ViewCoordinator()
        self.log_selection = Selection()

        # Latest snapshot from the live query and what is derived from it
        self.entries: list[LogEntry] = []
        self.stats = compute_stats([])
        self.is_loading = True

        today = date.today()
        self.calendar_year = today.year
        self.calendar_month = today.month
        self.calendar_cells: list[DayCell] = []
        self.holiday_country = os.environ.get("INTERNLOG_HOLIDAYS", "TH")
        self._holidays: dict[int, dict[date, str]] = {}

        self._initial_email = user_email
        self._subscription: storage.Subscription | None = None
        self._unsubscribe_auth = None
        self._help_panel_visible = False

    @property
    def view_mode(self) -> str:
        return self.coordinator.mode

    def compose(self) -> ComposeResult:
        yield AppHeader(id="app-header")
        yield StatsPanel(id="stats-panel")
        yield Static(id="loading")
        yield Static(id="empty-state", classes="hidden")
        # List view
        yield Container(ListView(id="log-list"), id="list-container")
        # Grid view (hidden by default)
        yield VerticalScroll(Grid(id="log-grid"), id="grid-container", classes="hidden")
        # Table view (hidden by default)
        yield Container(LogDataTable(id="log-table"), id="table-container", classes="hidden")
        # Calendar view (hidden by default)
        yield CalendarHeader(self.calendar_year, self.calendar_month, id="calendar-header", classes="hidden")
        yield Container(LogDataTable(id="calendar-table"), id="calendar-container", classes="hidden")
        yield Static(id="selection-bar")
        yield Footer()

    def on_mount(self):
        self._apply_theme()
        self._setup_log_table()
        self._setup_calendar_table()
        self._set_view_mode(self.view_mode)

        email = self._initial_email or os.environ.get("INTERNLOG_USER")
        if email:
            try:
                self.auth.sign_in(email)
            except ValidationError:
                logger.warning("Ignoring blank startup user")
        self._unsubscribe_auth = self.auth.subscribe(self._on_auth_changed)

        # Pick up writes made by other processes
        self.set_interval(5, self._poll_store)

    def on_unmount(self):
        self._cancel_subscription()
        if self._unsubscribe_auth is not None:
            self._unsubscribe_auth()
            self._unsubscribe_auth = None

    def _setup_log_table(self):
        t = self.translator.t
        table = self.query_one("#log-table", DataTable)
        table.clear(columns=True)
        table.cursor_type = "row"
        table.add_column("", width=3)
        table.add_column(t("date"), width=18)
        table.add_column(t("status"), width=16)
        table.add_column(t("hours"), width=8)
        table.add_column(t("description"), width=48)
        table.add_column(t("link"), width=6)

    def _setup_calendar_table(self):
        table = self.query_one("#calendar-table", DataTable)
        table.clear(columns=True)
        table.cursor_type = "cell"
        for index, name in enumerate(self.translator.weekday_headers()):
            table.add_column(name, width=14, key=f"dow-{index}")

    # --- Auth and live data ---

    def _on_auth_changed(self, user: User | None) -> None:
        """Start or stop the live query when the signed-in user changes."""
        self._cancel_subscription()
        self.entries = []
        self.stats = compute_stats([])
        self.log_selection.clear()
        self.coordinator.close()

        if user is None:
            self.is_loading = False
            self._refresh_display()
            self.push_screen(LoginScreen(self.translator), self._on_login)
            return

        self.is_loading = True
        self._refresh_display()
        self._subscription = storage.subscribe(user.uid, self._on_snapshot, self._on_query_error)

    def _on_login(self, email: str | None) -> None:
        if email is None:
            self.exit()
            return
        try:
            self.auth.sign_in(email)
        except ValidationError as exc:
            self.notify(str(exc), severity="error")
            self.push_screen(LoginScreen(self.translator), self._on_login)

    def _cancel_subscription(self) -> None:
        if self._subscription is not None:
            self._subscription.cancel()
            self._subscription = None

    def _on_snapshot(self, entries: list[LogEntry]) -> None:
        """Apply a new snapshot and recompute everything derived from it."""
        self.entries = entries
        self.is_loading = False
        stale = self.log_selection.prune(e.id for e in entries)
        if stale:
            logger.debug("Dropped %d stale selections", len(stale))
        self.stats = compute_stats(entries)
        self._refresh_display()

    def _on_query_error(self, error: QueryError) -> None:
        self.entries = []
        self.is_loading = False
        self.log_selection.clear()
        self.stats = compute_stats([])
        self._refresh_display()
        self.notify(self.translator.t("load_failed"), severity="error")

    def _poll_store(self) -> None:
        storage.refresh()

    def _current_user(self) -> User | None:
        """The signed-in user, or None after sending the user to the login screen."""
        try:
            return self.auth.require_user()
        except AuthError:
            self.push_screen(LoginScreen(self.translator), self._on_login)
            return None

    def _entry_by_id(self, entry_id: str | None) -> LogEntry | None:
        for entry in self.entries:
            if entry.id == entry_id:
                return entry
        return None

    def _visible_ids(self) -> list[str]:
        return [e.id for e in self.entries]

    # --- Display ---

    def _refresh_display(self):
        self._refresh_chrome()
        if self.view_mode == "list":
            self._refresh_list_display()
        elif self.view_mode == "grid":
            self._refresh_grid_display()
        elif self.view_mode == "table":
            self._refresh_table_display()
        elif self.view_mode == "calendar":
            self._refresh_calendar_display()

    def _refresh_chrome(self):
        """Header, stats, loading/empty notices and the selection bar."""
        t = self.translator.t
        user = self.auth.current_user
        self.query_one("#app-header", AppHeader).update_display(
            self.translator, user.email if user else None, self.preferences.theme
        )
        self.query_one("#stats-panel", StatsPanel).update_display(self.stats, self.translator)

        loading = self.query_one("#loading", Static)
        loading.update(t("loading"))
        loading.set_class(not self.is_loading, "hidden")

        empty = self.query_one("#empty-state", Static)
        empty.update(f"{t('no_logs')}\n{t('start_adding')}")
        empty.set_class(self.is_loading or bool(self.entries) or self.view_mode == "calendar", "hidden")

        bar = self.query_one("#selection-bar", Static)
        count = len(self.log_selection)
        text = Text()
        if count:
            text.append(f"{count} {t('selected')}", style="bold")
            text.append(f"   d: {t('delete')}", style="dim")
        all_selected = self.log_selection.all_selected(len(self.entries))
        toggle_label = t("deselect_all", "Deselect All") if all_selected else t("select_all")
        text.append(f"   ctrl+a: {toggle_label}", style="dim")
        bar.update(text)

    def _refresh_list_display(self):
        list_view = self.query_one("#log-list", ListView)
        index = list_view.index
        list_view.clear()
        list_view.extend(
            EntryListItem(entry, entry.id in self.log_selection, self.translator)
            for entry in self.entries
        )
        if self.entries and index is not None:
            restored = min(index, len(self.entries) - 1)
            self.call_after_refresh(setattr, list_view, "index", restored)

    def _refresh_grid_display(self):
        grid = self.query_one("#log-grid", Grid)
        focused_id = self._focused_card_id()
        grid.remove_children()
        cards = [
            EntryCard(entry, entry.id in self.log_selection, self.translator)
            for entry in self.entries
        ]
        grid.mount_all(cards)
        for card in cards:
            if card.entry_id == focused_id:
                self.call_after_refresh(card.focus)
                break

    def _refresh_table_display(self):
        t = self.translator.t
        table = self.query_one("#log-table", DataTable)
        cursor_row = table.cursor_row
        table.clear()

        for entry in self.entries:
            selected = entry.id in self.log_selection
            if entry.is_day_off:
                status = Text(t("status_holiday"), style="red")
            else:
                status = Text(t("status_work"), style="green")
            hours = f"{float(entry.effective_hours):g}"
            table.add_row(
                Text("☑" if selected else "☐", style="bold blue" if selected else "dim"),
                self.translator.format_date(entry.date),
                status,
                Text(hours, style="dim") if entry.hours is None else hours,
                first_line(entry.description, 48),
                Text("🔗", style="blue") if entry.work_link else "",
                key=entry.id,
            )

        if self.entries:
            table.move_cursor(row=min(cursor_row, len(self.entries) - 1))

    def _get_holidays(self, year: int) -> dict[date, str]:
        if year not in self._holidays:
            self._holidays[year] = get_public_holidays(year, self.holiday_country)
        return self._holidays[year]

    def _refresh_calendar_display(self):
        header = self.query_one("#calendar-header", CalendarHeader)
        header.year = self.calendar_year
        header.month = self.calendar_month
        header.update_display(self.translator)

        self.calendar_cells = build_month_grid(
            self.calendar_year,
            self.calendar_month,
            self.entries,
            self._get_holidays(self.calendar_year),
        )

        table = self.query_one("#calendar-table", DataTable)
        cursor = table.cursor_coordinate
        table.clear()
        for week in range(6):
            row = [self._render_day_cell(cell) for cell in self.calendar_cells[week * 7:(week + 1) * 7]]
            table.add_row(*row, key=f"week-{week}", height=3)
        table.move_cursor(row=cursor.row, column=cursor.column)

    def _render_day_cell(self, cell: DayCell) -> Text:
        """Day number, first entry summary and one dot per further entry."""
        text = Text()
        if not cell.in_month:
            text.append(str(cell.day), style="dim")
            return text

        first = cell.first_entry
        day_off = first is not None and first.is_day_off
        day_style = "bold red" if (cell.holiday or day_off) else "bold"
        if cell.date == date.today():
            day_style += " underline"
        text.append(str(cell.day), style=day_style)
        if first is not None and first.id in self.log_selection:
            text.append(" ☑", style="blue")

        if first is not None:
            if day_off:
                text.append("\n" + first_line(self.translator.t("holiday_leave"), 13), style="red")
            else:
                text.append("\n" + first_line(first.description, 13), style="cyan")
        elif cell.holiday:
            text.append("\n" + first_line(cell.holiday, 13), style="dim red")

        if cell.extra_count:
            text.append("\n" + "●" * min(cell.extra_count, 8), style="yellow")
        return text

    def _highlighted_cell(self) -> DayCell | None:
        table = self.query_one("#calendar-table", DataTable)
        coordinate = table.cursor_coordinate
        return cell_at(self.calendar_cells, coordinate.row, coordinate.column)

    def _focused_card_id(self) -> str | None:
        focused = self.focused
        if isinstance(focused, EntryCard):
            return focused.entry_id
        return None

    def _highlighted_entry_id(self) -> str | None:
        """Entry under the cursor in the current view."""
        if self.view_mode == "list":
            item = self.query_one("#log-list", ListView).highlighted_child
            return item.entry_id if isinstance(item, EntryListItem) else None
        if self.view_mode == "grid":
            return self._focused_card_id()
        if self.view_mode == "table":
            table = self.query_one("#log-table", DataTable)
            if not self.entries:
                return None
            row_key = table.coordinate_to_cell_key(Coordinate(table.cursor_row, 0)).row_key
            return str(row_key.value) if row_key else None
        if self.view_mode == "calendar":
            cell = self._highlighted_cell()
            if cell and cell.first_entry:
                return cell.first_entry.id
        return None

    # --- View modes ---

    def _set_view_mode(self, mode: str):
        """Switch between view modes and toggle widget visibility."""
        self.coordinator.set_mode(mode)

        view_widgets = {
            "list": ["#list-container"],
            "grid": ["#grid-container"],
            "table": ["#table-container"],
            "calendar": ["#calendar-header", "#calendar-container"],
        }
        for widget_mode, widget_ids in view_widgets.items():
            for widget_id in widget_ids:
                self.query_one(widget_id).set_class(widget_mode != mode, "hidden")

        self.refresh_bindings()
        self._refresh_display()

        if mode == "list":
            self.query_one("#log-list", ListView).focus()
        elif mode == "table":
            self.query_one("#log-table", DataTable).focus()
        elif mode == "calendar":
            self.query_one("#calendar-table", DataTable).focus()
            self._select_calendar_date(date.today())

    def _select_calendar_date(self, target: date):
        position = locate_date(self.calendar_cells, target)
        if position:
            row, column = position
            self.query_one("#calendar-table", DataTable).move_cursor(row=row, column=column)

    def check_action(self, action: str, parameters: tuple[object, ...]) -> bool | None:
        """Check if an action is available in the current state."""
        if self.coordinator.modal.is_open:
            # Keys go to the open modal; q must not exit from behind it
            return False
        if self.auth.current_user is None:
            return action == "quit"
        if action == "edit_entry":
            # Quick edit only from the table and grid
            return True if self.view_mode in ("table", "grid") else None
        elif action in ("prev_month", "next_month", "open_marker"):
            return True if self.view_mode == "calendar" else None
        elif action == "list_view":
            return self.view_mode != "list"
        elif action == "grid_view":
            return self.view_mode != "grid"
        elif action == "table_view":
            return self.view_mode != "table"
        elif action == "calendar_view":
            return self.view_mode != "calendar"
        return True

    def action_list_view(self):
        self._set_view_mode("list")

    def action_grid_view(self):
        self._set_view_mode("grid")

    def action_table_view(self):
        self._set_view_mode("table")

    def action_calendar_view(self):
        self._set_view_mode("calendar")

    def action_prev_month(self):
        self.calendar_year, self.calendar_month = shift_month(self.calendar_year, self.calendar_month, -1)
        self._refresh_display()

    def action_next_month(self):
        self.calendar_year, self.calendar_month = shift_month(self.calendar_year, self.calendar_month, 1)
        self._refresh_display()

    # --- Modals ---

    def _open_viewing(self, entry_id: str) -> None:
        entry = self._entry_by_id(entry_id)
        if entry is None:
            return
        try:
            self.coordinator.open_viewing(entry_id)
        except ModalStateError:
            return
        self.push_screen(EntryDetailsScreen(entry, self.translator), self._on_details_closed)

    def _on_details_closed(self, result: str | None) -> None:
        modal = self.coordinator.modal
        if result == "edit" and modal.kind == MODAL_VIEWING and modal.entry_id:
            self._open_editing(modal.entry_id)
        else:
            self.coordinator.close()

    def _open_editing(self, entry_id: str) -> None:
        entry = self._entry_by_id(entry_id)
        user = self._current_user()
        if entry is None or user is None:
            self.coordinator.close()
            return
        try:
            self.coordinator.open_editing(entry_id)
        except ModalStateError:
            return

        def save(draft: LogDraft) -> None:
            self.coordinator.run_save(lambda: storage.update_entry(user.uid, entry.id, draft))

        self.push_screen(EntryFormScreen(self.translator, save, entry=entry), self._on_form_closed)

    def _on_form_closed(self, saved: bool | None) -> None:
        self.coordinator.close()
        if saved:
            self.notify(self.translator.t("saved"))

    def action_add_entry(self):
        """Open the new entry form."""
        user = self._current_user()
        if user is None:
            return
        try:
            self.coordinator.open_adding()
        except ModalStateError:
            return

        initial_date = None
        if self.view_mode == "calendar":
            cell = self._highlighted_cell()
            if cell and cell.in_month:
                initial_date = cell.date

        def save(draft: LogDraft) -> str:
            return self.coordinator.run_save(lambda: storage.create_entry(user.uid, draft))

        self.push_screen(
            EntryFormScreen(self.translator, save, initial_date=initial_date),
            self._on_form_closed,
        )

    def action_edit_entry(self):
        """Quick edit of the highlighted entry (table and grid views)."""
        entry_id = self._highlighted_entry_id()
        if entry_id:
            self._open_editing(entry_id)

    def action_open_marker(self, index: int):
        """Open the index-th entry of the highlighted calendar day."""
        cell = self._highlighted_cell()
        if cell is None:
            return
        entry = entry_at(cell, index)
        if entry is not None:
            self._open_viewing(entry.id)

    def action_delete_selected(self):
        """Ask for confirmation, then delete every selected entry in one batch."""
        t = self.translator.t
        if not len(self.log_selection):
            self.notify(t("nothing_selected"), severity="warning")
            return
        user = self._current_user()
        if user is None:
            return
        try:
            self.coordinator.open_confirm_delete(len(self.log_selection))
        except ModalStateError:
            return

        ids = sorted(self.log_selection.ids)

        def do_delete() -> None:
            storage.delete_entries(user.uid, ids)

        def on_closed(confirmed: bool | None) -> None:
            self.coordinator.close()
            if confirmed:
                self.log_selection.clear()
                self.notify(f"{t('deleted')} {len(ids)}")
                self._refresh_display()

        self.push_screen(ConfirmDeleteScreen(len(ids), self.translator, do_delete), on_closed)

    # --- Selection ---

    def action_toggle_select(self):
        entry_id = self._highlighted_entry_id()
        if entry_id is None:
            return
        self.log_selection.toggle(entry_id)
        self._refresh_display()

    def action_toggle_select_all(self):
        self.log_selection.toggle_all(self._visible_ids())
        self._refresh_display()

    # --- Opening entries from each view ---

    def on_list_view_selected(self, event: ListView.Selected) -> None:
        if isinstance(event.item, EntryListItem):
            self._open_viewing(event.item.entry_id)

    def on_entry_card_chosen(self, event: EntryCard.Chosen) -> None:
        self._open_viewing(event.entry_id)

    def on_data_table_row_selected(self, event: DataTable.RowSelected) -> None:
        """Handle Enter/click on a table row."""
        if event.control.id != "log-table" or self.view_mode != "table":
            return
        if event.row_key:
            self._open_viewing(str(event.row_key.value))

    def on_data_table_cell_selected(self, event: DataTable.CellSelected) -> None:
        """Handle Enter/click on a calendar day: open its first entry."""
        if event.control.id != "calendar-table" or self.view_mode != "calendar":
            return
        cell = cell_at(self.calendar_cells, event.coordinate.row, event.coordinate.column)
        if cell is not None and cell.first_entry is not None:
            self._open_viewing(cell.first_entry.id)

    # --- Export, preferences, session ---

    def action_export(self):
        """Write the current snapshot to internship_logs.xlsx."""
        t = self.translator.t
        try:
            path = write_workbook(self.entries)
        except (OSError, ValueError) as exc:
            logger.error("Export failed: %s", exc)
            self.notify(f"{t('export_failed')}: {exc}", severity="error")
            return
        self.notify(f"{t('exported_to')} {path}")

    def action_toggle_language(self):
        self.translator = self.translator.toggled()
        self.preferences.language = self.translator.language
        prefs.save_preferences(self.preferences)
        # Column headers are translated
        self._setup_log_table()
        self._setup_calendar_table()
        self._refresh_display()

    def action_cycle_theme(self):
        self.preferences.theme = prefs.next_theme(self.preferences.theme)
        prefs.save_preferences(self.preferences)
        self._apply_theme()
        self._refresh_chrome()

    def _apply_theme(self):
        self.theme = TEXTUAL_THEMES.get(self.preferences.theme, "textual-dark")

    def action_refresh(self):
        storage.refresh()

    def action_sign_out(self):
        self.auth.sign_out()

    def action_toggle_help(self):
        """Toggle display of keyboard shortcuts panel."""
        if self._help_panel_visible:
            self.action_hide_help_panel()
        else:
            self.action_show_help_panel()
        self._help_panel_visible = not self._help_panel_visible


def _configure_logging():
    level = os.environ.get("INTERNLOG_LOG_LEVEL", "INFO").upper()
    handlers: list[logging.Handler] = [TextualHandler()]
    if log_file := os.environ.get("INTERNLOG_LOG_FILE"):
        handlers.append(logging.FileHandler(log_file, encoding="utf-8"))
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        handlers=handlers,
    )


def main():
    parser = argparse.ArgumentParser(description="Internship log")
    parser.add_argument("--db-info", action="store_true", help="show database location and exit")
    parser.add_argument("--user", help="e-mail to sign in with")
    parser.add_argument("--export", metavar="PATH", help="export the user's logs to a spreadsheet and exit")
    args = parser.parse_args()

    _configure_logging()

    if args.db_info:
        from datetime import datetime
        db_path = storage.DB_PATH
        print(f"Database: {db_path}")
        if db_path.exists():
            mtime = datetime.fromtimestamp(db_path.stat().st_mtime)
            size = db_path.stat().st_size
            print(f"Modified: {mtime.strftime('%Y-%m-%d %H:%M:%S')}")
            print(f"Size: {size:,} bytes")
        else:
            print("Status: Does not exist (will be created on first run)")
        return

    if args.export:
        email = args.user or os.environ.get("INTERNLOG_USER")
        if not email:
            parser.error("--export needs --user or INTERNLOG_USER")
        storage.init_db()
        try:
            entries = storage.get_entries(uid_for_email(email))
            path = write_workbook(entries, args.export)
        except (QueryError, OSError, ValueError) as exc:
            parser.exit(1, f"Export failed: {exc}\n")
        print(f"Exported {len(entries)} entries to {path}")
        return

    app = InternLogApp(user_email=args.user)
    app.run()


if __name__ == "__main__":
    main()
