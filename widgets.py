"""Custom widgets for the internship log application."""

from __future__ import annotations

from textual.message import Message
from textual.widgets import ListItem, Label, Static
from rich.text import Text

from i18n import Translator
from models import LogEntry, LogStats
from stats import format_date_range, format_number
from utils import format_hours


def hours_badge(entry: LogEntry, translator: Translator) -> Text:
    """Hours label for an entry; zero hours shows the holiday badge."""
    if entry.is_day_off:
        return Text(translator.t("holiday_leave"), style="bold red")
    if entry.hours is None:
        return Text(f"({format_hours(entry.effective_hours)} {translator.t('hours_suffix')})", style="dim")
    return Text(f"{format_hours(entry.hours)} {translator.t('hours_suffix')}", style="cyan")


def first_line(text: str, width: int) -> str:
    line = text.strip().splitlines()[0] if text.strip() else ""
    if len(line) > width:
        return line[: width - 1] + "…"
    return line


class AppHeader(Static):
    """Title bar with the signed-in user, language and theme."""

    def update_display(self, translator: Translator, email: str | None, theme: str):
        text = Text()
        text.append(translator.t("internship_log"), style="bold")
        if email:
            text.append(f"   {translator.t('welcome_back')}, {email}")
        text.append(f"   [{translator.language}] {translator.t('theme')}: {theme}", style="dim")
        self.update(text)


class StatsPanel(Static):
    """Total hours, work days, months, days off and the logged period."""

    def update_display(self, stats: LogStats, translator: Translator):
        t = translator.t
        text = Text()
        text.append(f"{t('total_hours', 'Total Hours')}  ", style="dim")
        text.append(f"{format_number(stats.total_hours)} {t('hours_suffix', 'hrs')}", style="bold blue")
        text.append(f"    {t('work_days', 'Work Days')}  ", style="dim")
        text.append(f"{float(stats.total_days):.1f} {t('days_suffix', 'days')}", style="bold green")
        text.append(f"    {t('months', 'Months')}  ", style="dim")
        text.append(f"{float(stats.total_months):.1f} {t('months_suffix', 'months')}", style="bold magenta")
        text.append(f"    {t('days_off', 'Days Off')}  ", style="dim")
        text.append(
            f"{stats.days_off} {t('days_suffix', 'days')}",
            style="bold red" if stats.days_off else "dim",
        )
        text.append(f"\n{t('date_range', 'Period')}  ", style="dim")
        text.append(format_date_range(stats, translator))
        self.update(text)


class CalendarHeader(Static):
    """Month name with clickable arrows for month navigation."""

    def __init__(self, year: int, month: int, **kwargs):
        super().__init__(**kwargs)
        self.year = year
        self.month = month
        self.left_arrow_pos = 0
        self.right_arrow_pos = 0

    def update_display(self, translator: Translator):
        title = translator.format_month(self.year, self.month)

        # Store positions for click detection
        self.left_arrow_pos = 0
        self.right_arrow_pos = len(title) + 5

        text = Text()
        text.append("◄", style="bold")
        text.append(f"  {title}  ", style="bold")
        text.append("►", style="bold")
        self.update(text)

    def on_click(self, event) -> None:
        """Handle clicks on the arrows for month navigation."""
        click_col = event.x

        if self.left_arrow_pos <= click_col < self.left_arrow_pos + 2:
            self.app.action_prev_month()  # type: ignore[attr-defined]
        elif self.right_arrow_pos <= click_col < self.right_arrow_pos + 2:
            self.app.action_next_month()  # type: ignore[attr-defined]


class EntryListItem(ListItem):
    """One row of the list view."""

    def __init__(self, entry: LogEntry, selected: bool, translator: Translator):
        text = Text()
        text.append("[x] " if selected else "[ ] ", style="bold blue" if selected else "dim")
        text.append(translator.format_long_date(entry.date), style="bold")
        text.append("  ")
        text.append_text(hours_badge(entry, translator))
        if entry.work_link:
            text.append("  🔗", style="blue")
        text.append("\n    ")
        text.append(first_line(entry.description, 90))
        super().__init__(Label(text))
        self.entry_id = entry.id


class EntryCard(Static, can_focus=True):
    """A card in the grid view. Click or Enter opens the entry."""

    class Chosen(Message):
        def __init__(self, entry_id: str):
            super().__init__()
            self.entry_id = entry_id

    BINDINGS = [("enter", "choose", "Open")]

    def __init__(self, entry: LogEntry, selected: bool, translator: Translator, **kwargs):
        text = Text()
        text.append("[x] " if selected else "[ ] ", style="bold blue" if selected else "dim")
        text.append(translator.format_date(entry.date), style="bold")
        text.append("\n")
        text.append_text(hours_badge(entry, translator))
        text.append("\n")
        text.append(first_line(entry.description, 28))
        if entry.work_link:
            text.append(f"\n🔗 {translator.t('view_work')}", style="blue")
        super().__init__(text, **kwargs)
        self.entry_id = entry.id
        self.set_class(selected, "selected")
        self.set_class(entry.is_day_off, "day-off")

    def on_click(self) -> None:
        self.post_message(self.Chosen(self.entry_id))

    def action_choose(self) -> None:
        self.post_message(self.Chosen(self.entry_id))
