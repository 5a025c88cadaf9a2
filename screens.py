"""Modal screens for the internship log application."""

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import date

from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, Vertical
from textual.widgets import Button, Input, Label, Select, Static, TextArea
from textual.screen import ModalScreen
from rich.text import Text

from errors import ValidationError, WriteError
from i18n import Translator
from models import LogDraft, LogEntry
from utils import HOURS_OPTIONS, hours_choice, parse_date_input, parse_hours_input
from view_state import is_delete_confirmed
from widgets import hours_badge

logger = logging.getLogger(__name__)


class LoginScreen(ModalScreen[str | None]):
    """Asks for the e-mail address to sign in with."""

    CSS = """
    LoginScreen {
        align: center middle;
    }

    #login-dialog {
        width: 50;
        height: auto;
        padding: 1 2;
        background: $surface;
        border: thick $primary;
    }

    #login-title {
        width: 100%;
        text-align: center;
        text-style: bold;
        margin-bottom: 1;
    }

    #login-buttons {
        width: 100%;
        height: auto;
        margin-top: 1;
        align: center middle;
    }
    """

    BINDINGS = [
        Binding("escape", "cancel", "Quit"),
    ]

    def __init__(self, translator: Translator):
        super().__init__()
        self.translator = translator

    def compose(self) -> ComposeResult:
        t = self.translator.t
        with Vertical(id="login-dialog"):
            yield Label(t("internship_log"), id="login-title")
            yield Label(t("email"), classes="field-label")
            yield Input(placeholder="you@example.com", id="email")
            with Horizontal(id="login-buttons"):
                yield Button(t("sign_in"), variant="primary", id="sign-in")

    def on_mount(self) -> None:
        self.query_one("#email", Input).focus()

    def on_input_submitted(self, event: Input.Submitted) -> None:
        self._submit()

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == "sign-in":
            self._submit()

    def _submit(self) -> None:
        email = self.query_one("#email", Input).value.strip()
        if not email:
            self.app.notify(self.translator.t("email_required"), severity="error")
            return
        self.dismiss(email)

    def action_cancel(self) -> None:
        self.dismiss(None)


class EntryDetailsScreen(ModalScreen[str | None]):
    """Read-only view of one entry. Dismisses with "edit" to switch to the edit form."""

    CSS = """
    EntryDetailsScreen {
        align: center middle;
    }

    #details-dialog {
        width: 72;
        height: auto;
        max-height: 90%;
        padding: 1 2;
        background: $surface;
        border: thick $primary;
    }

    #details-title {
        width: 100%;
        text-align: center;
        text-style: bold;
        margin-bottom: 1;
    }

    #details-description {
        height: auto;
        margin: 1 0;
    }

    #details-buttons {
        width: 100%;
        height: auto;
        margin-top: 1;
        align: center middle;
    }

    #details-buttons Button {
        width: auto;
        min-width: 12;
        margin: 0 2;
    }
    """

    BINDINGS = [
        Binding("escape", "close", "Close"),
        Binding("e", "edit", "Edit"),
        Binding("o", "open_link", "Open link"),
    ]

    def __init__(self, entry: LogEntry, translator: Translator):
        super().__init__()
        self.entry = entry
        self.translator = translator

    def compose(self) -> ComposeResult:
        t = self.translator.t
        status = Text()
        status.append(f"{t('status')}: ", style="dim")
        status.append(t("status_holiday") if self.entry.is_day_off else t("status_work"))
        status.append("    ")
        status.append(f"{t('hours')}: ", style="dim")
        status.append_text(hours_badge(self.entry, self.translator))

        with Vertical(id="details-dialog"):
            yield Label(t("log_details"), id="details-title")
            yield Label(Text(self.translator.format_long_date(self.entry.date), style="bold"))
            yield Label(status)
            yield Label(t("work_description"), classes="field-label")
            yield Static(self.entry.description, id="details-description", markup=False)
            if self.entry.work_link:
                yield Label(Text(self.entry.work_link, style="underline blue"), id="details-link")
            with Horizontal(id="details-buttons"):
                yield Button(t("edit"), variant="primary", id="edit")
                if self.entry.work_link:
                    yield Button(t("view_work"), variant="default", id="open-link")
                yield Button(t("close"), variant="default", id="close")

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == "edit":
            self.dismiss("edit")
        elif event.button.id == "open-link":
            self.action_open_link()
        elif event.button.id == "close":
            self.dismiss(None)

    def action_edit(self) -> None:
        self.dismiss("edit")

    def action_close(self) -> None:
        self.dismiss(None)

    def action_open_link(self) -> None:
        if self.entry.work_link:
            self.app.open_url(self.entry.work_link)


class EntryFormScreen(ModalScreen[bool]):
    """Add or edit form. Saving goes through `save`; on failure the form stays open."""

    CSS = """
    EntryFormScreen {
        align: center middle;
    }

    #form-dialog {
        width: 72;
        height: auto;
        max-height: 95%;
        padding: 1 2;
        background: $surface;
        border: thick $primary;
    }

    #form-title {
        width: 100%;
        text-align: center;
        text-style: bold;
        margin-bottom: 1;
    }

    .field-group {
        width: 1fr;
        height: auto;
        margin: 0 1 0 0;
    }

    .field-label {
        height: 1;
        margin-bottom: 0;
        color: $text-muted;
    }

    .field-row {
        width: 100%;
        height: auto;
        margin-bottom: 1;
    }

    #description {
        height: 8;
        margin-bottom: 1;
    }

    .hidden {
        display: none;
    }

    #form-buttons {
        width: 100%;
        height: auto;
        margin-top: 1;
        align: center middle;
    }

    #form-buttons Button {
        width: auto;
        min-width: 12;
        margin: 0 2;
    }
    """

    BINDINGS = [
        Binding("escape", "cancel", "Cancel"),
        Binding("ctrl+s", "save", "Save"),
    ]

    def __init__(
        self,
        translator: Translator,
        save: Callable[[LogDraft], object],
        entry: LogEntry | None = None,
        initial_date: date | None = None,
    ):
        super().__init__()
        self.translator = translator
        self.save = save
        self.entry = entry  # None means adding
        self.initial_date = initial_date or date.today()

    @property
    def is_edit(self) -> bool:
        return self.entry is not None

    def compose(self) -> ComposeResult:
        t = self.translator.t
        if self.entry is not None:
            draft = self.entry.to_draft()
        else:
            draft = LogDraft(date=self.initial_date, description="")
        choice, custom = hours_choice(draft.hours)

        with Vertical(id="form-dialog"):
            yield Label(t("edit_entry") if self.is_edit else t("new_entry"), id="form-title")

            with Horizontal(classes="field-row"):
                with Vertical(classes="field-group"):
                    yield Label(f"{t('date')} (YYYY-MM-DD)", classes="field-label")
                    yield Input(value=draft.date.isoformat(), placeholder="2024-01-10", id="date")
                with Vertical(classes="field-group"):
                    yield Label(t("hours"), classes="field-label")
                    yield Select(
                        [(t(key), value) for value, key in HOURS_OPTIONS],
                        value=choice,
                        allow_blank=False,
                        id="hours",
                    )
                with Vertical(classes="field-group hidden" if choice != "custom" else "field-group", id="custom-group"):
                    yield Label(t("custom_hours"), classes="field-label")
                    yield Input(value=custom, placeholder="6.5", id="custom-hours")

            yield Label(t("description"), classes="field-label")
            yield TextArea(draft.description, id="description")

            yield Label(t("work_link"), classes="field-label")
            yield Input(value=draft.work_link or "", placeholder="https://", id="work-link")

            with Horizontal(id="form-buttons"):
                yield Button(t("save_changes") if self.is_edit else t("save_entry"), variant="primary", id="save")
                yield Button(t("cancel"), variant="default", id="cancel")

    def on_mount(self) -> None:
        self.query_one("#description", TextArea).focus()

    def on_select_changed(self, event: Select.Changed) -> None:
        """Show the custom hours field only for the custom choice."""
        if event.select.id == "hours":
            group = self.query_one("#custom-group")
            group.set_class(event.value != "custom", "hidden")
            if event.value == "custom":
                self.query_one("#custom-hours", Input).focus()

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == "cancel":
            self.dismiss(False)
        elif event.button.id == "save":
            self._save_entry()

    def action_cancel(self) -> None:
        self.dismiss(False)

    def action_save(self) -> None:
        self._save_entry()

    def read_draft(self) -> LogDraft:
        """Collect and check the form fields."""
        t = self.translator.t
        try:
            entry_date = parse_date_input(self.query_one("#date", Input).value)
        except ValidationError as exc:
            raise ValidationError(t("invalid_date")) from exc

        choice = self.query_one("#hours", Select).value
        try:
            hours = parse_hours_input(str(choice), self.query_one("#custom-hours", Input).value)
        except ValidationError as exc:
            raise ValidationError(t("invalid_hours")) from exc

        link = self.query_one("#work-link", Input).value.strip() or None
        draft = LogDraft(
            date=entry_date,
            description=self.query_one("#description", TextArea).text.strip(),
            hours=hours,
            work_link=link,
        )
        try:
            draft.validate()
        except ValidationError as exc:
            raise ValidationError(t("description_required")) from exc
        return draft

    def _save_entry(self) -> None:
        try:
            draft = self.read_draft()
        except ValidationError as exc:
            self.app.notify(str(exc), severity="error")
            return

        try:
            self.save(draft)
        except WriteError as exc:
            logger.warning("Save failed: %s", exc)
            self.app.notify(self.translator.t("save_failed"), severity="error")
            return
        self.dismiss(True)


class ConfirmDeleteScreen(ModalScreen[bool]):
    """Delete confirmation that unlocks only after typing the locale keyword."""

    CSS = """
    ConfirmDeleteScreen {
        align: center middle;
    }

    #confirm-dialog {
        width: 60;
        height: auto;
        padding: 1 2;
        background: $surface;
        border: thick $error;
    }

    #confirm-title {
        width: 100%;
        text-style: bold;
        color: $error;
        margin-bottom: 1;
    }

    #confirm-buttons {
        width: 100%;
        height: auto;
        margin-top: 1;
    }

    #confirm-buttons Button {
        width: 1fr;
        margin: 0 1;
    }
    """

    BINDINGS = [
        Binding("escape", "cancel", "Cancel"),
    ]

    def __init__(self, count: int, translator: Translator, on_confirm: Callable[[], object]):
        super().__init__()
        self.count = count
        self.translator = translator
        self.on_confirm = on_confirm
        self.keyword = translator.t("confirm_keyword")

    def compose(self) -> ComposeResult:
        t = self.translator.t
        with Vertical(id="confirm-dialog"):
            yield Label(t("confirm_delete_title"), id="confirm-title")
            yield Label(t("confirm_delete_msg"))
            yield Label(Text(f"({self.count} {t('selected')})", style="dim"))
            yield Label(t("type_confirm"), classes="field-label")
            yield Input(placeholder=self.keyword, id="confirm-text")
            with Horizontal(id="confirm-buttons"):
                yield Button(t("cancel"), variant="default", id="cancel")
                yield Button(t("delete"), variant="error", id="delete", disabled=True)

    def on_mount(self) -> None:
        self.query_one("#confirm-text", Input).focus()

    def is_confirmed(self, typed: str) -> bool:
        return is_delete_confirmed(typed, self.keyword)

    def on_input_changed(self, event: Input.Changed) -> None:
        self.query_one("#delete", Button).disabled = not self.is_confirmed(event.value)

    def on_input_submitted(self, event: Input.Submitted) -> None:
        if self.is_confirmed(event.value):
            self._confirm()

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == "cancel":
            self.dismiss(False)
        elif event.button.id == "delete":
            self._confirm()

    def action_cancel(self) -> None:
        self.dismiss(False)

    def _confirm(self) -> None:
        try:
            self.on_confirm()
        except WriteError as exc:
            logger.warning("Delete failed: %s", exc)
            self.app.notify(self.translator.t("delete_failed"), severity="error")
            return
        self.dismiss(True)
