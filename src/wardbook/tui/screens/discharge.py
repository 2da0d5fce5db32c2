from __future__ import annotations

from textual import on
from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, Vertical
from textual.screen import ModalScreen
from textual.widgets import Button, Input, Label


class DischargeScreen(ModalScreen[str | None]):
    """A dialog asking which patient to discharge."""

    BINDINGS = [Binding("escape", "cancel", "Cancel")]

    def __init__(self, patient_id: str = ""):
        super().__init__()
        self.patient_id = patient_id

    def compose(self) -> ComposeResult:
        with Vertical(classes="dialog"):
            yield Label("Discharge Patient", classes="dialog-title")
            yield Input(
                value=self.patient_id, placeholder="Patient ID", id="discharge-id"
            )
            with Horizontal(classes="dialog-buttons"):
                yield Button("Discharge", variant="warning", id="submit")
                yield Button("Cancel", id="cancel")

    @on(Input.Submitted)
    @on(Button.Pressed, "#submit")
    def submit(self) -> None:
        patient_id = self.query_one("#discharge-id", Input).value.strip()
        if not patient_id:
            self.notify("Enter a patient ID", severity="error")
            return
        self.dismiss(patient_id)

    @on(Button.Pressed, "#cancel")
    def action_cancel(self) -> None:
        self.dismiss(None)
