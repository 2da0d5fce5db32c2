from __future__ import annotations

from textual import on
from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, Vertical
from textual.screen import ModalScreen
from textual.widgets import Button, Input, Label, Select

from wardbook.types import Model


class AdmitRequest(Model):
    patient_id: str
    name: str
    age: int
    ward: str


class AdmitScreen(ModalScreen[AdmitRequest | None]):
    """A dialog collecting the details of a new admission."""

    BINDINGS = [Binding("escape", "cancel", "Cancel")]

    def __init__(self, ward_names: list[str]):
        super().__init__()
        self.ward_names = ward_names

    def compose(self) -> ComposeResult:
        with Vertical(classes="dialog"):
            yield Label("Admit Patient", classes="dialog-title")
            yield Input(placeholder="Patient ID (e.g. P001)", id="patient-id")
            yield Input(placeholder="Name", id="patient-name")
            yield Input(placeholder="Age", id="patient-age")
            yield Select(
                [(name, name) for name in self.ward_names],
                value=self.ward_names[0],
                allow_blank=False,
                id="patient-ward",
            )
            with Horizontal(classes="dialog-buttons"):
                yield Button("Admit", variant="primary", id="submit")
                yield Button("Cancel", id="cancel")

    @on(Input.Submitted)
    @on(Button.Pressed, "#submit")
    def submit(self) -> None:
        age_text = self.query_one("#patient-age", Input).value.strip()
        try:
            age = int(age_text)
        except ValueError:
            self.notify(
                f"Age must be a whole number, got '{age_text}'", severity="error"
            )
            return
        self.dismiss(
            AdmitRequest(
                patient_id=self.query_one("#patient-id", Input).value,
                name=self.query_one("#patient-name", Input).value,
                age=age,
                ward=str(self.query_one("#patient-ward", Select).value),
            )
        )

    @on(Button.Pressed, "#cancel")
    def action_cancel(self) -> None:
        self.dismiss(None)
