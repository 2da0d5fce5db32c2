from __future__ import annotations

from textual import on
from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, Vertical
from textual.screen import ModalScreen
from textual.widgets import Button, Input, Label


class DiscountScreen(ModalScreen[float | None]):
    """A dialog for the discount applied to every bill."""

    BINDINGS = [Binding("escape", "cancel", "Cancel")]

    def __init__(self, current: float = 0.0):
        super().__init__()
        self.current = current

    def compose(self) -> ComposeResult:
        with Vertical(classes="dialog"):
            yield Label("Apply Discount (0-100%)", classes="dialog-title")
            yield Input(value=f"{self.current:g}", id="discount-percentage")
            with Horizontal(classes="dialog-buttons"):
                yield Button("Apply", variant="primary", id="submit")
                yield Button("Cancel", id="cancel")

    @on(Input.Submitted)
    @on(Button.Pressed, "#submit")
    def submit(self) -> None:
        text = self.query_one("#discount-percentage", Input).value.strip()
        percentage: float | None
        try:
            percentage = float(text)
        except ValueError:
            percentage = None
        if percentage is None or not 0 <= percentage <= 100:
            self.notify(
                f"Discount must be between 0 and 100, got '{text}'", severity="error"
            )
            return
        self.dismiss(percentage)

    @on(Button.Pressed, "#cancel")
    def action_cancel(self) -> None:
        self.dismiss(None)
