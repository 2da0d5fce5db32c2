from __future__ import annotations

from textual import on
from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Vertical
from textual.screen import ModalScreen
from textual.widgets import Button, Label, Markdown

from wardbook.types import Bill


def bill_markdown(bill: Bill) -> str:
    return "\n".join(
        [
            f"**{bill.patient_name}** (ID: {bill.patient_id})",
            "",
            "| | |",
            "|---|---:|",
            f"| Ward | {bill.ward} |",
            f"| Daily rate | {bill.daily_rate:,.2f} |",
            f"| Days admitted | {bill.days_admitted} |",
            f"| Total bill | {bill.total_bill:,.2f} |",
            f"| Discount ({bill.discount_percentage:g}%) | -{bill.discount:,.2f} |",
            f"| **Final bill** | **{bill.final_bill:,.2f}** |",
        ]
    )


class BillScreen(ModalScreen[None]):
    """The billing statement of one discharged patient."""

    BINDINGS = [Binding("escape", "close", "Close")]

    def __init__(self, bill: Bill):
        super().__init__()
        self.bill = bill

    def compose(self) -> ComposeResult:
        with Vertical(classes="dialog"):
            yield Label("Billing Statement", classes="dialog-title")
            yield Markdown(bill_markdown(self.bill))
            yield Button("Close", id="close")

    @on(Button.Pressed, "#close")
    def action_close(self) -> None:
        self.dismiss(None)
