from __future__ import annotations

from textual.app import ComposeResult
from textual.binding import Binding
from textual.screen import Screen
from textual.widgets import DataTable, Footer, Header, Static

from wardbook.types import BillingReport


class ReportScreen(Screen):
    """A screen listing the bills of every discharged patient."""

    BINDINGS = [
        Binding("escape", "app.pop_screen", "Back to Dashboard"),
    ]

    HEADERS = ["Id", "Name", "Ward", "Days", "Rate", "Total", "Discount", "Final"]

    def __init__(self, report: BillingReport):
        super().__init__()
        self.report = report

    def compose(self) -> ComposeResult:
        yield Header()
        yield DataTable(id="report-table", classes="card")
        yield Static(
            f"[bold]Grand total:[/bold] {self.report.grand_total:,.2f} "
            f"(discount {self.report.discount_percentage:g}%)",
            id="report-total",
        )
        yield Footer()

    def on_mount(self) -> None:
        self.sub_title = "Billing Report"
        table = self.query_one("#report-table", DataTable)
        table.add_columns(*self.HEADERS)
        table.cursor_type = "row"
        table.zebra_stripes = True
        for bill in self.report.bills:
            table.add_row(
                bill.patient_id,
                bill.patient_name,
                bill.ward,
                bill.days_admitted,
                f"{bill.daily_rate:,.2f}",
                f"{bill.total_bill:,.2f}",
                f"{bill.discount:,.2f}",
                f"{bill.final_bill:,.2f}",
            )
