from textual.app import ComposeResult
from textual.containers import Container, Horizontal
from textual.reactive import reactive
from textual.widget import Widget
from textual.widgets import Digits, Static


class Summary(Widget):
    BORDER_TITLE = "Summary"

    admitted = reactive(0, recompose=True)
    discharged = reactive(0, recompose=True)

    occupied_beds = reactive(0, recompose=True)
    free_beds = reactive(0, recompose=True)

    discount = reactive(0.0, recompose=True)

    def compose(self) -> ComposeResult:
        with Horizontal(classes="summary-section"):
            yield Static("[bold]Patients[/bold]", classes="section-label")
            with Container(classes="stat"):
                yield Static("Admitted", classes="stat-label")
                yield Digits(str(self.admitted), classes="stat-admitted")
            with Container(classes="stat"):
                yield Static("Discharged", classes="stat-label")
                yield Digits(str(self.discharged), classes="stat-discharged")
        with Horizontal(classes="summary-section"):
            yield Static("[bold]Beds[/bold]", classes="section-label")
            with Container(classes="stat"):
                yield Static("Occupied", classes="stat-label")
                yield Digits(str(self.occupied_beds), classes="stat-occupied")
            with Container(classes="stat"):
                yield Static("Free", classes="stat-label")
                yield Digits(str(self.free_beds), classes="stat-free")
        with Horizontal(classes="summary-section"):
            yield Static("[bold]Billing[/bold]", classes="section-label")
            with Container(classes="stat"):
                yield Static("Discount %", classes="stat-label")
                yield Digits(f"{self.discount:g}", classes="stat-discount")
