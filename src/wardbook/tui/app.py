from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.theme import Theme
from textual.widgets import DataTable, Footer, Header, TabbedContent, TabPane

from wardbook.exceptions import WardbookError
from wardbook.hospital import Hospital
from wardbook.tui.screens import (
    AdmitRequest,
    AdmitScreen,
    BillScreen,
    DischargeScreen,
    DiscountScreen,
    ReportScreen,
)
from wardbook.tui.widgets import (
    PatientTable,
    Summary,
    WardAllocations,
    WardOccupancyTable,
)

wardbook_theme = Theme(
    name="wardbook",
    primary="#7FB8D8",
    secondary="#7FB8D8",
    accent="#9AD1C6",
    foreground="#EAEAEA",
    background="#0B1620",
    success="#A3BE8C",
    warning="#EBCB8B",
    error="#BF616A",
    surface="#0B1620",
    panel="#1D3B53",
    dark=True,
    variables={"scrollbar": "#1D3B53", "scrollbar-background": "#0B1620"},
)


class WardbookApp(App):
    """A Textual console for ward beds, admissions, discharges and billing."""

    TITLE = "Wardbook"
    SUB_TITLE = "Ward Beds, Admissions and Billing"
    CSS_PATH = "app.tcss"

    BINDINGS = [
        Binding("q", "save_and_quit", "Save & Quit"),
        Binding("a", "admit", "Admit"),
        Binding("d", "discharge", "Discharge"),
        Binding("p", "discount", "Discount %"),
        Binding("b", "bill", "Bill"),
        Binding("r", "report", "Report"),
        Binding("f5", "refresh", "Refresh"),
        Binding("1", "show_tab('patients-tab')", "Patients"),
        Binding("2", "show_tab('occupancy-tab')", "Occupancy"),
        Binding("3", "show_tab('allocations-tab')", "Allocations"),
        Binding("j", "cursor_down", "Move Down", show=False),
        Binding("k", "cursor_up", "Move Up", show=False),
    ]

    def __init__(self, hospital: Hospital, *args, **kwargs):
        """Initialize the app around an opened hospital."""
        super().__init__(*args, **kwargs)
        self.hospital = hospital

    def on_mount(self) -> None:
        self.register_theme(wardbook_theme)
        self.theme = "wardbook"
        # Tables add their columns in their own on_mount.
        self.call_after_refresh(self.update_dataset)

    def compose(self) -> ComposeResult:
        yield Header()
        yield Summary(classes="card")
        with TabbedContent(id="main-tabs", classes="card"):
            with TabPane("Patients", id="patients-tab"):
                yield PatientTable(today=self.hospital.registry.today)
            with TabPane("Occupancy", id="occupancy-tab"):
                yield WardOccupancyTable()
            with TabPane("Allocations", id="allocations-tab"):
                yield WardAllocations()
        yield Footer()

    def update_dataset(self) -> None:
        """Push the registry's current state into every widget."""
        registry = self.hospital.registry
        occupancy = registry.ward_occupancy()

        summary = self.query_one(Summary)
        summary.admitted = len(registry.admitted_patients())
        summary.discharged = len(registry.discharged_patients())
        summary.occupied_beds = sum(ward.occupied_beds for ward in occupancy)
        summary.free_beds = sum(ward.available_beds for ward in occupancy)
        summary.discount = self.hospital.billing.discount_percentage

        self.query_one(PatientTable).patients = list(registry.patients)
        self.query_one(WardOccupancyTable).wards = occupancy
        self.query_one(WardAllocations).allocations = registry.ward_allocations()

    def _persist(self) -> None:
        try:
            self.hospital.save()
        except WardbookError as e:
            self.notify(str(e), severity="error")

    def action_show_tab(self, tab: str) -> None:
        """Switch to a tab."""
        self.query_one("#main-tabs", TabbedContent).active = tab

    def action_admit(self) -> None:
        self.push_screen(AdmitScreen(list(self.hospital.registry.wards)), self._admit)

    def _admit(self, request: AdmitRequest | None) -> None:
        if request is None:
            return
        outcome = self.hospital.registry.admit_patient(
            request.patient_id, request.name, request.age, request.ward
        )
        if not outcome.ok:
            self.notify(outcome.message, severity="error")
            return
        self._persist()
        self.notify(f"Patient {request.name} admitted to {request.ward}")
        self.update_dataset()

    def action_discharge(self) -> None:
        selected = self.query_one(PatientTable).get_selected_patient()
        patient_id = selected.id if selected and not selected.is_discharged else ""
        self.push_screen(DischargeScreen(patient_id), self._discharge)

    def _discharge(self, patient_id: str | None) -> None:
        if patient_id is None:
            return
        outcome = self.hospital.registry.discharge_patient(patient_id)
        if not outcome.ok:
            self.notify(outcome.message, severity="error")
            return
        self._persist()
        self.notify(f"Patient {outcome.unwrap().name} discharged")
        self.update_dataset()

    def action_discount(self) -> None:
        self.push_screen(
            DiscountScreen(self.hospital.billing.discount_percentage), self._discount
        )

    def _discount(self, percentage: float | None) -> None:
        if percentage is None:
            return
        self.hospital.billing.apply_discount(percentage)
        self.notify(f"Discount applied: {percentage:g}%")
        self.update_dataset()

    def action_bill(self) -> None:
        patient = self.query_one(PatientTable).get_selected_patient()
        if patient is None:
            self.notify("No patient selected")
            return
        outcome = self.hospital.billing.calculate_bill(
            patient, self.hospital.registry.today()
        )
        if not outcome.ok:
            self.notify(outcome.message, severity="warning")
            return
        self.push_screen(BillScreen(outcome.unwrap()))

    def action_report(self) -> None:
        try:
            path = self.hospital.save_report()
        except WardbookError as e:
            self.notify(str(e), severity="error")
        else:
            self.notify(f"Billing report saved to {path}")
        self.push_screen(ReportScreen(self.hospital.billing_report()))

    def action_refresh(self) -> None:
        """Redraw every widget from the registry."""
        self.update_dataset()

    def action_save_and_quit(self) -> None:
        try:
            self.hospital.save()
        except WardbookError as e:
            self.notify(str(e), severity="error")
            return
        self.exit()

    def action_cursor_down(self) -> None:
        """Move cursor down in the focused table."""
        if isinstance(focused := self.focused, DataTable):
            focused.action_cursor_down()

    def action_cursor_up(self) -> None:
        """Move cursor up in the focused table."""
        if isinstance(focused := self.focused, DataTable):
            focused.action_cursor_up()
