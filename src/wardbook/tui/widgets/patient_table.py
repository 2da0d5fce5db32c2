from collections.abc import Callable
from datetime import date

from textual.app import ComposeResult
from textual.reactive import reactive
from textual.widget import Widget
from textual.widgets import DataTable

from wardbook.types import Patient


class PatientTable(Widget):
    BORDER_TITLE = "Patients"

    # Patients are mutated in place on discharge, so equal lists must still redraw.
    patients: reactive[list[Patient]] = reactive([], always_update=True)

    HEADERS = ["Id", "Name", "Age", "Ward", "Admitted", "Discharged", "Status", "Days"]

    def __init__(self, *, today: Callable[[], date] = date.today, **kwargs):
        super().__init__(**kwargs)
        self._today = today

    def compose(self) -> ComposeResult:
        yield DataTable()

    def on_mount(self) -> None:
        table = self.query_one(DataTable)
        table.add_columns(*self.HEADERS)
        table.cursor_type = "row"
        table.zebra_stripes = True
        table.can_focus = True

    def watch_patients(
        self, _old_patients: list[Patient], new_patients: list[Patient]
    ) -> None:
        table = self.query_one(DataTable)
        table.clear()
        today = self._today()
        for patient in new_patients:
            table.add_row(
                patient.id,
                patient.name,
                patient.age,
                patient.ward,
                patient.admit_date.isoformat(),
                patient.discharge_date.isoformat() if patient.discharge_date else "-",
                patient.status.value,
                patient.days_admitted(today),
            )

    def get_selected_patient(self) -> Patient | None:
        """Get the currently selected patient from the table."""
        table = self.query_one(DataTable)
        cursor_row = table.cursor_row
        if cursor_row is not None and 0 <= cursor_row < len(self.patients):
            return self.patients[cursor_row]
        return None
