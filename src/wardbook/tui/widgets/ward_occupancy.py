from textual.app import ComposeResult
from textual.reactive import reactive
from textual.widget import Widget
from textual.widgets import DataTable

from wardbook.types import WardOccupancy


class WardOccupancyTable(Widget):
    BORDER_TITLE = "Ward Occupancy"

    wards: reactive[list[WardOccupancy]] = reactive([], always_update=True)

    HEADERS = ["Ward", "Beds", "Occupied", "Available", "Occupancy"]

    def compose(self) -> ComposeResult:
        yield DataTable()

    def on_mount(self) -> None:
        table = self.query_one(DataTable)
        table.add_columns(*self.HEADERS)
        table.cursor_type = "row"
        table.zebra_stripes = True

    def watch_wards(
        self, _old_wards: list[WardOccupancy], new_wards: list[WardOccupancy]
    ) -> None:
        table = self.query_one(DataTable)
        table.clear()
        for ward in new_wards:
            table.add_row(
                ward.name,
                ward.total_beds,
                ward.occupied_beds,
                ward.available_beds,
                f"{ward.occupancy_percentage:.1f}%",
            )
