from textual.app import ComposeResult
from textual.reactive import reactive
from textual.widget import Widget
from textual.widgets import Tree

from wardbook.types import Patient


class WardAllocations(Widget):
    BORDER_TITLE = "Ward Allocations"
    BORDER_SUBTITLE = "Patients holding a bed"

    allocations: reactive[dict[str, list[Patient]]] = reactive({}, always_update=True)

    def compose(self) -> ComposeResult:
        yield Tree("Wards")

    def watch_allocations(
        self,
        _old_allocations: dict[str, list[Patient]],
        new_allocations: dict[str, list[Patient]],
    ) -> None:
        tree: Tree[str] = self.query_one(Tree)
        tree.clear()
        tree.root.expand()
        for ward_name, occupants in new_allocations.items():
            node = tree.root.add(f"{ward_name} Ward ({len(occupants)})", expand=True)
            if not occupants:
                node.add_leaf("(No patients)")
            for patient in occupants:
                node.add_leaf(f"{patient.name} (ID: {patient.id})", data=patient.id)
