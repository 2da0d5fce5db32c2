from .patient_table import PatientTable
from .summary import Summary
from .ward_allocations import WardAllocations
from .ward_occupancy import WardOccupancyTable

__all__ = [
    "PatientTable",
    "Summary",
    "WardAllocations",
    "WardOccupancyTable",
]
