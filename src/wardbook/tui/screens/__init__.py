from .admit import AdmitRequest, AdmitScreen
from .bill import BillScreen
from .discharge import DischargeScreen
from .discount import DiscountScreen
from .report import ReportScreen

__all__ = [
    "AdmitRequest",
    "AdmitScreen",
    "BillScreen",
    "DischargeScreen",
    "DiscountScreen",
    "ReportScreen",
]
