"""Re-export individual schema modules for easy imports."""

from .advice import AdviceRequest, AdviceResponse, ErrorResponse
from .record import RecordCreate, RecordUpdate, BulkDeleteIn, BulkDeleteOut
from .profile import ProfileIn, ProfileOut, EnergyEstimate
from .analytics import CalendarMonth, PeriodSummary, RiskSummary, WeeklyReport

__all__ = [
    "AdviceRequest",
    "AdviceResponse",
    "ErrorResponse",
    "RecordCreate",
    "RecordUpdate",
    "BulkDeleteIn",
    "BulkDeleteOut",
    "ProfileIn",
    "ProfileOut",
    "EnergyEstimate",
    "CalendarMonth",
    "PeriodSummary",
    "RiskSummary",
    "WeeklyReport",
]
