"""
Pydantic data models for trucking bookkeeping.

Core models:
- Load: Freight job with stops, miles and revenue
- FuelEntry: Fuel purchase
- Driver / Truck: Profiles and contract terms
- PayStatement: Generated driver pay statement
- DriverStats / TruckStats: Performance statistics
- IftaReport: Quarterly fuel tax report
"""

from .base import RecordModel
from .driver import Driver, PayType, Truck
from .fuel import FuelEntry
from .ifta import IftaEntry, IftaReport, IftaStateLine, IftaSummary
from .load import Load, Stop
from .parsing import parse_number, parse_text
from .statement import (
    Deduction,
    DeductionType,
    DriverStats,
    FuelSummary,
    LoadPayDetail,
    PayStatement,
    StatementStatus,
    TruckStats,
)

__all__ = [
    "RecordModel",
    "parse_number",
    "parse_text",
    "Load",
    "Stop",
    "FuelEntry",
    "Driver",
    "Truck",
    "PayType",
    "Deduction",
    "DeductionType",
    "LoadPayDetail",
    "FuelSummary",
    "PayStatement",
    "StatementStatus",
    "DriverStats",
    "TruckStats",
    "IftaEntry",
    "IftaStateLine",
    "IftaSummary",
    "IftaReport",
]
