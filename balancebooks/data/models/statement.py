"""
Pay statement and statistics records produced by the pay engine.
"""

from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import Annotated, Any, Optional

from pydantic import BeforeValidator, Field

from balancebooks.data.models.base import RecordModel
from balancebooks.data.models.driver import PayType
from balancebooks.data.models.parsing import ZERO, LenientDecimal


class DeductionType(str, Enum):
    """Kinds of deductions taken from driver pay."""

    FUEL_ADVANCE = "fuel_advance"
    CASH_ADVANCE = "cash_advance"
    INSURANCE = "insurance"
    ESCROW = "escrow"
    ELD = "eld"
    PARKING = "parking"
    OTHER = "other"


def parse_deduction_type(value: Any) -> DeductionType:
    """Map a stored deduction type to DeductionType, OTHER when missing or unknown."""
    if isinstance(value, DeductionType):
        return value
    try:
        return DeductionType(value)
    except ValueError:
        return DeductionType.OTHER


class StatementStatus(str, Enum):
    """Pay statement lifecycle."""

    DRAFT = "draft"
    APPROVED = "approved"
    PAID = "paid"


class Deduction(RecordModel):
    """A single deduction line on a pay statement."""

    type: Annotated[DeductionType, BeforeValidator(parse_deduction_type)] = DeductionType.OTHER
    description: Optional[str] = None
    amount: LenientDecimal = ZERO


class LoadPayDetail(RecordModel):
    """Per-load earnings breakdown."""

    load_id: Optional[str] = None
    load_number: str = "N/A"
    date: Optional[str] = None
    origin: str = "Unknown"
    destination: str = "Unknown"
    loaded_miles: Decimal = ZERO
    deadhead_miles: Decimal = ZERO
    total_miles: Decimal = ZERO
    gross_pay: Decimal = ZERO
    driver_pay: Decimal = ZERO


class FuelSummary(RecordModel):
    """Fuel purchased during the pay period."""

    transactions: int = 0
    gallons: Decimal = ZERO
    amount: Decimal = ZERO


class PayStatement(RecordModel):
    """
    Driver pay statement for a period.

    Generated once by the pay engine. Afterwards only status, paid_at and
    notes are expected to change.
    """

    id: str
    driver_id: Optional[str] = None
    driver_name: str = ""
    period_start: str
    period_end: str
    status: StatementStatus = StatementStatus.DRAFT
    payment_type: Optional[PayType] = None
    pay_rate: Decimal = ZERO

    # Earnings
    loads: list[LoadPayDetail] = Field(default_factory=list)
    load_count: int = 0
    total_miles: Decimal = ZERO
    total_gross_pay: Decimal = ZERO
    total_driver_pay: Decimal = ZERO

    # Deductions
    deductions: list[Deduction] = Field(default_factory=list)
    total_deductions: Decimal = ZERO

    # Net
    net_pay: Decimal = ZERO

    fuel_summary: FuelSummary = Field(default_factory=FuelSummary)

    # Metadata
    created_at: datetime
    updated_at: datetime
    paid_at: Optional[datetime] = None
    notes: str = ""


class DriverStats(RecordModel):
    """Performance statistics for one driver."""

    total_loads: int = 0
    total_miles: Decimal = ZERO
    total_revenue: Decimal = ZERO
    total_fuel_gallons: Decimal = ZERO
    total_fuel_cost: Decimal = ZERO
    avg_mpg: Decimal = Field(ZERO, alias="avgMPG")
    revenue_per_mile: Decimal = ZERO
    fuel_cost_per_mile: Decimal = ZERO


class TruckStats(RecordModel):
    """Performance statistics for one truck."""

    total_loads: int = 0
    total_miles: Decimal = ZERO
    total_revenue: Decimal = ZERO
    total_fuel_gallons: Decimal = ZERO
    total_fuel_cost: Decimal = ZERO
    actual_mpg: Decimal = Field(ZERO, alias="actualMPG")
    target_mpg: Decimal = Field(ZERO, alias="targetMPG")
    mpg_variance: Decimal = ZERO
    cost_per_mile: Decimal = ZERO
