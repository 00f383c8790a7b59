"""
IFTA (International Fuel Tax Agreement) report records.
"""

from decimal import Decimal
from typing import Optional

from pydantic import Field

from balancebooks.data.models.base import RecordModel
from balancebooks.data.models.parsing import ZERO, LenientDecimal


class IftaEntry(RecordModel):
    """Miles driven and fuel bought in one jurisdiction."""

    quarter: Optional[str] = None
    state: str = "Unknown"
    miles: LenientDecimal = ZERO
    gallons: LenientDecimal = ZERO
    tax_rate: LenientDecimal = Field(ZERO, description="Fuel tax per gallon (USD)")


class IftaStateLine(RecordModel):
    """Tax computation for one jurisdiction."""

    state: str
    miles: Decimal = ZERO
    gallons: Decimal = ZERO
    tax_rate: Decimal = ZERO
    taxable_gallons: Decimal = ZERO
    net_taxable_gallons: Decimal = ZERO
    tax_owed: Decimal = ZERO  # Negative means a credit


class IftaSummary(RecordModel):
    """Quarter totals."""

    total_miles: Decimal = ZERO
    total_gallons: Decimal = ZERO
    overall_mpg: Decimal = Field(ZERO, alias="overallMPG")
    total_tax_owed: Decimal = ZERO


class IftaReport(RecordModel):
    """IFTA quarterly report."""

    quarter: str
    year: int
    states: list[IftaStateLine] = Field(default_factory=list)
    summary: IftaSummary = Field(default_factory=IftaSummary)
